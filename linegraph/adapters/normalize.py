from __future__ import annotations

import logging
from collections.abc import Sequence
from decimal import Decimal
from typing import Any

import numpy as np

from linegraph.errors import GraphDataError
from linegraph.series import GraphSeries, GraphValue, split_values


LOGGER = logging.getLogger(__name__)

try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


def normalize_values(
    values: Any = None,
    *,
    labels: Sequence[str | None] | None = None,
    data: Any = None,
) -> GraphSeries:
    raw = _resolve_input(values, data=data)
    if raw is None:
        return GraphSeries(values=np.zeros(0, dtype=np.float64), labels=())

    if _is_graph_value_sequence(raw):
        arr, value_labels = split_values(raw)
        if labels is None:
            labels = value_labels
    else:
        arr = _coerce_1d_numeric(raw)

    if labels is None:
        label_tuple: tuple[str | None, ...] = (None,) * arr.size
    else:
        label_tuple = tuple(None if text is None else str(text) for text in labels)
    if len(label_tuple) != arr.size:
        raise GraphDataError(f"labels and values length mismatch: {len(label_tuple)} != {arr.size}")

    mask = np.isfinite(arr)
    if not np.all(mask):
        LOGGER.debug("dropping %d non-finite values", int(arr.size - np.count_nonzero(mask)))
        arr = arr[mask]
        label_tuple = tuple(text for text, keep in zip(label_tuple, mask.tolist()) if keep)

    return GraphSeries(values=arr, labels=label_tuple)


def _resolve_input(values: Any, data: Any) -> Any:
    if data is not None:
        if pd is None:
            raise GraphDataError("pandas is required when using `data=`")
        if not isinstance(data, pd.DataFrame):
            raise GraphDataError("`data` must be a pandas DataFrame")
        if isinstance(values, str):
            if values not in data.columns:
                raise GraphDataError(f"column not found: {values}")
            return data[values]
        if values is None:
            return _single_numeric_column(data)
        return values

    if pd is not None and isinstance(values, pd.DataFrame):
        return _single_numeric_column(values)
    return values


def _single_numeric_column(frame: Any) -> Any:
    numeric_cols = [c for c in frame.columns if _is_numeric_dtype(frame[c])]
    if len(numeric_cols) != 1:
        raise GraphDataError("DataFrame input must contain exactly one numeric column")
    return frame[numeric_cols[0]]


def _is_numeric_dtype(series: Any) -> bool:
    if pd is None:
        return False
    try:
        return bool(pd.api.types.is_numeric_dtype(series))
    except Exception:
        return False


def _is_graph_value_sequence(value: Any) -> bool:
    if not isinstance(value, Sequence) or isinstance(value, (str, bytes, bytearray)):
        return False
    return len(value) > 0 and all(isinstance(item, GraphValue) for item in value)


def _coerce_1d_numeric(value: Any) -> np.ndarray:
    if torch is not None and isinstance(value, torch.Tensor):
        tensor = value.detach()
        if tensor.ndim != 1:
            raise GraphDataError("values must be 1-D")
        if tensor.is_cuda:
            tensor = tensor.cpu()
        return tensor.to(torch.float64).numpy()

    if pd is not None and isinstance(value, pd.Series):
        return _coerce_ndarray(value.to_numpy())

    if isinstance(value, np.ndarray):
        if value.ndim != 1:
            raise GraphDataError("values must be 1-D")
        return _coerce_ndarray(value)

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return _coerce_ndarray(np.asarray(list(value), dtype=object))

    raise GraphDataError(f"unsupported values input type: {type(value)!r}")


def _coerce_ndarray(arr: np.ndarray) -> np.ndarray:
    if arr.dtype.kind in {"i", "u", "f", "b"}:
        return arr.astype(np.float64, copy=False)

    out = np.empty(arr.shape[0], dtype=np.float64)
    for i, raw in enumerate(arr.tolist()):
        if raw is None:
            out[i] = np.nan
            continue
        if isinstance(raw, Decimal):
            out[i] = float(raw)
            continue
        if isinstance(raw, (str, bytes)):
            raise GraphDataError(f"values contain non-numeric entry at index {i}: {raw!r}")
        try:
            out[i] = float(raw)
        except (TypeError, ValueError) as exc:
            raise GraphDataError(f"values contain non-numeric entry at index {i}: {raw!r}") from exc
    return out
