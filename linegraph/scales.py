from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np


MIN_STEP_COUNT = 5
MAX_STEP_COUNT = 10


@dataclass(frozen=True)
class StepInfo:
    step_height_px: float
    step_value: float
    step_count: int
    lower_bound: float
    upper_bound: float

    @property
    def is_empty(self) -> bool:
        return self.step_count == 0

    @property
    def value_span(self) -> float:
        return self.upper_bound - self.lower_bound


EMPTY_STEP_INFO = StepInfo(step_height_px=0.0, step_value=0.0, step_count=0, lower_bound=0.0, upper_bound=0.0)


def compute_step_info(values: Sequence[float] | np.ndarray, plot_height_px: float) -> StepInfo:
    """Pick integer gridline increments for ``values`` inside ``plot_height_px``.

    Bounds are padded to whole numbers at least half a unit beyond the data,
    the gridline count is clamped to ``[MIN_STEP_COUNT, MAX_STEP_COUNT]`` and
    ``upper_bound`` is always ``lower_bound + step_value * step_count``.
    Empty (or all non-finite) input yields ``EMPTY_STEP_INFO``.
    """
    arr = np.asarray(values, dtype=np.float64).reshape(-1)
    finite = arr[np.isfinite(arr)]
    if finite.size == 0:
        return EMPTY_STEP_INFO

    vmin = float(np.min(finite))
    vmax = float(np.max(finite))

    plot_height = max(0.0, float(plot_height_px))
    lower = float(math.floor(vmin - 0.5))
    upper_candidate = float(math.floor(vmax + 1.5))
    span = upper_candidate - lower
    if not math.isfinite(span) or span <= 0 or not math.isfinite(vmax - vmin):
        # Padding is lost to float64 overflow or resolution; nothing sensible to grid.
        return EMPTY_STEP_INFO

    # Goes through the pixel step so float truncation matches the rendered grid.
    step_height = plot_height / span
    if step_height > 0:
        step_count = int(math.floor(plot_height / step_height))
    else:
        step_count = int(span)
    step_value = (vmax - vmin) / step_count if step_count > 0 else 0.0

    if step_value < 1 or step_count < 2:
        step_count = _round_half_up(vmax - vmin) + 2
    step_count = min(MAX_STEP_COUNT, max(MIN_STEP_COUNT, step_count))

    step_value = float(
        max(
            1,
            _round_half_up(span / step_count),
            math.ceil((vmax - lower) / step_count),
        )
    )
    upper = lower + step_value * step_count

    return StepInfo(
        step_height_px=plot_height / step_count,
        step_value=step_value,
        step_count=step_count,
        lower_bound=lower,
        upper_bound=upper,
    )


def format_step_label(value: float) -> str:
    if not math.isfinite(value):
        return str(value)
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.1f}"


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))
