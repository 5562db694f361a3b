from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, TypeVar

import numpy as np


VALUE_MAX_COUNT = 20

T = TypeVar("T")


@dataclass(frozen=True)
class GraphValue:
    value: float
    label: str | None = None


@dataclass(frozen=True)
class GraphSeries:
    values: np.ndarray
    labels: tuple[str | None, ...]

    def __len__(self) -> int:
        return int(self.values.size)


def recent_values(values: Sequence[T], max_count: int = VALUE_MAX_COUNT) -> list[T]:
    """Keep the newest ``max_count`` entries, preserving time order."""
    if max_count <= 0:
        return []
    items = list(values)
    return items[-max_count:]


def split_values(values: Sequence[GraphValue]) -> tuple[np.ndarray, tuple[str | None, ...]]:
    numbers = np.asarray([float(v.value) for v in values], dtype=np.float64)
    labels = tuple(v.label for v in values)
    return numbers, labels
