from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from linegraph.geometry import PlotGeometry, Point
from linegraph.mapper import (
    DotMarker,
    GridLine,
    TickLabel,
    TickMark,
    dot_markers,
    fill_outline,
    peak_line_path,
    project,
    tick_marks,
)
from linegraph.scales import StepInfo, compute_step_info


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class GraphLayout:
    """Everything the rendering stage needs for one pass, as plain data."""

    geometry: PlotGeometry
    step_info: StepInfo
    points: tuple[Point, ...]
    grid_lines: tuple[GridLine, ...]
    tick_labels: tuple[TickLabel, ...]
    tick_marks: tuple[TickMark, ...]
    peak_line: tuple[Point, ...]
    fill_outline: tuple[Point, ...]
    dots: tuple[DotMarker, ...]

    @property
    def has_line(self) -> bool:
        return len(self.peak_line) > 0


def build_layout(
    values: Sequence[float] | np.ndarray,
    geometry: PlotGeometry,
    labels: Sequence[str | None] | None = None,
) -> GraphLayout:
    arr = np.asarray(values, dtype=np.float64).reshape(-1)

    info = compute_step_info(arr, geometry.plot_height)
    projection = project(arr, info, geometry, labels=labels)
    points = projection.points

    layout = GraphLayout(
        geometry=geometry,
        step_info=info,
        points=points,
        grid_lines=projection.grid_lines,
        tick_labels=projection.tick_labels,
        tick_marks=tick_marks(arr.size, geometry),
        peak_line=peak_line_path(points, info, geometry),
        fill_outline=fill_outline(points, info, geometry),
        dots=dot_markers(points, geometry),
    )
    LOGGER.debug(
        "graph layout: %d points, %d gridlines, bounds [%s, %s] step %s",
        len(points),
        len(layout.grid_lines),
        info.lower_bound,
        info.upper_bound,
        info.step_value,
    )
    return layout
