from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from linegraph.geometry import PlotGeometry, Point
from linegraph.scales import StepInfo, format_step_label


@dataclass(frozen=True)
class GridLine:
    pixel_y: float
    value: float
    label: str


@dataclass(frozen=True)
class TickLabel:
    index: int
    text: str | None
    x: float
    y: float


@dataclass(frozen=True)
class TickMark:
    start: Point
    end: Point


@dataclass(frozen=True)
class DotMarker:
    center: Point
    radius: float

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        r = self.radius
        return (self.center.x - r, self.center.y - r, 2 * r, 2 * r)


@dataclass(frozen=True)
class Projection:
    points: tuple[Point, ...]
    grid_lines: tuple[GridLine, ...]
    tick_labels: tuple[TickLabel, ...]

    def xs(self) -> np.ndarray:
        return np.asarray([p.x for p in self.points], dtype=np.float64)

    def ys(self) -> np.ndarray:
        return np.asarray([p.y for p in self.points], dtype=np.float64)


def project(
    values: Sequence[float] | np.ndarray,
    info: StepInfo,
    geometry: PlotGeometry,
    labels: Sequence[str | None] | None = None,
) -> Projection:
    arr = np.asarray(values, dtype=np.float64).reshape(-1)
    return Projection(
        points=project_points(arr, info, geometry),
        grid_lines=grid_lines(info, geometry),
        tick_labels=tick_labels(fit_labels(labels, arr.size), geometry),
    )


def project_points(values: Sequence[float] | np.ndarray, info: StepInfo, geometry: PlotGeometry) -> tuple[Point, ...]:
    """Map each value (by index) into frame pixels against the padded bounds."""
    arr = np.asarray(values, dtype=np.float64).reshape(-1)
    if arr.size == 0:
        return ()

    step_x = geometry.step_width(arr.size)
    plot_height = geometry.plot_height
    span = info.value_span

    points: list[Point] = []
    for i, value in enumerate(arr.tolist()):
        if span == 0 or not np.isfinite(value):
            ratio = 0.0
        else:
            ratio = (value - info.lower_bound) / span
        x = geometry.plot_left + step_x * i
        y = plot_height - plot_height * ratio
        points.append(Point(x=x, y=y))
    return tuple(points)


def grid_lines(info: StepInfo, geometry: PlotGeometry) -> tuple[GridLine, ...]:
    if geometry.height <= 0 or info.is_empty:
        return ()

    basis_y = geometry.plot_height
    lines: list[GridLine] = []
    for i in range(info.step_count + 1):
        pixel_y = basis_y - info.step_height_px * i
        if abs(pixel_y) <= 1e-9:
            pixel_y = 0.0
        if pixel_y < 0:
            break
        value = info.lower_bound + info.step_value * i
        lines.append(GridLine(pixel_y=pixel_y, value=value, label=format_step_label(value)))
        if info.step_height_px <= 0:
            # A zero step would stack every line on the baseline.
            break
    return tuple(lines)


def fit_labels(labels: Sequence[str | None] | None, count: int) -> list[str | None]:
    """One label slot per point: extra labels are dropped, missing ones are None."""
    fitted = [] if labels is None else list(labels)[:count]
    return fitted + [None] * (count - len(fitted))


def tick_labels(labels: Sequence[str | None], geometry: PlotGeometry) -> tuple[TickLabel, ...]:
    step_x = geometry.step_width(len(labels))
    y = geometry.height - geometry.tick_label_offset
    return tuple(
        TickLabel(index=i, text=text, x=geometry.plot_left + step_x * i, y=y)
        for i, text in enumerate(labels)
    )


def tick_marks(count: int, geometry: PlotGeometry) -> tuple[TickMark, ...]:
    step_x = geometry.step_width(count)
    basis_y = geometry.plot_height
    half = geometry.tick_half_length
    marks: list[TickMark] = []
    for i in range(count):
        x = geometry.plot_left + step_x * i
        marks.append(TickMark(start=Point(x, basis_y - half), end=Point(x, basis_y + half)))
    return tuple(marks)


def peak_line_path(points: Sequence[Point], info: StepInfo, geometry: PlotGeometry) -> tuple[Point, ...]:
    """Open polyline: half a step above the first point at the gutter, then every point."""
    if len(points) < 2:
        return ()
    return (_line_start(points, info, geometry), *points)


def fill_outline(points: Sequence[Point], info: StepInfo, geometry: PlotGeometry) -> tuple[Point, ...]:
    if len(points) < 2:
        return ()
    basis_y = geometry.plot_height
    return (
        *points,
        Point(geometry.width, basis_y),
        Point(geometry.gutter_x, basis_y),
        _line_start(points, info, geometry),
        points[0],
    )


def dot_markers(points: Sequence[Point], geometry: PlotGeometry) -> tuple[DotMarker, ...]:
    if len(points) < 2:
        return ()
    return tuple(DotMarker(center=p, radius=geometry.dot_radius) for p in points)


def _line_start(points: Sequence[Point], info: StepInfo, geometry: PlotGeometry) -> Point:
    return Point(geometry.gutter_x, points[0].y - info.step_height_px / 2)
