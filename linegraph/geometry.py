from __future__ import annotations

from dataclasses import dataclass


DEFAULT_LABEL_GUTTER = 30.0
DEFAULT_LABEL_BAND = 40.0
DEFAULT_LEADING_MARGIN = 20.0
DEFAULT_DOT_RADIUS = 3.5
DEFAULT_TICK_HALF_LENGTH = 7.5
DEFAULT_TICK_LABEL_OFFSET = 12.0


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class EdgeInsets:
    top: float = 20.0
    leading: float = 25.0
    bottom: float = 20.0
    trailing: float = 25.0

    def __post_init__(self) -> None:
        if min(self.top, self.leading, self.bottom, self.trailing) < 0:
            raise ValueError("insets must be >= 0")

    @property
    def horizontal(self) -> float:
        return self.leading + self.trailing

    @property
    def vertical(self) -> float:
        return self.top + self.bottom


@dataclass(frozen=True)
class PlotGeometry:
    """Drawing rectangle plus the fixed margins the mapper carves out of it.

    The frame is in local pixel space: origin top-left, y grows downward.
    The plotting area spans ``[0, plot_height]`` vertically; the bottom
    ``label_band`` pixels hold per-point tick labels and the left
    ``label_gutter`` pixels hold gridline value labels.
    """

    frame_width: float
    frame_height: float
    label_gutter: float = DEFAULT_LABEL_GUTTER
    label_band: float = DEFAULT_LABEL_BAND
    leading_margin: float = DEFAULT_LEADING_MARGIN
    dot_radius: float = DEFAULT_DOT_RADIUS
    tick_half_length: float = DEFAULT_TICK_HALF_LENGTH
    tick_label_offset: float = DEFAULT_TICK_LABEL_OFFSET

    def __post_init__(self) -> None:
        margins = (
            self.label_gutter,
            self.label_band,
            self.leading_margin,
            self.dot_radius,
            self.tick_half_length,
            self.tick_label_offset,
        )
        if min(margins) < 0:
            raise ValueError("margins and marker sizes must be >= 0")

    @property
    def width(self) -> float:
        return max(0.0, float(self.frame_width))

    @property
    def height(self) -> float:
        return max(0.0, float(self.frame_height))

    @property
    def plot_height(self) -> float:
        return max(0.0, self.height - self.label_band)

    @property
    def plot_left(self) -> float:
        # x of the first data point; never past the right edge.
        return min(self.width, self.label_gutter + self.leading_margin)

    @property
    def gutter_x(self) -> float:
        return min(self.width, self.label_gutter)

    @property
    def available_width(self) -> float:
        return self.width - self.plot_left

    def step_width(self, count: int) -> float:
        if count < 2:
            return self.available_width
        return self.available_width / float(count - 1)
