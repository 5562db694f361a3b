from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

import numpy as np
from PIL import Image

from linegraph.geometry import (
    DEFAULT_DOT_RADIUS,
    DEFAULT_LABEL_BAND,
    DEFAULT_LABEL_GUTTER,
    DEFAULT_LEADING_MARGIN,
    EdgeInsets,
    PlotGeometry,
)
from linegraph.layout import GraphLayout, build_layout
from linegraph.raster import new_canvas
from linegraph.render import render_layout
from linegraph.series import VALUE_MAX_COUNT, GraphValue, recent_values, split_values
from linegraph.style import GraphStyle


LOGGER = logging.getLogger(__name__)

MIN_GRAPH_HEIGHT = 240


@dataclass
class LineGraphView:
    """Padded container that owns one line graph frame.

    Only the newest ``max_count`` values are kept and the graph frame is never
    shorter than ``MIN_GRAPH_HEIGHT``.
    """

    values: Sequence[GraphValue]
    width: int
    graph_height: int = MIN_GRAPH_HEIGHT
    padding: EdgeInsets = field(default_factory=EdgeInsets)
    style: GraphStyle = field(default_factory=GraphStyle)
    max_count: int = VALUE_MAX_COUNT
    label_gutter: float = DEFAULT_LABEL_GUTTER
    label_band: float = DEFAULT_LABEL_BAND
    leading_margin: float = DEFAULT_LEADING_MARGIN
    dot_radius: float = DEFAULT_DOT_RADIUS

    def __post_init__(self) -> None:
        if self.width <= 0:
            raise ValueError("width must be > 0")
        if self.max_count <= 0:
            raise ValueError("max_count must be > 0")
        kept = recent_values(self.values, self.max_count)
        if len(kept) < len(self.values):
            LOGGER.debug("keeping newest %d of %d values", len(kept), len(self.values))
        self.values = kept
        self.graph_height = max(MIN_GRAPH_HEIGHT, int(self.graph_height))

    @property
    def height(self) -> int:
        return int(np.ceil(self.graph_height + self.padding.vertical))

    def geometry(self) -> PlotGeometry:
        return PlotGeometry(
            frame_width=max(0.0, self.width - self.padding.horizontal),
            frame_height=float(self.graph_height),
            label_gutter=self.label_gutter,
            label_band=self.label_band,
            leading_margin=self.leading_margin,
            dot_radius=self.dot_radius,
        )

    def layout(self) -> GraphLayout:
        numbers, labels = split_values(self.values)
        return build_layout(numbers, self.geometry(), labels=labels)

    def to_rgba(self) -> np.ndarray:
        canvas = new_canvas(self.width, self.height, color=self.style.background)
        render_layout(canvas, self.layout(), self.style, origin=(self.padding.leading, self.padding.top))
        return canvas

    def save_png(self, path: str | Path) -> Path:
        out = Path(path)
        out.parent.mkdir(parents=True, exist_ok=True)
        Image.fromarray(self.to_rgba()).save(out)
        LOGGER.info("Saved line graph to %s", out)
        return out
