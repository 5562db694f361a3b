from __future__ import annotations

from typing import Sequence

import numpy as np

from linegraph.geometry import Point
from linegraph.layout import GraphLayout
from linegraph.raster import (
    draw_dots,
    draw_hline,
    draw_polyline,
    draw_text_centered,
    draw_vline,
    fill_polygon,
    new_canvas,
)
from linegraph.style import GraphStyle


def render_layout(
    canvas: np.ndarray,
    layout: GraphLayout,
    style: GraphStyle,
    *,
    origin: tuple[float, float] = (0.0, 0.0),
) -> None:
    """Draw ``layout`` onto ``canvas`` with the frame's top-left at ``origin``.

    Labels centered on the frame edges may spill outside the frame, so callers
    that pad the frame pass the full padded canvas and a non-zero origin.
    """
    ox, oy = origin
    geometry = layout.geometry

    for line in layout.grid_lines:
        y = int(round(oy + line.pixel_y))
        draw_hline(canvas, int(round(ox + geometry.gutter_x)), int(round(ox + geometry.width)), y, style.grid_color)
    for line in layout.grid_lines:
        _label(canvas, ox, oy + line.pixel_y, line.label, style.value_label_color, style)

    for mark in layout.tick_marks:
        x = int(round(ox + mark.start.x))
        draw_vline(canvas, x, int(round(oy + mark.start.y)), int(round(oy + mark.end.y)), style.grid_color)
    for tick in layout.tick_labels:
        if tick.text:
            _label(canvas, ox + tick.x, oy + tick.y, tick.text, style.tick_label_color, style)

    if not layout.has_line:
        return

    fill_polygon(canvas, _offset(layout.fill_outline, ox, oy), style.fill_top, style.fill_bottom)

    xs, ys = _split(layout.peak_line, ox, oy)
    draw_polyline(canvas, xs, ys, style.line_color, width=style.line_width)

    if layout.dots:
        dot_xs, dot_ys = _split([dot.center for dot in layout.dots], ox, oy)
        draw_dots(canvas, dot_xs, dot_ys, style.dot_color, radius=layout.dots[0].radius)


def render_to_rgba(layout: GraphLayout, style: GraphStyle | None = None) -> np.ndarray:
    style = style or GraphStyle()
    width = int(np.ceil(layout.geometry.width))
    height = int(np.ceil(layout.geometry.height))
    canvas = new_canvas(width, height, color=style.background)
    render_layout(canvas, layout, style)
    return canvas


def _label(canvas: np.ndarray, cx: float, cy: float, text: str, color, style: GraphStyle) -> None:
    draw_text_centered(
        canvas,
        cx,
        cy,
        text,
        color,
        font_size_px=style.label_font_px,
        embolden_px=style.label_embolden_px,
    )


def _offset(points: Sequence[Point], ox: float, oy: float) -> list[tuple[float, float]]:
    return [(p.x + ox, p.y + oy) for p in points]


def _split(points: Sequence[Point], ox: float, oy: float) -> tuple[np.ndarray, np.ndarray]:
    xs = np.asarray([p.x + ox for p in points], dtype=np.float64)
    ys = np.asarray([p.y + oy for p in points], dtype=np.float64)
    return xs, ys
