from __future__ import annotations

from dataclasses import dataclass

from linegraph.raster.canvas import RGBA


SYSTEM_PINK = (255, 45, 85)
SYSTEM_GRAY = (142, 142, 147)
SYSTEM_PURPLE = (175, 82, 222)
SECONDARY_LABEL = (60, 60, 67)


def coerce_color(color: tuple[int, int, int] | tuple[int, int, int, int], alpha: float = 1.0) -> RGBA:
    if len(color) == 3:
        r, g, b = color
        a = int(max(0.0, min(1.0, alpha)) * 255)
        return (r, g, b, a)
    r, g, b, a = color
    out_a = int(max(0.0, min(1.0, alpha)) * a)
    return (r, g, b, out_a)


@dataclass(frozen=True)
class GraphStyle:
    background: RGBA = (255, 255, 255, 255)
    line_color: RGBA = coerce_color(SYSTEM_PINK)
    dot_color: RGBA = coerce_color(SYSTEM_PINK)
    fill_top: RGBA = coerce_color(SYSTEM_PINK, 0.56)
    fill_bottom: RGBA = coerce_color(SYSTEM_PINK, 0.3)
    grid_color: RGBA = coerce_color(SYSTEM_GRAY, 0.7)
    value_label_color: RGBA = coerce_color(SECONDARY_LABEL, 0.7)
    tick_label_color: RGBA = coerce_color(SYSTEM_PURPLE, 0.7)
    label_font_px: float = 12.0
    label_embolden_px: int = 2
    line_width: int = 1

    def __post_init__(self) -> None:
        if self.label_font_px <= 0:
            raise ValueError("label_font_px must be > 0")
        if self.line_width <= 0:
            raise ValueError("line_width must be > 0")
