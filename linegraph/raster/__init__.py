from .canvas import blend_coverage, draw_hline, draw_vline, new_canvas
from .draw_lines import draw_polyline
from .draw_markers import draw_dots
from .draw_polygon import fill_polygon
from .draw_text import draw_text_centered

__all__ = [
    "blend_coverage",
    "draw_dots",
    "draw_hline",
    "draw_polyline",
    "draw_text_centered",
    "draw_vline",
    "fill_polygon",
    "new_canvas",
]
