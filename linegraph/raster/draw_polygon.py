from __future__ import annotations

from typing import Sequence

import numpy as np
from PIL import Image, ImageDraw

from linegraph.raster.canvas import RGBA, blend_coverage


def fill_polygon(
    dst: np.ndarray,
    vertices: Sequence[tuple[float, float]],
    top_color: RGBA,
    bottom_color: RGBA | None = None,
) -> None:
    """Fill a closed polygon, shading linearly from its top edge to its bottom edge."""
    if len(vertices) < 3:
        return
    height, width = dst.shape[0], dst.shape[1]
    if width <= 0 or height <= 0:
        return

    mask_img = Image.new("L", (width, height), 0)
    ImageDraw.Draw(mask_img).polygon([(float(x), float(y)) for x, y in vertices], fill=255)
    coverage = np.asarray(mask_img, dtype=np.float32) / 255.0
    if not np.any(coverage > 0):
        return

    ys = [float(y) for _, y in vertices]
    y_top = min(ys)
    y_bottom = max(ys)
    bottom = top_color if bottom_color is None else bottom_color
    rows = np.arange(height, dtype=np.float32) + 0.5
    span = y_bottom - y_top
    t = np.zeros(height, dtype=np.float32) if span <= 0 else np.clip((rows - y_top) / span, 0.0, 1.0)

    top_arr = np.asarray(top_color, dtype=np.float32)
    bottom_arr = np.asarray(bottom, dtype=np.float32)
    row_colors = top_arr[None, :] * (1.0 - t[:, None]) + bottom_arr[None, :] * t[:, None]
    colors = np.broadcast_to(row_colors[:, None, :], (height, width, 4))
    blend_coverage(dst, 0, 0, coverage, colors)
