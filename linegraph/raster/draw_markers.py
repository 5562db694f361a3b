from __future__ import annotations

import math

import numpy as np

from linegraph.raster.canvas import RGBA, blend_coverage


def draw_dots(dst: np.ndarray, xs: np.ndarray, ys: np.ndarray, color: RGBA, radius: float) -> None:
    if radius <= 0:
        return
    reach = int(math.ceil(radius))
    size = 2 * reach + 1
    colors = np.broadcast_to(np.asarray(color, dtype=np.float32), (size, size, 4))
    for x, y in zip(xs.tolist(), ys.tolist()):
        cx = int(round(x))
        cy = int(round(y))
        yy, xx = np.mgrid[cy - reach : cy + reach + 1, cx - reach : cx + reach + 1]
        # Pixel centers sit at +0.5; covered when inside the circle.
        dist = np.hypot(xx + 0.5 - x, yy + 0.5 - y)
        coverage = (dist <= radius).astype(np.float32)
        blend_coverage(dst, cx - reach, cy - reach, coverage, colors)
