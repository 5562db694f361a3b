from __future__ import annotations

import numpy as np

from linegraph.raster.canvas import RGBA, blend_coverage


def draw_polyline(dst: np.ndarray, xs: np.ndarray, ys: np.ndarray, color: RGBA, width: int = 1) -> None:
    """Stroke connected segments; joints are blended once so overlaps don't darken."""
    if xs.size < 2 or dst.shape[0] == 0 or dst.shape[1] == 0:
        return
    px = np.rint(xs).astype(np.int64)
    py = np.rint(ys).astype(np.int64)
    coverage = np.zeros(dst.shape[:2], dtype=np.float32)
    for i in range(px.size - 1):
        seg_x, seg_y = _segment_pixels(int(px[i]), int(py[i]), int(px[i + 1]), int(py[i + 1]))
        _stamp_brush(coverage, seg_x, seg_y, width)
    colors = np.broadcast_to(np.asarray(color, dtype=np.float32), (dst.shape[0], dst.shape[1], 4))
    blend_coverage(dst, 0, 0, coverage, colors)


def _segment_pixels(x0: int, y0: int, x1: int, y1: int) -> tuple[np.ndarray, np.ndarray]:
    # One sample per pixel along the major axis.
    n = max(abs(x1 - x0), abs(y1 - y0)) + 1
    seg_x = np.rint(np.linspace(x0, x1, n)).astype(np.int64)
    seg_y = np.rint(np.linspace(y0, y1, n)).astype(np.int64)
    return seg_x, seg_y


def _stamp_brush(coverage: np.ndarray, xs: np.ndarray, ys: np.ndarray, width: int) -> None:
    h, w = coverage.shape
    radius = max(0, width // 2)
    for dy in range(-radius, radius + 1):
        for dx in range(-radius, radius + 1):
            cx = xs + dx
            cy = ys + dy
            inside = (cx >= 0) & (cx < w) & (cy >= 0) & (cy < h)
            coverage[cy[inside], cx[inside]] = 1.0
