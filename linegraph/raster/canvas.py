from __future__ import annotations

import numpy as np


RGBA = tuple[int, int, int, int]


def new_canvas(width: int, height: int, color: RGBA = (0, 0, 0, 255)) -> np.ndarray:
    canvas = np.zeros((max(0, height), max(0, width), 4), dtype=np.uint8)
    canvas[:, :] = np.asarray(color, dtype=np.uint8)
    return canvas


def blend_coverage(dst: np.ndarray, x0: int, y0: int, coverage: np.ndarray, colors: np.ndarray) -> None:
    """Alpha-blend ``colors`` (h, w, 4 float32) onto ``dst`` weighted by ``coverage`` in [0, 1]."""
    h, w = coverage.shape
    xa = max(0, x0)
    ya = max(0, y0)
    xb = min(dst.shape[1], x0 + w)
    yb = min(dst.shape[0], y0 + h)
    if xa >= xb or ya >= yb:
        return

    cov = coverage[ya - y0 : yb - y0, xa - x0 : xb - x0]
    src = colors[ya - y0 : yb - y0, xa - x0 : xb - x0]
    alpha = (src[:, :, 3] / 255.0) * cov
    if not np.any(alpha > 0):
        return

    view = dst[ya:yb, xa:xb]
    a = alpha[:, :, None]
    view[:, :, :3] = (src[:, :, :3] * a + view[:, :, :3].astype(np.float32) * (1.0 - a)).astype(np.uint8)
    view[:, :, 3] = 255


def draw_hline(dst: np.ndarray, x0: int, x1: int, y: int, color: RGBA) -> None:
    if y < 0 or y >= dst.shape[0]:
        return
    xa = max(0, min(x0, x1))
    xb = min(dst.shape[1] - 1, max(x0, x1))
    if xa > xb:
        return
    segment = dst[y, xa : xb + 1]
    a = color[3] / 255.0
    inv = 1.0 - a
    segment[:, :3] = (np.asarray(color[0:3], dtype=np.float32) * a + segment[:, :3].astype(np.float32) * inv).astype(np.uint8)
    segment[:, 3] = 255


def draw_vline(dst: np.ndarray, x: int, y0: int, y1: int, color: RGBA) -> None:
    if x < 0 or x >= dst.shape[1]:
        return
    ya = max(0, min(y0, y1))
    yb = min(dst.shape[0] - 1, max(y0, y1))
    if ya > yb:
        return
    segment = dst[ya : yb + 1, x]
    a = color[3] / 255.0
    inv = 1.0 - a
    segment[:, :3] = (np.asarray(color[0:3], dtype=np.float32) * a + segment[:, :3].astype(np.float32) * inv).astype(np.uint8)
    segment[:, 3] = 255
