from __future__ import annotations

from functools import lru_cache
from pathlib import Path

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from linegraph.raster.canvas import RGBA, blend_coverage


DEFAULT_FONT_FAMILY = "SF Pro Text"
DEFAULT_FONT_SIZE_PX = 12.0
BOLD_FONT_FALLBACK_PATTERNS = (
    "sfprotext-bold",
    "helveticaneue-bold",
    "helvetica-bold",
    "arial bold",
    "arialbd",
    "dejavusans-bold",
    "dejavu sans bold",
    "liberationsans-bold",
)


def draw_text_centered(
    dst: np.ndarray,
    cx: float,
    cy: float,
    text: str,
    color: RGBA,
    *,
    font_family: str = DEFAULT_FONT_FAMILY,
    font_size_px: float = DEFAULT_FONT_SIZE_PX,
    embolden_px: int = 1,
) -> None:
    """Draw ``text`` with its bounding box centered on ``(cx, cy)``; clipped at the canvas edges."""
    if not text:
        return
    font = _load_font(font_family=font_family, font_size_px=font_size_px)
    mask = _embolden(_render_mask(text=text, font=font), embolden_px)
    h, w = mask.shape
    x0 = int(round(cx - w / 2.0))
    y0 = int(round(cy - h / 2.0))
    colors = np.broadcast_to(np.asarray(color, dtype=np.float32), (h, w, 4))
    blend_coverage(dst, x0, y0, mask.astype(np.float32) / 255.0, colors)


def _embolden(mask: np.ndarray, embolden_px: int) -> np.ndarray:
    if embolden_px <= 1:
        return mask
    out = np.zeros((mask.shape[0], mask.shape[1] + embolden_px - 1), dtype=np.uint8)
    for shift in range(embolden_px):
        view = out[:, shift : shift + mask.shape[1]]
        np.maximum(view, mask, out=view)
    return out


@lru_cache(maxsize=256)
def _render_mask(text: str, font: ImageFont.FreeTypeFont | ImageFont.ImageFont) -> np.ndarray:
    left, top, right, bottom = font.getbbox(text)
    width = max(1, int(right - left))
    height = max(1, int(bottom - top))
    image = Image.new("L", (width, height), 0)
    ImageDraw.Draw(image).text((-left, -top), text, fill=255, font=font)
    return np.asarray(image, dtype=np.uint8)


@lru_cache(maxsize=32)
def _load_font(font_family: str, font_size_px: float) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    size = max(1, int(round(font_size_px)))
    font_path = _resolve_font_path(font_family)
    if font_path is None:
        return ImageFont.load_default()
    try:
        return ImageFont.truetype(str(font_path), size=size)
    except OSError:
        return ImageFont.load_default()


def _resolve_font_path(font_family: str) -> Path | None:
    wanted = font_family.strip().lower() or DEFAULT_FONT_FAMILY.lower()
    patterns = (wanted,) + BOLD_FONT_FALLBACK_PATTERNS

    font_dirs = [
        Path.home() / "Library" / "Fonts",
        Path("/Library/Fonts"),
        Path("/System/Library/Fonts"),
        Path("/usr/share/fonts"),
        Path("/usr/local/share/fonts"),
    ]

    candidates: list[Path] = []
    for base in font_dirs:
        if not base.exists():
            continue
        for ext in ("*.ttf", "*.otf"):
            candidates.extend(base.rglob(ext))

    for pattern in patterns:
        p = pattern.replace(" ", "")
        for path in candidates:
            if p in path.stem.lower().replace(" ", ""):
                return path
    return None
