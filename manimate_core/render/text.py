from __future__ import annotations

from functools import lru_cache
import logging
from pathlib import Path

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from .framebuffer import RGBA, composite_coverage
from .style import FontWeight, TextAlignment


LOGGER = logging.getLogger(__name__)

SANS_FONT_FALLBACK_PATTERNS = (
    "dejavusans",
    "dejavu sans",
    "liberationsans",
    "liberation sans",
    "arial",
    "helvetica",
    "freesans",
)
GENERIC_FAMILIES = {"sans-serif", "sans", "serif", "monospace", "system-ui"}
BOLD_SUFFIXES = ("bold", "-bold", " bold", "bd")

FONT_DIRS = (
    Path.home() / "Library" / "Fonts",
    Path("/Library/Fonts"),
    Path("/System/Library/Fonts"),
    Path("/System/Library/Fonts/Supplemental"),
    Path("/usr/share/fonts"),
    Path("/usr/local/share/fonts"),
    Path.home() / ".fonts",
)

Font = ImageFont.FreeTypeFont | ImageFont.ImageFont


def draw_text(
    dst: np.ndarray,
    x: float,
    baseline_y: float,
    text: str,
    color: RGBA,
    *,
    font_family: str = "sans-serif",
    font_size_px: float = 48.0,
    weight: FontWeight = FontWeight.NORMAL,
    alignment: TextAlignment = TextAlignment.LEFT,
    opacity: float = 1.0,
) -> None:
    """Rasterize `text` with its baseline at device row `baseline_y`.

    `x` is the anchor; alignment decides whether it is the left edge, center,
    or right edge of the advance width.
    """
    if not text:
        return
    bold = weight == FontWeight.BOLD
    font = _load_font(font_family, font_size_px, bold)
    left, top, mask = _render_mask(text, font)
    if bold and not _is_bold_face(font):
        mask = _embolden(mask, max(2, int(round(font_size_px / 24.0))))
    advance = _advance(font, text)
    if alignment == TextAlignment.CENTER:
        x -= advance / 2.0
    elif alignment == TextAlignment.RIGHT:
        x -= advance
    ascent = _ascent(font)
    ox = int(round(x)) + left
    oy = int(round(baseline_y)) - ascent + top
    _blend_mask(dst, ox, oy, mask, color, opacity)


def text_extent(
    text: str,
    *,
    font_family: str = "sans-serif",
    font_size_px: float = 48.0,
    weight: FontWeight = FontWeight.NORMAL,
) -> tuple[float, int]:
    font = _load_font(font_family, font_size_px, weight == FontWeight.BOLD)
    ascent = _ascent(font)
    if not text:
        return (0.0, ascent)
    return (_advance(font, text), ascent)


def _advance(font: Font, text: str) -> float:
    if hasattr(font, "getlength"):
        return float(font.getlength(text))
    left, _, right, _ = font.getbbox(text)
    return float(right - left)


def _ascent(font: Font) -> int:
    if hasattr(font, "getmetrics"):
        ascent, _ = font.getmetrics()
        return int(ascent)
    _, top, _, bottom = font.getbbox("Ag")
    return int(bottom - top)


def _blend_mask(
    dst: np.ndarray,
    x: int,
    y: int,
    mask: np.ndarray,
    color: RGBA,
    opacity: float,
) -> None:
    h, w = mask.shape
    if h <= 0 or w <= 0:
        return
    x0 = max(0, x)
    y0 = max(0, y)
    x1 = min(dst.shape[1], x + w)
    y1 = min(dst.shape[0], y + h)
    if x1 <= x0 or y1 <= y0:
        return
    sx0 = x0 - x
    sy0 = y0 - y
    cov = mask[sy0 : sy0 + (y1 - y0), sx0 : sx0 + (x1 - x0)].astype(np.float32) / 255.0
    composite_coverage(dst, (x0, y0), cov, color, opacity)


def _embolden(mask: np.ndarray, embolden_px: int) -> np.ndarray:
    if embolden_px <= 1:
        return mask
    out = np.zeros((mask.shape[0], mask.shape[1] + embolden_px - 1), dtype=np.uint8)
    out[:, : mask.shape[1]] = mask
    for shift in range(1, embolden_px):
        dst = out[:, shift : shift + mask.shape[1]]
        np.maximum(dst, mask, out=dst)
    return out


@lru_cache(maxsize=128)
def _render_mask(text: str, font: Font) -> tuple[int, int, np.ndarray]:
    """Glyph coverage mask plus its offset from the layout origin (ascender top)."""
    left, top, right, bottom = font.getbbox(text)
    width = max(1, int(right - left))
    height = max(1, int(bottom - top))
    image = Image.new("L", (width, height), 0)
    draw = ImageDraw.Draw(image)
    draw.text((-left, -top), text, fill=255, font=font)
    return int(left), int(top), np.asarray(image, dtype=np.uint8)


def _is_bold_face(font: Font) -> bool:
    getname = getattr(font, "getname", None)
    if getname is None:
        return False
    _, style = getname()
    return "bold" in (style or "").lower()


@lru_cache(maxsize=64)
def _load_font(font_family: str, font_size_px: float, bold: bool) -> Font:
    size = max(1, int(round(font_size_px)))
    font_path = _resolve_font_path(font_family, bold)
    if font_path is not None:
        try:
            return ImageFont.truetype(str(font_path), size=size)
        except OSError as exc:
            LOGGER.warning("could not load font %s: %s", font_path, exc)
    LOGGER.warning("no font found for family %r; using Pillow default", font_family)
    return ImageFont.load_default(size=size)


@lru_cache(maxsize=1)
def _font_candidates() -> tuple[Path, ...]:
    candidates: list[Path] = []
    for base in FONT_DIRS:
        if not base.exists():
            continue
        for ext in ("*.ttf", "*.otf", "*.ttc"):
            candidates.extend(sorted(base.rglob(ext)))
    return tuple(candidates)


def _resolve_font_path(font_family: str, bold: bool = False) -> Path | None:
    wanted = font_family.strip().lower()
    patterns: tuple[str, ...] = SANS_FONT_FALLBACK_PATTERNS
    if wanted and wanted not in GENERIC_FAMILIES:
        patterns = (wanted,) + patterns

    candidates = _font_candidates()
    for pattern in patterns:
        p = pattern.replace(" ", "")
        matches = [
            path
            for path in candidates
            if p in path.stem.lower().replace(" ", "") or p in path.name.lower().replace(" ", "")
        ]
        if not matches:
            continue
        if bold:
            for path in matches:
                stem = path.stem.lower()
                if any(stem.endswith(suffix) for suffix in BOLD_SUFFIXES):
                    return path
        plain = [path for path in matches if _is_regular_name(path.stem.lower())]
        return plain[0] if plain else matches[0]
    return None


def _is_regular_name(stem: str) -> bool:
    return not any(tag in stem for tag in ("bold", "italic", "oblique", "light", "condensed", "mono"))
