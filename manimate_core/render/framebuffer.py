"""Supersampled coverage rasterization over an (h, w, 4) uint8 canvas.

Pixel (col, row) covers the square [col, col + 1) x [row, row + 1). Coverage is
the fraction of an S x S grid of sample points that lie inside the shape; with
anti-aliasing off a single sample at the pixel center is used.
"""

from __future__ import annotations

import numpy as np

from .raster_path import RasterPath, Stroke
from .style import FillRule


RGBA = tuple[int, int, int, int]

DEFAULT_SUPERSAMPLE = 4
BAND_ROWS = 64


def new_canvas(width: int, height: int, color: RGBA = (0, 0, 0, 0)) -> np.ndarray:
    canvas = np.zeros((height, width, 4), dtype=np.uint8)
    fill_canvas(canvas, color)
    return canvas


def fill_canvas(dst: np.ndarray, color: RGBA) -> None:
    dst[:, :, 0] = color[0]
    dst[:, :, 1] = color[1]
    dst[:, :, 2] = color[2]
    dst[:, :, 3] = color[3]


def _pixel_window(
    dst: np.ndarray, bounds: tuple[float, float, float, float], pad: float
) -> tuple[int, int, int, int] | None:
    height, width = dst.shape[:2]
    min_x, min_y, max_x, max_y = bounds
    x0 = max(0, int(np.floor(min_x - pad)))
    y0 = max(0, int(np.floor(min_y - pad)))
    x1 = min(width, int(np.ceil(max_x + pad)) + 1)
    y1 = min(height, int(np.ceil(max_y + pad)) + 1)
    if x1 <= x0 or y1 <= y0:
        return None
    return (x0, y0, x1, y1)


def _sample_axis(start: int, stop: int, samples: int) -> np.ndarray:
    offsets = (np.arange(samples, dtype=np.float64) + 0.5) / samples
    base = np.arange(start, stop, dtype=np.float64)
    return (base[:, None] + offsets[None, :]).reshape(-1)


def _downsample(mask: np.ndarray, samples: int) -> np.ndarray:
    rows = mask.shape[0] // samples
    cols = mask.shape[1] // samples
    return mask.reshape(rows, samples, cols, samples).mean(axis=(1, 3), dtype=np.float32)


def fill_coverage(
    dst: np.ndarray,
    path: RasterPath,
    rule: FillRule = FillRule.NONZERO,
    samples: int = DEFAULT_SUPERSAMPLE,
) -> tuple[tuple[int, int], np.ndarray] | None:
    """Return ((x0, y0), coverage) for the filled interior of `path`, or None if off-canvas."""
    bounds = path.bounds()
    if bounds is None:
        return None
    window = _pixel_window(dst, bounds, 0.0)
    if window is None:
        return None
    x0, y0, x1, y1 = window
    edges = path.edges()
    ex0 = edges[:, 0, 0]
    ey0 = edges[:, 0, 1]
    ex1 = edges[:, 1, 0]
    ey1 = edges[:, 1, 1]
    keep = ey0 != ey1
    ex0, ey0, ex1, ey1 = ex0[keep], ey0[keep], ex1[keep], ey1[keep]
    direction = np.where(ey1 > ey0, 1, -1).astype(np.int32)
    lo = np.minimum(ey0, ey1)
    hi = np.maximum(ey0, ey1)
    slope = (ex1 - ex0) / (ey1 - ey0)

    xs = _sample_axis(x0, x1, samples)
    coverage = np.zeros((y1 - y0, x1 - x0), dtype=np.float32)
    for band_start in range(y0, y1, BAND_ROWS):
        band_stop = min(y1, band_start + BAND_ROWS)
        ys = _sample_axis(band_start, band_stop, samples)
        winding = np.zeros((ys.size, xs.size), dtype=np.int32)
        active = np.nonzero((hi > ys[0]) & (lo <= ys[-1]))[0]
        for k in active:
            rows = np.nonzero((ys >= lo[k]) & (ys < hi[k]))[0]
            if rows.size == 0:
                continue
            crossing = ex0[k] + (ys[rows] - ey0[k]) * slope[k]
            winding[rows] += direction[k] * (xs[None, :] < crossing[:, None])
        if rule == FillRule.EVENODD:
            inside = (winding & 1) == 1
        else:
            inside = winding != 0
        coverage[band_start - y0 : band_stop - y0] = _downsample(inside, samples)
    return (x0, y0), coverage


def _band_span(ax: float, ay: float, bx: float, by: float, top: float, bottom: float) -> tuple[float, float]:
    """x-range of the part of segment a-b whose y lies in [top, bottom]."""
    dy = by - ay
    if dy == 0.0:
        return min(ax, bx), max(ax, bx)
    t0 = (top - ay) / dy
    t1 = (bottom - ay) / dy
    lo = min(max(min(t0, t1), 0.0), 1.0)
    hi = min(max(max(t0, t1), 0.0), 1.0)
    xa = ax + lo * (bx - ax)
    xb = ax + hi * (bx - ax)
    return min(xa, xb), max(xa, xb)


def stroke_coverage(
    dst: np.ndarray,
    path: RasterPath,
    stroke: Stroke,
    samples: int = DEFAULT_SUPERSAMPLE,
) -> tuple[tuple[int, int], np.ndarray] | None:
    """Coverage of the round-capped, round-joined outline of `path` under `stroke`.

    Evaluated in BAND_ROWS bands; each band only visits the segments whose
    padded vertical range reaches it.
    """
    bounds = path.bounds()
    if bounds is None or stroke.width <= 0.0:
        return None
    half = stroke.width / 2.0
    window = _pixel_window(dst, bounds, half)
    if window is None:
        return None
    parts = path.stroke_segments()
    if not parts:
        return None
    x0, y0, x1, y1 = window
    segments = np.concatenate(parts)
    seg_top = np.minimum(segments[:, 0, 1], segments[:, 1, 1]) - half
    seg_bottom = np.maximum(segments[:, 0, 1], segments[:, 1, 1]) + half
    half_sq = half * half

    coverage = np.zeros((y1 - y0, x1 - x0), dtype=np.float32)
    for band_start in range(y0, y1, BAND_ROWS):
        band_stop = min(y1, band_start + BAND_ROWS)
        active = np.nonzero((seg_bottom >= band_start) & (seg_top <= band_stop))[0]
        if active.size == 0:
            continue
        inside = np.zeros(((band_stop - band_start) * samples, (x1 - x0) * samples), dtype=bool)
        for k in active:
            (ax, ay), (bx, by) = segments[k]
            left, right = _band_span(ax, ay, bx, by, band_start - half, band_stop + half)
            seg_window = _pixel_window(dst, (left, min(ay, by), right, max(ay, by)), half)
            if seg_window is None:
                continue
            sx0, sy0, sx1, sy1 = seg_window
            sy0 = max(sy0, band_start)
            sy1 = min(sy1, band_stop)
            if sy1 <= sy0:
                continue
            xs = _sample_axis(sx0, sx1, samples)
            ys = _sample_axis(sy0, sy1, samples)
            px = xs[None, :] - ax
            py = ys[:, None] - ay
            dx = bx - ax
            dy = by - ay
            length_sq = dx * dx + dy * dy
            if length_sq > 0.0:
                t = np.clip((px * dx + py * dy) / length_sq, 0.0, 1.0)
            else:
                t = np.zeros((ys.size, xs.size))
            qx = px - t * dx
            qy = py - t * dy
            hit = (qx * qx + qy * qy) <= half_sq
            r0 = (sy0 - band_start) * samples
            c0 = (sx0 - x0) * samples
            region = inside[r0 : r0 + ys.size, c0 : c0 + xs.size]
            np.logical_or(region, hit, out=region)
        coverage[band_start - y0 : band_stop - y0] = _downsample(inside, samples)
    return (x0, y0), coverage


def composite_coverage(
    dst: np.ndarray,
    origin: tuple[int, int],
    coverage: np.ndarray,
    color: RGBA,
    opacity: float = 1.0,
) -> None:
    """Straight-alpha source-over of `color` weighted by per-pixel coverage."""
    x, y = origin
    h, w = coverage.shape
    if h <= 0 or w <= 0:
        return
    for band_start in range(0, h, BAND_ROWS):
        band_stop = min(h, band_start + BAND_ROWS)
        _composite_band(
            dst[y + band_start : y + band_stop, x : x + w],
            coverage[band_start:band_stop],
            color,
            opacity,
        )


def _composite_band(patch: np.ndarray, coverage: np.ndarray, color: RGBA, opacity: float) -> None:
    src_alpha = (color[3] / 255.0) * float(opacity) * coverage.astype(np.float32)
    if not np.any(src_alpha > 0):
        return

    dst_rgb = patch[:, :, :3].astype(np.float32)
    dst_alpha = patch[:, :, 3].astype(np.float32) / 255.0

    src_rgb = np.asarray(color[:3], dtype=np.float32).reshape(1, 1, 3)
    out_alpha = src_alpha + dst_alpha * (1.0 - src_alpha)
    out_rgb_num = src_rgb * src_alpha[:, :, None] + dst_rgb * dst_alpha[:, :, None] * (1.0 - src_alpha[:, :, None])
    safe_alpha = np.where(out_alpha > 1e-6, out_alpha, 1.0)
    out_rgb = out_rgb_num / safe_alpha[:, :, None]

    patch[:, :, :3] = np.clip(np.rint(out_rgb), 0, 255).astype(np.uint8)
    patch[:, :, 3] = np.clip(np.rint(out_alpha * 255.0), 0, 255).astype(np.uint8)


def fill_path(
    dst: np.ndarray,
    path: RasterPath,
    color: RGBA,
    *,
    rule: FillRule = FillRule.NONZERO,
    opacity: float = 1.0,
    samples: int = DEFAULT_SUPERSAMPLE,
) -> None:
    result = fill_coverage(dst, path, rule, samples)
    if result is not None:
        composite_coverage(dst, result[0], result[1], color, opacity)


def stroke_path(
    dst: np.ndarray,
    path: RasterPath,
    color: RGBA,
    stroke: Stroke,
    *,
    opacity: float = 1.0,
    samples: int = DEFAULT_SUPERSAMPLE,
) -> None:
    result = stroke_coverage(dst, path, stroke, samples)
    if result is not None:
        composite_coverage(dst, result[0], result[1], color, opacity)
