"""Device-space path model consumed by the numpy rasterizer.

Curves are flattened to polylines as they are added. The segment count for a
curve follows Wang's bound so that no flattened chord strays more than
`tolerance` pixels from the true curve.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import math

import numpy as np

from manimate_core.errors import PathError
from manimate_core.geometry import CubicBezier, QuadraticBezier, Vector2D

from .color import Color


DEFAULT_TOLERANCE = 0.1
MAX_CURVE_SEGMENTS = 512


@dataclass(frozen=True)
class Paint:
    color: Color
    anti_alias: bool = True

    def rgba8(self) -> tuple[int, int, int, int]:
        return self.color.to_rgba8()


@dataclass(frozen=True)
class Stroke:
    """Round-capped, round-joined stroke of the given device width."""

    width: float

    def __post_init__(self) -> None:
        if not self.width >= 0.0:
            raise ValueError("stroke width must be >= 0")


@dataclass(frozen=True)
class Contour:
    points: np.ndarray = field(repr=False)
    closed: bool

    def segments(self) -> np.ndarray:
        """Return an (n, 2, 2) array of line segments, closing edge included."""
        pts = self.points
        if len(pts) < 2:
            return np.zeros((0, 2, 2), dtype=np.float64)
        if self.closed and not np.allclose(pts[0], pts[-1]):
            pts = np.vstack([pts, pts[:1]])
        return np.stack([pts[:-1], pts[1:]], axis=1)


@dataclass(frozen=True)
class RasterPath:
    contours: tuple[Contour, ...]

    def is_empty(self) -> bool:
        return not self.contours

    def bounds(self) -> tuple[float, float, float, float] | None:
        if not self.contours:
            return None
        stacked = np.vstack([c.points for c in self.contours])
        return (
            float(stacked[:, 0].min()),
            float(stacked[:, 1].min()),
            float(stacked[:, 0].max()),
            float(stacked[:, 1].max()),
        )

    def edges(self) -> np.ndarray:
        """All fill edges; every contour is implicitly closed for filling."""
        parts = []
        for contour in self.contours:
            seg = Contour(contour.points, True).segments()
            if len(seg):
                parts.append(seg)
        if not parts:
            return np.zeros((0, 2, 2), dtype=np.float64)
        return np.concatenate(parts, axis=0)

    def stroke_segments(self) -> list[np.ndarray]:
        """Per-contour stroke segments; a lone MoveTo strokes nothing."""
        out: list[np.ndarray] = []
        for contour in self.contours:
            seg = contour.segments()
            if len(seg):
                out.append(seg)
        return out


def _wang_segments(points: tuple[Vector2D, ...], factor: float, tolerance: float) -> int:
    """Subdivision count from the largest second difference of the control polygon."""
    worst = 0.0
    for i in range(len(points) - 2):
        dd = points[i] - points[i + 1] * 2.0 + points[i + 2]
        worst = max(worst, dd.magnitude())
    if worst <= 0.0:
        return 1
    n = math.ceil(math.sqrt(factor * worst / tolerance))
    return max(1, min(MAX_CURVE_SEGMENTS, n))


class RasterPathBuilder:
    def __init__(self, tolerance: float = DEFAULT_TOLERANCE) -> None:
        if not tolerance > 0.0:
            raise ValueError("flatten tolerance must be > 0")
        self.tolerance = float(tolerance)
        self._contours: list[Contour] = []
        self._current: list[tuple[float, float]] | None = None

    def _require_open(self) -> None:
        if not self._current:
            raise PathError("no open contour; call move_to first")

    @property
    def _last(self) -> Vector2D:
        self._require_open()
        x, y = self._current[-1]
        return Vector2D(x, y)

    def _flush(self, closed: bool) -> None:
        if self._current:
            self._contours.append(Contour(np.asarray(self._current, dtype=np.float64), closed))
        self._current = None

    def move_to(self, x: float, y: float) -> "RasterPathBuilder":
        self._flush(False)
        self._current = [(float(x), float(y))]
        return self

    def line_to(self, x: float, y: float) -> "RasterPathBuilder":
        self._require_open()
        self._current.append((float(x), float(y)))
        return self

    def quad_to(self, cx: float, cy: float, x: float, y: float) -> "RasterPathBuilder":
        curve = QuadraticBezier(self._last, Vector2D(cx, cy), Vector2D(x, y))
        n = _wang_segments(curve.control_points(), 0.25, self.tolerance)
        self._append_samples(curve, n)
        return self

    def cubic_to(
        self, c1x: float, c1y: float, c2x: float, c2y: float, x: float, y: float
    ) -> "RasterPathBuilder":
        curve = CubicBezier(self._last, Vector2D(c1x, c1y), Vector2D(c2x, c2y), Vector2D(x, y))
        n = _wang_segments(curve.control_points(), 0.75, self.tolerance)
        self._append_samples(curve, n)
        return self

    def _append_samples(self, curve: QuadraticBezier | CubicBezier, n: int) -> None:
        for i in range(1, n + 1):
            p = curve.evaluate(i / n)
            self._current.append((p.x, p.y))

    def close(self) -> "RasterPathBuilder":
        if not self._current:
            raise PathError("no open contour to close")
        self._flush(True)
        return self

    def finish(self) -> RasterPath:
        self._flush(False)
        contours = tuple(self._contours)
        self._contours = []
        return RasterPath(contours)
