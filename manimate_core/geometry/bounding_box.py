from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Iterable

from manimate_core.errors import GeometryError

from .vector import Vector2D


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned box with closed-interval containment.

    `BoundingBox.empty()` is the sentinel for "no points": its min is +inf and
    its max is -inf, so it contains and intersects nothing and is absorbed by
    `union`. Every other box satisfies min <= max on both axes.
    """

    min: Vector2D
    max: Vector2D

    def __post_init__(self) -> None:
        if _is_empty_sentinel(self.min, self.max):
            return
        if self.min.x > self.max.x or self.min.y > self.max.y:
            raise GeometryError(f"bounding box min {self.min} exceeds max {self.max}")

    @classmethod
    def empty(cls) -> "BoundingBox":
        return _EMPTY

    @classmethod
    def zero(cls) -> "BoundingBox":
        return cls(Vector2D.zero(), Vector2D.zero())

    @classmethod
    def infinite(cls) -> "BoundingBox":
        return cls(Vector2D(-math.inf, -math.inf), Vector2D(math.inf, math.inf))

    @classmethod
    def from_points(cls, points: Iterable[Vector2D]) -> "BoundingBox":
        min_x = min_y = math.inf
        max_x = max_y = -math.inf
        for p in points:
            if p.x < min_x:
                min_x = p.x
            if p.x > max_x:
                max_x = p.x
            if p.y < min_y:
                min_y = p.y
            if p.y > max_y:
                max_y = p.y
        if min_x > max_x:
            return _EMPTY
        return cls(Vector2D(min_x, min_y), Vector2D(max_x, max_y))

    def is_empty(self) -> bool:
        return self is _EMPTY or _is_empty_sentinel(self.min, self.max)

    def width(self) -> float:
        return 0.0 if self.is_empty() else self.max.x - self.min.x

    def height(self) -> float:
        return 0.0 if self.is_empty() else self.max.y - self.min.y

    def size(self) -> Vector2D:
        return Vector2D(self.width(), self.height())

    def center(self) -> Vector2D:
        if self.is_empty():
            raise GeometryError("empty bounding box has no center")
        return (self.min + self.max) * 0.5

    def area(self) -> float:
        return self.width() * self.height()

    def perimeter(self) -> float:
        return 2.0 * (self.width() + self.height())

    def contains(self, point: Vector2D) -> bool:
        return self.min.x <= point.x <= self.max.x and self.min.y <= point.y <= self.max.y

    def contains_box(self, other: "BoundingBox") -> bool:
        if other.is_empty():
            return True
        if self.is_empty():
            return False
        return (
            other.min.x >= self.min.x
            and other.max.x <= self.max.x
            and other.min.y >= self.min.y
            and other.max.y <= self.max.y
        )

    def intersects(self, other: "BoundingBox") -> bool:
        if self.is_empty() or other.is_empty():
            return False
        return (
            self.min.x <= other.max.x
            and other.min.x <= self.max.x
            and self.min.y <= other.max.y
            and other.min.y <= self.max.y
        )

    def intersection(self, other: "BoundingBox") -> "BoundingBox | None":
        if not self.intersects(other):
            return None
        return BoundingBox(self.min.max_components(other.min), self.max.min_components(other.max))

    def union(self, other: "BoundingBox") -> "BoundingBox":
        if self.is_empty():
            return other
        if other.is_empty():
            return self
        return BoundingBox(self.min.min_components(other.min), self.max.max_components(other.max))

    def expand_to_include(self, point: Vector2D) -> "BoundingBox":
        if self.is_empty():
            return BoundingBox(point, point)
        return BoundingBox(self.min.min_components(point), self.max.max_components(point))

    def expand_by_margin(self, margin: float) -> "BoundingBox":
        if self.is_empty():
            return self
        delta = Vector2D.splat(margin)
        grown_min = self.min - delta
        grown_max = self.max + delta
        if grown_min.x > grown_max.x or grown_min.y > grown_max.y:
            c = self.center()
            return BoundingBox(c, c)
        return BoundingBox(grown_min, grown_max)

    def translate(self, offset: Vector2D) -> "BoundingBox":
        if self.is_empty():
            return self
        return BoundingBox(self.min + offset, self.max + offset)

    def scale(self, factor: float) -> "BoundingBox":
        """Scale about the box center; negative factors mirror and keep the box ordered."""
        if self.is_empty():
            return self
        c = self.center()
        half = self.size() * (0.5 * abs(factor))
        return BoundingBox(c - half, c + half)

    def corners(self) -> tuple[Vector2D, Vector2D, Vector2D, Vector2D]:
        return (
            self.min,
            Vector2D(self.max.x, self.min.y),
            self.max,
            Vector2D(self.min.x, self.max.y),
        )


def _is_empty_sentinel(lo: Vector2D, hi: Vector2D) -> bool:
    return lo.x == math.inf and lo.y == math.inf and hi.x == -math.inf and hi.y == -math.inf


_EMPTY = BoundingBox(Vector2D(math.inf, math.inf), Vector2D(-math.inf, -math.inf))
