from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Iterator


@dataclass(frozen=True)
class Vector2D:
    """2-D point/vector value type in authoring coordinates (Y up)."""

    x: float
    y: float

    @classmethod
    def zero(cls) -> "Vector2D":
        return cls(0.0, 0.0)

    @classmethod
    def splat(cls, value: float) -> "Vector2D":
        return cls(value, value)

    def __add__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x / scalar, self.y / scalar)

    def __neg__(self) -> "Vector2D":
        return Vector2D(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def dot(self, other: "Vector2D") -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Vector2D") -> float:
        """Z component of the 3-D cross product; positive when `other` is counter-clockwise."""
        return self.x * other.y - self.y * other.x

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def magnitude_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def distance_to(self, other: "Vector2D") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def normalize(self) -> "Vector2D | None":
        """Unit vector in the same direction, or None for the zero vector."""
        mag = self.magnitude()
        if mag == 0.0:
            return None
        return Vector2D(self.x / mag, self.y / mag)

    def normalize_or_zero(self) -> "Vector2D":
        unit = self.normalize()
        return unit if unit is not None else Vector2D.zero()

    def perpendicular(self) -> "Vector2D":
        return Vector2D(-self.y, self.x)

    def lerp(self, other: "Vector2D", t: float) -> "Vector2D":
        # t is not clamped.
        return Vector2D(self.x + (other.x - self.x) * t, self.y + (other.y - self.y) * t)

    def min_components(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(min(self.x, other.x), min(self.y, other.y))

    def max_components(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(max(self.x, other.x), max(self.y, other.y))

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def is_close(self, other: "Vector2D", tol: float = 1e-9) -> bool:
        return abs(self.x - other.x) <= tol and abs(self.y - other.y) <= tol
