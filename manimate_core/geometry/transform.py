from __future__ import annotations

from dataclasses import dataclass
import math

from manimate_core.errors import GeometryError

from .angle import AngleLike, as_radians
from .vector import Vector2D


_SINGULAR_EPS = 1e-12


@dataclass(frozen=True)
class Transform:
    """2x3 affine matrix mapping (x, y) to (a*x + c*y + e, b*x + d*y + f).

    Composition uses the matrix product: `(outer @ inner).apply(p)` applies
    `inner` first, then `outer`.
    """

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    @classmethod
    def identity(cls) -> "Transform":
        return cls()

    @classmethod
    def translate(cls, x: float, y: float) -> "Transform":
        return cls(e=x, f=y)

    @classmethod
    def rotate(cls, angle: AngleLike) -> "Transform":
        theta = as_radians(angle)
        cos_t = math.cos(theta)
        sin_t = math.sin(theta)
        return cls(a=cos_t, b=sin_t, c=-sin_t, d=cos_t)

    @classmethod
    def scale(cls, sx: float, sy: float | None = None) -> "Transform":
        return cls(a=sx, d=sx if sy is None else sy)

    def __matmul__(self, other: "Transform") -> "Transform":
        if not isinstance(other, Transform):
            return NotImplemented
        return Transform(
            a=self.a * other.a + self.c * other.b,
            b=self.b * other.a + self.d * other.b,
            c=self.a * other.c + self.c * other.d,
            d=self.b * other.c + self.d * other.d,
            e=self.a * other.e + self.c * other.f + self.e,
            f=self.b * other.e + self.d * other.f + self.f,
        )

    def then(self, other: "Transform") -> "Transform":
        """Transform that applies `self` first and `other` afterwards."""
        return other @ self

    def apply(self, point: Vector2D) -> Vector2D:
        return Vector2D(
            self.a * point.x + self.c * point.y + self.e,
            self.b * point.x + self.d * point.y + self.f,
        )

    def apply_xy(self, x: float, y: float) -> tuple[float, float]:
        return (self.a * x + self.c * y + self.e, self.b * x + self.d * y + self.f)

    def apply_vector(self, vector: Vector2D) -> Vector2D:
        return Vector2D(self.a * vector.x + self.c * vector.y, self.b * vector.x + self.d * vector.y)

    def determinant(self) -> float:
        return self.a * self.d - self.b * self.c

    def inverse(self) -> "Transform":
        det = self.determinant()
        if abs(det) < _SINGULAR_EPS:
            raise GeometryError("transform is singular and has no inverse")
        a = self.d / det
        b = -self.b / det
        c = -self.c / det
        d = self.a / det
        return Transform(
            a=a,
            b=b,
            c=c,
            d=d,
            e=-(a * self.e + c * self.f),
            f=-(b * self.e + d * self.f),
        )

    def is_identity(self) -> bool:
        return self == Transform()

    def is_close(self, other: "Transform", tol: float = 1e-9) -> bool:
        return all(
            abs(x - y) <= tol
            for x, y in zip(
                (self.a, self.b, self.c, self.d, self.e, self.f),
                (other.a, other.b, other.c, other.d, other.e, other.f),
            )
        )
