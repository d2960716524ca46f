"""Quadratic and cubic Bezier curves.

Evaluation uses the Bernstein form directly. Subdivision uses de Casteljau's
construction. Bounding boxes are tight: besides the endpoints they include the
curve's value at every root of the derivative inside (0, 1), per axis.
"""

from __future__ import annotations

from dataclasses import dataclass
import math

from manimate_core.errors import GeometryError

from .bounding_box import BoundingBox
from .transform import Transform
from .vector import Vector2D


# Coefficients below this magnitude are treated as zero when solving for extrema.
ROOT_EPS = 1e-12


@dataclass(frozen=True)
class QuadraticBezier:
    start: Vector2D
    control: Vector2D
    end: Vector2D

    def control_points(self) -> tuple[Vector2D, Vector2D, Vector2D]:
        return (self.start, self.control, self.end)

    def evaluate(self, t: float) -> Vector2D:
        # B(t) = (1-t)^2 P0 + 2(1-t)t P1 + t^2 P2
        u = 1.0 - t
        w0 = u * u
        w1 = 2.0 * u * t
        w2 = t * t
        return Vector2D(
            w0 * self.start.x + w1 * self.control.x + w2 * self.end.x,
            w0 * self.start.y + w1 * self.control.y + w2 * self.end.y,
        )

    def tangent(self, t: float) -> Vector2D:
        # B'(t) = 2(1-t)(P1-P0) + 2t(P2-P1)
        return (self.control - self.start) * (2.0 * (1.0 - t)) + (self.end - self.control) * (2.0 * t)

    def normal(self, t: float) -> Vector2D:
        return self.tangent(t).perpendicular()

    def split(self, t: float) -> tuple["QuadraticBezier", "QuadraticBezier"]:
        _check_parameter(t)
        q0 = self.start.lerp(self.control, t)
        q1 = self.control.lerp(self.end, t)
        mid = q0.lerp(q1, t)
        return QuadraticBezier(self.start, q0, mid), QuadraticBezier(mid, q1, self.end)

    def bounding_box(self) -> BoundingBox:
        points = [self.start, self.end]
        for t in _quadratic_extrema(self.start.x, self.control.x, self.end.x):
            points.append(self.evaluate(t))
        for t in _quadratic_extrema(self.start.y, self.control.y, self.end.y):
            points.append(self.evaluate(t))
        return BoundingBox.from_points(points)

    def arc_length(self, samples: int = 64) -> float:
        return _polyline_length(self.evaluate, samples)

    def to_cubic(self) -> "CubicBezier":
        """Exact degree elevation."""
        c1 = self.start + (self.control - self.start) * (2.0 / 3.0)
        c2 = self.end + (self.control - self.end) * (2.0 / 3.0)
        return CubicBezier(self.start, c1, c2, self.end)

    def transformed(self, transform: Transform) -> "QuadraticBezier":
        return QuadraticBezier(
            transform.apply(self.start),
            transform.apply(self.control),
            transform.apply(self.end),
        )


@dataclass(frozen=True)
class CubicBezier:
    start: Vector2D
    control1: Vector2D
    control2: Vector2D
    end: Vector2D

    def control_points(self) -> tuple[Vector2D, Vector2D, Vector2D, Vector2D]:
        return (self.start, self.control1, self.control2, self.end)

    def evaluate(self, t: float) -> Vector2D:
        # B(t) = (1-t)^3 P0 + 3(1-t)^2 t P1 + 3(1-t) t^2 P2 + t^3 P3
        u = 1.0 - t
        w0 = u * u * u
        w1 = 3.0 * u * u * t
        w2 = 3.0 * u * t * t
        w3 = t * t * t
        return Vector2D(
            w0 * self.start.x + w1 * self.control1.x + w2 * self.control2.x + w3 * self.end.x,
            w0 * self.start.y + w1 * self.control1.y + w2 * self.control2.y + w3 * self.end.y,
        )

    def tangent(self, t: float) -> Vector2D:
        u = 1.0 - t
        return (
            (self.control1 - self.start) * (3.0 * u * u)
            + (self.control2 - self.control1) * (6.0 * u * t)
            + (self.end - self.control2) * (3.0 * t * t)
        )

    def normal(self, t: float) -> Vector2D:
        return self.tangent(t).perpendicular()

    def split(self, t: float) -> tuple["CubicBezier", "CubicBezier"]:
        _check_parameter(t)
        q0 = self.start.lerp(self.control1, t)
        q1 = self.control1.lerp(self.control2, t)
        q2 = self.control2.lerp(self.end, t)
        r0 = q0.lerp(q1, t)
        r1 = q1.lerp(q2, t)
        mid = r0.lerp(r1, t)
        return CubicBezier(self.start, q0, r0, mid), CubicBezier(mid, r1, q2, self.end)

    def bounding_box(self) -> BoundingBox:
        points = [self.start, self.end]
        for t in _cubic_extrema(self.start.x, self.control1.x, self.control2.x, self.end.x):
            points.append(self.evaluate(t))
        for t in _cubic_extrema(self.start.y, self.control1.y, self.control2.y, self.end.y):
            points.append(self.evaluate(t))
        return BoundingBox.from_points(points)

    def arc_length(self, samples: int = 64) -> float:
        return _polyline_length(self.evaluate, samples)

    def transformed(self, transform: Transform) -> "CubicBezier":
        return CubicBezier(
            transform.apply(self.start),
            transform.apply(self.control1),
            transform.apply(self.control2),
            transform.apply(self.end),
        )


def _check_parameter(t: float) -> None:
    if not 0.0 <= t <= 1.0:
        raise GeometryError(f"curve parameter must be within [0, 1], got {t}")


def _polyline_length(evaluate, samples: int) -> float:
    if samples < 1:
        raise ValueError("samples must be >= 1")
    length = 0.0
    prev = evaluate(0.0)
    for i in range(1, samples + 1):
        point = evaluate(i / samples)
        length += prev.distance_to(point)
        prev = point
    return length


def _quadratic_extrema(p0: float, p1: float, p2: float) -> list[float]:
    # B'(t) = 2[(p1 - p0) + t(p0 - 2p1 + p2)]; linear, at most one root.
    denom = p0 - 2.0 * p1 + p2
    if abs(denom) < ROOT_EPS:
        return []
    t = (p0 - p1) / denom
    return [t] if 0.0 < t < 1.0 else []


def _cubic_extrema(p0: float, p1: float, p2: float, p3: float) -> list[float]:
    # B'(t)/3 = a t^2 + b t + c with the coefficients below.
    a = -p0 + 3.0 * p1 - 3.0 * p2 + p3
    b = 2.0 * (p0 - 2.0 * p1 + p2)
    c = p1 - p0
    roots: list[float] = []
    if abs(a) < ROOT_EPS:
        if abs(b) < ROOT_EPS:
            return []
        roots.append(-c / b)
    else:
        disc = b * b - 4.0 * a * c
        if disc < 0.0:
            return []
        sqrt_disc = math.sqrt(disc)
        # Citardauq form avoids cancellation when b is close to sqrt_disc.
        q = -0.5 * (b + math.copysign(sqrt_disc, b))
        roots.append(q / a)
        if abs(q) >= ROOT_EPS:
            roots.append(c / q)
    return [t for t in roots if 0.0 < t < 1.0]
