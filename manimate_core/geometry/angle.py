from __future__ import annotations

from dataclasses import dataclass
import math


@dataclass(frozen=True)
class Degrees:
    value: float

    def to_radians(self) -> "Radians":
        return Radians(math.radians(self.value))

    def normalized(self) -> "Degrees":
        """Same angle folded into [0, 360)."""
        return Degrees(self.value % 360.0)

    def sin(self) -> float:
        return math.sin(math.radians(self.value))

    def cos(self) -> float:
        return math.cos(math.radians(self.value))

    def tan(self) -> float:
        return math.tan(math.radians(self.value))


@dataclass(frozen=True)
class Radians:
    value: float

    def to_degrees(self) -> Degrees:
        return Degrees(math.degrees(self.value))

    def normalized(self) -> "Radians":
        return Radians(self.value % math.tau)

    def sin(self) -> float:
        return math.sin(self.value)

    def cos(self) -> float:
        return math.cos(self.value)

    def tan(self) -> float:
        return math.tan(self.value)


AngleLike = float | Degrees | Radians


def as_radians(angle: AngleLike) -> float:
    if isinstance(angle, Degrees):
        return angle.to_radians().value
    if isinstance(angle, Radians):
        return angle.value
    return float(angle)
