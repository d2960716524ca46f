from __future__ import annotations

from dataclasses import dataclass

from manimate_core.geometry import Transform, Vector2D


PRESET_SCREEN_TL = "screen_tl"
PRESET_CENTERED_Y_UP = "centered_y_up"


@dataclass(frozen=True)
class CoordinateFrame:
    """Authoring frame expressed in screen (top-left origin, Y down) units."""

    name: str
    origin: tuple[float, float]
    basis_x: tuple[float, float]
    basis_y: tuple[float, float]

    def determinant(self) -> float:
        exx, exy = self.basis_x
        eyx, eyy = self.basis_y
        return (exx * eyy) - (exy * eyx)

    def to_transform(self) -> Transform:
        exx, exy = self.basis_x
        eyx, eyy = self.basis_y
        ox, oy = self.origin
        return Transform(a=exx, b=exy, c=eyx, d=eyy, e=ox, f=oy)

    def to_screen(self, point: Vector2D) -> tuple[float, float]:
        ox, oy = self.origin
        exx, exy = self.basis_x
        eyx, eyy = self.basis_y
        return (ox + point.x * exx + point.y * eyx, oy + point.x * exy + point.y * eyy)

    def from_screen(self, x: float, y: float) -> Vector2D:
        ox, oy = self.origin
        exx, exy = self.basis_x
        eyx, eyy = self.basis_y
        det = self.determinant()
        if abs(det) < 1e-9:
            raise ValueError(f"frame `{self.name}` basis vectors are singular")
        dx = x - ox
        dy = y - oy
        return Vector2D(((dx * eyy) - (dy * eyx)) / det, (-(dx * exy) + (dy * exx)) / det)


def screen_frame() -> CoordinateFrame:
    return CoordinateFrame(
        name=PRESET_SCREEN_TL,
        origin=(0.0, 0.0),
        basis_x=(1.0, 0.0),
        basis_y=(0.0, 1.0),
    )


def centered_frame(width: int, height: int) -> CoordinateFrame:
    """Origin at the canvas center with Y up: screen = (w/2 + x, h/2 - y)."""
    if width <= 0 or height <= 0:
        raise ValueError("width and height must be > 0")
    return CoordinateFrame(
        name=PRESET_CENTERED_Y_UP,
        origin=(width / 2.0, height / 2.0),
        basis_x=(1.0, 0.0),
        basis_y=(0.0, -1.0),
    )
