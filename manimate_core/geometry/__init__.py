from .angle import Degrees, Radians
from .bezier import CubicBezier, QuadraticBezier
from .bounding_box import BoundingBox
from .transform import Transform
from .vector import Vector2D

__all__ = [
    "BoundingBox",
    "CubicBezier",
    "Degrees",
    "QuadraticBezier",
    "Radians",
    "Transform",
    "Vector2D",
]
