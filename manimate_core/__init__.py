"""Geometry and rendering core: curves, paths, styles and SVG/raster output backends."""

from .config import RenderConfig, load_render_config
from .geometry import BoundingBox, CubicBezier, Degrees, QuadraticBezier, Radians, Transform, Vector2D
from .render import Color, FillRule, FontWeight, Path, PathCursor, PathStyle, TextAlignment, TextStyle
from .targets import RasterRenderer, Renderer, SvgRenderer

__all__ = [
    "BoundingBox",
    "Color",
    "CubicBezier",
    "Degrees",
    "FillRule",
    "FontWeight",
    "Path",
    "PathCursor",
    "PathStyle",
    "QuadraticBezier",
    "Radians",
    "RasterRenderer",
    "RenderConfig",
    "Renderer",
    "SvgRenderer",
    "TextAlignment",
    "TextStyle",
    "Transform",
    "Vector2D",
    "load_render_config",
]
