from .base import Renderer
from .raster_target import RasterRenderer
from .svg_target import SvgRenderer

__all__ = [
    "RasterRenderer",
    "Renderer",
    "SvgRenderer",
]
