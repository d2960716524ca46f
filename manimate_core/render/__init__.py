from .color import Color
from .coordinates import CoordinateFrame, centered_frame, screen_frame
from .path import Close, CubicTo, LineTo, MoveTo, Path, PathCommand, PathCursor, QuadraticTo
from .raster_path import Paint, RasterPath, RasterPathBuilder, Stroke
from .style import FillRule, FontWeight, PathStyle, PathStyleBuilder, TextAlignment, TextStyle, TextStyleBuilder
from .svg import format_number, path_to_svg_d

__all__ = [
    "Close",
    "Color",
    "CoordinateFrame",
    "CubicTo",
    "FillRule",
    "FontWeight",
    "LineTo",
    "MoveTo",
    "Paint",
    "Path",
    "PathCommand",
    "PathCursor",
    "PathStyle",
    "PathStyleBuilder",
    "QuadraticTo",
    "RasterPath",
    "RasterPathBuilder",
    "Stroke",
    "TextAlignment",
    "TextStyle",
    "TextStyleBuilder",
    "centered_frame",
    "format_number",
    "path_to_svg_d",
    "screen_frame",
]
