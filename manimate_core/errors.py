from __future__ import annotations


class ColorParseError(ValueError):
    """Raised when a color string cannot be parsed."""


class GeometryError(ValueError):
    """Raised for geometric arguments that have no valid result."""


class PathError(ValueError):
    """Raised when a path command breaks the contour contract."""


class FrameStateError(RuntimeError):
    """Raised when a renderer is driven outside a begin_frame/end_frame bracket."""


class RenderError(RuntimeError):
    """Raised when a draw call cannot be interpreted."""


class ExportError(RuntimeError):
    """Raised when a rendered frame cannot be written to its destination."""
