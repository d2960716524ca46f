from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import contextmanager
import logging
from typing import Iterator

from manimate_core.errors import FrameStateError, RenderError
from manimate_core.geometry import Vector2D
from manimate_core.render import Color, Path, PathStyle, TextStyle


LOGGER = logging.getLogger(__name__)


class Renderer(ABC):
    """Output backend driven one frame at a time.

    Authoring coordinates are centered with Y pointing up. Every drawing call
    must happen inside a `begin_frame`/`end_frame` bracket; frames do not nest.
    Subclasses implement the underscore hooks and never see a call made
    outside a frame.
    """

    def __init__(self, width: int, height: int) -> None:
        if isinstance(width, bool) or isinstance(height, bool):
            raise ValueError("width and height must be integers")
        if int(width) != width or int(height) != height or width <= 0 or height <= 0:
            raise ValueError(f"width and height must be positive integers, got {width}x{height}")
        self._width = int(width)
        self._height = int(height)
        self._in_frame = False
        self._frames_rendered = 0

    def dimensions(self) -> tuple[int, int]:
        return (self._width, self._height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def in_frame(self) -> bool:
        return self._in_frame

    @property
    def frames_rendered(self) -> int:
        return self._frames_rendered

    def begin_frame(self) -> None:
        if self._in_frame:
            raise FrameStateError("begin_frame called while a frame is already open")
        self._on_begin_frame()
        self._in_frame = True
        LOGGER.debug("%s: begin frame %d", type(self).__name__, self._frames_rendered)

    def end_frame(self) -> None:
        if not self._in_frame:
            raise FrameStateError("end_frame called without a matching begin_frame")
        self._on_end_frame()
        self._in_frame = False
        self._frames_rendered += 1
        LOGGER.debug("%s: end frame %d", type(self).__name__, self._frames_rendered - 1)

    @contextmanager
    def frame(self) -> Iterator["Renderer"]:
        """Bracket a render pass; the frame is committed only if the body succeeds."""
        self.begin_frame()
        try:
            yield self
        except BaseException:
            self._in_frame = False
            self._on_abort_frame()
            raise
        self.end_frame()

    def clear(self, color: Color) -> None:
        self._require_frame("clear")
        self._clear(color)

    def draw_path(self, path: Path, style: PathStyle) -> None:
        self._require_frame("draw_path")
        if not path.is_finite():
            raise RenderError("path contains non-finite coordinates")
        if path.is_empty():
            return
        self._draw_path(path, style)

    def draw_text(self, text: str, position: Vector2D, style: TextStyle) -> None:
        self._require_frame("draw_text")
        if not position.is_finite():
            raise RenderError("text position must be finite")
        if not text:
            return
        self._draw_text(text, position, style)

    def _require_frame(self, operation: str) -> None:
        if not self._in_frame:
            raise FrameStateError(f"{operation} called outside begin_frame/end_frame")

    def _on_begin_frame(self) -> None:
        return

    def _on_end_frame(self) -> None:
        return

    def _on_abort_frame(self) -> None:
        return

    @abstractmethod
    def _clear(self, color: Color) -> None:
        raise NotImplementedError

    @abstractmethod
    def _draw_path(self, path: Path, style: PathStyle) -> None:
        raise NotImplementedError

    @abstractmethod
    def _draw_text(self, text: str, position: Vector2D, style: TextStyle) -> None:
        raise NotImplementedError

    @abstractmethod
    def duplicate(self) -> "Renderer":
        raise NotImplementedError
