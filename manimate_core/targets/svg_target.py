from __future__ import annotations

import logging
from pathlib import Path as FilePath

from manimate_core.config import RenderConfig
from manimate_core.errors import ExportError
from manimate_core.geometry import Vector2D
from manimate_core.render import Color, Path, PathStyle, TextStyle, centered_frame
from manimate_core.render.svg import (
    DEFAULT_PRECISION,
    SvgElement,
    SvgPath,
    SvgRect,
    SvgText,
    build_document,
    color_to_svg,
    path_style_to_svg_attrs,
    path_to_svg_d,
    text_style_to_svg_attrs,
)

from .base import Renderer


LOGGER = logging.getLogger(__name__)


class SvgRenderer(Renderer):
    """Renders frames into an SVG document.

    Drawing calls are buffered while a frame is open; `end_frame` replaces the
    committed document content with the buffer. `to_string` and `save` always
    serialise the last committed frame.
    """

    def __init__(self, width: int, height: int, *, precision: int = DEFAULT_PRECISION) -> None:
        super().__init__(width, height)
        if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0:
            raise ValueError("precision must be an integer >= 0")
        self._precision = precision
        self._frame = centered_frame(self.width, self.height)
        self._background: Color | None = None
        self._elements: list[SvgElement] = []
        self._pending_background: Color | None = None
        self._pending: list[SvgElement] = []

    @classmethod
    def from_config(cls, config: RenderConfig) -> "SvgRenderer":
        return cls(config.width, config.height, precision=config.svg_precision)

    @property
    def precision(self) -> int:
        return self._precision

    @property
    def background(self) -> Color | None:
        return self._background

    @property
    def elements(self) -> tuple[SvgElement, ...]:
        return tuple(self._elements)

    def _on_begin_frame(self) -> None:
        self._pending_background = None
        self._pending = []

    def _on_end_frame(self) -> None:
        self._background = self._pending_background
        self._elements = self._pending
        self._pending_background = None
        self._pending = []

    def _on_abort_frame(self) -> None:
        self._pending_background = None
        self._pending = []

    def _clear(self, color: Color) -> None:
        self._pending = []
        self._pending_background = color

    def _draw_path(self, path: Path, style: PathStyle) -> None:
        d = path_to_svg_d(path, self._frame, self._precision)
        self._pending.append(SvgPath(d=d, attrs=path_style_to_svg_attrs(style, self._precision)))

    def _draw_text(self, text: str, position: Vector2D, style: TextStyle) -> None:
        x, y = self._frame.to_screen(position)
        self._pending.append(SvgText(content=text, x=x, y=y, attrs=text_style_to_svg_attrs(style, self._precision)))

    def _document_elements(self) -> list[SvgElement]:
        elements: list[SvgElement] = []
        if self._background is not None:
            bg = self._background
            elements.append(SvgRect(0, 0, self.width, self.height, color_to_svg(bg), bg.a))
        elements.extend(self._elements)
        return elements

    def to_string(self) -> str:
        return build_document(self.width, self.height, self._document_elements(), self._precision)

    def save(self, path: str | FilePath) -> FilePath:
        out = FilePath(path)
        try:
            out.parent.mkdir(parents=True, exist_ok=True)
            out.write_text(self.to_string(), encoding="utf-8")
        except OSError as exc:
            raise ExportError(f"failed to write SVG to {out}: {exc}") from exc
        LOGGER.debug("wrote SVG frame to %s", out)
        return out

    def duplicate(self) -> "SvgRenderer":
        copy = SvgRenderer(self.width, self.height, precision=self._precision)
        copy._background = self._background
        copy._elements = list(self._elements)
        return copy
