from __future__ import annotations

import logging
from pathlib import Path as FilePath

import numpy as np
from PIL import Image

from manimate_core.config import RenderConfig
from manimate_core.errors import ExportError, RenderError
from manimate_core.geometry import Vector2D
from manimate_core.render import (
    Close,
    Color,
    CubicTo,
    LineTo,
    MoveTo,
    Paint,
    Path,
    PathStyle,
    QuadraticTo,
    RasterPath,
    RasterPathBuilder,
    Stroke,
    TextStyle,
    centered_frame,
)
from manimate_core.render.framebuffer import DEFAULT_SUPERSAMPLE, fill_canvas, fill_path, new_canvas, stroke_path
from manimate_core.render.raster_path import DEFAULT_TOLERANCE
from manimate_core.render.text import draw_text

from .base import Renderer


LOGGER = logging.getLogger(__name__)


class RasterRenderer(Renderer):
    """Renders frames into an RGBA pixel buffer (straight alpha, initially transparent)."""

    def __init__(
        self,
        width: int,
        height: int,
        *,
        antialias: bool = True,
        supersample: int = DEFAULT_SUPERSAMPLE,
        tolerance: float = DEFAULT_TOLERANCE,
    ) -> None:
        super().__init__(width, height)
        if isinstance(supersample, bool) or not isinstance(supersample, int) or supersample < 1:
            raise ValueError("supersample must be an integer >= 1")
        if not tolerance > 0:
            raise ValueError("tolerance must be > 0")
        self._antialias = bool(antialias)
        self._supersample = supersample
        self._tolerance = float(tolerance)
        self._frame = centered_frame(self.width, self.height)
        self._buffer = new_canvas(self.width, self.height)

    @classmethod
    def from_config(cls, config: RenderConfig) -> "RasterRenderer":
        return cls(
            config.width,
            config.height,
            antialias=config.antialias,
            supersample=config.supersample,
            tolerance=config.flatten_tolerance,
        )

    @property
    def antialias(self) -> bool:
        return self._antialias

    @property
    def supersample(self) -> int:
        return self._supersample

    @property
    def tolerance(self) -> float:
        return self._tolerance

    def pixels(self) -> np.ndarray:
        return self._buffer.copy()

    def pixel(self, x: int, y: int) -> tuple[int, int, int, int]:
        r, g, b, a = (int(v) for v in self._buffer[y, x])
        return (r, g, b, a)

    def to_bytes(self) -> bytes:
        return self._buffer.tobytes()

    def _clear(self, color: Color) -> None:
        fill_canvas(self._buffer, color.to_rgba8())

    def _to_raster_path(self, path: Path) -> RasterPath:
        builder = RasterPathBuilder(self._tolerance)
        to_screen = self._frame.to_screen
        for command in path.commands:
            if isinstance(command, MoveTo):
                builder.move_to(*to_screen(command.to))
            elif isinstance(command, LineTo):
                builder.line_to(*to_screen(command.to))
            elif isinstance(command, QuadraticTo):
                builder.quad_to(*to_screen(command.control), *to_screen(command.to))
            elif isinstance(command, CubicTo):
                builder.cubic_to(
                    *to_screen(command.control1),
                    *to_screen(command.control2),
                    *to_screen(command.to),
                )
            elif isinstance(command, Close):
                builder.close()
            else:
                raise RenderError(f"unsupported path command: {command!r}")
        return builder.finish()

    def _samples(self, paint: Paint) -> int:
        return self._supersample if paint.anti_alias else 1

    def _draw_path(self, path: Path, style: PathStyle) -> None:
        raster_path = self._to_raster_path(path)
        if style.fill_color is not None:
            paint = Paint(style.fill_color, anti_alias=self._antialias)
            fill_path(
                self._buffer,
                raster_path,
                paint.rgba8(),
                rule=style.fill_rule,
                opacity=style.opacity,
                samples=self._samples(paint),
            )
        if style.stroke_color is not None:
            paint = Paint(style.stroke_color, anti_alias=self._antialias)
            stroke_path(
                self._buffer,
                raster_path,
                paint.rgba8(),
                Stroke(style.stroke_width),
                opacity=style.opacity,
                samples=self._samples(paint),
            )

    def _draw_text(self, text: str, position: Vector2D, style: TextStyle) -> None:
        x, y = self._frame.to_screen(position)
        draw_text(
            self._buffer,
            x,
            y,
            text,
            style.color.to_rgba8(),
            font_family=style.font_family,
            font_size_px=style.font_size,
            weight=style.font_weight,
            alignment=style.alignment,
            opacity=style.opacity,
        )

    def save_png(self, path: str | FilePath) -> FilePath:
        out = FilePath(path)
        try:
            out.parent.mkdir(parents=True, exist_ok=True)
            Image.fromarray(self._buffer).save(out, format="PNG")
        except OSError as exc:
            raise ExportError(f"failed to write PNG to {out}: {exc}") from exc
        LOGGER.debug("wrote PNG frame to %s", out)
        return out

    def save(self, path: str | FilePath) -> FilePath:
        return self.save_png(path)

    def duplicate(self) -> "RasterRenderer":
        copy = RasterRenderer(
            self.width,
            self.height,
            antialias=self._antialias,
            supersample=self._supersample,
            tolerance=self._tolerance,
        )
        copy._buffer = self._buffer.copy()
        return copy
