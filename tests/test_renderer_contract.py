from __future__ import annotations

import math
import unittest

import numpy as np

from manimate_core.errors import FrameStateError, RenderError
from manimate_core.geometry import Vector2D
from manimate_core.render import Color, Path, PathStyle, TextStyle
from manimate_core.targets import RasterRenderer, Renderer, SvgRenderer


def _line(end: Vector2D) -> Path:
    return Path().move_to(Vector2D(0.0, 0.0)).line_to(end)


class _RecordingRenderer(Renderer):
    def __init__(self) -> None:
        super().__init__(10, 10)
        self.calls: list[str] = []

    def _clear(self, color: Color) -> None:
        self.calls.append("clear")

    def _draw_path(self, path: Path, style: PathStyle) -> None:
        self.calls.append("path")

    def _draw_text(self, text: str, position: Vector2D, style: TextStyle) -> None:
        self.calls.append("text")

    def duplicate(self) -> "_RecordingRenderer":
        return _RecordingRenderer()


class RendererContractTests(unittest.TestCase):
    def _backends(self) -> list[Renderer]:
        return [SvgRenderer(16, 16), RasterRenderer(16, 16), _RecordingRenderer()]

    def test_frames_do_not_nest(self) -> None:
        for renderer in self._backends():
            with self.subTest(backend=type(renderer).__name__):
                renderer.begin_frame()
                with self.assertRaises(FrameStateError):
                    renderer.begin_frame()
                renderer.end_frame()
                with self.assertRaises(FrameStateError):
                    renderer.end_frame()
                self.assertEqual(renderer.frames_rendered, 1)

    def test_drawing_outside_frame_raises(self) -> None:
        for renderer in self._backends():
            with self.subTest(backend=type(renderer).__name__):
                with self.assertRaises(FrameStateError):
                    renderer.clear(Color.BLACK)
                with self.assertRaises(FrameStateError):
                    renderer.draw_path(_line(Vector2D(1.0, 1.0)), PathStyle())
                with self.assertRaises(FrameStateError):
                    renderer.draw_text("x", Vector2D.zero(), TextStyle())

    def test_non_finite_path_rejected_without_side_effects(self) -> None:
        raster = RasterRenderer(16, 16)
        svg = SvgRenderer(16, 16)
        for renderer in (raster, svg):
            with renderer.frame():
                renderer.clear(Color.BLACK)
                renderer.draw_path(_line(Vector2D(5.0, 5.0)), PathStyle())
        before_pixels = raster.pixels()
        before_doc = svg.to_string()
        for renderer in (raster, svg):
            with self.subTest(backend=type(renderer).__name__):
                renderer.begin_frame()
                renderer.clear(Color.BLACK)
                renderer.draw_path(_line(Vector2D(5.0, 5.0)), PathStyle())
                with self.assertRaises(RenderError):
                    renderer.draw_path(_line(Vector2D(math.nan, 1.0)), PathStyle())
                with self.assertRaises(RenderError):
                    renderer.draw_text("x", Vector2D(math.inf, 0.0), TextStyle())
                renderer.end_frame()
        self.assertTrue(np.array_equal(raster.pixels(), before_pixels))
        self.assertEqual(svg.to_string(), before_doc)

    def test_frame_context_aborts_on_error(self) -> None:
        renderer = SvgRenderer(16, 16)
        with renderer.frame():
            renderer.draw_path(_line(Vector2D(1.0, 1.0)), PathStyle())
        committed = renderer.to_string()
        with self.assertRaises(KeyError):
            with renderer.frame():
                renderer.clear(Color.RED)
                raise KeyError("boom")
        self.assertFalse(renderer.in_frame)
        self.assertEqual(renderer.frames_rendered, 1)
        self.assertEqual(renderer.to_string(), committed)
        with renderer.frame():
            pass
        self.assertEqual(renderer.frames_rendered, 2)

    def test_empty_path_and_text_are_no_ops(self) -> None:
        renderer = _RecordingRenderer()
        with renderer.frame():
            renderer.draw_path(Path(), PathStyle())
            renderer.draw_text("", Vector2D.zero(), TextStyle())
            renderer.clear(Color.BLACK)
        self.assertEqual(renderer.calls, ["clear"])

    def test_dimensions_validated_and_stable(self) -> None:
        for bad in ((0, 10), (10, -1), (1.5, 10), (True, 10)):
            with self.subTest(size=bad):
                with self.assertRaises(ValueError):
                    SvgRenderer(*bad)
                with self.assertRaises(ValueError):
                    RasterRenderer(*bad)
        renderer = RasterRenderer(7, 3)
        with renderer.frame():
            renderer.clear(Color.WHITE)
        self.assertEqual(renderer.dimensions(), (7, 3))

    def test_duplicate_keeps_concrete_type(self) -> None:
        for renderer in self._backends():
            with self.subTest(backend=type(renderer).__name__):
                copy = renderer.duplicate()
                self.assertIs(type(copy), type(renderer))
                self.assertEqual(copy.dimensions(), renderer.dimensions())
                self.assertIsNot(copy, renderer)


if __name__ == "__main__":
    unittest.main()
