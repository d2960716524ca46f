from __future__ import annotations

from pathlib import Path
import tempfile
import unittest

from manimate_core.config import RenderConfig, load_render_config
from manimate_core.render import Color


class RenderConfigTests(unittest.TestCase):
    def _write(self, root: Path, body: str) -> Path:
        path = root / "render.toml"
        path.write_text(body, encoding="utf-8")
        return path

    def test_defaults(self) -> None:
        config = RenderConfig()
        self.assertEqual((config.width, config.height), (1920, 1080))
        self.assertTrue(config.antialias)
        self.assertEqual(config.supersample, 4)
        self.assertEqual(config.background_color(), Color.BLACK)

    def test_load_overrides_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = self._write(
                Path(tmp),
                '[render]\nwidth = 320\nheight = 240\nbackground = "#102030"\nantialias = false\nsvg_precision = 3\n',
            )
            config = load_render_config(path)
        self.assertEqual((config.width, config.height), (320, 240))
        self.assertEqual(config.background_color(), Color.rgb(16, 32, 48))
        self.assertFalse(config.antialias)
        self.assertEqual(config.svg_precision, 3)
        self.assertEqual(config.flatten_tolerance, 0.1)

    def test_missing_table_uses_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config = load_render_config(self._write(Path(tmp), 'title = "demo"\n'))
        self.assertEqual(config, RenderConfig())

    def test_missing_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(FileNotFoundError):
                load_render_config(Path(tmp) / "absent.toml")

    def test_rejects_unknown_keys_and_bad_values(self) -> None:
        bodies = (
            "[render]\nwdith = 10\n",
            "[render]\nwidth = 0\n",
            "[render]\nwidth = 1.5\n",
            "[render]\nantialias = 1\n",
            "[render]\nflatten_tolerance = -0.5\n",
            '[render]\nbackground = "blue-ish"\n',
            "render = 3\n",
            "[render\n",
        )
        with tempfile.TemporaryDirectory() as tmp:
            for body in bodies:
                with self.subTest(body=body):
                    with self.assertRaises(ValueError):
                        load_render_config(self._write(Path(tmp), body))

    def test_with_size_revalidates(self) -> None:
        self.assertEqual(RenderConfig().with_size(64, 32).width, 64)
        with self.assertRaises(ValueError):
            RenderConfig().with_size(-1, 32)


if __name__ == "__main__":
    unittest.main()
