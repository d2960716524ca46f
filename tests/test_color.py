from __future__ import annotations

import unittest

from manimate_core.errors import ColorParseError
from manimate_core.render import Color


class ColorTests(unittest.TestCase):
    def test_channels_clamped_on_construction(self) -> None:
        c = Color(1.5, -0.2, 0.5, 2.0)
        self.assertEqual((c.r, c.g, c.b, c.a), (1.0, 0.0, 0.5, 1.0))

    def test_nan_channel_rejected(self) -> None:
        with self.assertRaises(ColorParseError):
            Color(float("nan"), 0.0, 0.0)

    def test_from_hex_forms(self) -> None:
        self.assertEqual(Color.from_hex("#FF0000"), Color.RED)
        self.assertEqual(Color.from_hex("00ff00"), Color.GREEN)
        self.assertEqual(Color.from_hex("#00f"), Color.BLUE)
        self.assertEqual(Color.from_hex("#FFFFFF00").a, 0.0)
        self.assertEqual(Color.from_hex("#0008").to_rgba8(), (0, 0, 0, 136))

    def test_from_hex_rejects_malformed_input(self) -> None:
        for bad in ("", "#", "#12", "#12345", "#GGGGGG", "#1234567"):
            with self.subTest(value=bad):
                with self.assertRaises(ColorParseError):
                    Color.from_hex(bad)
        with self.assertRaises(ColorParseError):
            Color.from_hex(123)  # type: ignore[arg-type]

    def test_parse_named_and_functional(self) -> None:
        self.assertEqual(Color.parse("Blue"), Color.BLUE)
        self.assertEqual(Color.parse("rgb(255, 0, 0)"), Color.RED)
        self.assertEqual(Color.parse("rgba(0, 0, 0, 0.5)").a, 0.5)
        self.assertEqual(Color.parse("#FFFF00"), Color.YELLOW)
        for bad in ("rgb(1, 2)", "rgb(300, 0, 0)", "hsl(0, 0, 0)", "notacolor"):
            with self.subTest(value=bad):
                with self.assertRaises(ColorParseError):
                    Color.parse(bad)

    def test_hex_round_trip_and_bytes(self) -> None:
        self.assertEqual(Color.rgb(18, 52, 86).to_hex(), "#123456")
        self.assertEqual(Color.rgba8(1, 2, 3, 4).to_rgba8(), (1, 2, 3, 4))
        self.assertEqual(Color.WHITE.to_hex(), "#FFFFFF")

    def test_lerp_and_with_alpha(self) -> None:
        mid = Color.BLACK.lerp(Color.WHITE, 0.5)
        self.assertEqual((mid.r, mid.g, mid.b), (0.5, 0.5, 0.5))
        self.assertEqual(Color.RED.with_alpha(0.25).a, 0.25)
        self.assertEqual(Color.RED.with_alpha(0.25).r, 1.0)


if __name__ == "__main__":
    unittest.main()
