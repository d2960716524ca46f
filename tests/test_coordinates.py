from __future__ import annotations

import unittest

from manimate_core.geometry import Vector2D
from manimate_core.render import CoordinateFrame, centered_frame, screen_frame


class CoordinateFrameTests(unittest.TestCase):
    def test_centered_frame_flips_y(self) -> None:
        frame = centered_frame(200, 100)
        self.assertEqual(frame.to_screen(Vector2D(0.0, 0.0)), (100.0, 50.0))
        self.assertEqual(frame.to_screen(Vector2D(10.0, 20.0)), (110.0, 30.0))
        self.assertEqual(frame.from_screen(110.0, 30.0), Vector2D(10.0, 20.0))

    def test_to_transform_matches_to_screen(self) -> None:
        frame = centered_frame(64, 48)
        transform = frame.to_transform()
        p = Vector2D(-7.5, 3.25)
        self.assertEqual(transform.apply(p).as_tuple(), frame.to_screen(p))

    def test_screen_frame_is_identity(self) -> None:
        frame = screen_frame()
        self.assertEqual(frame.to_screen(Vector2D(3.0, 4.0)), (3.0, 4.0))
        self.assertTrue(frame.to_transform().is_identity())

    def test_custom_frame_round_trip(self) -> None:
        frame = CoordinateFrame("scaled", origin=(10.0, 20.0), basis_x=(2.0, 0.0), basis_y=(0.0, 2.0))
        self.assertEqual(frame.to_screen(Vector2D(3.0, 4.0)), (16.0, 28.0))
        self.assertEqual(frame.from_screen(16.0, 28.0), Vector2D(3.0, 4.0))

    def test_invalid_frames_rejected(self) -> None:
        singular = CoordinateFrame("bad", origin=(0.0, 0.0), basis_x=(1.0, 0.0), basis_y=(2.0, 0.0))
        with self.assertRaises(ValueError):
            singular.from_screen(1.0, 1.0)
        with self.assertRaises(ValueError):
            centered_frame(0, 10)


if __name__ == "__main__":
    unittest.main()
