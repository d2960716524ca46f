from __future__ import annotations

import random
import unittest

from manimate_core.errors import GeometryError
from manimate_core.geometry import BoundingBox, Vector2D


def _box(x0: float, y0: float, x1: float, y1: float) -> BoundingBox:
    return BoundingBox(Vector2D(x0, y0), Vector2D(x1, y1))


class BoundingBoxTests(unittest.TestCase):
    def test_from_points_contains_every_point(self) -> None:
        rng = random.Random(7)
        for _ in range(20):
            pts = [Vector2D(rng.uniform(-50, 50), rng.uniform(-50, 50)) for _ in range(rng.randint(1, 30))]
            box = BoundingBox.from_points(pts)
            for p in pts:
                self.assertTrue(box.contains(p))

    def test_from_points_empty_input_is_empty_sentinel(self) -> None:
        box = BoundingBox.from_points([])
        self.assertTrue(box.is_empty())
        self.assertIs(box, BoundingBox.empty())
        self.assertFalse(box.contains(Vector2D.zero()))
        self.assertEqual(box.width(), 0.0)

    def test_inverted_box_rejected(self) -> None:
        with self.assertRaises(GeometryError):
            _box(1.0, 0.0, 0.0, 1.0)

    def test_measurements(self) -> None:
        box = _box(-1.0, 2.0, 3.0, 5.0)
        self.assertEqual(box.width(), 4.0)
        self.assertEqual(box.height(), 3.0)
        self.assertEqual(box.center(), Vector2D(1.0, 3.5))
        self.assertEqual(box.area(), 12.0)
        self.assertEqual(box.perimeter(), 14.0)
        self.assertEqual(box.size(), Vector2D(4.0, 3.0))
        with self.assertRaises(GeometryError):
            BoundingBox.empty().center()

    def test_contains_is_closed_interval(self) -> None:
        box = _box(0.0, 0.0, 10.0, 10.0)
        self.assertTrue(box.contains(Vector2D(0.0, 10.0)))
        self.assertTrue(box.contains(Vector2D(10.0, 0.0)))
        self.assertFalse(box.contains(Vector2D(10.000001, 5.0)))

    def test_union_contains_both_and_is_commutative_and_associative(self) -> None:
        rng = random.Random(11)
        for _ in range(25):
            boxes = []
            for _ in range(3):
                x0, x1 = sorted(rng.uniform(-20, 20) for _ in range(2))
                y0, y1 = sorted(rng.uniform(-20, 20) for _ in range(2))
                boxes.append(_box(x0, y0, x1, y1))
            a, b, c = boxes
            self.assertTrue(a.union(b).contains_box(a))
            self.assertTrue(a.union(b).contains_box(b))
            self.assertEqual(a.union(b), b.union(a))
            self.assertEqual(a.union(b).union(c), a.union(b.union(c)))

    def test_empty_is_absorbed_by_union(self) -> None:
        box = _box(0.0, 0.0, 1.0, 1.0)
        self.assertEqual(box.union(BoundingBox.empty()), box)
        self.assertEqual(BoundingBox.empty().union(box), box)

    def test_intersection(self) -> None:
        a = _box(0.0, 0.0, 10.0, 10.0)
        b = _box(5.0, 5.0, 15.0, 15.0)
        self.assertTrue(a.intersects(b))
        self.assertEqual(a.intersection(b), _box(5.0, 5.0, 10.0, 10.0))
        touching = _box(10.0, 0.0, 12.0, 2.0)
        self.assertTrue(a.intersects(touching))
        far = _box(20.0, 20.0, 30.0, 30.0)
        self.assertFalse(a.intersects(far))
        self.assertIsNone(a.intersection(far))
        self.assertFalse(a.intersects(BoundingBox.empty()))

    def test_expand_translate_scale(self) -> None:
        box = _box(0.0, 0.0, 2.0, 4.0)
        self.assertEqual(box.expand_to_include(Vector2D(-1.0, 5.0)), _box(-1.0, 0.0, 2.0, 5.0))
        self.assertEqual(box.expand_by_margin(1.0), _box(-1.0, -1.0, 3.0, 5.0))
        self.assertEqual(box.translate(Vector2D(1.0, -1.0)), _box(1.0, -1.0, 3.0, 3.0))
        self.assertEqual(box.scale(2.0), _box(-1.0, -2.0, 3.0, 6.0))
        self.assertEqual(box.scale(-1.0), box)
        self.assertEqual(BoundingBox.empty().expand_to_include(Vector2D(1.0, 1.0)), _box(1.0, 1.0, 1.0, 1.0))

    def test_corners_and_presets(self) -> None:
        box = _box(0.0, 0.0, 1.0, 2.0)
        self.assertEqual(box.corners()[2], Vector2D(1.0, 2.0))
        self.assertEqual(BoundingBox.zero().area(), 0.0)
        self.assertTrue(BoundingBox.infinite().contains_box(box))


if __name__ == "__main__":
    unittest.main()
