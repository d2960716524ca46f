from __future__ import annotations

import math
import unittest

from manimate_core.errors import GeometryError
from manimate_core.geometry import Degrees, Transform, Vector2D


class TransformTests(unittest.TestCase):
    def test_apply_uses_affine_formula(self) -> None:
        t = Transform(a=1.0, b=2.0, c=3.0, d=4.0, e=5.0, f=6.0)
        # (a*x + c*y + e, b*x + d*y + f)
        self.assertEqual(t.apply(Vector2D(1.0, 1.0)), Vector2D(9.0, 12.0))
        self.assertEqual(t.apply_xy(2.0, 0.0), (7.0, 10.0))
        self.assertEqual(t.apply_vector(Vector2D(1.0, 1.0)), Vector2D(4.0, 6.0))

    def test_identity_is_neutral(self) -> None:
        t = Transform.rotate(0.3) @ Transform.translate(2.0, -1.0)
        self.assertEqual(Transform.identity() @ t, t)
        self.assertEqual(t @ Transform.identity(), t)
        self.assertTrue(Transform.identity().is_identity())
        self.assertFalse(t.is_identity())

    def test_composition_applies_inner_first(self) -> None:
        scale = Transform.scale(2.0)
        move = Transform.translate(10.0, 0.0)
        p = Vector2D(1.0, 1.0)
        self.assertEqual((move @ scale).apply(p), Vector2D(12.0, 2.0))
        self.assertEqual((scale @ move).apply(p), Vector2D(22.0, 2.0))
        self.assertEqual(scale.then(move), move @ scale)

    def test_composition_is_associative(self) -> None:
        a = Transform.rotate(Degrees(30.0))
        b = Transform.scale(2.0, 0.5)
        c = Transform.translate(-3.0, 7.0)
        self.assertTrue(((a @ b) @ c).is_close(a @ (b @ c)))

    def test_rotation(self) -> None:
        p = Transform.rotate(Degrees(90.0)).apply(Vector2D(1.0, 0.0))
        self.assertTrue(p.is_close(Vector2D(0.0, 1.0)))
        q = Transform.rotate(math.pi).apply(Vector2D(1.0, 2.0))
        self.assertTrue(q.is_close(Vector2D(-1.0, -2.0)))

    def test_inverse_round_trip(self) -> None:
        t = Transform.translate(3.0, -2.0) @ Transform.rotate(0.7) @ Transform.scale(2.0, 3.0)
        p = Vector2D(4.0, 5.0)
        self.assertTrue(t.inverse().apply(t.apply(p)).is_close(p))
        self.assertTrue((t @ t.inverse()).is_close(Transform.identity()))
        self.assertAlmostEqual(t.determinant(), 6.0)

    def test_singular_inverse_raises(self) -> None:
        with self.assertRaises(GeometryError):
            Transform.scale(0.0, 1.0).inverse()


if __name__ == "__main__":
    unittest.main()
