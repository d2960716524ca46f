from __future__ import annotations

import unittest

from manimate_core.errors import PathError
from manimate_core.geometry import BoundingBox, Transform, Vector2D
from manimate_core.render import Close, CubicTo, LineTo, MoveTo, Path, PathCursor, QuadraticTo


def _square() -> Path:
    return (
        Path()
        .move_to(Vector2D(0.0, 0.0))
        .line_to(Vector2D(10.0, 0.0))
        .line_to(Vector2D(10.0, 10.0))
        .line_to(Vector2D(0.0, 10.0))
        .close()
    )


class PathBuildingTests(unittest.TestCase):
    def test_builder_records_commands_in_order(self) -> None:
        path = _square()
        self.assertEqual(len(path), 5)
        self.assertIsInstance(path.commands[0], MoveTo)
        self.assertIsInstance(path.commands[-1], Close)
        self.assertEqual(list(path), list(path.commands))

    def test_drawing_without_move_to_raises_and_appends_nothing(self) -> None:
        path = Path()
        with self.assertRaises(PathError):
            path.line_to(Vector2D(1.0, 1.0))
        with self.assertRaises(PathError):
            path.close()
        self.assertTrue(path.is_empty())

    def test_drawing_after_close_requires_new_contour(self) -> None:
        path = _square()
        with self.assertRaises(PathError):
            path.line_to(Vector2D(5.0, 5.0))
        self.assertEqual(len(path), 5)
        path.move_to(Vector2D(20.0, 20.0)).line_to(Vector2D(30.0, 20.0))
        self.assertEqual(len(path.contours()), 2)

    def test_extend_is_all_or_nothing(self) -> None:
        path = Path().move_to(Vector2D(0.0, 0.0))
        with self.assertRaises(PathError):
            path.extend([LineTo(Vector2D(1.0, 0.0)), Close(), LineTo(Vector2D(2.0, 0.0))])
        self.assertEqual(len(path), 1)
        with self.assertRaises(PathError):
            Path([LineTo(Vector2D(1.0, 0.0))])

    def test_close_returns_current_point_to_contour_start(self) -> None:
        path = Path().move_to(Vector2D(1.0, 2.0)).line_to(Vector2D(5.0, 5.0))
        self.assertEqual(path.current_point, Vector2D(5.0, 5.0))
        self.assertTrue(path.has_open_contour)
        path.close()
        self.assertEqual(path.current_point, Vector2D(1.0, 2.0))
        self.assertFalse(path.has_open_contour)

    def test_relative_commands(self) -> None:
        path = (
            Path()
            .move_to(Vector2D(1.0, 1.0))
            .relative_line_to(Vector2D(2.0, 0.0))
            .relative_quadratic_to(Vector2D(1.0, 1.0), Vector2D(2.0, 0.0))
            .relative_cubic_to(Vector2D(0.0, 1.0), Vector2D(1.0, 1.0), Vector2D(1.0, 0.0))
            .relative_move_to(Vector2D(0.0, -5.0))
        )
        self.assertEqual(path.commands[1], LineTo(Vector2D(3.0, 1.0)))
        self.assertEqual(path.commands[2], QuadraticTo(Vector2D(4.0, 2.0), Vector2D(5.0, 1.0)))
        self.assertEqual(path.commands[3], CubicTo(Vector2D(5.0, 2.0), Vector2D(6.0, 2.0), Vector2D(6.0, 1.0)))
        self.assertEqual(path.commands[4], MoveTo(Vector2D(6.0, -4.0)))

    def test_cursor_build_returns_independent_path(self) -> None:
        cursor = PathCursor().move_to(Vector2D(0.0, 0.0)).line_to(Vector2D(3.0, 4.0))
        self.assertEqual(cursor.position, Vector2D(3.0, 4.0))
        first = cursor.build()
        cursor.relative_line_to(Vector2D(1.0, 0.0))
        self.assertEqual(len(first), 2)
        self.assertEqual(len(cursor.build()), 3)

    def test_equality_and_duplicate(self) -> None:
        a = _square()
        b = a.duplicate()
        self.assertEqual(a, b)
        b.translate(1.0, 0.0)
        self.assertNotEqual(a, b)
        self.assertEqual(Path.from_commands(a.commands), a)

    def test_length_includes_closing_edge(self) -> None:
        self.assertAlmostEqual(_square().length(), 40.0)
        open_path = Path().move_to(Vector2D(0.0, 0.0)).line_to(Vector2D(3.0, 4.0))
        self.assertAlmostEqual(open_path.length(), 5.0)


class PathBoundsTests(unittest.TestCase):
    def test_empty_path_bounds_are_empty(self) -> None:
        self.assertTrue(Path().bounding_box().is_empty())

    def test_bounds_include_curve_extrema(self) -> None:
        path = (
            Path()
            .move_to(Vector2D(0.0, 0.0))
            .cubic_to(Vector2D(1.0, 2.0), Vector2D(3.0, 2.0), Vector2D(4.0, 0.0))
        )
        box = path.bounding_box()
        self.assertAlmostEqual(box.max.y, 1.5)
        self.assertAlmostEqual(box.max.x, 4.0)

    def test_bounds_are_cached_until_mutation(self) -> None:
        path = _square()
        first = path.bounding_box()
        self.assertIs(path.bounding_box(), first)
        self.assertEqual(first, BoundingBox(Vector2D(0.0, 0.0), Vector2D(10.0, 10.0)))
        path.move_to(Vector2D(-5.0, 20.0))
        second = path.bounding_box()
        self.assertIsNot(second, first)
        self.assertEqual(second, BoundingBox(Vector2D(-5.0, 0.0), Vector2D(10.0, 20.0)))

    def test_translate_moves_bounds(self) -> None:
        path = (
            Path()
            .move_to(Vector2D(-3.0, 1.0))
            .quadratic_to(Vector2D(0.0, 6.0), Vector2D(3.0, 1.0))
            .line_to(Vector2D(2.0, -4.0))
        )
        before = path.bounding_box()
        path.apply_transform(Transform.translate(7.0, -2.5))
        after = path.bounding_box()
        expected = before.translate(Vector2D(7.0, -2.5))
        self.assertTrue(after.min.is_close(expected.min))
        self.assertTrue(after.max.is_close(expected.max))

    def test_transform_applies_to_every_coordinate(self) -> None:
        path = Path().move_to(Vector2D(1.0, 0.0)).cubic_to(
            Vector2D(1.0, 1.0), Vector2D(2.0, 1.0), Vector2D(2.0, 0.0)
        )
        path.apply_transform(Transform.scale(2.0))
        self.assertEqual(path.commands[1], CubicTo(Vector2D(2.0, 2.0), Vector2D(4.0, 2.0), Vector2D(4.0, 0.0)))
        self.assertEqual(path.current_point, Vector2D(4.0, 0.0))


if __name__ == "__main__":
    unittest.main()
