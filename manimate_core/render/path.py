"""Backend-agnostic path representation.

A `Path` is an ordered list of drawing commands forming one or more contours.
Every contour starts with `MoveTo`; `Close` ends the most recent contour and
returns the current point to its start. Issuing a drawing command with no open
contour raises `PathError` and leaves the path untouched.

The bounding box is tight (curve extrema included) and cached; any mutation
marks the cache stale and it is recomputed on the next query.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Union

from manimate_core.errors import PathError
from manimate_core.geometry import BoundingBox, CubicBezier, QuadraticBezier, Transform, Vector2D


@dataclass(frozen=True)
class MoveTo:
    to: Vector2D

    def points(self) -> tuple[Vector2D, ...]:
        return (self.to,)

    def transformed(self, transform: Transform) -> "MoveTo":
        return MoveTo(transform.apply(self.to))


@dataclass(frozen=True)
class LineTo:
    to: Vector2D

    def points(self) -> tuple[Vector2D, ...]:
        return (self.to,)

    def transformed(self, transform: Transform) -> "LineTo":
        return LineTo(transform.apply(self.to))


@dataclass(frozen=True)
class QuadraticTo:
    control: Vector2D
    to: Vector2D

    def points(self) -> tuple[Vector2D, ...]:
        return (self.control, self.to)

    def transformed(self, transform: Transform) -> "QuadraticTo":
        return QuadraticTo(transform.apply(self.control), transform.apply(self.to))


@dataclass(frozen=True)
class CubicTo:
    control1: Vector2D
    control2: Vector2D
    to: Vector2D

    def points(self) -> tuple[Vector2D, ...]:
        return (self.control1, self.control2, self.to)

    def transformed(self, transform: Transform) -> "CubicTo":
        return CubicTo(
            transform.apply(self.control1),
            transform.apply(self.control2),
            transform.apply(self.to),
        )


@dataclass(frozen=True)
class Close:
    def points(self) -> tuple[Vector2D, ...]:
        return ()

    def transformed(self, transform: Transform) -> "Close":
        return self


PathCommand = Union[MoveTo, LineTo, QuadraticTo, CubicTo, Close]

_COMMAND_TYPES = (MoveTo, LineTo, QuadraticTo, CubicTo, Close)


@dataclass(frozen=True)
class _CursorState:
    current: Vector2D
    contour_start: Vector2D | None
    contour_open: bool

    def advance(self, command: PathCommand) -> "_CursorState":
        if not isinstance(command, _COMMAND_TYPES):
            raise PathError(f"unsupported path command: {command!r}")
        if isinstance(command, MoveTo):
            return _CursorState(command.to, command.to, True)
        if not self.contour_open:
            raise PathError(f"{type(command).__name__} requires an open contour; start one with MoveTo")
        if isinstance(command, Close):
            start = self.contour_start if self.contour_start is not None else self.current
            return _CursorState(start, self.contour_start, False)
        return _CursorState(command.to, self.contour_start, True)


_INITIAL_STATE = _CursorState(Vector2D(0.0, 0.0), None, False)


class Path:
    def __init__(self, commands: Iterable[PathCommand] = ()) -> None:
        self._commands: list[PathCommand] = []
        self._cached_bounds: BoundingBox | None = None
        self._state = _INITIAL_STATE
        self.extend(commands)

    @classmethod
    def from_commands(cls, commands: Iterable[PathCommand]) -> "Path":
        return cls(commands)

    @property
    def commands(self) -> tuple[PathCommand, ...]:
        return tuple(self._commands)

    @property
    def current_point(self) -> Vector2D:
        return self._state.current

    @property
    def has_open_contour(self) -> bool:
        return self._state.contour_open

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[PathCommand]:
        return iter(tuple(self._commands))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._commands == other._commands

    def __repr__(self) -> str:
        return f"Path({self._commands!r})"

    def is_empty(self) -> bool:
        return not self._commands

    def move_to(self, point: Vector2D) -> "Path":
        return self.push(MoveTo(point))

    def line_to(self, point: Vector2D) -> "Path":
        return self.push(LineTo(point))

    def quadratic_to(self, control: Vector2D, to: Vector2D) -> "Path":
        return self.push(QuadraticTo(control, to))

    def cubic_to(self, control1: Vector2D, control2: Vector2D, to: Vector2D) -> "Path":
        return self.push(CubicTo(control1, control2, to))

    def close(self) -> "Path":
        return self.push(Close())

    def relative_move_to(self, delta: Vector2D) -> "Path":
        return self.move_to(self._state.current + delta)

    def relative_line_to(self, delta: Vector2D) -> "Path":
        return self.line_to(self._state.current + delta)

    def relative_quadratic_to(self, control_delta: Vector2D, to_delta: Vector2D) -> "Path":
        origin = self._state.current
        return self.quadratic_to(origin + control_delta, origin + to_delta)

    def relative_cubic_to(
        self, control1_delta: Vector2D, control2_delta: Vector2D, to_delta: Vector2D
    ) -> "Path":
        origin = self._state.current
        return self.cubic_to(origin + control1_delta, origin + control2_delta, origin + to_delta)

    def push(self, command: PathCommand) -> "Path":
        self._state = self._state.advance(command)
        self._commands.append(command)
        self._cached_bounds = None
        return self

    def extend(self, commands: Iterable[PathCommand]) -> "Path":
        pending = list(commands)
        if not pending:
            return self
        # All commands are validated before any is appended.
        state = self._state
        for command in pending:
            state = state.advance(command)
        self._commands.extend(pending)
        self._state = state
        self._cached_bounds = None
        return self

    def contours(self) -> list[list[PathCommand]]:
        groups: list[list[PathCommand]] = []
        for command in self._commands:
            if isinstance(command, MoveTo) or not groups:
                groups.append([])
            groups[-1].append(command)
        return groups

    def segments(self) -> Iterator[tuple[Vector2D, PathCommand]]:
        """Yield each drawing command with the point it starts from."""
        current = Vector2D.zero()
        start = current
        for command in self._commands:
            if isinstance(command, MoveTo):
                current = command.to
                start = current
                yield current, command
            elif isinstance(command, Close):
                yield current, command
                current = start
            else:
                yield current, command
                current = command.to

    def bounding_box(self) -> BoundingBox:
        if self._cached_bounds is None:
            self._cached_bounds = self._compute_bounds()
        return self._cached_bounds

    def _compute_bounds(self) -> BoundingBox:
        bounds = BoundingBox.empty()
        for origin, command in self.segments():
            if isinstance(command, (MoveTo, LineTo)):
                bounds = bounds.expand_to_include(command.to)
            elif isinstance(command, QuadraticTo):
                curve = QuadraticBezier(origin, command.control, command.to)
                bounds = bounds.union(curve.bounding_box())
            elif isinstance(command, CubicTo):
                curve = CubicBezier(origin, command.control1, command.control2, command.to)
                bounds = bounds.union(curve.bounding_box())
        return bounds

    def apply_transform(self, transform: Transform) -> "Path":
        for index, command in enumerate(self._commands):
            self._commands[index] = command.transformed(transform)
        state = self._state
        self._state = _CursorState(
            transform.apply(state.current),
            transform.apply(state.contour_start) if state.contour_start is not None else None,
            state.contour_open,
        )
        self._cached_bounds = None
        return self

    def translate(self, dx: float, dy: float) -> "Path":
        return self.apply_transform(Transform.translate(dx, dy))

    def length(self, samples_per_curve: int = 64) -> float:
        """Approximate outline length; curves are sampled, closing edges count."""
        total = 0.0
        start = Vector2D.zero()
        for origin, command in self.segments():
            if isinstance(command, MoveTo):
                start = command.to
            elif isinstance(command, LineTo):
                total += origin.distance_to(command.to)
            elif isinstance(command, QuadraticTo):
                curve = QuadraticBezier(origin, command.control, command.to)
                total += curve.arc_length(samples_per_curve)
            elif isinstance(command, CubicTo):
                curve = CubicBezier(origin, command.control1, command.control2, command.to)
                total += curve.arc_length(samples_per_curve)
            else:
                total += origin.distance_to(start)
        return total

    def duplicate(self) -> "Path":
        copy = Path()
        copy._commands = list(self._commands)
        copy._cached_bounds = self._cached_bounds
        copy._state = self._state
        return copy

    def is_finite(self) -> bool:
        return all(p.is_finite() for command in self._commands for p in command.points())


class PathCursor:
    """Chainable path builder tracking the current point; `build()` yields a Path."""

    def __init__(self) -> None:
        self._path = Path()

    @property
    def position(self) -> Vector2D:
        return self._path.current_point

    def move_to(self, point: Vector2D) -> "PathCursor":
        self._path.move_to(point)
        return self

    def line_to(self, point: Vector2D) -> "PathCursor":
        self._path.line_to(point)
        return self

    def relative_move_to(self, delta: Vector2D) -> "PathCursor":
        self._path.relative_move_to(delta)
        return self

    def relative_line_to(self, delta: Vector2D) -> "PathCursor":
        self._path.relative_line_to(delta)
        return self

    def quadratic_to(self, control: Vector2D, to: Vector2D) -> "PathCursor":
        self._path.quadratic_to(control, to)
        return self

    def cubic_to(self, control1: Vector2D, control2: Vector2D, to: Vector2D) -> "PathCursor":
        self._path.cubic_to(control1, control2, to)
        return self

    def close(self) -> "PathCursor":
        self._path.close()
        return self

    def build(self) -> Path:
        return self._path.duplicate()
