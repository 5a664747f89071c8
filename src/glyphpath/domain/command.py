"""Drawing command types.

A path is an ordered list of these commands, mirroring the absolute
commands of the SVG path-data language:

- Move: start a new sub-path (M)
- Line: straight segment (L)
- QuadCurve: quadratic Bezier with one control point (Q)
- CubicCurve: cubic Bezier with two control points (C)
- Close: close the current sub-path (Z)

Each variant only carries the fields it needs.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import ClassVar, TypeAlias

PointMapper: TypeAlias = Callable[[float, float], tuple[float, float]]


@dataclass(frozen=True, slots=True)
class Move:
    """Start a new sub-path at (x, y)."""

    letter: ClassVar[str] = "M"

    x: float
    y: float

    def values(self) -> tuple[float, ...]:
        """Coordinates in path-data order."""
        return (self.x, self.y)

    def end_point(self) -> tuple[float, float]:
        return (self.x, self.y)

    def control_points(self) -> list[tuple[float, float]]:
        return []

    def mapped(self, fn: PointMapper) -> "Move":
        """Return a new Move with its point passed through fn."""
        return Move(*fn(self.x, self.y))


@dataclass(frozen=True, slots=True)
class Line:
    """Straight segment to (x, y)."""

    letter: ClassVar[str] = "L"

    x: float
    y: float

    def values(self) -> tuple[float, ...]:
        """Coordinates in path-data order."""
        return (self.x, self.y)

    def end_point(self) -> tuple[float, float]:
        return (self.x, self.y)

    def control_points(self) -> list[tuple[float, float]]:
        return []

    def mapped(self, fn: PointMapper) -> "Line":
        """Return a new Line with its point passed through fn."""
        return Line(*fn(self.x, self.y))


@dataclass(frozen=True, slots=True)
class QuadCurve:
    """Quadratic Bezier segment.

    Attributes:
        x1: Control point X
        y1: Control point Y
        x: End point X
        y: End point Y
    """

    letter: ClassVar[str] = "Q"

    x1: float
    y1: float
    x: float
    y: float

    def values(self) -> tuple[float, ...]:
        """Coordinates in path-data order."""
        return (self.x1, self.y1, self.x, self.y)

    def end_point(self) -> tuple[float, float]:
        return (self.x, self.y)

    def control_points(self) -> list[tuple[float, float]]:
        return [(self.x1, self.y1)]

    def mapped(self, fn: PointMapper) -> "QuadCurve":
        """Return a new QuadCurve with every point passed through fn."""
        x1, y1 = fn(self.x1, self.y1)
        x, y = fn(self.x, self.y)
        return QuadCurve(x1, y1, x, y)


@dataclass(frozen=True, slots=True)
class CubicCurve:
    """Cubic Bezier segment.

    Attributes:
        x1: First control point X
        y1: First control point Y
        x2: Second control point X
        y2: Second control point Y
        x: End point X
        y: End point Y
    """

    letter: ClassVar[str] = "C"

    x1: float
    y1: float
    x2: float
    y2: float
    x: float
    y: float

    def values(self) -> tuple[float, ...]:
        """Coordinates in path-data order."""
        return (self.x1, self.y1, self.x2, self.y2, self.x, self.y)

    def end_point(self) -> tuple[float, float]:
        return (self.x, self.y)

    def control_points(self) -> list[tuple[float, float]]:
        return [(self.x1, self.y1), (self.x2, self.y2)]

    def mapped(self, fn: PointMapper) -> "CubicCurve":
        """Return a new CubicCurve with every point passed through fn."""
        x1, y1 = fn(self.x1, self.y1)
        x2, y2 = fn(self.x2, self.y2)
        x, y = fn(self.x, self.y)
        return CubicCurve(x1, y1, x2, y2, x, y)


@dataclass(frozen=True, slots=True)
class Close:
    """Close the current sub-path.

    Carries no coordinates and does not move the current point itself.
    """

    letter: ClassVar[str] = "Z"

    def values(self) -> tuple[float, ...]:
        return ()

    def end_point(self) -> None:
        return None

    def control_points(self) -> list[tuple[float, float]]:
        return []

    def mapped(self, fn: PointMapper) -> "Close":  # noqa: ARG002
        return Close()


Command: TypeAlias = Move | Line | QuadCurve | CubicCurve | Close

COMMAND_TYPES: tuple[type, ...] = (Move, Line, QuadCurve, CubicCurve, Close)


def is_command(obj: object) -> bool:
    """Check whether obj is one of the drawing command variants."""
    return isinstance(obj, COMMAND_TYPES)
