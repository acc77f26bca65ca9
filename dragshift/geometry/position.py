"""Two-dimensional position values and vector helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, TypeAlias

AxisLine: TypeAlias = Literal["x", "y"]


@dataclass(frozen=True, slots=True)
class Position:
    """Point or vector in page space."""

    x: float = 0.0
    y: float = 0.0

    def get(self, line: AxisLine) -> float:
        """Return the component along one axis line."""
        return self.x if line == "x" else self.y


ORIGIN = Position(0.0, 0.0)


def add(point1: Position, point2: Position) -> Position:
    return Position(x=point1.x + point2.x, y=point1.y + point2.y)


def subtract(point1: Position, point2: Position) -> Position:
    return Position(x=point1.x - point2.x, y=point1.y - point2.y)


def negate(point: Position) -> Position:
    return Position(x=-point.x, y=-point.y)


def absolute(point: Position) -> Position:
    return Position(x=abs(point.x), y=abs(point.y))


def is_equal(point1: Position, point2: Position) -> bool:
    return point1.x == point2.x and point1.y == point2.y


def patch(line: AxisLine, value: float, other_value: float = 0.0) -> Position:
    """Build a vector with `value` on `line` and `other_value` on the cross line."""
    if line == "x":
        return Position(x=value, y=other_value)
    return Position(x=other_value, y=value)
