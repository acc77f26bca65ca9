"""Axis-aligned page-space boxes."""

from __future__ import annotations

from dataclasses import dataclass

from dragshift.geometry.position import Position

_AREA_FIELDS = frozenset({"top", "right", "bottom", "left", "width", "height"})


@dataclass(frozen=True, slots=True)
class Area:
    """Box described by its four edges; size and center are derived."""

    top: float
    right: float
    bottom: float
    left: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def center(self) -> Position:
        return Position(x=(self.left + self.right) / 2, y=(self.top + self.bottom) / 2)

    def value(self, field: str) -> float:
        """Return an edge or size by name, as named by an `Axis`."""
        if field not in _AREA_FIELDS:
            raise ValueError(f"unknown area field: {field!r}")
        return float(getattr(self, field))


@dataclass(frozen=True, slots=True)
class Spacing:
    """Per-edge spacing such as a margin."""

    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0
    left: float = 0.0


def get_area(*, top: float, right: float, bottom: float, left: float) -> Area:
    return Area(top=top, right=right, bottom=bottom, left=left)


def offset_by_position(area: Area, point: Position) -> Area:
    """Translate a box by a vector."""
    return Area(
        top=area.top + point.y,
        right=area.right + point.x,
        bottom=area.bottom + point.y,
        left=area.left + point.x,
    )


def expand_by_spacing(area: Area, spacing: Spacing) -> Area:
    """Grow a box outward by spacing, e.g. content box to margin box."""
    return Area(
        top=area.top - spacing.top,
        right=area.right + spacing.right,
        bottom=area.bottom + spacing.bottom,
        left=area.left - spacing.left,
    )


def clip(frame: Area, subject: Area) -> Area | None:
    """Return the part of `subject` inside `frame`, or None when nothing remains."""
    clipped = Area(
        top=max(subject.top, frame.top),
        right=min(subject.right, frame.right),
        bottom=min(subject.bottom, frame.bottom),
        left=max(subject.left, frame.left),
    )
    if clipped.width <= 0 or clipped.height <= 0:
        return None
    return clipped
