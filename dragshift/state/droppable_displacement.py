"""Scroll compensation for points inside a scrolled droppable."""

from __future__ import annotations

from dragshift.api.dimensions import DroppableDimension
from dragshift.geometry import Position, add


def with_droppable_displacement(droppable: DroppableDimension, point: Position) -> Position:
    """Shift a page point by how far the droppable's content has scrolled."""
    scrollable = droppable.viewport.closest_scrollable
    if scrollable is None:
        return point
    return add(point, scrollable.diff.displacement)
