"""Visibility of page boxes through droppable frames and the viewport."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeAlias

from dragshift.api.dimensions import DraggableDimension, DroppableDimension
from dragshift.geometry import ORIGIN, Area, Position, offset_by_position, subtract

FrameCheck: TypeAlias = Callable[[Area], bool]


def _is_within(lower: float, upper: float) -> Callable[[float], bool]:
    return lambda value: lower <= value <= upper


def is_partially_visible_through_frame(frame: Area) -> FrameCheck:
    """Return a predicate telling whether any part of a box shows through `frame`."""
    within_vertical = _is_within(frame.top, frame.bottom)
    within_horizontal = _is_within(frame.left, frame.right)

    def check(subject: Area) -> bool:
        partially_vertical = within_vertical(subject.top) or within_vertical(subject.bottom)
        partially_horizontal = within_horizontal(subject.left) or within_horizontal(subject.right)
        if partially_vertical and partially_horizontal:
            return True
        bigger_vertical = subject.top < frame.top and subject.bottom > frame.bottom
        bigger_horizontal = subject.left < frame.left and subject.right > frame.right
        if bigger_vertical and bigger_horizontal:
            return True
        return (bigger_vertical and partially_horizontal) or (
            bigger_horizontal and partially_vertical
        )

    return check


def is_totally_visible_through_frame(frame: Area) -> FrameCheck:
    """Return a predicate telling whether a box sits entirely inside `frame`."""
    within_vertical = _is_within(frame.top, frame.bottom)
    within_horizontal = _is_within(frame.left, frame.right)

    def check(subject: Area) -> bool:
        return (
            within_vertical(subject.top)
            and within_vertical(subject.bottom)
            and within_horizontal(subject.left)
            and within_horizontal(subject.right)
        )

    return check


def _is_visible(
    *,
    target: Area,
    destination: DroppableDimension,
    viewport: Area,
    through_frame: Callable[[Area], FrameCheck],
) -> bool:
    scrollable = destination.viewport.closest_scrollable
    displacement = scrollable.diff.displacement if scrollable is not None else ORIGIN
    shifted = offset_by_position(target, displacement)
    clipped = destination.viewport.clipped
    # nothing of the droppable shows through its scroll frame
    if clipped is None:
        return False
    return through_frame(clipped)(shifted) and through_frame(viewport)(shifted)


def is_partially_visible(*, target: Area, destination: DroppableDimension, viewport: Area) -> bool:
    return _is_visible(
        target=target,
        destination=destination,
        viewport=viewport,
        through_frame=is_partially_visible_through_frame,
    )


def is_totally_visible(*, target: Area, destination: DroppableDimension, viewport: Area) -> bool:
    return _is_visible(
        target=target,
        destination=destination,
        viewport=viewport,
        through_frame=is_totally_visible_through_frame,
    )


def is_totally_visible_in_new_location(
    *,
    draggable: DraggableDimension,
    destination: DroppableDimension,
    new_page_center: Position,
    viewport: Area,
) -> bool:
    """Return whether the dragging item would be fully visible centered on `new_page_center`."""
    diff = subtract(new_page_center, draggable.page.without_margin.center)
    shifted = offset_by_position(draggable.page.with_margin, diff)
    return is_totally_visible(target=shifted, destination=destination, viewport=viewport)
