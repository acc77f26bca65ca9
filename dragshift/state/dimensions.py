"""Dimension lookup and construction helpers."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import replace

from dragshift.api.dimensions import (
    ClosestScrollable,
    DimensionFragment,
    DraggableDimension,
    DraggableId,
    DroppableDescriptor,
    DroppableDimension,
    DroppableViewport,
)
from dragshift.geometry import (
    Area,
    Axis,
    Position,
    Spacing,
    clip,
    expand_by_spacing,
    offset_by_position,
)


def get_draggables_inside_droppable(
    droppable: DroppableDimension,
    draggables: Mapping[DraggableId, DraggableDimension],
) -> list[DraggableDimension]:
    """Return the droppable's draggables ordered by index."""
    inside = [
        draggable
        for draggable in draggables.values()
        if draggable.descriptor.droppable_id == droppable.descriptor.id
    ]
    return sorted(inside, key=lambda draggable: draggable.descriptor.index)


def get_fragment(without_margin: Area, margin: Spacing | None = None) -> DimensionFragment:
    return DimensionFragment(
        with_margin=expand_by_spacing(without_margin, margin or Spacing()),
        without_margin=without_margin,
    )


def _clip_subject(subject: Area, closest_scrollable: ClosestScrollable | None) -> Area | None:
    if closest_scrollable is None:
        return subject
    displaced = offset_by_position(subject, closest_scrollable.diff.displacement)
    if not closest_scrollable.should_clip_subject:
        return displaced
    return clip(closest_scrollable.frame, displaced)


def get_droppable_dimension(
    *,
    descriptor: DroppableDescriptor,
    axis: Axis,
    page: DimensionFragment,
    closest_scrollable: ClosestScrollable | None = None,
    is_enabled: bool = True,
) -> DroppableDimension:
    """Build a droppable snapshot with its clipped subject computed."""
    subject = page.with_margin
    return DroppableDimension(
        descriptor=descriptor,
        axis=axis,
        page=page,
        viewport=DroppableViewport(
            closest_scrollable=closest_scrollable,
            subject=subject,
            clipped=_clip_subject(subject, closest_scrollable),
        ),
        is_enabled=is_enabled,
    )


def scroll_droppable(droppable: DroppableDimension, new_scroll: Position) -> DroppableDimension:
    """Return the droppable as seen after its scroll container moves to `new_scroll`."""
    scrollable = droppable.viewport.closest_scrollable
    if scrollable is None:
        raise ValueError(f"droppable {droppable.descriptor.id!r} has no scroll container")
    clamped = Position(
        x=max(0.0, min(new_scroll.x, scrollable.max_scroll.x)),
        y=max(0.0, min(new_scroll.y, scrollable.max_scroll.y)),
    )
    updated = replace(scrollable, current=clamped)
    viewport = replace(
        droppable.viewport,
        closest_scrollable=updated,
        clipped=_clip_subject(droppable.viewport.subject, updated),
    )
    return replace(droppable, viewport=viewport)
