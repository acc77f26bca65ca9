"""Public draggable and droppable dimension snapshots."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from dragshift.geometry import Area, Axis, Position, negate, subtract

DraggableId: TypeAlias = str
DroppableId: TypeAlias = str


@dataclass(frozen=True, slots=True)
class DraggableDescriptor:
    """Stable identity of a draggable and its slot in a droppable."""

    id: DraggableId
    droppable_id: DroppableId
    index: int


@dataclass(frozen=True, slots=True)
class DimensionFragment:
    """Margin and content boxes of one element in a single coordinate space."""

    with_margin: Area
    without_margin: Area


@dataclass(frozen=True, slots=True)
class DraggableDimension:
    descriptor: DraggableDescriptor
    page: DimensionFragment


@dataclass(frozen=True, slots=True)
class ScrollDiff:
    """Scroll change since lift and the matching shift of the scrolled content."""

    value: Position
    displacement: Position


@dataclass(frozen=True, slots=True)
class ClosestScrollable:
    """Nearest scroll container of a droppable."""

    frame: Area
    initial: Position
    current: Position
    max_scroll: Position
    should_clip_subject: bool = True

    @property
    def diff(self) -> ScrollDiff:
        value = subtract(self.current, self.initial)
        return ScrollDiff(value=value, displacement=negate(value))


@dataclass(frozen=True, slots=True)
class DroppableViewport:
    """Visible portion of a droppable.

    `subject` is the droppable's own page box captured at lift. `clipped` is the
    subject shifted by the current scroll and cut down to the scroll frame, or
    None when no part of the droppable is visible through its frame.
    """

    closest_scrollable: ClosestScrollable | None
    subject: Area
    clipped: Area | None


@dataclass(frozen=True, slots=True)
class DroppableDescriptor:
    id: DroppableId
    type: str = "DEFAULT"


@dataclass(frozen=True, slots=True)
class DroppableDimension:
    """Ordered single-axis container snapshot."""

    descriptor: DroppableDescriptor
    axis: Axis
    page: DimensionFragment
    viewport: DroppableViewport
    is_enabled: bool = True
