"""Public drag impact records."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from dragshift.api.dimensions import DraggableId, DroppableId
from dragshift.geometry import ORIGIN, Direction, Position


@dataclass(frozen=True, slots=True)
class Displacement:
    """Marks one non-dragging item as pushed aside by the dragging item."""

    draggable_id: DraggableId
    is_visible: bool
    should_animate: bool


@dataclass(frozen=True, slots=True)
class DisplacedSequence:
    """Displaced items, most recently displaced first.

    Ids are unique. Growth and shrinkage happen only at the front: the item the
    drag pushed aside last is the first one released when the drag heads back
    toward where it started.
    """

    items: tuple[Displacement, ...] = ()

    def __post_init__(self) -> None:
        ids = [item.draggable_id for item in self.items]
        if len(ids) != len(set(ids)):
            raise ValueError(f"duplicate displaced ids: {ids!r}")

    @classmethod
    def of(cls, items: Iterable[Displacement]) -> DisplacedSequence:
        return cls(items=tuple(items))

    def push_front(self, displacement: Displacement) -> DisplacedSequence:
        """Return a sequence with `displacement` as the most recent entry."""
        return DisplacedSequence(items=(displacement, *self.items))

    def pop_front(self) -> DisplacedSequence:
        """Return a sequence without the most recent entry."""
        return DisplacedSequence(items=self.items[1:])

    def first(self) -> Displacement | None:
        return self.items[0] if self.items else None

    def ids(self) -> tuple[DraggableId, ...]:
        return tuple(item.draggable_id for item in self.items)

    def find(self, draggable_id: DraggableId) -> Displacement | None:
        for item in self.items:
            if item.draggable_id == draggable_id:
                return item
        return None

    def __contains__(self, draggable_id: object) -> bool:
        return any(item.draggable_id == draggable_id for item in self.items)

    def __iter__(self) -> Iterator[Displacement]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True, slots=True)
class DragMovement:
    displaced: DisplacedSequence
    amount: Position
    is_beyond_start_position: bool


@dataclass(frozen=True, slots=True)
class DraggableLocation:
    droppable_id: DroppableId
    index: int


@dataclass(frozen=True, slots=True)
class DragImpact:
    """Aggregate effect of the current drag position on a droppable."""

    movement: DragMovement
    destination: DraggableLocation | None
    direction: Direction | None


def no_impact() -> DragImpact:
    """Return an impact with nothing displaced and no destination."""
    return DragImpact(
        movement=DragMovement(
            displaced=DisplacedSequence(),
            amount=ORIGIN,
            is_beyond_start_position=False,
        ),
        destination=None,
        direction=None,
    )
