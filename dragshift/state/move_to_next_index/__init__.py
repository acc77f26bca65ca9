"""Keyboard-style moves of a dragging item to the next index."""

from __future__ import annotations

from dragshift.api.moves import MoveOutcome, RejectionReason
from dragshift.state.move_to_next_index.in_home_list import in_home_list
from dragshift.state.move_to_next_index.rejections import reject
from dragshift.state.move_to_next_index.types import MoveToNextIndexArgs


def move_to_next_index(args: MoveToNextIndexArgs) -> MoveOutcome:
    """Resolve a move request for a drag that stays inside its home droppable."""
    location = args.previous_impact.destination
    if location is None:
        return in_home_list(args)
    if location.droppable_id != args.droppable.descriptor.id:
        return reject(
            RejectionReason.FOREIGN_DESTINATION,
            f"previous destination {location.droppable_id!r} is not droppable "
            f"{args.droppable.descriptor.id!r}",
        )
    draggable = args.draggables.get(args.draggable_id)
    if draggable is not None and draggable.descriptor.droppable_id != location.droppable_id:
        return reject(
            RejectionReason.FOREIGN_DESTINATION,
            f"draggable {args.draggable_id!r} belongs to "
            f"{draggable.descriptor.droppable_id!r}, not {location.droppable_id!r}",
        )
    return in_home_list(args)


__all__ = ["MoveToNextIndexArgs", "in_home_list", "move_to_next_index"]
