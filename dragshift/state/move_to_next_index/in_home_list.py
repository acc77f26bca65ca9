"""Move the dragging item one index within its own droppable."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from dragshift.api.dimensions import DraggableDimension, DraggableId, DroppableDimension
from dragshift.api.impact import (
    DisplacedSequence,
    Displacement,
    DragImpact,
    DragMovement,
    DraggableLocation,
)
from dragshift.api.moves import Accepted, MoveOutcome, MoveResult, RejectionReason
from dragshift.geometry import Area, Edge, patch, subtract
from dragshift.state.dimensions import get_draggables_inside_droppable
from dragshift.state.displacement import get_displacement
from dragshift.state.droppable_displacement import with_droppable_displacement
from dragshift.state.move_to_edge import move_to_edge
from dragshift.state.move_to_next_index.rejections import reject
from dragshift.state.move_to_next_index.types import MoveToNextIndexArgs
from dragshift.state.viewport import get_viewport
from dragshift.state.visibility import is_totally_visible_in_new_location


@dataclass(frozen=True, slots=True)
class _DisplacedEntry:
    """Displacement pending refresh; `resolved` entries are already final."""

    displacement: Displacement
    resolved: bool


def _index_of(items: Sequence[DraggableDimension], draggable_id: DraggableId) -> int:
    for index, item in enumerate(items):
        if item.descriptor.id == draggable_id:
            return index
    return -1


def _alignment_edge(*, is_moving_forward: bool, is_moving_toward_start: bool) -> Edge:
    # heading away from the start: line up with the far edge of the next item
    if not is_moving_toward_start:
        return "end" if is_moving_forward else "start"
    # heading back: line up with the near edge of the item being released
    return "start" if is_moving_forward else "end"


def _recompute_displaced(
    *,
    previous_impact: DragImpact,
    destination: DraggableDimension,
    droppable: DroppableDimension,
    draggables: Mapping[DraggableId, DraggableDimension],
    is_moving_toward_start: bool,
    viewport: Area,
) -> DisplacedSequence:
    previous = previous_impact.movement.displaced
    if is_moving_toward_start:
        # the most recently displaced item goes back to its slot
        entries = [_DisplacedEntry(item, resolved=False) for item in previous.pop_front()]
    else:
        added = Displacement(
            draggable_id=destination.descriptor.id,
            is_visible=True,
            should_animate=True,
        )
        newest, *rest = previous.push_front(added)
        entries = [
            _DisplacedEntry(newest, resolved=True),
            *(_DisplacedEntry(item, resolved=False) for item in rest),
        ]
    return DisplacedSequence.of(
        entry.displacement
        if entry.resolved
        else get_displacement(
            draggable=draggables[entry.displacement.draggable_id],
            destination=droppable,
            previous_impact=previous_impact,
            viewport=viewport,
        )
        for entry in entries
    )


def in_home_list(args: MoveToNextIndexArgs) -> MoveOutcome:
    """Move the dragging item one slot forward or backward in its home droppable.

    Items passed on the way away from the start index are displaced; heading
    back releases them again, most recent first. When the new location is not
    fully visible the result carries a scroll jump request and keeps the
    previous page center, while the impact still advances.
    """
    location = args.previous_impact.destination
    if location is None:
        return reject(
            RejectionReason.NO_PREVIOUS_DESTINATION,
            "cannot move to next index when there is no previous destination",
        )

    droppable = args.droppable
    axis = droppable.axis
    inside = get_draggables_inside_droppable(droppable, args.draggables)

    start_index = _index_of(inside, args.draggable_id)
    if start_index == -1:
        return reject(
            RejectionReason.DRAGGABLE_NOT_FOUND,
            f"could not find draggable {args.draggable_id!r} inside droppable "
            f"{droppable.descriptor.id!r}",
        )

    draggable = inside[start_index]
    current_index = location.index
    proposed_index = current_index + 1 if args.is_moving_forward else current_index - 1

    if proposed_index > len(inside) - 1 or proposed_index < 0:
        return reject(
            RejectionReason.OUT_OF_BOUNDS,
            f"index {proposed_index} is outside 0..{len(inside) - 1}",
        )

    viewport = get_viewport(args.window)
    destination = inside[proposed_index]
    is_moving_toward_start = (args.is_moving_forward and proposed_index <= start_index) or (
        not args.is_moving_forward and proposed_index >= start_index
    )

    edge = _alignment_edge(
        is_moving_forward=args.is_moving_forward,
        is_moving_toward_start=is_moving_toward_start,
    )
    new_page_center = move_to_edge(
        source=draggable.page.without_margin,
        source_edge=edge,
        destination=destination.page.without_margin,
        destination_edge=edge,
        destination_axis=axis,
    )

    displaced = _recompute_displaced(
        previous_impact=args.previous_impact,
        destination=destination,
        droppable=droppable,
        draggables=args.draggables,
        is_moving_toward_start=is_moving_toward_start,
        viewport=viewport,
    )

    impact = DragImpact(
        movement=DragMovement(
            displaced=displaced,
            # every displaced item shifts by the size of the dragging item
            amount=patch(axis.line, draggable.page.with_margin.value(axis.size)),
            is_beyond_start_position=proposed_index > start_index,
        ),
        destination=DraggableLocation(
            droppable_id=droppable.descriptor.id,
            index=proposed_index,
        ),
        direction=axis.direction,
    )

    is_visible_in_new_location = is_totally_visible_in_new_location(
        draggable=draggable,
        destination=droppable,
        new_page_center=new_page_center,
        viewport=viewport,
    )

    if is_visible_in_new_location:
        return Accepted(
            MoveResult(
                page_center=with_droppable_displacement(droppable, new_page_center),
                impact=impact,
                scroll_jump_request=None,
            )
        )

    required_distance = subtract(new_page_center, args.previous_page_center)
    return Accepted(
        MoveResult(
            page_center=args.previous_page_center,
            impact=impact,
            scroll_jump_request=with_droppable_displacement(droppable, required_distance),
        )
    )
