"""Inputs for moving a dragging item to the next index."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from dragshift.api.dimensions import DraggableDimension, DraggableId, DroppableDimension
from dragshift.api.impact import DragImpact
from dragshift.api.window import WindowView
from dragshift.geometry import Position


@dataclass(frozen=True, slots=True)
class MoveToNextIndexArgs:
    """Drag state for one move request.

    `previous_impact` and `previous_page_center` are the values returned by the
    last accepted move (or the lift) and are never modified.
    """

    is_moving_forward: bool
    draggable_id: DraggableId
    previous_page_center: Position
    previous_impact: DragImpact
    droppable: DroppableDimension
    draggables: Mapping[DraggableId, DraggableDimension]
    window: WindowView
