"""Public dragshift API boundary."""

from dragshift.api.dimensions import (
    ClosestScrollable,
    DimensionFragment,
    DraggableDescriptor,
    DraggableDimension,
    DraggableId,
    DroppableDescriptor,
    DroppableDimension,
    DroppableId,
    DroppableViewport,
    ScrollDiff,
)
from dragshift.api.impact import (
    DisplacedSequence,
    Displacement,
    DragImpact,
    DragMovement,
    DraggableLocation,
    no_impact,
)
from dragshift.api.logging import LoggingConfig
from dragshift.api.moves import (
    Accepted,
    MoveOutcome,
    MoveResult,
    Rejected,
    RejectionReason,
    outcome_result,
)
from dragshift.api.window import WindowSnapshot, WindowView

__all__ = [
    "Accepted",
    "ClosestScrollable",
    "DimensionFragment",
    "DisplacedSequence",
    "Displacement",
    "DragImpact",
    "DragMovement",
    "DraggableDescriptor",
    "DraggableDimension",
    "DraggableId",
    "DraggableLocation",
    "DroppableDescriptor",
    "DroppableDimension",
    "DroppableId",
    "DroppableViewport",
    "LoggingConfig",
    "MoveOutcome",
    "MoveResult",
    "Rejected",
    "RejectionReason",
    "ScrollDiff",
    "WindowSnapshot",
    "WindowView",
    "no_impact",
    "outcome_result",
]
