"""Index-by-index reordering of a dragged item in a single-axis list."""

from dragshift.api import (
    Accepted,
    DragImpact,
    MoveOutcome,
    MoveResult,
    Rejected,
    RejectionReason,
    outcome_result,
)
from dragshift.state import MoveToNextIndexArgs, move_to_next_index

__all__ = [
    "Accepted",
    "DragImpact",
    "MoveOutcome",
    "MoveResult",
    "MoveToNextIndexArgs",
    "Rejected",
    "RejectionReason",
    "move_to_next_index",
    "outcome_result",
]
