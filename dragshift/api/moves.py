"""Public move-to-next-index outcome types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TypeAlias

from dragshift.api.impact import DragImpact
from dragshift.geometry import Position


class RejectionReason(StrEnum):
    NO_PREVIOUS_DESTINATION = "no_previous_destination"
    DRAGGABLE_NOT_FOUND = "draggable_not_found"
    FOREIGN_DESTINATION = "foreign_destination"
    OUT_OF_BOUNDS = "out_of_bounds"


@dataclass(frozen=True, slots=True)
class MoveResult:
    """New drag state after moving one index.

    When `scroll_jump_request` is None the dragging item moves straight to
    `page_center`. Otherwise `page_center` is the unchanged previous center and
    the caller should scroll the droppable by `scroll_jump_request`.
    """

    page_center: Position
    impact: DragImpact
    scroll_jump_request: Position | None


@dataclass(frozen=True, slots=True)
class Accepted:
    result: MoveResult


@dataclass(frozen=True, slots=True)
class Rejected:
    """Move request that was ignored; nothing about the drag changes."""

    reason: RejectionReason
    message: str


MoveOutcome: TypeAlias = Accepted | Rejected


def outcome_result(outcome: MoveOutcome) -> MoveResult | None:
    """Collapse an outcome into its result, None for rejections."""
    if isinstance(outcome, Accepted):
        return outcome.result
    return None
