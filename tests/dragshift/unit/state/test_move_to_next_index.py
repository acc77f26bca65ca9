from __future__ import annotations

import logging
from dataclasses import replace

from dragshift import Accepted, MoveToNextIndexArgs, Rejected, RejectionReason, move_to_next_index
from dragshift.api import DraggableDescriptor, DraggableLocation, no_impact, outcome_result
from dragshift.runtime.session import lift_impact
from dragshift.state.move_to_next_index.rejections import rejection_level


def _args(droppable, draggables, window, **overrides) -> MoveToNextIndexArgs:
    draggable = draggables["A"]
    args = MoveToNextIndexArgs(
        is_moving_forward=True,
        draggable_id="A",
        previous_page_center=draggable.page.without_margin.center,
        previous_impact=lift_impact(draggable, droppable),
        droppable=droppable,
        draggables=draggables,
        window=window,
    )
    return replace(args, **overrides)


def test_home_list_move_is_accepted(list_factory, big_window) -> None:
    droppable, draggables = list_factory()

    outcome = move_to_next_index(_args(droppable, draggables, big_window))

    assert isinstance(outcome, Accepted)
    result = outcome_result(outcome)
    assert result is not None
    assert result.impact.destination == DraggableLocation(droppable_id="list", index=1)


def test_destination_in_other_droppable_is_rejected(list_factory, big_window) -> None:
    droppable, draggables = list_factory()
    impact = replace(
        lift_impact(draggables["A"], droppable),
        destination=DraggableLocation(droppable_id="other", index=0),
    )

    outcome = move_to_next_index(_args(droppable, draggables, big_window, previous_impact=impact))

    assert isinstance(outcome, Rejected)
    assert outcome.reason is RejectionReason.FOREIGN_DESTINATION
    assert outcome_result(outcome) is None


def test_draggable_from_other_droppable_is_rejected(list_factory, big_window) -> None:
    droppable, draggables = list_factory()
    visitor = replace(
        draggables["A"],
        descriptor=DraggableDescriptor(id="A", droppable_id="other", index=0),
    )

    outcome = move_to_next_index(
        _args(droppable, draggables, big_window, draggables={**draggables, "A": visitor})
    )

    assert isinstance(outcome, Rejected)
    assert outcome.reason is RejectionReason.FOREIGN_DESTINATION


def test_missing_destination_falls_through_to_rejection(list_factory, big_window) -> None:
    droppable, draggables = list_factory()

    outcome = move_to_next_index(
        _args(droppable, draggables, big_window, previous_impact=no_impact())
    )

    assert isinstance(outcome, Rejected)
    assert outcome.reason is RejectionReason.NO_PREVIOUS_DESTINATION


def test_rejection_levels_separate_routine_from_indeterminate_state() -> None:
    assert rejection_level(RejectionReason.OUT_OF_BOUNDS) == logging.DEBUG
    assert rejection_level(RejectionReason.NO_PREVIOUS_DESTINATION) == logging.ERROR
    assert rejection_level(RejectionReason.DRAGGABLE_NOT_FOUND) == logging.ERROR
    assert rejection_level(RejectionReason.FOREIGN_DESTINATION) == logging.ERROR
