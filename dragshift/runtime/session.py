"""Stateful keyboard reorder session over the pure move computations."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, replace

from dragshift.api.dimensions import DraggableDimension, DraggableId, DroppableDimension
from dragshift.api.impact import (
    DisplacedSequence,
    DragImpact,
    DragMovement,
    DraggableLocation,
)
from dragshift.api.moves import MoveOutcome, Rejected
from dragshift.api.window import WindowSnapshot, WindowView
from dragshift.diagnostics import DiagnosticHub, create_diagnostic_hub
from dragshift.geometry import Position, add, patch, subtract
from dragshift.runtime.config import get_runtime_config
from dragshift.state import MoveToNextIndexArgs, move_to_next_index, scroll_droppable
from dragshift.state.move_to_next_index.rejections import rejection_level

logger = logging.getLogger(__name__)

REORDER_CATEGORY = "reorder"


@dataclass(frozen=True, slots=True)
class SessionState:
    """Drag state threaded from one move to the next."""

    page_center: Position
    impact: DragImpact
    droppable: DroppableDimension
    window: WindowSnapshot
    pending_scroll: Position | None = None


def lift_impact(draggable: DraggableDimension, droppable: DroppableDimension) -> DragImpact:
    """Return the impact of a freshly lifted item resting in its own slot."""
    axis = droppable.axis
    return DragImpact(
        movement=DragMovement(
            displaced=DisplacedSequence(),
            amount=patch(axis.line, draggable.page.with_margin.value(axis.size)),
            is_beyond_start_position=False,
        ),
        destination=DraggableLocation(
            droppable_id=droppable.descriptor.id,
            index=draggable.descriptor.index,
        ),
        direction=axis.direction,
    )


def _snapshot(window: WindowView) -> WindowSnapshot:
    return WindowSnapshot(
        scroll_x=window.scroll_x,
        scroll_y=window.scroll_y,
        width=window.width,
        height=window.height,
    )


class KeyboardReorderSession:
    """Reorder one draggable inside its home droppable one index at a time."""

    def __init__(
        self,
        *,
        draggable_id: DraggableId,
        droppable: DroppableDimension,
        draggables: Mapping[DraggableId, DraggableDimension],
        window: WindowView,
        hub: DiagnosticHub | None = None,
    ) -> None:
        draggable = draggables.get(draggable_id)
        if draggable is None or draggable.descriptor.droppable_id != droppable.descriptor.id:
            raise ValueError(
                f"draggable {draggable_id!r} is not inside droppable {droppable.descriptor.id!r}"
            )
        self._draggable_id = draggable_id
        self._draggables = dict(draggables)
        if hub is None:
            hub = create_diagnostic_hub(get_runtime_config().diagnostics)
        self._hub = hub
        self._dropped = False
        self._state = SessionState(
            page_center=draggable.page.without_margin.center,
            impact=lift_impact(draggable, droppable),
            droppable=droppable,
            window=_snapshot(window),
        )
        logger.debug(
            "reorder_lift draggable=%s droppable=%s index=%d",
            draggable_id,
            droppable.descriptor.id,
            draggable.descriptor.index,
        )

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def page_center(self) -> Position:
        return self._state.page_center

    @property
    def impact(self) -> DragImpact:
        return self._state.impact

    @property
    def pending_scroll(self) -> Position | None:
        return self._state.pending_scroll

    @property
    def hub(self) -> DiagnosticHub:
        return self._hub

    def update_window(self, window: WindowView) -> None:
        """Replace the window snapshot after an external scroll or resize."""
        self._state = replace(self._state, window=_snapshot(window))

    def move_forward(self) -> MoveOutcome:
        return self._move(is_moving_forward=True)

    def move_backward(self) -> MoveOutcome:
        return self._move(is_moving_forward=False)

    def apply_pending_scroll(self) -> Position | None:
        """Perform the last scroll jump request and return the applied vector.

        A scrollable droppable is scrolled underneath the dragging item, so the
        page center stays put. When the scroll is clamped at the container's
        limits the center takes up the part that could not be scrolled, which
        keeps it on the destination slot. Without a scroll container the window
        scrolls and the center travels with it.
        """
        request = self._state.pending_scroll
        if request is None:
            return None
        droppable = self._state.droppable
        scrollable = droppable.viewport.closest_scrollable
        if scrollable is not None:
            scrolled = scroll_droppable(droppable, add(scrollable.current, request))
            updated = scrolled.viewport.closest_scrollable
            assert updated is not None
            applied = subtract(updated.current, scrollable.current)
            self._state = replace(
                self._state,
                droppable=scrolled,
                page_center=add(self._state.page_center, subtract(request, applied)),
                pending_scroll=None,
            )
        else:
            window = self._state.window
            self._state = replace(
                self._state,
                window=replace(
                    window,
                    scroll_x=window.scroll_x + request.x,
                    scroll_y=window.scroll_y + request.y,
                ),
                page_center=add(self._state.page_center, request),
                pending_scroll=None,
            )
            applied = request
        logger.debug("reorder_scroll_applied x=%.1f y=%.1f", applied.x, applied.y)
        return applied

    def drop(self) -> DraggableLocation | None:
        """Finish the session and return where the item lands."""
        self._ensure_active()
        self._dropped = True
        destination = self._state.impact.destination
        self._hub.emit_fast(
            category=REORDER_CATEGORY,
            name="move.drop",
            value=None if destination is None else destination.index,
            metadata={"draggable_id": self._draggable_id},
        )
        return destination

    def _ensure_active(self) -> None:
        if self._dropped:
            raise RuntimeError(f"reorder session for {self._draggable_id!r} already dropped")

    def _move(self, *, is_moving_forward: bool) -> MoveOutcome:
        self._ensure_active()
        outcome = move_to_next_index(
            MoveToNextIndexArgs(
                is_moving_forward=is_moving_forward,
                draggable_id=self._draggable_id,
                previous_page_center=self._state.page_center,
                previous_impact=self._state.impact,
                droppable=self._state.droppable,
                draggables=self._draggables,
                window=self._state.window,
            )
        )
        if isinstance(outcome, Rejected):
            self._hub.emit_fast(
                category=REORDER_CATEGORY,
                name="move.rejected",
                level=logging.getLevelName(rejection_level(outcome.reason)).lower(),
                value=outcome.reason.value,
                metadata={"draggable_id": self._draggable_id, "detail": outcome.message},
            )
            return outcome

        result = outcome.result
        self._state = replace(
            self._state,
            page_center=result.page_center,
            impact=result.impact,
            pending_scroll=result.scroll_jump_request,
        )
        destination = result.impact.destination
        self._hub.emit_fast(
            category=REORDER_CATEGORY,
            name="move.accepted" if result.scroll_jump_request is None else "move.scroll_jump",
            value=None if destination is None else destination.index,
            metadata={
                "draggable_id": self._draggable_id,
                "displaced": list(result.impact.movement.displaced.ids()),
            },
        )
        return outcome
