from __future__ import annotations

from collections.abc import Callable, Sequence

import pytest

from dragshift.api import (
    ClosestScrollable,
    DraggableDescriptor,
    DraggableDimension,
    DroppableDescriptor,
    DroppableDimension,
    WindowSnapshot,
)
from dragshift.geometry import VERTICAL, Area, Axis, Position, Spacing
from dragshift.state import get_droppable_dimension, get_fragment

LIST_ID = "list"
ITEM_LENGTH = 100.0
CROSS_LENGTH = 200.0

ListFactory = Callable[..., tuple[DroppableDimension, dict[str, DraggableDimension]]]


def build_list(
    ids: Sequence[str] = ("A", "B", "C", "D"),
    *,
    axis: Axis = VERTICAL,
    margin: Spacing | None = None,
    frame_length: float | None = None,
    initial_scroll: Position = Position(0.0, 0.0),
    current_scroll: Position | None = None,
    droppable_id: str = LIST_ID,
) -> tuple[DroppableDimension, dict[str, DraggableDimension]]:
    """Lay out equally sized items back to back from the page origin."""
    spacing = margin or Spacing()
    main_margin = (
        spacing.top + spacing.bottom if axis.direction == "vertical" else spacing.left + spacing.right
    )
    step = ITEM_LENGTH + main_margin
    draggables: dict[str, DraggableDimension] = {}
    for index, draggable_id in enumerate(ids):
        start = index * step
        if axis.direction == "vertical":
            box = Area(
                top=start + spacing.top,
                right=CROSS_LENGTH,
                bottom=start + spacing.top + ITEM_LENGTH,
                left=0.0,
            )
        else:
            box = Area(
                top=0.0,
                right=start + spacing.left + ITEM_LENGTH,
                bottom=CROSS_LENGTH,
                left=start + spacing.left,
            )
        draggables[draggable_id] = DraggableDimension(
            descriptor=DraggableDescriptor(id=draggable_id, droppable_id=droppable_id, index=index),
            page=get_fragment(box, spacing),
        )

    total = step * len(ids)
    if axis.direction == "vertical":
        subject = Area(top=0.0, right=CROSS_LENGTH, bottom=total, left=0.0)
    else:
        subject = Area(top=0.0, right=total, bottom=CROSS_LENGTH, left=0.0)

    closest_scrollable = None
    if frame_length is not None:
        if axis.direction == "vertical":
            frame = Area(top=0.0, right=CROSS_LENGTH, bottom=frame_length, left=0.0)
            max_scroll = Position(0.0, max(0.0, total - frame_length))
        else:
            frame = Area(top=0.0, right=frame_length, bottom=CROSS_LENGTH, left=0.0)
            max_scroll = Position(max(0.0, total - frame_length), 0.0)
        closest_scrollable = ClosestScrollable(
            frame=frame,
            initial=initial_scroll,
            current=current_scroll if current_scroll is not None else initial_scroll,
            max_scroll=max_scroll,
        )

    droppable = get_droppable_dimension(
        descriptor=DroppableDescriptor(id=droppable_id),
        axis=axis,
        page=get_fragment(subject),
        closest_scrollable=closest_scrollable,
    )
    return droppable, draggables


@pytest.fixture
def list_factory() -> ListFactory:
    return build_list


@pytest.fixture
def big_window() -> WindowSnapshot:
    return WindowSnapshot(scroll_x=0.0, scroll_y=0.0, width=1000.0, height=1000.0)
