from __future__ import annotations

from dataclasses import replace

import pytest

from dragshift.api import DraggableDescriptor, WindowSnapshot
from dragshift.geometry import Area, Position
from dragshift.state import (
    get_draggables_inside_droppable,
    get_viewport,
    scroll_droppable,
    with_droppable_displacement,
)


def test_draggables_inside_droppable_are_filtered_and_ordered(list_factory) -> None:
    droppable, draggables = list_factory()
    shuffled = {key: draggables[key] for key in ("C", "A", "D", "B")}
    shuffled["X"] = replace(
        draggables["A"],
        descriptor=DraggableDescriptor(id="X", droppable_id="elsewhere", index=0),
    )

    inside = get_draggables_inside_droppable(droppable, shuffled)

    assert [item.descriptor.id for item in inside] == ["A", "B", "C", "D"]


def test_scroll_droppable_clamps_and_reclips(list_factory) -> None:
    droppable, _ = list_factory(frame_length=250.0)

    scrolled = scroll_droppable(droppable, Position(0.0, 500.0))

    scrollable = scrolled.viewport.closest_scrollable
    assert scrollable is not None
    assert scrollable.current == Position(0.0, 150.0)
    assert scrollable.diff.displacement == Position(0.0, -150.0)
    assert scrolled.viewport.clipped == Area(top=0.0, right=200.0, bottom=250.0, left=0.0)
    assert droppable.viewport.closest_scrollable is not None
    assert droppable.viewport.closest_scrollable.current == Position(0.0, 0.0)


def test_scroll_droppable_requires_scroll_container(list_factory) -> None:
    droppable, _ = list_factory()
    with pytest.raises(ValueError):
        scroll_droppable(droppable, Position(0.0, 10.0))


def test_droppable_displacement_offsets_points(list_factory) -> None:
    plain, _ = list_factory()
    scrolled, _ = list_factory(frame_length=250.0, current_scroll=Position(0.0, 40.0))
    point = Position(5.0, 60.0)

    assert with_droppable_displacement(plain, point) == point
    assert with_droppable_displacement(scrolled, point) == Position(5.0, 20.0)


def test_viewport_follows_window_scroll() -> None:
    window = WindowSnapshot(scroll_x=10.0, scroll_y=300.0, width=800.0, height=600.0)
    assert get_viewport(window) == Area(top=300.0, right=810.0, bottom=900.0, left=10.0)
