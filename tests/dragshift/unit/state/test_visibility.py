from __future__ import annotations

from dataclasses import replace

from dragshift.geometry import Area, Position
from dragshift.state import (
    is_partially_visible_through_frame,
    is_totally_visible,
    is_totally_visible_in_new_location,
    is_totally_visible_through_frame,
)

FRAME = Area(top=0.0, right=100.0, bottom=100.0, left=0.0)


def test_partial_visibility_through_frame() -> None:
    check = is_partially_visible_through_frame(FRAME)
    assert check(Area(top=10.0, right=90.0, bottom=90.0, left=10.0))
    assert check(Area(top=-50.0, right=50.0, bottom=50.0, left=-50.0))
    assert check(Area(top=-10.0, right=110.0, bottom=110.0, left=-10.0))
    assert check(Area(top=-10.0, right=50.0, bottom=110.0, left=20.0))
    assert not check(Area(top=120.0, right=50.0, bottom=150.0, left=0.0))


def test_total_visibility_through_frame() -> None:
    check = is_totally_visible_through_frame(FRAME)
    assert check(Area(top=0.0, right=100.0, bottom=100.0, left=0.0))
    assert not check(Area(top=-1.0, right=50.0, bottom=50.0, left=0.0))


def test_nothing_is_visible_when_droppable_is_clipped_away(list_factory) -> None:
    droppable, draggables = list_factory(frame_length=100.0)
    hidden = replace(droppable, viewport=replace(droppable.viewport, clipped=None))

    assert not is_totally_visible(
        target=draggables["A"].page.with_margin,
        destination=hidden,
        viewport=Area(top=0.0, right=1000.0, bottom=1000.0, left=0.0),
    )


def test_new_location_accounts_for_scroll_displacement(list_factory) -> None:
    droppable, draggables = list_factory(frame_length=250.0, current_scroll=Position(0.0, 100.0))
    viewport = Area(top=0.0, right=1000.0, bottom=1000.0, left=0.0)

    # centered on D (300..400), which shows at 200..300 after scrolling 100
    assert not is_totally_visible_in_new_location(
        draggable=draggables["A"],
        destination=droppable,
        new_page_center=Position(100.0, 350.0),
        viewport=viewport,
    )
    # centered on C (200..300), which shows at 100..200
    assert is_totally_visible_in_new_location(
        draggable=draggables["A"],
        destination=droppable,
        new_page_center=Position(100.0, 250.0),
        viewport=viewport,
    )
