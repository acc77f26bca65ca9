from __future__ import annotations

from dragshift.geometry import HORIZONTAL, VERTICAL, Area, Position
from dragshift.state import move_to_edge

SOURCE = Area(top=0.0, right=50.0, bottom=20.0, left=10.0)
TARGET = Area(top=100.0, right=80.0, bottom=160.0, left=30.0)


def test_vertical_end_edges_align_bottoms() -> None:
    center = move_to_edge(
        source=SOURCE,
        source_edge="end",
        destination=TARGET,
        destination_edge="end",
        destination_axis=VERTICAL,
    )
    # source is 20 tall: center sits 10 above the target bottom, cross start aligned
    assert center == Position(50.0, 150.0)


def test_vertical_start_edges_align_tops() -> None:
    center = move_to_edge(
        source=SOURCE,
        source_edge="start",
        destination=TARGET,
        destination_edge="start",
        destination_axis=VERTICAL,
    )
    assert center == Position(50.0, 110.0)


def test_horizontal_edges_use_x_line() -> None:
    center = move_to_edge(
        source=SOURCE,
        source_edge="end",
        destination=TARGET,
        destination_edge="end",
        destination_axis=HORIZONTAL,
    )
    # source is 40 wide: center 20 left of the target right edge, top edges aligned
    assert center == Position(60.0, 110.0)
