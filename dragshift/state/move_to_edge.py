"""Edge-to-edge alignment of two boxes along an axis."""

from __future__ import annotations

from dragshift.geometry import Area, Axis, Edge, Position, absolute, add, patch, subtract


def _corner(area: Area, axis: Axis, edge: Edge) -> Position:
    return patch(axis.line, area.value(axis.edge_field(edge)), area.value(axis.cross_axis_start))


def move_to_edge(
    *,
    source: Area,
    source_edge: Edge,
    destination: Area,
    destination_edge: Edge,
    destination_axis: Axis,
) -> Position:
    """Return the center `source` would have with its edge on `destination`'s edge.

    The cross-axis start edges of both boxes are aligned as well.
    """
    destination_corner = _corner(destination, destination_axis, destination_edge)
    source_corner = _corner(source, destination_axis, source_edge)
    center_offset = absolute(subtract(source.center, source_corner))
    sign = -1.0 if destination_edge == "end" else 1.0
    signed = patch(
        destination_axis.line,
        sign * center_offset.get(destination_axis.line),
        center_offset.get(destination_axis.cross_line),
    )
    return add(destination_corner, signed)
