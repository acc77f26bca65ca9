"""Page-space geometry primitives."""

from dragshift.geometry.area import (
    Area,
    Spacing,
    clip,
    expand_by_spacing,
    get_area,
    offset_by_position,
)
from dragshift.geometry.axis import HORIZONTAL, VERTICAL, Axis, Direction, Edge
from dragshift.geometry.position import (
    ORIGIN,
    AxisLine,
    Position,
    absolute,
    add,
    is_equal,
    negate,
    patch,
    subtract,
)

__all__ = [
    "Area",
    "Axis",
    "AxisLine",
    "Direction",
    "Edge",
    "HORIZONTAL",
    "ORIGIN",
    "Position",
    "Spacing",
    "VERTICAL",
    "absolute",
    "add",
    "clip",
    "expand_by_spacing",
    "get_area",
    "is_equal",
    "negate",
    "offset_by_position",
    "patch",
    "subtract",
]
