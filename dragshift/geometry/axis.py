"""Single-axis descriptors for ordered lists."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, TypeAlias

from dragshift.geometry.position import AxisLine

Direction: TypeAlias = Literal["vertical", "horizontal"]
Edge: TypeAlias = Literal["start", "end"]


@dataclass(frozen=True, slots=True)
class Axis:
    """Names the position line and `Area` fields a list orders along."""

    direction: Direction
    line: AxisLine
    cross_line: AxisLine
    start: str
    end: str
    size: str
    cross_axis_start: str
    cross_axis_end: str
    cross_axis_size: str

    def edge_field(self, edge: Edge) -> str:
        """Return the `Area` field name for a logical edge."""
        return self.start if edge == "start" else self.end


VERTICAL = Axis(
    direction="vertical",
    line="y",
    cross_line="x",
    start="top",
    end="bottom",
    size="height",
    cross_axis_start="left",
    cross_axis_end="right",
    cross_axis_size="width",
)

HORIZONTAL = Axis(
    direction="horizontal",
    line="x",
    cross_line="y",
    start="left",
    end="right",
    size="width",
    cross_axis_start="top",
    cross_axis_end="bottom",
    cross_axis_size="height",
)
