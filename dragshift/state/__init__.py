"""Pure drag state computations."""

from dragshift.state.dimensions import (
    get_draggables_inside_droppable,
    get_droppable_dimension,
    get_fragment,
    scroll_droppable,
)
from dragshift.state.displacement import get_displacement
from dragshift.state.droppable_displacement import with_droppable_displacement
from dragshift.state.move_to_edge import move_to_edge
from dragshift.state.move_to_next_index import (
    MoveToNextIndexArgs,
    in_home_list,
    move_to_next_index,
)
from dragshift.state.viewport import get_viewport
from dragshift.state.visibility import (
    is_partially_visible,
    is_partially_visible_through_frame,
    is_totally_visible,
    is_totally_visible_in_new_location,
    is_totally_visible_through_frame,
)

__all__ = [
    "MoveToNextIndexArgs",
    "get_displacement",
    "get_draggables_inside_droppable",
    "get_droppable_dimension",
    "get_fragment",
    "get_viewport",
    "in_home_list",
    "is_partially_visible",
    "is_partially_visible_through_frame",
    "is_totally_visible",
    "is_totally_visible_in_new_location",
    "is_totally_visible_through_frame",
    "move_to_edge",
    "move_to_next_index",
    "scroll_droppable",
    "with_droppable_displacement",
]
