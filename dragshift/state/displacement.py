"""Per-item displacement refresh."""

from __future__ import annotations

from dragshift.api.dimensions import DraggableDimension, DroppableDimension
from dragshift.api.impact import Displacement, DragImpact
from dragshift.geometry import Area
from dragshift.state.visibility import is_partially_visible


def get_displacement(
    *,
    draggable: DraggableDimension,
    destination: DroppableDimension,
    previous_impact: DragImpact,
    viewport: Area,
) -> Displacement:
    """Recompute one displaced item's visibility and animation intent.

    Items out of view are never animated. Visible items keep the animation
    intent they already had, and animate when they were not displaced before.
    """
    draggable_id = draggable.descriptor.id
    is_visible = is_partially_visible(
        target=draggable.page.with_margin,
        destination=destination,
        viewport=viewport,
    )
    if not is_visible:
        should_animate = False
    else:
        previous = previous_impact.movement.displaced.find(draggable_id)
        should_animate = True if previous is None else previous.should_animate
    return Displacement(
        draggable_id=draggable_id,
        is_visible=is_visible,
        should_animate=should_animate,
    )
