"""Viewport measurement."""

from __future__ import annotations

from dragshift.api.window import WindowView
from dragshift.geometry import Area, get_area


def get_viewport(window: WindowView) -> Area:
    """Return the page-space area currently visible in the window."""
    return get_area(
        top=window.scroll_y,
        right=window.scroll_x + window.width,
        bottom=window.scroll_y + window.height,
        left=window.scroll_x,
    )
