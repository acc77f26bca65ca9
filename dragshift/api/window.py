"""Public window view contract used for viewport queries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class WindowView(Protocol):
    """Scroll offset and size of the page window."""

    @property
    def scroll_x(self) -> float: ...

    @property
    def scroll_y(self) -> float: ...

    @property
    def width(self) -> float: ...

    @property
    def height(self) -> float: ...


@dataclass(frozen=True, slots=True)
class WindowSnapshot:
    """Immutable `WindowView` captured for one drag frame."""

    scroll_x: float
    scroll_y: float
    width: float
    height: float
