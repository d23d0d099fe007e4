"""Focus and scroll side effects requested by grids.

Grids never move a real cursor or scroll a real view. They hand a
`FocusRequest` to whatever sink the host provides; hosts without a visual
surface can ignore it.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Literal

ScrollBlock = Literal["nearest", "center"]


@dataclass(frozen=True)
class ScrollPolicy:
    """How a focused item is brought into view.

    Args:
        block: "nearest" scrolls the minimum needed to reveal the item;
            "center" aligns the item with the middle of the viewport.
        padding: Extra margin kept between the item and the viewport edge
            when scrolling to the nearest edge.
        smooth: Hint for hosts that animate scrolling.
    """

    block: ScrollBlock = "nearest"
    padding: float = 0
    smooth: bool = True


NEAREST = ScrollPolicy()
CENTER = ScrollPolicy(block="center")


def padded(padding: float) -> ScrollPolicy:
    return ScrollPolicy(block="nearest", padding=padding)


@dataclass(frozen=True)
class FocusRequest:
    """Ask the host to focus `handle` (the item at `index`) and scroll it into view."""

    index: int
    handle: Any = None
    scroll: ScrollPolicy = NEAREST


FocusSink = Callable[[FocusRequest], None]


@dataclass(frozen=True)
class Span:
    """A one-dimensional extent along the scroll axis."""

    start: float
    end: float

    @property
    def size(self) -> float:
        return self.end - self.start

    @property
    def middle(self) -> float:
        return (self.start + self.end) / 2


def scroll_offset(item: Span, viewport: Span, policy: ScrollPolicy = NEAREST) -> float:
    """Signed scroll delta that brings `item` into `viewport` under `policy`.

    Positive values scroll forward (content moves up), negative values scroll
    back, 0 means the item is already visible. For "nearest", an item taller
    than the viewport is aligned to its leading edge.
    """
    if policy.block == "center":
        return item.middle - viewport.middle

    pad = max(0.0, float(policy.padding))
    top = viewport.start + pad
    bottom = viewport.end - pad

    if item.start < top:
        return item.start - top
    if item.end > bottom:
        delta = item.end - bottom
        # Never push the leading edge out of view.
        return min(delta, item.start - top)
    return 0.0
