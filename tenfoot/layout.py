"""Column-count providers for grids whose layout follows the available width."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Union

if TYPE_CHECKING:
    from rich.console import Console

DEFAULT_MIN_COLUMN_WIDTH = 140
DEFAULT_FALLBACK_COLUMNS = 5

Columns = Union[int, Callable[[], int]]


def coerce_columns(value: object) -> int:
    """Coerce a column count to a positive int; anything unusable becomes 1."""
    try:
        cols = int(value)  # type: ignore[call-overload]
    except (TypeError, ValueError):
        return 1
    return max(1, cols)


def resolve_columns(columns: Columns) -> int:
    """Evaluate a fixed count or a zero-argument provider, then coerce it."""
    value = columns() if callable(columns) else columns
    return coerce_columns(value)


def columns_for_width(
    width: float | None,
    min_column_width: float = DEFAULT_MIN_COLUMN_WIDTH,
    fallback: int = DEFAULT_FALLBACK_COLUMNS,
) -> int:
    """How many columns of at least `min_column_width` fit in `width`.

    An unknown or non-positive width (a grid not laid out yet) yields
    `fallback`.
    """
    if width is None or width <= 0:
        return coerce_columns(fallback)
    if min_column_width <= 0:
        return 1
    return max(1, int(width // min_column_width))


class ConsoleColumns:
    """Live column provider backed by a rich Console's current width."""

    def __init__(self, console: Console, card_width: int = 24, fallback: int = DEFAULT_FALLBACK_COLUMNS):
        self.console = console
        self.card_width = card_width
        self.fallback = fallback

    def __call__(self) -> int:
        return columns_for_width(self.console.width, self.card_width, self.fallback)
