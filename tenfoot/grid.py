"""Spatial focus navigation over a flat list laid out as a grid.

Items are indexed 0..item_count-1 and laid out row-major, `columns` per row.
`compute_next_index` is the pure traversal rule; `NavigationGrid` wraps it
with the per-screen state (focused index, item handles, boundary callbacks
and the focus side effect).
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, NamedTuple, Optional, Union

from .effects import NEAREST, FocusRequest, FocusSink, ScrollPolicy
from .keys import Direction, InputSource, KeyEvent, alias_allowed, parse_direction
from .layout import Columns, coerce_columns, resolve_columns

if TYPE_CHECKING:
    from .settings import Settings

logger = logging.getLogger(__name__)

ItemCount = Union[int, Callable[[], int]]
BoundaryCallback = Optional[Callable[[], None]]


@dataclass
class GridOptions:
    """Behavior switches for one grid.

    `section_break_index` splits the items into two groups (e.g. installed
    and not installed); UP from the first row of the second group lands on
    the last item of the first.
    """

    wrap_horizontal: bool = False
    wrap_vertical: bool = False
    enable_wasd: bool = True
    enabled: bool = True
    section_break_index: int | None = None

    @classmethod
    def from_settings(cls, settings: Settings, **overrides: Any) -> GridOptions:
        values = {
            "wrap_horizontal": settings.TENFOOT_WRAP_HORIZONTAL,
            "wrap_vertical": settings.TENFOOT_WRAP_VERTICAL,
            "enable_wasd": settings.TENFOOT_ENABLE_WASD,
        }
        values.update(overrides)
        return cls(**values)


class NavResult(NamedTuple):
    handled: bool
    next_index: int


def compute_next_index(
    current: int,
    direction: Direction,
    columns: int,
    item_count: int,
    *,
    wrap_horizontal: bool = False,
    wrap_vertical: bool = False,
    section_break_index: int | None = None,
) -> int | None:
    """Target index for moving from `current` in `direction`.

    Returns None when the move would leave the grid and no wrap applies, so
    the caller can hand off to a boundary callback. The returned index is
    always within [0, item_count).
    """
    if item_count <= 0:
        return None

    cols = coerce_columns(columns)
    current = max(0, min(current, item_count - 1))

    row, col = divmod(current, cols)
    total_rows = math.ceil(item_count / cols)
    is_first_row = row == 0
    is_last_row = row == total_rows - 1
    items_in_row = item_count - row * cols if is_last_row else cols
    is_last_in_row = col == items_in_row - 1
    is_first_in_row = col == 0

    if direction is Direction.RIGHT:
        if is_last_in_row:
            if wrap_horizontal and not is_last_row:
                return (row + 1) * cols
            return None
        if current < item_count - 1:
            return current + 1
        return None

    if direction is Direction.LEFT:
        if is_first_in_row:
            if wrap_horizontal and not is_first_row:
                return row * cols - 1
            return None
        return current - 1

    if direction is Direction.DOWN:
        if is_last_row:
            if wrap_vertical:
                return col
            return None
        return min(current + cols, item_count - 1)

    # UP: the section seam takes precedence over wrapping and callbacks.
    if section_break_index is not None and 0 < section_break_index <= current:
        if row == section_break_index // cols:
            return section_break_index - 1

    if is_first_row:
        if wrap_vertical:
            return min((total_rows - 1) * cols + col, item_count - 1)
        return None
    return current - cols


class NavigationGrid:
    """Focus state machine for one screen's grid of items.

    Item count and column count may be given as plain ints or as zero-argument
    providers; providers are re-read on every key event so responsive layouts
    and changing collections are picked up without rebuilding the grid.
    """

    def __init__(
        self,
        item_count: ItemCount,
        columns: Columns,
        options: GridOptions | None = None,
        *,
        on_navigate_up: BoundaryCallback = None,
        on_navigate_down: BoundaryCallback = None,
        on_navigate_left: BoundaryCallback = None,
        on_navigate_right: BoundaryCallback = None,
        on_focus: FocusSink | None = None,
        scroll: ScrollPolicy = NEAREST,
    ):
        self._item_count = item_count
        self._columns = columns
        self.options = options or GridOptions()
        self.on_focus = on_focus
        self.scroll = scroll
        self.callbacks: dict[Direction, BoundaryCallback] = {
            Direction.UP: on_navigate_up,
            Direction.DOWN: on_navigate_down,
            Direction.LEFT: on_navigate_left,
            Direction.RIGHT: on_navigate_right,
        }
        self.focused_index = 0
        self._handles: dict[int, Any] = {}

    # ── live inputs ──────────────────────────────────────────────────────────

    @property
    def item_count(self) -> int:
        value = self._item_count() if callable(self._item_count) else self._item_count
        return max(0, int(value))

    @item_count.setter
    def item_count(self, value: ItemCount) -> None:
        self._item_count = value

    @property
    def columns(self) -> int:
        return resolve_columns(self._columns)

    @columns.setter
    def columns(self, value: Columns) -> None:
        self._columns = value

    @property
    def enabled(self) -> bool:
        return self.options.enabled

    @enabled.setter
    def enabled(self, value: bool) -> None:
        self.options.enabled = bool(value)

    @property
    def section_break_index(self) -> int | None:
        return self.options.section_break_index

    @section_break_index.setter
    def section_break_index(self, value: int | None) -> None:
        self.options.section_break_index = value

    def position(self, index: int) -> tuple[int, int]:
        """(row, column) of `index` under the current column count."""
        return divmod(index, self.columns)

    # ── item handles ─────────────────────────────────────────────────────────

    def register_item(self, index: int, handle: Any) -> None:
        """Attach an opaque host handle (widget, element id...) to `index`.

        Registering None removes the slot, mirroring an unmounted item.
        """
        if handle is None:
            self._handles.pop(index, None)
        else:
            self._handles[index] = handle

    def handle_for(self, index: int) -> Any:
        return self._handles.get(index)

    # ── focus ────────────────────────────────────────────────────────────────

    def focus(self, index: int) -> int | None:
        """Focus `index` (clamped into range) and request it be scrolled into view.

        Returns the focused index, or None for an empty grid.
        """
        count = self.item_count
        if count == 0:
            return None
        clamped = max(0, min(index, count - 1))
        self.focused_index = clamped
        if self.on_focus is not None:
            self.on_focus(FocusRequest(clamped, self._handles.get(clamped), self.scroll))
        return clamped

    def reset(self, index: int = 0) -> None:
        """Move the logical focus without requesting a focus side effect."""
        count = self.item_count
        self.focused_index = max(0, min(index, count - 1)) if count else 0

    # ── key handling ─────────────────────────────────────────────────────────

    def handle_direction(
        self,
        current_index: int,
        direction: Direction,
        source: InputSource = InputSource.ARROW,
        *,
        text_entry: bool = False,
    ) -> NavResult:
        """Apply one directional input from `current_index`.

        Unhandled results leave `next_index` at the current index so the host
        can let the key fall through to its default behavior.
        """
        count = self.item_count
        if not self.options.enabled or count == 0:
            return NavResult(False, current_index)
        if not alias_allowed(source, enable_wasd=self.options.enable_wasd, text_entry=text_entry):
            return NavResult(False, current_index)

        current = max(0, min(current_index, count - 1))
        self.focused_index = current
        target = compute_next_index(
            current,
            direction,
            self.columns,
            count,
            wrap_horizontal=self.options.wrap_horizontal,
            wrap_vertical=self.options.wrap_vertical,
            section_break_index=self.options.section_break_index,
        )

        if target is None:
            callback = self.callbacks.get(direction)
            if callback is not None:
                logger.debug("grid boundary %s at index %d, delegating", direction.value, current)
                callback()
                return NavResult(True, current)
            # Vertical edges swallow the key so it never scrolls past the grid.
            return NavResult(direction.is_vertical, current)

        if target != current:
            self.focus(target)
        return NavResult(True, target)

    def handle_key(self, event: KeyEvent, index: int | None = None) -> NavResult:
        """Key handler to attach to each rendered item.

        `index` is the item that received the event; it defaults to the
        grid's own focused index.
        """
        current = self.focused_index if index is None else index
        parsed = parse_direction(event.key)
        if parsed is None:
            return NavResult(False, current)
        direction, source = parsed
        return self.handle_direction(current, direction, source, text_entry=event.text_entry)
