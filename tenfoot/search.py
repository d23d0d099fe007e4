"""Search overlay: a text query feeding a transient results grid."""
from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Callable, Generic, Sequence, TypeVar

from .effects import FocusSink, ScrollPolicy, padded
from .fuzzy import DEFAULT_MIN_SCORE, FuzzyMatch, search
from .grid import GridOptions, NavigationGrid
from .keys import ENTER, ESCAPE, Direction, KeyEvent, classify_direction, is_select
from .layout import Columns

if TYPE_CHECKING:
    from .settings import Settings

logger = logging.getLogger(__name__)

T = TypeVar("T")

SEARCH_SCROLL_PADDING = 16


class SearchFocus(str, Enum):
    INPUT = "input"
    RESULTS = "results"


class SearchOverlay(Generic[T]):
    """Coordinates the query field and a NavigationGrid over the ranked results.

    The overlay owns its grid; closing it drops the grid and the result set.
    `on_select` always receives the caller's original candidate object.
    """

    def __init__(
        self,
        items: Sequence[T],
        label_of: Callable[[T], str],
        *,
        columns: Columns = 5,
        on_select: Callable[[T], None] | None = None,
        on_close: Callable[[], None] | None = None,
        on_focus: FocusSink | None = None,
        on_input_focus: Callable[[], None] | None = None,
        min_score: float = DEFAULT_MIN_SCORE,
        scroll: ScrollPolicy | None = None,
        enable_wasd: bool = True,
    ):
        self.items = list(items)
        self.label_of = label_of
        self.min_score = min_score
        self.on_select = on_select
        self.on_close = on_close
        self.on_input_focus = on_input_focus
        self.query = ""
        self.results: list[FuzzyMatch[T]] = search(self.items, self.query, label_of, min_score)
        self.focus_target = SearchFocus.INPUT
        self.closed = False
        self.grid: NavigationGrid | None = NavigationGrid(
            lambda: len(self.results),
            columns,
            GridOptions(enable_wasd=enable_wasd),
            on_focus=on_focus,
            scroll=scroll or padded(SEARCH_SCROLL_PADDING),
        )

    @classmethod
    def from_settings(cls, settings: Settings, items: Sequence[T], label_of: Callable[[T], str], **kwargs) -> SearchOverlay[T]:
        kwargs.setdefault("min_score", settings.TENFOOT_SEARCH_MIN_SCORE)
        kwargs.setdefault("scroll", padded(settings.TENFOOT_SEARCH_SCROLL_PADDING))
        kwargs.setdefault("enable_wasd", settings.TENFOOT_ENABLE_WASD)
        return cls(items, label_of, **kwargs)

    @property
    def selected_index(self) -> int:
        return self.grid.focused_index if self.grid is not None else 0

    def set_query(self, query: str) -> list[FuzzyMatch[T]]:
        """Re-rank for `query`; the results grid restarts at index 0.

        With focus on the results, the first result is focused again, or the
        query field when nothing matches.
        """
        self.query = query or ""
        self.results = search(self.items, self.query, self.label_of, self.min_score)
        if self.grid is None:
            return self.results
        if self.focus_target is SearchFocus.RESULTS:
            if self.results:
                self.grid.focus(0)
            else:
                self.grid.reset(0)
                self.focus_input()
        else:
            self.grid.reset(0)
        return self.results

    def select(self, index: int) -> T | None:
        if not (0 <= index < len(self.results)):
            return None
        item = self.results[index].item
        if self.on_select is not None:
            self.on_select(item)
        return item

    def focus_input(self) -> None:
        self.focus_target = SearchFocus.INPUT
        if self.on_input_focus is not None:
            self.on_input_focus()

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        self.results = []
        self.grid = None
        logger.debug("search overlay closed")
        if self.on_close is not None:
            self.on_close()

    # ── key handling ─────────────────────────────────────────────────────────

    def handle_key(self, event: KeyEvent, index: int | None = None) -> bool:
        """Route a key to the query field or the results grid, whichever has focus."""
        if self.closed:
            return False
        if self.focus_target is SearchFocus.INPUT:
            return self.handle_input_key(event)
        return self.handle_result_key(event, index)

    def handle_input_key(self, event: KeyEvent) -> bool:
        """Keys typed into the query field. Anything not handled here is text."""
        name = event.name
        # Letters are text here, so only the arrow counts as DOWN.
        if classify_direction(event, enable_wasd=False) is Direction.DOWN:
            if self.results and self.grid is not None:
                self.focus_target = SearchFocus.RESULTS
                self.grid.focus(0)
            return True
        if name == ENTER:
            if self.query.strip() and self.results:
                self.select(0)
            return True
        if name == ESCAPE:
            self.close()
            return True
        return False

    def handle_result_key(self, event: KeyEvent, index: int | None = None) -> bool:
        """Keys pressed on a result card at `index` (default: the selected one)."""
        if self.grid is None:
            return False
        current = self.selected_index if index is None else index
        name = event.name

        if is_select(event):
            self.select(current)
            return True
        if name == ESCAPE:
            self.close()
            return True

        direction = classify_direction(event, enable_wasd=self.grid.options.enable_wasd)
        if direction is Direction.UP and self.grid.position(current)[0] == 0:
            # The query field sits above the first row.
            self.focus_input()
            return True

        return self.grid.handle_key(event, current).handled
