"""Key router and screen registry for a key-driven front-end."""
from __future__ import annotations

import dataclasses
import logging
from typing import TYPE_CHECKING, Any, Callable

from ..effects import FocusRequest, FocusSink
from ..grid import GridOptions
from ..keys import Direction, KeyEvent, is_search_shortcut, is_select
from ..layout import columns_for_width
from ..search import SearchOverlay
from .navigator import MountedScreen, ScreenStack
from .state import FocusState, FocusTarget

if TYPE_CHECKING:
    from ..settings import Settings

logger = logging.getLogger(__name__)


class KeyRouter:
    """Routes key events to whatever currently owns input.

    The open search overlay wins; otherwise the top screen's grid gets the
    key. Focus side effects from every grid pass through here, so FocusState
    always mirrors the single platform focus cursor.
    """

    def __init__(
        self,
        settings: Settings,
        state: FocusState | None = None,
        stack: ScreenStack | None = None,
        *,
        on_focus: FocusSink | None = None,
        on_exit: Callable[[Direction], None] | None = None,
    ):
        """Initialize router with dependencies.

        Args:
            settings: Application settings
            state: Session focus state
            stack: Screen stack
            on_focus: Host sink for focus/scroll requests
            on_exit: Called when focus leaves a grid for host chrome
        """
        self.settings = settings
        self.state = state or FocusState()
        self.stack = stack or ScreenStack()
        self.on_focus = on_focus
        self.on_exit = on_exit
        self.search: SearchOverlay | None = None
        # Latest width reported by the host's layout measurement
        self.width: float | None = None

    # ── helpers for screen factories ─────────────────────────────────────────

    def measure(self, width: float | None) -> None:
        self.width = width

    def columns(self) -> int:
        """Live column count for the last measured width."""
        return columns_for_width(
            self.width,
            self.settings.TENFOOT_MIN_COLUMN_WIDTH,
            self.settings.TENFOOT_DEFAULT_COLUMNS,
        )

    def grid_options(self, **overrides: Any) -> GridOptions:
        return GridOptions.from_settings(self.settings, **overrides)

    def grid_focus(self, request: FocusRequest) -> None:
        self.state.move(FocusTarget.GRID, request.index)
        if self.on_focus is not None:
            self.on_focus(request)

    def leave(self, direction: Direction) -> Callable[[], None]:
        """Boundary callback handing focus to host chrome in `direction`."""

        def _leave() -> None:
            self.state.move(FocusTarget.OUTSIDE)
            self.state.exited_via = direction.value
            logger.debug("focus left %s via %s", self.state.screen, direction.value)
            if self.on_exit is not None:
                self.on_exit(direction)

        return _leave

    # ── screen lifecycle ─────────────────────────────────────────────────────

    def mount(self, screen_id: str, **kwargs: Any) -> MountedScreen | None:
        """Create a registered screen, push it and focus its starting item."""
        factory = SCREENS.get(screen_id)
        if factory is None:
            logger.warning("Unknown screen %r, staying on %s", screen_id, self.state.screen)
            return None

        # The new screen takes focus, so the old grid is not refocused.
        self.close_search(restore_focus=False)
        current = self.stack.current()
        if current is not None:
            current.grid.enabled = False

        screen = factory(self, **kwargs)
        self.stack.push(screen)
        self._enter(screen)
        return screen

    def back(self) -> MountedScreen | None:
        """Unmount the top screen and return to the one below it."""
        self.close_search(restore_focus=self.stack.depth() <= 1)
        popped = self.stack.pop()
        if popped is not None:
            self._enter(self.stack.current())
        return popped

    def home(self) -> None:
        self.close_search(restore_focus=False)
        self.stack.home()
        self._enter(self.stack.current())

    def _enter(self, screen: MountedScreen | None) -> None:
        if screen is None:
            return
        screen.grid.enabled = True
        start = self.state.enter_screen(screen.screen_id)
        screen.grid.focus(start)

    def return_to_grid(self) -> None:
        """Host chrome hands focus back to the current screen's grid."""
        screen = self.stack.current()
        if screen is None:
            return
        screen.grid.focus(self.state.last_index.get(screen.screen_id, screen.grid.focused_index))

    # ── search ───────────────────────────────────────────────────────────────

    def open_search(self) -> SearchOverlay | None:
        screen = self.stack.current()
        if screen is None or not screen.searchable:
            return None
        if self.search is not None:
            return self.search

        self.search = SearchOverlay.from_settings(
            self.settings,
            screen.items,
            screen.label_of or str,
            columns=self.columns,
            on_select=screen.on_select,
            on_close=self._search_closed,
            on_focus=self._search_focus,
            on_input_focus=lambda: self.state.move(FocusTarget.SEARCH_INPUT),
        )
        screen.grid.enabled = False
        self.state.move(FocusTarget.SEARCH_INPUT)
        logger.debug("search opened on %s (%d candidates)", screen.screen_id, len(screen.items))
        return self.search

    def close_search(self, restore_focus: bool = True) -> None:
        """Close the overlay; with `restore_focus` the screen grid gets focus back."""
        if self.search is None:
            return
        if not restore_focus:
            self.search.on_close = self._search_dropped
        self.search.close()

    def type_query(self, text: str) -> None:
        if self.search is not None:
            self.search.set_query(text)

    def _search_focus(self, request: FocusRequest) -> None:
        self.state.move(FocusTarget.SEARCH_RESULTS, request.index)
        if self.on_focus is not None:
            self.on_focus(request)

    def _search_dropped(self) -> None:
        self.search = None

    def _search_closed(self) -> None:
        self.search = None
        screen = self.stack.current()
        if screen is None:
            return
        screen.grid.enabled = True
        screen.grid.focus(self.state.last_index.get(screen.screen_id, screen.grid.focused_index))

    # ── dispatch ─────────────────────────────────────────────────────────────

    def is_text_entry_focused(self) -> bool:
        return self.state.target is FocusTarget.SEARCH_INPUT

    def dispatch(self, event: KeyEvent) -> bool:
        """Handle one key press. Returns False to let the host's default run."""
        if self.is_text_entry_focused() and not event.text_entry:
            event = dataclasses.replace(event, text_entry=True)

        if self.search is not None:
            return self.search.handle_key(event)

        if self.state.target is FocusTarget.OUTSIDE:
            return False

        screen = self.stack.current()
        if screen is None:
            return False

        if is_search_shortcut(event) and screen.searchable:
            self.open_search()
            return True

        if is_select(event) and screen.on_select is not None:
            if 0 <= self.state.index < len(screen.items):
                screen.on_select(screen.items[self.state.index])
                return True
            return False

        return screen.grid.handle_key(event, self.state.index).handled


# Screen registry - maps screen IDs to factories building a MountedScreen
SCREENS: dict[str, Callable[..., MountedScreen]] = {}


def register_screen(screen_id: str):
    """Decorator to register a screen factory.

    Usage:
        @register_screen("library")
        def library_screen(router: KeyRouter, **kwargs) -> MountedScreen:
            ...
    """
    def decorator(fn: Callable[..., MountedScreen]):
        SCREENS[screen_id] = fn
        return fn
    return decorator
