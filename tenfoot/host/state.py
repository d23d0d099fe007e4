"""Session focus state: the one place that says what currently has focus."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class FocusTarget(str, Enum):
    GRID = "grid"
    SEARCH_INPUT = "search_input"
    SEARCH_RESULTS = "search_results"
    # Focus was handed to host chrome outside any grid (side menu, bottom bar).
    OUTSIDE = "outside"


@dataclass
class FocusState:
    """Explicit focus cursor shared by every grid of a session.

    Only the router writes to it, once per handled key event, so there is a
    single writer for the platform's single focus cursor.
    """

    screen: str | None = None
    target: FocusTarget = FocusTarget.GRID
    index: int = 0
    # Direction of the last hand-off to the host (set with target=OUTSIDE)
    exited_via: str | None = None

    # Last focused index per screen, restored when a screen is revisited
    last_index: dict[str, int] = field(default_factory=dict)

    # Focus changes, for debugging: (screen, target, index)
    history: list[tuple[str | None, str, int]] = field(default_factory=list)

    def move(self, target: FocusTarget, index: int | None = None) -> None:
        """Record a focus change and append it to the history."""
        self.target = target
        if index is not None:
            self.index = index
            if target is FocusTarget.GRID and self.screen is not None:
                self.last_index[self.screen] = index
        if target is not FocusTarget.OUTSIDE:
            self.exited_via = None
        self.history.append((self.screen, target.value, self.index))

    def enter_screen(self, screen: str) -> int:
        """Switch to `screen` and return the index it should start focused on."""
        self.screen = screen
        self.target = FocusTarget.GRID
        self.exited_via = None
        self.index = self.last_index.get(screen, 0)
        return self.index
