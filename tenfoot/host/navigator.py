"""Screen stack: mounting a screen creates its grid, unmounting drops it."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Sequence

if TYPE_CHECKING:
    from ..grid import NavigationGrid


@dataclass
class MountedScreen:
    """A screen and the grid it owns for as long as it stays mounted.

    `items` lines up with the grid indices. Screens with `searchable` set offer
    their items to the search overlay, labelled by `label_of`.
    """

    screen_id: str
    grid: NavigationGrid
    items: Sequence[Any] = ()
    searchable: bool = False
    label_of: Callable[[Any], str] | None = None
    on_select: Callable[[Any], None] | None = None


class ScreenStack:
    """Stack-based screen lifecycle with breadcrumbs.

    - Push on enter: mounting a screen pushes it with its grid
    - Pop on Back: unmounts the top screen and discards its grid
    - Home: unmounts everything above the root screen
    """

    # Screen ID to human-readable label mapping
    SCREEN_LABELS = {
        "stores": "Stores",
        "library": "Library",
        "steam": "Steam",
        "epic": "Epic Games",
        "gog": "GOG",
    }

    def __init__(self):
        self.stack: list[MountedScreen] = []

    def push(self, screen: MountedScreen) -> MountedScreen:
        """Mount a screen on top of the stack.

        Args:
            screen: The screen with its own NavigationGrid
        """
        self.stack.append(screen)
        return screen

    def pop(self) -> MountedScreen | None:
        """Unmount the top screen.

        Returns:
            The screen that was popped, or None if at the root (or empty)
        """
        if len(self.stack) > 1:
            return self.stack.pop()
        return None

    def home(self) -> None:
        """Unmount every screen above the root."""
        del self.stack[1:]

    def current(self) -> MountedScreen | None:
        return self.stack[-1] if self.stack else None

    def breadcrumbs(self) -> str:
        """Generate breadcrumb navigation string, like "Stores > Steam"."""
        labels = [
            self.SCREEN_LABELS.get(s.screen_id, s.screen_id)
            for s in self.stack
        ]
        return " > ".join(labels)

    def depth(self) -> int:
        return len(self.stack)
