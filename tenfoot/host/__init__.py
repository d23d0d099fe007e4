"""Host-side glue: focus state, screen stack and key routing."""
from __future__ import annotations

from . import screens  # noqa: F401  (registers the built-in screens)
from .navigator import MountedScreen, ScreenStack
from .router import SCREENS, KeyRouter, register_screen
from .state import FocusState, FocusTarget

__all__ = [
    "SCREENS",
    "FocusState",
    "FocusTarget",
    "KeyRouter",
    "MountedScreen",
    "ScreenStack",
    "register_screen",
]
