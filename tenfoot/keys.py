"""Key classification: raw key names to directions and actions.

Canonical key names follow prompt_toolkit's `Keys` values for the arrows and
Escape, plus "enter" and "space". Aliases used by browsers and terminals are
folded onto them by `normalize_key`.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from prompt_toolkit.keys import Keys

UP = Keys.Up.value
DOWN = Keys.Down.value
LEFT = Keys.Left.value
RIGHT = Keys.Right.value
ESCAPE = Keys.Escape.value
ENTER = "enter"
SPACE = "space"


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def is_vertical(self) -> bool:
        return self in (Direction.UP, Direction.DOWN)


class InputSource(str, Enum):
    """Where a direction came from: an arrow key or its WASD alias."""

    ARROW = "arrow"
    WASD = "wasd"


_KEY_ALIASES = {
    "arrowup": UP,
    "↑": UP,
    "arrowdown": DOWN,
    "↓": DOWN,
    "arrowleft": LEFT,
    "←": LEFT,
    "arrowright": RIGHT,
    "→": RIGHT,
    "esc": ESCAPE,
    Keys.ControlM.value: ENTER,
    Keys.ControlJ.value: ENTER,
    "return": ENTER,
    "\r": ENTER,
    "\n": ENTER,
    " ": SPACE,
    "spacebar": SPACE,
}

_ARROWS = {
    UP: Direction.UP,
    DOWN: Direction.DOWN,
    LEFT: Direction.LEFT,
    RIGHT: Direction.RIGHT,
}

_WASD = {
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
}

SEARCH_SHORTCUTS = frozenset({"/", "f"})


def normalize_key(raw: str | None) -> str:
    """Fold a raw key name onto its canonical form.

    Single printable characters keep their case (so "D" stays "D"); named keys
    are matched case-insensitively.
    """
    if raw is None:
        return ""
    key = str(raw)
    if key in _KEY_ALIASES:
        return _KEY_ALIASES[key]
    if len(key) == 1:
        return key
    lowered = key.strip().lower()
    return _KEY_ALIASES.get(lowered, lowered)


@dataclass(frozen=True)
class KeyEvent:
    """A single key press as seen by a grid.

    `text_entry` reports whether the event target is a free-text entry
    control; it gates the WASD aliases.
    """

    key: str
    text_entry: bool = False
    ctrl: bool = False
    meta: bool = False

    @property
    def name(self) -> str:
        return normalize_key(self.key)


def parse_direction(key: str) -> tuple[Direction, InputSource] | None:
    """Map a key to its direction and source, ignoring any gating."""
    name = normalize_key(key)
    if name in _ARROWS:
        return _ARROWS[name], InputSource.ARROW
    if name.lower() in _WASD:
        return _WASD[name.lower()], InputSource.WASD
    return None


def alias_allowed(source: InputSource, *, enable_wasd: bool, text_entry: bool) -> bool:
    if source is InputSource.ARROW:
        return True
    return enable_wasd and not text_entry


def classify_direction(event: KeyEvent, *, enable_wasd: bool = True) -> Direction | None:
    """Return the direction for `event`, or None if it is not a navigation key.

    WASD letters only count when aliases are enabled and the event did not
    come from a text entry, so typing "d" into a search box stays text.
    """
    parsed = parse_direction(event.key)
    if parsed is None:
        return None
    direction, source = parsed
    if not alias_allowed(source, enable_wasd=enable_wasd, text_entry=event.text_entry):
        return None
    return direction


def is_search_shortcut(event: KeyEvent) -> bool:
    if event.ctrl or event.meta or event.text_entry:
        return False
    return event.name in SEARCH_SHORTCUTS


def is_select(event: KeyEvent) -> bool:
    return event.name in (ENTER, SPACE)
