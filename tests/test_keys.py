"""Unit tests for key normalization and classification."""
from __future__ import annotations

from tenfoot.keys import (
    DOWN,
    ENTER,
    ESCAPE,
    SPACE,
    UP,
    Direction,
    InputSource,
    KeyEvent,
    classify_direction,
    is_search_shortcut,
    is_select,
    normalize_key,
    parse_direction,
)


def test_normalize_browser_and_terminal_names():
    assert normalize_key("ArrowUp") == UP
    assert normalize_key("arrowdown") == DOWN
    assert normalize_key("up") == UP
    assert normalize_key("Enter") == ENTER
    assert normalize_key("c-m") == ENTER
    assert normalize_key("Escape") == ESCAPE
    assert normalize_key("esc") == ESCAPE
    assert normalize_key(" ") == SPACE
    assert normalize_key("Space") == SPACE
    assert normalize_key(None) == ""


def test_normalize_keeps_single_characters():
    assert normalize_key("D") == "D"
    assert normalize_key("/") == "/"


def test_parse_arrow_and_wasd():
    assert parse_direction("ArrowRight") == (Direction.RIGHT, InputSource.ARROW)
    assert parse_direction("w") == (Direction.UP, InputSource.WASD)
    assert parse_direction("A") == (Direction.LEFT, InputSource.WASD)
    assert parse_direction("q") is None
    assert parse_direction("enter") is None


def test_classify_gates_aliases():
    assert classify_direction(KeyEvent("s")) is Direction.DOWN
    assert classify_direction(KeyEvent("s"), enable_wasd=False) is None
    assert classify_direction(KeyEvent("s", text_entry=True)) is None
    assert classify_direction(KeyEvent("down", text_entry=True)) is Direction.DOWN


def test_direction_axis():
    assert Direction.UP.is_vertical
    assert Direction.DOWN.is_vertical
    assert not Direction.LEFT.is_vertical
    assert not Direction.RIGHT.is_vertical


def test_search_shortcut():
    assert is_search_shortcut(KeyEvent("/"))
    assert is_search_shortcut(KeyEvent("f"))
    assert not is_search_shortcut(KeyEvent("f", ctrl=True))
    assert not is_search_shortcut(KeyEvent("f", meta=True))
    assert not is_search_shortcut(KeyEvent("f", text_entry=True))
    assert not is_search_shortcut(KeyEvent("g"))


def test_select_keys():
    assert is_select(KeyEvent("Enter"))
    assert is_select(KeyEvent(" "))
    assert not is_select(KeyEvent("escape"))
