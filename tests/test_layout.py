"""Unit tests for column-count providers."""
from __future__ import annotations

from rich.console import Console

from tenfoot.layout import ConsoleColumns, coerce_columns, columns_for_width, resolve_columns


def test_coerce_columns():
    assert coerce_columns(4) == 4
    assert coerce_columns(0) == 1
    assert coerce_columns(-3) == 1
    assert coerce_columns("2") == 2
    assert coerce_columns(None) == 1


def test_resolve_fixed_and_provider():
    assert resolve_columns(3) == 3
    assert resolve_columns(lambda: 6) == 6
    assert resolve_columns(lambda: 0) == 1


def test_columns_for_width():
    assert columns_for_width(700) == 5
    assert columns_for_width(1000) == 7
    assert columns_for_width(100) == 1
    assert columns_for_width(700, min_column_width=200) == 3


def test_columns_for_unmeasured_width_falls_back():
    assert columns_for_width(None) == 5
    assert columns_for_width(0) == 5
    assert columns_for_width(None, fallback=3) == 3


def test_console_columns_follow_console_width():
    console = Console(width=100)
    provider = ConsoleColumns(console, card_width=24)
    assert provider() == 4

    console.width = 50
    assert provider() == 2
