"""Unit tests for FocusState."""
from __future__ import annotations

from tenfoot.host.state import FocusState, FocusTarget


def test_focus_state_initial_state():
    state = FocusState()

    assert state.screen is None
    assert state.target is FocusTarget.GRID
    assert state.index == 0
    assert state.exited_via is None
    assert state.last_index == {}
    assert state.history == []


def test_move_records_history_and_last_index():
    state = FocusState()
    state.enter_screen("library")

    state.move(FocusTarget.GRID, 3)
    state.move(FocusTarget.SEARCH_INPUT)
    state.move(FocusTarget.SEARCH_RESULTS, 1)

    assert state.last_index == {"library": 3}
    assert state.index == 1
    assert state.history == [
        ("library", "grid", 3),
        ("library", "search_input", 3),
        ("library", "search_results", 1),
    ]


def test_leaving_and_returning_clears_exit_direction():
    state = FocusState()
    state.enter_screen("stores")
    state.move(FocusTarget.OUTSIDE)
    state.exited_via = "down"

    state.move(FocusTarget.GRID, 0)
    assert state.exited_via is None


def test_enter_screen_restores_last_index():
    state = FocusState()
    state.enter_screen("library")
    state.move(FocusTarget.GRID, 7)

    state.enter_screen("steam")
    assert state.index == 0

    assert state.enter_screen("library") == 7
    assert state.screen == "library"
    assert state.target is FocusTarget.GRID
