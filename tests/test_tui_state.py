"""Unit tests for UIState."""
from __future__ import annotations

from factories import make_agent, make_system, waypoint_payload

from spacedash.tui.state import HISTORY_LIMIT, UIState


def test_ui_state_initial_values():
    state = UIState()
    assert state.agent is None
    assert state.server_status is None
    assert state.ships is None
    assert state.systems is None
    assert state.ships_cursor.selected == 0
    assert state.selected_ship_index is None
    assert state.help_visible is False
    assert list(state.session_history) == []
    assert state.view_changes == 0


def test_ui_state_remember():
    state = UIState()
    agent = make_agent()

    state.remember(agent=agent, ships=[])
    assert state.agent is agent
    assert state.ships == []


def test_ui_state_remember_ignores_unknown_keys():
    state = UIState()
    state.remember(unknown_key="value", help_visible=True)
    assert not hasattr(state, "unknown_key")
    assert state.help_visible is True


def test_ui_state_history_and_help():
    state = UIState()
    state.add_to_history("dashboard")
    state.add_to_history("ship_list")
    assert list(state.session_history) == ["dashboard", "ship_list"]
    assert state.view_changes == 1

    state.toggle_help()
    assert state.help_visible
    state.toggle_help()
    assert not state.help_visible


def test_current_system_guards_stale_index():
    system = make_system(waypoints=[waypoint_payload("X1-AA-A1")])
    state = UIState(systems=[system], selected_system_index=0)
    assert state.current_system() is system
    assert [w.symbol for w in state.current_waypoints()] == ["X1-AA-A1"]

    state.remember(systems=[])
    assert state.current_system() is None
    assert state.current_waypoints() == []


def test_ui_state_history_is_bounded():
    state = UIState()
    for i in range(HISTORY_LIMIT + 10):
        state.add_to_history(f"view-{i}")

    assert len(state.session_history) == HISTORY_LIMIT
    assert state.session_history[-1] == f"view-{HISTORY_LIMIT + 9}"
    assert state.view_changes == HISTORY_LIMIT + 9
