"""Unit tests for Router: key handling, drill-down and refresh."""
from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from factories import make_agent, make_ships, make_status, make_system, waypoint_payload

from spacedash.client import SpaceTradersError
from spacedash.tui.navigator import Navigator, View
from spacedash.tui.router import SCREENS, Router, register_screen
from spacedash.tui.state import UIState


class FakeTerminal:
    """Feeds a fixed key sequence, then quits."""

    def __init__(self, keys):
        self.keys = list(keys)
        self.frames = []
        self.entered = 0
        self.exited = 0

    def __enter__(self):
        self.entered += 1
        return self

    def __exit__(self, exc_type, exc, tb):
        self.exited += 1
        return False

    def draw(self, renderable):
        self.frames.append(renderable)

    async def read_key(self, timeout):
        if not self.keys:
            return "q"
        return self.keys.pop(0)


@pytest.fixture
def client():
    c = MagicMock()
    c.get_my_agent = AsyncMock(return_value=make_agent())
    c.get_status = AsyncMock(return_value=make_status())
    c.get_my_ships = AsyncMock(return_value=make_ships(3))
    c.get_systems = AsyncMock(
        return_value=[
            make_system("X1-AA", 0, 0, [waypoint_payload("X1-AA-A1"), waypoint_payload("X1-AA-B2", "MOON", 4, 4)]),
            make_system("X1-BB", 10, 10),
        ]
    )
    return c


@pytest.fixture
def router(client):
    return Router(client, state=UIState(), nav=Navigator())


def test_router_initialization(router, client):
    assert router.client is client
    assert router.nav.current is View.DASHBOARD
    assert router.should_quit is False
    assert router.poll_timeout == 0.05
    assert router.systems_page == (1, 20)


def test_router_reads_settings():
    settings = SimpleNamespace(poll_timeout=0.2, SPACEDASH_SYSTEMS_PAGE=3, SPACEDASH_SYSTEMS_LIMIT=5)
    router = Router(MagicMock(), settings=settings)
    assert router.poll_timeout == 0.2
    assert router.systems_page == (3, 5)


def test_register_screen_decorator():
    original_screens = SCREENS.copy()
    SCREENS.clear()
    try:
        @register_screen(View.MARKETS)
        def fake_screen(state):
            return "markets"

        assert SCREENS[View.MARKETS] is fake_screen
    finally:
        SCREENS.clear()
        SCREENS.update(original_screens)


@pytest.mark.asyncio
async def test_initial_refresh_loads_dashboard(router, client):
    await router.refresh(initial=True)
    assert router.state.agent.symbol == "TEST-1"
    assert router.state.server_status.version == "v2.1.0"
    client.get_my_ships.assert_not_awaited()


@pytest.mark.asyncio
async def test_run_quits_and_restores_terminal(client):
    terminal = FakeTerminal(["2", "q"])
    router = Router(client, terminal=terminal)

    await router.run()

    assert router.should_quit
    assert terminal.entered == 1
    assert terminal.exited == 1
    assert len(terminal.frames) == 2
    assert list(router.state.session_history) == ["dashboard", "ship_list"]
    assert router.state.view_changes == 1
    assert len(router.state.ships) == 3


@pytest.mark.asyncio
async def test_initial_refresh_failure_propagates_and_restores_terminal(client):
    client.get_my_agent.side_effect = SpaceTradersError("GET /my/agent returned 401: Unauthorized", status_code=401)
    terminal = FakeTerminal([])
    router = Router(client, terminal=terminal)

    with pytest.raises(SpaceTradersError):
        await router.run()

    assert terminal.entered == 1
    assert terminal.exited == 1
    assert terminal.frames == []


@pytest.mark.asyncio
async def test_later_refresh_failure_keeps_previous_snapshot(router, client):
    await router.handle_key("2")
    ships = router.state.ships

    client.get_my_ships.side_effect = SpaceTradersError("boom")
    await router.handle_key("r")

    assert router.state.ships is ships
    assert router.nav.current is View.SHIP_LIST


@pytest.mark.asyncio
async def test_selection_wraps_on_ship_list(router):
    await router.handle_key("2")
    router.state.ships_cursor.selected = 2

    await router.handle_key("j")
    assert router.state.ships_cursor.selected == 0

    await router.handle_key("up")
    assert router.state.ships_cursor.selected == 2


@pytest.mark.asyncio
async def test_selection_without_list_is_noop(router):
    await router.handle_key("down")
    assert router.state.ships_cursor.selected == 0
    assert router.move_selection(forward=True) is None


@pytest.mark.asyncio
async def test_drill_into_ship_and_back(router, client):
    await router.handle_key("2")
    await router.handle_key("j")
    await router.handle_key("enter")

    assert router.nav.current is View.SHIP_DETAIL
    assert router.state.selected_ship_index == 1

    # Back does not fetch again.
    await router.handle_key("esc")
    assert router.nav.current is View.SHIP_LIST
    assert client.get_my_ships.await_count == 1


@pytest.mark.asyncio
async def test_enter_on_detail_goes_back(router):
    await router.handle_key("2")
    await router.handle_key("enter")
    await router.handle_key("enter")
    assert router.nav.current is View.SHIP_LIST


@pytest.mark.asyncio
async def test_drill_down_with_no_cursor_is_noop(router):
    await router.handle_key("2")
    router.state.ships_cursor.selected = None

    await router.handle_key("enter")
    assert router.nav.current is View.SHIP_LIST
    assert router.state.selected_ship_index is None


@pytest.mark.asyncio
async def test_drill_down_on_empty_list_is_noop(router, client):
    client.get_my_ships.return_value = []
    await router.handle_key("2")
    await router.handle_key("enter")
    assert router.nav.current is View.SHIP_LIST


@pytest.mark.asyncio
async def test_system_to_waypoint_drill_down(router, client):
    await router.handle_key("3")
    client.get_systems.assert_awaited_once_with(page=1, limit=20)

    router.state.waypoints_cursor.selected = 1
    await router.handle_key("enter")
    assert router.nav.current is View.SYSTEM_DETAIL
    assert router.state.selected_system_index == 0
    assert router.state.waypoints_cursor.selected == 0

    await router.handle_key("j")
    await router.handle_key("enter")
    assert router.nav.current is View.WAYPOINT_DETAIL
    assert router.state.selected_waypoint_index == 1
    assert router.nav.breadcrumbs() == "Systems > System Detail > Waypoint Detail"

    await router.handle_key("esc")
    await router.handle_key("esc")
    assert router.nav.current is View.SYSTEM_LIST


@pytest.mark.asyncio
async def test_system_without_waypoints_cannot_drill(router, client):
    await router.handle_key("3")
    router.state.systems_cursor.selected = 1
    await router.handle_key("enter")
    assert router.nav.current is View.SYSTEM_DETAIL

    await router.handle_key("enter")
    # Enter on a waypoint-less system has nothing to open.
    assert router.nav.current is View.SYSTEM_DETAIL


@pytest.mark.asyncio
async def test_tab_refreshes_target(router, client):
    await router.handle_key("tab")
    assert router.nav.current is View.SHIP_LIST
    client.get_my_ships.assert_awaited_once()

    await router.handle_key("tab")
    assert router.nav.current is View.SYSTEM_LIST
    client.get_systems.assert_awaited_once()

    await router.handle_key("tab")
    assert router.nav.current is View.MARKETS

    await router.handle_key("shift+tab")
    assert router.nav.current is View.SYSTEM_LIST
    assert client.get_systems.await_count == 2


@pytest.mark.asyncio
async def test_jump_to_same_tab_refreshes(router, client):
    await router.handle_key("1")
    client.get_my_agent.assert_awaited_once()
    assert list(router.state.session_history) == []


@pytest.mark.asyncio
async def test_help_toggle_and_unbound_keys(router, client):
    await router.handle_key("h")
    assert router.state.help_visible
    await router.handle_key("x")
    assert router.state.help_visible
    assert router.nav.current is View.DASHBOARD
    client.get_my_agent.assert_not_awaited()


@pytest.mark.asyncio
async def test_ctrl_c_quits(router):
    await router.handle_key("c-c")
    assert router.should_quit


def test_render_unknown_view_shows_error(router):
    original_screens = SCREENS.copy()
    SCREENS.clear()
    try:
        layout = router.render()
        assert layout["content"].renderable.title == "Error"
    finally:
        SCREENS.update(original_screens)
