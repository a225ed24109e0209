"""Main event loop, refresh controller and screen registry for the TUI."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Protocol

from rich.console import RenderableType

from ..client import SpaceTradersError
from .components import frame_layout, render_error, render_status, render_tab_strip
from .keys import Action, action_for
from .navigator import DRILL_DOWN, REFRESHING, Navigator, View
from .selection import ListCursor
from .state import UIState

if TYPE_CHECKING:
    from ..client import SpaceTradersClient
    from ..settings import Settings

logger = logging.getLogger(__name__)

DEFAULT_POLL_TIMEOUT = 0.05

JUMPS = {
    Action.JUMP_DASHBOARD: View.DASHBOARD,
    Action.JUMP_SHIPS: View.SHIP_LIST,
    Action.JUMP_SYSTEMS: View.SYSTEM_LIST,
    Action.JUMP_MARKETS: View.MARKETS,
}


class Terminal(Protocol):
    def __enter__(self) -> "Terminal": ...

    def __exit__(self, exc_type, exc, tb) -> bool | None: ...

    def draw(self, renderable: RenderableType) -> None: ...

    async def read_key(self, timeout: float) -> str | None: ...


class Router:
    """Single-threaded dashboard loop.

    Each iteration draws the frame from the current state, waits briefly for
    one key, and applies the bound action. Actions that land on a tab, and
    explicit refreshes, fetch that tab's snapshot before the next draw; the
    loop is suspended while the fetch is in flight, so at most one request
    is outstanding.
    """

    def __init__(
        self,
        client: SpaceTradersClient,
        settings: Settings | None = None,
        state: UIState | None = None,
        nav: Navigator | None = None,
        terminal: Terminal | None = None,
    ):
        """Initialize router with dependencies.

        Args:
            client: Data provider for agent, ships and systems
            settings: Application settings (systems page, poll timeout)
            state: UI session state
            nav: Navigator instance
            terminal: Terminal session; a real one is created by `run()` if omitted
        """
        self.client = client
        self.settings = settings
        self.state = state or UIState()
        self.nav = nav or Navigator()
        self.terminal = terminal
        self.should_quit = False

    @property
    def poll_timeout(self) -> float:
        if self.settings is None:
            return DEFAULT_POLL_TIMEOUT
        return self.settings.poll_timeout

    @property
    def systems_page(self) -> tuple[int, int]:
        if self.settings is None:
            return 1, 20
        return self.settings.SPACEDASH_SYSTEMS_PAGE, self.settings.SPACEDASH_SYSTEMS_LIMIT

    # ------------------------------------------------------------------
    # Loop
    # ------------------------------------------------------------------

    async def run(self) -> None:
        """Run until a quit action is seen.

        The initial fetch happens with the terminal already switched; a
        failure there propagates, and the terminal is still restored.
        """
        if self.terminal is None:
            from .terminal import TerminalSession

            self.terminal = TerminalSession()

        with self.terminal as terminal:
            self.state.add_to_history(self.nav.current.value)
            await self.refresh(initial=True)

            while not self.should_quit:
                terminal.draw(self.render())
                key = await terminal.read_key(self.poll_timeout)
                if key is not None:
                    await self.handle_key(key)

        logger.info("Dashboard closed after %d view changes", self.state.view_changes)

    async def handle_key(self, key: str) -> None:
        action = action_for(key)
        if action is None:
            return

        before = self.nav.current
        needs_refresh = self.apply(action)
        if self.nav.current is not before:
            self.state.add_to_history(self.nav.current.value)
        if needs_refresh:
            await self.refresh()

    def apply(self, action: Action) -> bool:
        """Apply one action to state and navigation.

        Returns True when the active view's snapshot should be fetched.
        """
        if action is Action.QUIT:
            self.should_quit = True
        elif action is Action.REFRESH:
            return True
        elif action is Action.TOGGLE_HELP:
            self.state.toggle_help()
        elif action is Action.NEXT_TAB:
            self.nav.next_tab()
            return True
        elif action is Action.PREVIOUS_TAB:
            self.nav.previous_tab()
            return True
        elif action in JUMPS:
            self.nav.jump(JUMPS[action])
            return True
        elif action is Action.SELECT_NEXT:
            self.move_selection(forward=True)
        elif action is Action.SELECT_PREVIOUS:
            self.move_selection(forward=False)
        elif action is Action.CONFIRM:
            # Enter drills down where there is something below, otherwise goes back.
            if self.nav.current in DRILL_DOWN:
                self.drill_down()
            else:
                self.nav.back()
        elif action is Action.CANCEL:
            self.nav.back()
        return False

    # ------------------------------------------------------------------
    # Selection and drill-down
    # ------------------------------------------------------------------

    def active_list(self) -> tuple[ListCursor, int] | None:
        """Cursor and backing length for the list shown in the current view."""
        view = self.nav.current
        if view is View.SHIP_LIST and self.state.ships is not None:
            return self.state.ships_cursor, len(self.state.ships)
        if view is View.SYSTEM_LIST and self.state.systems is not None:
            return self.state.systems_cursor, len(self.state.systems)
        if view is View.SYSTEM_DETAIL and self.state.current_system() is not None:
            return self.state.waypoints_cursor, len(self.state.current_waypoints())
        return None

    def move_selection(self, forward: bool) -> int | None:
        active = self.active_list()
        if active is None:
            return None
        cursor, length = active
        return cursor.next(length) if forward else cursor.previous(length)

    def drill_down(self) -> bool:
        """Enter the detail view for the highlighted entry.

        A no-op (returns False) when nothing valid is highlighted.
        """
        active = self.active_list()
        if active is None:
            return False
        cursor, length = active
        if not cursor.valid_for(length):
            return False

        view = self.nav.current
        if view is View.SHIP_LIST:
            self.state.selected_ship_index = cursor.selected
        elif view is View.SYSTEM_LIST:
            self.state.selected_system_index = cursor.selected
            # Waypoint cursor is scoped to the system being entered.
            self.state.waypoints_cursor.reset()
        elif view is View.SYSTEM_DETAIL:
            self.state.selected_waypoint_index = cursor.selected

        self.nav.drill_down()
        return True

    # ------------------------------------------------------------------
    # Refresh
    # ------------------------------------------------------------------

    async def refresh(self, *, initial: bool = False) -> bool:
        """Fetch the snapshot for the current view.

        Returns True if new data arrived. Provider errors keep the previous
        snapshot and are only logged, except on the initial fetch where they
        propagate.
        """
        view = self.nav.current
        if view not in REFRESHING:
            return False

        try:
            if view is View.DASHBOARD:
                self.state.remember(agent=await self.client.get_my_agent())
                self.state.remember(server_status=await self.client.get_status())
            elif view is View.SHIP_LIST:
                self.state.remember(ships=await self.client.get_my_ships())
            elif view is View.SYSTEM_LIST:
                page, limit = self.systems_page
                self.state.remember(systems=await self.client.get_systems(page=page, limit=limit))
        except SpaceTradersError as exc:
            if initial:
                raise
            logger.warning("Refresh of %s failed, keeping previous data: %s", view.value, exc)
            return False

        logger.debug("Refreshed %s", view.value)
        return True

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self) -> RenderableType:
        view = self.nav.current
        screen_fn = SCREENS.get(view)
        if screen_fn is None:
            logger.warning("No screen registered for %s", view.value)
            content: RenderableType = render_error(f"Unknown view '{view.value}'")
        else:
            content = screen_fn(self.state)

        return frame_layout(
            render_tab_strip(self.nav),
            content,
            render_status(self.state.help_visible),
            self.state.help_visible,
        )


# Screen registry - maps each view to the function that draws its content pane
SCREENS: dict[View, Callable[[UIState], RenderableType]] = {}


def register_screen(view: View):
    """Decorator to register a screen function.

    Usage:
        @register_screen(View.DASHBOARD)
        def show_dashboard(state: UIState) -> RenderableType:
            ...
    """
    def decorator(fn: Callable[[UIState], RenderableType]):
        SCREENS[view] = fn
        return fn
    return decorator
