"""Session state: fetched snapshots, list cursors and drill-down indices."""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

from ..models import Agent, ServerStatus, Ship, System, SystemWaypoint
from .selection import ListCursor

# Most recent views kept in the session history.
HISTORY_LIMIT = 50


@dataclass
class UIState:
    """UI session state owned by the router and handed to every screen.

    Snapshots stay None until their first fetch completes and are replaced
    wholesale on every refresh. Drill-down indices are captured when a detail
    view is entered and are checked against the current snapshot at render
    time, since a refresh may have shrunk the list underneath them.
    """

    # Snapshots
    agent: Agent | None = None
    server_status: ServerStatus | None = None
    ships: list[Ship] | None = None
    systems: list[System] | None = None

    # List cursors
    ships_cursor: ListCursor = field(default_factory=ListCursor)
    systems_cursor: ListCursor = field(default_factory=ListCursor)
    waypoints_cursor: ListCursor = field(default_factory=ListCursor)

    # Drill-down references
    selected_ship_index: int | None = None
    selected_system_index: int | None = None
    selected_waypoint_index: int | None = None

    help_visible: bool = False

    # Session history for debugging; bounded, with a running count of view changes
    session_history: deque[str] = field(default_factory=lambda: deque(maxlen=HISTORY_LIMIT))
    view_changes: int = 0

    def remember(self, **kwargs) -> None:
        """Update state with new values, ignoring unknown attributes.

        Example:
            state.remember(ships=[...], selected_ship_index=None)
        """
        for key, value in kwargs.items():
            if hasattr(self, key):
                setattr(self, key, value)

    def add_to_history(self, view: str) -> None:
        if self.session_history:
            self.view_changes += 1
        self.session_history.append(view)

    def toggle_help(self) -> None:
        self.help_visible = not self.help_visible

    def current_system(self) -> System | None:
        """System behind the stored system index, if it is still valid."""
        if self.systems is None or self.selected_system_index is None:
            return None
        if not 0 <= self.selected_system_index < len(self.systems):
            return None
        return self.systems[self.selected_system_index]

    def current_waypoints(self) -> list[SystemWaypoint]:
        system = self.current_system()
        return system.waypoints if system is not None else []
