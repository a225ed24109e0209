"""View state machine: tab cycle, drill-down and back."""
from __future__ import annotations

from enum import Enum


class View(str, Enum):
    DASHBOARD = "dashboard"
    SHIP_LIST = "ship_list"
    SHIP_DETAIL = "ship_detail"
    SYSTEM_LIST = "system_list"
    SYSTEM_DETAIL = "system_detail"
    WAYPOINT_DETAIL = "waypoint_detail"
    MARKETS = "markets"


# Top-level views in tab order.
TABS: tuple[View, ...] = (View.DASHBOARD, View.SHIP_LIST, View.SYSTEM_LIST, View.MARKETS)

TAB_LABELS = {
    View.DASHBOARD: "Dashboard",
    View.SHIP_LIST: "Ships",
    View.SYSTEM_LIST: "Systems",
    View.MARKETS: "Markets",
}

# Detail view -> top-level view it belongs to.
PARENT_TAB = {
    View.SHIP_DETAIL: View.SHIP_LIST,
    View.SYSTEM_DETAIL: View.SYSTEM_LIST,
    View.WAYPOINT_DETAIL: View.SYSTEM_LIST,
}

DRILL_DOWN = {
    View.SHIP_LIST: View.SHIP_DETAIL,
    View.SYSTEM_LIST: View.SYSTEM_DETAIL,
    View.SYSTEM_DETAIL: View.WAYPOINT_DETAIL,
}

BACK = {
    View.SHIP_DETAIL: View.SHIP_LIST,
    View.SYSTEM_DETAIL: View.SYSTEM_LIST,
    View.WAYPOINT_DETAIL: View.SYSTEM_DETAIL,
}

# Views whose snapshot is fetched when they become active.
REFRESHING = frozenset({View.DASHBOARD, View.SHIP_LIST, View.SYSTEM_LIST})


class Navigator:
    """Tracks the active view and applies legal transitions.

    Transitions:
    - Tab cycle: Dashboard -> Ships -> Systems -> Markets -> Dashboard. A
      detail view cycles from the tab it belongs to.
    - Drill-down: list -> detail, system detail -> waypoint detail.
    - Back: the reverse of drill-down; a no-op on top-level views.
    - Jump: straight to any top-level view.

    Whether a drill-down is allowed (a valid cursor exists) is decided by
    the caller; the navigator only knows the shape of the graph.
    """

    def __init__(self, start: View = View.DASHBOARD):
        self.current: View = start

    def tab(self) -> View:
        """Top-level view that owns the current view."""
        return PARENT_TAB.get(self.current, self.current)

    def is_top_level(self) -> bool:
        return self.current in TABS

    def next_tab(self) -> View:
        i = TABS.index(self.tab())
        self.current = TABS[(i + 1) % len(TABS)]
        return self.current

    def previous_tab(self) -> View:
        i = TABS.index(self.tab())
        self.current = TABS[(i - 1) % len(TABS)]
        return self.current

    def jump(self, view: View) -> View:
        if view not in TABS:
            raise ValueError(f"{view.value} is not a top-level view")
        self.current = view
        return self.current

    def drill_down_target(self) -> View | None:
        return DRILL_DOWN.get(self.current)

    def drill_down(self) -> View | None:
        """Enter the detail view below the current one, if any."""
        target = DRILL_DOWN.get(self.current)
        if target is not None:
            self.current = target
        return target

    def back(self) -> View | None:
        """Leave a detail view; returns None (and stays put) on a top-level view."""
        target = BACK.get(self.current)
        if target is not None:
            self.current = target
        return target

    def breadcrumbs(self) -> str:
        trail = [self.current]
        while trail[0] in BACK:
            trail.insert(0, BACK[trail[0]])
        labels = [TAB_LABELS.get(v) or v.value.replace("_", " ").title() for v in trail]
        return " > ".join(labels)
