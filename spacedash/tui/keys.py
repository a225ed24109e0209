"""Keyboard surface: key names to dashboard actions."""
from __future__ import annotations

from enum import Enum

from prompt_toolkit.key_binding import KeyPress
from prompt_toolkit.keys import Keys


class Action(Enum):
    QUIT = "quit"
    REFRESH = "refresh"
    TOGGLE_HELP = "toggle_help"
    NEXT_TAB = "next_tab"
    PREVIOUS_TAB = "previous_tab"
    JUMP_DASHBOARD = "jump_dashboard"
    JUMP_SHIPS = "jump_ships"
    JUMP_SYSTEMS = "jump_systems"
    JUMP_MARKETS = "jump_markets"
    SELECT_NEXT = "select_next"
    SELECT_PREVIOUS = "select_previous"
    CONFIRM = "confirm"
    CANCEL = "cancel"


KEYMAP: dict[str, Action] = {
    "q": Action.QUIT,
    Keys.ControlC.value: Action.QUIT,
    "r": Action.REFRESH,
    "h": Action.TOGGLE_HELP,
    Keys.Tab.value: Action.NEXT_TAB,
    Keys.BackTab.value: Action.PREVIOUS_TAB,
    "1": Action.JUMP_DASHBOARD,
    "2": Action.JUMP_SHIPS,
    "3": Action.JUMP_SYSTEMS,
    "4": Action.JUMP_MARKETS,
    Keys.Down.value: Action.SELECT_NEXT,
    "j": Action.SELECT_NEXT,
    Keys.Up.value: Action.SELECT_PREVIOUS,
    "k": Action.SELECT_PREVIOUS,
    Keys.Enter.value: Action.CONFIRM,
    # Some terminals send LF for Enter in raw mode.
    Keys.ControlJ.value: Action.CONFIRM,
    Keys.Escape.value: Action.CANCEL,
}

# Readable names accepted by `action_for` alongside the raw prompt_toolkit ones.
ALIASES = {
    "tab": Keys.Tab.value,
    "shift+tab": Keys.BackTab.value,
    "enter": Keys.Enter.value,
    "esc": Keys.Escape.value,
}


# Names reported for keys prompt_toolkit represents as control characters.
READABLE_NAMES = {
    Keys.Tab.value: "tab",
    Keys.Enter.value: "enter",
    Keys.ControlJ.value: "enter",
}


def key_name(press: KeyPress) -> str:
    """Normalize a prompt_toolkit key press to a plain string."""
    key = press.key
    name = key.value if isinstance(key, Keys) else str(key)
    return READABLE_NAMES.get(name, name)


def action_for(key: str | None) -> Action | None:
    """Action bound to `key`; None for unbound keys."""
    if not key:
        return None
    key = ALIASES.get(key, key)
    return KEYMAP.get(key)
