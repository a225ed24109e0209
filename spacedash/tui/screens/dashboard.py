"""Dashboard screen: agent summary beside the game server status."""
from __future__ import annotations

from rich.console import RenderableType
from rich.layout import Layout

from ..components import info_panel, plain_line, render_message
from ..navigator import View
from ..router import register_screen
from ..state import UIState

WELCOME = "Welcome to Space Traders"


def render_agent(state: UIState) -> RenderableType:
    agent = state.agent
    if agent is None:
        return render_message("Loading agent data...", "Agent Info")
    return info_panel(
        [
            plain_line("Agent", agent.symbol, "bold green"),
            plain_line("Credits", agent.credits, "yellow"),
            plain_line("HQ", agent.headquarters, "cyan"),
            plain_line("Faction", agent.starting_faction, "magenta"),
            plain_line("Ships", agent.ship_count, "blue"),
        ],
        "Agent Info",
    )


def render_server_status(state: UIState) -> RenderableType:
    status = state.server_status
    if status is None:
        return render_message(WELCOME, "Game Status")
    return info_panel(
        [
            plain_line("Status", status.status, "green"),
            plain_line("Version", status.version, "blue"),
            plain_line("Reset Date", status.reset_date, "yellow"),
        ],
        "Game Status",
    )


@register_screen(View.DASHBOARD)
def show_dashboard(state: UIState) -> RenderableType:
    layout = Layout(name="dashboard")
    layout.split_row(
        Layout(render_agent(state), name="agent"),
        Layout(render_server_status(state), name="server"),
    )
    return layout
