"""System list, system detail and waypoint detail screens.

The list and the system detail each pair a list pane with a projected map.
"""
from __future__ import annotations

from rich.align import Align
from rich.console import RenderableType
from rich.layout import Layout
from rich.panel import Panel
from rich.text import Text

from ...models import System, SystemWaypoint
from ..components import (
    MapCanvas,
    SelectableList,
    bullets,
    field_line,
    info_panel,
    map_panel,
    render_error,
    render_message,
)
from ..navigator import View
from ..palette import (
    SELECTED_SYSTEM_MARK,
    STAR_MARK,
    selected_waypoint_mark,
    system_mark,
    system_type_color,
    waypoint_color,
    waypoint_mark,
)
from ..projection import Chart
from ..router import register_screen
from ..state import UIState

SYSTEM_CHART: Chart[System] = Chart(
    position=lambda s: (s.x, s.y),
    mark=lambda s: system_mark(s.type),
    highlight=lambda s: SELECTED_SYSTEM_MARK,
)

# Waypoint coordinates are relative to the system's star at (0, 0).
WAYPOINT_CHART: Chart[SystemWaypoint] = Chart(
    position=lambda w: (w.x, w.y),
    mark=lambda w: waypoint_mark(w.type),
    highlight=lambda w: selected_waypoint_mark(w.type),
    origin=STAR_MARK,
)


def system_entry(system: System) -> Text:
    return Text.assemble(
        (f"[{system.type:^12}] ", system_type_color(system.type)),
        f"{system.symbol} ",
        (f"(x:{system.x}, y:{system.y})", "bright_black"),
    )


def waypoint_entry(waypoint: SystemWaypoint) -> Text:
    return Text.assemble(
        (waypoint.symbol, "cyan"),
        " - ",
        (waypoint.type, waypoint_color(waypoint.type)),
        f" ({waypoint.x}, {waypoint.y})",
    )


def system_info_lines(system: System, waypoint_suffix: str = "") -> list[Text]:
    return [
        field_line("Type", system.type, system_type_color(system.type)),
        field_line("Position", f"X: {system.x}, Y: {system.y}"),
        field_line("Waypoints", f"{len(system.waypoints)}{waypoint_suffix}"),
    ]


# ═══════════════════════════════════════════════════════════════════════════════
# SYSTEM LIST
# ═══════════════════════════════════════════════════════════════════════════════

@register_screen(View.SYSTEM_LIST)
def show_system_list(state: UIState) -> RenderableType:
    systems = state.systems
    if systems is None:
        return render_message("Loading systems...", "Systems")
    if not systems:
        return render_message("No systems found.", "Systems")

    selected = state.systems_cursor.selected
    listing = Panel(
        SelectableList(
            [system_entry(s) for s in systems],
            selected,
            symbol="> ",
            highlight_style="bold on grey23",
        ),
        title="Systems",
        title_align="left",
    )
    chart = map_panel(MapCanvas(SYSTEM_CHART, systems, selected), "System Map")

    layout = Layout(name="system_list")
    layout.split_column(
        Layout(listing, name="list", ratio=1),
        Layout(chart, name="map", ratio=1),
    )
    return layout


# ═══════════════════════════════════════════════════════════════════════════════
# SYSTEM DETAIL
# ═══════════════════════════════════════════════════════════════════════════════

def render_system(system: System, waypoint_selected: int | None) -> RenderableType:
    header = Panel(
        Text.assemble(
            "System: ",
            (system.symbol, "green"),
            " - Type: ",
            (system.type, system_type_color(system.type)),
        ),
        title="System Detail",
        title_align="left",
    )
    basic = info_panel(
        [
            *system_info_lines(system),
            field_line("Factions", len(system.factions)),
        ],
        "System Information",
    )

    layout = Layout(name="system_detail")
    layout.split_column(
        Layout(header, name="header", size=3),
        Layout(basic, name="basic", size=6),
        Layout(name="waypoints", ratio=1),
    )

    if not system.waypoints:
        layout["waypoints"].update(render_message("No waypoints in this system", "Waypoints"))
        return layout

    listing = Panel(
        SelectableList([waypoint_entry(w) for w in system.waypoints], waypoint_selected, symbol=">> "),
        title="Waypoints (press Enter for details)",
        title_align="left",
    )
    chart = map_panel(MapCanvas(WAYPOINT_CHART, system.waypoints, waypoint_selected), "Waypoints Map")
    layout["waypoints"].split_row(
        Layout(listing, name="list"),
        Layout(chart, name="map"),
    )
    return layout


@register_screen(View.SYSTEM_DETAIL)
def show_system_detail(state: UIState) -> RenderableType:
    index = state.selected_system_index
    if index is None:
        return render_error("No system selected")
    if state.systems is None:
        return render_message("Loading system data...", "Loading")
    if not 0 <= index < len(state.systems):
        return render_error("Invalid system selection")
    return render_system(state.systems[index], state.waypoints_cursor.selected)


# ═══════════════════════════════════════════════════════════════════════════════
# WAYPOINT DETAIL
# ═══════════════════════════════════════════════════════════════════════════════

def render_waypoint(system: System, waypoint: SystemWaypoint) -> RenderableType:
    header = Panel(
        Align.center(
            Text.assemble(
                (waypoint.symbol, "bold cyan"),
                "  ",
                (f"System: {system.symbol}", "grey62"),
            )
        ),
        title="Waypoint Detail",
        title_align="left",
    )
    basic = info_panel(
        [
            field_line("Type", waypoint.type, waypoint_color(waypoint.type)),
            field_line("Position", f"X: {waypoint.x}, Y: {waypoint.y}"),
            field_line("Orbits", waypoint.orbits or "None"),
            field_line("Orbitals", f"{len(waypoint.orbitals)} objects"),
        ],
        "Waypoint Information",
    )

    if waypoint.orbitals:
        orbital_lines = bullets([o.symbol for o in waypoint.orbitals], style="bold cyan", marker="• ")
    else:
        orbital_lines = [Text("No orbital bodies")]
    orbitals = info_panel(orbital_lines, "Orbital Bodies")

    parent = info_panel(
        [
            field_line("System", system.symbol, "green"),
            *system_info_lines(system, " total"),
        ],
        "System Information",
    )

    layout = Layout(name="waypoint_detail")
    layout.split_column(
        Layout(header, name="header", size=3),
        Layout(basic, name="basic", size=6),
        Layout(name="extra", ratio=1),
    )
    layout["extra"].split_row(
        Layout(orbitals, name="orbitals"),
        Layout(parent, name="system"),
    )
    return layout


@register_screen(View.WAYPOINT_DETAIL)
def show_waypoint_detail(state: UIState) -> RenderableType:
    index = state.selected_waypoint_index
    if index is None:
        return render_error("No waypoint selected")
    if state.systems is None:
        return render_message("Loading system data...", "Loading")
    system = state.current_system()
    if system is None:
        return render_error("Invalid system selection")
    if not 0 <= index < len(system.waypoints):
        return render_error("Invalid waypoint selection")
    return render_waypoint(system, system.waypoints[index])
