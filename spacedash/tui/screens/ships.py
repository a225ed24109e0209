"""Ship list and ship detail screens."""
from __future__ import annotations

from rich.align import Align
from rich.console import RenderableType
from rich.layout import Layout
from rich.panel import Panel
from rich.text import Text

from ...models import Ship
from ..components import (
    SelectableList,
    bullets,
    field_line,
    info_panel,
    plain_line,
    render_error,
    render_message,
)
from ..navigator import View
from ..palette import nav_status_color, ship_role_color
from ..router import register_screen
from ..state import UIState


def ship_entry(ship: Ship) -> Text:
    """Three-line list entry: identity, location, spacer."""
    return Text("\n").join(
        [
            Text.assemble(
                "Ship: ",
                (ship.symbol, "blue"),
                " - ",
                (ship.role, ship_role_color(ship.role)),
            ),
            plain_line("Location", ship.nav.waypoint_symbol, "yellow"),
            Text(""),
        ]
    )


@register_screen(View.SHIP_LIST)
def show_ship_list(state: UIState) -> RenderableType:
    if state.ships is None:
        return render_message("Loading ships data...", "Ships")
    if not state.ships:
        return render_message("No ships found", "Ships")

    items = [ship_entry(ship) for ship in state.ships]
    return Panel(
        SelectableList(items, state.ships_cursor.selected, symbol=">> "),
        title=f"Ships ({len(items)})",
        title_align="left",
    )


def render_ship(ship: Ship) -> RenderableType:
    role_color = ship_role_color(ship.role)

    header = Panel(
        Align.center(Text(ship.symbol, style="bold blue")),
        title="Ship Detail",
        title_align="left",
    )

    basic = info_panel(
        [
            field_line("Role", ship.role, role_color),
            field_line(
                "Registration",
                f"{ship.registration.name} ({ship.registration.faction_symbol})",
            ),
            field_line("Frame", ship.frame.symbol),
            field_line("Engine", ship.engine.symbol),
            field_line("Fuel", f"{ship.fuel.current}/{ship.fuel.capacity}"),
        ],
        "Ship Information",
    )

    cargo_lines = [
        field_line("Cargo", f"{ship.cargo.units}/{ship.cargo.capacity}"),
        Text(""),
        Text("Modules: ", style="bold"),
        *bullets([module.symbol for module in ship.modules]),
    ]
    if ship.cargo.inventory:
        cargo_lines += [
            Text(""),
            Text("Inventory: ", style="bold"),
            *bullets([f"{item.symbol} x{item.units}" for item in ship.cargo.inventory], style="green"),
        ]
    cargo = info_panel(cargo_lines, "Cargo & Modules")

    route = ship.nav.route
    navigation = info_panel(
        [
            field_line("Status", ship.nav.status, nav_status_color(ship.nav.status)),
            field_line("Location", ship.nav.waypoint_symbol),
            field_line("Flight Mode", ship.nav.flight_mode),
            Text("Route: ", style="bold"),
            plain_line("  From", route.origin.symbol, "blue"),
            plain_line("  To", route.destination.symbol, "green"),
            plain_line("  Arrival", route.arrival, "yellow"),
        ],
        "Navigation",
    )

    layout = Layout(name="ship_detail")
    layout.split_column(
        Layout(header, name="header", size=3),
        Layout(basic, name="basic", size=7),
        Layout(name="extra", ratio=1),
    )
    layout["extra"].split_row(
        Layout(cargo, name="cargo"),
        Layout(navigation, name="navigation"),
    )
    return layout


@register_screen(View.SHIP_DETAIL)
def show_ship_detail(state: UIState) -> RenderableType:
    index = state.selected_ship_index
    if index is None:
        return render_error("No ship selected")
    if state.ships is None:
        return render_message("Loading ship data...", "Loading")
    if not 0 <= index < len(state.ships):
        return render_error("Invalid ship selection")
    return render_ship(state.ships[index])
