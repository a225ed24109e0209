"""Glyph and color lookups keyed by game categories.

Every lookup is total: an unrecognized category gets the neutral default.
"""
from __future__ import annotations

from .projection import Mark

DEFAULT_COLOR = "grey62"

SHIP_ROLE_COLORS = {
    "COMMAND": "yellow",
    "EXCAVATOR": "bright_red",
    "HAULER": "green",
    "INTERCEPTOR": "red",
    "EXPLORER": "blue",
    "TRANSPORT": "cyan",
    "CARRIER": "magenta",
    "PATROL": "bright_blue",
    "SATELLITE": "bright_cyan",
    "SURVEYOR": "bright_green",
}

SYSTEM_TYPE_COLORS = {
    "NEUTRON_STAR": "cyan",
    "RED_STAR": "red",
    "ORANGE_STAR": "bright_red",
    "BLUE_STAR": "blue",
    "YOUNG_STAR": "yellow",
    "WHITE_DWARF": "white",
    "BLACK_HOLE": "grey35",
    "HYPERGIANT": "magenta",
    "NEBULA": "bright_magenta",
    "UNSTABLE": "bright_yellow",
}

WAYPOINT_MARKS = {
    "PLANET": Mark("P", "green"),
    "GAS_GIANT": Mark("G", "bright_red"),
    "MOON": Mark("m", "white"),
    "ORBITAL_STATION": Mark("S", "blue"),
    "JUMP_GATE": Mark("J", "magenta"),
    "ASTEROID_FIELD": Mark("∗", "yellow"),
    "NEBULA": Mark("≈", "bright_magenta"),
    "DEBRIS_FIELD": Mark("⦿", "grey35"),
}
DEFAULT_WAYPOINT_MARK = Mark("•", DEFAULT_COLOR)

NAV_STATUS_COLORS = {
    "IN_TRANSIT": "yellow",
    "DOCKED": "green",
    "IN_ORBIT": "blue",
}

SYSTEM_GLYPH = "●"
SELECTED_SYSTEM_MARK = Mark("★", "bold white")
STAR_MARK = Mark("★", "yellow")


def ship_role_color(role: str) -> str:
    return SHIP_ROLE_COLORS.get(role, DEFAULT_COLOR)


def system_type_color(system_type: str) -> str:
    return SYSTEM_TYPE_COLORS.get(system_type, DEFAULT_COLOR)


def system_mark(system_type: str) -> Mark:
    return Mark(SYSTEM_GLYPH, system_type_color(system_type))


def waypoint_mark(waypoint_type: str) -> Mark:
    return WAYPOINT_MARKS.get(waypoint_type, DEFAULT_WAYPOINT_MARK)


def waypoint_color(waypoint_type: str) -> str:
    return waypoint_mark(waypoint_type).style


def selected_waypoint_mark(waypoint_type: str) -> Mark:
    # Keeps the type glyph; only the style changes.
    return Mark(waypoint_mark(waypoint_type).glyph, "bold bright_white")


def nav_status_color(status: str) -> str:
    return NAV_STATUS_COLORS.get(status, "white")
