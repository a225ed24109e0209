"""Typed records returned by the SpaceTraders API.

Only the fields the dashboard shows are declared; anything else on the wire
is ignored. Category fields (roles, types, statuses) stay plain strings so a
value the game adds later never fails validation.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class ServerStatus(ApiModel):
    status: str
    version: str
    reset_date: str


class Agent(ApiModel):
    account_id: str | None = None
    symbol: str
    headquarters: str
    credits: int
    starting_faction: str
    ship_count: int = 0


# ── Ships ─────────────────────────────────────────────────────────────────────


class ShipRegistration(ApiModel):
    name: str
    faction_symbol: str
    role: str


class RouteWaypoint(ApiModel):
    symbol: str
    type: str | None = None
    system_symbol: str | None = None
    x: int | None = None
    y: int | None = None


class ShipRoute(ApiModel):
    origin: RouteWaypoint
    destination: RouteWaypoint
    departure_time: str | None = None
    arrival: str


class ShipNav(ApiModel):
    system_symbol: str
    waypoint_symbol: str
    route: ShipRoute
    status: str
    flight_mode: str = "CRUISE"


class ShipComponent(ApiModel):
    symbol: str
    name: str | None = None


class ShipFuel(ApiModel):
    current: int
    capacity: int


class CargoItem(ApiModel):
    symbol: str
    name: str | None = None
    units: int


class ShipCargo(ApiModel):
    capacity: int
    units: int
    inventory: list[CargoItem] = Field(default_factory=list)


class Ship(ApiModel):
    symbol: str
    registration: ShipRegistration
    nav: ShipNav
    frame: ShipComponent
    engine: ShipComponent
    fuel: ShipFuel
    cargo: ShipCargo
    modules: list[ShipComponent] = Field(default_factory=list)

    @property
    def role(self) -> str:
        return self.registration.role


# ── Systems ───────────────────────────────────────────────────────────────────


class SymbolRef(ApiModel):
    symbol: str


class SystemWaypoint(ApiModel):
    symbol: str
    type: str
    x: int
    y: int
    orbits: str | None = None
    orbitals: list[SymbolRef] = Field(default_factory=list)


class System(ApiModel):
    symbol: str
    sector_symbol: str | None = None
    type: str
    x: int
    y: int
    waypoints: list[SystemWaypoint] = Field(default_factory=list)
    factions: list[SymbolRef] = Field(default_factory=list)
