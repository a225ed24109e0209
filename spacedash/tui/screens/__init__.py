"""Screen modules for the TUI."""
from __future__ import annotations

# Import all screen modules to register them with the router
from . import (
    dashboard,
    markets,
    ships,
    systems,
)

__all__ = [
    "dashboard",
    "markets",
    "ships",
    "systems",
]
