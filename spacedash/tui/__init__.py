"""TUI (Terminal User Interface) module for spacedash.

Provides tabbed, keyboard-driven views over agent, fleet and system data.
"""
from .navigator import Navigator, View
from .router import Router
from .state import UIState

__all__ = ["Navigator", "Router", "UIState", "View"]
