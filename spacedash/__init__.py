"""spacedash: terminal dashboard for the SpaceTraders API."""

__version__ = "0.1.0"
