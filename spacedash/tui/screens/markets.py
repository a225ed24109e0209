"""Markets screen: placeholder until trading is supported."""
from __future__ import annotations

from rich.console import RenderableType
from rich.panel import Panel
from rich.text import Text

from ..navigator import View
from ..router import register_screen
from ..state import UIState


@register_screen(View.MARKETS)
def show_markets(state: UIState) -> RenderableType:
    """Static panel; ignores state entirely."""
    content = Text.assemble(
        "\n",
        ("✨ ", "yellow"),
        ("COMING SOON", "bold cyan"),
        (" ✨", "yellow"),
        "\n\n",
        "The Markets feature is under development and will be available in a future update.",
        "\n\n",
        ("Stay tuned for trading capabilities!", "green"),
        justify="center",
    )
    return Panel(content, title="Markets", title_align="left")
