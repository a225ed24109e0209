from __future__ import annotations

import asyncio
import logging

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .client import SpaceTradersClient, SpaceTradersError
from .logging import setup_logging
from .settings import ConfigurationError, Settings, load_settings

logger = logging.getLogger("spacedash")

app = typer.Typer(
    add_completion=False,
    help="spacedash: terminal dashboard for the SpaceTraders API",
    rich_markup_mode="rich",
)
console = Console()

# ═══════════════════════════════════════════════════════════════════════════════
# BANNER & HELPERS
# ═══════════════════════════════════════════════════════════════════════════════

BANNER = """
[bold bright_cyan]🚀 Space Traders API Client[/bold bright_cyan]
[bright_cyan]=========================[/bright_cyan]"""


def _print_error(title: str, cause: str, action: str | None = None) -> None:
    """Render a friendly error panel with 3-part structure."""
    content = f"[bold red]✗ {title}[/bold red]\n\n"
    content += f"[yellow]Cause:[/yellow] {escape(cause)}\n"
    if action:
        content += f"\n[dim]→ {action}[/dim]"
    console.print(Panel.fit(content, border_style="red", title="Error"))


def _print_checklist(checks: list[tuple[str, bool]]) -> None:
    console.print("\n[bold yellow]System Status:[/bold yellow]")
    for i, (label, ok) in enumerate(checks):
        branch = "└─" if i == len(checks) - 1 else "├─"
        mark = "[green]✓[/green]" if ok else "[red]✗[/red]"
        console.print(f"{branch} [blue]{label}:[/blue] {mark}")
    console.print()


def _client(settings: Settings, token: str | None) -> SpaceTradersClient:
    return SpaceTradersClient(
        token,
        base_url=settings.SPACE_TRADERS_BASE_URL,
        timeout=settings.SPACEDASH_HTTP_TIMEOUT,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# DASHBOARD
# ═══════════════════════════════════════════════════════════════════════════════

async def _run_dashboard(settings: Settings, token: str) -> None:
    from .tui.router import Router
    # Import screens to register them
    from .tui import screens  # noqa: F401

    async with _client(settings, token) as client:
        await Router(client, settings).run()


def _launch() -> None:
    """Startup sequence, then the dashboard until the user quits."""
    s = load_settings()

    console.clear()
    console.print(BANNER)

    log_file = setup_logging(s)
    console.print(f"[dim]Logging to {log_file}[/dim]")

    try:
        token = s.require_token()
    except ConfigurationError as e:
        logger.error("Failed to load API token: %s", e)
        _print_checklist([("Environment", True), ("Logging", True), ("API Token", False)])
        _print_error(
            "Failed to load API token",
            str(e),
            "Add SPACE_TRADERS_API_TOKEN=<token> to your .env file",
        )
        raise typer.Exit(code=1)

    _print_checklist([("Environment", True), ("Logging", True), ("API Token", True)])
    logger.info("System initialized, starting dashboard")

    try:
        asyncio.run(_run_dashboard(s, token))
    except SpaceTradersError as e:
        logger.error("Initial refresh failed: %s", e)
        _print_error(
            "Could not load initial data",
            str(e),
            f"Check your token and that {s.SPACE_TRADERS_BASE_URL} is reachable",
        )
        raise typer.Exit(code=1)


# ═══════════════════════════════════════════════════════════════════════════════
# MAIN CALLBACK
# ═══════════════════════════════════════════════════════════════════════════════

@app.callback(invoke_without_command=True)
def _root(ctx: typer.Context):
    """
    [bold]spacedash[/bold]: browse your SpaceTraders agent, fleet and systems.

    [dim]Run without arguments to launch the dashboard.[/dim]

    [bold]Quick Commands:[/bold]
      spacedash status     Show game server status
      spacedash agent      Show your agent summary
    """
    if ctx.invoked_subcommand is None:
        _launch()


# ═══════════════════════════════════════════════════════════════════════════════
# COMMANDS
# ═══════════════════════════════════════════════════════════════════════════════

@app.command("run", help="[bold cyan]R[/bold cyan]un the interactive dashboard")
def run() -> None:
    _launch()


@app.command("status", help="[bold cyan]S[/bold cyan]how game server status")
def status() -> None:
    """Print the server status; no token required."""
    s = load_settings()
    setup_logging(s, console=False)

    async def _fetch():
        async with _client(s, s.SPACE_TRADERS_API_TOKEN) as client:
            return await client.get_status()

    try:
        server = asyncio.run(_fetch())
    except SpaceTradersError as e:
        _print_error("API is not responding", str(e))
        raise typer.Exit(code=1)

    t = Table(title="[bold]Game Status[/bold]", show_header=False)
    t.add_column("Field", style="bold")
    t.add_column("Value", style="cyan")
    # Values come from the server; Text keeps them out of markup parsing.
    t.add_row("Status", Text(server.status, style="green"))
    t.add_row("Version", Text(server.version))
    t.add_row("Reset Date", Text(server.reset_date))
    console.print(t)


@app.command("agent", help="[bold cyan]A[/bold cyan]gent summary for your token")
def agent() -> None:
    s = load_settings()
    setup_logging(s, console=False)

    try:
        token = s.require_token()
    except ConfigurationError as e:
        _print_error("Failed to load API token", str(e), "Add SPACE_TRADERS_API_TOKEN=<token> to your .env file")
        raise typer.Exit(code=1)

    async def _fetch():
        async with _client(s, token) as client:
            return await client.get_my_agent()

    try:
        me = asyncio.run(_fetch())
    except SpaceTradersError as e:
        _print_error("Could not fetch agent", str(e))
        raise typer.Exit(code=1)

    t = Table(title="[bold]Agent Info[/bold]", show_header=False)
    t.add_column("Field", style="bold")
    t.add_column("Value", style="cyan", justify="right")
    t.add_row("Agent", Text(me.symbol, style="bold green"))
    t.add_row("Credits", f"{me.credits:,}")
    t.add_row("HQ", Text(me.headquarters))
    t.add_row("Faction", Text(me.starting_faction))
    t.add_row("Ships", str(me.ship_count))
    console.print(t)


def main():
    app()
