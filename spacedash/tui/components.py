"""Reusable rich renderables for the dashboard frame and its panes."""
from __future__ import annotations

from typing import Generic, Sequence, TypeVar

from rich.console import Console, ConsoleOptions, RenderableType, RenderResult
from rich.layout import Layout
from rich.panel import Panel
from rich.text import Text

from .navigator import TAB_LABELS, TABS, Navigator
from .projection import Chart

T = TypeVar("T")

TAB_STRIP_HEIGHT = 3
STATUS_HEIGHT = 3
HELP_HEIGHT = 9
# Map height used when a canvas is rendered outside a sized region.
DEFAULT_CANVAS_HEIGHT = 10

HINT = "Press h for help | q to quit | r to refresh | Enter to view details"

HIGHLIGHT_STYLE = "on grey23"


# ═══════════════════════════════════════════════════════════════════════════════
# FRAME
# ═══════════════════════════════════════════════════════════════════════════════

def render_tab_strip(nav: Navigator) -> Panel:
    """Tab labels with the current tab highlighted and the view trail as subtitle."""
    active = nav.tab()
    strip = Text()
    for i, view in enumerate(TABS):
        if i:
            strip.append(" │ ", style="dim")
        label = TAB_LABELS[view]
        start = len(strip)
        strip.append(label[0], style="yellow")
        strip.append(label[1:])
        if view is active:
            strip.stylize("bold black on yellow", start, len(strip))
    return Panel(
        strip,
        title="Space Traders",
        title_align="left",
        subtitle=f"[dim]{nav.breadcrumbs()}[/dim]",
        subtitle_align="right",
        style="white",
    )


def render_status(help_visible: bool) -> Panel:
    """Single hint line, or the key legend when help is toggled on."""
    if not help_visible:
        return Panel(Text(HINT), style="white")

    def keys(*pairs: tuple[str, str]) -> Text:
        line = Text()
        for key, label in pairs:
            line.append(key, style="cyan")
            line.append(f": {label}  ")
        return line

    legend = [
        Text("Keyboard Navigation", style="bold yellow"),
        Text(""),
        keys(("q", "Quit"), ("r", "Refresh"), ("h", "Toggle Help")),
        keys(("Tab", "Next tab"), ("Shift+Tab", "Previous tab"), ("↑/k ↓/j", "Move selection")),
        keys(("Enter", "View details"), ("Esc", "Back from details")),
        keys(("1-4", "Switch tabs directly (1=Dashboard, 2=Ships, 3=Systems, 4=Markets)")),
    ]
    return Panel(Text("\n").join(legend), title="Help", title_align="left")


def frame_layout(tabs: RenderableType, content: RenderableType, status: RenderableType, help_visible: bool) -> Layout:
    """Fixed vertical frame: tab strip, flexible content, status/help region."""
    layout = Layout(name="root")
    layout.split_column(
        Layout(tabs, name="tabs", size=TAB_STRIP_HEIGHT),
        Layout(content, name="content", ratio=1),
        Layout(status, name="status", size=HELP_HEIGHT if help_visible else STATUS_HEIGHT),
    )
    return layout


# ═══════════════════════════════════════════════════════════════════════════════
# PANES
# ═══════════════════════════════════════════════════════════════════════════════

def render_message(message: str, title: str, border_style: str = "white") -> Panel:
    """Placeholder pane: loading, empty, or error text."""
    return Panel(Text(message), title=title, title_align="left", border_style=border_style)


def render_error(message: str) -> Panel:
    return render_message(message, "Error", border_style="red")


def field_line(label: str, value: object, style: str = "") -> Text:
    """`Label: value` with a bold label."""
    return Text.assemble((f"{label}: ", "bold"), (str(value), style))


def plain_line(label: str, value: object, style: str = "") -> Text:
    """`Label: value` with an unstyled label."""
    return Text.assemble(f"{label}: ", (str(value), style))


def bullets(items: Sequence[str], style: str = "cyan", marker: str = " - ") -> list[Text]:
    return [Text.assemble(marker, (item, style)) for item in items]


def info_panel(lines: Sequence[Text], title: str) -> Panel:
    return Panel(Text("\n").join(lines), title=title, title_align="left")


def scroll_offset(heights: Sequence[int], selected: int | None, available: int) -> int:
    """First item to draw so that `selected` fits in `available` rows."""
    if selected is None or not 0 <= selected < len(heights):
        return 0
    start = 0
    while start < selected and sum(heights[start:selected + 1]) > available:
        start += 1
    return start


class SelectableList:
    """Vertical list with a highlighted, always-visible selected entry.

    Entries may span several lines. The list scrolls just far enough for the
    selected entry to fit in the height it is given.
    """

    def __init__(
        self,
        items: Sequence[Text],
        selected: int | None,
        *,
        symbol: str = ">> ",
        highlight_style: str = HIGHLIGHT_STYLE,
    ):
        self.items = list(items)
        self.selected = selected if selected is not None and 0 <= selected < len(self.items) else None
        self.symbol = symbol
        self.highlight_style = highlight_style

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        # Keep trailing blank lines; multi-line entries use them as spacers.
        rows = [item.split("\n", allow_blank=True) for item in self.items]
        heights = [len(lines) for lines in rows]
        available = options.height or sum(heights)
        start = scroll_offset(heights, self.selected, available)
        pad = " " * len(self.symbol)

        used = 0
        for i in range(start, len(rows)):
            for j, line in enumerate(rows[i]):
                if used >= available:
                    return
                chosen = i == self.selected
                row = Text(self.symbol if chosen and j == 0 else pad)
                row.append_text(line)
                if chosen:
                    row.pad_right(max(0, options.max_width - row.cell_len))
                    row.stylize(self.highlight_style)
                row.no_wrap = True
                row.overflow = "ellipsis"
                yield row
                used += 1


class MapCanvas(Generic[T]):
    """Draws a `Chart` into whatever region rich gives it.

    The grid is sized from the render options, so the projection always
    matches the pane the map lands in.
    """

    def __init__(self, chart: Chart[T], entities: Sequence[T], selected: int | None = None):
        self.chart = chart
        self.entities = entities
        self.selected = selected

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        width = options.max_width
        height = options.height or DEFAULT_CANVAS_HEIGHT
        grid = self.chart.draw(self.entities, width, height, self.selected)
        for line in grid.cells:
            row = Text(no_wrap=True, overflow="crop")
            for mark in line:
                if mark is None:
                    row.append(" ")
                else:
                    row.append(mark.glyph, style=mark.style)
            yield row


def map_panel(canvas: MapCanvas, title: str) -> Panel:
    # No padding: the canvas uses the full inner area of the border.
    return Panel(canvas, title=title, title_align="left", padding=0)
