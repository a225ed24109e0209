"""Terminal ownership: raw keyboard input plus a full-screen live frame."""
from __future__ import annotations

import asyncio
import logging
from collections import deque
from contextlib import ExitStack

from prompt_toolkit.input import Input, create_input
from prompt_toolkit.key_binding import KeyPress
from rich.console import Console, RenderableType
from rich.live import Live
from rich.text import Text

from .keys import key_name

logger = logging.getLogger(__name__)


class TerminalSession:
    """Owns the terminal while the dashboard runs.

    Entering switches stdin to raw mode, attaches it to the running asyncio
    loop and opens a rich `Live` display in the alternate screen. Leaving
    undoes all of it exactly once, in reverse order, however the block exits.
    Must be entered from inside a running event loop.
    """

    def __init__(self, console: Console | None = None, input: Input | None = None):
        self.console = console or Console()
        self._input = input
        self._live: Live | None = None
        self._stack: ExitStack | None = None
        self._ready = asyncio.Event()
        self._pending: deque[KeyPress] = deque()

    def __enter__(self) -> TerminalSession:
        if self._input is None:
            self._input = create_input(always_prefer_tty=True)

        stack = ExitStack()
        try:
            stack.enter_context(self._input.raw_mode())
            stack.enter_context(self._input.attach(self._ready.set))
            self._live = Live(
                Text(""),
                console=self.console,
                screen=True,
                auto_refresh=False,
                transient=True,
            )
            stack.enter_context(self._live)
        except BaseException:
            # Restore whatever was already switched before re-raising.
            stack.close()
            raise
        self._stack = stack
        logger.debug("Terminal session started")
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.close()
        return False

    def close(self) -> None:
        stack, self._stack = self._stack, None
        if stack is None:
            return
        self._live = None
        stack.close()
        logger.debug("Terminal session restored")

    def draw(self, renderable: RenderableType) -> None:
        if self._live is None:
            raise RuntimeError("TerminalSession.draw() called outside the session")
        self._live.update(renderable, refresh=True)

    async def read_key(self, timeout: float) -> str | None:
        """Wait up to `timeout` seconds for a key; returns its name or None.

        Keys read together in one burst are queued and handed out one per call.
        """
        if not self._pending:
            await self._fill(timeout)
        if not self._pending:
            return None
        return key_name(self._pending.popleft())

    async def _fill(self, timeout: float) -> None:
        assert self._input is not None
        try:
            await asyncio.wait_for(self._ready.wait(), timeout)
        except asyncio.TimeoutError:
            # A lone Escape stays in the parser until flushed.
            self._pending.extend(self._input.flush_keys())
            return

        self._ready.clear()
        self._pending.extend(self._input.read_keys())
        # End of input is only seen by the read itself.
        if not self._pending and self._input.closed:
            raise EOFError("terminal input closed")
