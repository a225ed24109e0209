"""Wrap-around list cursor shared by the ship, system and waypoint lists."""
from __future__ import annotations

from dataclasses import dataclass


def next_index(current: int | None, length: int) -> int | None:
    """Move forward one entry, wrapping from the last entry to the first.

    Returns None for an empty sequence; a missing cursor starts at 0.
    """
    if length <= 0:
        return None
    if current is None:
        return 0
    return 0 if current >= length - 1 else current + 1


def previous_index(current: int | None, length: int) -> int | None:
    """Move back one entry, wrapping from the first entry to the last."""
    if length <= 0:
        return None
    if current is None:
        return 0
    # A cursor left past the end by a shrunken list lands on the last entry.
    return length - 1 if current == 0 or current >= length else current - 1


@dataclass
class ListCursor:
    """Highlighted entry of a list whose length is owned elsewhere.

    The index is not re-validated when the backing list changes; callers
    check `valid_for()` before dereferencing it.
    """

    selected: int | None = 0

    def next(self, length: int) -> int | None:
        self.selected = next_index(self.selected, length)
        return self.selected

    def previous(self, length: int) -> int | None:
        self.selected = previous_index(self.selected, length)
        return self.selected

    def valid_for(self, length: int) -> bool:
        return self.selected is not None and 0 <= self.selected < length

    def reset(self) -> None:
        self.selected = 0
