"""Unit tests for the wrap-around list cursor."""
from __future__ import annotations

import pytest

from spacedash.tui.selection import ListCursor, next_index, previous_index


@pytest.mark.parametrize(
    "current,length,expected",
    [
        (0, 3, 1),
        (1, 3, 2),
        (2, 3, 0),
        (None, 3, 0),
        (0, 1, 0),
        (7, 3, 0),
    ],
)
def test_next_index(current, length, expected):
    assert next_index(current, length) == expected


@pytest.mark.parametrize(
    "current,length,expected",
    [
        (2, 3, 1),
        (0, 3, 2),
        (None, 3, 0),
        (0, 1, 0),
        (7, 3, 2),
    ],
)
def test_previous_index(current, length, expected):
    assert previous_index(current, length) == expected


def test_empty_list_clears_selection():
    assert next_index(0, 0) is None
    assert previous_index(0, 0) is None

    cursor = ListCursor(selected=1)
    assert cursor.next(0) is None
    assert cursor.selected is None


def test_cursor_wraps_forward_from_last_entry():
    """Three ships, cursor on the last one, Down wraps to the first."""
    cursor = ListCursor(selected=2)
    assert cursor.next(3) == 0
    assert cursor.selected == 0


def test_cursor_full_cycle_returns_to_start():
    cursor = ListCursor()
    for _ in range(5):
        cursor.next(5)
    assert cursor.selected == 0

    for _ in range(5):
        cursor.previous(5)
    assert cursor.selected == 0


def test_cursor_recovers_after_empty_list():
    cursor = ListCursor()
    cursor.next(0)
    assert cursor.selected is None
    assert cursor.next(4) == 0


def test_valid_for():
    cursor = ListCursor(selected=2)
    assert cursor.valid_for(3)
    assert not cursor.valid_for(2)
    assert not ListCursor(selected=None).valid_for(3)


def test_reset():
    cursor = ListCursor(selected=4)
    cursor.reset()
    assert cursor.selected == 0
