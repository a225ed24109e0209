"""Project integer world coordinates onto a fixed character grid.

World Y grows upward, grid rows grow downward, so rows are inverted. Both
ranges are floored at 2 so a set of entities sharing one coordinate still
divides cleanly.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Iterable, Sequence, TypeVar

T = TypeVar("T")

MIN_RANGE = 2


@dataclass(frozen=True)
class Mark:
    """One drawn cell: a glyph and a rich style string."""

    glyph: str
    style: str


@dataclass(frozen=True)
class Bounds:
    min_x: int
    max_x: int
    min_y: int
    max_y: int

    @classmethod
    def of(cls, points: Iterable[tuple[int, int]]) -> Bounds | None:
        """Bounding box of `points`, or None when there are none."""
        it = iter(points)
        try:
            x, y = next(it)
        except StopIteration:
            return None
        min_x = max_x = x
        min_y = max_y = y
        for x, y in it:
            min_x, max_x = min(min_x, x), max(max_x, x)
            min_y, max_y = min(min_y, y), max(max_y, y)
        return cls(min_x, max_x, min_y, max_y)

    @property
    def x_range(self) -> int:
        return max(self.max_x - self.min_x + 1, MIN_RANGE)

    @property
    def y_range(self) -> int:
        return max(self.max_y - self.min_y + 1, MIN_RANGE)


def project(x: int, y: int, bounds: Bounds, width: int, height: int) -> tuple[int, int]:
    """Return the (row, col) cell for world point (x, y).

    The scaled value is truncated toward zero. Points outside `bounds`
    (an origin marker, say) may land outside the grid; callers check.
    """
    col = int((x - bounds.min_x) / bounds.x_range * (width - 1))
    row = int((bounds.max_y - y) / bounds.y_range * (height - 1))
    return row, col


class Grid:
    """width x height cells, each empty or holding one Mark."""

    def __init__(self, width: int, height: int):
        self.width = max(0, width)
        self.height = max(0, height)
        self.cells: list[list[Mark | None]] = [[None] * self.width for _ in range(self.height)]

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def put(self, row: int, col: int, mark: Mark) -> bool:
        """Overwrite one cell; returns False when the cell is off-grid."""
        if not self.contains(row, col):
            return False
        self.cells[row][col] = mark
        return True

    def get(self, row: int, col: int) -> Mark | None:
        return self.cells[row][col]

    def marks(self) -> list[tuple[int, int, Mark]]:
        return [
            (r, c, mark)
            for r, line in enumerate(self.cells)
            for c, mark in enumerate(line)
            if mark is not None
        ]


@dataclass
class Chart(Generic[T]):
    """Describes how to plot a sequence of entities.

    `position` and `mark` are pure lookups on one entity. `origin` is drawn
    at world (0, 0) before the entities; `highlight` replaces the mark of
    the selected entity after everything else has been drawn.
    """

    position: Callable[[T], tuple[int, int]]
    mark: Callable[[T], Mark]
    highlight: Callable[[T], Mark]
    origin: Mark | None = None

    def draw(
        self,
        entities: Sequence[T],
        width: int,
        height: int,
        selected: int | None = None,
    ) -> Grid:
        grid = Grid(width, height)
        if not entities or grid.width == 0 or grid.height == 0:
            return grid

        bounds = Bounds.of(self.position(e) for e in entities)
        assert bounds is not None

        if self.origin is not None:
            grid.put(*project(0, 0, bounds, grid.width, grid.height), self.origin)

        for entity in entities:
            x, y = self.position(entity)
            grid.put(*project(x, y, bounds, grid.width, grid.height), self.mark(entity))

        if selected is not None and 0 <= selected < len(entities):
            chosen = entities[selected]
            x, y = self.position(chosen)
            grid.put(*project(x, y, bounds, grid.width, grid.height), self.highlight(chosen))

        return grid
