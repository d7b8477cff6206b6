from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, NamedTuple


class Position(NamedTuple):
    x: int
    y: int


class Cell:
    __slots__ = ("letter", "used")

    def __init__(self, letter: str, used: bool = False):
        self.letter: str = letter
        self.used: bool = used


# (dx, dy): left, right, up, down, then the four diagonals
OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, 0),
    (1, 0),
    (0, -1),
    (0, 1),
    (1, 1),
    (1, -1),
    (-1, 1),
    (-1, -1),
)


class Grid:
    """Letter grid addressed by (x, y), y selecting the row.

    Rows may have different lengths. The ``used`` flag on each cell is only
    meaningful while a search path holds it.
    """

    def __init__(self, rows: list[list[str]]):
        self.rows: list[list[Cell]] = [[Cell(letter, False) for letter in row] for row in rows]

    def __len__(self) -> int:
        return sum(len(row) for row in self.rows)

    def __repr__(self) -> str:
        return f"Grid({self.letters()!r})"

    @property
    def height(self) -> int:
        return len(self.rows)

    def letters(self) -> list[list[str]]:
        return [[cell.letter for cell in row] for row in self.rows]

    def positions(self) -> Iterator[Position]:
        for y, row in enumerate(self.rows):
            for x in range(len(row)):
                yield Position(x, y)

    def in_bounds(self, pos: Position) -> bool:
        return 0 <= pos.y < len(self.rows) and 0 <= pos.x < len(self.rows[pos.y])

    def letter_at(self, pos: Position) -> str:
        return self.rows[pos.y][pos.x].letter

    def is_used(self, pos: Position) -> bool:
        return self.rows[pos.y][pos.x].used

    def mark_used(self, pos: Position):
        self.rows[pos.y][pos.x].used = True

    def mark_unused(self, pos: Position):
        self.rows[pos.y][pos.x].used = False

    @contextmanager
    def using(self, pos: Position):
        """Hold ``pos`` as used for the duration of the block."""
        self.mark_used(pos)
        try:
            yield
        finally:
            self.mark_unused(pos)

    def neighbors(self, pos: Position) -> list[Position]:
        result = []
        for dx, dy in OFFSETS:
            n = Position(pos.x + dx, pos.y + dy)
            # bounds are checked against the target row, rows can be ragged
            if self.in_bounds(n) and not self.is_used(n):
                result.append(n)
        return result

    def copy(self) -> Grid:
        clone = Grid.__new__(Grid)
        clone.rows = [[Cell(cell.letter, cell.used) for cell in row] for row in self.rows]
        return clone
