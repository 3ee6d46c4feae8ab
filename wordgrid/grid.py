from __future__ import annotations

from typing import Iterator, NamedTuple

from wordgrid.errors import InvalidDimensions


class Position(NamedTuple):
    x: int
    y: int


class Grid:
    """Immutable N x N board of lower-cased letters, indexed as (column, row)."""

    __slots__ = ("n", "_cells")

    def __init__(self, cells: list[list[str]]):
        self.n = len(cells)
        self._cells = tuple(tuple(row) for row in cells)

    @classmethod
    def from_data(cls, data: str, n: int) -> Grid:
        if n <= 0 or len(data) != n * n:
            raise InvalidDimensions(len(data), n)
        # Lower-case per cell; str.lower() on the whole string can change its length
        return cls([[ch.lower() for ch in data[i:i + n]] for i in range(0, n * n, n)])

    @property
    def cells(self) -> tuple[tuple[str, ...], ...]:
        return self._cells

    def get(self, x: int, y: int) -> str:
        return self._cells[y][x]

    def positions(self) -> Iterator[Position]:
        """All cells in row-major order."""
        for y in range(self.n):
            for x in range(self.n):
                yield Position(x, y)

    def rows(self) -> list[str]:
        return ["".join(row) for row in self._cells]


def neighbors(posn: Position, n: int) -> Iterator[Position]:
    """King-move neighbours of ``posn`` that stay on an n x n board."""
    x, y = posn
    for dy in (-1, 0, 1):
        for dx in (-1, 0, 1):
            if dx == 0 and dy == 0:
                continue
            nx, ny = x + dx, y + dy
            if 0 <= nx < n and 0 <= ny < n:
                yield Position(nx, ny)


class VisitedMask:
    """Bitset of visited cells along the current path.

    Masks are immutable: ``mark`` returns a new mask, so a branch never sees
    cells its siblings visited.
    """

    __slots__ = ("n", "bits")

    def __init__(self, n: int, bits: int = 0):
        self.n = n
        self.bits = bits

    def index(self, posn: Position) -> int:
        return posn.y * self.n + posn.x

    def is_visited(self, posn: Position) -> bool:
        return bool(self.bits & (1 << self.index(posn)))

    def mark(self, posn: Position) -> VisitedMask:
        return VisitedMask(self.n, self.bits | (1 << self.index(posn)))

    def __len__(self) -> int:
        return bin(self.bits).count("1")
