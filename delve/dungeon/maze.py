"""Square tile grid shared by the generator and the turn engine."""

from __future__ import annotations

from typing import Iterator, List, Sequence, Tuple

from .tiles import EXIT, FLOOR, WALL, char_to_type

Coord = Tuple[int, int]

_ASCII_TO_TILE = {"#": WALL, ".": FLOOR, ">": EXIT}


class Maze:
    """N x N grid of tile characters, indexed ``grid[x][y]``.

    Everything starts as WALL; the generator carves FLOOR and places EXIT.
    """

    __slots__ = ("size", "grid")

    def __init__(self, size: int, fill: str = WALL):
        self.size = size
        self.grid: List[List[str]] = [[fill for _ in range(size)] for _ in range(size)]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def is_interior(self, x: int, y: int) -> bool:
        return 1 <= x <= self.size - 2 and 1 <= y <= self.size - 2

    def cell(self, x: int, y: int) -> str:
        if not self.in_bounds(x, y):
            return WALL
        return self.grid[x][y]

    def set(self, x: int, y: int, tile: str) -> None:
        self.grid[x][y] = tile

    def cells(self, tile: str) -> Iterator[Coord]:
        for x in range(self.size):
            for y in range(self.size):
                if self.grid[x][y] == tile:
                    yield (x, y)

    def count(self, tile: str) -> int:
        return sum(1 for _ in self.cells(tile))

    def rows(self) -> List[List[str]]:
        # Row-major (y first) so clients can index rows[y][x] in screen order.
        return [[char_to_type(self.grid[x][y]) for x in range(self.size)] for y in range(self.size)]

    @classmethod
    def from_ascii(cls, lines: Sequence[str]) -> "Maze":
        """Build a maze from row strings using ``#`` wall, ``.`` floor, ``>`` exit."""
        size = len(lines)
        if any(len(line) != size for line in lines):
            raise ValueError("maze rows must form a square")
        maze = cls(size)
        for y, line in enumerate(lines):
            for x, ch in enumerate(line):
                maze.grid[x][y] = _ASCII_TO_TILE.get(ch, WALL)
        return maze


__all__ = ["Maze", "Coord"]
