"""Structural generation phases: lattice carving, exit placement, entity scatter."""

from __future__ import annotations

import random
from typing import List, Sequence, Tuple

from delve.models.entities import MONSTER, Entity

from .maze import Coord, Maze
from .tiles import EXIT, FLOOR, WALL

# Up, right, down, left
DIRECTIONS: Tuple[Coord, ...] = ((0, -1), (1, 0), (0, 1), (-1, 0))


def _shuffled(rng: random.Random) -> List[Coord]:
    dirs = list(DIRECTIONS)
    rng.shuffle(dirs)
    return dirs


def carve_maze(maze: Maze, start: Coord, rng: random.Random) -> int:
    """Randomized depth-first backtracking on the odd-coordinate lattice.

    Each visited cell shuffles the four directions and tries them in turn;
    a destination two steps away is taken when it is interior and still
    WALL, carving the wall between. An explicit stack replaces recursion
    but keeps the same visiting order. Returns the deepest stack reached.
    """
    sx, sy = start
    maze.set(sx, sy, FLOOR)
    stack = [(sx, sy, _shuffled(rng))]
    deepest = 1
    while stack:
        x, y, pending = stack[-1]
        if not pending:
            stack.pop()
            continue
        dx, dy = pending.pop(0)
        nx, ny = x + dx * 2, y + dy * 2
        if maze.is_interior(nx, ny) and maze.grid[nx][ny] == WALL:
            maze.set(x + dx, y + dy, FLOOR)
            maze.set(nx, ny, FLOOR)
            stack.append((nx, ny, _shuffled(rng)))
            deepest = max(deepest, len(stack))
    return deepest


def place_exit(maze: Maze, exit_pos: Coord) -> None:
    # Unconditional: may land inside an uncarved wall pocket.
    maze.set(exit_pos[0], exit_pos[1], EXIT)


def chebyshev(a: Coord, b: Coord) -> int:
    return max(abs(a[0] - b[0]), abs(a[1] - b[1]))


def place_entities(
    maze: Maze,
    entities: List[Entity],
    kind: str,
    count: int,
    rng: random.Random,
    *,
    avoid: Coord,
    exclusion_radius: int = 2,
    max_attempts: int = 100,
    monster_health: Sequence[int] = (3, 5),
) -> int:
    """Scatter ``count`` entities of ``kind`` over free interior floor cells.

    Each entity gets at most ``max_attempts`` random draws; an entity whose
    draws are exhausted is skipped. Returns how many were placed.
    """
    placed = 0
    hi = maze.size - 2
    for _ in range(count):
        for _attempt in range(max_attempts):
            x = rng.randint(1, hi)
            y = rng.randint(1, hi)
            if maze.grid[x][y] != FLOOR:
                continue
            if any(e.x == x and e.y == y for e in entities):
                continue
            if chebyshev((x, y), avoid) <= exclusion_radius:
                continue
            health = rng.randint(monster_health[0], monster_health[1]) if kind == MONSTER else None
            entities.append(Entity(kind, x, y, health))
            placed += 1
            break
    return placed


__all__ = ["DIRECTIONS", "carve_maze", "place_exit", "place_entities", "chebyshev"]
