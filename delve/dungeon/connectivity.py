"""Reachability helpers: flood fill and exit connection."""

from __future__ import annotations

from collections import deque
from typing import Dict, Iterable, List, Optional, Set

from .maze import Coord, Maze
from .tiles import EXIT, FLOOR, WALL

NEIGHBOR_STEPS = ((0, -1), (1, 0), (0, 1), (-1, 0))


def flood_reachable(maze: Maze, start: Coord, walkable: Iterable[str] = (FLOOR,)) -> Set[Coord]:
    """Return every cell reachable from ``start`` over 4-neighbour moves on ``walkable`` tiles."""
    allowed = set(walkable)
    sx, sy = start
    if maze.cell(sx, sy) not in allowed:
        return set()
    visited = {start}
    q = deque([start])
    while q:
        cx, cy = q.popleft()
        for dx, dy in NEIGHBOR_STEPS:
            nx, ny = cx + dx, cy + dy
            if (nx, ny) in visited or not maze.in_bounds(nx, ny):
                continue
            if maze.grid[nx][ny] in allowed:
                visited.add((nx, ny))
                q.append((nx, ny))
    return visited


def exit_reachable(maze: Maze, start: Coord, exit_pos: Coord) -> bool:
    reach = flood_reachable(maze, start, walkable=(FLOOR, EXIT))
    return exit_pos in reach


def connect_exit(maze: Maze, start: Coord, exit_pos: Coord) -> List[Coord]:
    """Carve the shortest wall run linking ``exit_pos`` to the start's region.

    Only interior cells are considered so the border stays solid. Returns the
    carved cells (empty if the exit was already reachable or no link exists).
    """
    reach = flood_reachable(maze, start, walkable=(FLOOR,))
    ex, ey = exit_pos
    for dx, dy in NEIGHBOR_STEPS:
        if (ex + dx, ey + dy) in reach:
            return []
    parents: Dict[Coord, Optional[Coord]] = {exit_pos: None}
    q = deque([exit_pos])
    target = None
    while q and target is None:
        cx, cy = q.popleft()
        for dx, dy in NEIGHBOR_STEPS:
            nxt = (cx + dx, cy + dy)
            if nxt in parents or not maze.is_interior(*nxt):
                continue
            parents[nxt] = (cx, cy)
            if nxt in reach:
                target = nxt
                break
            if maze.grid[nxt[0]][nxt[1]] == WALL:
                q.append(nxt)
    if target is None:
        return []
    carved = []
    node = parents[target]
    while node is not None and node != exit_pos:
        maze.set(node[0], node[1], FLOOR)
        carved.append(node)
        node = parents[node]
    return carved


def orphaned_floor(maze: Maze, start: Coord) -> Set[Coord]:
    """Floor cells a Floor-only walk from ``start`` never reaches."""
    reach = flood_reachable(maze, start, walkable=(FLOOR,))
    return set(maze.cells(FLOOR)) - reach


def bypass_exit(maze: Maze, start: Coord) -> List[Coord]:
    """Reconnect floor cut off from ``start``, typically by an exit placed mid-corridor.

    Repeatedly runs a multi-source BFS from the start's region through
    interior WALL cells until it meets an orphaned floor cell, then carves
    that wall run. Stops when nothing is orphaned or no link exists.
    Returns every carved cell.
    """
    carved: List[Coord] = []
    while True:
        reach = flood_reachable(maze, start, walkable=(FLOOR,))
        orphans = set(maze.cells(FLOOR)) - reach
        if not orphans:
            return carved
        parents: Dict[Coord, Optional[Coord]] = {c: None for c in reach}
        q = deque(reach)
        target = None
        while q and target is None:
            cx, cy = q.popleft()
            for dx, dy in NEIGHBOR_STEPS:
                nxt = (cx + dx, cy + dy)
                if nxt in parents or not maze.is_interior(*nxt):
                    continue
                if nxt in orphans:
                    parents[nxt] = (cx, cy)
                    target = nxt
                    break
                if maze.grid[nxt[0]][nxt[1]] == WALL:
                    parents[nxt] = (cx, cy)
                    q.append(nxt)
        if target is None:
            return carved
        node = parents[target]
        while node is not None and node not in reach:
            maze.set(node[0], node[1], FLOOR)
            carved.append(node)
            node = parents[node]


__all__ = [
    "flood_reachable",
    "exit_reachable",
    "connect_exit",
    "orphaned_floor",
    "bypass_exit",
    "NEIGHBOR_STEPS",
]
