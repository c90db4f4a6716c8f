"""ASCII rendering for the CLI and debugging."""

from __future__ import annotations

from typing import Iterable, Optional

from delve.models.entities import GOLD, MONSTER, POTION, Entity, Player

from .maze import Maze
from .tiles import EXIT, FLOOR, WALL

TILE_GLYPHS = {WALL: "#", FLOOR: ".", EXIT: ">"}
ENTITY_GLYPHS = {MONSTER: "M", GOLD: "$", POTION: "!"}
PLAYER_GLYPH = "@"


def render_ascii(maze: Maze, entities: Iterable[Entity] = (), player: Optional[Player] = None) -> str:
    rows = [[TILE_GLYPHS.get(maze.grid[x][y], "#") for x in range(maze.size)] for y in range(maze.size)]
    for e in entities:
        rows[e.y][e.x] = ENTITY_GLYPHS.get(e.kind, "?")
    if player is not None:
        rows[player.y][player.x] = PLAYER_GLYPH
    return "\n".join("".join(row) for row in rows)


__all__ = ["render_ascii", "TILE_GLYPHS", "ENTITY_GLYPHS", "PLAYER_GLYPH"]
