"""Monster movement for the enemy phase of a turn.

Monsters within ``aggro_radius`` (Manhattan) of the player take one
orthogonal step toward them. When the player is off both axes a coin flip
picks which axis to close; otherwise the single differing axis is used.
A step is dropped if the destination is not FLOOR, holds another entity,
or is the player's own cell: monsters only fight when the player attacks.
"""

from __future__ import annotations

import random
from typing import List, Tuple

from delve.dungeon.tiles import FLOOR
from delve.models.entities import Entity
from delve.models.game_state import GameState

from . import events as ev
from .events import GameEvent

Coord = Tuple[int, int]


def _sign(v: int) -> int:
    return (v > 0) - (v < 0)


def manhattan(a: Coord, b: Coord) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def step_toward(monster: Entity, target: Coord, rng: random.Random) -> Coord:
    """Return the cell one orthogonal step from ``monster`` toward ``target``."""
    dx = _sign(target[0] - monster.x)
    dy = _sign(target[1] - monster.y)
    if dx and dy:
        # 50/50 axis preference
        if rng.random() < 0.5:
            return (monster.x + dx, monster.y)
        return (monster.x, monster.y + dy)
    return (monster.x + dx, monster.y + dy)


def can_enter(state: GameState, x: int, y: int) -> bool:
    if state.maze.cell(x, y) != FLOOR:
        return False
    if (x, y) == state.player.pos:
        return False
    return not state.is_occupied(x, y)


def enemy_pass(state: GameState, rng: random.Random) -> List[GameEvent]:
    """Advance every monster once, in list order; returns the moves made."""
    moves: List[GameEvent] = []
    radius = state.config.aggro_radius
    target = state.player.pos
    for monster in state.monsters():
        if manhattan(monster.pos, target) > radius:
            continue
        nx, ny = step_toward(monster, target, rng)
        if (nx, ny) == monster.pos or not can_enter(state, nx, ny):
            continue
        moves.append(GameEvent(ev.MONSTER_MOVED, {"from": [monster.x, monster.y], "to": [nx, ny]}))
        monster.x, monster.y = nx, ny
    return moves


__all__ = ["enemy_pass", "step_toward", "can_enter", "manhattan"]
