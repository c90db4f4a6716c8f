"""Turn engine: one player command, then one enemy pass.

Commands take an explicitly owned ``GameState`` plus the random source and
return a ``TurnResult``. Game flow:

    Playing --(player health <= 0)--> GameOver --(new_game)--> Playing

While the game is over, ``move`` and ``attack_adjacent`` leave the state
untouched and report a single ``ignored`` event. Malformed directions raise
``InvalidDirectionError`` instead of being treated as gameplay no-ops.
"""

from __future__ import annotations

import random
import threading
from typing import Any, Dict, Optional, Tuple

from delve.config import GameConfig
from delve.dungeon import generate_level
from delve.dungeon.maze import Maze
from delve.dungeon.tiles import EXIT, WALL
from delve.logging_utils import log
from delve.models.entities import Player
from delve.models.game_state import GameState

from . import events as ev
from .combat_service import interact, player_attack
from .directions import SCAN_ORDER, parse_direction
from .events import TurnResult
from .monster_ai import enemy_pass

WELCOME_MESSAGE = "Welcome to the dungeon! Use arrow keys to move."
NO_TARGET_MESSAGE = "There are no monsters nearby to attack!"


def _load_level(state: GameState, rng: random.Random) -> None:
    level = generate_level(state.config, rng)
    state.maze = level.maze
    state.entities = level.entities
    state.player.x, state.player.y = level.start
    state.level_metrics = level.metrics


def start_game(
    config: Optional[GameConfig] = None, rng: Optional[random.Random] = None
) -> Tuple[GameState, TurnResult]:
    cfg = config or GameConfig()
    r = rng or random.Random(cfg.seed)
    state = GameState(config=cfg, maze=Maze(cfg.board_size), player=Player())
    result = new_game(state, r)
    return state, result


def new_game(state: GameState, rng: random.Random) -> TurnResult:
    """Reset the player and regenerate level one; the only way out of GameOver."""
    cfg = state.config
    p = state.player
    p.health = cfg.starting_health
    p.max_health = cfg.starting_health
    p.gold = 0
    p.level = 1
    state.game_over = False
    state.turn = 0
    _load_level(state, rng)
    result = TurnResult()
    result.add(ev.GAME_STARTED, level=p.level, size=cfg.board_size)
    state.message = result.message = WELCOME_MESSAGE
    log.info(event="new_game", size=cfg.board_size, entities=len(state.entities))
    return result


def next_level(state: GameState, rng: random.Random, result: TurnResult) -> None:
    p = state.player
    p.level += 1
    p.max_health += state.config.level_health_bonus
    p.health = p.max_health
    state.game_over = False
    _load_level(state, rng)
    result.add(ev.LEVEL_UP, level=p.level, max_health=p.max_health)
    state.message = result.message = f"You found the exit! Welcome to level {p.level}."
    log.info(event="level_up", dungeon_level=p.level, max_health=p.max_health, gold=p.gold)


def _ignored(state: GameState) -> TurnResult:
    result = TurnResult()
    result.add(ev.IGNORED, reason=state.status)
    return result


def _finish_turn(state: GameState, rng: random.Random, result: TurnResult) -> TurnResult:
    result.turn_consumed = True
    state.turn += 1
    if not state.game_over:
        result.extend(enemy_pass(state, rng))
    return result


def move(state: GameState, direction: Any, rng: random.Random) -> TurnResult:
    d = parse_direction(direction)
    if state.game_over:
        return _ignored(state)
    p = state.player
    nx, ny = p.x + d.dx, p.y + d.dy
    result = TurnResult()
    tile = state.maze.cell(nx, ny)
    if not state.maze.in_bounds(nx, ny) or tile == WALL:
        result.add(ev.BLOCKED, x=nx, y=ny, direction=d.name.lower())
        return result
    if tile == EXIT:
        # Level change ends the turn; monsters of the old level never act.
        next_level(state, rng, result)
        result.turn_consumed = True
        state.turn += 1
        return result
    entity = state.entity_at(nx, ny)
    if entity is not None:
        interact(state, entity, rng, result)
        return _finish_turn(state, rng, result)
    p.x, p.y = nx, ny
    result.add(ev.MOVED, x=nx, y=ny, direction=d.name.lower())
    return _finish_turn(state, rng, result)


def attack_adjacent(state: GameState, rng: random.Random) -> TurnResult:
    """Attack the first monster found scanning up, right, down, left."""
    if state.game_over:
        return _ignored(state)
    p = state.player
    for d in SCAN_ORDER:
        target = state.entity_at(p.x + d.dx, p.y + d.dy)
        if target is not None and target.is_monster:
            result = TurnResult()
            player_attack(state, target, rng, result)
            return _finish_turn(state, rng, result)
    result = TurnResult()
    result.add(ev.NO_TARGET)
    state.message = result.message = NO_TARGET_MESSAGE
    return result


class Game:
    """Owns one GameState together with its random source and a lock."""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rng: Optional[random.Random] = None,
        game_id: Optional[str] = None,
    ):
        self.config = config or GameConfig()
        self.rng = rng or random.Random(self.config.seed)
        self.game_id = game_id
        self.lock = threading.RLock()
        self.state, self.last_result = start_game(self.config, self.rng)

    def new_game(self) -> TurnResult:
        with self.lock:
            self.last_result = new_game(self.state, self.rng)
            return self.last_result

    def move(self, direction: Any) -> TurnResult:
        with self.lock:
            self.last_result = move(self.state, direction, self.rng)
            return self.last_result

    def attack_adjacent(self) -> TurnResult:
        with self.lock:
            self.last_result = attack_adjacent(self.state, self.rng)
            return self.last_result

    def snapshot(self) -> Dict[str, Any]:
        with self.lock:
            return self.state.to_dict()


__all__ = [
    "Game",
    "start_game",
    "new_game",
    "next_level",
    "move",
    "attack_adjacent",
    "WELCOME_MESSAGE",
    "NO_TARGET_MESSAGE",
]
