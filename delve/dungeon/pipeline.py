"""Pipeline orchestration for level generation.

``generate_level`` runs the ordered phases (carve, exit, repair of floor
the exit cut off, exit link, entity scatter) against a fresh ``Maze`` and
returns a ``Level`` holding the grid, the entity list and generation metrics.
"""

from __future__ import annotations

import random
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from delve.config import GameConfig
from delve.logging_utils import log
from delve.models.entities import GOLD, MONSTER, POTION, Entity

from .connectivity import bypass_exit, connect_exit, exit_reachable, orphaned_floor
from .generator import carve_maze, place_entities, place_exit
from .maze import Coord, Maze
from .metrics import init_metrics
from .tiles import FLOOR


@dataclass
class Level:
    maze: Maze
    entities: List[Entity]
    start: Coord
    exit: Coord
    metrics: Dict[str, Any] = field(default_factory=dict)


def generate_level(config: GameConfig, rng: Optional[random.Random] = None) -> Level:
    r = rng or random.Random(config.seed)
    started = time.perf_counter()
    metrics = init_metrics()
    start, exit_pos = config.start, config.exit

    maze = Maze(config.board_size)
    metrics["carve_depth"] = carve_maze(maze, start, r)
    place_exit(maze, exit_pos)
    metrics["floor_orphaned_by_exit"] = len(orphaned_floor(maze, start))
    if config.connect_exit:
        bypass = bypass_exit(maze, start)
        metrics["exit_bypass_cells"] = len(bypass)
        if bypass:
            log.info(
                event="exit_bypassed",
                size=config.board_size,
                orphaned=metrics["floor_orphaned_by_exit"],
                carved=len(bypass),
            )
        carved = connect_exit(maze, start, exit_pos)
        metrics["exit_cells_carved"] = len(carved)
        if carved:
            log.info(event="exit_connected", size=config.board_size, carved=len(carved))
    elif metrics["floor_orphaned_by_exit"]:
        log.warn(event="floor_orphaned", size=config.board_size, cells=metrics["floor_orphaned_by_exit"])
    metrics["exit_reachable"] = exit_reachable(maze, start, exit_pos)
    if not metrics["exit_reachable"]:
        log.warn(event="exit_unreachable", size=config.board_size, exit=exit_pos)
    metrics["floor_cells"] = maze.count(FLOOR)

    entities: List[Entity] = []
    for kind, count, label in (
        (MONSTER, config.max_enemies, "monsters"),
        (GOLD, config.max_items, "gold"),
        (POTION, config.max_potions, "potions"),
    ):
        placed = place_entities(
            maze,
            entities,
            kind,
            count,
            r,
            avoid=start,
            exclusion_radius=config.spawn_exclusion_radius,
            max_attempts=config.placement_attempts,
            monster_health=config.monster_health_range,
        )
        metrics[f"{label}_requested"] = count
        metrics[f"{label}_placed"] = placed
        if placed < count:
            log.warn(event="placement_exhausted", kind=kind, requested=count, placed=placed)

    metrics["runtime_ms"] = round((time.perf_counter() - started) * 1000, 3)
    log.info(
        event="maze_generated",
        size=config.board_size,
        floors=metrics["floor_cells"],
        entities=len(entities),
        exit_reachable=metrics["exit_reachable"],
        runtime_ms=metrics["runtime_ms"],
    )
    return Level(maze=maze, entities=entities, start=start, exit=exit_pos, metrics=metrics)


__all__ = ["Level", "generate_level"]
