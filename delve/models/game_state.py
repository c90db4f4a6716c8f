"""Aggregate state for a single game: maze, entities, player and flags."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from delve.config import GameConfig
from delve.dungeon.maze import Maze

from .entities import MONSTER, Entity, Player


@dataclass
class GameState:
    config: GameConfig
    maze: Maze
    player: Player
    entities: List[Entity] = field(default_factory=list)
    game_over: bool = False
    message: str = ""
    turn: int = 0
    level_metrics: Dict[str, Any] = field(default_factory=dict)

    def entity_at(self, x: int, y: int) -> Optional[Entity]:
        for e in self.entities:
            if e.x == x and e.y == y:
                return e
        return None

    def is_occupied(self, x: int, y: int) -> bool:
        return self.entity_at(x, y) is not None

    def monsters(self) -> List[Entity]:
        return [e for e in self.entities if e.kind == MONSTER]

    def remove(self, entity: Entity) -> None:
        # Identity match; two entities never share a cell but may compare equal by value.
        for idx, e in enumerate(self.entities):
            if e is entity:
                del self.entities[idx]
                return

    @property
    def status(self) -> str:
        return "game_over" if self.game_over else "playing"

    def to_dict(self) -> Dict[str, Any]:
        """Everything a renderer needs to draw the current frame."""
        return {
            "size": self.maze.size,
            "grid": self.maze.rows(),
            "entities": [e.to_dict() for e in self.entities],
            "player": self.player.to_dict(),
            "game_over": self.game_over,
            "status": self.status,
            "message": self.message,
            "turn": self.turn,
            "metrics": dict(self.level_metrics),
        }


__all__ = ["GameState"]
