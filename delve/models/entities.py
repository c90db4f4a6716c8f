"""In-memory dungeon occupants: the player and the entities scattered per level."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

MONSTER = "monster"
GOLD = "gold"
POTION = "health-potion"

ENTITY_KINDS = (MONSTER, GOLD, POTION)


@dataclass(eq=False)
class Entity:
    kind: str
    x: int
    y: int
    # Only monsters carry health.
    health: Optional[int] = None

    def __post_init__(self):
        if self.kind not in ENTITY_KINDS:
            raise ValueError(f"unknown entity kind {self.kind!r}")

    @property
    def pos(self) -> Tuple[int, int]:
        return (self.x, self.y)

    @property
    def is_monster(self) -> bool:
        return self.kind == MONSTER

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.kind, "x": self.x, "y": self.y, "health": self.health}


@dataclass
class Player:
    x: int = 1
    y: int = 1
    health: int = 20
    max_health: int = 20
    level: int = 1
    gold: int = 0

    @property
    def pos(self) -> Tuple[int, int]:
        return (self.x, self.y)

    @property
    def is_dead(self) -> bool:
        return self.health <= 0

    def take_damage(self, amount: int) -> int:
        """Subtract ``amount`` (floored at zero health); returns the health lost."""
        before = self.health
        self.health = max(0, self.health - amount)
        return before - self.health

    def heal(self, amount: int) -> int:
        """Add ``amount`` up to max_health; returns the health actually gained."""
        before = self.health
        self.health = min(self.health + amount, self.max_health)
        return self.health - before

    def to_dict(self) -> Dict[str, Any]:
        return {
            "x": self.x,
            "y": self.y,
            "health": self.health,
            "max_health": self.max_health,
            "level": self.level,
            "gold": self.gold,
        }


__all__ = ["Entity", "Player", "MONSTER", "GOLD", "POTION", "ENTITY_KINDS"]
