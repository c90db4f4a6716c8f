"""Structured command outcomes.

Every engine command returns a ``TurnResult`` listing what happened as
``GameEvent`` records, so transports and clients can drive animation and
text without peeking at internal state transitions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

GAME_STARTED = "game_started"
MOVED = "moved"
BLOCKED = "blocked"
PLAYER_ATTACKED = "player_attacked"
MONSTER_DEFEATED = "monster_defeated"
MONSTER_COUNTERATTACKED = "monster_counterattacked"
GAME_OVER = "game_over"
GOLD_COLLECTED = "gold_collected"
POTION_QUAFFED = "potion_quaffed"
MONSTER_MOVED = "monster_moved"
LEVEL_UP = "level_up"
NO_TARGET = "no_target"
IGNORED = "ignored"


@dataclass
class GameEvent:
    type: str
    data: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, **self.data}


@dataclass
class TurnResult:
    events: List[GameEvent] = field(default_factory=list)
    turn_consumed: bool = False
    message: Optional[str] = None

    def add(self, type_: str, **data: Any) -> GameEvent:
        ev = GameEvent(type_, data)
        self.events.append(ev)
        return ev

    def extend(self, events: List[GameEvent]) -> None:
        self.events.extend(events)

    def has(self, type_: str) -> bool:
        return any(e.type == type_ for e in self.events)

    def of_type(self, type_: str) -> List[GameEvent]:
        return [e for e in self.events if e.type == type_]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "events": [e.to_dict() for e in self.events],
            "turn_consumed": self.turn_consumed,
            "message": self.message,
        }


__all__ = [
    "GameEvent",
    "TurnResult",
    "GAME_STARTED",
    "MOVED",
    "BLOCKED",
    "PLAYER_ATTACKED",
    "MONSTER_DEFEATED",
    "MONSTER_COUNTERATTACKED",
    "GAME_OVER",
    "GOLD_COLLECTED",
    "POTION_QUAFFED",
    "MONSTER_MOVED",
    "LEVEL_UP",
    "NO_TARGET",
    "IGNORED",
]
