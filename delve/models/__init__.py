# Model package init
from .entities import ENTITY_KINDS, GOLD, MONSTER, POTION, Entity, Player  # noqa: F401 re-export

__all__ = [
    "Entity",
    "Player",
    "MONSTER",
    "GOLD",
    "POTION",
    "ENTITY_KINDS",
]
