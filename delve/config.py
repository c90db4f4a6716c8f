"""Game tunables.

``GameConfig`` carries every knob the generator and turn engine read. The
defaults reproduce the classic ten-by-ten board. Overrides arrive either as
a JSON-ish mapping (HTTP / Socket.IO ``config`` payloads) or from
``DELVE_*`` environment variables.
"""

from __future__ import annotations

import os
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional, Tuple

from .errors import ConfigError

IntRange = Tuple[int, int]

MIN_BOARD_SIZE = 5
# Configs arrive from clients; keep one level cheap to generate.
MAX_BOARD_SIZE = 101

_RANGE_FIELDS = (
    "damage_range",
    "enemy_damage_range",
    "potion_heal_range",
    "gold_range",
    "monster_health_range",
)
_COUNT_FIELDS = (
    "max_enemies",
    "max_items",
    "max_potions",
    "aggro_radius",
    "spawn_exclusion_radius",
    "level_health_bonus",
    "placement_attempts",
)
_COUNT_CAPS = {
    "max_enemies": 500,
    "max_items": 500,
    "max_potions": 500,
    "placement_attempts": 1000,
}


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


# env var -> (field, parser)
_ENV_KEYS = {
    "DELVE_BOARD_SIZE": ("board_size", int),
    "DELVE_STARTING_HEALTH": ("starting_health", int),
    "DELVE_MAX_ENEMIES": ("max_enemies", int),
    "DELVE_MAX_ITEMS": ("max_items", int),
    "DELVE_MAX_POTIONS": ("max_potions", int),
    "DELVE_CONNECT_EXIT": ("connect_exit", lambda v: v.strip().lower() in ("1", "true", "yes", "on")),
    "DELVE_SEED": ("seed", int),
}


@dataclass(frozen=True)
class GameConfig:
    board_size: int = 10
    starting_health: int = 20
    damage_range: IntRange = (1, 4)
    enemy_damage_range: IntRange = (1, 3)
    potion_heal_range: IntRange = (3, 6)
    gold_range: IntRange = (1, 5)
    monster_health_range: IntRange = (3, 5)
    max_enemies: int = 8
    max_items: int = 5
    max_potions: int = 3
    aggro_radius: int = 5
    spawn_exclusion_radius: int = 2
    level_health_bonus: int = 5
    placement_attempts: int = 100
    connect_exit: bool = True
    seed: Optional[int] = None

    def __post_init__(self):
        if not _is_int(self.board_size) or self.board_size < MIN_BOARD_SIZE:
            raise ConfigError(f"board_size must be an integer >= {MIN_BOARD_SIZE}", "board_size", "min")
        if self.board_size > MAX_BOARD_SIZE:
            raise ConfigError(f"board_size must be <= {MAX_BOARD_SIZE}", "board_size", "max")
        if not _is_int(self.starting_health) or self.starting_health < 1:
            raise ConfigError("starting_health must be a positive integer", "starting_health", "min")
        for name in _RANGE_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, tuple) or len(value) != 2 or not all(_is_int(v) for v in value):
                raise ConfigError(f"{name} must be a pair of integers", name, "type")
            lo, hi = value
            if lo > hi:
                raise ConfigError(f"{name} lower bound exceeds upper bound", name, "range")
            if lo < 0:
                raise ConfigError(f"{name} must not be negative", name, "min")
        for name in _COUNT_FIELDS:
            value = getattr(self, name)
            if not _is_int(value) or value < 0:
                raise ConfigError(f"{name} must be a non-negative integer", name, "min")
            cap = _COUNT_CAPS.get(name)
            if cap is not None and value > cap:
                raise ConfigError(f"{name} must be <= {cap}", name, "max")
        if self.monster_health_range[0] < 1:
            raise ConfigError("monsters must spawn with at least 1 health", "monster_health_range", "min")
        if not isinstance(self.connect_exit, bool):
            raise ConfigError("connect_exit must be true or false", "connect_exit", "type")
        if self.seed is not None and not _is_int(self.seed):
            raise ConfigError("seed must be an integer", "seed", "type")

    @property
    def start(self) -> Tuple[int, int]:
        return (1, 1)

    @property
    def exit(self) -> Tuple[int, int]:
        return (self.board_size - 2, self.board_size - 2)

    def with_overrides(self, overrides: Optional[Mapping[str, Any]]) -> "GameConfig":
        """Return a copy with ``overrides`` applied; unknown keys raise ConfigError."""
        if not overrides:
            return self
        if not isinstance(overrides, Mapping):
            raise ConfigError("config must be an object", "config", "type")
        known = {f.name for f in fields(self)}
        changes: Dict[str, Any] = {}
        for key, value in overrides.items():
            if key not in known:
                raise ConfigError(f"unknown config key {key}", key, "unknown")
            if key in _RANGE_FIELDS and isinstance(value, list):
                value = tuple(value)
            changes[key] = value
        return replace(self, **changes)

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "GameConfig":
        return cls().with_overrides(data)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GameConfig":
        env = os.environ if environ is None else environ
        changes: Dict[str, Any] = {}
        for key, (name, parse) in _ENV_KEYS.items():
            raw = env.get(key)
            if raw in (None, ""):
                continue
            try:
                changes[name] = parse(raw)
            except ValueError:
                raise ConfigError(f"{key} is not a valid value: {raw!r}", name, "type") from None
        return cls(**changes)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        for name in _RANGE_FIELDS:
            data[name] = list(data[name])
        return data


__all__ = ["GameConfig", "IntRange", "MIN_BOARD_SIZE", "MAX_BOARD_SIZE"]
