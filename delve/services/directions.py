"""Movement directions and input normalization."""

from __future__ import annotations

from enum import Enum
from typing import Any, Tuple

from delve.errors import InvalidDirectionError


class Direction(Enum):
    UP = (0, -1)
    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


# Scan order for adjacent attacks follows declaration order.
SCAN_ORDER = tuple(Direction)

_ALIASES = {
    "up": Direction.UP,
    "n": Direction.UP,
    "north": Direction.UP,
    "right": Direction.RIGHT,
    "e": Direction.RIGHT,
    "east": Direction.RIGHT,
    "down": Direction.DOWN,
    "s": Direction.DOWN,
    "south": Direction.DOWN,
    "left": Direction.LEFT,
    "w": Direction.LEFT,
    "west": Direction.LEFT,
}
_BY_VECTOR = {d.value: d for d in Direction}


def _is_int(v: Any) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


def parse_direction(value: Any) -> Direction:
    """Normalize a name, ``(dx, dy)`` pair or ``{"x": dx, "y": dy}`` into a Direction.

    Anything else raises InvalidDirectionError.
    """
    if isinstance(value, Direction):
        return value
    if isinstance(value, str):
        d = _ALIASES.get(value.strip().lower())
        if d is None:
            raise InvalidDirectionError(f"unknown direction {value!r}")
        return d
    vector: Tuple[Any, ...]
    if isinstance(value, dict):
        if set(value) != {"x", "y"}:
            raise InvalidDirectionError("direction object needs exactly x and y")
        vector = (value["x"], value["y"])
    elif isinstance(value, (tuple, list)):
        vector = tuple(value)
    else:
        raise InvalidDirectionError(f"unsupported direction type {type(value).__name__}", code="type")
    if len(vector) != 2 or not all(_is_int(v) for v in vector):
        raise InvalidDirectionError("direction vector must be two integers", code="type")
    d = _BY_VECTOR.get((vector[0], vector[1]))
    if d is None:
        raise InvalidDirectionError(f"direction vector {vector} is not a unit orthogonal step")
    return d


__all__ = ["Direction", "SCAN_ORDER", "parse_direction"]
