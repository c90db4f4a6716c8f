# Tile constants centralized for modular imports
WALL = "W"
FLOOR = "F"
EXIT = "E"

TILE_NAMES = {WALL: "wall", FLOOR: "floor", EXIT: "exit"}


def char_to_type(ch: str) -> str:
    return TILE_NAMES.get(ch, "wall")


__all__ = ["WALL", "FLOOR", "EXIT", "TILE_NAMES", "char_to_type"]
