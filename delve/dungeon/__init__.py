"""Public dungeon package interface."""

from .connectivity import connect_exit, exit_reachable, flood_reachable  # noqa: F401
from .maze import Maze  # noqa: F401
from .pipeline import Level, generate_level  # noqa: F401
from .render import render_ascii  # noqa: F401
from .tiles import EXIT, FLOOR, WALL  # noqa: F401

__all__ = [
    "Maze",
    "Level",
    "generate_level",
    "flood_reachable",
    "exit_reachable",
    "connect_exit",
    "render_ascii",
    "WALL",
    "FLOOR",
    "EXIT",
]
