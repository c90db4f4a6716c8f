"""Error kinds raised for bad input.

Gameplay outcomes (walking into a wall, dying) are never exceptions; these
types cover malformed commands and configuration only. Each carries the
offending ``field`` and a short machine-readable ``code`` so the HTTP and
Socket.IO layers can report them uniformly.
"""

from __future__ import annotations


class DelveError(Exception):
    def __init__(self, message: str, field: str = "__root__", code: str = "invalid"):
        super().__init__(message)
        self.message = message
        self.field = field
        self.code = code

    def to_dict(self):
        return {"error": self.message, "field": self.field, "code": self.code}


class ConfigError(DelveError, ValueError):
    """A game tunable is missing, mistyped or out of range."""


class InvalidDirectionError(DelveError, ValueError):
    """A move command carried something that is not one of the four directions."""

    def __init__(self, message: str, field: str = "direction", code: str = "direction"):
        super().__init__(message, field=field, code=code)


class GameNotFoundError(DelveError, KeyError):
    def __init__(self, game_id: str):
        super().__init__(f"unknown game {game_id}", field="game_id", code="not_found")
        self.game_id = game_id

    def __str__(self):
        return self.message


__all__ = ["DelveError", "ConfigError", "InvalidDirectionError", "GameNotFoundError"]
