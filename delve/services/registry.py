"""In-process registry of live games, shared by HTTP and Socket.IO handlers.

Nothing is persisted: games live until evicted or the process exits. The
registry lock only guards the mapping; each ``Game`` serializes its own
commands.
"""

from __future__ import annotations

import threading
import uuid
from collections import OrderedDict
from typing import Optional

from delve.config import GameConfig
from delve.errors import GameNotFoundError
from delve.logging_utils import log

from .turn_engine import Game

DEFAULT_MAX_GAMES = 256


class GameRegistry:
    def __init__(self, max_games: int = DEFAULT_MAX_GAMES):
        self.max_games = max_games
        self._games: "OrderedDict[str, Game]" = OrderedDict()
        self._lock = threading.Lock()

    def create(self, config: Optional[GameConfig] = None) -> Game:
        game_id = uuid.uuid4().hex[:12]
        game = Game(config=config, game_id=game_id)
        with self._lock:
            self._games[game_id] = game
            while len(self._games) > self.max_games:
                evicted, _ = self._games.popitem(last=False)
                log.bind(game_id=evicted).info(event="game_evicted")
        log.bind(game_id=game_id).info(event="game_created", size=game.config.board_size)
        return game

    def get(self, game_id: str) -> Game:
        with self._lock:
            game = self._games.get(game_id)
            if game is None:
                raise GameNotFoundError(game_id)
            # Recently used games move to the back of the eviction queue.
            self._games.move_to_end(game_id)
            return game

    def discard(self, game_id: str) -> bool:
        with self._lock:
            return self._games.pop(game_id, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._games.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._games)


games = GameRegistry()

__all__ = ["GameRegistry", "games", "DEFAULT_MAX_GAMES"]
