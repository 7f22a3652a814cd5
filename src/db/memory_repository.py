"""Implementation of (Game)Repository keeping every game in process memory"""

import logging
from collections.abc import Mapping
from threading import Lock
from typing import Optional

from src.core.models import GameId
from src.db.repository import MoveFn
from src.puzzle.board import DEFAULT_SHUFFLE_TIMES, Penkiolika

logger = logging.getLogger(__name__)


class InMemoryGameRepository:
    """
    Games stored in a dictionary, ids issued by a counter.

    The lock only guards the dictionary and the counter. Moves run under each game's own lock,
    so requests for different games never wait on each other.
    """

    def __init__(
        self,
        games: Optional[Mapping[GameId, Penkiolika]] = None,
        shuffle_times: int = DEFAULT_SHUFFLE_TIMES,
    ) -> None:
        self._games: dict[GameId, Penkiolika] = dict(games or {})
        self._last_id = 0
        self._lock = Lock()
        self.shuffle_times = shuffle_times

    def create(self) -> tuple[GameId, Penkiolika]:
        """Store new game and return the newly created game ID + the game."""
        game = Penkiolika()
        # shuffle before publishing: nobody else can see the game yet
        game.shuffle(self.shuffle_times)
        with self._lock:
            self._last_id += 1
            game_id = str(self._last_id)
            self._games[game_id] = game
        logger.debug("Created game id=%s", game_id)
        return game_id, game

    def add(self, game_id: GameId, game: Penkiolika) -> None:
        """Register an already started game under a given id (does not touch the counter)."""
        with self._lock:
            self._games[game_id] = game

    def get(self, game_id: GameId) -> Penkiolika | None:
        with self._lock:
            return self._games.get(game_id)

    def delete(self, game_id: GameId) -> Penkiolika | None:
        with self._lock:
            game = self._games.pop(game_id, None)
        if game is not None:
            logger.debug("Deleted game id=%s", game_id)
        return game

    def apply(self, game_id: GameId, move_fn: MoveFn) -> tuple[bool, bool]:
        game = self.get(game_id)
        if game is None:
            return False, False
        return True, move_fn(game)

    def __len__(self) -> int:
        with self._lock:
            return len(self._games)

    def __contains__(self, game_id: object) -> bool:
        with self._lock:
            return game_id in self._games
