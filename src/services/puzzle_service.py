"""Orchestration of communication from the request handler to the game registry and puzzle logic (and the reverse direction)."""

import logging
from typing import Optional

from src.api.models import GameResponse
from src.core.exceptions import GameNotFoundError, IllegalMoveError
from src.core.models import GameId, GameModel
from src.core.shared_types import Direction
from src.db.repository import GameRepository
from src.puzzle.board import Penkiolika

logger = logging.getLogger(__name__)


class PuzzleService:
    """Orchestration of layers for the fifteen puzzle."""

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository

    # -- API routes logic ---
    def create_game(self) -> GameResponse:
        """Create a new (already shuffled) game."""
        game_id, game = self.repo.create()
        logger.info("New game created: id=%s", game_id)
        return self._create_game_response(self._to_model(game_id, game))

    def get_game(self, game_id: GameId) -> GameResponse:
        """Retrieve current game state."""
        game = self._fetch_game(game_id)
        return self._create_game_response(self._to_model(game_id, game))

    def make_move(self, game_id: GameId, direction: Direction) -> GameResponse:
        """Slide the empty cell of the game in the requested direction."""
        # Keep hold of the game that was moved: it may be deleted right after the move
        moved_game: Optional[Penkiolika] = None

        def _move(game: Penkiolika) -> bool:
            nonlocal moved_game
            moved_game = game
            return game.move(direction)

        found, moved = self.repo.apply(game_id, _move)
        if not found or moved_game is None:
            raise GameNotFoundError(f"Game with id={game_id} not found")
        if not moved:
            raise IllegalMoveError(
                f"Unable to move {direction} in game with id={game_id}"
            )
        return self._create_game_response(self._to_model(game_id, moved_game))

    def delete_game(self, game_id: GameId) -> GameResponse:
        """Remove the game and return its last state."""
        game = self.repo.delete(game_id)
        if game is None:
            raise GameNotFoundError(f"Game with id={game_id} not found")
        logger.info("Game deleted: id=%s", game_id)
        return self._create_game_response(self._to_model(game_id, game))

    # -- Internal helpers --
    def _to_model(self, game_id: GameId, game: Penkiolika) -> GameModel:
        """Board and final flag come from a single snapshot, so they always agree."""
        board, final = game.snapshot()
        return GameModel(id=game_id, board=board, final=final)

    def _create_game_response(self, model: GameModel) -> GameResponse:
        return GameResponse(id=model.id, board=model.board, final=model.final)

    def _fetch_game(self, game_id: GameId) -> Penkiolika:
        """Attempt to find the game in the repository and raise error if it fails."""
        game = self.repo.get(game_id)
        if game is None:
            raise GameNotFoundError(f"Game with id={game_id} not found")
        return game
