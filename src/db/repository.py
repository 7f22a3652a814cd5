"""Protocol repository (in-memory for now, anything holding live games can implement it)"""

from typing import Callable, Protocol

from src.core.models import GameId
from src.puzzle.board import Penkiolika

MoveFn = Callable[[Penkiolika], bool]


class GameRepository(Protocol):
    """Registry of live games, keyed by generated id."""

    def create(self) -> tuple[GameId, Penkiolika]:
        """Create and shuffle a new game, store it under a fresh id and return both."""
        ...

    def get(self, game_id: GameId) -> Penkiolika | None:
        """Get game by ID, if it exists."""
        ...

    def delete(self, game_id: GameId) -> Penkiolika | None:
        """Remove a game and return it, if it existed."""
        ...

    def apply(self, game_id: GameId, move_fn: MoveFn) -> tuple[bool, bool]:
        """Run a move on a game. Returns (game found, move made)."""
        ...
