"""
Boundary layer data model(s).

These objects are used to communicate with the Service.
The registry/domain layer (lower) produces them from a puzzle instance, and the API layer (higher)
turns them into the wire format. Neither side needs to know about the other's types.
"""

from dataclasses import dataclass

GameId = str


@dataclass
class GameModel:
    """Transport-safe snapshot of one puzzle instance."""

    id: GameId
    board: list[int]
    final: bool
