"""Requests and Response models"""

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Direction

AVAILABLE_MOVES = [direction.value for direction in Direction]


# --- REQUEST MODELS ---
class MoveRequest(BaseModel):
    """Body of a PATCH request: {"move": "left" | "right" | "top" | "bottom"}"""

    move: Optional[Direction] = Field(default=None, validate_default=True)

    @field_validator("move", mode="before")
    @classmethod
    def validate_move(cls, value: Any) -> Direction:
        if value is None:
            raise InvalidRequestError("Move must be provided")
        if not isinstance(value, str) or value not in AVAILABLE_MOVES:
            raise InvalidRequestError(
                f"Unknown move {value}. Pick one from {', '.join(AVAILABLE_MOVES)}"
            )
        return Direction(value)


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    id: str
    board: list[int]
    final: bool


class ErrorResponse(BaseModel):
    reason: str
