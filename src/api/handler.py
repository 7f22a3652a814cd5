"""
Fifteen ("penkiolika") game request handler: the single entry point from the HTTP server into the service.

Requests served, relative to the base path (default /penkiolika):

* POST   game/      creates a new shuffled game -> 201
* GET    game/<id>  returns the game -> 200, or 404
* PATCH  game/<id>  makes a move, body {"move": "left"|"right"|"top"|"bottom"} -> 200, 404, 409 (illegal move),
                    400 (missing/unknown move) or 415 (body is not a JSON object)
* DELETE game/<id>  removes the game and returns it -> 200, or 404

A game is returned as {"id": <str>, "board": [16 ints, 0 = empty cell], "final": <bool>},
an error as {"reason": <str>}.
"""

import json
import logging
from typing import Optional

from pydantic import BaseModel

from src.api.models import ErrorResponse, GameResponse, MoveRequest
from src.core.config import DEFAULT_BASE_PATH
from src.core.exceptions import (
    GameError,
    InvalidRequestError,
    RoutingError,
    UnsupportedMediaTypeError,
)
from src.services.puzzle_service import PuzzleService

logger = logging.getLogger(__name__)

GAME_PATH = "game"

# Path patterns relative to the base path. None matches any single segment (the game id)
NEW_GAME_PATTERN: list[Optional[str]] = [GAME_PATH]
GAME_ID_PATTERN: list[Optional[str]] = [GAME_PATH, None]

Response = tuple[int, bytes]

# Longest part of a rejected body repeated back in the error reason
MAX_ECHOED_BODY = 200


def split_path(relative_path: str) -> list[str]:
    """Split on "/" and drop trailing empty segments, so "/game/" and "/game" read the same."""
    segments = relative_path.split("/")
    while len(segments) > 1 and segments[-1] == "":
        segments.pop()
    return segments


def path_matches(segments: list[str], pattern: list[Optional[str]]) -> bool:
    """
    Match a split relative path against a pattern, segment by segment.

    The first segment must be empty (the relative path starts with "/"), the number of remaining
    segments must equal the pattern's, literals must match exactly and None matches anything.
    """
    if len(segments) != len(pattern) + 1 or segments[0] != "":
        return False
    return all(
        expected is None or expected == received
        for expected, received in zip(pattern, segments[1:])
    )


class RequestHandler:
    def __init__(
        self, service: PuzzleService, base_path: str = DEFAULT_BASE_PATH
    ) -> None:
        self.service = service
        self.base_path = base_path

    def handle(self, method: str, path: str, body: bytes = b"") -> Response:
        """Route one request and return (status code, JSON payload). Never raises for a bad request."""
        try:
            status, result = self._dispatch(method.upper(), path, body)
        except GameError as e:
            return self._error(e)
        return status, self._encode(result)

    # -- Routing --
    def _dispatch(self, method: str, path: str, body: bytes) -> tuple[int, BaseModel]:
        if not path.startswith(self.base_path):
            raise RoutingError(f"Wrong path for this handler: {path}")

        segments = split_path(path[len(self.base_path) :])
        if method == "POST" and path_matches(segments, NEW_GAME_PATTERN):
            return 201, self.service.create_game()
        if path_matches(segments, GAME_ID_PATTERN):
            game_id = segments[2]
            if method == "GET":
                return 200, self.service.get_game(game_id)
            if method == "PATCH":
                request = self._parse_move(body)
                return 200, self.service.make_move(game_id, request.move)
            if method == "DELETE":
                return 200, self.service.delete_game(game_id)
        raise InvalidRequestError(f"Method {method} for path is not supported: {path}")

    # -- Encoding / decoding --
    def _parse_move(self, body: bytes) -> MoveRequest:
        text = body.decode("utf-8", errors="replace")
        shown = text if len(text) <= MAX_ECHOED_BODY else text[:MAX_ECHOED_BODY] + "..."
        try:
            payload = json.loads(text)
        # ValueError also covers integers longer than the int conversion limit,
        # RecursionError covers nesting deeper than the decoder can follow
        except (ValueError, RecursionError) as e:
            raise UnsupportedMediaTypeError(
                f"JSON object contents is expected, received: {shown}. {e}"
            ) from e
        if not isinstance(payload, dict):
            raise UnsupportedMediaTypeError(
                f"JSON object contents is expected, received: {shown}."
            )
        return MoveRequest.model_validate(payload)

    def _error(self, error: GameError) -> Response:
        reason = str(error)
        if error.status_code >= 500:
            logger.error("Responding error %s: %s", error.status_code, reason)
        else:
            logger.info("Responding error %s: %s", error.status_code, reason)
        return error.status_code, self._encode(ErrorResponse(reason=reason))

    def _encode(self, model: BaseModel) -> bytes:
        return model.model_dump_json(indent=4).encode("utf-8")
