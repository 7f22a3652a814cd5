"""
Custom exceptions raised inside the service and API layers.

Every exception carries the HTTP status code it maps to, so the request handler can
translate any of them into a `{"reason": ...}` response without knowing the concrete type.
"""


class GameError(Exception):
    """Top-level exception for anything that goes wrong while handling a game request."""

    status_code: int = 500


class InvalidRequestError(GameError):
    """Malformed request: missing/unknown move, unsupported method or path."""

    status_code = 400


class UnsupportedMediaTypeError(GameError):
    """The request body could not be read as a JSON object."""

    status_code = 415


class GameNotFoundError(GameError):
    status_code = 404


class IllegalMoveError(GameError):
    """Well-formed move which is not possible in the current board configuration."""

    status_code = 409


class RoutingError(GameError):
    """Request reached a handler that does not serve its path (wiring defect, not a client error)."""

    status_code = 500
