"""Runtime configuration, read from environment variables with sensible defaults."""

import logging
import os
from dataclasses import dataclass
from typing import Self

from src.puzzle.board import DEFAULT_SHUFFLE_TIMES

logger = logging.getLogger(__name__)

DEFAULT_BASE_PATH = "/penkiolika"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_SERVER_PORT = 8080


def int_from_env(name: str, default: int) -> int:
    """Integer environment variable, or the default (with a warning) when unset or not an integer."""
    value = os.environ.get(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning(
            "Integer expected in %s, and %r received. Assuming %s=%s",
            name,
            value,
            name,
            default,
        )
        return default


@dataclass(frozen=True)
class Settings:
    base_path: str = DEFAULT_BASE_PATH
    host: str = DEFAULT_HOST
    port: int = DEFAULT_SERVER_PORT
    shuffle_times: int = DEFAULT_SHUFFLE_TIMES
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> Self:
        """Build settings from PENKIOLIKA_* environment variables, falling back to the defaults."""
        return cls(
            base_path=os.environ.get("PENKIOLIKA_BASE_PATH") or DEFAULT_BASE_PATH,
            host=os.environ.get("PENKIOLIKA_HOST") or DEFAULT_HOST,
            port=int_from_env("PENKIOLIKA_PORT", DEFAULT_SERVER_PORT),
            shuffle_times=int_from_env(
                "PENKIOLIKA_SHUFFLE_TIMES", DEFAULT_SHUFFLE_TIMES
            ),
            log_level=(os.environ.get("PENKIOLIKA_LOG_LEVEL") or "INFO").upper(),
        )
