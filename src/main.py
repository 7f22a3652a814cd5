"""
Process entry point.

    python -m src.main [port]

The optional first argument is the port to listen on. When it is missing or not an integer,
DEFAULT_SERVER_PORT (or PENKIOLIKA_PORT from the environment) is used instead.
"""

import logging
import sys
from collections.abc import Sequence
from typing import Optional

import uvicorn

from src.api.app import create_app
from src.api.handler import RequestHandler
from src.core.config import Settings
from src.db.memory_repository import InMemoryGameRepository
from src.services.puzzle_service import PuzzleService

logger = logging.getLogger(__name__)


def parse_port(argv: Sequence[str], default: int) -> int:
    """Port from the first command line argument, or the default."""
    if not argv:
        logger.warning("No parameter provided. Assuming port=%s", default)
        return default
    try:
        return int(argv[0])
    except ValueError:
        logger.warning(
            "Integer as a parameter expected, and %r received. Assuming port=%s",
            argv[0],
            default,
        )
        return default


def build_handler(settings: Settings) -> RequestHandler:
    """Wire a fresh registry and service into a request handler."""
    repository = InMemoryGameRepository(shuffle_times=settings.shuffle_times)
    return RequestHandler(PuzzleService(repository), base_path=settings.base_path)


def start(port: int, handler: RequestHandler, host: str = "0.0.0.0") -> None:
    """Serve the handler on the given port (blocks until the server stops)."""
    app = create_app(handler)
    logger.info("Server starting on port=%s, base path=%s", port, handler.base_path)
    uvicorn.run(app, host=host, port=port, log_config=None)


def main(argv: Optional[Sequence[str]] = None) -> None:
    settings = Settings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    port = parse_port(sys.argv[1:] if argv is None else argv, settings.port)
    start(port, build_handler(settings), host=settings.host)


if __name__ == "__main__":
    main()
