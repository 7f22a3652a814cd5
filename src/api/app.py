"""
HTTP transport: a FastAPI app passing every request under the base path to the RequestHandler.

The handler owns routing and the JSON contract. The app only supplies method, path and raw body,
and writes back whatever status code and payload the handler produced.
"""

import logging

from fastapi import FastAPI, Request, Response
from starlette.concurrency import run_in_threadpool
from starlette.types import Receive, Scope, Send

from src.api.handler import RequestHandler

logger = logging.getLogger(__name__)

ROUTED_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


class GameJSONResponse(Response):
    """Already encoded JSON payload. A failure while writing it is logged, never retried."""

    media_type = "application/json"

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        try:
            await super().__call__(scope, receive, send)
        except OSError as e:
            logger.error(
                "I/O error while sending response status=%s to client. Reason=%s",
                self.status_code,
                e,
            )


def create_app(handler: RequestHandler) -> FastAPI:
    app = FastAPI(
        title="Penkiolika",
        description="Fifteen puzzle games over HTTP.",
        version="0.1.0",
    )

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.api_route(
        handler.base_path + "{relative_path:path}",
        methods=ROUTED_METHODS,
        include_in_schema=False,
    )
    async def games(request: Request) -> Response:
        body = await request.body()
        # one worker thread per request: moves may wait on a game's lock, the event loop must not
        status_code, payload = await run_in_threadpool(
            handler.handle, request.method, request.url.path, body
        )
        return GameJSONResponse(content=payload, status_code=status_code)

    return app
