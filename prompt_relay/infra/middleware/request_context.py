"""
Per-request correlation for relay logs.
"""

from __future__ import annotations

import time
from typing import Awaitable, Callable
from uuid import uuid4

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from prompt_relay.infra.config.logging_config import (
    bind_context,
    clear_context,
    get_logger,
)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Tags every log line of a relay call with one request id.

    The id is taken from the caller's ``X-Request-ID`` when present and is
    echoed back on the response, including 400 and 500 replies, so a client
    can match its failure to the server log. One ``relay.http`` line per
    request records status and wall time, which is dominated by the single
    Gemini round trip.
    """

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
        bind_context(request_id=request_id)
        logger = get_logger("relay.http")
        started = time.perf_counter()

        try:
            response = await call_next(request)
            elapsed_ms = round((time.perf_counter() - started) * 1000, 1)
            response.headers[REQUEST_ID_HEADER] = request_id
            logger.info(
                "relay.http",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                elapsed_ms=elapsed_ms,
            )
            return response
        finally:
            clear_context()
