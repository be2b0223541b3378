"""
API error handling and exception mapping.

Converts relay errors into ``{"error": message}`` JSON responses with the
matching HTTP status.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from prompt_relay.api.schemas import ErrorResponse
from prompt_relay.domain.exceptions import RelayError
from prompt_relay.infra.config.logging_config import get_logger

logger = get_logger("api.errors")

STATUS_CODE_MAPPING = {
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "UPSTREAM_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


async def relay_error_handler(request: Request, exc: RelayError) -> JSONResponse:
    """Map a relay error to its status code, passing the message through."""
    status_code = STATUS_CODE_MAPPING.get(
        exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR
    )
    logger.warning("relay.error", code=exc.code, status_code=status_code)

    return JSONResponse(
        status_code=status_code, content=ErrorResponse(error=exc.message).model_dump()
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions with the raw message."""
    logger.exception("unexpected.error", error_type=type(exc).__name__)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(error=str(exc)).model_dump(),
    )


def setup_error_handlers(app: FastAPI) -> None:
    """
    Setup error handlers for the FastAPI application.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(RelayError, relay_error_handler)
    app.add_exception_handler(Exception, general_exception_handler)
