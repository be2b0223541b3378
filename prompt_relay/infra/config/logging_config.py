"""
Structlog configuration and helpers.

Level and renderer come from the caller; this module never reads settings
on its own.
"""

from __future__ import annotations

import logging
from typing import Optional

import structlog

# Loggers that would otherwise echo every Gemini or client round trip.
QUIET_LOGGERS = ("httpx", "httpcore", "google_genai", "urllib3")


def _resolve_level(log_level: str) -> int:
    return getattr(logging, (log_level or "INFO").upper(), logging.INFO)


def _renderer(log_format: str):
    if (log_format or "json").lower() == "console":
        return structlog.dev.ConsoleRenderer()
    return structlog.processors.JSONRenderer(sort_keys=True)


def setup_logging(log_level: str = "INFO", log_format: str = "json") -> None:
    """Configure structlog and stdlib logging for the relay.

    Args:
        log_level: Level name such as "INFO" or "DEBUG".
        log_format: "json" or "console"; anything else renders JSON.
    """
    level = _resolve_level(log_level)

    logging.basicConfig(level=level, format="%(message)s")
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            _renderer(log_format),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger bound with a name."""
    if name:
        return structlog.get_logger(name)
    return structlog.get_logger()


def bind_context(**kwargs) -> None:
    """Bind contextvars for correlation (e.g., request_id)."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear bound contextvars (call at end of request)."""
    structlog.contextvars.clear_contextvars()
