"""
Structured logging for foodgraph.

All modules log through structlog on top of the standard library logger, so
SQLAlchemy and uvicorn output lands in the same stream. Development gets a
colored console renderer; production emits one JSON object per line.
"""

import logging
import secrets
import sys
from contextvars import ContextVar
from typing import Any

import structlog

REQUEST_ID_HEADER = "X-Request-ID"

_request_id: ContextVar[str | None] = ContextVar("foodgraph_request_id", default=None)


def add_request_id(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """structlog processor: attach the id of the request being served, if any."""
    request_id = _request_id.get()
    if request_id:
        event_dict.setdefault("request_id", request_id)
    return event_dict


def _level(level: str | None, debug: bool) -> int:
    if level is None:
        return logging.DEBUG if debug else logging.INFO
    value = logging.getLevelName(level.upper())
    return value if isinstance(value, int) else logging.INFO


def configure_logging(debug: bool = False, level: str | None = None) -> None:
    """Configure structlog and the root logger.

    Args:
        debug: Human-readable console output instead of JSON
        level: Level name such as ``"info"``; DEBUG when debug, else INFO
    """
    logging.basicConfig(
        level=_level(level, debug),
        stream=sys.stdout,
        format="%(message)s",
        force=True,
    )

    renderer: Any = (
        structlog.dev.ConsoleRenderer(colors=True)
        if debug
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            add_request_id,
            structlog.processors.TimeStamper(fmt="ISO", utc=True),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def generate_request_id() -> str:
    """Random 16-character urlsafe id."""
    return secrets.token_urlsafe(12)


def set_request_context(request_id: str | None = None) -> str:
    """Bind a request id to the current context, generating one when absent."""
    request_id = request_id or generate_request_id()
    _request_id.set(request_id)
    return request_id


def clear_request_context() -> None:
    _request_id.set(None)


def get_request_id() -> str | None:
    return _request_id.get()
