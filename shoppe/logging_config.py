"""
Logging configuration module for the shoppe client.

Wires structlog on top of the standard library logging so every module can
log structured key/value events. Request ids are carried in structlog's
context variables and forwarded to the backend as ``X-Request-ID``.
"""

import logging
import sys
from typing import Optional
from uuid import uuid4

import structlog

from .config import settings

REQUEST_ID_KEY = "request_id"


def setup_logging(
    log_level: Optional[str] = None,
    use_json: Optional[bool] = None,
) -> None:
    """
    Configure application logging.

    Supports JSON structured logging for production and a console renderer
    for development.

    Args:
        log_level: Logging level (defaults to settings.LOG_LEVEL)
        use_json: Use JSON structured logging (defaults to settings.LOG_JSON)
    """
    if log_level is None:
        log_level = settings.LOG_LEVEL
    if use_json is None:
        use_json = settings.LOG_JSON

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    renderer = (
        structlog.processors.JSONRenderer()
        if use_json
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        context_class=dict,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """
    Get a logger instance for a specific module.

    Args:
        name: Name for the logger (typically __name__ of the module)

    Returns:
        Bound structlog logger
    """
    return structlog.get_logger(name or "shoppe")


def set_request_id(request_id: Optional[str] = None) -> str:
    """
    Set request ID in context for tracing.

    Args:
        request_id: Request ID to set, generates new UUID if None

    Returns:
        The request ID that was set
    """
    if request_id is None:
        request_id = str(uuid4())
    structlog.contextvars.bind_contextvars(**{REQUEST_ID_KEY: request_id})
    return request_id


def get_request_id() -> Optional[str]:
    """Get current request ID from context, or None if not set."""
    return structlog.contextvars.get_contextvars().get(REQUEST_ID_KEY)


def clear_request_id() -> None:
    """Clear request ID from context."""
    structlog.contextvars.unbind_contextvars(REQUEST_ID_KEY)
