"""Logging configuration.

Standard library logging does the output; structlog formats the
key/value events emitted across the application.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from invledger.infrastructure.settings import Settings, get_settings


def setup_stdlib_logging(log_level: str) -> None:
    """Configure standard library logging."""
    level = getattr(logging, log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = []

    # Keep stdout free for command output
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    root_logger.addHandler(console_handler)


def setup_structlog(environment: str) -> None:
    """Configure structlog for structured logging."""
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if environment in ("production", "staging"):
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging(config: Settings | None = None) -> None:
    """Configure all logging for the application."""
    config = config or get_settings()
    setup_stdlib_logging(config.LOG_LEVEL)
    setup_structlog(config.ENVIRONMENT)
