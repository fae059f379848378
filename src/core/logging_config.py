"""Structured logging configuration.

This module initializes structlog loggers with a stable JSON format.
Events flow through stdlib logging so stdout stays free for command
output and the level is set once by the entry point.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def configure_logging(level: str) -> None:
    """Send log events to stderr at the given level.

    Args:
        level: Standard logging level name such as ``INFO``.
    """
    logging.basicConfig(stream=sys.stderr, level=level.upper(), format="%(message)s")


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog logger with structured output.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(sort_keys=True),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    return structlog.get_logger(name)
