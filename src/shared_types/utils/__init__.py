"""Utility functions for shared-types."""

from __future__ import annotations

import logging
import sys

import structlog

from shared_types.config import Settings
from shared_types.exceptions import ConfigurationError

logger = structlog.get_logger()


def configure_logging(settings: Settings) -> None:
    """Configure structlog output for the given settings.

    Args:
        settings: Settings providing ``log_level`` and ``log_format``.

    Raises:
        ConfigurationError: If the log level is not a known level name.
    """

    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(f"Unknown log level: {settings.log_level}")

    renderer: structlog.types.Processor
    if settings.log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
    logger.debug("logging_configured", level=settings.log_level, format=settings.log_format)
