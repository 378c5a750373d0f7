"""structlog configuration shared by all entry points."""

from __future__ import annotations

import logging
import sys

import structlog

SERVICE_NAME = "blended-pricing"


def configure_logging(production: bool = False, log_level: str = "INFO") -> None:
    """Configure structlog for production (JSON) or development (console).

    Production mode (*production=True*): JSON rendering.
    Development mode: colored console rendering.

    Logs go to stderr so command output on stdout stays machine-readable.

    Args:
        production: Enable production mode if ``True``.
        log_level: Minimum level name to emit, e.g. ``"INFO"``.
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if production:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(log_level.upper())
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    structlog.contextvars.bind_contextvars(service=SERVICE_NAME)
