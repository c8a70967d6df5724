"""Logging setup shared by the command-line entry points."""

from __future__ import annotations

import logging
import sys

import structlog

from hexgrids.config import DEFAULT_LOG_LEVEL


def get_logger(name: str):
    """structlog logger backed by the stdlib logger ``name``.

    Events go through stdlib level filtering and handlers, so nothing is
    emitted until the application configures logging.
    """

    return structlog.wrap_logger(logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger)


def configure_logging(level: str | int = DEFAULT_LOG_LEVEL) -> None:
    """Route structlog through stdlib logging at ``level`` on stderr."""

    if isinstance(level, str):
        numeric_level = logging.getLevelName(level.upper())
        if not isinstance(numeric_level, int):
            raise ValueError(f"Unknown log level: {level}")
    else:
        numeric_level = int(level)

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=numeric_level, force=True)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


__all__ = ["configure_logging", "get_logger"]
