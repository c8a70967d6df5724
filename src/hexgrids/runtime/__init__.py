"""Runtime helpers for hexgrids."""

from .helpers import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
