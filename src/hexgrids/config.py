"""Geometry and runtime constants used by hexgrids."""

import math
from typing import Final

DIRECTION_COUNT: Final[int] = 6

HEX_SIDE: Final[float] = 1.0
HEX_HALF_SIDE: Final[float] = HEX_SIDE / 2
HEX_WIDTH: Final[float] = HEX_SIDE * math.sqrt(3)

DEFAULT_LOG_LEVEL: Final[str] = "WARNING"

__all__ = [
    "DIRECTION_COUNT",
    "HEX_SIDE",
    "HEX_HALF_SIDE",
    "HEX_WIDTH",
    "DEFAULT_LOG_LEVEL",
]
