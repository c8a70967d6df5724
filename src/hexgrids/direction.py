"""Side and corner directions of a flat-top offset-row hex cell."""

from __future__ import annotations

from enum import IntEnum

from hexgrids.config import DIRECTION_COUNT


class Direction(IntEnum):
    """Clockwise side index starting at north-east.

    The same index names a corner: corner ``d`` is where side ``d - 1``
    meets side ``d``, so corner 0 is the top point and corner 3 the bottom
    one. Side ``d`` runs from corner ``d`` to corner ``d + 1``.
    """

    NORTH_EAST = 0
    EAST = 1
    SOUTH_EAST = 2
    SOUTH_WEST = 3
    WEST = 4
    NORTH_WEST = 5

    @classmethod
    def of(cls, value: int) -> Direction:
        """Normalise any integer onto the six directions (modulo 6)."""

        return cls(int(value) % DIRECTION_COUNT)

    def opposite(self) -> Direction:
        return Direction((self + 3) % DIRECTION_COUNT)

    def next(self) -> Direction:
        return Direction((self + 1) % DIRECTION_COUNT)


# Directions a cell links and bounds itself; the other three are filled in
# from the neighbor on the opposite side.
OUTWARD_DIRECTIONS: tuple[Direction, ...] = (
    Direction.NORTH_EAST,
    Direction.EAST,
    Direction.SOUTH_EAST,
)
INWARD_DIRECTIONS: tuple[Direction, ...] = tuple(d.opposite() for d in OUTWARD_DIRECTIONS)

__all__ = ["Direction", "OUTWARD_DIRECTIONS", "INWARD_DIRECTIONS"]
