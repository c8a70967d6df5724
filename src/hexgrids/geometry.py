"""Point type and layout formulas for flat-top offset-row hex grids."""

from __future__ import annotations

from dataclasses import dataclass

from hexgrids.config import HEX_HALF_SIDE, HEX_SIDE, HEX_WIDTH
from hexgrids.direction import Direction


@dataclass(frozen=True, eq=False)
class Vertex:
    """Immutable 2-D point.

    Equality and hashing are by identity: two corners at the same
    coordinates are only "the same vertex" if the grid handed out one object.
    """

    x: float
    y: float

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


# (dx, dy) from the cell center to each corner, indexed by Direction.
_CORNER_OFFSETS: tuple[tuple[float, float], ...] = (
    (0.0, -HEX_SIDE),
    (HEX_WIDTH / 2, -HEX_HALF_SIDE),
    (HEX_WIDTH / 2, HEX_HALF_SIDE),
    (0.0, HEX_SIDE),
    (-HEX_WIDTH / 2, HEX_HALF_SIDE),
    (-HEX_WIDTH / 2, -HEX_HALF_SIDE),
)


def cell_center(x: int, y: int) -> Vertex:
    """Center of cell (x, y); odd rows are shifted right by half a cell."""

    row_shift = 0.5 * (y % 2)
    center_x = (x + 0.5 + row_shift) * HEX_WIDTH
    center_y = (y * 3 + 2) * HEX_HALF_SIDE
    return Vertex(center_x, center_y)


def corner_point(center: Vertex, direction: int) -> Vertex:
    """New vertex at the given corner of a cell centered on ``center``."""

    dx, dy = _CORNER_OFFSETS[Direction.of(direction)]
    return Vertex(center.x + dx, center.y + dy)


def grid_width(columns: int) -> float:
    return columns * HEX_WIDTH


def grid_height(rows: int) -> float:
    return (rows + 1.0 / 3) * 1.5 * HEX_SIDE


__all__ = [
    "Vertex",
    "cell_center",
    "corner_point",
    "grid_width",
    "grid_height",
]
