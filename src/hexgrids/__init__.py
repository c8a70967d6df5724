"""Hexagonal grid topology: cells, shared vertices and edges, flood fill."""

import logging

from hexgrids.cell import Edge, HexCell
from hexgrids.direction import Direction
from hexgrids.errors import (
    GridConfigurationError,
    GridIntegrityError,
    HexGridError,
    NotAdjacentError,
    UnknownEdgeError,
)
from hexgrids.flood import SupportsNeighbors, flood, is_disconnected_partition
from hexgrids.geometry import Vertex
from hexgrids.grid import HexGrid, build_grid

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Direction",
    "Edge",
    "GridConfigurationError",
    "GridIntegrityError",
    "HexCell",
    "HexGrid",
    "HexGridError",
    "NotAdjacentError",
    "SupportsNeighbors",
    "UnknownEdgeError",
    "Vertex",
    "build_grid",
    "flood",
    "is_disconnected_partition",
    "__version__",
]
