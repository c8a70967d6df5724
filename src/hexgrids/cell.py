"""Cells and edges of a hex grid."""

from __future__ import annotations

from typing import Iterator, Optional

from hexgrids.config import DIRECTION_COUNT
from hexgrids.direction import Direction
from hexgrids.errors import NotAdjacentError, UnknownEdgeError
from hexgrids.geometry import Vertex


class Edge:
    """Boundary segment between ``cell1`` and ``cell2``.

    ``cell2`` is None when the edge caps the outer boundary of the grid.
    One object exists per segment; both touching cells hold a reference.
    """

    def __init__(self, cell1, cell2, vertex1, vertex2, index=0):
        self.cell1 = cell1
        self.cell2 = cell2
        self.vertex1 = vertex1
        self.vertex2 = vertex2
        self.index = index

    @property
    def is_boundary(self) -> bool:
        return self.cell2 is None

    @property
    def cells(self):
        if self.cell2 is None:
            return (self.cell1,)
        return (self.cell1, self.cell2)

    def __repr__(self):
        other = None if self.cell2 is None else self.cell2.position
        return f"Edge(#{self.index} {self.cell1.position}->{other})"


class HexCell:
    """One hexagon with six neighbor, vertex and edge slots.

    Slot accessors take any integer and wrap it modulo 6, so ``direction + 3``
    can be passed straight through. Each slot is written once while the grid
    is built.
    """

    def __init__(self, x, y, center=None, index=0):
        self.x = x
        self.y = y
        self.center: Optional[Vertex] = center
        self.index = index
        self._neighbors: list[Optional[HexCell]] = [None] * DIRECTION_COUNT
        self._vertices: list[Optional[Vertex]] = [None] * DIRECTION_COUNT
        self._edges: list[Optional[Edge]] = [None] * DIRECTION_COUNT

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)

    def add_neighbor(self, cell: HexCell, direction: int) -> None:
        slot = Direction.of(direction)
        assert self._neighbors[slot] is None, f"neighbor {slot.name} of {self.position} already set"
        self._neighbors[slot] = cell

    def add_vertex(self, vertex: Vertex, direction: int) -> None:
        slot = Direction.of(direction)
        assert self._vertices[slot] is None, f"vertex {slot.name} of {self.position} already set"
        self._vertices[slot] = vertex

    def add_edge(self, edge: Edge, direction: int) -> None:
        slot = Direction.of(direction)
        assert self._edges[slot] is None, f"edge {slot.name} of {self.position} already set"
        self._edges[slot] = edge

    def get_neighbor(self, direction: int) -> Optional[HexCell]:
        return self._neighbors[Direction.of(direction)]

    def get_vertex(self, direction: int) -> Optional[Vertex]:
        return self._vertices[Direction.of(direction)]

    def get_edge(self, direction: int) -> Optional[Edge]:
        return self._edges[Direction.of(direction)]

    @property
    def neighbors(self) -> Iterator[HexCell]:
        """Present neighbors only; absent boundary slots are skipped."""

        return (cell for cell in self._neighbors if cell is not None)

    @property
    def vertices(self) -> tuple[Optional[Vertex], ...]:
        return tuple(self._vertices)

    @property
    def edges(self) -> tuple[Optional[Edge], ...]:
        return tuple(self._edges)

    def edge_towards(self, neighbor: HexCell) -> Edge:
        """Edge in the first slot holding ``neighbor``.

        Two cells can touch on two sides (on a two-column grid, east and the
        wrapped west), so ``a.edge_towards(b)`` need not be ``b.edge_towards(a)``.
        """

        for direction, cell in enumerate(self._neighbors):
            if cell is not None and cell is neighbor:
                return self._edges[direction]
        raise NotAdjacentError(f"Cell {neighbor.position} is not adjacent to {self.position}")

    def direction_of(self, edge: Edge) -> Direction:
        for direction, candidate in enumerate(self._edges):
            if candidate is edge:
                return Direction(direction)
        raise UnknownEdgeError(f"{edge!r} does not bound cell {self.position}")

    def __repr__(self):
        return f"HexCell({self.x}, {self.y})"


__all__ = ["Edge", "HexCell"]
