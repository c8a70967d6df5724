"""Rectangular flat-top offset-row hex grid with shared vertices and edges."""

from __future__ import annotations

from typing import Callable, Iterator, Optional

from hexgrids.cell import Edge, HexCell
from hexgrids.config import HEX_SIDE, HEX_WIDTH
from hexgrids.direction import INWARD_DIRECTIONS, OUTWARD_DIRECTIONS, Direction
from hexgrids.errors import GridConfigurationError, GridIntegrityError
from hexgrids.geometry import Vertex, cell_center, corner_point, grid_height, grid_width
from hexgrids.runtime import get_logger

logger = get_logger(__name__)


class HexGrid:
    """Cylindrical hex grid: x wraps around, y does not.

    Construction runs four passes over every cell in row-major order
    (create, link neighbors, place vertices, create edges). The constructor
    either returns a fully built grid or raises before the first pass.
    """

    def __init__(self, width, height):
        if not isinstance(width, int) or isinstance(width, bool) or width < 1:
            raise GridConfigurationError(f"Grid width must be a positive integer, got {width!r}")
        if not isinstance(height, int) or isinstance(height, bool) or height < 1:
            raise GridConfigurationError(f"Grid height must be a positive integer, got {height!r}")

        self.width = width
        self.height = height
        self._cells: list[list[Optional[HexCell]]] = [[None] * height for _ in range(width)]
        self._edges: list[Edge] = []

        self._run_for_each_cell(self._create_cell)
        self._run_for_each_cell(self._designate_neighbors)
        self._run_for_each_cell(self._add_vertices)
        self._run_for_each_cell(self._create_edges)
        self.validate_integrity()

        logger.debug(
            "hex_grid.built",
            width=width,
            height=height,
            cells=self.cell_count,
            edges=len(self._edges),
        )

    @property
    def hex_side(self) -> float:
        return HEX_SIDE

    @property
    def hex_width(self) -> float:
        return HEX_WIDTH

    @property
    def x_dimension(self) -> float:
        return grid_width(self.width)

    @property
    def y_dimension(self) -> float:
        return grid_height(self.height)

    @property
    def cell_count(self) -> int:
        return self.width * self.height

    def cell_at(self, x: int, y: int) -> HexCell:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Cell ({x},{y}) is outside a {self.width}x{self.height} grid")
        return self._cells[x][y]

    @property
    def cells(self) -> Iterator[HexCell]:
        """All cells, row by row."""

        for y in range(self.height):
            for x in range(self.width):
                yield self._cells[x][y]

    @property
    def edges(self) -> tuple[Edge, ...]:
        return tuple(self._edges)

    def boundary_edges(self) -> list[Edge]:
        return [edge for edge in self._edges if edge.is_boundary]

    def vertices(self) -> list[Vertex]:
        """Distinct vertices in the order cells first reference them."""

        seen = set()
        ordered = []
        for cell in self.cells:
            for vertex in cell.vertices:
                if vertex not in seen:
                    seen.add(vertex)
                    ordered.append(vertex)
        return ordered

    def _run_for_each_cell(self, method: Callable[[int, int], None]) -> None:
        for y in range(self.height):
            for x in range(self.width):
                method(x, y)

    def _create_cell(self, x, y):
        self._cells[x][y] = HexCell(x, y, center=cell_center(x, y), index=y * self.width + x)

    def _get_cell(self, x, y) -> Optional[HexCell]:
        if y < 0 or y >= self.height:
            return None
        return self._cells[x % self.width][y]

    def _designate_neighbors(self, x, y):
        odd_row = y % 2
        cell = self._cells[x][y]

        self._mark_as_neighbors(cell, self._get_cell(x + odd_row, y - 1), Direction.NORTH_EAST)
        self._mark_as_neighbors(cell, self._get_cell(x + 1, y), Direction.EAST)
        self._mark_as_neighbors(cell, self._get_cell(x + odd_row, y + 1), Direction.SOUTH_EAST)

    @staticmethod
    def _mark_as_neighbors(cell1, cell2, direction):
        # On a one-column grid the wrapped east neighbor is the cell itself.
        if cell2 is None or cell2 is cell1:
            return
        cell1.add_neighbor(cell2, direction)
        cell2.add_neighbor(cell1, direction.opposite())

    def _add_vertices(self, x, y):
        cell = self._cells[x][y]
        odd_row = y % 2 == 1
        first_row = y == 0
        last_row = y == self.height - 1
        # Corners on the x seam are not shared with the wrapped neighbor.
        east_seam = x == self.width - 1 and odd_row
        west_seam = x == 0 and not odd_row

        # Corner d sits between sides d - 1 and d: corner 0 is the top point.
        top = self._add_vertex_to_cell(cell, Direction.NORTH_EAST)
        bottom = self._add_vertex_to_cell(cell, Direction.SOUTH_WEST)

        if first_row or east_seam:
            self._add_vertex_to_cell(cell, Direction.EAST)
        else:
            cell.get_neighbor(Direction.NORTH_EAST).add_vertex(top, Direction.WEST)

        # Edge rows have no cell above or below to hand corners over, so the
        # corner shared along the row comes from the west neighbor, which
        # row-major order has already visited.
        if first_row and x > 0:
            west = cell.get_neighbor(Direction.WEST)
            cell.add_vertex(west.get_vertex(Direction.EAST), Direction.NORTH_WEST)
        elif first_row or west_seam:
            self._add_vertex_to_cell(cell, Direction.NORTH_WEST)
        else:
            cell.get_neighbor(Direction.NORTH_WEST).add_vertex(top, Direction.SOUTH_EAST)

        if last_row or east_seam:
            self._add_vertex_to_cell(cell, Direction.SOUTH_EAST)
        else:
            cell.get_neighbor(Direction.SOUTH_EAST).add_vertex(bottom, Direction.NORTH_WEST)

        if last_row and x > 0:
            west = cell.get_neighbor(Direction.WEST)
            cell.add_vertex(west.get_vertex(Direction.SOUTH_EAST), Direction.WEST)
        elif last_row or west_seam:
            self._add_vertex_to_cell(cell, Direction.WEST)
        else:
            cell.get_neighbor(Direction.SOUTH_WEST).add_vertex(bottom, Direction.EAST)

    @staticmethod
    def _add_vertex_to_cell(cell, direction) -> Vertex:
        vertex = corner_point(cell.center, direction)
        cell.add_vertex(vertex, direction)
        return vertex

    def _create_edges(self, x, y):
        cell = self._cells[x][y]

        for direction in OUTWARD_DIRECTIONS:
            self._create_edge(cell, direction)

        for direction in INWARD_DIRECTIONS:
            if cell.get_neighbor(direction) is None:
                self._create_edge(cell, direction)

    def _create_edge(self, cell, direction) -> Edge:
        neighbor = cell.get_neighbor(direction)
        edge = Edge(
            cell1=cell,
            cell2=neighbor,
            vertex1=cell.get_vertex(direction),
            vertex2=cell.get_vertex(direction.next()),
            index=len(self._edges),
        )
        cell.add_edge(edge, direction)
        if neighbor is not None:
            neighbor.add_edge(edge, direction.opposite())
        self._edges.append(edge)
        return edge

    def validate_integrity(self):
        count = 0
        for cell in self.cells:
            count += 1
            for direction in Direction:
                if cell.get_vertex(direction) is None:
                    raise GridIntegrityError(f"Missing {direction.name} vertex at {cell.position}")
                edge = cell.get_edge(direction)
                if edge is None:
                    raise GridIntegrityError(f"Missing {direction.name} edge at {cell.position}")
                if cell not in edge.cells:
                    raise GridIntegrityError(
                        f"Edge {edge!r} stored at {cell.position} does not reference that cell"
                    )

                neighbor = cell.get_neighbor(direction)
                if neighbor is None:
                    if not edge.is_boundary:
                        raise GridIntegrityError(
                            f"Interior edge {edge!r} on open {direction.name} side of {cell.position}"
                        )
                    continue
                if neighbor.get_neighbor(direction.opposite()) is not cell:
                    raise GridIntegrityError(
                        f"Asymmetric {direction.name} neighbor link {cell.position} -> {neighbor.position}"
                    )
                if neighbor.get_edge(direction.opposite()) is not edge:
                    raise GridIntegrityError(
                        f"Cells {cell.position} and {neighbor.position} hold different edges"
                    )

        if count != self.cell_count:
            raise GridIntegrityError(f"Expected {self.cell_count} cells, found {count}")

        expected_edges = sum(
            1 + (edge.cell2 is not None) for edge in self._edges
        )
        if expected_edges != self.cell_count * 6:
            raise GridIntegrityError(
                f"Edge references out of sync: {expected_edges} for {self.cell_count} cells"
            )


def build_grid(width: int, height: int) -> HexGrid:
    return HexGrid(width, height)


__all__ = ["HexGrid", "build_grid"]
