import pytest

from hexgrids import Direction, Edge, HexCell, NotAdjacentError, UnknownEdgeError, Vertex, build_grid


def test_slot_accessors_wrap_direction():
    cell = HexCell(0, 0)
    other = HexCell(1, 0)

    cell.add_neighbor(other, 2 + 3)

    assert cell.get_neighbor(Direction.NORTH_WEST) is other
    assert cell.get_neighbor(-1) is other
    assert cell.get_neighbor(11) is other


def test_neighbors_skips_absent_slots():
    cell = HexCell(0, 0)
    east = HexCell(1, 0)
    west = HexCell(2, 0)
    cell.add_neighbor(east, Direction.EAST)
    cell.add_neighbor(west, Direction.WEST)

    assert list(cell.neighbors) == [east, west]


def test_slot_cannot_be_written_twice():
    cell = HexCell(0, 0)
    cell.add_vertex(Vertex(0.0, 0.0), Direction.EAST)

    with pytest.raises(AssertionError):
        cell.add_vertex(Vertex(0.0, 0.0), Direction.EAST + 6)


def test_vertices_compare_by_identity():
    a = Vertex(1.0, 2.0)
    b = Vertex(1.0, 2.0)

    assert a != b
    assert a.as_tuple() == b.as_tuple()
    assert len({a, b}) == 2


def test_edge_towards_returns_shared_edge():
    grid = build_grid(4, 3)
    cell = grid.cell_at(1, 1)
    east = grid.cell_at(2, 1)

    edge = cell.edge_towards(east)

    assert edge is cell.get_edge(Direction.EAST)
    assert edge is east.edge_towards(cell)
    assert cell.direction_of(edge) is Direction.EAST
    assert east.direction_of(edge) is Direction.WEST


def test_edge_towards_non_neighbor_raises():
    grid = build_grid(4, 3)

    with pytest.raises(NotAdjacentError):
        grid.cell_at(0, 0).edge_towards(grid.cell_at(2, 2))


def test_direction_of_foreign_edge_raises():
    grid = build_grid(4, 3)
    foreign = grid.cell_at(3, 2).get_edge(Direction.SOUTH_EAST)

    with pytest.raises(UnknownEdgeError):
        grid.cell_at(0, 0).direction_of(foreign)


def test_boundary_edge_has_single_cell():
    cell = HexCell(0, 0)
    edge = Edge(cell, None, Vertex(0.0, 0.0), Vertex(1.0, 0.0))

    assert edge.is_boundary
    assert edge.cells == (cell,)


def test_edge_towards_picks_first_side_on_two_column_grid():
    grid = build_grid(2, 1)
    left = grid.cell_at(0, 0)
    right = grid.cell_at(1, 0)

    assert left.edge_towards(right) is left.get_edge(Direction.EAST)
    assert right.edge_towards(left) is right.get_edge(Direction.EAST)
    assert left.edge_towards(right) is not right.edge_towards(left)
