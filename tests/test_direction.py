import pytest

from hexgrids import Direction


@pytest.mark.parametrize("direction", list(Direction))
def test_opposite_is_three_steps_away(direction):
    assert direction.opposite() == (direction + 3) % 6
    assert direction.opposite().opposite() is direction


def test_next_wraps_clockwise():
    assert Direction.NORTH_EAST.next() is Direction.EAST
    assert Direction.NORTH_WEST.next() is Direction.NORTH_EAST


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, Direction.NORTH_EAST),
        (4, Direction.WEST),
        (6, Direction.NORTH_EAST),
        (2 + 3, Direction.NORTH_WEST),
        (-1, Direction.NORTH_WEST),
    ],
)
def test_of_normalises_modulo_six(value, expected):
    assert Direction.of(value) is expected
