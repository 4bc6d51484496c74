import pytest

from robot_chase.position import Position
from robot_chase.utils.grid import (
    all_positions,
    check_bounds,
    clamp_position,
    is_in_bounds,
    sign,
)
from tests.test_utils import make_field


@pytest.mark.parametrize("value, expected", [(-7, -1), (-1, -1), (0, 0), (1, 1), (9, 1)])
def test_sign(value: int, expected: int) -> None:
    assert sign(value) == expected


def test_bounds() -> None:
    field = make_field(width=3, height=2)
    assert is_in_bounds(field, Position(0, 0))
    assert is_in_bounds(field, Position(2, 1))
    assert not is_in_bounds(field, Position(3, 0))
    assert not is_in_bounds(field, Position(0, 2))
    assert not is_in_bounds(field, Position(-1, 0))


def test_check_bounds_raises_index_error() -> None:
    field = make_field(width=3, height=2)
    check_bounds(field, Position(1, 1))
    with pytest.raises(IndexError):
        check_bounds(field, Position(0, -1))


def test_clamp_position() -> None:
    field = make_field(width=3, height=2)
    assert clamp_position(field, -4, 5) == Position(0, 1)
    assert clamp_position(field, 1, 0) == Position(1, 0)


def test_all_positions_row_major() -> None:
    assert all_positions(2, 2) == [
        Position(0, 0),
        Position(1, 0),
        Position(0, 1),
        Position(1, 1),
    ]
