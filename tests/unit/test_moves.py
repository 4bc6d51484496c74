from typing import Tuple

import pytest

from robot_chase.actions import Freeze, Jump, Quit, Step, Unrecognized
from robot_chase.moves import step_target, target_for
from robot_chase.position import Position
from tests.test_utils import make_field


@pytest.mark.parametrize(
    "start, delta, expected",
    [
        ((2, 2), (0, -1), (2, 1)),
        ((2, 2), (1, 1), (3, 3)),
        ((2, 2), (0, 0), (2, 2)),
        # edges: clamped per axis
        ((0, 0), (-1, -1), (0, 0)),
        ((0, 3), (-1, -1), (0, 2)),
        ((4, 4), (1, 0), (4, 4)),
        ((4, 2), (1, 1), (4, 3)),
        ((2, 4), (-1, 1), (1, 4)),
    ],
)
def test_step_target_clamps_to_field(
    start: Tuple[int, int], delta: Tuple[int, int], expected: Tuple[int, int]
) -> None:
    field = make_field(player=start, width=5, height=5)
    assert step_target(field, *delta) == Position(*expected)
    assert target_for(field, Step(*delta)) == Position(*expected)


def test_jump_target_is_used_as_is() -> None:
    field = make_field(player=(2, 2), width=5, height=5)
    assert target_for(field, Jump(Position(4, 0))) == Position(4, 0)


@pytest.mark.parametrize("intent", [Freeze(), Quit(), Unrecognized("z")])
def test_non_movement_intents_have_no_target(intent: object) -> None:
    field = make_field()
    with pytest.raises(ValueError):
        target_for(field, intent)  # type: ignore[arg-type]
