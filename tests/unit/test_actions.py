import random

import pytest

from robot_chase.actions import (
    Action,
    Freeze,
    GymAction,
    Jump,
    Quit,
    Step,
    Unrecognized,
    classify_action,
)
from robot_chase.position import Position


@pytest.mark.parametrize(
    "action, expected",
    [
        (Action.UP, Step(0, -1)),
        (Action.DOWN, Step(0, 1)),
        (Action.LEFT, Step(-1, 0)),
        (Action.RIGHT, Step(1, 0)),
        (Action.UP_LEFT, Step(-1, -1)),
        (Action.UP_RIGHT, Step(1, -1)),
        (Action.DOWN_LEFT, Step(-1, 1)),
        (Action.DOWN_RIGHT, Step(1, 1)),
        (Action.STAY, Step(0, 0)),
        (Action.FREEZE, Freeze()),
        (Action.QUIT, Quit()),
    ],
)
def test_classify_deterministic_actions(action: Action, expected: object) -> None:
    assert classify_action(action, 10, 10, random.Random(0)) == expected


def test_classify_accepts_string_values() -> None:
    assert classify_action("down_right", 5, 5, random.Random(0)) == Step(1, 1)


@pytest.mark.parametrize("symbol", ["x", "", 42, None, "UP"])
def test_unknown_symbols_are_unrecognized(symbol: object) -> None:
    assert classify_action(symbol, 5, 5, random.Random(0)) == Unrecognized(symbol)


def test_jump_targets_in_bounds_cell() -> None:
    rng = random.Random(1234)
    for _ in range(200):
        intent = classify_action(Action.JUMP, 7, 3, rng)
        assert isinstance(intent, Jump)
        assert 0 <= intent.target.x < 7
        assert 0 <= intent.target.y < 3


def test_jump_is_reproducible_with_seeded_rng() -> None:
    first = classify_action(Action.JUMP, 50, 50, random.Random(9))
    second = classify_action(Action.JUMP, 50, 50, random.Random(9))
    assert first == second


def test_jump_on_single_cell_field() -> None:
    assert classify_action(Action.JUMP, 1, 1, random.Random(0)) == Jump(Position(0, 0))


def test_only_jump_consumes_randomness() -> None:
    rng = random.Random(5)
    state = rng.getstate()
    for action in Action:
        if action != Action.JUMP:
            classify_action(action, 5, 5, rng)
    assert rng.getstate() == state


def test_gym_actions_name_movement_actions() -> None:
    assert [a.name for a in GymAction][:9] == [
        "UP",
        "DOWN",
        "LEFT",
        "RIGHT",
        "UP_LEFT",
        "UP_RIGHT",
        "DOWN_LEFT",
        "DOWN_RIGHT",
        "STAY",
    ]
    assert GymAction.UP == 0
    assert GymAction.JUMP == 9
