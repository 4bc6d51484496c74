import numpy as np
import pytest

from robot_chase.actions import GymAction
from robot_chase.game import GameState
from robot_chase.gym_env import ENTITY_CODES, RobotChaseEnv, occupancy_array
from robot_chase.types import EntityKind
from tests.test_utils import make_field


def test_occupancy_array_encoding() -> None:
    field = make_field(player=(1, 0), pursuers=[(0, 1)], wreckage=[(2, 1)], width=3, height=2)
    grid = occupancy_array(field)
    assert grid.dtype == np.int8
    assert grid.tolist() == [[0, 1, 0], [2, 0, 3]]


def test_reset_observation() -> None:
    env = RobotChaseEnv(width=10, height=8, seed=3)
    obs, info = env.reset(seed=3)
    grid = obs["grid"]
    assert grid.shape == (8, 10)
    assert int((grid == ENTITY_CODES[EntityKind.PLAYER]).sum()) == 1
    assert int((grid == ENTITY_CODES[EntityKind.PURSUER]).sum()) == 5
    assert obs["info"]["level"] == 1
    assert obs["info"]["score"] == 0
    assert obs["info"]["pursuers"] == 5
    assert info == {}
    assert env.observation_space["grid"].contains(grid)


def test_episode_terminates_when_standing_still() -> None:
    env = RobotChaseEnv(width=12, height=8, seed=5)
    terminated = truncated = False
    for _ in range(20):
        _, reward, terminated, truncated, _ = env.step(np.int64(GymAction.STAY))
        assert reward >= 0
        if terminated or truncated:
            break
    assert terminated or truncated


def test_invalid_action_raises() -> None:
    env = RobotChaseEnv(width=6, height=6, seed=1)
    with pytest.raises(ValueError):
        env.step(np.int64(len(GymAction)))


def test_render_ansi() -> None:
    env = RobotChaseEnv(width=6, height=4, seed=2)
    text = env.render()
    assert isinstance(text, str)
    assert "@" in text
    assert len(text.splitlines()) == 6


def test_no_reward_after_episode_ends() -> None:
    env = RobotChaseEnv(width=11, height=11, seed=4)
    env.game = GameState()
    env.field = make_field(player=(6, 5), pursuers=[(4, 4), (4, 6)])

    _, reward, terminated, truncated, _ = env.step(np.int64(GymAction.STAY))
    assert reward == 12.0
    assert terminated and not truncated

    for _ in range(3):
        _, reward, terminated, truncated, _ = env.step(np.int64(GymAction.STAY))
        assert reward == 0.0
        assert terminated and not truncated
