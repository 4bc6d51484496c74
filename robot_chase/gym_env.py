"""Gymnasium environment wrapper for the chase.

Provides a structured observation that pairs the occupancy grid (encoded as
small integers) with an info dictionary (level, score, entity counts). Reward
is the score earned during the step. ``terminated`` is ``True`` when the level
is cleared, ``truncated`` when the player is caught.

Observation schema:

``{"grid": np.ndarray(H, W) of ENTITY_CODES, "info": {"level": int, "score": int, ...}}``

Usage:

``env = RobotChaseEnv(width=20, height=10, level=2, seed=7)``

A rejected move (target held by a pursuer or wreckage) leaves the field
untouched and yields zero reward, mirroring the terminal front-end which asks
for another key instead of advancing the pursuers.
"""

import random
from typing import Any, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np

from robot_chase.actions import DIRECTION_DELTAS, Action, GymAction, Jump, Step
from robot_chase.config import GameConfig
from robot_chase.game import (
    GamePhase,
    GameState,
    play_turn,
    start_level,
)
from robot_chase.position import Position
from robot_chase.renderer.text import TextRenderer
from robot_chase.state import Field
from robot_chase.types import EntityKind

ObsType = Dict[str, Any]

ENTITY_CODES: Dict[EntityKind, int] = {
    EntityKind.EMPTY: 0,
    EntityKind.PLAYER: 1,
    EntityKind.PURSUER: 2,
    EntityKind.WRECKAGE: 3,
}


def occupancy_array(field: Field) -> np.ndarray:
    """Encode the occupancy view as an ``int8`` array of shape (height, width)."""
    return np.array(
        [[ENTITY_CODES[kind] for kind in row] for row in field.occupancy],
        dtype=np.int8,
    )


def env_status_observation_dict(game: GameState, field: Field) -> Dict[str, Any]:
    """Status portion of observation (level, score, phase, entity counts)."""
    return {
        "level": int(game.level),
        "score": int(game.score),
        "phase": game.phase.value,
        "pursuers": len(field.pursuers),
        "wreckage": len(field.wreckage),
    }


class RobotChaseEnv(gym.Env[ObsType, np.integer]):
    """Gymnasium ``Env`` implementation for a single chase level.

    The action space is ``Discrete(len(GymAction))``; see
    :mod:`robot_chase.actions`.
    """

    metadata = {"render_modes": ["human", "ansi"]}

    def __init__(
        self,
        render_mode: str = "ansi",
        width: int = 20,
        height: int = 10,
        level: int = 1,
        seed: Optional[int] = None,
        config: Optional[GameConfig] = None,
    ):
        """Create a new environment instance.

        Arguments:
            render_mode: "ansi" to return text frames, "human" to print them.
            width: Field width, ignored when ``config`` is given.
            height: Field height, ignored when ``config`` is given.
            level: Level to play; sets the pursuer count and win bonus.
            seed: Seed for placement and random jumps.
            config: Full game configuration.
        """
        from gymnasium import spaces

        self.config = config or GameConfig(width=width, height=height, seed=seed)
        self.level = level
        self.render_mode = render_mode
        self._rng = random.Random(self.config.seed)
        self._renderer = TextRenderer()

        self.game: Optional[GameState] = None
        self.field: Optional[Field] = None

        def int_box(low: int, high: int) -> spaces.Box:
            return spaces.Box(
                low=np.array(low, dtype=np.int64),
                high=np.array(high, dtype=np.int64),
                shape=(),
                dtype=np.int64,
            )

        self.observation_space = spaces.Dict(
            {
                "grid": spaces.Box(
                    low=0,
                    high=max(ENTITY_CODES.values()),
                    shape=(self.config.height, self.config.width),
                    dtype=np.int8,
                ),
                "info": spaces.Dict(
                    {
                        "level": int_box(1, 1_000_000),
                        "score": int_box(0, 1_000_000_000),
                        "phase": spaces.Text(max_length=32),
                        "pursuers": int_box(0, 1_000_000),
                        "wreckage": int_box(0, 1_000_000),
                    }
                ),
            }
        )
        self.action_space = spaces.Discrete(len(GymAction))

        self.reset()

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, object]] = None
    ) -> Tuple[ObsType, Dict[str, object]]:
        """Start a new episode.

        Arguments:
            seed: Reseeds placement and jumps when given.
            options: Gymnasium options (unused).

        Returns:
            Observation dict and empty info dict per Gymnasium API.
        """
        super().reset(seed=seed)
        if seed is not None:
            self._rng = random.Random(seed)
        self.game, self.field = start_level(
            GameState(level=self.level), self.config, self._rng
        )
        return self._get_obs(), self._get_info()

    def step(
        self, action: np.integer
    ) -> Tuple[ObsType, float, bool, bool, Dict[str, object]]:
        """Apply one environment step.

        Arguments:
            action: Integer index into the ``GymAction`` enum.

        Returns:
            (observation, reward, terminated, truncated, info)
        """
        assert self.game is not None and self.field is not None

        if not 0 <= int(action) < len(GymAction):
            raise ValueError(f"Invalid action: {action}")
        gym_action = GymAction(int(action))

        if gym_action == GymAction.JUMP:
            intent = Jump(
                Position(
                    self._rng.randrange(self.config.width),
                    self._rng.randrange(self.config.height),
                )
            )
        else:
            intent = Step(*DIRECTION_DELTAS[Action[gym_action.name]])

        prev_score = self.game.score
        result = play_turn(self.game, self.field, intent, self.config)
        self.game, self.field = result.game, result.field
        reward = float(self.game.score - prev_score)

        terminated = self.game.phase == GamePhase.WON
        truncated = self.game.phase == GamePhase.LOST
        return self._get_obs(), reward, terminated, truncated, self._get_info()

    def render(self, mode: Optional[str] = None) -> Optional[str]:  # type: ignore
        """Render the current field.

        Args:
            mode: "human" to print, "ansi" to return text. Defaults to the
                instance's configured render mode.
        """
        render_mode = mode or self.render_mode
        assert self.field is not None
        text = self._renderer.render(self.field)
        if render_mode == "human":
            print(text)
            return None
        elif render_mode == "ansi":
            return text
        else:
            raise NotImplementedError(f"Render mode '{render_mode}' not supported.")

    def _get_obs(self) -> ObsType:
        assert self.game is not None and self.field is not None
        return {
            "grid": occupancy_array(self.field),
            "info": env_status_observation_dict(self.game, self.field),
        }

    def _get_info(self) -> Dict[str, object]:
        """Return the step info (empty placeholder for compatibility)."""
        return {}
