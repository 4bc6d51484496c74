"""Action enumerations and intent classification.

Defines the abstract :class:`Action` symbols a front-end produces (the core
never sees raw key codes), the :data:`Intent` values they classify into, and
a stable integer :class:`GymAction` mapping for Gymnasium compatibility.

``DIRECTION_DELTAS`` is the canonical mapping of movement actions to unit
steps; checks like ``if action in DIRECTION_DELTAS`` are preferred over enum
name comparisons.
"""

import random
from dataclasses import dataclass
from enum import IntEnum, StrEnum, auto
from typing import Dict, Tuple, Union

from robot_chase.position import Position


class Action(StrEnum):
    """String enum of player actions.

    Members:
        UP, DOWN, LEFT, RIGHT: Cardinal steps.
        UP_LEFT, UP_RIGHT, DOWN_LEFT, DOWN_RIGHT: Diagonal steps.
        STAY: Let the pursuers move without moving the player.
        JUMP: Teleport to a random cell.
        FREEZE: Stop pursuer movement for the rest of the level.
        QUIT: End the game.
    """

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    UP_LEFT = auto()
    UP_RIGHT = auto()
    DOWN_LEFT = auto()
    DOWN_RIGHT = auto()
    STAY = auto()
    JUMP = auto()
    FREEZE = auto()
    QUIT = auto()


DIRECTION_DELTAS: Dict[Action, Tuple[int, int]] = {
    Action.UP: (0, -1),
    Action.DOWN: (0, 1),
    Action.LEFT: (-1, 0),
    Action.RIGHT: (1, 0),
    Action.UP_LEFT: (-1, -1),
    Action.UP_RIGHT: (1, -1),
    Action.DOWN_LEFT: (-1, 1),
    Action.DOWN_RIGHT: (1, 1),
    Action.STAY: (0, 0),
}


class GymAction(IntEnum):
    """Stable integer mapping for integration with Gymnasium ``Discrete`` spaces."""

    UP = 0  # start at 0 for explicitness
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    UP_LEFT = auto()
    UP_RIGHT = auto()
    DOWN_LEFT = auto()
    DOWN_RIGHT = auto()
    STAY = auto()
    JUMP = auto()


@dataclass(frozen=True)
class Step:
    """Move by ``(dx, dy)``, each in {-1, 0, 1}; ``(0, 0)`` stays put."""

    dx: int
    dy: int


@dataclass(frozen=True)
class Jump:
    """Move to ``target``, drawn uniformly from every in-bounds cell."""

    target: Position


@dataclass(frozen=True)
class Freeze:
    pass


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class Unrecognized:
    """Input that maps to no action; the turn is skipped without side effects."""

    symbol: object


Intent = Union[Step, Jump, Freeze, Quit, Unrecognized]


def classify_action(
    symbol: object, width: int, height: int, rng: random.Random
) -> Intent:
    """Classify an abstract input symbol.

    Args:
        symbol: An :class:`Action` or its string value. Anything else is
            unrecognized.
        width (int): Field width, bounds the random jump.
        height (int): Field height, bounds the random jump.
        rng (random.Random): Source of randomness for ``JUMP``.

    Returns:
        Intent: The classified intent. Only ``JUMP`` consumes randomness.
    """
    try:
        action = Action(symbol)
    except ValueError:
        return Unrecognized(symbol)

    if action in DIRECTION_DELTAS:
        return Step(*DIRECTION_DELTAS[action])
    if action == Action.JUMP:
        return Jump(Position(rng.randrange(width), rng.randrange(height)))
    if action == Action.FREEZE:
        return Freeze()
    return Quit()
