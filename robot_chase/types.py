"""Common type aliases, enumerations and advance outcomes.

``Outcome`` is the value returned by :func:`robot_chase.step.advance_pursuers`;
the driver inspects it to decide between continuing, winning and losing.
"""

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Tuple, Union


class EntityKind(StrEnum):
    """What occupies a single cell of the occupancy view."""

    PLAYER = auto()
    PURSUER = auto()
    WRECKAGE = auto()
    EMPTY = auto()


Occupancy = Tuple[Tuple[EntityKind, ...], ...]
"""Row-major occupancy grid: ``occupancy[y][x]``."""


@dataclass(frozen=True)
class PlayerSafe:
    """The player survived the tick.

    Attributes:
        score_delta: One point per pursuer destroyed during the tick.
    """

    score_delta: int = 0


@dataclass(frozen=True)
class PlayerCaught:
    """The player shares a cell with a pursuer or wreckage."""

    pass


Outcome = Union[PlayerSafe, PlayerCaught]
