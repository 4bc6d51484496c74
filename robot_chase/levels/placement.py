"""Initial entity placement.

Builds the ``Field`` for a new level: the player at the geometric centre and
``pursuer_count`` pursuers on distinct random cells. Randomness comes from an
injected ``random.Random`` so a seeded generator reproduces the same level.
"""

import logging
import random
from typing import Optional

from pyrsistent import pset, pvector

from robot_chase.errors import PlacementOverflowError
from robot_chase.position import Position
from robot_chase.state import Field
from robot_chase.utils.grid import all_positions

logger = logging.getLogger(__name__)


def initialize(
    origin: Position,
    width: int,
    height: int,
    pursuer_count: int,
    rng: Optional[random.Random] = None,
) -> Field:
    """Create the field for a new level.

    Args:
        origin (Position): Screen offset forwarded to renderers.
        width (int): Field width in cells.
        height (int): Field height in cells.
        pursuer_count (int): Number of pursuers to place.
        rng (random.Random | None): Source of randomness. A fresh unseeded
            generator is used when omitted.

    Returns:
        Field: Player at ``(width // 2, height // 2)``, pursuers on distinct
            cells other than the player's, no wreckage.

    Raises:
        ValueError: If a dimension is not positive or ``pursuer_count`` is
            negative.
        PlacementOverflowError: If there are fewer free cells than pursuers.
    """
    if width < 1 or height < 1:
        raise ValueError(f"Field dimensions must be positive, got {width}x{height}")
    if pursuer_count < 0:
        raise ValueError(f"Pursuer count must be non-negative, got {pursuer_count}")
    if rng is None:
        rng = random.Random()

    player = Position(width // 2, height // 2)
    free_cells = [pos for pos in all_positions(width, height) if pos != player]
    if pursuer_count > len(free_cells):
        raise PlacementOverflowError(pursuer_count, len(free_cells))

    pursuers = rng.sample(free_cells, pursuer_count)
    logger.debug(
        "Placed %d pursuers on a %dx%d field, player at %s",
        pursuer_count,
        width,
        height,
        player,
    )
    return Field(
        width=width,
        height=height,
        player=player,
        pursuers=pvector(pursuers),
        wreckage=pset(),
        origin=origin,
    )
