"""Pursuer advance orchestration.

This module wires the systems together to implement a single *tick* of the
pursuers. :func:`advance_pursuers` is pure: it returns a new
:class:`robot_chase.state.Field` plus an :data:`robot_chase.types.Outcome`.

Ordering (must not change, the observable behavior depends on it):

1. ``pursuit_system`` steps every pursuer toward the player (skipped in
   freeze mode).
2. ``pursuer_merge_system`` turns stacked pursuers into wreckage.
3. ``wreckage_merge_system`` destroys pursuers on wreckage.
4. ``is_player_caught`` decides the outcome.

The occupancy view is derived from the returned field, so no separate rebuild
step is needed.
"""

import logging
from typing import Tuple

from robot_chase.state import Field
from robot_chase.systems.collision import pursuer_merge_system, wreckage_merge_system
from robot_chase.systems.pursuit import pursuit_system
from robot_chase.systems.terminal import is_player_caught
from robot_chase.types import Outcome, PlayerCaught, PlayerSafe

logger = logging.getLogger(__name__)


def advance_pursuers(
    field: Field, freeze_pursuers: bool = False
) -> Tuple[Field, Outcome]:
    """Advance the simulation by one pursuer tick.

    Args:
        field (Field): Field after the player's move.
        freeze_pursuers (bool): If True pursuers do not step, but merges and
            the safety check still run.

    Returns:
        Tuple[Field, Outcome]: Post-tick field and either
            ``PlayerSafe(score_delta)`` or ``PlayerCaught()``. The field is
            returned in both cases so the final position can be displayed.
    """
    if not freeze_pursuers:
        field = pursuit_system(field)

    field, merged = pursuer_merge_system(field)
    field, wrecked = wreckage_merge_system(field)
    score_delta = merged + wrecked

    if is_player_caught(field):
        logger.debug("Player caught at %s", field.player)
        return field, PlayerCaught()

    if score_delta:
        logger.debug(
            "%d pursuers destroyed (%d merged, %d on wreckage), %d remain",
            score_delta,
            merged,
            wrecked,
            len(field.pursuers),
        )
    return field, PlayerSafe(score_delta)
