"""Player movement system.

The move is allowed only if the destination is free or is the player's own
cell. A blocked move returns the *same* ``Field`` object unchanged so callers
can retry with another target.
"""

from dataclasses import replace
from typing import Tuple

from robot_chase.position import Position
from robot_chase.state import Field
from robot_chase.types import EntityKind
from robot_chase.utils.grid import check_bounds


def move_player(field: Field, target: Position) -> Tuple[Field, bool]:
    """Move the player to ``target`` if allowed.

    Args:
        field (Field): Current field.
        target (Position): Desired player cell. Must be in bounds.

    Returns:
        Tuple[Field, bool]: The updated field and ``True`` on success, or the
            unchanged field and ``False`` when a pursuer or wreckage occupies
            ``target``.

    Raises:
        IndexError: If ``target`` lies outside the field.
    """
    check_bounds(field, target)
    if field.kind_at(target) not in (EntityKind.EMPTY, EntityKind.PLAYER):
        return field, False
    if target == field.player:
        return field, True
    return replace(field, player=target), True
