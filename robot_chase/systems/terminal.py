"""Terminal condition predicates.

The field never flags win or lose itself; the driver asks these predicates
after each advance.
"""

from robot_chase.state import Field


def is_player_caught(field: Field) -> bool:
    """Return True if the player shares a cell with a pursuer or wreckage."""
    return field.player in field.wreckage or field.player in field.pursuers


def is_level_cleared(field: Field) -> bool:
    """Return True once no pursuers remain."""
    return len(field.pursuers) == 0
