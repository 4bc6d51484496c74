"""Straight-line pursuit system.

Every pursuer takes one king-move step toward the player. All steps are
computed from pre-step positions against the same player position; collisions
between pursuers are left for :mod:`robot_chase.systems.collision`.

Steps are clamped into the field. From an in-bounds cell toward an in-bounds
player the clamp never triggers; it only keeps hand-built fields with off-grid
pursuers from producing an invalid post-turn state.
"""

from dataclasses import replace

from pyrsistent import pvector

from robot_chase.position import Position
from robot_chase.state import Field
from robot_chase.utils.grid import clamp_position, sign


def step_toward(field: Field, pursuer: Position, target: Position) -> Position:
    """Return the cell one step from ``pursuer`` toward ``target``."""
    dx = sign(target.x - pursuer.x)
    dy = sign(target.y - pursuer.y)
    return clamp_position(field, pursuer.x + dx, pursuer.y + dy)


def pursuit_system(field: Field) -> Field:
    """Advance every pursuer one step toward the player.

    The resulting pursuer vector may contain duplicates until the collision
    systems run.
    """
    return replace(
        field,
        pursuers=pvector(step_toward(field, pos, field.player) for pos in field.pursuers),
    )
