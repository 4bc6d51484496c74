"""Intent to target-cell translation.

``move_player`` performs no clamping and rejects out-of-bounds targets, so
front-ends turn a classified intent into a concrete in-bounds cell here. A
step into an edge is clamped per axis: walking diagonally into a wall slides
along it, walking straight into it stays put.
"""

from robot_chase.actions import Intent, Jump, Step
from robot_chase.position import Position
from robot_chase.state import Field
from robot_chase.utils.grid import clamp_position


def step_target(field: Field, dx: int, dy: int) -> Position:
    """Player cell moved by ``(dx, dy)`` and clamped to the field."""
    return clamp_position(field, field.player.x + dx, field.player.y + dy)


def target_for(field: Field, intent: Intent) -> Position:
    """Return the player's target cell for a movement intent.

    Raises:
        ValueError: If ``intent`` does not describe a movement.
    """
    if isinstance(intent, Step):
        return step_target(field, intent.dx, intent.dy)
    if isinstance(intent, Jump):
        return intent.target
    raise ValueError(f"Intent {intent!r} does not move the player")
