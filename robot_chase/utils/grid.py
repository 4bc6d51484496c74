"""Grid math helpers.

Pure helpers shared by player movement, pursuit and placement. They operate
on plain dimensions or on a :class:`robot_chase.state.Field`.
"""

from typing import List

from robot_chase.position import Position
from robot_chase.state import Field


def is_in_bounds(field: Field, pos: Position) -> bool:
    """Return True if ``pos`` lies within the field rectangle."""
    return 0 <= pos.x < field.width and 0 <= pos.y < field.height


def clamp_position(field: Field, x: int, y: int) -> Position:
    """Clamp raw coordinates into the field rectangle."""
    return Position(
        min(max(x, 0), field.width - 1),
        min(max(y, 0), field.height - 1),
    )


def sign(value: int) -> int:
    """Return -1, 0 or 1 according to the sign of ``value``."""
    return (value > 0) - (value < 0)


def all_positions(width: int, height: int) -> List[Position]:
    """Every cell of a ``width`` x ``height`` grid in row-major order."""
    return [Position(x, y) for y in range(height) for x in range(width)]


def check_bounds(field: Field, pos: Position) -> None:
    """Raise ``IndexError`` when ``pos`` is outside the field."""
    if not is_in_bounds(field, pos):
        raise IndexError(
            f"Out of bounds: {(pos.x, pos.y)} for field {field.width}x{field.height}"
        )
