"""Position value type.

Immutable integer grid coordinates shared by every entity on a
:class:`robot_chase.state.Field`. Equality and hashing are by coordinate, so
positions can live in persistent sets and be compared directly.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        x: Column index (0 at left).
        y: Row index (0 at top).
    """

    x: int
    y: int
