from typing import Iterable, Tuple

from pyrsistent import pset, pvector

from robot_chase.position import Position
from robot_chase.state import Field

Coord = Tuple[int, int]


def make_field(
    player: Coord = (5, 5),
    pursuers: Iterable[Coord] = (),
    wreckage: Iterable[Coord] = (),
    width: int = 11,
    height: int = 11,
) -> Field:
    """Hand-built field for system and integration tests."""
    return Field(
        width=width,
        height=height,
        player=Position(*player),
        pursuers=pvector(Position(*p) for p in pursuers),
        wreckage=pset(Position(*w) for w in wreckage),
    )


def coords(positions: Iterable[Position]) -> list[Coord]:
    return [(p.x, p.y) for p in positions]
