"""Core immutable ``Field`` dataclass.

This module defines the frozen :class:`Field` object that represents one level
of the chase at a single turn. The operations in :mod:`robot_chase.systems`
and :mod:`robot_chase.step` are pure functions that take a previous ``Field``
and return a *new* one; nothing is mutated in place. A ``Field`` handed to a
renderer is therefore always a consistent snapshot.

Design notes:

* Entity positions are the single source of truth. The player is one
  :class:`Position`, pursuers are an ordered ``PVector`` and wreckage is a
  ``PSet`` (membership only, grows monotonically).
* The per-cell occupancy grid is derived on demand from those collections
  instead of being cached, so it can never drift out of sync with them.
* Stamping precedence is player, then pursuers, then wreckage. After a tick
  in which the player is caught the cell shows what caught them.
"""

from dataclasses import dataclass
from typing import Any, Dict, List

from pyrsistent import pmap, pset, pvector
from pyrsistent.typing import PMap, PSet, PVector

from robot_chase.position import Position
from robot_chase.types import EntityKind, Occupancy


@dataclass(frozen=True)
class Field:
    """Immutable chase field.

    Attributes:
        width (int): Grid width in cells.
        height (int): Grid height in cells.
        player (Position): The player's cell.
        pursuers (PVector[Position]): Active pursuers, in placement order.
        wreckage (PSet[Position]): Cells holding wreckage.
        origin (Position): Screen offset used by renderers; not part of the
            simulation.
    """

    width: int
    height: int
    player: Position
    pursuers: PVector[Position] = pvector()
    wreckage: PSet[Position] = pset()
    origin: Position = Position(0, 0)

    def kind_at(self, pos: Position) -> EntityKind:
        """Return the entity kind shown at ``pos``."""
        if pos in self.wreckage:
            return EntityKind.WRECKAGE
        if pos in self.pursuers:
            return EntityKind.PURSUER
        if pos == self.player:
            return EntityKind.PLAYER
        return EntityKind.EMPTY

    @property
    def occupancy(self) -> Occupancy:
        """Row-major grid of :class:`EntityKind`, rebuilt from the positions.

        Positions outside the field are ignored.
        """
        grid: List[List[EntityKind]] = [
            [EntityKind.EMPTY] * self.width for _ in range(self.height)
        ]
        stamps = [(self.player, EntityKind.PLAYER)]
        stamps += [(pos, EntityKind.PURSUER) for pos in self.pursuers]
        stamps += [(pos, EntityKind.WRECKAGE) for pos in self.wreckage]
        for pos, kind in stamps:
            if 0 <= pos.x < self.width and 0 <= pos.y < self.height:
                grid[pos.y][pos.x] = kind
        return tuple(tuple(row) for row in grid)

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse serialization of the field for diagnostics.

        Empty collections are left out to keep the output short.

        Returns:
            PMap[str, Any]: Persistent map of field name to value.
        """
        description: Dict[str, Any] = {}
        for name in self.__dataclass_fields__:
            value = getattr(self, name)
            is_collection = isinstance(value, (type(pvector()), type(pset())))
            if is_collection and len(value) == 0:
                continue
            description[name] = value
        return pmap(description)
