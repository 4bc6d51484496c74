"""Collision / merge systems.

Two merges run after pursuers step, always in this order:

1. ``pursuer_merge_system``: any cell holding two or more pursuers turns into
   wreckage and every pursuer there is destroyed.
2. ``wreckage_merge_system``: any remaining pursuer standing on wreckage (old
   or freshly created) is destroyed.

Both are two-phase: cells are classified first, then the pursuer vector is
filtered in one pass. Each destroyed pursuer is worth one point; the systems
return the count alongside the new field.
"""

from collections import Counter
from dataclasses import replace
from typing import Tuple

from pyrsistent import pvector

from robot_chase.state import Field


def pursuer_merge_system(field: Field) -> Tuple[Field, int]:
    """Collapse stacked pursuers into wreckage.

    Returns:
        Tuple[Field, int]: Updated field and the number of pursuers destroyed.
    """
    counts = Counter(field.pursuers)
    crowded = {pos for pos, count in counts.items() if count > 1}
    if not crowded:
        return field, 0

    survivors = pvector(pos for pos in field.pursuers if pos not in crowded)
    destroyed = len(field.pursuers) - len(survivors)
    return (
        replace(field, pursuers=survivors, wreckage=field.wreckage.update(crowded)),
        destroyed,
    )


def wreckage_merge_system(field: Field) -> Tuple[Field, int]:
    """Destroy pursuers that ran into wreckage.

    Wreckage itself is left untouched.

    Returns:
        Tuple[Field, int]: Updated field and the number of pursuers destroyed.
    """
    survivors = pvector(pos for pos in field.pursuers if pos not in field.wreckage)
    destroyed = len(field.pursuers) - len(survivors)
    if destroyed == 0:
        return field, 0
    return replace(field, pursuers=survivors), destroyed
