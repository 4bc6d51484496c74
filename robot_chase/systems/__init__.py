"""Per-concern transformation functions over a :class:`robot_chase.state.Field`.

Each system is a pure function; :mod:`robot_chase.step` wires them together
in the order a pursuer advance requires.
"""
