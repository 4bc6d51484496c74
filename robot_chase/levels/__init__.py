"""Level construction: building a fresh :class:`robot_chase.state.Field`."""

from .placement import initialize

__all__ = ["initialize"]
