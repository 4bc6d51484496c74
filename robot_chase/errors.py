"""Exceptions raised by the simulation and its persistence collaborator."""


class PlacementOverflowError(ValueError):
    """More pursuers were requested than there are free cells."""

    def __init__(self, requested: int, available: int) -> None:
        super().__init__(
            f"Cannot place {requested} pursuers: only {available} free cells"
        )
        self.requested = requested
        self.available = available


class HighScoreWriteError(OSError):
    """Saving a new high score to the store failed."""
