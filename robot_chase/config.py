"""Game configuration.

A single frozen dataclass shared by the driver, the CLI and the Gymnasium
environment. Front-ends derive variants with ``dataclasses.replace``.
"""

from dataclasses import dataclass
from typing import Optional

from robot_chase.position import Position

DEFAULT_WIDTH = 60
DEFAULT_HEIGHT = 20
DEFAULT_HIGHSCORE_PATH = "robot_chase_scores.txt"


@dataclass(frozen=True)
class GameConfig:
    """Level sizing and scoring parameters.

    Attributes:
        width (int): Field width in cells.
        height (int): Field height in cells.
        origin (Position): Screen offset of the field's top-left cell.
        pursuers_per_level (int): Pursuers added per level.
        max_pursuers (int): Upper bound on pursuers in any level.
        level_bonus (int): Clearing level ``n`` awards ``n * level_bonus``.
        highscore_path (str): Text file holding recorded scores.
        seed (int | None): Seed for the game's random generator.
    """

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    origin: Position = Position(5, 5)
    pursuers_per_level: int = 5
    max_pursuers: int = 40
    level_bonus: int = 10
    highscore_path: str = DEFAULT_HIGHSCORE_PATH
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError(
                f"Field dimensions must be positive, got {self.width}x{self.height}"
            )
        for name in ("pursuers_per_level", "max_pursuers", "level_bonus"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")
