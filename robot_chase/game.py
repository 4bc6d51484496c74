"""Level sequencing and score bookkeeping.

The field knows nothing about levels or score. :class:`GameState` carries
them explicitly and :func:`play_turn` threads it through one turn: translate
the intent, move the player, advance the pursuers, then settle the outcome.

Turn flow:

* A level that already ended -> its terminal status again; nothing changes.
* ``Unrecognized`` -> ``SKIPPED``; the field is not touched.
* ``Quit`` -> ``QUIT``.
* ``Freeze`` -> pursuers stop stepping for the rest of the level; the turn is
  played as a frozen stay. Unless pursuers are already stacked on one cell or
  on wreckage, a frozen level can be neither won nor lost and only ``Quit``
  ends it.
* A rejected move -> ``REJECTED``; the caller asks for another intent.
* Caught -> ``LOST``; the tick's score delta is discarded.
* Safe and no pursuers left -> ``WON`` with ``level * level_bonus`` added.
"""

import logging
import random
from dataclasses import dataclass, replace
from enum import StrEnum, auto
from typing import Tuple

from robot_chase.actions import Freeze, Intent, Quit, Step, Unrecognized
from robot_chase.config import GameConfig
from robot_chase.levels.placement import initialize
from robot_chase.moves import target_for
from robot_chase.state import Field
from robot_chase.step import advance_pursuers
from robot_chase.systems.movement import move_player
from robot_chase.systems.terminal import is_level_cleared
from robot_chase.types import PlayerCaught

logger = logging.getLogger(__name__)


class GamePhase(StrEnum):
    PLAYING = auto()
    WON = auto()
    LOST = auto()
    QUIT = auto()


class TurnStatus(StrEnum):
    """Result of a single :func:`play_turn` call."""

    SKIPPED = auto()
    REJECTED = auto()
    CONTINUE = auto()
    WON = auto()
    LOST = auto()
    QUIT = auto()


PHASE_STATUS = {
    GamePhase.WON: TurnStatus.WON,
    GamePhase.LOST: TurnStatus.LOST,
    GamePhase.QUIT: TurnStatus.QUIT,
}


@dataclass(frozen=True)
class GameState:
    """Cross-level game progress.

    Attributes:
        level (int): Current level, starting at 1.
        score (int): Accumulated score.
        frozen (bool): Pursuers stopped stepping for the current level.
        phase (GamePhase): Where the current level stands.
    """

    level: int = 1
    score: int = 0
    frozen: bool = False
    phase: GamePhase = GamePhase.PLAYING


@dataclass(frozen=True)
class TurnResult:
    game: GameState
    field: Field
    status: TurnStatus


def pursuer_count_for_level(level: int, config: GameConfig) -> int:
    """Pursuers for ``level``: grows per level, capped by config and free cells."""
    count = min(level * config.pursuers_per_level, config.max_pursuers)
    return min(count, config.width * config.height - 1)


def start_level(
    game: GameState, config: GameConfig, rng: random.Random
) -> Tuple[GameState, Field]:
    """Build the field for ``game.level`` and reset per-level flags."""
    count = pursuer_count_for_level(game.level, config)
    field = initialize(config.origin, config.width, config.height, count, rng)
    logger.info("Level %d started with %d pursuers", game.level, count)
    return replace(game, frozen=False, phase=GamePhase.PLAYING), field


def next_level(game: GameState) -> GameState:
    """Advance to the following level after a win."""
    return replace(game, level=game.level + 1, frozen=False, phase=GamePhase.PLAYING)


def play_turn(
    game: GameState, field: Field, intent: Intent, config: GameConfig
) -> TurnResult:
    """Play one turn.

    Args:
        game (GameState): Progress before the turn.
        field (Field): Field before the turn.
        intent (Intent): Classified player input.
        config (GameConfig): Scoring parameters.

    Returns:
        TurnResult: Updated game state, field and what happened.
    """
    if game.phase != GamePhase.PLAYING:
        return TurnResult(game, field, PHASE_STATUS[game.phase])
    if isinstance(intent, Unrecognized):
        return TurnResult(game, field, TurnStatus.SKIPPED)
    if isinstance(intent, Quit):
        return TurnResult(replace(game, phase=GamePhase.QUIT), field, TurnStatus.QUIT)
    if isinstance(intent, Freeze):
        game = replace(game, frozen=True)
        intent = Step(0, 0)

    field, moved = move_player(field, target_for(field, intent))
    if not moved:
        return TurnResult(game, field, TurnStatus.REJECTED)

    field, outcome = advance_pursuers(field, freeze_pursuers=game.frozen)
    if isinstance(outcome, PlayerCaught):
        logger.info("Level %d lost with score %d", game.level, game.score)
        return TurnResult(replace(game, phase=GamePhase.LOST), field, TurnStatus.LOST)

    game = replace(game, score=game.score + outcome.score_delta)
    if is_level_cleared(field):
        game = replace(
            game,
            score=game.score + game.level * config.level_bonus,
            phase=GamePhase.WON,
        )
        logger.info("Level %d cleared, score %d", game.level, game.score)
        return TurnResult(game, field, TurnStatus.WON)
    return TurnResult(game, field, TurnStatus.CONTINUE)
