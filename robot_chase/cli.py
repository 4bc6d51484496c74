"""Curses front-end.

Sequences levels, reads one key per turn, draws the field and the status
line, and records the final score in the high-score store. All game rules
live in :mod:`robot_chase.game`; this module only does terminal I/O.

Keys (laid out around ``k`` on a QWERTY keyboard)::

    u i o      up-left  up    up-right
    j k l      left     jump  right
    m , .      down-left down down-right

``space`` stays put, ``f`` freezes the pursuers, ``q`` quits.

Freezing lasts for the rest of the level. Frozen pursuers no longer close in,
so unless some already share a cell the level cannot end and ``q`` is the
only way out.
"""

import argparse
import curses
import logging
import random
from dataclasses import replace
from typing import Dict, List, Optional, Sequence

from robot_chase.actions import Action, classify_action
from robot_chase.config import DEFAULT_HIGHSCORE_PATH, GameConfig
from robot_chase.errors import HighScoreWriteError
from robot_chase.game import GameState, TurnStatus, next_level, play_turn, start_level
from robot_chase.highscore import HighScoreStore
from robot_chase.renderer.text import TextRenderer
from robot_chase.state import Field
from robot_chase.utils.log import setup_logging

logger = logging.getLogger(__name__)

KEY_BINDINGS: Dict[str, Action] = {
    "i": Action.UP,
    ",": Action.DOWN,
    "j": Action.LEFT,
    "l": Action.RIGHT,
    "u": Action.UP_LEFT,
    "o": Action.UP_RIGHT,
    "m": Action.DOWN_LEFT,
    ".": Action.DOWN_RIGHT,
    " ": Action.STAY,
    "k": Action.JUMP,
    "f": Action.FREEZE,
    "q": Action.QUIT,
}

TITLE_ROW = 0
RESULT_ROW = 1
STATUS_ROW = 3
MARGIN_X = 8
MARGIN_Y = 6


def key_to_symbol(key: int) -> object:
    """Map a curses key code to an :class:`Action`, or pass it through."""
    if 0 <= key < 256:
        return KEY_BINDINGS.get(chr(key), key)
    return key


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="robot-chase",
        description="Evade the robots on a terminal grid.",
        epilog=(
            "Keys: u i o / j k l / m , . move (k jumps), space stays, "
            "q quits. f freezes the robots for the rest of the level; "
            "a frozen level can only be left with q."
        ),
    )
    parser.add_argument("--width", type=int, help="Field width (default: fit terminal)")
    parser.add_argument("--height", type=int, help="Field height (default: fit terminal)")
    parser.add_argument("--seed", type=int, help="Random seed")
    parser.add_argument(
        "--scores", default=DEFAULT_HIGHSCORE_PATH, help="High-score file"
    )
    parser.add_argument("--log-file", help="Write debug logs to this file")
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    return parser


def config_for_screen(
    args: argparse.Namespace, screen_width: int, screen_height: int
) -> GameConfig:
    """Build the game config, sizing the field to the terminal unless overridden."""
    config = GameConfig(highscore_path=args.scores, seed=args.seed)
    width = args.width or max(screen_width - MARGIN_X, 1)
    height = args.height or max(screen_height - MARGIN_Y, 1)
    return replace(config, width=width, height=height)


class Screen:
    """Thin drawing helper over a curses window."""

    def __init__(self, window: "curses.window", renderer: TextRenderer) -> None:
        self.window = window
        self.renderer = renderer

    def text(self, row: int, text: str) -> None:
        try:
            self.window.move(row, 0)
            self.window.clrtoeol()
            self.window.addstr(row, 0, text)
        except curses.error:
            logger.debug("Text row %d does not fit the terminal", row)

    def field(self, field: Field) -> None:
        lines: List[str] = self.renderer.render_lines(field)
        top = field.origin.y - 1
        left = field.origin.x - 1
        for offset, line in enumerate(lines):
            try:
                self.window.addstr(top + offset, left, line)
            except curses.error:
                logger.debug("Field row %d does not fit the terminal", offset)

    def status(self, game: GameState) -> None:
        self.text(STATUS_ROW, f"level: {game.level}, score: {game.score}")


def run(window: "curses.window", args: argparse.Namespace) -> int:
    """Play until the player quits or loses; return the final score."""
    curses.noecho()
    window.keypad(True)
    screen_height, screen_width = window.getmaxyx()
    config = config_for_screen(args, screen_width, screen_height)
    rng = random.Random(config.seed)
    screen = Screen(window, TextRenderer())

    game = GameState()
    while True:
        game, field = start_level(game, config, rng)
        window.clear()
        screen.text(TITLE_ROW, "***Robots***")
        screen.field(field)
        screen.text(RESULT_ROW, "")

        status = TurnStatus.CONTINUE
        while status in (TurnStatus.CONTINUE, TurnStatus.SKIPPED, TurnStatus.REJECTED):
            screen.status(game)
            window.refresh()
            symbol = key_to_symbol(window.getch())
            intent = classify_action(symbol, config.width, config.height, rng)
            result = play_turn(game, field, intent, config)
            game, field, status = result.game, result.field, result.status
            if status not in (TurnStatus.SKIPPED, TurnStatus.REJECTED):
                screen.field(field)

        screen.status(game)
        if status == TurnStatus.WON:
            screen.text(RESULT_ROW, "you win")
            window.refresh()
            window.getch()
            game = next_level(game)
            continue
        if status == TurnStatus.LOST:
            screen.text(RESULT_ROW, "you lose")
        break

    finish(screen, window, game, HighScoreStore(config.highscore_path))
    return game.score


def finish(
    screen: Screen, window: "curses.window", game: GameState, store: HighScoreStore
) -> None:
    """Record the score and wait for ``q``."""
    try:
        if store.record(game.score):
            message = f"new high score: {game.score}"
        else:
            message = f"high score: {store.highest()}"
    except HighScoreWriteError as exc:
        logger.error("%s", exc)
        message = f"could not save score: {exc}"
    screen.text(STATUS_ROW + 1, f"{message}  (press q)")
    window.refresh()
    while window.getch() != ord("q"):
        pass


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, args.log_file)
    score = curses.wrapper(run, args)
    print(f"score: {score}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
