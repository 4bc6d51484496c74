"""High-score persistence.

The store is a plain text file with one non-negative integer per line. A
missing or unreadable file reads as "no scores"; a failed write when saving a
new high score raises :class:`robot_chase.errors.HighScoreWriteError` so the
front-end can tell the player.
"""

import logging
import os
from typing import List

from robot_chase.errors import HighScoreWriteError

logger = logging.getLogger(__name__)


class HighScoreStore:
    """Append-only score list backed by a text file."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = os.fspath(path)

    def read_scores(self) -> List[int]:
        """Return every valid score in file order.

        Blank lines are skipped; malformed or negative lines are skipped with a
        warning.
        """
        try:
            with open(self.path, encoding="utf-8") as f:
                lines = f.read().splitlines()
        except FileNotFoundError:
            return []
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Could not read high scores from %s: %s", self.path, exc)
            return []

        scores: List[int] = []
        for lineno, line in enumerate(lines, start=1):
            text = line.strip()
            if not text:
                continue
            try:
                score = int(text)
            except ValueError:
                logger.warning("Ignoring malformed score on line %d: %r", lineno, text)
                continue
            if score < 0:
                logger.warning("Ignoring negative score on line %d: %d", lineno, score)
                continue
            scores.append(score)
        return scores

    def highest(self) -> int:
        """Best recorded score, 0 when nothing is recorded."""
        return max(self.read_scores(), default=0)

    def record(self, score: int) -> bool:
        """Append ``score`` if it beats the best recorded score.

        Returns:
            bool: True if ``score`` is a new high score and was saved.

        Raises:
            ValueError: If ``score`` is negative.
            HighScoreWriteError: If the store cannot be written.
        """
        if score < 0:
            raise ValueError(f"Score must be non-negative, got {score}")
        if score <= self.highest():
            return False
        try:
            prefix = "\n" if self._missing_trailing_newline() else ""
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(f"{prefix}{score}\n")
        except OSError as exc:
            raise HighScoreWriteError(
                f"Could not save high score to {self.path}: {exc}"
            ) from exc
        logger.info("New high score %d saved to %s", score, self.path)
        return True

    def _missing_trailing_newline(self) -> bool:
        if not os.path.exists(self.path) or os.path.getsize(self.path) == 0:
            return False
        with open(self.path, "rb") as f:
            f.seek(-1, os.SEEK_END)
            return f.read(1) != b"\n"
