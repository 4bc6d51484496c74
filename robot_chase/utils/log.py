"""Logging setup for the command-line front-end.

The library modules only create loggers; handlers are installed here once at
start-up. Under curses, console output would corrupt the screen, so without a
log file records are discarded.
"""

import logging
from typing import Optional


def setup_logging(level: str = "WARNING", path: Optional[str] = None) -> None:
    """Configure the root logger.

    Args:
        level: Level name such as ``"DEBUG"``; unknown names fall back to
            ``WARNING``.
        path: File to append records to. ``None`` installs a null handler.
    """
    handler: logging.Handler
    if path is None:
        handler = logging.NullHandler()
    else:
        handler = logging.FileHandler(path, encoding="utf-8")
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.WARNING))
