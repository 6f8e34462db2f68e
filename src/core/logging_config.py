"""Process-wide logging setup.

Console is always on at the configured level; a rotating DEBUG file is
optional (``debug_log_enabled``).
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler

from core.config import AppSettings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_HANDLER_MARK = "_gamestatus_handler"


def configure_logging(settings: AppSettings | None = None) -> logging.Logger:
    """Attach console (and optional file) handlers to the root logger.

    Safe to call more than once: handlers installed by a previous call are
    replaced, not duplicated.
    """

    settings = settings or AppSettings()
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)  # master gate; handlers filter

    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_MARK, False):
            root.removeHandler(handler)
            handler.close()

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(_level_from_name(settings.log_level))
    console.setFormatter(logging.Formatter(LOG_FORMAT))
    setattr(console, _HANDLER_MARK, True)
    root.addHandler(console)

    if settings.debug_log_enabled:
        file_handler = RotatingFileHandler(
            settings.debug_log_path,
            maxBytes=5 * 1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        setattr(file_handler, _HANDLER_MARK, True)
        root.addHandler(file_handler)

    # discord.py and httpx are chatty at DEBUG
    logging.getLogger("discord").setLevel(logging.INFO)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    return root


def _level_from_name(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO
