from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union
import os
import sys

# timestamp | level | logger | message
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

LOG_MAX_BYTES = 1_000_000
LOG_BACKUP_COUNT = 3

_CONSOLE_HANDLER = "cbm-console"
_FILE_HANDLER_PREFIX = "cbm-file:"


class StderrHandler(logging.StreamHandler):
    """Writes to whatever sys.stderr is at emit time (survives stream swaps)."""

    def __init__(self, level: int = logging.NOTSET) -> None:
        logging.Handler.__init__(self, level)

    @property
    def stream(self):
        return sys.stderr


def resolve_level(level: Optional[Union[int, str]] = None) -> int:
    """
    Map an int or a level name ('debug', 'WARN', ...) to a logging level.
    None falls back to LOG_LEVEL; anything unrecognised means INFO.
    """
    if level is None:
        level = os.getenv("LOG_LEVEL")
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        name = level.strip().upper()
        if name == "WARN":
            name = "WARNING"
        value = logging.getLevelName(name)
        if isinstance(value, int):
            return value
    return logging.INFO


def get_logger(
    name: Optional[str] = None,
    *,
    level: Optional[Union[int, str]] = None,
    log_file: Optional[Union[str, Path]] = None,
    console: bool = True,
) -> logging.Logger:
    """
    Configure and return a non-propagating logger.

    Handlers are tagged by name, so calling this again only adds targets that
    are missing (console, or a new log file). The level is re-applied to the
    logger and every handler it owns.
    """
    logger = logging.getLogger(name)
    logger.setLevel(resolve_level(level))
    logger.propagate = False

    owned = {h.get_name() for h in logger.handlers}
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    if console and _CONSOLE_HANDLER not in owned:
        sh = StderrHandler()
        sh.set_name(_CONSOLE_HANDLER)
        sh.setFormatter(formatter)
        logger.addHandler(sh)

    if log_file is not None:
        file_tag = _FILE_HANDLER_PREFIX + os.path.abspath(log_file)
        if file_tag not in owned:
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)
            fh = RotatingFileHandler(
                filename=str(log_file),
                maxBytes=LOG_MAX_BYTES,
                backupCount=LOG_BACKUP_COUNT,
                encoding="utf-8",
                delay=True,
            )
            fh.set_name(file_tag)
            fh.setFormatter(formatter)
            logger.addHandler(fh)

    for h in logger.handlers:
        h.setLevel(logger.level)
    return logger
