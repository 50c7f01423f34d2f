# File: link_finder/logger.py
"""Logging bootstrap for LinkFinder.

Library modules only ever do ``logging.getLogger(LOGGER_NAME)``; handlers are
attached by the ``link-finder`` command group (including ``serve``) through
:func:`init_logging`. Records go to stderr so that ``link-finder crawl`` can
print its JSON result on stdout.
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Final, Union

LOGGER_NAME: Final[str] = "LinkFinder"
DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(message)s"

logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())


def init_logging(
    level: Union[int, str] = "INFO",
    log_file: Union[str, Path, None] = None,
    log_format: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Attach a stderr handler (and a file handler for *log_file*) to the project logger.

    Calling it again replaces the handlers of the previous call.
    """
    formatter = logging.Formatter(log_format)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        handlers.append(logging.FileHandler(str(log_file), encoding="utf-8"))

    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(level)
    logger.propagate = False
    return logger


__all__ = ["logger", "init_logging", "LOGGER_NAME", "DEFAULT_FORMAT"]
