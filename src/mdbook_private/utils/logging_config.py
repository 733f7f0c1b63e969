"""Logging setup shared by every mdbook-private module.

mdbook reads the processed book from the preprocessor's stdout, so log
records are written to stderr only.
"""

from __future__ import annotations

import logging
import sys

from mdbook_private.config import MDBOOK_PRIVATE_LOG_LEVEL

_PACKAGE_LOGGER = "mdbook_private"
_LOG_FORMAT = "%(asctime)s [%(levelname)s] (%(name)s): %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_handler: logging.StreamHandler | None = None


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Attach a stderr handler to the package logger and set its level.

    Safe to call more than once. The package logger keeps a single handler,
    replaced only when ``sys.stderr`` itself has been swapped out.
    """
    global _handler

    logger = logging.getLogger(_PACKAGE_LOGGER)
    if _handler is None or _handler.stream is not sys.stderr:
        if _handler is not None:
            logger.removeHandler(_handler)
        _handler = logging.StreamHandler(sys.stderr)
        _handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT))
        logger.addHandler(_handler)

    resolved = MDBOOK_PRIVATE_LOG_LEVEL if level is None else level
    if isinstance(resolved, str):
        resolved = logging.getLevelName(resolved.upper())
        if not isinstance(resolved, int):
            resolved = logging.INFO
    logger.setLevel(resolved)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a module logger beneath the package logger."""
    return logging.getLogger(name)
