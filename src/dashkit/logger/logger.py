"""The ``dashkit`` logger.

Library modules log through :data:`logger` at DEBUG level only. The level
and format come from :mod:`dashkit.core.config`, so output stays quiet
unless ``DASHKIT_LOG_LEVEL=DEBUG`` is exported.
"""

import logging
import sys

from dashkit.core.config import settings

__all__ = ["logger", "setup_logger"]

_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(
    name: str = "dashkit",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """Return the named logger, attaching a stdout handler on first use.

    A logger that already has handlers is returned as is, so repeated calls
    never stack handlers or override an earlier level.

    Args:
        name: Logger name. Child names such as ``dashkit.arrays`` share the tree.
        level: Level name. Defaults to ``settings.LOG_LEVEL``.
        format_string: ``%``-style format. Defaults to ``settings.LOG_FORMAT``.

    Returns:
        The configured logger.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter(
            fmt=format_string or settings.LOG_FORMAT, datefmt=_DATE_FORMAT
        )
    )
    logger.addHandler(handler)
    logger.setLevel((level or settings.LOG_LEVEL).upper())
    logger.propagate = False
    return logger


logger = setup_logger()
