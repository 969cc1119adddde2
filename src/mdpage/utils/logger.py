"""Minimal logging utilities for mdpage.

Example:
    >>> from mdpage.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Reading content.md")
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(message)s"
LOG_DATE_FORMAT = "%Y/%m/%d %H:%M:%S"


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "mdpage." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("pipeline")
        >>> logger.name
        'mdpage.pipeline'
    """
    if not (name == "mdpage" or name.startswith("mdpage.")):
        name = f"mdpage.{name}"
    return logging.getLogger(name)


_cli_handler: logging.Handler | None = None


def configure_logging(level: int = logging.WARNING) -> logging.Handler:
    """Attach a stderr handler to the "mdpage" logger.

    Replaces the handler installed by an earlier call, so calling this
    twice does not duplicate output lines.

    Returns:
        The installed handler
    """
    global _cli_handler

    root = logging.getLogger("mdpage")
    if _cli_handler is not None:
        root.removeHandler(_cli_handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    root.addHandler(handler)
    root.setLevel(level)
    _cli_handler = handler
    return handler
