"""Command-line entry point.

Takes no arguments: builds index.html from content.md with
templates/index.html.tmpl in the current directory. On failure a single
line naming the failing step is logged to stderr and the exit status is 1.
"""

from __future__ import annotations

import logging

from mdpage.errors import MdpageError
from mdpage.pipeline import build_page
from mdpage.utils.logger import configure_logging, get_logger

logger = get_logger(__name__)


def main() -> int:
    configure_logging(logging.WARNING)
    try:
        build_page()
    except MdpageError as exc:
        logger.error("%s", exc)
        return 1
    return 0
