"""Utility modules for mdpage.

Provides:
- text: slugify, unique_slug for heading anchors; decode_source
- hashing: hash_bytes for output fingerprints
- logger: get_logger, configure_logging
"""

from mdpage.utils.hashing import hash_bytes
from mdpage.utils.logger import configure_logging, get_logger
from mdpage.utils.text import decode_source, slugify, unique_slug

__all__ = [
    "configure_logging",
    "decode_source",
    "get_logger",
    "hash_bytes",
    "slugify",
    "unique_slug",
]
