"""Text processing utilities for mdpage.

Example:
    >>> from mdpage.utils.text import slugify
    >>> slugify("Hello World!")
    'hello-world'
"""

from __future__ import annotations

import html as html_module
import re

_NON_WORD_RE = re.compile(r"[^\w\s-]")
_SEPARATOR_RUN_RE = re.compile(r"[-\s]+")


def slugify(
    text: str,
    unescape_html: bool = True,
    separator: str = "-",
) -> str:
    """Convert heading text to a URL-safe anchor name.

    Keeps Unicode word characters so non-English headings still produce
    readable anchors.

    Args:
        text: Text to slugify
        unescape_html: Whether to decode HTML entities first (e.g., &amp; -> &)
        separator: Character to use between words (default: '-')

    Returns:
        Lowercase slug, possibly empty

    Examples:
        >>> slugify("Performing A/B testing")
        'performing-ab-testing'
        >>> slugify("Test &amp; Code")
        'test-code'
        >>> slugify("Café")
        'café'
    """
    if not text:
        return ""

    if unescape_html:
        text = html_module.unescape(text)

    text = text.lower().strip()
    text = _NON_WORD_RE.sub("", text)
    text = _SEPARATOR_RUN_RE.sub(separator, text)
    return text.strip(separator)


def unique_slug(slug: str, seen: set[str]) -> str:
    """Return ``slug`` or the first free ``slug-N`` variant, and record it.

    Examples:
        >>> seen = set()
        >>> unique_slug("intro", seen), unique_slug("intro", seen)
        ('intro', 'intro-1')
    """
    candidate = slug
    counter = 1
    while candidate in seen:
        candidate = f"{slug}-{counter}"
        counter += 1
    seen.add(candidate)
    return candidate


def decode_source(source: str | bytes) -> str:
    """Return Markdown text, decoding UTF-8 bytes and dropping a leading BOM.

    Raises:
        UnicodeDecodeError: If ``source`` is bytes that are not valid UTF-8
    """
    if isinstance(source, bytes):
        return source.decode("utf-8-sig")
    return source.removeprefix("\ufeff")
