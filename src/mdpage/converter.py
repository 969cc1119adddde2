"""Markdown to HTML conversion.

Parsing and rendering are delegated to markdown-it-py. This module builds
one configured engine per MarkdownConverter and exposes the two stages
separately so callers can inspect the document tree between them.

Usage:
    >>> from mdpage.converter import MarkdownConverter
    >>> md = MarkdownConverter()
    >>> md("# Hello")
    Markup('<h1 id="hello">Hello</h1>\\n')

    >>> parsed = md.parse("## Setup {#setup}")
    >>> parsed.headings[0].slug
    'setup'

Malformed input:
    Conversion never fails on text input. Unclosed emphasis stays literal,
    an unterminated code fence runs to the end of the document, and NUL
    characters become U+FFFD. Bytes must be valid UTF-8; anything else
    raises UnicodeDecodeError before the engine sees it.
"""

from __future__ import annotations

from markdown_it import MarkdownIt
from markupsafe import Markup

from mdpage.config import MarkdownConfig
from mdpage.models import ParsedDocument
from mdpage.plugins import apply_plugins
from mdpage.renderers.html import apply_render_flags, render_html
from mdpage.utils.logger import get_logger
from mdpage.utils.text import decode_source

logger = get_logger(__name__)


def create_engine(config: MarkdownConfig) -> MarkdownIt:
    """Build a markdown-it engine with the configured extensions and flags.

    Starts from the CommonMark preset, which already lets headings, fences,
    block quotes and bullet lists start without a preceding blank line.

    Raises:
        PluginError: If an extension or render flag name is unknown

    """
    md = MarkdownIt("commonmark")
    apply_plugins(md, config)
    apply_render_flags(md, config.render_flags)
    return md


class MarkdownConverter:
    """Configured Markdown parser and HTML renderer.

    The engine is built once in ``__init__`` and reused; every call gets a
    fresh parse environment, so repeated conversions are independent and
    deterministic.
    """

    __slots__ = ("_config", "_md")

    def __init__(self, config: MarkdownConfig | None = None) -> None:
        """Initialize converter.

        Args:
            config: Extension set and render flags (defaults if None)

        Raises:
            PluginError: If an extension or render flag name is unknown
        """
        self._config = config or MarkdownConfig()
        self._md = create_engine(self._config)

    @property
    def config(self) -> MarkdownConfig:
        return self._config

    @property
    def engine(self) -> MarkdownIt:
        """The underlying markdown-it instance."""
        return self._md

    def __call__(self, source: str | bytes) -> Markup:
        return self.convert(source)

    def parse(self, source: str | bytes) -> ParsedDocument:
        """Parse Markdown into a token stream plus parse environment.

        Args:
            source: Markdown text, or UTF-8 encoded bytes

        Returns:
            ParsedDocument holding tokens, env and collected headings
        """
        text = decode_source(source)
        env: dict = {}
        tokens = self._md.parse(text, env)
        parsed = ParsedDocument(tokens=tokens, env=env, source=text)
        logger.debug(
            "Parsed %d characters into %d tokens (%d headings)",
            len(text),
            len(tokens),
            len(parsed.headings),
        )
        return parsed

    def render(self, parsed: ParsedDocument) -> Markup:
        """Render a parsed document to trusted HTML."""
        return Markup(render_html(self._md, parsed))

    def convert(self, source: str | bytes) -> Markup:
        """Parse and render Markdown in one call."""
        return self.render(self.parse(source))


def convert(source: str | bytes, config: MarkdownConfig | None = None) -> Markup:
    """Convert Markdown to trusted HTML with a one-off converter.

    Example:
        >>> convert("[docs](https://bunny.net)")
        Markup('<p><a href="https://bunny.net" target="_blank">docs</a></p>\\n')
    """
    return MarkdownConverter(config).convert(source)


__all__ = [
    "MarkdownConverter",
    "convert",
    "create_engine",
]
