"""Heading identifiers.

Runs as the last core rule, after inline parsing, so the heading text it
slugifies is the text that will be rendered. Explicit ids are collected in a
first pass over the token stream and generated ids in a second; the
headings seen are collected into ``env["headings"]`` for tables of contents.

Explicit ids (``## Setup {#setup}``) are used verbatim and reserved, so a
generated id never collides with one declared anywhere in the document.
Generated ids that repeat get ``-1``, ``-2``, ... suffixes.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from mdpage.models import HeadingInfo
from mdpage.plugins import register_plugin
from mdpage.utils.text import slugify, unique_slug

if TYPE_CHECKING:
    from markdown_it import MarkdownIt
    from markdown_it.rules_core import StateCore
    from markdown_it.token import Token

    from mdpage.config import MarkdownConfig

RULE_NAME = "heading_ids"
FALLBACK_SLUG = "section"
EXPLICIT_ID_RE = re.compile(r"[ \t]*\{#(?P<id>[^\s{}]+)\}[ \t]*$")

# Inline token types whose content is visible heading text
_TEXT_TYPES = frozenset({"text", "code_inline", "image", "math_inline"})


def heading_ids_plugin(md: MarkdownIt, *, explicit: bool = True, auto: bool = True) -> None:
    """Install the heading id core rule on ``md``."""

    def heading_ids(state: StateCore) -> None:
        headings: list[HeadingInfo] = state.env.setdefault("headings", [])
        tokens = state.tokens
        opens = [idx for idx, token in enumerate(tokens) if token.type == "heading_open"]

        # Reserve explicit ids before generating any.
        explicit_ids = {
            idx: take_explicit_id(tokens[idx + 1]) if explicit else None for idx in opens
        }
        seen = {slug for slug in explicit_ids.values() if slug is not None}

        for idx in opens:
            token = tokens[idx]
            text = inline_text(tokens[idx + 1])
            slug = explicit_ids[idx]
            if slug is None and auto:
                slug = unique_slug(slugify(text) or FALLBACK_SLUG, seen)
            if slug:
                token.attrSet("id", slug)
            headings.append(HeadingInfo(level=int(token.tag[1:]), text=text, slug=slug or ""))

    md.core.ruler.push(RULE_NAME, heading_ids)


def take_explicit_id(inline: Token) -> str | None:
    """Strip a trailing ``{#id}`` from a heading's inline token, returning the id."""
    children = inline.children or []
    if not children or children[-1].type != "text":
        return None
    last = children[-1]
    match = EXPLICIT_ID_RE.search(last.content)
    if match is None:
        return None
    last.content = last.content[: match.start()]
    inline.content = EXPLICIT_ID_RE.sub("", inline.content)
    return match.group("id")


def inline_text(inline: Token) -> str:
    """Plain text of a heading, ignoring markup and raw HTML."""
    parts: list[str] = []
    for child in inline.children or []:
        if child.type in _TEXT_TYPES:
            parts.append(child.content)
        elif child.type in ("softbreak", "hardbreak"):
            parts.append(" ")
    return "".join(parts).strip()


def _install(md: MarkdownIt, config: MarkdownConfig) -> None:
    # Both extension names share one rule; the second call is a no-op.
    if RULE_NAME in md.core.ruler.get_all_rules():
        return
    extensions = set(config.extensions)
    everything = "all" in extensions
    md.use(
        heading_ids_plugin,
        explicit=everything or "heading_ids" in extensions,
        auto=everything or "auto_heading_ids" in extensions,
    )


register_plugin("heading_ids")(_install)
register_plugin("auto_heading_ids")(_install)
