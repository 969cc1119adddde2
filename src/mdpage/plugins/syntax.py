"""Syntax extensions backed by markdown-it rules and mdit-py-plugins."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mdit_py_plugins.deflist import deflist_plugin
from mdit_py_plugins.dollarmath import dollarmath_plugin
from mdit_py_plugins.footnote import footnote_plugin
from mdit_py_plugins.tasklists import tasklists_plugin

from mdpage.plugins import register_plugin

if TYPE_CHECKING:
    from markdown_it import MarkdownIt

    from mdpage.config import MarkdownConfig


@register_plugin("table")
def table(md: MarkdownIt, config: MarkdownConfig) -> None:
    md.enable("table")


@register_plugin("strikethrough")
def strikethrough(md: MarkdownIt, config: MarkdownConfig) -> None:
    md.enable("strikethrough")


@register_plugin("autolinks")
def autolinks(md: MarkdownIt, config: MarkdownConfig) -> None:
    """Link bare URLs such as ``https://bunny.net`` (needs linkify-it-py)."""
    md.options["linkify"] = True
    md.enable("linkify")


@register_plugin("definition_lists")
def definition_lists(md: MarkdownIt, config: MarkdownConfig) -> None:
    md.use(deflist_plugin)


@register_plugin("math")
def math(md: MarkdownIt, config: MarkdownConfig) -> None:
    # A digit next to the outer dollars means currency, so "$5 and $10" stays text.
    md.use(dollarmath_plugin, allow_digits=False)


@register_plugin("footnotes")
def footnotes(md: MarkdownIt, config: MarkdownConfig) -> None:
    md.use(footnote_plugin)


@register_plugin("task_lists")
def task_lists(md: MarkdownIt, config: MarkdownConfig) -> None:
    md.use(tasklists_plugin)
