"""Parser extensions for the mdpage Markdown converter.

Extensions switch on optional syntax in the markdown-it engine:
- table: GFM-style pipe tables
- strikethrough: ~~deleted~~ syntax
- autolinks: bare URLs become links
- definition_lists: term / ": definition" lists
- math: $inline$ and $$block$$ math
- heading_ids: explicit ``# Title {#custom-id}`` identifiers
- auto_heading_ids: generated ids for every other heading
- footnotes: [^1] references (not in the default set)
- task_lists: - [ ] checkboxes (not in the default set)

Usage:
    >>> from mdpage import MarkdownConverter, MarkdownConfig
    >>> md = MarkdownConverter(MarkdownConfig(extensions=("table", "math")))
    >>> html = md("| A | B |\\n|---|---|\\n| 1 | 2 |")

An extension is a callable taking the MarkdownIt instance being built and
the MarkdownConfig it is built from. It may enable engine rules, call
``md.use()`` with an mdit-py-plugins plugin, or push its own core rule.

"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Protocol

from mdpage.errors import PluginError

if TYPE_CHECKING:
    from markdown_it import MarkdownIt

    from mdpage.config import MarkdownConfig

__all__ = [
    "MarkdownExtension",
    "BUILTIN_PLUGINS",
    "apply_plugins",
    "expand_names",
    "get_plugin",
    "register_plugin",
]


class MarkdownExtension(Protocol):
    """Protocol for parser extensions."""

    def __call__(self, md: MarkdownIt, config: MarkdownConfig) -> None:
        """Install the extension on ``md``."""
        ...


# Registry of built-in extensions
BUILTIN_PLUGINS: dict[str, MarkdownExtension] = {}


def register_plugin(name: str) -> Callable[[MarkdownExtension], MarkdownExtension]:
    """Decorator to register an extension.

    Usage:
        @register_plugin("table")
        def table(md, config):
            md.enable("table")

    """

    def decorator(func: MarkdownExtension) -> MarkdownExtension:
        BUILTIN_PLUGINS[name] = func
        return func

    return decorator


def get_plugin(name: str) -> MarkdownExtension:
    """Get an extension by name.

    Raises:
        KeyError: If the name is not recognized

    """
    if name not in BUILTIN_PLUGINS:
        available = ", ".join(sorted(BUILTIN_PLUGINS.keys()))
        raise KeyError(f"Unknown plugin: {name!r}. Available: {available}")
    return BUILTIN_PLUGINS[name]


def expand_names(names: Iterable[str]) -> tuple[str, ...]:
    """Replace "all" with every built-in extension name."""
    names = tuple(names)
    if "all" in names:
        return tuple(BUILTIN_PLUGINS.keys())
    return names


def apply_plugins(md: MarkdownIt, config: MarkdownConfig) -> None:
    """Install every extension named in ``config.extensions`` on ``md``.

    Raises:
        PluginError: If an extension name is not recognized

    """
    for name in expand_names(config.extensions):
        try:
            plugin = get_plugin(name)
        except KeyError as exc:
            raise PluginError(name, exc.args[0]) from exc
        plugin(md, config)


# Import built-in extensions to register them
from mdpage.plugins import headings, syntax  # noqa: E402, F401
