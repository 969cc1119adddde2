"""HTML rendering flags for the markdown-it renderer.

Flags change how the token stream is turned into HTML:
- smartypants: typographic quotes, dashes and ellipses
- href_target_blank: absolute links open in a new browsing context

A flag is a callable taking the MarkdownIt instance being built.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import TYPE_CHECKING, Any

from mdpage.errors import PluginError

if TYPE_CHECKING:
    from markdown_it import MarkdownIt
    from markdown_it.renderer import RendererHTML
    from markdown_it.token import Token
    from markdown_it.utils import OptionsDict

    from mdpage.models import ParsedDocument

RenderFlag = Callable[["MarkdownIt"], None]

RENDER_FLAGS: dict[str, RenderFlag] = {}


def register_flag(name: str) -> Callable[[RenderFlag], RenderFlag]:
    """Decorator to register a rendering flag."""

    def decorator(func: RenderFlag) -> RenderFlag:
        RENDER_FLAGS[name] = func
        return func

    return decorator


def get_flag(name: str) -> RenderFlag:
    """Get a rendering flag by name.

    Raises:
        KeyError: If the name is not recognized

    """
    if name not in RENDER_FLAGS:
        available = ", ".join(sorted(RENDER_FLAGS.keys()))
        raise KeyError(f"Unknown render flag: {name!r}. Available: {available}")
    return RENDER_FLAGS[name]


def apply_render_flags(md: MarkdownIt, flags: Iterable[str]) -> None:
    """Install the named rendering flags on ``md``.

    Raises:
        PluginError: If a flag name is not recognized

    """
    for name in flags:
        try:
            flag = get_flag(name)
        except KeyError as exc:
            raise PluginError(name, exc.args[0]) from exc
        flag(md)


def is_relative_link(href: str) -> bool:
    """True for in-page anchors and site-relative paths.

    ``#top``, ``/about``, ``./a.html`` and ``../b.html`` are relative;
    ``//cdn.example`` and anything with a scheme are not. An empty href is
    treated as relative.
    """
    if not href or href[0] == "#":
        return True
    if href[0] == "/":
        return len(href) == 1 or href[1] != "/"
    return href.startswith(("./", "../"))


def render_link_open_target_blank(
    self: RendererHTML,
    tokens: Sequence[Token],
    idx: int,
    options: OptionsDict,
    env: dict[str, Any],
) -> str:
    token = tokens[idx]
    href = token.attrGet("href")
    if isinstance(href, str) and not is_relative_link(href):
        token.attrSet("target", "_blank")
    return self.renderToken(tokens, idx, options, env)


@register_flag("smartypants")
def smartypants(md: MarkdownIt) -> None:
    md.options["typographer"] = True
    md.enable(["replacements", "smartquotes"])


@register_flag("href_target_blank")
def href_target_blank(md: MarkdownIt) -> None:
    md.add_render_rule("link_open", render_link_open_target_blank)


def render_html(md: MarkdownIt, parsed: ParsedDocument) -> str:
    """Render a parsed token stream to an HTML string."""
    return md.renderer.render(parsed.tokens, md.options, parsed.env)


__all__ = [
    "RENDER_FLAGS",
    "apply_render_flags",
    "get_flag",
    "is_relative_link",
    "register_flag",
    "render_html",
    "render_link_open_target_blank",
]
