"""Renderers for mdpage."""

from mdpage.renderers.html import (
    RENDER_FLAGS,
    apply_render_flags,
    get_flag,
    is_relative_link,
    register_flag,
    render_html,
)

__all__ = [
    "RENDER_FLAGS",
    "apply_render_flags",
    "get_flag",
    "is_relative_link",
    "register_flag",
    "render_html",
]
