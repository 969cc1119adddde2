"""
mdpage: render one Markdown file into one static HTML page.

Reads ``content.md``, converts it with markdown-it-py (tables,
strikethrough, autolinks, definition lists, math, heading ids), injects the
HTML into the Jinja2 template ``templates/index.html.tmpl`` and writes
``index.html``.

Quick Start:
    >>> from mdpage import convert
    >>> convert("# Hello")
    Markup('<h1 id="hello">Hello</h1>\\n')

    >>> from mdpage import PageConfig, build_page
    >>> result = build_page(PageConfig(output_path="public/index.html"))
    >>> result.digest[:12]
    '...'

Command line:
    $ python -m mdpage
"""

from mdpage.config import (
    DEFAULT_EXTENSIONS,
    DEFAULT_RENDER_FLAGS,
    MarkdownConfig,
    PageConfig,
)
from mdpage.converter import MarkdownConverter, convert
from mdpage.errors import (
    InputReadError,
    MdpageError,
    OutputWriteError,
    PageBuildError,
    PluginError,
    TemplateLoadError,
    TemplateRenderError,
)
from mdpage.files import read_document, write_page
from mdpage.models import BuildResult, Document, HeadingInfo, PageData, ParsedDocument
from mdpage.pipeline import build_page, render_page
from mdpage.template import PageTemplate

__version__ = "0.1.0"

__all__ = [  # noqa: RUF022 - grouped by category
    # Version
    "__version__",
    # Pipeline
    "build_page",
    "render_page",
    # Steps
    "read_document",
    "convert",
    "MarkdownConverter",
    "PageTemplate",
    "write_page",
    # Configuration
    "DEFAULT_EXTENSIONS",
    "DEFAULT_RENDER_FLAGS",
    "MarkdownConfig",
    "PageConfig",
    # Data model
    "BuildResult",
    "Document",
    "HeadingInfo",
    "PageData",
    "ParsedDocument",
    # Errors
    "MdpageError",
    "PageBuildError",
    "InputReadError",
    "TemplateLoadError",
    "TemplateRenderError",
    "OutputWriteError",
    "PluginError",
]
