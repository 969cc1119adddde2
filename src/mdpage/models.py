"""Values that flow through the page pipeline.

Document -> ParsedDocument -> rendered fragment (Markup) -> PageData -> page.
All of them are immutable except the engine token stream inside
ParsedDocument, which belongs to a single conversion.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from markupsafe import Markup

if TYPE_CHECKING:
    from markdown_it.token import Token
    from markdown_it.tree import SyntaxTreeNode


@dataclass(frozen=True, slots=True)
class Document:
    """Raw Markdown source as read from disk.

    Attributes:
        source: Bytes exactly as stored in the file
        text: Decoded UTF-8 text, without a leading byte order mark
        path: File the source was read from

    """

    source: bytes
    text: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class HeadingInfo:
    """Heading metadata collected while assigning heading ids."""

    level: int
    text: str
    slug: str


@dataclass(slots=True)
class ParsedDocument:
    """Engine output for one Markdown source.

    Attributes:
        tokens: Flat markdown-it token stream
        env: Parse environment (link references, footnotes, headings)
        source: Text that was parsed

    """

    tokens: list[Token]
    env: dict[str, Any] = field(default_factory=dict)
    source: str = ""

    @property
    def headings(self) -> list[HeadingInfo]:
        """Headings in document order, with the ids assigned to them."""
        return list(self.env.get("headings", ()))

    def tree(self) -> SyntaxTreeNode:
        """Nested document tree built from the token stream."""
        from markdown_it.tree import SyntaxTreeNode

        return SyntaxTreeNode(self.tokens)


@dataclass(frozen=True, slots=True)
class PageData:
    """The record handed to the page template.

    ``body`` must already be trusted HTML. Plain strings are rejected so
    the fragment is never escaped twice and untrusted text is never
    injected by accident.
    """

    title: str
    author: str
    body: Markup

    def __post_init__(self) -> None:
        for name in ("title", "author"):
            if not isinstance(getattr(self, name), str):
                raise TypeError(f"PageData.{name} must be a str")
        if not isinstance(self.body, Markup):
            raise TypeError(
                "PageData.body must be trusted HTML (markupsafe.Markup), "
                f"got {type(self.body).__name__}"
            )

    def as_context(self) -> dict[str, Any]:
        """Template variables."""
        return {"title": self.title, "author": self.author, "body": self.body}


@dataclass(frozen=True, slots=True)
class BuildResult:
    """Outcome of a successful page build."""

    output_path: Path
    bytes_written: int
    digest: str
    headings: tuple[HeadingInfo, ...] = ()
