"""Page build configuration for mdpage.

The file locations and page metadata are plain values held in frozen
dataclasses and passed into the pipeline. Nothing here reads config files
or environment variables.

Usage:
    from mdpage.config import PageConfig

    config = PageConfig()  # content.md -> templates/index.html.tmpl -> index.html

    # Framework/test integration
    config = PageConfig.from_dict({
        "input_path": "docs/post.md",
        "markdown": {"extensions": ["table", "auto_heading_ids"]},
    })

"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Mapping

# Parser extensions enabled by default: the common set plus generated
# heading ids.
DEFAULT_EXTENSIONS: tuple[str, ...] = (
    "table",
    "strikethrough",
    "autolinks",
    "definition_lists",
    "math",
    "heading_ids",
    "auto_heading_ids",
)

DEFAULT_RENDER_FLAGS: tuple[str, ...] = (
    "smartypants",
    "href_target_blank",
)

DEFAULT_INPUT_PATH = Path("content.md")
DEFAULT_TEMPLATE_PATH = Path("templates/index.html.tmpl")
DEFAULT_OUTPUT_PATH = Path("index.html")
DEFAULT_TITLE = "Performing A/B testing with Edge Scripting"
DEFAULT_AUTHOR = "Thomas Labarussias"


def _valid_fields(cls: type) -> set[str]:
    return {f.name for f in fields(cls)}


@dataclass(frozen=True, slots=True)
class MarkdownConfig:
    """Immutable Markdown engine configuration.

    Attributes:
        extensions: Parser extension names (see mdpage.plugins)
        render_flags: HTML rendering flag names (see mdpage.renderers.html)

    """

    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    render_flags: tuple[str, ...] = DEFAULT_RENDER_FLAGS

    def __post_init__(self) -> None:
        # Accept any iterable of names but store tuples so the config stays
        # hashable and immutable.
        object.__setattr__(self, "extensions", tuple(self.extensions))
        object.__setattr__(self, "render_flags", tuple(self.render_flags))

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "MarkdownConfig":
        """Create MarkdownConfig from a mapping.

        Unknown keys are silently ignored.

        Example:
            >>> config = MarkdownConfig.from_dict({"extensions": ["table"]})
            >>> config.extensions
            ('table',)

        """
        valid = _valid_fields(cls)
        return cls(**{k: v for k, v in config_dict.items() if k in valid})


@dataclass(frozen=True, slots=True)
class PageConfig:
    """Immutable description of one page build.

    Attributes:
        input_path: Markdown source file
        template_path: Jinja2 page template
        output_path: HTML file to create or overwrite
        title: Page title (autoescaped in the template)
        author: Page author (autoescaped in the template)
        markdown: Markdown engine configuration

    """

    input_path: Path = DEFAULT_INPUT_PATH
    template_path: Path = DEFAULT_TEMPLATE_PATH
    output_path: Path = DEFAULT_OUTPUT_PATH
    title: str = DEFAULT_TITLE
    author: str = DEFAULT_AUTHOR
    markdown: MarkdownConfig = field(default_factory=MarkdownConfig)

    def __post_init__(self) -> None:
        for name in ("input_path", "template_path", "output_path"):
            object.__setattr__(self, name, Path(getattr(self, name)))

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "PageConfig":
        """Create PageConfig from a mapping.

        Path values may be strings. A nested ``markdown`` mapping becomes a
        MarkdownConfig. Unknown keys are silently ignored.

        Example:
            >>> config = PageConfig.from_dict({"output_path": "out.html"})
            >>> config.output_path
            PosixPath('out.html')

        """
        valid = _valid_fields(cls)
        filtered = {k: v for k, v in config_dict.items() if k in valid}
        markdown = filtered.get("markdown")
        if isinstance(markdown, Mapping):
            filtered["markdown"] = MarkdownConfig.from_dict(markdown)
        return cls(**filtered)

    def resolve(self, base_dir: Path | str) -> "PageConfig":
        """Return a copy whose relative paths are anchored at ``base_dir``."""
        base = Path(base_dir)
        return PageConfig(
            input_path=base / self.input_path,
            template_path=base / self.template_path,
            output_path=base / self.output_path,
            title=self.title,
            author=self.author,
            markdown=self.markdown,
        )


__all__ = [
    "DEFAULT_AUTHOR",
    "DEFAULT_EXTENSIONS",
    "DEFAULT_INPUT_PATH",
    "DEFAULT_OUTPUT_PATH",
    "DEFAULT_RENDER_FLAGS",
    "DEFAULT_TEMPLATE_PATH",
    "DEFAULT_TITLE",
    "MarkdownConfig",
    "PageConfig",
]
