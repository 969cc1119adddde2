"""The page build pipeline.

read -> convert -> load template -> render -> write

Each step either hands its result to the next or raises a PageBuildError
naming the step. The page is rendered completely in memory before the
output file is opened, so a failed build never creates or truncates it.
"""

from __future__ import annotations

from mdpage.config import PageConfig
from mdpage.converter import MarkdownConverter
from mdpage.files import read_document, write_page
from mdpage.models import BuildResult, PageData
from mdpage.template import PageTemplate
from mdpage.utils.hashing import hash_bytes
from mdpage.utils.logger import get_logger

logger = get_logger(__name__)


def render_page(
    config: PageConfig,
    *,
    converter: MarkdownConverter | None = None,
) -> tuple[bytes, BuildResult]:
    """Run every step except the final write.

    Returns:
        The UTF-8 encoded page and a BuildResult describing it
    """
    converter = converter or MarkdownConverter(config.markdown)

    document = read_document(config.input_path)
    parsed = converter.parse(document.text)
    body = converter.render(parsed)

    template = PageTemplate.load(config.template_path)
    page = template.render(PageData(title=config.title, author=config.author, body=body))

    data = page.encode("utf-8")
    result = BuildResult(
        output_path=config.output_path,
        bytes_written=len(data),
        digest=hash_bytes(data),
        headings=tuple(parsed.headings),
    )
    return data, result


def build_page(
    config: PageConfig | None = None,
    *,
    converter: MarkdownConverter | None = None,
) -> BuildResult:
    """Build one HTML page from one Markdown file.

    Args:
        config: Paths and metadata (defaults to content.md -> index.html)
        converter: Preconfigured converter; built from ``config.markdown``
            when omitted

    Returns:
        BuildResult for the written page

    Raises:
        InputReadError: Markdown source missing, unreadable or not UTF-8
        TemplateLoadError: Template missing, unreadable or invalid
        TemplateRenderError: Template execution failed
        OutputWriteError: Output file could not be written
        PluginError: Unknown extension or render flag in the config
    """
    config = config or PageConfig()
    data, result = render_page(config, converter=converter)
    write_page(config.output_path, data)
    logger.info(
        "Built %s from %s (%d bytes, sha256 %s)",
        config.output_path,
        config.input_path,
        result.bytes_written,
        result.digest[:12],
    )
    return result
