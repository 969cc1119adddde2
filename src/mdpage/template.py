"""Page template loading and rendering with Jinja2.

Templates are compiled with HTML autoescaping, so ``{{ title }}`` and
``{{ author }}`` are escaped while ``{{ body }}``, a markupsafe.Markup
value, is inserted as-is. Undefined variables are errors rather than
empty strings.
"""

from __future__ import annotations

from pathlib import Path

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    TemplateError,
    TemplateNotFound,
    TemplateSyntaxError,
)

from mdpage.errors import TemplateLoadError, TemplateRenderError
from mdpage.models import PageData
from mdpage.utils.logger import get_logger

logger = get_logger(__name__)


def create_environment(search_path: Path | str | None = None) -> Environment:
    """Jinja2 environment used for page templates."""
    loader = FileSystemLoader(str(search_path)) if search_path is not None else None
    return Environment(
        loader=loader,
        autoescape=True,
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )


class PageTemplate:
    """A compiled page template.

    Usage:
        >>> template = PageTemplate.load("templates/index.html.tmpl")
        >>> html = template.render(PageData(title="t", author="a", body=Markup("<p>hi</p>")))
    """

    __slots__ = ("_path", "_template")

    def __init__(self, template: Template, path: Path | None = None) -> None:
        self._template = template
        self._path = path

    @property
    def path(self) -> Path | None:
        return self._path

    @classmethod
    def load(cls, path: Path | str) -> PageTemplate:
        """Load and compile a template file.

        Raises:
            TemplateLoadError: If the file is missing, unreadable, or invalid
        """
        path = Path(path)
        env = create_environment(path.parent)
        try:
            template = env.get_template(path.name)
        except TemplateNotFound as exc:
            raise TemplateLoadError("template not found", path) from exc
        except TemplateSyntaxError as exc:
            raise TemplateLoadError(exc.message or str(exc), path, lineno=exc.lineno) from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise TemplateLoadError(str(exc), path) from exc

        logger.debug("Compiled template %s", path)
        return cls(template, path)

    @classmethod
    def from_string(cls, source: str) -> PageTemplate:
        """Compile a template from source text.

        Raises:
            TemplateLoadError: If the source has a syntax error
        """
        env = create_environment()
        try:
            template = env.from_string(source)
        except TemplateSyntaxError as exc:
            raise TemplateLoadError(exc.message or str(exc), lineno=exc.lineno) from exc
        return cls(template)

    def render(self, data: PageData) -> str:
        """Execute the template against the page data.

        Raises:
            TemplateRenderError: If template execution fails
        """
        try:
            return self._template.render(data.as_context())
        except TemplateError as exc:
            raise TemplateRenderError(str(exc), self._path) from exc
        except Exception as exc:
            # Errors raised by expressions inside the template, e.g. a bad call.
            raise TemplateRenderError(f"{type(exc).__name__}: {exc}", self._path) from exc
