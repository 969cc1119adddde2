"""Exception classes for mdpage.

Every pipeline step raises a dedicated PageBuildError subclass so the
caller can report the failing step and decide whether to exit.
"""

from __future__ import annotations

from pathlib import Path


class MdpageError(Exception):
    """Base exception for all mdpage errors.

    Subclass this for specific error categories.
    """

    pass


class PluginError(MdpageError):
    """Unknown or failing Markdown extension / render flag."""

    def __init__(self, plugin_name: str, message: str) -> None:
        """Initialize plugin error.

        Args:
            plugin_name: Name of the failing extension or flag
            message: Description of the error
        """
        self.plugin_name = plugin_name
        super().__init__(f"Plugin '{plugin_name}': {message}")


class PageBuildError(MdpageError):
    """A pipeline step failed.

    The formatted message names the step first, then the file involved,
    so a single log line identifies what went wrong.
    """

    step: str = "build page"

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        """Initialize build error.

        Args:
            message: Error description
            path: File the failing step was working on (optional)
        """
        self.message = message
        self.path = Path(path) if path is not None else None

        location = f"{self.path}: " if self.path is not None else ""
        super().__init__(f"{self.step}: {location}{message}")


class InputReadError(PageBuildError):
    """The Markdown source could not be read or is not valid UTF-8."""

    step = "read input"


class TemplateLoadError(PageBuildError):
    """The page template is missing, unreadable, or has a syntax error."""

    step = "load template"

    def __init__(
        self,
        message: str,
        path: Path | str | None = None,
        lineno: int | None = None,
    ) -> None:
        """Initialize template load error.

        Args:
            message: Error description
            path: Template path
            lineno: Line of the syntax error (1-indexed, optional)
        """
        self.lineno = lineno
        if lineno is not None:
            message = f"line {lineno}: {message}"
        super().__init__(message, path)


class TemplateRenderError(PageBuildError):
    """Executing the template against the page data failed."""

    step = "render template"


class OutputWriteError(PageBuildError):
    """The output page could not be created or written."""

    step = "write output"
