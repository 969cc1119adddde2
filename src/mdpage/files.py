"""Reading the Markdown source and writing the finished page."""

from __future__ import annotations

from pathlib import Path

from mdpage.errors import InputReadError, OutputWriteError
from mdpage.models import Document
from mdpage.utils.logger import get_logger
from mdpage.utils.text import decode_source

logger = get_logger(__name__)


def _describe(exc: OSError) -> str:
    return exc.strerror or str(exc)


def read_document(path: Path | str) -> Document:
    """Load a Markdown file.

    Raises:
        InputReadError: If the file cannot be read or is not valid UTF-8
    """
    path = Path(path)
    try:
        source = path.read_bytes()
    except OSError as exc:
        raise InputReadError(_describe(exc), path) from exc

    try:
        text = decode_source(source)
    except UnicodeDecodeError as exc:
        raise InputReadError(f"not valid UTF-8 (byte {exc.start})", path) from exc

    logger.debug("Read %d bytes from %s", len(source), path)
    return Document(source=source, text=text, path=path)


def write_page(path: Path | str, content: str | bytes) -> int:
    """Create or truncate ``path`` and write the page to it.

    Text is encoded as UTF-8 and written without newline translation.
    Parent directories are not created.

    Returns:
        Number of bytes written

    Raises:
        OutputWriteError: If the file cannot be created or written
    """
    path = Path(path)
    data = content.encode("utf-8") if isinstance(content, str) else content
    try:
        with path.open("wb") as handle:
            handle.write(data)
    except OSError as exc:
        raise OutputWriteError(_describe(exc), path) from exc

    logger.debug("Wrote %d bytes to %s", len(data), path)
    return len(data)
