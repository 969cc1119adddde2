"""Shared fixtures for mdpage tests."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parent.parent

MINIMAL_TEMPLATE = (
    "<html><head><title>{{ title }}</title></head>"
    "<body><p class=\"byline\">{{ author }}</p>\n{{ body }}</body></html>\n"
)


@pytest.fixture(autouse=True)
def _reset_mdpage_logging():
    """Remove handlers installed by cli.main() so they never outlive a test."""
    yield
    root = logging.getLogger("mdpage")
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.setLevel(logging.NOTSET)


@pytest.fixture
def site(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A working directory with content.md and templates/index.html.tmpl."""
    (tmp_path / "templates").mkdir()
    (tmp_path / "templates" / "index.html.tmpl").write_text(MINIMAL_TEMPLATE, encoding="utf-8")
    (tmp_path / "content.md").write_text("# Hello\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def repo_site(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A working directory holding copies of the shipped content and template."""
    (tmp_path / "templates").mkdir()
    shutil.copy(REPO_ROOT / "content.md", tmp_path / "content.md")
    shutil.copy(
        REPO_ROOT / "templates" / "index.html.tmpl",
        tmp_path / "templates" / "index.html.tmpl",
    )
    monkeypatch.chdir(tmp_path)
    return tmp_path
