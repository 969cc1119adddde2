"""Tests for the argument-less command-line entry point."""

import runpy
from pathlib import Path

import pytest

from mdpage.cli import main


class TestMain:
    """Exit status and diagnostics of mdpage.cli.main()."""

    def test_success_is_silent(self, site: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main() == 0
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""
        assert (site / "index.html").exists()

    def test_missing_content(self, site: Path, capsys: pytest.CaptureFixture[str]) -> None:
        (site / "content.md").unlink()
        assert main() == 1
        lines = capsys.readouterr().err.splitlines()
        assert len(lines) == 1
        assert "read input: content.md" in lines[0]
        assert not (site / "index.html").exists()

    def test_missing_template(self, site: Path, capsys: pytest.CaptureFixture[str]) -> None:
        (site / "templates" / "index.html.tmpl").unlink()
        assert main() == 1
        lines = capsys.readouterr().err.splitlines()
        assert len(lines) == 1
        assert "load template: templates/index.html.tmpl" in lines[0]
        assert not (site / "index.html").exists()

    def test_render_failure(self, site: Path, capsys: pytest.CaptureFixture[str]) -> None:
        (site / "templates" / "index.html.tmpl").write_text("{{ summary }}", encoding="utf-8")
        assert main() == 1
        assert "render template:" in capsys.readouterr().err

    def test_expression_failure_is_one_line(
        self, site: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        (site / "index.html").write_text("previous", encoding="utf-8")
        (site / "templates" / "index.html.tmpl").write_text("{{ 1 // 0 }}", encoding="utf-8")
        assert main() == 1
        lines = capsys.readouterr().err.splitlines()
        assert len(lines) == 1
        assert "render template: templates/index.html.tmpl: ZeroDivisionError" in lines[0]
        assert (site / "index.html").read_text(encoding="utf-8") == "previous"

    def test_repeated_runs_log_once(self, site: Path, capsys: pytest.CaptureFixture[str]) -> None:
        (site / "content.md").unlink()
        main()
        capsys.readouterr()
        main()
        assert len(capsys.readouterr().err.splitlines()) == 1


class TestModuleEntryPoint:
    """python -m mdpage."""

    def test_exit_status(self, site: Path) -> None:
        with pytest.raises(SystemExit) as exc_info:
            runpy.run_module("mdpage", run_name="__main__")
        assert exc_info.value.code == 0
        assert (site / "index.html").exists()

    def test_failure_exit_status(self, site: Path) -> None:
        (site / "content.md").unlink()
        with pytest.raises(SystemExit) as exc_info:
            runpy.run_module("mdpage", run_name="__main__")
        assert exc_info.value.code == 1
