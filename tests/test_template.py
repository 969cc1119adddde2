"""Tests for PageTemplate loading and rendering."""

from pathlib import Path

import pytest
from markupsafe import Markup

from mdpage import PageData, PageTemplate, TemplateLoadError, TemplateRenderError

DATA = PageData(
    title="Performing A/B testing with Edge Scripting",
    author="Thomas Labarussias",
    body=Markup("<p>hi</p>"),
)


class TestRendering:
    """Escaping rules and substitution."""

    def test_substitutes_all_fields(self) -> None:
        template = PageTemplate.from_string("{{ title }}|{{ author }}|{{ body }}")
        assert template.render(DATA) == (
            "Performing A/B testing with Edge Scripting|Thomas Labarussias|<p>hi</p>"
        )

    def test_title_and_author_are_escaped(self) -> None:
        template = PageTemplate.from_string("{{ title }}|{{ author }}")
        data = PageData(title="<b>A & B</b>", author='"Q"', body=Markup(""))
        assert template.render(data) == "&lt;b&gt;A &amp; B&lt;/b&gt;|&#34;Q&#34;"

    def test_body_is_not_escaped(self) -> None:
        template = PageTemplate.from_string("<main>{{ body }}</main>")
        data = PageData(title="", author="", body=Markup('<a href="x">&amp;</a>'))
        assert template.render(data) == '<main><a href="x">&amp;</a></main>'

    def test_body_is_not_double_escaped_by_filters(self) -> None:
        template = PageTemplate.from_string("{{ body | e }}")
        assert template.render(DATA) == "<p>hi</p>"

    def test_trailing_newline_kept(self) -> None:
        template = PageTemplate.from_string("{{ title }}\n")
        assert template.render(DATA).endswith("\n")

    def test_undefined_variable_is_an_error(self) -> None:
        template = PageTemplate.from_string("{{ subtitle }}")
        with pytest.raises(TemplateRenderError, match="subtitle"):
            template.render(DATA)

    def test_runtime_error_names_template_path(self, tmp_path: Path) -> None:
        path = tmp_path / "page.tmpl"
        path.write_text("{{ body.missing.attr }}", encoding="utf-8")
        template = PageTemplate.load(path)
        with pytest.raises(TemplateRenderError) as exc_info:
            template.render(DATA)
        assert exc_info.value.path == path
        assert str(exc_info.value).startswith("render template: ")

    @pytest.mark.parametrize(
        ("source", "error"),
        [
            ("{{ author() }}", "TypeError"),
            ("{{ 1 // 0 }}", "ZeroDivisionError"),
        ],
    )
    def test_expression_error_is_a_render_error(self, source: str, error: str) -> None:
        """Python errors raised while rendering surface as TemplateRenderError."""
        template = PageTemplate.from_string(source)
        with pytest.raises(TemplateRenderError, match=error) as exc_info:
            template.render(DATA)
        assert exc_info.value.__cause__ is not None


class TestLoading:
    """Template files and load failures."""

    def test_load_from_file(self, tmp_path: Path) -> None:
        path = tmp_path / "index.html.tmpl"
        path.write_text("<title>{{ title }}</title>", encoding="utf-8")
        template = PageTemplate.load(path)
        assert template.path == path
        assert template.render(DATA) == "<title>Performing A/B testing with Edge Scripting</title>"

    def test_tmpl_suffix_is_autoescaped(self, tmp_path: Path) -> None:
        path = tmp_path / "index.html.tmpl"
        path.write_text("{{ title }}", encoding="utf-8")
        data = PageData(title="<script>", author="", body=Markup(""))
        assert PageTemplate.load(path).render(data) == "&lt;script&gt;"

    def test_missing_file(self, tmp_path: Path) -> None:
        path = tmp_path / "missing.tmpl"
        with pytest.raises(TemplateLoadError) as exc_info:
            PageTemplate.load(path)
        assert exc_info.value.path == path
        assert "template not found" in str(exc_info.value)

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(TemplateLoadError):
            PageTemplate.load(tmp_path / "nope" / "index.html.tmpl")

    def test_syntax_error(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.tmpl"
        path.write_text("<p>\n{{ title \n</p>\n", encoding="utf-8")
        with pytest.raises(TemplateLoadError) as exc_info:
            PageTemplate.load(path)
        assert exc_info.value.lineno is not None
        assert "line " in str(exc_info.value)

    def test_syntax_error_from_string(self) -> None:
        with pytest.raises(TemplateLoadError):
            PageTemplate.from_string("{% if %}")

    def test_invalid_utf8_template(self, tmp_path: Path) -> None:
        path = tmp_path / "latin1.tmpl"
        path.write_bytes(b"caf\xe9 {{ title }}")
        with pytest.raises(TemplateLoadError):
            PageTemplate.load(path)
