"""Tests for nightowl.markdown — renderer over patitas."""

from __future__ import annotations

import builtins

import pytest


class TestMarkdownRenderer:
    """Test the core MarkdownRenderer wrapper over patitas."""

    def test_renders_heading(self) -> None:
        from nightowl.markdown import MarkdownRenderer

        md = MarkdownRenderer()
        html = md.render("# Hello")
        assert "<h1" in html
        assert "Hello" in html

    def test_renders_paragraph(self) -> None:
        from nightowl.markdown import MarkdownRenderer

        html = MarkdownRenderer().render("Hello, world!")
        assert "<p>" in html
        assert "Hello, world!" in html

    def test_renders_fenced_code(self) -> None:
        from nightowl.markdown import MarkdownRenderer

        html = MarkdownRenderer().render("```python\nprint('hi')\n```")
        assert "<code" in html
        assert "print" in html

    def test_empty_source_returns_empty(self) -> None:
        from nightowl.markdown import MarkdownRenderer

        assert MarkdownRenderer().render("") == ""

    def test_callable(self) -> None:
        from nightowl.markdown import MarkdownRenderer

        md = MarkdownRenderer()
        assert md("*x*") == md.render("*x*")

    def test_plugins_forwarded(self) -> None:
        from nightowl.markdown import MarkdownRenderer

        html = MarkdownRenderer(plugins=("strikethrough",)).render("~~deleted~~")
        assert "<del>" in html


class TestMissingDependency:
    def test_raises_not_installed(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from nightowl.markdown import MarkdownNotInstalledError, MarkdownRenderer

        real_import = builtins.__import__

        def fake_import(name, *args, **kwargs):
            if name == "patitas":
                raise ImportError(name)
            return real_import(name, *args, **kwargs)

        monkeypatch.setattr(builtins, "__import__", fake_import)
        with pytest.raises(MarkdownNotInstalledError, match="pip install patitas"):
            MarkdownRenderer()
