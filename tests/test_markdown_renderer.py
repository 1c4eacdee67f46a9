"""Tests for markdown rendering."""

from blog.adapters.rendering.markdown_renderer import PythonMarkdownRenderer


class TestPythonMarkdownRenderer:
    def test_paragraph(self):
        assert PythonMarkdownRenderer().render("Hello") == "<p>Hello</p>"

    def test_empty_text(self):
        assert PythonMarkdownRenderer().render("") == ""
        assert PythonMarkdownRenderer().render("  \n\n") == ""

    def test_fenced_code_gets_language_class(self):
        html = PythonMarkdownRenderer().render("```c\nint x = 1;\n```\n")
        assert '<code class="language-c">' in html
        assert "int x = 1;" in html

    def test_custom_language_prefix(self):
        html = PythonMarkdownRenderer(lang_prefix="lang-").render("```python\npass\n```\n")
        assert '<code class="lang-python">' in html

    def test_code_is_escaped(self):
        html = PythonMarkdownRenderer().render("```c\nif (a < b) {}\n```\n")
        assert "a &lt; b" in html

    def test_tables(self):
        html = PythonMarkdownRenderer().render("| a | b |\n|---|---|\n| 1 | 2 |\n")
        assert "<table>" in html

    def test_rendering_is_repeatable(self):
        renderer = PythonMarkdownRenderer()
        text = "# Title\n\nSome *text*.\n"
        assert renderer.render(text) == renderer.render(text)
