"""Integration tests for the prettydiff package."""

import pytest

from prettydiff import (
    DiffHTMLRenderer,
    DiffParseError,
    generate_html,
    parse_unified_diff,
)


class TestPrettyDiffIntegration:
    """Test parsing followed by rendering with the real minifier."""

    def test_complete_workflow(self, sample_diff_text, renderer):
        """Test a full parse and render, comparing against the unminified page."""
        diff = parse_unified_diff(sample_diff_text)

        unminified = renderer.render(diff)
        html = generate_html(diff)

        assert len(html) < len(unminified)
        assert "b/src/app.py" in html
        assert "+3" in html
        assert "-2" in html
        assert "print(json.dumps(data))" in html

    def test_injection_safe_after_minification(self):
        """Test that escaped content stays inert after minification."""
        diff = parse_unified_diff(
            "--- a.html\n+++ b.html\n@@ -1 +1 @@\n-</div><script>alert(1)</script>\n+<p>ok</p>\n"
        )
        html = generate_html(diff)

        assert "<script>alert(1)" not in html
        assert "</div><script>" not in html
        assert "<p>ok</p>" not in html

    def test_whitespace_preserved_after_minification(self):
        """Test that indentation and runs of spaces or tabs inside lines survive minification."""
        diff = parse_unified_diff("--- a\n+++ b\n@@ -1 +1 @@\n-    if  x:\n+\tindented   y\n")
        html = generate_html(diff)

        assert "    if  x:" in html
        assert "\tindented   y" in html

    def test_large_content_whitespace_preserved_after_minification(self):
        """Test that hidden long lines keep their whitespace after minification."""
        content = "  a    b" * 600
        diff = parse_unified_diff(f"--- a\n+++ b\n@@ -1 +1 @@\n+{content}\n")
        html = generate_html(diff)

        assert content in html
        assert "Click to show 4800 characters..." in html

    def test_multiple_files(self):
        """Test rendering several parsed files into one page."""
        first = parse_unified_diff("--- a/one.txt\n+++ b/one.txt\n@@ -1 +1 @@\n-a\n+b\n")
        second = parse_unified_diff("--- a/two.txt\n+++ b/two.txt\n@@ -3,2 +3 @@\n x\n-y\n")
        html = DiffHTMLRenderer(title="Changes").render(first, second)

        assert html.index("b/one.txt") < html.index("b/two.txt")
        assert "Changes" in html

    def test_parse_error_yields_no_output(self):
        """Test that a malformed diff fails before anything is rendered."""
        with pytest.raises(DiffParseError, match="Invalid hunk header"):
            generate_html(parse_unified_diff("--- a\n+++ b\n@@ -x +1 @@\n"))
