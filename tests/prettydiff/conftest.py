"""Shared fixtures and utilities for prettydiff tests."""

import pytest

from prettydiff.diff_exceptions import DiffMinifyError
from prettydiff.diff_html_renderer import DiffHTMLRenderer
from prettydiff.diff_minifier import DiffMinifier
from prettydiff.diff_parser import DiffParser


class PassthroughMinifier(DiffMinifier):
    """Minifier that records its input and returns it unchanged."""

    def __init__(self):
        self.calls = []

    def minify(self, media_type: str, text: str) -> str:
        self.calls.append((media_type, text))
        return text


class FailingMinifier(DiffMinifier):
    """Minifier that always fails."""

    def minify(self, media_type: str, text: str) -> str:
        raise DiffMinifyError("minifier unavailable", {'media_type': media_type})


@pytest.fixture
def parser():
    """Create a diff parser for testing."""
    return DiffParser()


@pytest.fixture
def passthrough_minifier():
    """Create a minifier that leaves the document untouched."""
    return PassthroughMinifier()


@pytest.fixture
def renderer(passthrough_minifier):
    """Create a renderer whose output is the unminified template result."""
    return DiffHTMLRenderer(minifier=passthrough_minifier)


@pytest.fixture
def renderer_custom(passthrough_minifier):
    """Factory for unminified renderers with custom configuration."""
    def _create_renderer(large_content_threshold: int = 4000, title: str = "DIFF"):
        return DiffHTMLRenderer(
            minifier=passthrough_minifier,
            large_content_threshold=large_content_threshold,
            title=title
        )
    return _create_renderer


@pytest.fixture
def failing_renderer():
    """Create a renderer whose minification step always fails."""
    return DiffHTMLRenderer(minifier=FailingMinifier())


@pytest.fixture
def sample_diff_text():
    """A two-hunk diff with context, additions, removals and a function context."""
    return """--- a/src/app.py
+++ b/src/app.py
@@ -1,4 +1,5 @@
 import os
-import sys
+import sys
+import json
 
 def main():
@@ -20,3 +21,3 @@ def main():
     data = load()
-    print(data)
+    print(json.dumps(data))
     return 0
"""
