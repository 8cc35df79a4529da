"""
Unified diff parsing and HTML rendering.

This package parses single-file unified diffs into immutable structures and
renders them as a self-contained, styled HTML page.
"""

from prettydiff.diff_exceptions import (
    DiffError,
    DiffMinifyError,
    DiffParseError,
    DiffRenderError,
    DiffTemplateError,
)
from prettydiff.diff_html_renderer import DiffHTMLRenderer, generate_html
from prettydiff.diff_minifier import DiffMinifier, HTMLMinifier
from prettydiff.diff_parser import DiffParser, parse_unified_diff
from prettydiff.diff_types import (
    DiffChange,
    DiffChangeType,
    DiffHunk,
    FileDiff,
)

__all__ = [
    # Exceptions
    'DiffError',
    'DiffParseError',
    'DiffRenderError',
    'DiffTemplateError',
    'DiffMinifyError',
    # Types
    'DiffChangeType',
    'DiffChange',
    'DiffHunk',
    'FileDiff',
    # Core classes
    'DiffParser',
    'DiffMinifier',
    'HTMLMinifier',
    'DiffHTMLRenderer',
    # Convenience functions
    'parse_unified_diff',
    'generate_html',
]
