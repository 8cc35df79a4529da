"""Custom exceptions for diff parsing and rendering."""

from typing import Any


class DiffError(Exception):
    """Base exception for prettydiff operations."""

    def __init__(self, message: str, error_details: dict[str, Any] | None = None):
        """
        Initialize the exception.

        Args:
            message: Error message
            error_details: Optional dictionary with detailed error information
        """
        super().__init__(message)
        self.error_details = error_details


class DiffParseError(DiffError):
    """Raised when unified diff text is not in the expected format."""


class DiffRenderError(DiffError):
    """Raised when parsed diffs cannot be rendered to HTML."""


class DiffTemplateError(DiffRenderError):
    """Raised when the HTML template cannot be loaded or rendered."""


class DiffMinifyError(DiffRenderError):
    """Raised when the rendered document cannot be minified."""
