"""Minification of rendered diff documents."""

import logging
from abc import ABC, abstractmethod

import minify_html

from prettydiff.diff_exceptions import DiffMinifyError


class DiffMinifier(ABC):
    """Abstract base class for compacting rendered markup."""

    @abstractmethod
    def minify(self, media_type: str, text: str) -> str:
        """
        Remove insignificant whitespace from a document.

        Args:
            media_type: Media type of the text, e.g. "text/html"
            text: Document to compact

        Returns:
            The compacted document

        Raises:
            DiffMinifyError: If the document cannot be compacted
        """


class HTMLMinifier(DiffMinifier):
    """Minifier for HTML documents with inline stylesheets and scripts."""

    MEDIA_TYPE = "text/html"

    def __init__(self, minify_css: bool = True, minify_js: bool = True) -> None:
        """
        Initialize the minifier.

        Args:
            minify_css: Whether to minify inline <style> blocks
            minify_js: Whether to minify inline <script> blocks
        """
        self._minify_css = minify_css
        self._minify_js = minify_js
        self._logger = logging.getLogger("HTMLMinifier")

    def minify(self, media_type: str, text: str) -> str:
        """
        Minify an HTML document, including its inline stylesheets and scripts.

        Args:
            media_type: Media type of the text, must be "text/html"
            text: Document to compact

        Returns:
            The compacted document

        Raises:
            DiffMinifyError: If the media type is not "text/html" or minify-html fails
        """
        if media_type != self.MEDIA_TYPE:
            raise DiffMinifyError(
                f"Unsupported media type: {media_type}",
                {'media_type': media_type, 'supported': [self.MEDIA_TYPE]}
            )

        try:
            minified = minify_html.minify(text, minify_css=self._minify_css, minify_js=self._minify_js)

        except Exception as e:
            self._logger.warning("Failed to minify %d characters of %s: %s", len(text), media_type, e)
            raise DiffMinifyError(f"Failed to minify HTML: {e}", {'media_type': media_type}) from e

        self._logger.debug("Minified %s from %d to %d characters", media_type, len(text), len(minified))
        return minified
