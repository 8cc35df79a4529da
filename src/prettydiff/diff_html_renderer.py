"""Rendering of parsed unified diffs as a self-contained HTML page."""

import logging
from typing import List

from jinja2 import Environment, PackageLoader, StrictUndefined, TemplateError, select_autoescape

from prettydiff.diff_exceptions import DiffTemplateError
from prettydiff.diff_html_types import HTMLFileDiff, HTMLHunk, HTMLLine
from prettydiff.diff_minifier import DiffMinifier, HTMLMinifier
from prettydiff.diff_types import DiffChangeType, DiffHunk, FileDiff


class DiffHTMLRenderer:
    """
    Renders file diffs into a single HTML document.

    Each file diff becomes a card showing its new file name and added/removed
    totals, each hunk a header row, and each change a numbered line.  Every
    diff-derived string is autoescaped by the template engine.  The stylesheet
    and toggle script are embedded so the page has no external references.
    """

    TEMPLATE_NAME = "diff.html.j2"

    def __init__(
        self,
        minifier: DiffMinifier | None = None,
        large_content_threshold: int = 4000,
        title: str = "DIFF"
    ) -> None:
        """
        Initialize the renderer.

        Args:
            minifier: Minifier applied to the finished page, defaults to HTMLMinifier
            large_content_threshold: Lines longer than this many characters are hidden
                behind a "click to show" button
            title: Document title
        """
        self._minifier = minifier if minifier is not None else HTMLMinifier()
        self._large_content_threshold = large_content_threshold
        self._title = title
        self._env = Environment(
            loader=PackageLoader("prettydiff", "templates"),
            autoescape=select_autoescape(enabled_extensions=("html", "j2")),
            undefined=StrictUndefined
        )
        self._logger = logging.getLogger("DiffHTMLRenderer")

    def render(self, *diffs: FileDiff) -> str:
        """
        Render file diffs as a minified HTML page.

        Args:
            *diffs: Parsed file diffs, one card is rendered per diff in the order given

        Returns:
            The minified HTML document

        Raises:
            DiffTemplateError: If the template cannot be loaded or rendered
            DiffMinifyError: If the rendered document cannot be minified
        """
        html_diffs = self._build_file_diffs(diffs)

        try:
            template = self._env.get_template(self.TEMPLATE_NAME)
            document = template.render(title=self._title, diffs=html_diffs)

        except TemplateError as e:
            self._logger.warning("Failed to render template %s: %s", self.TEMPLATE_NAME, e)
            raise DiffTemplateError(
                f"Failed to render template: {e}",
                {'template': self.TEMPLATE_NAME}
            ) from e

        self._logger.debug("Rendered %d file diff(s) into %d characters", len(html_diffs), len(document))
        return self._minifier.minify(HTMLMinifier.MEDIA_TYPE, document)

    def _build_file_diffs(self, diffs: tuple[FileDiff, ...]) -> List[HTMLFileDiff]:
        """
        Convert parsed diffs into template view models.

        Args:
            diffs: Parsed file diffs

        Returns:
            One view model per file diff
        """
        html_diffs: List[HTMLFileDiff] = []
        row_index = 0

        for diff in diffs:
            html_diff = HTMLFileDiff(file_name=diff.new_file)

            for hunk in diff.hunks:
                html_hunk = HTMLHunk(header=hunk.header())
                row_index = self._build_lines(hunk, html_diff, html_hunk, row_index)
                html_diff.hunks.append(html_hunk)

            html_diffs.append(html_diff)

        return html_diffs

    def _build_lines(self, hunk: DiffHunk, html_diff: HTMLFileDiff, html_hunk: HTMLHunk, row_index: int) -> int:
        """
        Append one row per change in a hunk, updating the file's totals.

        Args:
            hunk: Hunk being rendered
            html_diff: File card receiving the added/removed counts
            html_hunk: Hunk view model receiving the rows
            row_index: Index of the next row in the whole document

        Returns:
            Index of the row following the last one added
        """
        for change in hunk.changes:
            line = HTMLLine(line_number=change.display_line, content=change.content)

            if change.type == DiffChangeType.ADDED:
                line.css_class = "added"
                html_diff.added_count += 1

            elif change.type == DiffChangeType.REMOVED:
                line.css_class = "removed"
                html_diff.removed_count += 1

            # Ids are unique per document since line numbers repeat across hunks and files
            if len(change.content) > self._large_content_threshold:
                line.is_large = True
                line.content_id = f"content-{row_index}"

            html_hunk.lines.append(line)
            row_index += 1

        return row_index


def generate_html(*diffs: FileDiff) -> str:
    """
    Render file diffs with a default renderer.

    Args:
        *diffs: Parsed file diffs

    Returns:
        The minified HTML document

    Raises:
        DiffRenderError: If rendering or minification fails
    """
    return DiffHTMLRenderer().render(*diffs)
