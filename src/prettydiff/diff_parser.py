"""Unified diff parsing."""

import dataclasses
import logging
import re
from typing import List

from prettydiff.diff_exceptions import DiffParseError
from prettydiff.diff_types import DiffChange, DiffHunk, FileDiff


NO_NEWLINE_MARKER = "\\ No newline at end of file"

_HUNK_HEADER_RE = re.compile(r'^@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@(.*)$', re.ASCII)


class DiffParser:
    """Parser for single-file unified diff format."""

    def __init__(self) -> None:
        """Initialize the parser."""
        self._logger = logging.getLogger("DiffParser")

    def parse(self, diff_text: str) -> FileDiff:
        """
        Parse unified diff text into a structured file diff.

        The first two lines must be the "---" and "+++" file headers.  Every
        "@@ " line after them starts a new hunk.  Blank lines, lines seen before
        the first hunk header, "no newline" markers and lines without a
        recognised marker are skipped.

        Args:
            diff_text: Unified diff format text

        Returns:
            The parsed file diff

        Raises:
            DiffParseError: If the file headers are missing or a hunk header is malformed
        """
        lines = diff_text.split('\n')

        if len(lines) < 2:
            raise DiffParseError("Invalid diff format: not enough lines")

        if not lines[0].startswith('---') or not lines[1].startswith('+++'):
            raise DiffParseError(
                "Invalid diff format: missing file headers",
                {'old_header': lines[0], 'new_header': lines[1]}
            )

        old_file = lines[0][4:] if lines[0].startswith('--- ') else lines[0]
        new_file = lines[1][4:] if lines[1].startswith('+++ ') else lines[1]

        hunks: List[DiffHunk] = []
        current_hunk: DiffHunk | None = None
        changes: List[DiffChange] = []
        old_line = 0
        new_line = 0

        for idx in range(2, len(lines)):
            line = lines[idx]
            if not line:
                continue

            if line.startswith('@@ '):
                if current_hunk is not None:
                    hunks.append(dataclasses.replace(current_hunk, changes=tuple(changes)))

                current_hunk = self._parse_hunk_header(line, idx + 1)
                changes = []
                old_line = current_hunk.old_start
                new_line = current_hunk.new_start
                continue

            if current_hunk is None:
                self._logger.debug("Skipping line %d before first hunk header: %r", idx + 1, line)
                continue

            if line.startswith(NO_NEWLINE_MARKER):
                continue

            if line.startswith(' '):
                changes.append(DiffChange.unchanged(line[1:], old_line, new_line))
                old_line += 1
                new_line += 1

            elif line.startswith('+'):
                changes.append(DiffChange.added(line[1:], new_line))
                new_line += 1

            elif line.startswith('-'):
                changes.append(DiffChange.removed(line[1:], old_line))
                old_line += 1

            else:
                self._logger.debug("Dropping unrecognised line %d: %r", idx + 1, line)

        if current_hunk is not None:
            hunks.append(dataclasses.replace(current_hunk, changes=tuple(changes)))

        return FileDiff(old_file, new_file, tuple(hunks))

    def _parse_hunk_header(self, header: str, line_number: int) -> DiffHunk:
        """
        Parse a hunk header line.

        Args:
            header: The "@@ -A,B +C,D @@ context" line
            line_number: 1-indexed position of the header in the diff text

        Returns:
            Hunk with header fields set and no changes

        Raises:
            DiffParseError: If the header does not match the expected format
        """
        match = _HUNK_HEADER_RE.match(header)
        if not match:
            raise DiffParseError(
                f"Invalid hunk header format: {header}",
                {'line_number': line_number, 'header': header}
            )

        old_start = int(match.group(1))
        old_count = int(match.group(2)) if match.group(2) is not None else 1
        new_start = int(match.group(3))
        new_count = int(match.group(4)) if match.group(4) is not None else 1

        return DiffHunk(old_start, old_count, new_start, new_count, match.group(5).strip())


def parse_unified_diff(diff_text: str) -> FileDiff:
    """
    Parse unified diff text with a fresh parser.

    Args:
        diff_text: Unified diff format text

    Returns:
        The parsed file diff

    Raises:
        DiffParseError: If parsing fails
    """
    return DiffParser().parse(diff_text)
