"""Shared dataclasses for parsed unified diffs."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple


class DiffChangeType(Enum):
    """Classification of a line within a hunk, valued by its diff marker."""
    UNCHANGED = " "
    ADDED = "+"
    REMOVED = "-"


@dataclass(frozen=True)
class DiffChange:
    """
    Represents a single line in a diff hunk.

    Only unchanged and removed lines carry an old line number, and only
    unchanged and added lines carry a new line number.
    """

    type: DiffChangeType
    content: str  # The line content without its marker character
    old_line: int | None = None  # Line number in the original file (1-indexed)
    new_line: int | None = None  # Line number in the new file (1-indexed)

    def __post_init__(self) -> None:
        has_old = self.type in (DiffChangeType.UNCHANGED, DiffChangeType.REMOVED)
        has_new = self.type in (DiffChangeType.UNCHANGED, DiffChangeType.ADDED)

        if has_old != (self.old_line is not None):
            raise ValueError(
                f"{self.type.name} change {'requires' if has_old else 'cannot have'} an old line number"
            )

        if has_new != (self.new_line is not None):
            raise ValueError(
                f"{self.type.name} change {'requires' if has_new else 'cannot have'} a new line number"
            )

    @classmethod
    def unchanged(cls, content: str, old_line: int, new_line: int) -> 'DiffChange':
        """Create a context line present in both files."""
        return cls(DiffChangeType.UNCHANGED, content, old_line=old_line, new_line=new_line)

    @classmethod
    def added(cls, content: str, new_line: int) -> 'DiffChange':
        """Create a line that only exists in the new file."""
        return cls(DiffChangeType.ADDED, content, new_line=new_line)

    @classmethod
    def removed(cls, content: str, old_line: int) -> 'DiffChange':
        """Create a line that only exists in the original file."""
        return cls(DiffChangeType.REMOVED, content, old_line=old_line)

    @property
    def display_line(self) -> int:
        """
        Line number shown alongside this change.

        Returns:
            The old line number for removed lines, otherwise the new line number
        """
        if self.type == DiffChangeType.REMOVED:
            assert self.old_line is not None
            return self.old_line

        assert self.new_line is not None
        return self.new_line


@dataclass(frozen=True)
class DiffHunk:
    """Represents a single hunk from a unified diff."""

    old_start: int  # Starting line number in original file (1-indexed)
    old_count: int  # Number of lines in original file
    new_start: int  # Starting line number in new file (1-indexed)
    new_count: int  # Number of lines in new file
    context: str = ""  # Trailing text after the closing @@, e.g. a function signature
    changes: Tuple[DiffChange, ...] = field(default_factory=tuple)

    def header(self) -> str:
        """
        Re-serialize the hunk header.

        Returns:
            Header in the form "@@ -old_start,old_count +new_start,new_count @@ context"
        """
        header = f"@@ -{self.old_start},{self.old_count} +{self.new_start},{self.new_count} @@"
        if self.context:
            header += f" {self.context}"

        return header

    @property
    def added_count(self) -> int:
        """Number of added lines in this hunk."""
        return sum(1 for change in self.changes if change.type == DiffChangeType.ADDED)

    @property
    def removed_count(self) -> int:
        """Number of removed lines in this hunk."""
        return sum(1 for change in self.changes if change.type == DiffChangeType.REMOVED)


@dataclass(frozen=True)
class FileDiff:
    """Represents the set of hunks changing a single file."""

    old_file: str
    new_file: str
    hunks: Tuple[DiffHunk, ...] = field(default_factory=tuple)

    @property
    def added_count(self) -> int:
        """Number of added lines across all hunks."""
        return sum(hunk.added_count for hunk in self.hunks)

    @property
    def removed_count(self) -> int:
        """Number of removed lines across all hunks."""
        return sum(hunk.removed_count for hunk in self.hunks)
