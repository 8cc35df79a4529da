"""View models handed to the HTML diff template."""

from dataclasses import dataclass, field
from typing import List


@dataclass
class HTMLLine:
    """A single rendered row within a hunk."""

    line_number: int
    content: str
    css_class: str = ""  # "", "added" or "removed"
    content_id: str = ""  # Element id for hidden content, set only when is_large
    is_large: bool = False


@dataclass
class HTMLHunk:
    """A rendered hunk: its header row followed by its lines."""

    header: str
    lines: List[HTMLLine] = field(default_factory=list)


@dataclass
class HTMLFileDiff:
    """A rendered file card with running change totals."""

    file_name: str
    added_count: int = 0
    removed_count: int = 0
    hunks: List[HTMLHunk] = field(default_factory=list)
