"""
Line Scanner for Markdown Preview Parser

This module splits a document into lines and provides the cursor the block
parser walks over them with. Empty lines are preserved; they matter for
block boundaries.
"""

from typing import List, Optional


def split_lines(text: str) -> List[str]:
    """
    Split text into lines on \\n, \\r\\n or \\r.

    Unlike str.splitlines(), a trailing newline yields a final empty line and
    form feeds or other Unicode separators are not treated as line breaks.
    """
    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    return normalized.split("\n")


class LineScanner:
    """
    Cursor over the lines of a document.

    The block parser reads the current line, may peek one line ahead
    (setext underlines) or hand the whole line list to a sub-parser
    (tables), and then advances by one or more lines.
    """

    def __init__(self, text: str):
        self.lines = split_lines(text)
        self.pos = 0

    @property
    def current(self) -> Optional[str]:
        """The line under the cursor, or None at the end."""
        return self.lines[self.pos] if self.pos < len(self.lines) else None

    def peek(self, offset: int = 1) -> Optional[str]:
        """Look ahead without moving the cursor."""
        index = self.pos + offset
        return self.lines[index] if 0 <= index < len(self.lines) else None

    def advance(self, count: int = 1) -> None:
        """Move the cursor forward."""
        self.pos = min(self.pos + count, len(self.lines))

    def seek(self, index: int) -> None:
        """Move the cursor to an absolute line index."""
        self.pos = max(0, min(index, len(self.lines)))

    def is_at_end(self) -> bool:
        """Check if all lines have been consumed."""
        return self.pos >= len(self.lines)

    def __len__(self) -> int:
        return len(self.lines)
