"""
Block Parser for Markdown Preview Parser

This module classifies source lines and groups them into block-level
elements: headings, paragraphs, lists, tables, block quotes, thematic breaks
and fenced code blocks.

Parsing is line oriented. Consecutive paragraph, list, ordered list and quote
lines are collected in run buffers; a line of a different kind flushes the
open run into a block before it is handled.
"""

import re
from typing import Any, Dict, List, Optional, Tuple

from .blocks import (
    Block,
    Blockquote,
    BulletList,
    CodeBlock,
    Heading,
    ListItem,
    OrderedList,
    Paragraph,
    Rule,
)
from .line_scanner import LineScanner
from .table_parser import try_parse_table

CODE_FENCE = "```"
BULLET_MARKERS = "-*+"
RULE_CHARS = "-*_"
SETEXT_LEVELS = {"=": 1, "-": 2}

DEFAULT_TAB_WIDTH = 4
DEFAULT_INDENT_STEP = 2

_ORDERED_MARKER_PATTERN = re.compile(r"^(\d+)\. ")


def parse_heading(line: str) -> Optional[Tuple[int, str]]:
    """Parse an ATX heading line into (level, text)."""
    trimmed = line.strip()
    level = len(trimmed) - len(trimmed.lstrip("#"))
    if not 1 <= level <= 6:
        return None

    rest = trimmed[level:]
    if not rest.startswith(" "):
        return None

    text = rest.strip()
    if not text:
        return None
    return level, text


def parse_setext_underline(line: Optional[str]) -> Optional[int]:
    """Return the heading level a setext underline stands for, if it is one."""
    if line is None:
        return None
    trimmed = line.strip()
    if len(trimmed) < 3:
        return None
    marker = trimmed[0]
    if marker not in SETEXT_LEVELS or trimmed.strip(marker):
        return None
    return SETEXT_LEVELS[marker]


def parse_checkbox(text: str) -> Tuple[str, Optional[bool]]:
    """Strip a task list checkbox prefix from item text."""
    if text.startswith("[ ] "):
        return text[4:], False
    if text.startswith("[x] ") or text.startswith("[X] "):
        return text[4:], True
    return text, None


def indent_level(line: str, tab_width: int = DEFAULT_TAB_WIDTH, indent_step: int = DEFAULT_INDENT_STEP) -> int:
    """
    Compute list nesting depth from leading whitespace.

    Spaces count as one column and tabs as tab_width columns; every
    indent_step columns is one level.
    """
    width = 0
    for char in line:
        if char == " ":
            width += 1
        elif char == "\t":
            width += tab_width
        else:
            break
    return max(0, width // max(1, indent_step))


def is_rule(line: str) -> bool:
    """Check if a line is a thematic break made of one repeated character."""
    trimmed = line.strip()
    if len(trimmed) < 3:
        return False
    return trimmed[0] in RULE_CHARS and not trimmed.strip(trimmed[0])


def parse_blockquote(line: str) -> Optional[str]:
    """Return the quoted text of a block quote line."""
    trimmed = line.strip()
    if not trimmed.startswith(">"):
        return None
    remaining = trimmed[1:]
    if remaining.startswith(" "):
        remaining = remaining[1:]
    return remaining.strip()


class BlockParser:
    """
    Parser for block-level Markdown elements.

    A BlockParser instance holds the state of a single parse: the line
    cursor, the run buffers and the fenced code state. Create a new one for
    every document.
    """

    def __init__(self, text: str, options: Optional[Dict[str, Any]] = None):
        self.scanner = LineScanner(text)
        self.options = options or {}

        # Parser options
        self.tab_width = int(self.options.get("tab_width", DEFAULT_TAB_WIDTH))
        self.indent_step = int(self.options.get("indent_step", DEFAULT_INDENT_STEP))

        self.blocks: List[Block] = []

        # Run buffers, at most one of them is non-empty at any time
        self.paragraph_lines: List[str] = []
        self.list_items: List[ListItem] = []
        self.ordered_list_items: List[ListItem] = []
        self.quote_lines: List[str] = []

        self.in_code_fence = False
        self.code_lines: List[str] = []
        self.code_language: Optional[str] = None

    def parse(self) -> List[Block]:
        """
        Parse the document into blocks.

        Returns:
            Ordered list of blocks
        """
        while not self.scanner.is_at_end():
            self._parse_line(self.scanner.current)  # type: ignore[arg-type]

        self.flush_all()
        if self.in_code_fence and self.code_lines:
            self._emit_code_block()

        return self.blocks

    def _parse_line(self, line: str) -> None:
        """Classify the current line and advance past everything it consumed."""
        if line.startswith(CODE_FENCE):
            self._toggle_code_fence(line)
            self.scanner.advance()
            return

        if self.in_code_fence:
            self.code_lines.append(line)
            self.scanner.advance()
            return

        if not line.strip():
            self.flush_all()
            self.scanner.advance()
            return

        setext_level = parse_setext_underline(self.scanner.peek())
        if setext_level is not None:
            self.flush_all()
            self.blocks.append(Heading(setext_level, line.strip()))
            self.scanner.advance(2)
            return

        table_match = try_parse_table(self.scanner.lines, self.scanner.pos)
        if table_match is not None:
            table, next_index = table_match
            self.flush_all()
            self.blocks.append(table)
            self.scanner.seek(next_index)
            return

        self._parse_single_line(line)
        self.scanner.advance()

    def _parse_single_line(self, line: str) -> None:
        """Handle constructs that never span more than the current line."""
        heading = parse_heading(line)
        if heading is not None:
            self.flush_all()
            self.blocks.append(Heading(*heading))
            return

        item = self._parse_list_item(line)
        if item is not None:
            self.flush_paragraph()
            self.flush_ordered_list()
            self.flush_quote()
            self.list_items.append(item)
            return

        item = self._parse_ordered_list_item(line)
        if item is not None:
            self.flush_paragraph()
            self.flush_list()
            self.flush_quote()
            self.ordered_list_items.append(item)
            return

        quote = parse_blockquote(line)
        if quote is not None:
            self.flush_paragraph()
            self.flush_list()
            self.flush_ordered_list()
            self.quote_lines.append(quote)
            return

        if is_rule(line):
            self.flush_all()
            self.blocks.append(Rule())
            return

        self.flush_list()
        self.flush_ordered_list()
        self.flush_quote()
        self.paragraph_lines.append(line.strip())

    def _parse_list_item(self, line: str) -> Optional[ListItem]:
        """Parse an unordered list item ("- text", "* text", "+ text")."""
        trimmed = line.strip()
        if len(trimmed) < 3 or trimmed[0] not in BULLET_MARKERS or trimmed[1] != " ":
            return None

        text, checkbox = parse_checkbox(trimmed[2:].strip())
        return ListItem(
            text=text,
            indent=indent_level(line, self.tab_width, self.indent_step),
            checkbox=checkbox,
        )

    def _parse_ordered_list_item(self, line: str) -> Optional[ListItem]:
        """Parse an ordered list item ("12. text")."""
        trimmed = line.strip()
        match = _ORDERED_MARKER_PATTERN.match(trimmed)
        if not match:
            return None

        text, checkbox = parse_checkbox(trimmed[match.end():].strip())
        return ListItem(
            text=text,
            indent=indent_level(line, self.tab_width, self.indent_step),
            checkbox=checkbox,
            order=int(match.group(1)),
        )

    def _toggle_code_fence(self, line: str) -> None:
        """Open or close a fenced code block."""
        self.flush_all()
        if self.in_code_fence:
            self._emit_code_block()
            self.in_code_fence = False
        else:
            self.code_language = line[len(CODE_FENCE):].strip("`").strip() or None
            self.in_code_fence = True

    def _emit_code_block(self) -> None:
        self.blocks.append(CodeBlock("\n".join(self.code_lines), self.code_language))
        self.code_lines = []
        self.code_language = None

    # Flush helpers

    def flush_paragraph(self) -> None:
        if not self.paragraph_lines:
            return
        self.blocks.append(Paragraph(" ".join(self.paragraph_lines)))
        self.paragraph_lines = []

    def flush_list(self) -> None:
        if not self.list_items:
            return
        self.blocks.append(BulletList(tuple(self.list_items)))
        self.list_items = []

    def flush_ordered_list(self) -> None:
        if not self.ordered_list_items:
            return
        self.blocks.append(OrderedList(tuple(self.ordered_list_items)))
        self.ordered_list_items = []

    def flush_quote(self) -> None:
        if not self.quote_lines:
            return
        self.blocks.append(Blockquote("\n".join(self.quote_lines)))
        self.quote_lines = []

    def flush_all(self) -> None:
        """Turn every open run into a block, in buffer order."""
        self.flush_paragraph()
        self.flush_list()
        self.flush_ordered_list()
        self.flush_quote()
