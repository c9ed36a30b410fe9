"""
Markdown Preview Parser v1.0

A small line-oriented Markdown parser used by the preview application.

This module provides:
- Line scanning of Markdown input
- Block classification into a flat list of immutable blocks
- Pipe table parsing with column alignment
- Table cell rendering with code spans
- HTML rendering of the parsed blocks

Usage:
    from lib.markdown_blocks import MarkdownParser, markdown_to_html

    parser = MarkdownParser()
    blocks = parser.parse("# Hello World\\n\\n| A | B |\\n|---|:-:|\\n| 1 | 2 |")

    # HTML fragment
    html = markdown_to_html("Some *text*")

Supported blocks:
- ATX and setext headings
- Paragraphs (soft line breaks collapse to spaces)
- Unordered, ordered and task lists with indentation depth
- Pipe tables
- Block quotes (line breaks preserved)
- Thematic breaks
- Fenced code blocks
"""

from .blocks import (
    Alignment,
    Block,
    Blockquote,
    BlockType,
    BulletList,
    CodeBlock,
    Heading,
    ListItem,
    OrderedList,
    Paragraph,
    Rule,
    Table,
)
from .block_parser import BlockParser
from .cell_renderer import escape_html, render_cell_html
from .line_scanner import LineScanner, split_lines
from .parser import MarkdownParser, blocks_to_json, markdown_to_html, parse_markdown
from .renderer import HTMLRenderer, SourceRenderer
from .table_parser import split_table_row, try_parse_table

__version__ = "1.0.0"
__all__ = [
    "MarkdownParser",
    "parse_markdown",
    "markdown_to_html",
    "blocks_to_json",
    "BlockParser",
    "LineScanner",
    "split_lines",
    "try_parse_table",
    "split_table_row",
    "render_cell_html",
    "escape_html",
    "HTMLRenderer",
    "SourceRenderer",
    # Blocks
    "Block",
    "BlockType",
    "Heading",
    "Paragraph",
    "BulletList",
    "OrderedList",
    "ListItem",
    "Table",
    "Alignment",
    "Blockquote",
    "Rule",
    "CodeBlock",
]
