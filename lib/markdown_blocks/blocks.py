"""
Block Classes for Markdown Preview Parser

This module defines the immutable value types produced by the block parser.
A parsed document is a flat, ordered list of blocks; there is no tree and no
parent/child linkage between blocks.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from .cell_renderer import render_cell_html


class BlockType(Enum):
    """Enumeration of all block types."""
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    LIST = "list"
    ORDERED_LIST = "ordered_list"
    TABLE = "table"
    BLOCKQUOTE = "blockquote"
    RULE = "rule"
    CODE = "code"


class Alignment(Enum):
    """Table column alignment, derived from the delimiter row."""
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"

    @property
    def css_class(self) -> str:
        return f"a-{self.value}"


@dataclass(frozen=True)
class ListItem:
    """
    Single item of an unordered or ordered list.

    Attributes:
        text: Item text with the marker and checkbox prefix removed
        indent: Nesting depth computed from leading whitespace
        checkbox: None for plain items, False/True for [ ] and [x] items
        order: Literal numeral of an ordered item, None for unordered items
    """
    text: str
    indent: int = 0
    checkbox: Optional[bool] = None
    order: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "indent": self.indent,
            "checkbox": self.checkbox,
            "order": self.order,
        }


class Block(ABC):
    """Base class for all blocks."""

    block_type: BlockType

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Convert block to dictionary representation."""
        pass


@dataclass(frozen=True)
class Heading(Block):
    """Heading with level (1-6)."""
    level: int
    text: str
    block_type: BlockType = field(default=BlockType.HEADING, init=False, repr=False)

    def __post_init__(self):
        if not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.block_type.value, "level": self.level, "text": self.text}


@dataclass(frozen=True)
class Paragraph(Block):
    """Paragraph; source lines are joined with a single space."""
    text: str
    block_type: BlockType = field(default=BlockType.PARAGRAPH, init=False, repr=False)

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.block_type.value, "text": self.text}


@dataclass(frozen=True)
class BulletList(Block):
    """Unordered list."""
    items: Tuple[ListItem, ...]
    block_type: BlockType = field(default=BlockType.LIST, init=False, repr=False)

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.block_type.value, "items": [item.to_dict() for item in self.items]}


@dataclass(frozen=True)
class OrderedList(Block):
    """Ordered list; each item carries the numeral it was written with."""
    items: Tuple[ListItem, ...]
    block_type: BlockType = field(default=BlockType.ORDERED_LIST, init=False, repr=False)

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.block_type.value, "items": [item.to_dict() for item in self.items]}


@dataclass(frozen=True)
class Table(Block):
    """
    Pipe table.

    Every row has exactly one cell per header and there is one alignment per
    header. Cell text is kept raw; use header_html()/row_html() to get the
    rendered fragments.
    """
    headers: Tuple[str, ...]
    alignments: Tuple[Alignment, ...]
    rows: Tuple[Tuple[str, ...], ...]
    block_type: BlockType = field(default=BlockType.TABLE, init=False, repr=False)

    def __post_init__(self):
        if len(self.headers) != len(self.alignments):
            raise ValueError(
                f"Table has {len(self.headers)} headers but {len(self.alignments)} alignments"
            )
        for index, row in enumerate(self.rows):
            if len(row) != len(self.headers):
                raise ValueError(
                    f"Table row {index} has {len(row)} cells, expected {len(self.headers)}"
                )

    @property
    def column_count(self) -> int:
        return len(self.headers)

    def header_html(self) -> List[str]:
        """Rendered HTML fragment for every header cell."""
        return [render_cell_html(cell) for cell in self.headers]

    def row_html(self, index: int) -> List[str]:
        """Rendered HTML fragment for every cell of the given body row."""
        return [render_cell_html(cell) for cell in self.rows[index]]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.block_type.value,
            "headers": list(self.headers),
            "alignments": [alignment.value for alignment in self.alignments],
            "rows": [list(row) for row in self.rows],
        }


@dataclass(frozen=True)
class Blockquote(Block):
    """Block quote; quoted lines are joined with a newline."""
    text: str
    block_type: BlockType = field(default=BlockType.BLOCKQUOTE, init=False, repr=False)

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.block_type.value, "text": self.text}


@dataclass(frozen=True)
class Rule(Block):
    """Thematic break."""
    block_type: BlockType = field(default=BlockType.RULE, init=False, repr=False)

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.block_type.value}


@dataclass(frozen=True)
class CodeBlock(Block):
    """Fenced code block with optional language from the opening fence."""
    text: str
    language: Optional[str] = None
    block_type: BlockType = field(default=BlockType.CODE, init=False, repr=False)

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.block_type.value, "text": self.text, "language": self.language}
