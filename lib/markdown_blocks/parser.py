"""
Main Markdown Parser for Markdown Preview Parser

This module provides the MarkdownParser class that runs the block parser
and hands the result to the renderers.
"""

import json
import logging
from typing import Any, Dict, List, Optional, Sequence

from .blocks import Block, CodeBlock, Table
from .block_parser import BlockParser
from .renderer import HTMLRenderer

logger = logging.getLogger(__name__)


class MarkdownParser:
    """
    Main Markdown parser.

    Processing model:
    1. Line scanning: split input into lines
    2. Block parsing: classify lines and group them into blocks
    3. Rendering (optional): convert blocks to HTML

    Parsing never fails for string input: anything that is not recognized
    ends up as paragraph text.
    """

    def __init__(self, options: Optional[Dict[str, Any]] = None):
        """
        Initialize the Markdown parser.

        Args:
            options: Optional parser configuration
        """
        self.options = options or {}

        self.html_renderer = HTMLRenderer(self.options.get("html_options", {}))

        self.parse_stats = self._empty_stats()

    def parse(self, markdown_text: str) -> List[Block]:
        """
        Parse Markdown text into blocks.

        Args:
            markdown_text: The Markdown text to parse

        Returns:
            Ordered list of blocks

        Raises:
            ValueError: If input is not a string
        """
        if not isinstance(markdown_text, str):
            raise ValueError("Input must be a string")

        block_parser = BlockParser(markdown_text, self.options)
        blocks = block_parser.parse()

        self.parse_stats = {
            "lines_processed": len(block_parser.scanner),
            "blocks_parsed": len(blocks),
            "tables_parsed": sum(1 for block in blocks if isinstance(block, Table)),
            "code_blocks_parsed": sum(1 for block in blocks if isinstance(block, CodeBlock)),
        }
        logger.debug(f"Parsed markdown document: {self.parse_stats}")

        return blocks

    def parse_to_html(self, markdown_text: str) -> str:
        """
        Parse Markdown text and render to an HTML fragment.

        Args:
            markdown_text: The Markdown text to parse

        Returns:
            HTML string representation
        """
        return self.html_renderer.render(self.parse(markdown_text))

    def parse_to_page(self, markdown_text: str, title: Optional[str] = None) -> str:
        """Parse Markdown text and render to a complete HTML document."""
        return self.html_renderer.render_page(self.parse(markdown_text), title)

    def get_blocks_json(self, markdown_text: str) -> List[Dict[str, Any]]:
        """
        Parse Markdown text and return blocks as JSON-serializable dictionaries.

        Args:
            markdown_text: The Markdown text to parse

        Returns:
            List of block dictionaries
        """
        return [block.to_dict() for block in self.parse(markdown_text)]

    def get_stats(self) -> Dict[str, Any]:
        """
        Get parsing statistics from the last parse operation.

        Returns:
            Dictionary containing parsing statistics
        """
        return self.parse_stats.copy()

    @staticmethod
    def _empty_stats() -> Dict[str, Any]:
        return {
            "lines_processed": 0,
            "blocks_parsed": 0,
            "tables_parsed": 0,
            "code_blocks_parsed": 0,
        }


# Convenience functions for quick parsing

def parse_markdown(text: str, **options) -> List[Block]:
    """
    Parse Markdown text into blocks.

    Args:
        text: Markdown text to parse
        **options: Parser options

    Returns:
        Ordered list of blocks
    """
    parser = MarkdownParser(options)
    return parser.parse(text)


def markdown_to_html(text: str, **options) -> str:
    """
    Convert Markdown text to an HTML fragment.

    Args:
        text: Markdown text to convert
        **options: Parser and renderer options

    Returns:
        HTML string
    """
    parser = MarkdownParser(options)
    return parser.parse_to_html(text)


def blocks_to_json(blocks: Sequence[Block], indent: Optional[int] = 2) -> str:
    """Serialize blocks to a JSON string."""
    return json.dumps([block.to_dict() for block in blocks], ensure_ascii=False, indent=indent)
