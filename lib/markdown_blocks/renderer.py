"""
Renderers for Markdown Preview Parser

This module converts a parsed block list into HTML for the embedded
preview. Table cells go through the code span aware cell renderer; all
other text is escaped verbatim, inline markup is left to the consumer.
"""

from typing import Any, Dict, List, Optional, Sequence

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
    Table,
)
from .cell_renderer import escape_html

DEFAULT_STYLESHEET = """\
body { font-family: -apple-system, "Segoe UI", Helvetica, Arial, sans-serif; line-height: 1.5; margin: 16px; }
table { border-collapse: collapse; }
th, td { border: 1px solid #d0d7de; padding: 4px 10px; }
th { background: #f6f8fa; }
.a-left { text-align: left; }
.a-center { text-align: center; }
.a-right { text-align: right; }
li.task { list-style: none; }
li.indent-1 { margin-left: 18px; }
li.indent-2 { margin-left: 36px; }
li.indent-3 { margin-left: 54px; }
li.indent-4 { margin-left: 72px; }
blockquote { border-left: 4px solid #d0d7de; margin-left: 0; padding-left: 10px; font-style: italic; }
pre { background: #f0f0f3; border-radius: 8px; padding: 10px; overflow-x: auto; }
"""


class HTMLRenderer:
    """
    Renderer that converts a block list to HTML.

    Produces one element per block. render() returns a fragment,
    render_page() wraps it in a standalone HTML document.
    """

    def __init__(self, options: Optional[Dict[str, Any]] = None):
        """
        Initialize the HTML renderer.

        Args:
            options: Optional rendering configuration
        """
        self.options = options or {}

        # Default rendering options
        self.code_class_prefix = self.options.get("code_class_prefix", "language-")
        self.css = self.options.get("css", "")
        self.default_title = self.options.get("title", "Markdown Preview")

    def render(self, blocks: Sequence[Block]) -> str:
        """
        Render blocks to an HTML fragment.

        Args:
            blocks: Blocks produced by the block parser

        Returns:
            HTML string, one element per block
        """
        return "\n".join(self._render_block(block) for block in blocks)

    def render_page(self, blocks: Sequence[Block], title: Optional[str] = None) -> str:
        """Render blocks to a complete HTML document."""
        return self.wrap_page(self.render(blocks), title)

    def wrap_page(self, body: str, title: Optional[str] = None) -> str:
        """Wrap an HTML fragment into a document with the preview stylesheet."""
        stylesheet = DEFAULT_STYLESHEET + (self.css or "")
        page_title = escape_html(title or self.default_title)
        return (
            "<!DOCTYPE html>\n"
            "<html>\n"
            "<head>\n"
            '<meta charset="utf-8">\n'
            '<meta name="viewport" content="width=device-width, initial-scale=1">\n'
            f"<title>{page_title}</title>\n"
            f"<style>\n{stylesheet}</style>\n"
            "</head>\n"
            f"<body>\n{body}\n</body>\n"
            "</html>\n"
        )

    def _render_block(self, block: Block) -> str:
        """Render a single block to HTML."""
        if isinstance(block, Heading):
            return self._render_heading(block)
        elif isinstance(block, Paragraph):
            return f"<p>{escape_html(block.text)}</p>"
        elif isinstance(block, BulletList):
            return self._render_list(block)
        elif isinstance(block, OrderedList):
            return self._render_ordered_list(block)
        elif isinstance(block, Table):
            return self.render_table(block)
        elif isinstance(block, Blockquote):
            return self._render_blockquote(block)
        elif isinstance(block, Rule):
            return "<hr>"
        elif isinstance(block, CodeBlock):
            return self._render_code_block(block)
        else:
            # Fallback for unknown block types
            return f"<!-- Unknown block type: {type(block).__name__} -->"

    def _render_heading(self, block: Heading) -> str:
        return f"<h{block.level}>{escape_html(block.text)}</h{block.level}>"

    def _render_list(self, block: BulletList) -> str:
        items = [self._render_list_item(item) for item in block.items]
        return "<ul>\n" + "\n".join(items) + "\n</ul>"

    def _render_ordered_list(self, block: OrderedList) -> str:
        items = []
        for index, item in enumerate(block.items, start=1):
            number = item.order if item.order is not None else index
            items.append(self._render_list_item(item, number))
        return "<ol>\n" + "\n".join(items) + "\n</ol>"

    def _render_list_item(self, item: ListItem, number: Optional[int] = None) -> str:
        classes: List[str] = []
        if item.checkbox is not None:
            classes.append("task")
        if item.indent > 0:
            classes.append(f"indent-{item.indent}")

        attrs = ""
        if classes:
            attrs += f' class="{" ".join(classes)}"'
        if number is not None:
            attrs += f' value="{number}"'

        content = escape_html(item.text)
        if item.checkbox is not None:
            checked = " checked" if item.checkbox else ""
            content = f'<input type="checkbox" disabled{checked}> {content}'

        return f"<li{attrs}>{content}</li>"

    def _render_blockquote(self, block: Blockquote) -> str:
        content = "<br>\n".join(escape_html(line) for line in block.text.split("\n"))
        return f"<blockquote><p>{content}</p></blockquote>"

    def _render_code_block(self, block: CodeBlock) -> str:
        content = escape_html(block.text)
        if block.language:
            class_attr = f' class="{self.code_class_prefix}{escape_html(block.language)}"'
            return f"<pre><code{class_attr}>{content}</code></pre>"
        return f"<pre><code>{content}</code></pre>"

    def render_table(self, table: Table) -> str:
        """
        Render a table block.

        Every header and body cell carries the a-left/a-center/a-right class
        of its column.
        """
        classes = [alignment.css_class for alignment in table.alignments]

        header_cells = "".join(
            f'<th class="{css}">{html}</th>' for css, html in zip(classes, table.header_html())
        )
        lines = ["<table>", "<thead>", f"<tr>{header_cells}</tr>", "</thead>", "<tbody>"]
        for index in range(len(table.rows)):
            row_cells = "".join(
                f'<td class="{css}">{html}</td>' for css, html in zip(classes, table.row_html(index))
            )
            lines.append(f"<tr>{row_cells}</tr>")
        lines.extend(["</tbody>", "</table>"])

        return "\n".join(lines)


class SourceRenderer:
    """Renderer for the raw source view: the document text in a <pre> block."""

    def render(self, text: str) -> str:
        return f'<pre class="source">{escape_html(text)}</pre>'
