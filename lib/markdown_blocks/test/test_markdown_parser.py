"""
Tests for the MarkdownParser facade and the convenience functions.
"""

import json
import os
import sys
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "..", ".."))

from lib.markdown_blocks import (  # noqa: E402
    BlockParser,
    LineScanner,
    ListItem,
    MarkdownParser,
    blocks_to_json,
    parse_markdown,
    split_lines,
)


class TestMarkdownParser(unittest.TestCase):
    """Test the parser facade."""

    def setUp(self):
        self.parser = MarkdownParser()

    def test_rejects_non_string(self):
        with self.assertRaises(ValueError):
            self.parser.parse(None)  # type: ignore[arg-type]
        with self.assertRaises(ValueError):
            self.parser.parse(b"# bytes")  # type: ignore[arg-type]

    def test_stats(self):
        text = "# T\n\n| a | b |\n|---|---|\n| 1 | 2 |\n\n```\nx\n```"
        self.parser.parse(text)
        stats = self.parser.get_stats()
        self.assertEqual(stats["lines_processed"], 9)
        self.assertEqual(stats["blocks_parsed"], 3)
        self.assertEqual(stats["tables_parsed"], 1)
        self.assertEqual(stats["code_blocks_parsed"], 1)

    def test_stats_are_a_copy(self):
        self.parser.parse("text")
        self.parser.get_stats()["blocks_parsed"] = 100
        self.assertEqual(self.parser.get_stats()["blocks_parsed"], 1)

    def test_blocks_json(self):
        data = self.parser.get_blocks_json("# T\n\n- [x] a\n\n| a | b |\n|:-:|--:|\n| 1 | 2 |")
        self.assertEqual(data[0], {"type": "heading", "level": 1, "text": "T"})
        self.assertEqual(
            data[1],
            {"type": "list", "items": [{"text": "a", "indent": 0, "checkbox": True, "order": None}]},
        )
        self.assertEqual(
            data[2],
            {
                "type": "table",
                "headers": ["a", "b"],
                "alignments": ["center", "right"],
                "rows": [["1", "2"]],
            },
        )

    def test_blocks_to_json(self):
        blocks = parse_markdown("***\n\n```py\nprint()\n```\n> q")
        data = json.loads(blocks_to_json(blocks))
        self.assertEqual(
            data,
            [
                {"type": "rule"},
                {"type": "code", "text": "print()", "language": "py"},
                {"type": "blockquote", "text": "q"},
            ],
        )

    def test_tab_width_option(self):
        blocks = parse_markdown("\t- a", tab_width=2)
        self.assertEqual(blocks[0].items[0], ListItem("a", indent=1))

    def test_indent_step_option(self):
        blocks = parse_markdown("    - a", indent_step=4)
        self.assertEqual(blocks[0].items[0].indent, 1)

    def test_html_options_passed_to_renderer(self):
        parser = MarkdownParser({"html_options": {"code_class_prefix": "x-"}})
        self.assertEqual(parser.parse_to_html("```c\n1\n```"), '<pre><code class="x-c">1</code></pre>')

    def test_parse_to_page(self):
        page = self.parser.parse_to_page("para", title="T")
        self.assertIn("<p>para</p>", page)
        self.assertIn("<title>T</title>", page)

    def test_blocks_are_immutable(self):
        block = parse_markdown("# T")[0]
        with self.assertRaises(AttributeError):
            block.text = "changed"  # type: ignore[misc]


class TestLineScanner(unittest.TestCase):
    """Test line splitting and the cursor."""

    def test_split_keeps_empty_lines(self):
        self.assertEqual(split_lines("a\n\nb\n"), ["a", "", "b", ""])
        self.assertEqual(split_lines(""), [""])

    def test_split_normalizes_line_endings(self):
        self.assertEqual(split_lines("a\r\nb\rc"), ["a", "b", "c"])

    def test_cursor(self):
        scanner = LineScanner("a\nb\nc")
        self.assertEqual(scanner.current, "a")
        self.assertEqual(scanner.peek(), "b")
        scanner.advance(2)
        self.assertEqual(scanner.current, "c")
        self.assertIsNone(scanner.peek())
        scanner.advance(5)
        self.assertTrue(scanner.is_at_end())
        self.assertIsNone(scanner.current)
        scanner.seek(0)
        self.assertEqual(len(scanner), 3)
        self.assertEqual(scanner.current, "a")

    def test_block_parser_instances_are_independent(self):
        first = BlockParser("- a")
        second = BlockParser("1. b")
        self.assertEqual(len(first.parse()), 1)
        self.assertEqual(second.parse()[0].items[0].order, 1)


if __name__ == "__main__":
    unittest.main()
