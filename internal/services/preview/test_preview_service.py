"""
Tests for the preview service.

Tests cover:
- Document loading (encodings, extensions, missing files, excerpts)
- HTML rendering in preview and source modes, pages and fragments
- JSON block output
- Settings taken from the configuration manager
"""

import json
import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import Mock

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "../../..")))

from internal.services.preview import (  # noqa: E402
    MODE_SOURCE,
    DocumentLoadError,
    MarkdownFile,
    PreviewError,
    PreviewService,
    UnsupportedDocumentError,
    isSupportedDocument,
)
from internal.services.preview.document import decodeDocument  # noqa: E402

SAMPLE_DOCUMENT = """# Commands

| Name | Usage |
|:-----|------:|
| list | `ls -la` |
| copy | `cp a b` |

- [x] written
- [ ] reviewed
"""


class TestMarkdownFile(unittest.TestCase):
    """Test document loading."""

    def setUp(self):
        self.tempDir = tempfile.TemporaryDirectory()
        self.root = Path(self.tempDir.name)

    def tearDown(self):
        self.tempDir.cleanup()

    def testLoadUtf8(self):
        path = self.root / "doc.md"
        path.write_text("# Привет\n", encoding="utf-8")
        document = MarkdownFile.load(path)
        self.assertEqual(document.contents, "# Привет\n")
        self.assertEqual(document.fileName, "doc.md")

    def testLoadUtf8WithBom(self):
        path = self.root / "bom.md"
        path.write_bytes("\ufeff# Title".encode("utf-8"))
        self.assertEqual(MarkdownFile.load(path).contents, "# Title")

    def testLoadUtf16(self):
        path = self.root / "wide.markdown"
        path.write_bytes("# Wide\n".encode("utf-16"))
        self.assertEqual(MarkdownFile.load(path).contents, "# Wide\n")

    def testUnsupportedExtension(self):
        path = self.root / "image.png"
        path.write_bytes(b"\x89PNG")
        with self.assertRaises(UnsupportedDocumentError):
            MarkdownFile.load(path)

    def testExtensionCheckCanBeDisabled(self):
        path = self.root / "notes.rst"
        path.write_text("plain")
        self.assertEqual(MarkdownFile.load(path, checkExtension=False).contents, "plain")

    def testMissingFile(self):
        with self.assertRaises(DocumentLoadError):
            MarkdownFile.load(self.root / "missing.md")

    def testDirectoryIsNotADocument(self):
        (self.root / "folder.md").mkdir()
        with self.assertRaises(DocumentLoadError):
            MarkdownFile.load(self.root / "folder.md")

    def testSupportedExtensions(self):
        self.assertTrue(isSupportedDocument("README.MD"))
        self.assertTrue(isSupportedDocument("notes.txt"))
        self.assertFalse(isSupportedDocument("script.py"))
        self.assertFalse(isSupportedDocument("Makefile"))

    def testExcerpt(self):
        document = MarkdownFile(Path("a.md"), "one\ntwo\nthree")
        self.assertEqual(document.excerpt(2).contents, "one\ntwo")
        self.assertIs(document.excerpt(0), document)
        self.assertIs(document.excerpt(10), document)

    def testDecodeDocument(self):
        self.assertEqual(decodeDocument(b"plain"), "plain")
        self.assertEqual(decodeDocument("é".encode("utf-16")), "é")


class TestPreviewService(unittest.TestCase):
    """Test rendering through the service."""

    def setUp(self):
        self.tempDir = tempfile.TemporaryDirectory()
        self.root = Path(self.tempDir.name)
        self.path = self.root / "commands.md"
        self.path.write_text(SAMPLE_DOCUMENT, encoding="utf-8")
        self.service = PreviewService()

    def tearDown(self):
        self.tempDir.cleanup()

    def testPreviewPage(self):
        document = self.service.loadDocument(self.path)
        html = self.service.renderHtml(document)
        self.assertTrue(html.startswith("<!DOCTYPE html>"))
        self.assertIn("<title>commands.md</title>", html)
        self.assertIn("<h1>Commands</h1>", html)
        self.assertIn('<td class="a-right"><code>ls -la</code></td>', html)
        self.assertIn('<li class="task"><input type="checkbox" disabled checked> written</li>', html)

    def testFragment(self):
        document = self.service.loadDocument(self.path)
        html = self.service.renderHtml(document, fragment=True)
        self.assertTrue(html.startswith("<h1>Commands</h1>\n<table>"))
        self.assertNotIn("<html", html)

    def testSourceMode(self):
        document = self.service.loadDocument(self.path)
        html = self.service.renderHtml(document, mode=MODE_SOURCE, fragment=True)
        self.assertTrue(html.startswith('<pre class="source"># Commands'))
        self.assertIn("| list | `ls -la` |", html)

    def testUnknownMode(self):
        document = self.service.loadDocument(self.path)
        with self.assertRaises(PreviewError):
            self.service.renderHtml(document, mode="slides")

    def testJson(self):
        document = self.service.loadDocument(self.path)
        data = json.loads(self.service.renderJson(document))
        self.assertEqual([block["type"] for block in data], ["heading", "table", "list"])
        self.assertEqual(data[1]["alignments"], ["left", "right"])
        self.assertEqual(data[1]["rows"][1], ["copy", "`cp a b`"])

    def testExcerptOverride(self):
        document = self.service.loadDocument(self.path, excerptLines=1)
        self.assertEqual(document.contents, "# Commands")

    def testConfiguredService(self):
        configManager = Mock()
        configManager.getParserConfig.return_value = {"tab_width": 4, "indent_step": 4}
        configManager.getRendererConfig.return_value = {"code_class_prefix": "lang-", "title": "Docs"}
        configManager.getPreviewConfig.return_value = {"default-mode": "source", "excerpt-lines": 3}
        service = PreviewService(configManager)

        document = service.loadDocument(self.path)
        self.assertEqual(document.contents, "# Commands\n\n| Name | Usage |")
        self.assertTrue(service.renderHtml(document, fragment=True).startswith('<pre class="source">'))

        codeDocument = MarkdownFile(Path("code.md"), "```sh\nls\n```\n    - nested")
        html = service.renderHtml(codeDocument, mode="preview", fragment=True)
        self.assertIn('<code class="lang-sh">ls</code>', html)
        self.assertIn('<li class="indent-1">nested</li>', html)


if __name__ == "__main__":
    unittest.main()
