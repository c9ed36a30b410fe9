"""
Preview service: renders markdown documents for display

This module ties document loading, block parsing and HTML rendering
together, using the parser, renderer and preview sections of the
configuration.
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Optional, Union

from lib.markdown_blocks import HTMLRenderer, MarkdownParser, SourceRenderer, blocks_to_json

from .document import MarkdownFile
from .exceptions import PreviewError

if TYPE_CHECKING:
    from internal.config.manager import ConfigManager

logger = logging.getLogger(__name__)

MODE_PREVIEW = "preview"
MODE_SOURCE = "source"


class PreviewService:
    """
    Service rendering markdown documents in preview or source mode.

    Usage:
        service = PreviewService(configManager)
        document = service.loadDocument("README.md")
        html = service.renderHtml(document)
        blocksJson = service.renderJson(document)
    """

    def __init__(self, configManager: Optional["ConfigManager"] = None):
        """
        Initialize preview service.

        Args:
            configManager: Source of parser, renderer and preview settings,
                defaults are used when None
        """
        parserOptions: Dict[str, Any] = {}
        rendererOptions: Dict[str, Any] = {}
        previewConfig: Dict[str, Any] = {"default-mode": MODE_PREVIEW, "excerpt-lines": 0}
        if configManager is not None:
            parserOptions = configManager.getParserConfig()
            rendererOptions = configManager.getRendererConfig()
            previewConfig = configManager.getPreviewConfig()

        self.defaultMode: str = previewConfig["default-mode"]
        self.excerptLines: int = previewConfig["excerpt-lines"]

        self.parser = MarkdownParser({**parserOptions, "html_options": rendererOptions})
        self.htmlRenderer = HTMLRenderer(rendererOptions)
        self.sourceRenderer = SourceRenderer()

    def loadDocument(self, path: Union[str, Path], excerptLines: Optional[int] = None) -> MarkdownFile:
        """
        Load a document, optionally cut to its first lines.

        Args:
            path: Markdown file to load
            excerptLines: Line limit, overrides the configured one; 0 means no limit

        Returns:
            Loaded document

        Raises:
            DocumentLoadError: If the file cannot be read or decoded
            UnsupportedDocumentError: If the file is not a markdown document
        """
        document = MarkdownFile.load(path)
        limit = self.excerptLines if excerptLines is None else excerptLines
        return document.excerpt(limit)

    def renderHtml(self, document: MarkdownFile, mode: Optional[str] = None, fragment: bool = False) -> str:
        """
        Render a document to HTML.

        Args:
            document: Loaded document
            mode: "preview" renders blocks, "source" shows the raw text;
                defaults to the configured mode
            fragment: Return only the body content instead of a full page

        Returns:
            HTML string

        Raises:
            PreviewError: If mode is unknown
        """
        mode = mode or self.defaultMode
        if mode == MODE_PREVIEW:
            blocks = self.parser.parse(document.contents)
            logger.debug(f"Rendering {document.fileName}: {self.parser.get_stats()}")
            body = self.htmlRenderer.render(blocks)
        elif mode == MODE_SOURCE:
            body = self.sourceRenderer.render(document.contents)
        else:
            raise PreviewError(f"Unknown preview mode: {mode}")

        if fragment:
            return body
        return self.htmlRenderer.wrap_page(body, document.fileName)

    def renderJson(self, document: MarkdownFile) -> str:
        """Render the parsed blocks of a document as JSON."""
        return blocks_to_json(self.parser.parse(document.contents))
