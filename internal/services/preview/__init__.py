"""
Preview service package

This package loads markdown documents and renders them as HTML (preview or
source mode) or as a JSON block list.
"""

from .document import MarkdownFile, isSupportedDocument
from .exceptions import DocumentLoadError, PreviewError, UnsupportedDocumentError
from .service import MODE_PREVIEW, MODE_SOURCE, PreviewService

__all__ = [
    "PreviewService",
    "MarkdownFile",
    "isSupportedDocument",
    "PreviewError",
    "DocumentLoadError",
    "UnsupportedDocumentError",
    "MODE_PREVIEW",
    "MODE_SOURCE",
]
