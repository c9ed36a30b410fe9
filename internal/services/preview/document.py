"""
Markdown document loading

This module reads markdown files from disk for the preview service.
"""

import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Tuple, Union

from lib.markdown_blocks import split_lines

from .exceptions import DocumentLoadError, UnsupportedDocumentError

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = (".md", ".markdown", ".mdown", ".txt")

# Tried in order, first successful decoding wins
DOCUMENT_ENCODINGS: Tuple[str, ...] = ("utf-8-sig", "utf-16", "ascii")


def decodeDocument(data: bytes) -> str:
    """
    Decode raw document bytes.

    Args:
        data: File content

    Returns:
        Decoded text

    Raises:
        DocumentLoadError: If no supported encoding can decode the data
    """
    for encoding in DOCUMENT_ENCODINGS:
        try:
            return data.decode(encoding)
        except UnicodeDecodeError:
            logger.debug(f"Document is not valid {encoding}")
    raise DocumentLoadError(f"Unsupported text encoding, tried: {', '.join(DOCUMENT_ENCODINGS)}")


def isSupportedDocument(path: Union[str, Path]) -> bool:
    """Check if the file extension is one the preview accepts."""
    return Path(path).suffix.lower() in SUPPORTED_EXTENSIONS


@dataclass(frozen=True)
class MarkdownFile:
    """
    Loaded markdown document.

    Attributes:
        path: Location the document was read from
        contents: Decoded document text
    """

    path: Path
    contents: str

    @property
    def fileName(self) -> str:
        return self.path.name

    @classmethod
    def load(cls, path: Union[str, Path], checkExtension: bool = True) -> "MarkdownFile":
        """
        Read and decode a markdown document.

        Args:
            path: File to read
            checkExtension: Reject files without a supported extension

        Returns:
            Loaded MarkdownFile

        Raises:
            UnsupportedDocumentError: If checkExtension is set and the extension is not supported
            DocumentLoadError: If the file cannot be read or decoded
        """
        filePath = Path(path)
        if checkExtension and not isSupportedDocument(filePath):
            raise UnsupportedDocumentError(
                f"{filePath.name} is not a markdown document, supported: {', '.join(SUPPORTED_EXTENSIONS)}"
            )

        if not filePath.is_file():
            raise DocumentLoadError(f"No such file: {filePath}")

        try:
            data = filePath.read_bytes()
        except OSError as e:
            raise DocumentLoadError(f"Failed to read {filePath}: {e}", e) from e

        try:
            contents = decodeDocument(data)
        except DocumentLoadError as e:
            raise DocumentLoadError(f"Failed to decode {filePath}: {e}") from e

        logger.info(f"Loaded {filePath} ({len(data)} bytes)")
        return cls(path=filePath, contents=contents)

    def excerpt(self, maxLines: int) -> "MarkdownFile":
        """Return a copy holding only the first maxLines lines of the document."""
        if maxLines <= 0:
            return self
        lines = split_lines(self.contents)
        if len(lines) <= maxLines:
            return self
        return replace(self, contents="\n".join(lines[:maxLines]))
