"""
Preview service exceptions

This module defines the exception hierarchy for the preview service.
All preview-related errors inherit from PreviewError base class.
"""


class PreviewError(Exception):
    """
    Base exception for all preview service errors.

    Catch this to handle any preview service error generically.
    """

    pass


class DocumentLoadError(PreviewError):
    """
    Exception raised when a document cannot be loaded.

    This exception is raised when:
    - The file does not exist or is not a regular file
    - The file cannot be read
    - The content cannot be decoded as UTF-8, UTF-16 or ASCII

    Args:
        message: Description of the load failure
        originalError: The original exception that caused this error (optional)
    """

    def __init__(self, message: str, originalError: Exception | None = None):
        super().__init__(message)
        self.originalError = originalError


class UnsupportedDocumentError(PreviewError):
    """
    Exception raised when a file does not look like a markdown or text document.

    Args:
        message: Description including the rejected file name
    """

    pass
