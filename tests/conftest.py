"""
Pytest configuration and common fixtures for Markdown Preview tests.

This module provides shared fixtures for testing the command line
application and the logging setup. All fixtures follow camelCase naming
convention.
"""

import logging
import tempfile
from pathlib import Path
from typing import Generator

import pytest

# ============================================================================
# Filesystem Fixtures
# ============================================================================


@pytest.fixture
def tempDir() -> Generator[Path, None, None]:
    """
    Create a temporary directory for test files.

    Yields:
        Path: Directory removed after the test
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def workDir(tempDir, monkeypatch) -> Path:
    """
    Run the test inside the temporary directory.

    The application reads config.toml and .env relative to the current
    directory, so tests must not see the developer's files.

    Returns:
        Path: The temporary directory, now the current directory
    """
    monkeypatch.chdir(tempDir)
    return tempDir


# ============================================================================
# Document Fixtures
# ============================================================================


@pytest.fixture
def sampleMarkdown() -> str:
    """
    Provide a document touching every block kind.

    Returns:
        str: Markdown text
    """
    return "\n".join(
        [
            "Release Notes",
            "=============",
            "",
            "Changes in this version.",
            "",
            "| Option | Default |",
            "|--------|:-------:|",
            "| `--mode` | preview |",
            "",
            "1. parse",
            "2. render",
            "",
            "> quoted",
            "",
            "---",
            "",
            "```toml",
            "[preview]",
            "```",
        ]
    )


@pytest.fixture
def sampleDocument(workDir, sampleMarkdown) -> Path:
    """
    Write the sample document into the working directory.

    Returns:
        Path: Path of the written notes.md
    """
    path = workDir / "notes.md"
    path.write_text(sampleMarkdown, encoding="utf-8")
    return path


# ============================================================================
# Logging Fixtures
# ============================================================================


@pytest.fixture
def isolatedLogging() -> Generator[None, None, None]:
    """
    Restore root and named logger state after a test changes it.

    Yields:
        None
    """
    rootLogger = logging.getLogger()
    savedHandlers = rootLogger.handlers[:]
    savedLevel = rootLogger.level
    yield
    for handler in rootLogger.handlers[:]:
        if handler not in savedHandlers:
            rootLogger.removeHandler(handler)
            handler.close()
    for handler in savedHandlers:
        if handler not in rootLogger.handlers:
            rootLogger.addHandler(handler)
    rootLogger.setLevel(savedLevel)
