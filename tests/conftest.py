"""
Global pytest fixtures and configuration for test suite.

This module provides reusable fixtures for:
- Sample documents (as text and as TextDocument)
- Temporary files for CLI tests
- Mock settings/configuration
"""

import os

import pytest

from mdx_authoring.config import Settings
from mdx_authoring.models import TextDocument
from tests.fixtures.documents import SAMPLE_DOCUMENTS


@pytest.fixture
def mock_settings() -> Settings:
    """
    Create settings for testing with safe defaults.

    Returns:
        Settings instance with test configuration
    """
    return Settings(log_level="DEBUG", log_json=False)


@pytest.fixture
def article_text() -> str:
    """
    Get the full sample article.

    Returns:
        MDX text with metadata, citations, related entries and local variables
    """
    return SAMPLE_DOCUMENTS["article"]


@pytest.fixture
def article_document(article_text) -> TextDocument:
    """
    Get the sample article as a markup-capable document, cursor at the top.

    Returns:
        TextDocument instance
    """
    return TextDocument(article_text)


@pytest.fixture
def plain_document() -> TextDocument:
    """
    Get a plain text document without markup support.

    Returns:
        TextDocument instance with markup_capable=False
    """
    return TextDocument(SAMPLE_DOCUMENTS["plain"], markup_capable=False)


@pytest.fixture
def article_file(tmp_path, article_text) -> str:
    """
    Write the sample article to a temporary .mdx file.

    Args:
        tmp_path: pytest's temporary directory fixture

    Returns:
        Path to the temporary file
    """
    path = tmp_path / "article.mdx"
    path.write_text(article_text, encoding="utf-8")
    return str(path)


@pytest.fixture
def text_file(tmp_path) -> str:
    """
    Write a plain text document to a temporary .txt file.

    Returns:
        Path to the temporary file
    """
    path = tmp_path / "notes.txt"
    path.write_text(SAMPLE_DOCUMENTS["plain"], encoding="utf-8")
    return str(path)


@pytest.fixture(autouse=True)
def reset_env_vars():
    """
    Reset environment variables before each test.

    This prevents test pollution from env var changes.
    """
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


def pytest_configure(config):
    """
    Configure pytest with custom markers and settings.
    """
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "cli: Command-line tests (temporary files, subcommands)"
    )
