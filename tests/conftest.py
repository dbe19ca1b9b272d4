"""
Pytest configuration and fixtures for parenlex tests.
"""

import pytest
from pathlib import Path


FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir():
    """Provide the directory holding the .lisp fixtures."""
    return FIXTURES_DIR


@pytest.fixture
def sample_source_file(tmp_path):
    """Create a small source file for testing."""
    source_file = tmp_path / "sample.lisp"
    source_file.write_text('; sample\n(print "hi" 42)\n', encoding="utf-8")
    return source_file


@pytest.fixture
def lexer():
    """Provide a Lexer instance with default settings."""
    from parenlex import Lexer
    return Lexer()


@pytest.fixture
def settings():
    """Provide a fresh Settings instance."""
    from parenlex.utils import Settings
    return Settings()
