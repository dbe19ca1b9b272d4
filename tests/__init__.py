"""
Test suite for parenlex.

This package contains tests for the lexer including:
- Unit tests for the code-point source, recognizers and reclassification
- Scan loop and round-trip tests
- Command-line and fixture tests
"""

__version__ = "0.1.0"
