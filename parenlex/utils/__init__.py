"""
Utility modules for parenlex.

This package contains configuration helpers used throughout the lexer.
"""

from .settings import Settings, DEFAULT_SETTINGS

__all__ = [
    "Settings",
    "DEFAULT_SETTINGS",
]
