"""
parenlex - Lossless tokenizer for Lisp-style source text

Splits source text into separators, comments, list delimiters, strings,
identifiers and numbers, keeping every code point so the input can be
rebuilt exactly from the tokens.

Example:
    >>> from parenlex import scan, reconstruct
    >>> tokens = scan("(+ 1 1)")
    >>> reconstruct(tokens)
    '(+ 1 1)'

Version: 0.1.0
"""

__version__ = "0.1.0"
__author__ = "parenlex Team"

from .frontend import (
    Lexer,
    LexerError,
    SourceReadFailure,
    Token,
    TokenKind,
    UnrecognizedCharacter,
    reconstruct,
    scan,
)
from .utils import Settings

__all__ = [
    "__version__",
    "__author__",
    "Lexer",
    "LexerError",
    "SourceReadFailure",
    "Token",
    "TokenKind",
    "UnrecognizedCharacter",
    "reconstruct",
    "scan",
    "Settings",
]
