"""
Frontend module for parenlex.

This module provides the lexer components: the code-point source, the token
recognizers, the scan loop and the numeric reclassification pass.
"""

from .errors import LexerError, SourceReadFailure, UnrecognizedCharacter
from .lexer import Lexer, scan, tokenize_source
from .literals import is_numeric, reclassify
from .recognizers import DEFAULT_RECOGNIZERS
from .source import CodePointSource
from .tokens import Token, TokenKind, reconstruct

__all__ = [
    # Lexer components
    "Lexer",
    "scan",
    "tokenize_source",
    "CodePointSource",
    "DEFAULT_RECOGNIZERS",
    # Tokens
    "Token",
    "TokenKind",
    "reconstruct",
    # Reclassification
    "is_numeric",
    "reclassify",
    # Errors
    "LexerError",
    "UnrecognizedCharacter",
    "SourceReadFailure",
]
