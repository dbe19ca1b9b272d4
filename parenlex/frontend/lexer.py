"""
Lexer module for parenlex.

This module drives the scan: it reads the input one code point at a time,
offers each code point to the recognizers in priority order, and finally
reclassifies numeric identifiers.
"""

import logging
from typing import List, Optional, Sequence

from ..utils.settings import DEFAULT_SETTINGS, Settings
from .errors import UnrecognizedCharacter
from .literals import reclassify
from .recognizers import DEFAULT_RECOGNIZERS, Recognizer
from .session import ScanSession
from .source import CodePointSource, SourceInput
from .tokens import Token, TokenKind

logger = logging.getLogger(__name__)


class Lexer:
    """Lexer for Lisp-style source text.

    Every code point of the input ends up in exactly one token, so the
    source can be rebuilt from the result with ``reconstruct()``.

    Example:
        >>> lexer = Lexer()
        >>> tokens = lexer.tokenize("(+ 1 1)")
        >>> [t.kind.name for t in tokens][:2]
        ['LIST_BEGIN', 'IDENTIFIER']
    """

    def __init__(self, settings: Optional[Settings] = None,
                 recognizers: Optional[Sequence[Recognizer]] = None):
        """Initialize the lexer.

        Args:
            settings: Lexer settings, DEFAULT_SETTINGS when omitted
            recognizers: Recognizers in priority order, DEFAULT_RECOGNIZERS
                when omitted
        """
        self._settings = settings or DEFAULT_SETTINGS
        self._recognizers = tuple(DEFAULT_RECOGNIZERS if recognizers is None else recognizers)

    @property
    def settings(self) -> Settings:
        return self._settings

    def tokenize(self, source: SourceInput) -> List[Token]:
        """Tokenize source text.

        Args:
            source: A string, bytes, or a text/binary file object

        Returns:
            List of Token objects in input order

        Raises:
            UnrecognizedCharacter: If no recognizer accepts a code point
            SourceReadFailure: If the input cannot be read or decoded
        """
        session = ScanSession(
            CodePointSource(source, self._settings.encoding, self._settings.chunk_size),
            track_lines=self._settings.track_lines,
        )
        logger.debug(f"Scanning with {len(self._recognizers)} recognizers")

        while True:
            session.mark()
            char = session.read()
            if char is None:
                break
            for recognizer in self._recognizers:
                if recognizer(session):
                    break
            else:
                line, column, offset = session.start
                logger.error(f"No recognizer for {char!r} at offset {offset}")
                raise UnrecognizedCharacter(char, line, column, offset)

        tokens = session.tokens
        logger.debug(f"Scanned {len(tokens)} tokens ({session.offset} source units)")

        if self._settings.reclassify_numbers:
            reclassify(tokens)
            numbers = sum(1 for t in tokens if t.kind is TokenKind.NUMBER)
            logger.debug(f"Reclassified {numbers} identifiers as numbers")

        return tokens


def scan(source: SourceInput, settings: Optional[Settings] = None) -> List[Token]:
    """Tokenize source text with the default recognizers.

    Args:
        source: A string, bytes, or a text/binary file object
        settings: Optional lexer settings

    Returns:
        List of Token objects
    """
    return Lexer(settings).tokenize(source)


def tokenize_source(source: SourceInput, settings: Optional[Settings] = None) -> List[Token]:
    """Convenience function to tokenize source text."""
    return scan(source, settings)
