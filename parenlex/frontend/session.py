"""
Per-scan lexer state.

A ScanSession lives for exactly one call to Lexer.tokenize() and is handed to
every recognizer invocation during that scan.
"""

from typing import Callable, List, Optional, Tuple, TypeVar

from .errors import SourceReadFailure
from .source import CodePointSource
from .tokens import Token, TokenKind

_T = TypeVar("_T")


class ScanSession:
    """Mutable state of a single scan.

    Attributes:
        char: The most recently read code point
        offset: Source units consumed so far
        line: Current line (1-indexed, stays 0 when line tracking is off)
        column: Code points consumed on the current line
        start: (line, column, offset) of the token being recognized
        tokens: Tokens emitted so far, in input order
    """

    def __init__(self, source: CodePointSource, track_lines: bool = True):
        self.source = source
        self.track_lines = track_lines
        self.char: Optional[str] = None
        self.offset = 0
        self.line = 1 if track_lines else 0
        self.column = 0
        self.start: Tuple[int, int, int] = (self.line, self.column, self.offset)
        self.tokens: List[Token] = []

    def _pull(self, method: Callable[[], _T]) -> _T:
        try:
            return method()
        except (OSError, UnicodeError) as exc:
            raise SourceReadFailure(exc, self.line, self.column, self.offset) from exc

    def mark(self) -> None:
        """Record the current position as the start of the next token."""
        self.start = (self.line, self.column, self.offset)

    def read(self) -> Optional[str]:
        """Consume the next code point, or return None at end of input.

        Raises:
            SourceReadFailure: If the source fails for any other reason
        """
        item = self._pull(self.source.next)
        if item is None:
            return None
        char, size = item
        if self.offset == 0 and self.source.preamble:
            # First code point follows a byte-order mark
            self.offset = self.source.preamble
            self.start = (self.start[0], self.start[1], self.offset)
        self.offset += size
        if self.track_lines:
            if char == "\n":
                self.line += 1
                self.column = 0
            else:
                self.column += 1
        self.char = char
        return char

    def peek(self) -> Optional[str]:
        """Look at the next code point without consuming it."""
        return self._pull(self.source.peek)

    def emit(self, kind: TokenKind, literal: str) -> Token:
        """Append a token that starts at the current mark."""
        line, column, offset = self.start
        token = Token(kind=kind, literal=literal, line=line, column=column, offset=offset)
        self.tokens.append(token)
        return token
