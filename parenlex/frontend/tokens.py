"""
Token definitions for the parenlex lexer.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable


class TokenKind(Enum):
    """Token kinds produced by the lexer."""
    SEPARATOR = "SEPARATOR"                      # One whitespace code point
    SINGLE_LINE_COMMENT = "SINGLE-LINE-COMMENT"  # ; ... up to newline
    MULTI_LINE_COMMENT = "MULTI-LINE-COMMENT"    # #| ... |#
    LIST_BEGIN = "LIST-BEGIN"                    # (
    LIST_END = "LIST-END"                        # )
    STRING = "STRING"                            # "..." without the quotes
    IDENTIFIER = "IDENTIFIER"                    # Anything else up to a separator
    NUMBER = "NUMBER"                            # Numeric identifier, set after scanning


# Whitespace code points that form SEPARATOR tokens
WHITESPACE = frozenset("\n\t\v\f\r \x85\xa0")

# Code points that end an identifier
IDENTIFIER_SEPARATORS = WHITESPACE | frozenset("()")

STRING_DELIMITER = '"'


@dataclass(frozen=True)
class Token:
    """Represents a token in the source text.

    Attributes:
        kind: The token kind
        literal: The token text (STRING literals exclude the quotes)
        line: Line number (1-indexed, 0 when line tracking is off)
        column: Column offset in code points (0-indexed)
        offset: Position of the first code point, in source units
    """
    kind: TokenKind
    literal: str
    line: int = 0
    column: int = 0
    offset: int = 0

    @property
    def lexeme(self) -> str:
        """The exact source text this token was scanned from."""
        if self.kind is TokenKind.STRING:
            return STRING_DELIMITER + self.literal + STRING_DELIMITER
        return self.literal

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.literal!r}, offset={self.offset})"


def reconstruct(tokens: Iterable[Token]) -> str:
    """Rebuild the source text from a token sequence."""
    return "".join(token.lexeme for token in tokens)
