"""
Numeric literal reclassification.

The scanner has no number recognizer: numerals come out as IDENTIFIER tokens
and this pass retypes the ones that parse as a 64-bit float.

Only decimal spellings count. Special values and other notations that general
float parsers accept (inf, NaN, Infinity, hex floats such as 0x1p4, digit
underscores) stay identifiers, since in Lisp source they are ordinary symbols.
"""

import math
import re
from typing import List

from .tokens import Token, TokenKind

# Optional sign, digits with optional fraction (or a bare fraction), optional exponent
_NUMERAL = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def is_numeric(text: str) -> bool:
    """Check if text is a decimal numeral that fits in a 64-bit float.

    Args:
        text: Identifier literal to check

    Returns:
        True if text is a numeral whose value is finite
    """
    if _NUMERAL.fullmatch(text) is None:
        return False
    return math.isfinite(float(text))


def reclassify(tokens: List[Token]) -> List[Token]:
    """Retype numeric IDENTIFIER tokens as NUMBER, in place.

    Args:
        tokens: Token list produced by the scan loop

    Returns:
        The same list, for chaining
    """
    for index, token in enumerate(tokens):
        if token.kind is TokenKind.IDENTIFIER and is_numeric(token.literal):
            tokens[index] = Token(
                kind=TokenKind.NUMBER,
                literal=token.literal,
                line=token.line,
                column=token.column,
                offset=token.offset,
            )
    return tokens
