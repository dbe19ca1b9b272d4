"""
Token recognizers.

Each recognizer looks at ``session.char`` (the code point just read by the
scan loop) and either consumes a whole token and returns True, or leaves the
session untouched and returns False. The scan loop tries them in the order of
DEFAULT_RECOGNIZERS; the first one that returns True wins.
"""

from typing import Callable, Tuple

from .session import ScanSession
from .tokens import IDENTIFIER_SEPARATORS, STRING_DELIMITER, WHITESPACE, TokenKind

Recognizer = Callable[[ScanSession], bool]


def separator(session: ScanSession) -> bool:
    """One whitespace code point per SEPARATOR token."""
    if session.char not in WHITESPACE:
        return False
    session.emit(TokenKind.SEPARATOR, session.char)
    return True


def single_line_comment(session: ScanSession) -> bool:
    """``;`` up to end of input, or up to but not including a newline."""
    if session.char != ";":
        return False
    chars = [";"]
    while True:
        char = session.peek()
        if char is None or char == "\n":
            break
        chars.append(session.read())
    session.emit(TokenKind.SINGLE_LINE_COMMENT, "".join(chars))
    return True


def multi_line_comment(session: ScanSession) -> bool:
    """``#|`` up to and including the next ``|#``.

    Comments do not nest: an inner ``#|`` is plain content. An unterminated
    comment runs to end of input.
    """
    if session.char != "#" or session.peek() != "|":
        return False
    chars = ["#", session.read()]
    while True:
        if chars[-1] == "|" and session.peek() == "#":
            chars.append(session.read())
            break
        char = session.read()
        if char is None:
            break
        chars.append(char)
    session.emit(TokenKind.MULTI_LINE_COMMENT, "".join(chars))
    return True


def list_begin(session: ScanSession) -> bool:
    if session.char != "(":
        return False
    session.emit(TokenKind.LIST_BEGIN, "(")
    return True


def list_end(session: ScanSession) -> bool:
    if session.char != ")":
        return False
    session.emit(TokenKind.LIST_END, ")")
    return True


def string(session: ScanSession) -> bool:
    """Double-quoted string, stored without its delimiters.

    A quote preceded by a backslash is content. Escapes are kept verbatim and
    an unterminated string runs to end of input.
    """
    if session.char != STRING_DELIMITER:
        return False
    chars = []
    previous = None
    while True:
        char = session.read()
        if char is None:
            break
        if char == STRING_DELIMITER and previous != "\\":
            break
        chars.append(char)
        previous = char
    session.emit(TokenKind.STRING, "".join(chars))
    return True


def identifier(session: ScanSession) -> bool:
    """Everything up to the next whitespace or parenthesis."""
    if session.char in IDENTIFIER_SEPARATORS:
        return False
    chars = [session.char]
    while True:
        char = session.peek()
        if char is None or char in IDENTIFIER_SEPARATORS:
            break
        chars.append(session.read())
    session.emit(TokenKind.IDENTIFIER, "".join(chars))
    return True


# Priority order matters: "#" must reach multi_line_comment before identifier
DEFAULT_RECOGNIZERS: Tuple[Recognizer, ...] = (
    separator,
    single_line_comment,
    multi_line_comment,
    list_begin,
    list_end,
    string,
    identifier,
)
