"""
Lexer exceptions.
"""


class LexerError(Exception):
    """Base exception for fatal lexer errors."""

    def __init__(self, message: str, line: int = 0, column: int = 0, offset: int = 0):
        self.message = message
        self.line = line
        self.column = column
        self.offset = offset
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.line > 0:
            return f"Line {self.line}, col {self.column}: {self.message}"
        return f"Offset {self.offset}: {self.message}"


class UnrecognizedCharacter(LexerError):
    """Raised when no recognizer accepts a code point."""

    def __init__(self, char: str, line: int = 0, column: int = 0, offset: int = 0):
        self.char = char
        super().__init__(
            f"Unrecognized character {char!r} (U+{ord(char):04X})",
            line, column, offset
        )


class SourceReadFailure(LexerError):
    """Raised when the input cannot be read for a reason other than its end."""

    def __init__(self, cause: Exception, line: int = 0, column: int = 0, offset: int = 0):
        self.cause = cause
        super().__init__(f"Failed to read source: {cause}", line, column, offset)
