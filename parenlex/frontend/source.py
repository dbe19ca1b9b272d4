"""
Code-point source for the parenlex lexer.

Wraps text, bytes or a file object and hands out one code point at a time,
with a single slot of pushback for lookahead.
"""

import codecs
import io
from typing import List, Optional, Tuple, Union

SourceInput = Union[str, bytes, bytearray, io.IOBase]

DEFAULT_CHUNK_SIZE = 4096


class CodePointSource:
    """Pull-based reader over the lexer input.

    Text input reports every code point with a size of 1. Binary input is fed
    to the decoder one byte at a time and each code point reports the number
    of bytes it took, so offsets computed from the sizes are byte offsets.
    A byte-order mark swallowed by the decoder is not part of any code point;
    its length is exposed as ``preamble``.

    Example:
        >>> source = CodePointSource("(a)")
        >>> source.next()
        ('(', 1)
        >>> source.peek()
        'a'
    """

    def __init__(self, data: SourceInput, encoding: str = "utf-8",
                 chunk_size: int = DEFAULT_CHUNK_SIZE):
        if isinstance(data, str):
            data = io.StringIO(data)
        elif isinstance(data, (bytes, bytearray)):
            data = io.BytesIO(bytes(data))
        if not hasattr(data, "read"):
            raise TypeError(f"Unsupported input type: {type(data).__name__}")

        self._stream = data
        self._encoding = encoding
        self._chunk_size = chunk_size
        self._decoder = codecs.getincrementaldecoder(encoding)(errors="strict")
        self._binary = False
        self._exhausted = False
        self._buffer = ""
        self._sizes: Optional[List[int]] = None
        self._pos = 0
        self._raw = b""
        self._raw_pos = 0
        self._started = False
        self._last: Optional[Tuple[str, int]] = None
        self._pushed = False
        self.preamble = 0

    def _encoded_size(self, char: str) -> int:
        # Encoding twice and subtracting cancels any BOM the codec prepends
        return (len(codecs.encode(char * 2, self._encoding))
                - len(codecs.encode(char, self._encoding)))

    def _fill(self) -> bool:
        """Load the next decoded text into the buffer.

        Returns:
            False once the underlying stream has no more code points
        """
        if self._binary:
            return self._fill_binary()
        while not self._exhausted:
            chunk = self._stream.read(self._chunk_size)
            if not chunk:
                self._exhausted = True
                return False
            if isinstance(chunk, (bytes, bytearray)):
                self._binary = True
                self._raw = bytes(chunk)
                self._raw_pos = 0
                return self._fill_binary()
            self._buffer = chunk
            self._sizes = None
            self._pos = 0
            return True
        return False

    def _fill_binary(self) -> bool:
        """Decode up to the next code point, counting the bytes it used."""
        consumed = 0
        while True:
            if self._raw_pos < len(self._raw):
                byte = self._raw[self._raw_pos:self._raw_pos + 1]
                self._raw_pos += 1
                consumed += 1
                text = self._decoder.decode(byte)
            elif not self._exhausted:
                self._raw = bytes(self._stream.read(self._chunk_size) or b"")
                self._raw_pos = 0
                if not self._raw:
                    self._exhausted = True
                continue
            else:
                # Raises on a truncated multi-byte sequence
                text = self._decoder.decode(b"", final=True)
                if not text:
                    return False

            if text:
                sizes = [consumed] + [0] * (len(text) - 1)
                if not self._started:
                    self._started = True
                    self.preamble = max(consumed - self._encoded_size(text[0]), 0)
                    sizes[0] = consumed - self.preamble
                self._buffer = text
                self._sizes = sizes
                self._pos = 0
                return True

    def next(self) -> Optional[Tuple[str, int]]:
        """Read the next code point.

        Returns:
            A ``(code_point, encoded_size)`` pair, or None at end of input

        Raises:
            OSError: If the underlying stream fails
            UnicodeDecodeError: If binary input is not valid in the encoding
        """
        if self._pushed:
            self._pushed = False
            return self._last

        if self._pos >= len(self._buffer) and not self._fill():
            self._last = None
            return None

        char = self._buffer[self._pos]
        size = self._sizes[self._pos] if self._sizes is not None else 1
        self._pos += 1
        self._last = (char, size)
        return self._last

    def push_back(self) -> None:
        """Return the most recently read code point to the stream."""
        if self._last is None or self._pushed:
            raise RuntimeError("push_back() must follow a next() that returned a code point")
        self._pushed = True

    def peek(self) -> Optional[str]:
        """Return the next code point without consuming it."""
        item = self.next()
        if item is None:
            return None
        self.push_back()
        return item[0]
