"""
Unit tests for the code-point source.
"""

import io

import pytest
from parenlex.frontend import CodePointSource


class TestCodePointSourceText:
    """Tests for reading text input."""

    def test_reads_code_points_in_order(self):
        """Test that next() returns each code point with size 1."""
        source = CodePointSource("(a)")
        assert source.next() == ("(", 1)
        assert source.next() == ("a", 1)
        assert source.next() == (")", 1)
        assert source.next() is None

    def test_empty_input(self):
        """Test that empty input is immediately exhausted."""
        source = CodePointSource("")
        assert source.next() is None
        assert source.peek() is None

    def test_end_of_input_is_sticky(self):
        """Test that reading past the end keeps returning None."""
        source = CodePointSource("x")
        source.next()
        assert source.next() is None
        assert source.next() is None

    def test_text_stream(self):
        """Test reading from a text file object in small chunks."""
        source = CodePointSource(io.StringIO("abcde"), chunk_size=2)
        chars = []
        while True:
            item = source.next()
            if item is None:
                break
            chars.append(item[0])
        assert "".join(chars) == "abcde"

    def test_unsupported_input(self):
        """Test that non-readable input is rejected."""
        with pytest.raises(TypeError):
            CodePointSource(42)


class TestCodePointSourceBinary:
    """Tests for reading encoded input."""

    def test_sizes_are_byte_lengths(self):
        """Test that binary input reports encoded sizes."""
        source = CodePointSource("aé€😀".encode("utf-8"))
        assert source.next() == ("a", 1)
        assert source.next() == ("é", 2)
        assert source.next() == ("€", 3)
        assert source.next() == ("😀", 4)
        assert source.next() is None

    def test_multibyte_split_across_chunks(self):
        """Test that a code point split over chunk boundaries is decoded whole."""
        source = CodePointSource(io.BytesIO("€x".encode("utf-8")), chunk_size=1)
        assert source.next() == ("€", 3)
        assert source.next() == ("x", 1)
        assert source.next() is None

    def test_other_encoding(self):
        """Test decoding with a non-default encoding."""
        source = CodePointSource("é".encode("latin-1"), encoding="latin-1")
        assert source.next() == ("é", 1)

    def test_bom_codec_without_bom(self):
        """Test that a codec that writes a BOM does not inflate sizes."""
        source = CodePointSource(b"(a b)", encoding="utf-8-sig")
        assert [source.next() for _ in range(5)] == [
            ("(", 1), ("a", 1), (" ", 1), ("b", 1), (")", 1),
        ]
        assert source.preamble == 0

    def test_utf8_bom_is_preamble(self):
        """Test that a stripped UTF-8 BOM is reported apart from the code points."""
        source = CodePointSource(b"\xef\xbb\xbf(a", encoding="utf-8-sig")
        assert source.next() == ("(", 1)
        assert source.preamble == 3
        assert source.next() == ("a", 1)

    def test_utf16_sizes(self):
        """Test that UTF-16 input with a BOM reports two bytes per code point."""
        source = CodePointSource("(a😀".encode("utf-16"), encoding="utf-16", chunk_size=3)
        assert source.next() == ("(", 2)
        assert source.preamble == 2
        assert source.next() == ("a", 2)
        assert source.next() == ("😀", 4)
        assert source.next() is None

    def test_invalid_bytes_raise(self):
        """Test that undecodable input raises UnicodeDecodeError."""
        source = CodePointSource(b"\xff")
        with pytest.raises(UnicodeDecodeError):
            source.next()

    def test_truncated_sequence_raises_at_end(self):
        """Test that a dangling partial sequence fails when the input ends."""
        source = CodePointSource(b"a\xc3", chunk_size=1)
        assert source.next() == ("a", 1)
        with pytest.raises(UnicodeDecodeError):
            source.next()


class TestCodePointSourceLookahead:
    """Tests for push_back() and peek()."""

    def test_push_back_returns_same_code_point(self):
        """Test that a pushed back code point is read again."""
        source = CodePointSource("ab")
        assert source.next() == ("a", 1)
        source.push_back()
        assert source.next() == ("a", 1)
        assert source.next() == ("b", 1)

    def test_push_back_only_once(self):
        """Test that two push_back() calls in a row are rejected."""
        source = CodePointSource("ab")
        source.next()
        source.push_back()
        with pytest.raises(RuntimeError):
            source.push_back()

    def test_push_back_before_next(self):
        """Test that push_back() without a previous read is rejected."""
        source = CodePointSource("ab")
        with pytest.raises(RuntimeError):
            source.push_back()

    def test_push_back_at_end_of_input(self):
        """Test that end of input cannot be pushed back."""
        source = CodePointSource("")
        source.next()
        with pytest.raises(RuntimeError):
            source.push_back()

    def test_peek_does_not_consume(self):
        """Test that peek() leaves the code point in the stream."""
        source = CodePointSource("ab")
        assert source.peek() == "a"
        assert source.peek() == "a"
        assert source.next() == ("a", 1)
        assert source.peek() == "b"
        assert source.next() == ("b", 1)
        assert source.peek() is None
