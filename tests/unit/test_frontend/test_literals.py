"""
Unit tests for numeric literal reclassification.
"""

import pytest
from parenlex.frontend import Token, TokenKind, is_numeric, reclassify


class TestIsNumeric:
    """Tests for the numeral predicate."""

    @pytest.mark.parametrize("text", [
        "1", "156819129", "+10", "-10", "1E2", "1E-5", "1.6543E2", "0.89E2",
        "1.6543E-2", "1E0", "1E1", "0E1", "1e+3", "3.14", "1.", ".5", "-.5e2",
        "007",
    ])
    def test_numerals(self, text):
        assert is_numeric(text)

    @pytest.mark.parametrize("text", [
        "f", "print", "+", "-", ".", "", "1E", "E5", "1e+", "--1", "1.2.3",
        "1_000", "1e400", "١", "1 ",
    ])
    def test_non_numerals(self, text):
        assert not is_numeric(text)

    @pytest.mark.parametrize("text", [
        "inf", "-inf", "NaN", "Infinity", "0x10", "0x1p4", "0x_1p4",
    ])
    def test_special_float_spellings_stay_identifiers(self, text):
        """Test that float spellings beyond plain decimals are not numerals."""
        assert not is_numeric(text)


class TestReclassify:
    """Tests for the reclassification pass."""

    def test_identifier_becomes_number(self):
        """Test that numeric identifiers are retyped and keep their position."""
        tokens = [Token(TokenKind.IDENTIFIER, "42", line=3, column=4, offset=17)]
        reclassify(tokens)
        assert tokens == [Token(TokenKind.NUMBER, "42", line=3, column=4, offset=17)]

    def test_only_identifiers_are_retyped(self):
        """Test that strings and comments holding numerals are untouched."""
        tokens = [
            Token(TokenKind.STRING, "1"),
            Token(TokenKind.SINGLE_LINE_COMMENT, "1"),
            Token(TokenKind.IDENTIFIER, "x1"),
        ]
        assert reclassify(list(tokens)) == tokens

    def test_in_place(self):
        """Test that the same list object is updated and returned."""
        tokens = [Token(TokenKind.IDENTIFIER, "1")]
        result = reclassify(tokens)
        assert result is tokens
        assert tokens[0].kind == TokenKind.NUMBER

    def test_idempotent(self):
        """Test that running the pass twice equals running it once."""
        tokens = [
            Token(TokenKind.LIST_BEGIN, "("),
            Token(TokenKind.IDENTIFIER, "+"),
            Token(TokenKind.IDENTIFIER, "-1.5e3"),
            Token(TokenKind.LIST_END, ")"),
        ]
        once = reclassify(list(tokens))
        twice = reclassify(list(once))
        assert once == twice
        assert [t.kind for t in once] == [
            TokenKind.LIST_BEGIN, TokenKind.IDENTIFIER, TokenKind.NUMBER, TokenKind.LIST_END,
        ]

    def test_preserves_order_and_length(self):
        tokens = [Token(TokenKind.IDENTIFIER, str(i), offset=i) for i in range(5)]
        result = reclassify(tokens)
        assert [t.offset for t in result] == list(range(5))
