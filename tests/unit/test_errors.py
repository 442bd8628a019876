"""Tests for reckon error types."""

from reckon.core.errors import (
    ConfigError,
    IntegerOverflowError,
    LexError,
    ParseError,
    ReckonError,
)


def test_message_without_position():
    error = ParseError("Empty expression")
    assert str(error) == "Empty expression"
    assert error.position is None


def test_message_with_position():
    error = ParseError("Expected an integer after '+'", 6)
    assert str(error) == "Expected an integer after '+' (at offset 6)"


def test_lex_error_carries_character():
    error = LexError("x", 4)
    assert error.character == "x"
    assert str(error) == "Unexpected character: 'x' (at offset 4)"


def test_overflow_error_hierarchy():
    error = IntegerOverflowError(256, 8)
    assert isinstance(error, ReckonError)
    assert isinstance(error, OverflowError)
    assert str(error) == "Integer 256 does not fit in 8 signed bits"


def test_all_errors_share_base():
    for cls in (LexError, ParseError, IntegerOverflowError, ConfigError):
        assert issubclass(cls, ReckonError)


def test_overflow_error_abbreviates_long_digit_text():
    error = IntegerOverflowError("1" + "0" * 99, 64, 2)
    assert error.value == "1" + "0" * 99
    assert str(error) == "Integer 10000000...0000 (100 digits) does not fit in 64 signed bits (at offset 2)"


def test_overflow_error_unbounded_names_conversion_limit():
    error = IntegerOverflowError("9" * 5000, 0)
    assert "does not fit in the interpreter's integer conversion limit" in str(error)
