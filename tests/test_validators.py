"""
Tests for input validation.
"""

import pytest

from barcode_engine.errors import CharacterError, ErrorCode, LengthError
from barcode_engine.validators import (
    MAX_VARIABLE_LENGTH,
    validate_charset,
    validate_digits,
    validate_length,
    validate_text,
)

ABC = frozenset("ABC")


class TestValidateLength:

    def test_inclusive_bounds(self):
        assert validate_length("ab", "Test", 2, 5) == "ab"
        assert validate_length("abcde", "Test", 2, 5) == "abcde"

    def test_too_short(self):
        with pytest.raises(LengthError) as exc:
            validate_length("a", "Test", 2, 5)
        assert exc.value.code == ErrorCode.LENGTH
        assert "got 1" in str(exc.value)

    def test_too_long(self):
        with pytest.raises(LengthError):
            validate_length("abcdef", "Test", 2, 5)

    def test_unbounded(self):
        assert validate_length("x" * 10000, "Test", 2, None)

    def test_length_counts_characters_not_bytes(self):
        """Non-ASCII characters count once each."""
        assert validate_length("ÀÀ", "Test", 2, 2) == "ÀÀ"


class TestValidateCharset:

    def test_valid(self):
        assert validate_charset("ABCA", "Test", ABC) == "ABCA"

    def test_reports_offending_characters(self):
        with pytest.raises(CharacterError) as exc:
            validate_charset("AxBxy", "Test", ABC)
        assert "'xy'" in str(exc.value)
        assert exc.value.data == "AxBxy"


class TestValidateText:

    def test_length_is_checked_before_characters(self):
        """A too-long string with bad characters reports Length."""
        with pytest.raises(LengthError):
            validate_text("x" * 10, "Test", 1, 5, ABC)

    def test_empty_input(self):
        with pytest.raises(LengthError):
            validate_text("", "Test", 1, MAX_VARIABLE_LENGTH, ABC)

    def test_non_string_rejected(self):
        with pytest.raises(CharacterError):
            validate_text(1234, "Test", 1, 5, ABC)

    def test_variable_length_maximum(self):
        assert validate_text("A" * MAX_VARIABLE_LENGTH, "Test", 1, MAX_VARIABLE_LENGTH, ABC)
        with pytest.raises(LengthError):
            validate_text("A" * (MAX_VARIABLE_LENGTH + 1), "Test", 1, MAX_VARIABLE_LENGTH, ABC)


class TestValidateDigits:

    def test_digits(self):
        assert validate_digits("0123456789", "Test", 1, 10) == "0123456789"

    def test_letters_rejected(self):
        with pytest.raises(CharacterError):
            validate_digits("12a4", "Test", 1, 10)

    def test_non_ascii_digits_rejected(self):
        with pytest.raises(CharacterError):
            validate_digits("١٢٣", "Test", 1, 10)
