"""
Tests for the Code128 encoder and its tokenizer.

Control characters: À (set A), Ɓ (set B), Ć (set C); Ź is FNC1.
"""

import pytest

from barcode_engine import CharacterSet, Code128, encoder_for
from barcode_engine.core.code128 import tokenize
from barcode_engine.errors import CharacterError, ErrorCode, LengthError
from barcode_engine.tables import CODE128_STOP, CODE128_TERMINATION


class TestKnownEncodings:

    @pytest.mark.parametrize("data,char_set,expected", [
        (
            "HELLO", CharacterSet.A,
            "110100001001100010100010001101000100011011101000110111010001110110110100010001100011101011",
        ),
        (
            "XYĆ2199", CharacterSet.A,
            "110100001001110001011011101101000101110111101101110010010111011110100111011001100011101011",
        ),
        (
            "xyZÀ199!*1", CharacterSet.B,
            "110100100001111001001011011011110111011000101110101111010011100110111001011001110010110011"
            "0011011001100100010010011100110100101111001100011101011",
        ),
        (
            "B\u0006", CharacterSet.A,
            "110100001001000101100010110000100100110100001100011101011",
        ),
        (
            "Ź4218402050À0", CharacterSet.C,
            "110100111001111010111010110111000110011100101100010100011001001110110001011101110101111010"
            "011101100101011110001100011101011",
        ),
    ])
    def test_encodings(self, data, char_set, expected):
        assert Code128(data, char_set).encode_string() == expected

    def test_termination(self):
        encoded = Code128("HELLO", CharacterSet.B).encode_string()
        assert encoded.endswith(CODE128_STOP + CODE128_TERMINATION)


class TestLonghand:
    """Data that names its own start alphabet."""

    @pytest.mark.parametrize("data,char_set", [
        ("HELLO", CharacterSet.A),
        ("XYĆ2199", CharacterSet.A),
        ("xyZÀ199!*1", CharacterSet.B),
    ])
    def test_same_as_explicit_start(self, data, char_set):
        longhand = char_set.control_char + data
        assert (
            Code128(longhand, CharacterSet.NONE).encode()
            == Code128(data, char_set).encode()
        )

    def test_missing_start_with_none(self):
        with pytest.raises(CharacterError):
            Code128("HELLO", CharacterSet.NONE)


class TestTokenizer:

    def test_start_symbols(self):
        assert tokenize("ÀA")[0] == 103
        assert tokenize("ƁA")[0] == 104
        assert tokenize("Ć12")[0] == 105

    def test_hello_values(self):
        assert tokenize("ÀHELLO") == [103, 40, 37, 44, 44, 47]

    def test_digit_pairs_in_c(self):
        assert tokenize("Ć123456") == [105, 12, 34, 56]

    def test_switch_emits_code_of_current_alphabet(self):
        # Set A encodes "switch to C" as 99
        assert tokenize("ÀXĆ12") == [103, 56, 99, 12]
        # Set C encodes "switch to B" as 100
        assert tokenize("Ć12Ɓa") == [105, 12, 100, 65]

    def test_fnc1_in_c(self):
        assert tokenize("ĆŹ12") == [105, 102, 12]

    def test_fnc1_inside_digit_pair(self):
        """The pending digit survives a function character."""
        assert tokenize("Ć1Ź2") == [105, 102, 12]
        assert tokenize("Ć12Ź3Ź4") == [105, 12, 102, 102, 34]

    def test_no_start(self):
        with pytest.raises(CharacterError):
            tokenize("HELLO")


class TestErrors:

    def test_unmapped_character(self):
        with pytest.raises(CharacterError) as exc:
            Code128("☺ ", CharacterSet.A)
        assert exc.value.code == ErrorCode.CHARACTER

    def test_lowercase_not_in_a(self):
        with pytest.raises(CharacterError):
            Code128("hello", CharacterSet.A)

    def test_trailing_unpaired_digit(self):
        with pytest.raises(CharacterError):
            Code128("HELLOĆ12352", CharacterSet.A)

    def test_unpaired_digit_before_switch(self):
        with pytest.raises(CharacterError):
            Code128("123Ɓab", CharacterSet.C)

    def test_switch_to_active_alphabet(self):
        """Set A has no "switch to A" symbol."""
        with pytest.raises(CharacterError):
            Code128("ABÀC", CharacterSet.A)

    def test_missing_character_set(self):
        with pytest.raises(CharacterError) as exc:
            Code128("HELLO")
        assert exc.value.code == ErrorCode.CHARACTER

    def test_registry_missing_character_set(self):
        with pytest.raises(CharacterError):
            encoder_for("code128", "HELLO")
        with pytest.raises(CharacterError):
            encoder_for("code128", "HELLO", character_set=None)

    def test_too_short(self):
        with pytest.raises(LengthError):
            Code128("", CharacterSet.A)
        with pytest.raises(LengthError):
            Code128("A", CharacterSet.A)

    def test_no_upper_bound(self):
        assert Code128("A" * 1000, CharacterSet.B).encode()


class TestCharacterSets:

    def test_c_packs_digits(self):
        """Alphabet C needs half the data symbols for digit strings."""
        packed = Code128("123456", CharacterSet.C).encode()
        plain = Code128("123456", CharacterSet.A).encode()
        assert len(plain) - len(packed) == 3 * 11

    def test_string_character_set(self):
        assert Code128("HELLO", "A").character_set is CharacterSet.A

    def test_checksum_value(self):
        assert Code128("HELLO", CharacterSet.A).checksum_value == 39

    def test_registry(self):
        barcode = encoder_for("code128", "HELLO", character_set="a")
        assert barcode.character_set is CharacterSet.A
        assert barcode.encode() == Code128("HELLO", CharacterSet.A).encode()
