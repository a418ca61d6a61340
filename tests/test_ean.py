"""
Tests for EAN-13, EAN-8, UPC-A and the EAN-2/EAN-5 supplementals.
"""

import pytest

from barcode_engine import EAN13, EAN8, JAN, UPCA, Bookland, EANSupplemental
from barcode_engine.errors import CharacterError, ChecksumError, ErrorCode, LengthError
from barcode_engine.tables import (
    EAN_LEFT_GUARD,
    EAN_MIDDLE_GUARD,
    EAN_RIGHT_GUARD,
    EAN_SUPP_LEFT_GUARD,
)


class TestEAN13:

    @pytest.mark.parametrize("data,expected", [
        ("750103131130", "10101100010100111001100101001110111101011001101010100001011001101100110100001011100101110100101"),
        ("983465123499", "10101101110100001001110101011110111001001100101010110110010000101011100111010011101001000010101"),
    ])
    def test_known_encodings(self, data, expected):
        assert EAN13(data).encode_string() == expected

    def test_check_digit(self):
        barcode = EAN13("750103131130")
        assert barcode.check_digit == 9
        assert str(barcode) == "7501031311309"

    def test_matching_check_digit_accepted(self):
        assert EAN13("7501031311309").encode() == EAN13("750103131130").encode()

    @pytest.mark.parametrize("data", ["7501031311305", "8801051294881"])
    def test_wrong_check_digit(self, data):
        with pytest.raises(ChecksumError) as exc:
            EAN13(data)
        assert exc.value.code == ErrorCode.CHECKSUM

    def test_invalid_character(self):
        with pytest.raises(CharacterError):
            EAN13("1234er123412")

    @pytest.mark.parametrize("data", ["12345678901", "1234567891234567899"])
    def test_invalid_length(self, data):
        with pytest.raises(LengthError):
            EAN13(data)

    def test_structure(self):
        """95 modules: guards at fixed offsets, 6 digits of 7 modules per side."""
        encoded = EAN13("750103131130").encode_string()
        assert len(encoded) == 95
        assert encoded[:3] == EAN_LEFT_GUARD
        assert encoded[45:50] == EAN_MIDDLE_GUARD
        assert encoded[-3:] == EAN_RIGHT_GUARD

    def test_parity_follows_first_digit(self):
        """Only the number system digit differs; the left half changes parity."""
        a = EAN13("012345678901").encode_string()
        b = EAN13("512345678901").encode_string()
        assert a[:10] == b[:10]
        assert a[10:45] != b[10:45]


class TestBookland:

    @pytest.mark.parametrize("data,expected", [
        ("978345612345", "10101110110001001010000101000110111001010111101010110011011011001000010101110010011101001110101"),
        ("978118999561", "10101110110001001011001100110010001001000101101010111010011101001001110101000011001101001110101"),
    ])
    def test_known_encodings(self, data, expected):
        assert Bookland(data).encode_string() == expected

    def test_aliases(self):
        assert Bookland is EAN13
        assert JAN is EAN13


class TestUPCA:

    def test_encodes_as_ean13_with_leading_zero(self):
        assert UPCA("03600029145").encode() == EAN13("003600029145").encode()

    def test_check_digit(self):
        assert UPCA("03600029145").check_digit == 2
        assert UPCA("036000291452").encode() == UPCA("03600029145").encode()

    def test_wrong_check_digit(self):
        with pytest.raises(ChecksumError):
            UPCA("036000291453")

    def test_invalid_length(self):
        with pytest.raises(LengthError):
            UPCA("0360002914")


class TestEAN8:

    @pytest.mark.parametrize("data,expected", [
        ("5512345", "1010110001011000100110010010011010101000010101110010011101000100101"),
        ("9834651", "1010001011011011101111010100011010101010000100111011001101010000101"),
    ])
    def test_known_encodings(self, data, expected):
        assert EAN8(data).encode_string() == expected

    def test_check_digit(self):
        assert EAN8("5512345").check_digit == 7
        assert EAN8("55123457").encode() == EAN8("5512345").encode()

    def test_wrong_check_digit(self):
        with pytest.raises(ChecksumError):
            EAN8("88023020")

    def test_structure(self):
        encoded = EAN8("5512345").encode_string()
        assert len(encoded) == 67
        assert encoded[:3] == EAN_LEFT_GUARD
        assert encoded[31:36] == EAN_MIDDLE_GUARD
        assert encoded[-3:] == EAN_RIGHT_GUARD

    def test_invalid_length(self):
        with pytest.raises(LengthError):
            EAN8("123456789")


class TestEANSupplemental:

    def test_ean2(self):
        barcode = EANSupplemental("34")
        assert barcode.kind == "EAN2"
        assert barcode.encode_string() == "10110100001010100011"

    def test_ean5(self):
        barcode = EANSupplemental("51234")
        assert barcode.kind == "EAN5"
        assert barcode.encode_string() == "10110110001010011001010011011010111101010011101"

    @pytest.mark.parametrize("data,parity", [
        ("00", (0, 0)),
        ("01", (0, 1)),
        ("34", (1, 0)),
        ("99", (1, 1)),
    ])
    def test_ean2_parity_from_value_mod_4(self, data, parity):
        assert EANSupplemental(data).parity == parity

    def test_ean5_parity_from_checksum(self):
        # checksum of 51234 is 9
        assert EANSupplemental("51234").parity == (0, 0, 1, 0, 1)

    def test_starts_with_supplemental_guard(self):
        assert EANSupplemental("12").encode_string().startswith(EAN_SUPP_LEFT_GUARD)

    @pytest.mark.parametrize("data", ["1", "123", "1234", "123456"])
    def test_only_two_or_five_digits(self, data):
        with pytest.raises(LengthError):
            EANSupplemental(data)

    def test_invalid_character(self):
        with pytest.raises(CharacterError):
            EANSupplemental("AT")
