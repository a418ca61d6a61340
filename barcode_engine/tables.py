"""
Symbol tables for every supported symbology.

Patterns are written as strings of module values: "1" is a bar module and
"0" a space module. Tables are read-only module constants shared by every
encoder; nothing in the package mutates them.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple


# ---------------------------------------------------------------------------
# Codabar
# ---------------------------------------------------------------------------

CODABAR_CHARS: Mapping[str, str] = MappingProxyType({
    '0': '101010011',
    '1': '101011001',
    '2': '101001011',
    '3': '110010101',
    '4': '101101001',
    '5': '110101001',
    '6': '100101011',
    '7': '100101101',
    '8': '100110101',
    '9': '110100101',
    '-': '101001101',
    '$': '101100101',
    ':': '1101011011',
    '/': '1101101011',
    '.': '1101101101',
    '+': '101100110011',
    'A': '1011001001',
    'B': '1010010011',
    'C': '1001001011',
    'D': '1010011001',
})


# ---------------------------------------------------------------------------
# Code11 (USD-8)
# ---------------------------------------------------------------------------

# Order matters: the checksum uses each character's position in this tuple.
CODE11_CHARS: Tuple[Tuple[str, str], ...] = (
    ('0', '101011'),
    ('1', '1101011'),
    ('2', '1001011'),
    ('3', '1100101'),
    ('4', '1011011'),
    ('5', '1101101'),
    ('6', '1001101'),
    ('7', '1010011'),
    ('8', '1101001'),
    ('9', '110101'),
    ('-', '101101'),
)

CODE11_GUARD = '1011001'
CODE11_SEPARATOR = '0'


# ---------------------------------------------------------------------------
# Code39
# ---------------------------------------------------------------------------

CODE39_CHARS: Tuple[Tuple[str, str], ...] = (
    ('0', '101001101101'),
    ('1', '110100101011'),
    ('2', '101100101011'),
    ('3', '110110010101'),
    ('4', '101001101011'),
    ('5', '110100110101'),
    ('6', '101100110101'),
    ('7', '101001011011'),
    ('8', '110100101101'),
    ('9', '101100101101'),
    ('A', '110101001011'),
    ('B', '101101001011'),
    ('C', '110110100101'),
    ('D', '101011001011'),
    ('E', '110101100101'),
    ('F', '101101100101'),
    ('G', '101010011011'),
    ('H', '110101001101'),
    ('I', '101101001101'),
    ('J', '101011001101'),
    ('K', '110101010011'),
    ('L', '101101010011'),
    ('M', '110110101001'),
    ('N', '101011010011'),
    ('O', '110101101001'),
    ('P', '101101101001'),
    ('Q', '101010110011'),
    ('R', '110101011001'),
    ('S', '101101011001'),
    ('T', '101011011001'),
    ('U', '110010101011'),
    ('V', '100110101011'),
    ('W', '110011010101'),
    ('X', '100101101011'),
    ('Y', '110010110101'),
    ('Z', '100110110101'),
    ('-', '100101011011'),
    ('.', '110010101101'),
    (' ', '100110101101'),
    ('$', '100100100101'),
    ('/', '100100101001'),
    ('+', '100101001001'),
    ('%', '101001001001'),
)

# The '*' start/stop character.
CODE39_GUARD = '100101101101'
CODE39_SEPARATOR = '0'


# ---------------------------------------------------------------------------
# Code93
# ---------------------------------------------------------------------------

# The full-ASCII shift characters are represented with ( ) [ ].
CODE93_CHARS: Tuple[Tuple[str, str], ...] = (
    ('0', '100010100'),
    ('1', '101001000'),
    ('2', '101000100'),
    ('3', '101000010'),
    ('4', '100101000'),
    ('5', '100100100'),
    ('6', '100100010'),
    ('7', '101010000'),
    ('8', '100010010'),
    ('9', '100001010'),
    ('A', '110101000'),
    ('B', '110100100'),
    ('C', '110100010'),
    ('D', '110010100'),
    ('E', '110010010'),
    ('F', '110001010'),
    ('G', '101101000'),
    ('H', '101100100'),
    ('I', '101100010'),
    ('J', '100110100'),
    ('K', '100011010'),
    ('L', '101011000'),
    ('M', '101001100'),
    ('N', '101000110'),
    ('O', '100101100'),
    ('P', '100010110'),
    ('Q', '110110100'),
    ('R', '110110010'),
    ('S', '110101100'),
    ('T', '110100110'),
    ('U', '110010110'),
    ('V', '110011010'),
    ('W', '101101100'),
    ('X', '101100110'),
    ('Y', '100110110'),
    ('Z', '100111010'),
    ('-', '100101110'),
    ('.', '111010100'),
    (' ', '111010010'),
    ('$', '111001010'),
    ('/', '101101110'),
    ('+', '101110110'),
    ('%', '110101110'),
    ('(', '100100110'),
    (')', '111011010'),
    ('[', '111010110'),
    (']', '100110010'),
)

CODE93_GUARD = '101011110'
CODE93_TERMINATOR = '1'


# ---------------------------------------------------------------------------
# Code128
# ---------------------------------------------------------------------------

# Character-set control characters.
CODE128_SET_A = '\u00c0'  # À
CODE128_SET_B = '\u0181'  # Ɓ
CODE128_SET_C = '\u0106'  # Ć

# Function characters.
CODE128_FNC1 = '\u0179'   # Ź
CODE128_FNC2 = '\u017a'   # ź
CODE128_FNC3 = '\u017b'   # Ż
CODE128_FNC4 = '\u017c'   # ż
CODE128_SHIFT = '\u017d'  # Ž

CODE128_START_A = 103
CODE128_START_B = 104
CODE128_START_C = 105

# One row per symbol value: (set A member, set B member, set C member, pattern).
CODE128_CHARS: Tuple[Tuple[str, str, str, str], ...] = (
    (' ', ' ', '00', '11011001100'),
    ('!', '!', '01', '11001101100'),
    ('"', '"', '02', '11001100110'),
    ('#', '#', '03', '10010011000'),
    ('$', '$', '04', '10010001100'),
    ('%', '%', '05', '10001001100'),
    ('&', '&', '06', '10011001000'),
    ("'", "'", '07', '10011000100'),
    ('(', '(', '08', '10001100100'),
    (')', ')', '09', '11001001000'),
    ('*', '*', '10', '11001000100'),
    ('+', '+', '11', '11000100100'),
    (',', ',', '12', '10110011100'),
    ('-', '-', '13', '10011011100'),
    ('.', '.', '14', '10011001110'),
    ('/', '/', '15', '10111001100'),
    ('0', '0', '16', '10011101100'),
    ('1', '1', '17', '10011100110'),
    ('2', '2', '18', '11001110010'),
    ('3', '3', '19', '11001011100'),
    ('4', '4', '20', '11001001110'),
    ('5', '5', '21', '11011100100'),
    ('6', '6', '22', '11001110100'),
    ('7', '7', '23', '11101101110'),
    ('8', '8', '24', '11101001100'),
    ('9', '9', '25', '11100101100'),
    (':', ':', '26', '11100100110'),
    (';', ';', '27', '11101100100'),
    ('<', '<', '28', '11100110100'),
    ('=', '=', '29', '11100110010'),
    ('>', '>', '30', '11011011000'),
    ('?', '?', '31', '11011000110'),
    ('@', '@', '32', '11000110110'),
    ('A', 'A', '33', '10100011000'),
    ('B', 'B', '34', '10001011000'),
    ('C', 'C', '35', '10001000110'),
    ('D', 'D', '36', '10110001000'),
    ('E', 'E', '37', '10001101000'),
    ('F', 'F', '38', '10001100010'),
    ('G', 'G', '39', '11010001000'),
    ('H', 'H', '40', '11000101000'),
    ('I', 'I', '41', '11000100010'),
    ('J', 'J', '42', '10110111000'),
    ('K', 'K', '43', '10110001110'),
    ('L', 'L', '44', '10001101110'),
    ('M', 'M', '45', '10111011000'),
    ('N', 'N', '46', '10111000110'),
    ('O', 'O', '47', '10001110110'),
    ('P', 'P', '48', '11101110110'),
    ('Q', 'Q', '49', '11010001110'),
    ('R', 'R', '50', '11000101110'),
    ('S', 'S', '51', '11011101000'),
    ('T', 'T', '52', '11011100010'),
    ('U', 'U', '53', '11011101110'),
    ('V', 'V', '54', '11101011000'),
    ('W', 'W', '55', '11101000110'),
    ('X', 'X', '56', '11100010110'),
    ('Y', 'Y', '57', '11101101000'),
    ('Z', 'Z', '58', '11101100010'),
    ('[', '[', '59', '11100011010'),
    ('\\', '\\', '60', '11101111010'),
    (']', ']', '61', '11001000010'),
    ('^', '^', '62', '11110001010'),
    ('_', '_', '63', '10100110000'),
    ('\x00', '`', '64', '10100001100'),
    ('\x01', 'a', '65', '10010110000'),
    ('\x02', 'b', '66', '10010000110'),
    ('\x03', 'c', '67', '10000101100'),
    ('\x04', 'd', '68', '10000100110'),
    ('\x05', 'e', '69', '10110010000'),
    ('\x06', 'f', '70', '10110000100'),
    ('\x07', 'g', '71', '10011010000'),
    ('\x08', 'h', '72', '10011000010'),
    ('\x09', 'i', '73', '10000110100'),
    ('\x0a', 'j', '74', '10000110010'),
    ('\x0b', 'k', '75', '11000010010'),
    ('\x0c', 'l', '76', '11001010000'),
    ('\x0d', 'm', '77', '11110111010'),
    ('\x0e', 'n', '78', '11000010100'),
    ('\x0f', 'o', '79', '10001111010'),
    ('\x10', 'p', '80', '10100111100'),
    ('\x11', 'q', '81', '10010111100'),
    ('\x12', 'r', '82', '10010011110'),
    ('\x13', 's', '83', '10111100100'),
    ('\x14', 't', '84', '10011110100'),
    ('\x15', 'u', '85', '10011110010'),
    ('\x16', 'v', '86', '11110100100'),
    ('\x17', 'w', '87', '11110010100'),
    ('\x18', 'x', '88', '11110010010'),
    ('\x19', 'y', '89', '11011011110'),
    ('\x1a', 'z', '90', '11011110110'),
    ('\x1b', '{', '91', '11110110110'),
    ('\x1c', '|', '92', '10101111000'),
    ('\x1d', '}', '93', '10100011110'),
    ('\x1e', '~', '94', '10001011110'),
    ('\x1f', '\u00f7', '95', '10111101000'),
    (CODE128_FNC3, CODE128_FNC3, '96', '10111100010'),
    (CODE128_FNC2, CODE128_FNC2, '97', '11110101000'),
    (CODE128_SHIFT, CODE128_SHIFT, '98', '11110100010'),
    (CODE128_SET_C, CODE128_SET_C, '99', '10111011110'),
    (CODE128_SET_B, CODE128_FNC4, CODE128_SET_B, '10111101110'),
    (CODE128_FNC4, CODE128_SET_A, CODE128_SET_A, '11101011110'),
    (CODE128_FNC1, CODE128_FNC1, CODE128_FNC1, '11110101110'),
    ('START-A', 'START-A', 'START-A', '11010000100'),
    ('START-B', 'START-B', 'START-B', '11010010000'),
    ('START-C', 'START-C', 'START-C', '11010011100'),
)

CODE128_STOP = '11000111010'
CODE128_TERMINATION = '11'


# ---------------------------------------------------------------------------
# EAN / UPC
# ---------------------------------------------------------------------------

# Side tables indexed by digit: left odd parity (A), left even parity (B), right.
EAN_LEFT_ODD = 0
EAN_RIGHT = 2

EAN_ENCODINGS: Tuple[Tuple[str, ...], ...] = (
    (
        '0001101', '0011001', '0010011', '0111101', '0100011',
        '0110001', '0101111', '0111011', '0110111', '0001011',
    ),
    (
        '0100111', '0110011', '0011011', '0100001', '0011101',
        '0111001', '0000101', '0010001', '0001001', '0010111',
    ),
    (
        '1110010', '1100110', '1101100', '1000010', '1011100',
        '1001110', '1010000', '1000100', '1001000', '1110100',
    ),
)

# Parity of EAN-13 digits 3-7, selected by the first (number system) digit.
# Each entry is the EAN_ENCODINGS row to use: 0 odd, 1 even.
EAN13_PARITY: Tuple[Tuple[int, ...], ...] = (
    (0, 0, 0, 0, 0),
    (0, 1, 0, 1, 1),
    (0, 1, 1, 0, 1),
    (0, 1, 1, 1, 0),
    (1, 0, 0, 1, 1),
    (1, 1, 0, 0, 1),
    (1, 1, 1, 0, 0),
    (1, 0, 1, 0, 1),
    (1, 0, 1, 1, 0),
    (1, 1, 0, 1, 0),
)

EAN_LEFT_GUARD = '101'
EAN_MIDDLE_GUARD = '01010'
EAN_RIGHT_GUARD = '101'

# Supplemental (EAN-2 / EAN-5) add-ons.
EAN_SUPP_LEFT_GUARD = '1011'
EAN_SUPP_SEPARATOR = '01'

# EAN-5 parity selected by the supplemental checksum digit.
EAN5_PARITY: Tuple[Tuple[int, ...], ...] = (
    (0, 0, 1, 1, 1),
    (1, 0, 1, 0, 0),
    (1, 0, 0, 1, 0),
    (1, 0, 0, 0, 1),
    (0, 1, 1, 0, 0),
    (0, 0, 1, 1, 0),
    (0, 0, 0, 1, 1),
    (0, 1, 0, 1, 0),
    (0, 1, 0, 0, 1),
    (0, 0, 1, 0, 1),
)

# EAN-2 parity selected by the two-digit value modulo 4.
EAN2_PARITY: Tuple[Tuple[int, ...], ...] = (
    (0, 0),
    (0, 1),
    (1, 0),
    (1, 1),
)


# ---------------------------------------------------------------------------
# Two-of-five (standard / interleaved)
# ---------------------------------------------------------------------------

# Narrow/Wide element widths per digit.
TF_WIDTHS: Tuple[str, ...] = (
    'NNWWN', 'WNNNW', 'NWNNW',
    'WWNNN', 'NNWNW', 'WNWNN',
    'NWWNN', 'NNNWW', 'WNNWN',
    'NWNWN',
)

ITF_START = '1010'
ITF_STOP = '1101'
STF_START = '11011010'
STF_STOP = '11010110'

DIGITS = frozenset('0123456789')
