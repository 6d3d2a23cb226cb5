# -*- coding: utf-8 -*-
"""
QR Code Constants Module

Encoding modes, error correction levels and the standard ISO/IEC 18004
lookup tables shared by the rest of the package. Everything here is built
once at import time and never mutated.
"""

from enum import Enum
from typing import Tuple, Union

from .exceptions import InvalidConfiguration


MIN_VERSION = 1
MAX_VERSION = 40

ALPHANUMERIC_CHARS = '0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ $%*+-./:'

# Pad codewords appended after the terminator (ISO/IEC 18004:2015 7.4.10)
PAD_CODEWORDS = (0xEC, 0x11)
TERMINATOR_LENGTH = 4


def version_tier(version: int) -> int:
    """Index of the character count field width: 0 for 1-9, 1 for 10-26, 2 for 27-40."""
    return 0 if version < 10 else 1 if version < 27 else 2


class Mode(Enum):
    """
    Data encoding modes supported by the encoder.

    Each member carries its 4-bit mode indicator and the character count
    field width for the three version tiers.
    """

    NUMERIC = (0b0001, (10, 12, 14))
    ALPHANUMERIC = (0b0010, (9, 11, 13))
    BYTE = (0b0100, (8, 16, 16))

    def __init__(self, indicator: int, count_bits: Tuple[int, int, int]):
        self.indicator = indicator
        self.count_bits = count_bits

    def char_count_bits(self, version: int) -> int:
        return self.count_bits[version_tier(version)]

    @classmethod
    def parse(cls, value: Union['Mode', str]) -> 'Mode':
        """
        Normalise a mode given as enum member or name ('numeric', 'BYTE', ...).

        Raises:
            InvalidConfiguration: If the value names no known mode
        """
        if isinstance(value, cls):
            return value
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            raise InvalidConfiguration(f'Unknown encoding mode: {value!r}') from None


class ECLevel(Enum):
    """
    Error correction levels with their 2-bit format indicator.

    The column index into the block tables follows the L, M, Q, H order.
    """

    LOW = (0b01, 'L', 0)
    MEDIUM = (0b00, 'M', 1)
    QUARTILE = (0b11, 'Q', 2)
    HIGH = (0b10, 'H', 3)

    def __init__(self, bits: int, letter: str, index: int):
        self.bits = bits
        self.letter = letter
        self.index = index

    @classmethod
    def parse(cls, value: Union['ECLevel', str]) -> 'ECLevel':
        """
        Normalise an error correction level.

        Accepts an ECLevel member, its letter ('L', 'M', 'Q', 'H') or its
        name ('low', 'QUARTILE', ...), case-insensitively.

        Raises:
            InvalidConfiguration: If the value names no known level
        """
        if isinstance(value, cls):
            return value
        text = str(value).strip().upper()
        for level in cls:
            if text in (level.letter, level.name):
                return level
        raise InvalidConfiguration(f'Unknown error correction level: {value!r}')


# EC codewords per block, indexed [version - 1][level.index] (L, M, Q, H)
EC_CODEWORDS_PER_BLOCK = (
    (7, 10, 13, 17), (10, 16, 22, 28), (15, 26, 18, 22), (20, 18, 26, 16), (26, 24, 18, 22),
    (18, 16, 24, 28), (20, 18, 18, 26), (24, 22, 22, 26), (30, 22, 20, 24), (18, 26, 24, 28),
    (20, 30, 28, 24), (24, 22, 26, 28), (26, 22, 24, 22), (30, 24, 20, 24), (22, 24, 30, 24),
    (24, 28, 24, 30), (28, 28, 28, 28), (30, 26, 28, 28), (28, 26, 26, 26), (28, 26, 30, 28),
    (28, 26, 28, 30), (28, 28, 30, 24), (30, 28, 30, 30), (30, 28, 30, 30), (26, 28, 30, 30),
    (28, 28, 28, 30), (30, 28, 30, 30), (30, 28, 30, 30), (30, 28, 30, 30), (30, 28, 30, 30),
    (30, 28, 30, 30), (30, 28, 30, 30), (30, 28, 30, 30), (30, 28, 30, 30), (30, 28, 30, 30),
    (30, 28, 30, 30), (30, 28, 30, 30), (30, 28, 30, 30), (30, 28, 30, 30), (30, 28, 30, 30),
)

# Number of Reed-Solomon blocks, indexed [version - 1][level.index]
NUM_EC_BLOCKS = (
    (1, 1, 1, 1), (1, 1, 1, 1), (1, 1, 2, 2), (1, 2, 2, 4), (1, 2, 4, 4),
    (2, 4, 4, 4), (2, 4, 6, 5), (2, 4, 6, 6), (2, 5, 8, 8), (4, 5, 8, 8),
    (4, 5, 8, 11), (4, 8, 10, 11), (4, 9, 12, 16), (4, 9, 16, 16), (6, 10, 12, 18),
    (6, 10, 17, 16), (6, 11, 16, 19), (6, 13, 18, 21), (7, 14, 21, 25), (8, 16, 20, 25),
    (8, 17, 23, 25), (9, 17, 23, 34), (9, 18, 25, 30), (10, 20, 27, 32), (12, 21, 29, 35),
    (12, 23, 34, 37), (12, 25, 34, 40), (13, 26, 35, 42), (14, 28, 38, 45), (15, 29, 40, 48),
    (16, 31, 43, 51), (17, 33, 45, 54), (18, 35, 48, 57), (19, 37, 51, 60), (19, 38, 53, 63),
    (20, 40, 56, 66), (21, 43, 59, 70), (22, 45, 62, 74), (24, 47, 65, 77), (25, 49, 68, 81),
)

# Alignment pattern centre coordinates (ISO/IEC 18004:2015 Annex E)
ALIGNMENT_POSITIONS = (
    (),
    (6, 18),
    (6, 22),
    (6, 26),
    (6, 30),
    (6, 34),
    (6, 22, 38),
    (6, 24, 42),
    (6, 26, 46),
    (6, 28, 50),
    (6, 30, 54),
    (6, 32, 58),
    (6, 34, 62),
    (6, 26, 46, 66),
    (6, 26, 48, 70),
    (6, 26, 50, 74),
    (6, 30, 54, 78),
    (6, 30, 56, 82),
    (6, 30, 58, 86),
    (6, 34, 62, 90),
    (6, 28, 50, 72, 94),
    (6, 26, 50, 74, 98),
    (6, 30, 54, 78, 102),
    (6, 28, 54, 80, 106),
    (6, 32, 58, 84, 110),
    (6, 30, 58, 86, 114),
    (6, 34, 62, 90, 118),
    (6, 26, 50, 74, 98, 122),
    (6, 30, 54, 78, 102, 126),
    (6, 26, 52, 78, 104, 130),
    (6, 30, 56, 82, 108, 134),
    (6, 34, 60, 86, 112, 138),
    (6, 30, 58, 86, 114, 142),
    (6, 34, 62, 90, 118, 146),
    (6, 30, 54, 78, 102, 126, 150),
    (6, 24, 50, 76, 102, 128, 154),
    (6, 28, 54, 80, 106, 132, 158),
    (6, 32, 58, 84, 110, 136, 162),
    (6, 26, 54, 82, 110, 138, 166),
    (6, 30, 58, 86, 114, 142, 170),
)

# BCH generator polynomials and the format information XOR mask
FORMAT_GENERATOR = 0b10100110111
FORMAT_MASK = 0b101010000010010
VERSION_GENERATOR = 0b1111100100101
