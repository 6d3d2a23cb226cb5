# -*- coding: utf-8 -*-
"""
Format and Version Information Module

BCH(15,5) format information (EC level + mask pattern) and BCH(18,6)
version information (versions 7-40), ISO/IEC 18004:2015 sections 7.9 and
7.10.
"""

from .constants import FORMAT_GENERATOR, FORMAT_MASK, VERSION_GENERATOR, ECLevel
from .exceptions import InvalidConfiguration


def bch_remainder(value: int, generator: int, remainder_length: int) -> int:
    """
    Reduce ``value`` modulo ``generator`` over GF(2).

    Before each XOR the generator is shifted so that its highest bit lines
    up with the highest set bit of the operand; reduction stops once the
    operand fits into ``remainder_length`` bits.
    """
    generator_length = generator.bit_length()
    while value.bit_length() > remainder_length:
        value ^= generator << (value.bit_length() - generator_length)
    return value


def format_info(ec_level: ECLevel, mask: int) -> int:
    """
    Compute the 15-bit format information word.

    Args:
        ec_level (ECLevel): Error correction level
        mask (int): Mask pattern id (0-7)

    Returns:
        int: ``seed << 10 | BCH remainder``, XORed with 0b101010000010010

    Example:
        >>> hex(format_info(ECLevel.LOW, 0))
        '0x77c4'
    """
    if not 0 <= mask <= 7:
        raise InvalidConfiguration(f'Mask pattern must be between 0 and 7, got {mask!r}')
    seed = ec_level.bits << 3 | mask
    return (seed << 10 | bch_remainder(seed << 10, FORMAT_GENERATOR, 10)) ^ FORMAT_MASK


def version_info(version: int) -> int:
    """
    Compute the 18-bit version information word (versions 7-40 only).

    Example:
        >>> hex(version_info(7))
        '0x7c94'
    """
    if not 7 <= version <= 40:
        raise InvalidConfiguration(f'Version information exists for versions 7-40 only, got {version!r}')
    return version << 12 | bch_remainder(version << 12, VERSION_GENERATOR, 12)
