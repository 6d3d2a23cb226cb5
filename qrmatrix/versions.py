# -*- coding: utf-8 -*-
"""
QR Code Version Module

Symbol capacity and Reed-Solomon block layout for versions 1-40, and the
resolver that picks the smallest version able to hold a payload.

Functions:
    raw_data_modules: Count of modules available for codeword bits
    total_codewords: Codewords (data + EC) a version holds
    data_codewords: Data codewords for a version and EC level
    block_layout: Data codeword count of every RS block
    capacity: Maximum character count per version, EC level and mode
    resolve: Smallest version that fits a payload
"""

import logging
from typing import Dict, List, Tuple

from .constants import (
    ALIGNMENT_POSITIONS, EC_CODEWORDS_PER_BLOCK, MAX_VERSION, MIN_VERSION,
    NUM_EC_BLOCKS, ECLevel, Mode,
)
from .exceptions import CapacityExceeded, InvalidConfiguration

logger = logging.getLogger(__name__)


def check_version(version: int) -> int:
    if not isinstance(version, int) or not MIN_VERSION <= version <= MAX_VERSION:
        raise InvalidConfiguration(f'Version must be between {MIN_VERSION} and {MAX_VERSION}, got {version!r}')
    return version


def symbol_size(version: int) -> int:
    """Modules per side: 21 for version 1, 177 for version 40."""
    return 17 + 4 * version


def raw_data_modules(version: int) -> int:
    """
    Count the modules left for codeword bits once every function pattern is placed.

    Args:
        version (int): QR code version (1-40)

    Returns:
        int: Number of data modules, including the remainder bits

    Note:
        Finder patterns with separators and format areas take 225 modules,
        the timing patterns the rest of row/column 6; each alignment
        pattern not clipped by a finder takes 25 and v7+ adds two 18-module
        version blocks.
    """
    size = symbol_size(version)
    result = size * size - 3 * 64 - 31 - 2 * (size - 16)
    num_align = len(ALIGNMENT_POSITIONS[version - 1])
    if num_align:
        # Three corner positions collide with finder patterns; the rest
        # that share row or column 6 overlap the timing pattern by 5 modules
        result -= 25 * (num_align * num_align - 3)
        result += 10 * (num_align - 2)
    if version >= 7:
        result -= 36
    return result


def total_codewords(version: int) -> int:
    return raw_data_modules(version) // 8


def remainder_bits(version: int) -> int:
    """Number of trailing data modules not covered by a whole codeword (0, 3, 4 or 7)."""
    return raw_data_modules(version) % 8


def ec_codewords_per_block(version: int, ec_level: ECLevel) -> int:
    return EC_CODEWORDS_PER_BLOCK[version - 1][ec_level.index]


def num_blocks(version: int, ec_level: ECLevel) -> int:
    return NUM_EC_BLOCKS[version - 1][ec_level.index]


def ec_codewords(version: int, ec_level: ECLevel) -> int:
    """Total EC codewords over all blocks."""
    return ec_codewords_per_block(version, ec_level) * num_blocks(version, ec_level)


def data_codewords(version: int, ec_level: ECLevel) -> int:
    """
    Number of data codewords a symbol carries.

    Example:
        >>> data_codewords(1, ECLevel.LOW)
        19
        >>> data_codewords(40, ECLevel.HIGH)
        1276
    """
    return total_codewords(version) - ec_codewords(version, ec_level)


def block_layout(version: int, ec_level: ECLevel) -> List[int]:
    """
    Data codeword count of each RS block in transmission order.

    Group 1 (short) blocks come first, group 2 blocks hold one codeword more.

    Example:
        >>> block_layout(5, ECLevel.QUARTILE)
        [15, 15, 16, 16]
    """
    blocks = num_blocks(version, ec_level)
    total = data_codewords(version, ec_level)
    short_len, num_long = divmod(total, blocks)
    return [short_len] * (blocks - num_long) + [short_len + 1] * num_long


def _payload_bits(mode: Mode, length: int) -> int:
    if mode is Mode.NUMERIC:
        return 10 * (length // 3) + (0, 4, 7)[length % 3]
    if mode is Mode.ALPHANUMERIC:
        return 11 * (length // 2) + 6 * (length % 2)
    return 8 * length


def _max_chars(version: int, ec_level: ECLevel, mode: Mode) -> int:
    available = data_codewords(version, ec_level) * 8 - 4 - mode.char_count_bits(version)
    if mode is Mode.NUMERIC:
        groups, rest = divmod(available, 10)
        count = groups * 3 + (2 if rest >= 7 else 1 if rest >= 4 else 0)
    elif mode is Mode.ALPHANUMERIC:
        pairs, rest = divmod(available, 11)
        count = pairs * 2 + (1 if rest >= 6 else 0)
    else:
        count = available // 8
    # The count field cannot express more than its width allows
    return min(count, (1 << mode.char_count_bits(version)) - 1)


def _build_capacity_table() -> Dict[Tuple[ECLevel, Mode], Tuple[int, ...]]:
    return {
        (level, mode): tuple(_max_chars(v, level, mode) for v in range(MIN_VERSION, MAX_VERSION + 1))
        for level in ECLevel
        for mode in Mode
    }


# (ec_level, mode) -> max characters for versions 1..40
CAPACITY = _build_capacity_table()


def capacity(version: int, ec_level: ECLevel, mode: Mode) -> int:
    """
    Maximum number of characters (bytes in byte mode) a version holds.

    Example:
        >>> capacity(1, ECLevel.LOW, Mode.ALPHANUMERIC)
        25
    """
    return CAPACITY[(ec_level, mode)][version - 1]


def bit_length(length: int, mode: Mode, version: int) -> int:
    """Bits used by header and payload, without terminator or padding."""
    return 4 + mode.char_count_bits(version) + _payload_bits(mode, length)


def resolve(length: int, mode: Mode, ec_level: ECLevel) -> int:
    """
    Find the smallest version that holds a payload.

    Args:
        length (int): Character count (byte count in byte mode)
        mode (Mode): Encoding mode of the single segment
        ec_level (ECLevel): Requested error correction level

    Returns:
        int: Version between 1 and 40

    Raises:
        CapacityExceeded: If even version 40 is too small

    Example:
        >>> resolve(30, Mode.ALPHANUMERIC, ECLevel.LOW)
        2
    """
    for version, cell in enumerate(CAPACITY[(ec_level, mode)], start=MIN_VERSION):
        if length <= cell:
            logger.debug(f'Resolved version {version} for {length} {mode.name} chars at EC {ec_level.letter}')
            return version
    raise CapacityExceeded(
        f'{length} {mode.name.lower()} characters exceed the capacity of version {MAX_VERSION} '
        f'at error correction level {ec_level.letter} '
        f'(max {CAPACITY[(ec_level, mode)][-1]})'
    )
