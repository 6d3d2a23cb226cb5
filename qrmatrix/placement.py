# -*- coding: utf-8 -*-
"""
Data Placement and Masking Module

Places the final codeword sequence into the free modules of a symbol in
the standard two-column zig-zag order, XORing every bit with the selected
mask pattern (ISO/IEC 18004:2015 sections 7.7.3 and 7.8.2).

Functions:
    placement_order: Free module coordinates in placement order
    place: Write codeword bits into a matrix under a mask
"""

import logging
from typing import Callable, Iterator, Optional, Sequence, Tuple

from .exceptions import InvalidConfiguration, PlacementError
from .functional_areas import DATA, ECC, REMAINDER, ModuleMatrix
from .versions import remainder_bits

logger = logging.getLogger(__name__)

MaskFunction = Callable[[int, int], bool]

# Mask predicates indexed by pattern id; x is the column, y the row
MASK_PATTERNS: Tuple[MaskFunction, ...] = (
    lambda x, y: (x + y) % 2 == 0,
    lambda x, y: y % 2 == 0,
    lambda x, y: x % 3 == 0,
    lambda x, y: (x + y) % 3 == 0,
    lambda x, y: (x // 3 + y // 2) % 2 == 0,
    lambda x, y: (x * y) % 2 + (x * y) % 3 == 0,
    lambda x, y: ((x * y) % 2 + (x * y) % 3) % 2 == 0,
    lambda x, y: ((x + y) % 2 + (x * y) % 3) % 2 == 0,
)


def mask_function(mask: int) -> MaskFunction:
    if not isinstance(mask, int) or not 0 <= mask < len(MASK_PATTERNS):
        raise InvalidConfiguration(f'Mask pattern must be between 0 and 7, got {mask!r}')
    return MASK_PATTERNS[mask]


def placement_order(matrix: ModuleMatrix) -> Iterator[Tuple[int, int]]:
    """
    Yield (row, col) of every free module in codeword placement order.

    Column pairs are walked from the right edge to the left, skipping the
    vertical timing column; the first pair goes upward, the next downward
    and so on. Within a pair the right column comes first.
    """
    size = matrix.size
    upward = True
    col = size - 1
    while col > 0:
        if col == 6:
            col -= 1
        rows = range(size - 1, -1, -1) if upward else range(size)
        for row in rows:
            for c in (col, col - 1):
                if not matrix.is_reserved(row, c):
                    yield row, c
        upward = not upward
        col -= 2


def place(matrix: ModuleMatrix, codewords: Sequence[int], mask: int,
          num_data_codewords: Optional[int] = None) -> int:
    """
    Place codeword bits into the free modules of ``matrix`` under a mask.

    Each free module receives the next bit (MSB first) XOR the mask
    predicate; modules left after the last codeword are remainder bits
    (zero before masking). Modules are tagged ``'data'`` or ``'ecc'``
    depending on the codeword they carry when ``num_data_codewords`` is
    given.

    Args:
        matrix (ModuleMatrix): Structure from ``build_structure``
        codewords (Sequence[int]): Final interleaved codeword sequence
        mask (int): Mask pattern id (0-7)
        num_data_codewords (Optional[int]): Leading codewords that are data

    Returns:
        int: Number of codeword bits consumed

    Raises:
        PlacementError: If the free modules do not match the codeword count
    """
    predicate = mask_function(mask)
    total_bits = len(codewords) * 8
    data_bits = total_bits if num_data_codewords is None else num_data_codewords * 8

    consumed = 0
    free = 0
    for row, col in placement_order(matrix):
        free += 1
        if consumed < total_bits:
            bit = (codewords[consumed >> 3] >> (7 - (consumed & 7))) & 1
            region = DATA if consumed < data_bits else ECC
            consumed += 1
        else:
            bit = 0
            region = REMAINDER
        matrix.set(row, col, bool(bit) ^ predicate(col, row), region)

    expected_free = total_bits + remainder_bits(matrix.version)
    if consumed != total_bits or free != expected_free:
        raise PlacementError(
            f'Version {matrix.version}: {free} free modules for {total_bits} codeword bits '
            f'(expected {expected_free}), {consumed} bits placed'
        )
    logger.debug(f'Placed {consumed} bits with mask {mask}, {free - consumed} remainder bits')
    return consumed
