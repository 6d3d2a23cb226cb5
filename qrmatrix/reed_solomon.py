# -*- coding: utf-8 -*-
"""
Reed-Solomon Encoder Module

Derives error correction codewords over GF(256) and assembles the final
interleaved codeword sequence placed into the symbol.

Functions:
    compute_ec: EC codewords for one block of data codewords
    split_blocks: Split data codewords into the standard RS blocks
    make_final_message: Interleaved data + EC codeword sequence
"""

import logging
from typing import List, Sequence

from .constants import ECLevel
from .galois import generator_polynomial, gf_mul
from .versions import block_layout, data_codewords, ec_codewords_per_block

logger = logging.getLogger(__name__)


def compute_ec(data: Sequence[int], ec_count: int) -> bytes:
    """
    Compute the EC codewords of one block by polynomial division.

    An ``ec_count``-long remainder register is fed one data codeword at a
    time: the feedback term is the codeword XOR the register head, the
    register shifts left and, for non-zero feedback, every position is
    XORed with the matching generator coefficient times the feedback.

    Args:
        data (Sequence[int]): Data codewords of the block
        ec_count (int): Number of EC codewords to produce

    Returns:
        bytes: Exactly ``ec_count`` EC codewords

    Example:
        >>> compute_ec(bytes(5), 7)
        b'\\x00\\x00\\x00\\x00\\x00\\x00\\x00'
    """
    generator = generator_polynomial(ec_count)
    register = [0] * ec_count
    for byte in data:
        feedback = byte ^ register[0]
        register = register[1:] + [0]
        if feedback:
            for pos, coef in enumerate(generator):
                register[pos] ^= gf_mul(coef, feedback)
    return bytes(register)


def split_blocks(data: Sequence[int], version: int, ec_level: ECLevel) -> List[bytes]:
    """Split data codewords into RS blocks, short blocks first."""
    blocks = []
    offset = 0
    for length in block_layout(version, ec_level):
        blocks.append(bytes(data[offset:offset + length]))
        offset += length
    return blocks


def _interleave(blocks: Sequence[bytes]) -> bytearray:
    out = bytearray()
    for i in range(max(len(block) for block in blocks)):
        for block in blocks:
            if i < len(block):
                out.append(block[i])
    return out


def make_final_message(data: Sequence[int], version: int, ec_level: ECLevel) -> bytes:
    """
    Build the codeword sequence that is placed into the matrix.

    Data codewords are split into blocks, each block gets its own EC
    codewords, then data and EC codewords are interleaved column-wise
    (first codeword of every block, second codeword of every block, ...).

    Args:
        data (Sequence[int]): All data codewords, padded to capacity
        version (int): Symbol version (1-40)
        ec_level (ECLevel): Error correction level

    Returns:
        bytes: Interleaved data codewords followed by interleaved EC codewords

    Raises:
        ValueError: If ``data`` does not match the version's data capacity
    """
    expected = data_codewords(version, ec_level)
    if len(data) != expected:
        raise ValueError(f'Expected {expected} data codewords for version {version}-{ec_level.letter}, got {len(data)}')

    ec_count = ec_codewords_per_block(version, ec_level)
    data_blocks = split_blocks(data, version, ec_level)
    ec_blocks = [compute_ec(block, ec_count) for block in data_blocks]
    logger.debug(
        f'Version {version}-{ec_level.letter}: {len(data_blocks)} blocks, '
        f'{expected} data + {ec_count * len(ec_blocks)} EC codewords'
    )
    return bytes(_interleave(data_blocks) + _interleave(ec_blocks))
