# -*- coding: utf-8 -*-
"""
QR Code Functional Areas Module

This module lays out the function patterns of a QR symbol according to
ISO/IEC 18004:2015: finder patterns with their separators, timing
patterns, alignment patterns, the dark module, the format information
strips and (version 7+) the version information blocks. Every module is
tagged with the region it belongs to, which gives the reserved-area
predicate used by data placement.

Classes:
    ModuleMatrix: Module states plus region tags of one symbol

Functions:
    alignment_positions: Alignment pattern centres of a version
    build_structure: Matrix with all function patterns placed
    write_format_info: Fill both format information strips
"""

from typing import Iterator, List, Optional, Tuple

import numpy as np

from .constants import ALIGNMENT_POSITIONS, ECLevel, Mode
from .format_info import format_info, version_info
from .versions import check_version, symbol_size

# Region tags; the first group is reserved, the second carries codeword bits
FINDER = 'finder'
SEPARATOR = 'separator'
TIMING = 'timing'
ALIGNMENT = 'alignment'
DARK = 'dark'
FORMAT = 'format'
VERSION = 'version'
DATA = 'data'
ECC = 'ecc'
REMAINDER = 'remainder'

RESERVED_REGIONS = frozenset((FINDER, SEPARATOR, TIMING, ALIGNMENT, DARK, FORMAT, VERSION))


class ModuleMatrix:
    """
    Square grid of modules with a region tag per module.

    ``modules[row][col]`` is True for an active (dark) module.
    ``regions[row][col]`` names the function pattern the module belongs to,
    or ``'data'``/``'ecc'``/``'remainder'`` for modules carrying codeword
    bits. Encoding metadata (EC level, mask, mode) is attached by the
    pipeline once the symbol is complete.
    """

    def __init__(self, version: int):
        self.version = check_version(version)
        self.size = symbol_size(version)
        self.modules: List[List[bool]] = [[False] * self.size for _ in range(self.size)]
        self.regions: List[List[str]] = [[DATA] * self.size for _ in range(self.size)]
        self.ec_level: Optional[ECLevel] = None
        self.mask_pattern: Optional[int] = None
        self.mode: Optional[Mode] = None

    def set(self, row: int, col: int, active: bool, region: str) -> None:
        self.modules[row][col] = bool(active)
        self.regions[row][col] = region

    def is_reserved(self, row: int, col: int) -> bool:
        """True if the module belongs to a function pattern and must not carry data."""
        return self.regions[row][col] in RESERVED_REGIONS

    def is_dark(self, row: int, col: int) -> bool:
        return self.modules[row][col]

    def count_free_modules(self) -> int:
        return sum(1 for row in self.regions for region in row if region not in RESERVED_REGIONS)

    def to_array(self) -> np.ndarray:
        """Module states as a ``size x size`` boolean numpy array."""
        return np.array(self.modules, dtype=bool)

    def __iter__(self) -> Iterator[List[bool]]:
        return iter(self.modules)

    def __len__(self) -> int:
        return self.size

    def __repr__(self) -> str:
        return (f'<ModuleMatrix version={self.version} size={self.size} '
                f'ec_level={getattr(self.ec_level, "letter", None)} mask={self.mask_pattern}>')

    def to_text(self, dark: str = '#', light: str = '.') -> str:
        return '\n'.join(''.join(dark if v else light for v in row) for row in self.modules)


def alignment_positions(version: int) -> Tuple[int, ...]:
    """
    Alignment pattern centre coordinates for a QR version.

    Each coordinate is used both as row and column; the three pairs that
    would overlap a finder pattern are skipped by ``build_structure``.

    Example:
        >>> alignment_positions(7)
        (6, 22, 38)
    """
    return ALIGNMENT_POSITIONS[check_version(version) - 1]


def _add_finder_pattern(matrix: ModuleMatrix, r0: int, c0: int) -> None:
    # 7x7 finder plus 1-module light separator, clipped at the symbol edge
    size = matrix.size
    for r in range(r0 - 1, r0 + 8):
        for c in range(c0 - 1, c0 + 8):
            if not (0 <= r < size and 0 <= c < size):
                continue
            dr, dc = r - r0, c - c0
            if not (0 <= dr <= 6 and 0 <= dc <= 6):
                matrix.set(r, c, False, SEPARATOR)
                continue
            ring = max(abs(dr - 3), abs(dc - 3))
            matrix.set(r, c, ring != 2, FINDER)


def _add_timing_patterns(matrix: ModuleMatrix) -> None:
    for i in range(8, matrix.size - 8):
        matrix.set(6, i, i % 2 == 0, TIMING)
        matrix.set(i, 6, i % 2 == 0, TIMING)


def _add_alignment_patterns(matrix: ModuleMatrix) -> None:
    size = matrix.size
    centers = alignment_positions(matrix.version)
    for cy in centers:
        for cx in centers:
            # Skip the three corners occupied by finder patterns
            if (cy <= 8 and cx <= 8) or (cy <= 8 and cx >= size - 9) or (cy >= size - 9 and cx <= 8):
                continue
            for r in range(cy - 2, cy + 3):
                for c in range(cx - 2, cx + 3):
                    ring = max(abs(r - cy), abs(c - cx))
                    matrix.set(r, c, ring != 1, ALIGNMENT)


def _format_coordinates(size: int) -> Tuple[List[Tuple[int, int]], List[Tuple[int, int]]]:
    """
    (row, col) of format bits 0..14 (LSB first) for both copies.

    The first copy wraps around the top-left finder, skipping the timing
    row/column; the second is split between the top-right and bottom-left
    finders.
    """
    first = [(r, 8) for r in range(6)] + [(7, 8), (8, 8), (8, 7)] + [(8, c) for c in range(5, -1, -1)]
    second = [(8, size - 1 - i) for i in range(8)] + [(size - 7 + i, 8) for i in range(7)]
    return first, second


def _add_version_info(matrix: ModuleMatrix) -> None:
    bits = version_info(matrix.version)
    size = matrix.size
    for i in range(18):
        active = bool(bits >> i & 1)
        a, b = i // 3, size - 11 + i % 3
        # Bottom-left block and its transpose in the top-right
        matrix.set(b, a, active, VERSION)
        matrix.set(a, b, active, VERSION)


def build_structure(version: int) -> ModuleMatrix:
    """
    Build a matrix with every function pattern of a version in place.

    Format strips are reserved but left light until ``write_format_info``
    fills them; all remaining modules are tagged ``'data'``.

    Args:
        version (int): QR code version (1-40)

    Returns:
        ModuleMatrix: Structure with ``is_reserved`` valid for every module

    Example:
        >>> matrix = build_structure(1)
        >>> matrix.size, matrix.count_free_modules()
        (21, 208)
    """
    matrix = ModuleMatrix(version)
    size = matrix.size

    for r0, c0 in ((0, 0), (0, size - 7), (size - 7, 0)):
        _add_finder_pattern(matrix, r0, c0)
    _add_timing_patterns(matrix)
    _add_alignment_patterns(matrix)

    first, second = _format_coordinates(size)
    for r, c in first + second:
        matrix.set(r, c, False, FORMAT)
    matrix.set(size - 8, 8, True, DARK)

    if version >= 7:
        _add_version_info(matrix)
    return matrix


def write_format_info(matrix: ModuleMatrix, ec_level: ECLevel, mask: int) -> None:
    """Write the format information word for (EC level, mask) into both strips."""
    bits = format_info(ec_level, mask)
    first, second = _format_coordinates(matrix.size)
    for i in range(15):
        active = bool(bits >> i & 1)
        for r, c in (first[i], second[i]):
            matrix.set(r, c, active, FORMAT)
