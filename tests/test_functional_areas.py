# -*- coding: utf-8 -*-
import numpy as np
import pytest

from qrmatrix import ECLevel, InvalidConfiguration, ModuleMatrix, build_structure
from qrmatrix.format_info import format_info, version_info
from qrmatrix.functional_areas import (
    ALIGNMENT, DARK, DATA, FINDER, FORMAT, RESERVED_REGIONS, SEPARATOR, TIMING, VERSION,
    alignment_positions, write_format_info,
)
from qrmatrix.versions import raw_data_modules

FINDER_ROWS = (
    '#######',
    '#.....#',
    '#.###.#',
    '#.###.#',
    '#.###.#',
    '#.....#',
    '#######',
)


def _block(matrix, r0, c0, height, width):
    return tuple(
        ''.join('#' if matrix.modules[r][c] else '.' for c in range(c0, c0 + width))
        for r in range(r0, r0 + height)
    )


def _as_int(bits):
    return int(''.join('1' if b else '0' for b in bits), 2)


@pytest.mark.parametrize('version', range(1, 41))
def test_free_modules_match_raw_data_modules(version):
    assert build_structure(version).count_free_modules() == raw_data_modules(version)


@pytest.mark.parametrize('version', [1, 7, 40])
def test_finder_patterns_and_separators(version):
    matrix = build_structure(version)
    size = matrix.size
    for r0, c0 in ((0, 0), (0, size - 7), (size - 7, 0)):
        assert _block(matrix, r0, c0, 7, 7) == FINDER_ROWS
        assert matrix.regions[r0 + 3][c0 + 3] == FINDER
    for i in range(8):
        assert matrix.regions[7][i] == SEPARATOR and not matrix.modules[7][i]
        assert matrix.regions[i][7] == SEPARATOR
        assert matrix.regions[7][size - 1 - i] == SEPARATOR
        assert matrix.regions[size - 8][i] == SEPARATOR


def test_timing_patterns():
    matrix = build_structure(3)
    for i in range(8, matrix.size - 8):
        assert matrix.regions[6][i] == TIMING
        assert matrix.regions[i][6] == TIMING
        assert matrix.modules[6][i] == (i % 2 == 0)
        assert matrix.modules[i][6] == (i % 2 == 0)


@pytest.mark.parametrize('version', [1, 9, 30])
def test_dark_module(version):
    matrix = build_structure(version)
    assert matrix.modules[matrix.size - 8][8]
    assert matrix.regions[matrix.size - 8][8] == DARK
    assert matrix.is_reserved(matrix.size - 8, 8)


@pytest.mark.parametrize('version, count', [(1, 0), (2, 1), (6, 1), (7, 6), (14, 13), (40, 46)])
def test_alignment_pattern_count(version, count):
    matrix = build_structure(version)
    modules = sum(row.count(ALIGNMENT) for row in matrix.regions)
    assert modules == 25 * count


def test_alignment_pattern_shape():
    matrix = build_structure(2)
    assert alignment_positions(2) == (6, 18)
    assert _block(matrix, 16, 16, 5, 5) == ('#####', '#...#', '#.#.#', '#...#', '#####')


def test_alignment_positions_table():
    assert alignment_positions(1) == ()
    assert alignment_positions(7) == (6, 22, 38)
    assert alignment_positions(40) == (6, 30, 58, 86, 114, 142, 170)
    with pytest.raises(InvalidConfiguration):
        alignment_positions(41)


def test_format_strips_reserved_before_writing():
    matrix = build_structure(1)
    size = matrix.size
    for i in range(9):
        if i != 6:
            assert matrix.regions[8][i] == FORMAT
            assert matrix.regions[i][8] == FORMAT
    for i in range(8):
        assert matrix.regions[8][size - 1 - i] == FORMAT
    for i in range(7):
        assert matrix.regions[size - 1 - i][8] == FORMAT
    assert not any(matrix.modules[8][c] for c in range(6))


@pytest.mark.parametrize('level, mask', [(ECLevel.LOW, 0), (ECLevel.HIGH, 5), (ECLevel.QUARTILE, 7)])
def test_write_format_info_both_copies(level, mask):
    matrix = build_structure(2)
    size = matrix.size
    write_format_info(matrix, level, mask)
    expected = format_info(level, mask)

    # Bits 14..0 read left to right along row 8, then bottom-up along column 8
    first = [matrix.modules[8][c] for c in (0, 1, 2, 3, 4, 5, 7, 8)] + \
        [matrix.modules[r][8] for r in (7, 5, 4, 3, 2, 1, 0)]
    second = [matrix.modules[r][8] for r in range(size - 1, size - 8, -1)] + \
        [matrix.modules[8][c] for c in range(size - 8, size)]
    assert _as_int(first) == expected
    assert _as_int(second) == expected
    assert matrix.modules[size - 8][8]


@pytest.mark.parametrize('version', [7, 21, 40])
def test_version_blocks(version):
    matrix = build_structure(version)
    size = matrix.size
    bits = version_info(version)
    for i in range(18):
        expected = bool(bits >> i & 1)
        assert matrix.modules[size - 11 + i % 3][i // 3] == expected
        assert matrix.modules[i // 3][size - 11 + i % 3] == expected
        assert matrix.regions[i // 3][size - 11 + i % 3] == VERSION


def test_no_version_blocks_below_7():
    matrix = build_structure(6)
    assert not any(VERSION in row for row in matrix.regions)


def test_every_module_is_reserved_or_data():
    matrix = build_structure(8)
    tags = {tag for row in matrix.regions for tag in row}
    assert tags <= RESERVED_REGIONS | {DATA}
    reserved = sum(matrix.is_reserved(r, c) for r in range(matrix.size) for c in range(matrix.size))
    assert reserved + matrix.count_free_modules() == matrix.size ** 2


def test_module_matrix_basics():
    matrix = ModuleMatrix(3)
    assert matrix.size == len(matrix) == 29
    assert matrix.ec_level is None and matrix.mask_pattern is None and matrix.mode is None
    array = matrix.to_array()
    assert array.shape == (29, 29) and array.dtype == np.bool_
    assert not array.any()
    matrix.set(0, 1, True, FINDER)
    assert matrix.is_dark(0, 1) and matrix.is_reserved(0, 1)
    assert matrix.to_text().splitlines()[0] == '.#' + '.' * 27
    assert len(list(matrix)) == 29
    assert 'version=3' in repr(matrix)
    with pytest.raises(InvalidConfiguration):
        ModuleMatrix(0)
