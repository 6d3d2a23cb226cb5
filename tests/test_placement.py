# -*- coding: utf-8 -*-
import pytest

from qrmatrix import InvalidConfiguration, PlacementError, build_structure
from qrmatrix.functional_areas import DATA, ECC, REMAINDER
from qrmatrix.placement import MASK_PATTERNS, mask_function, place, placement_order
from qrmatrix.versions import raw_data_modules, remainder_bits, total_codewords


def test_mask_table():
    assert len(MASK_PATTERNS) == 8
    # (x, y) = (column, row)
    assert MASK_PATTERNS[0](0, 0) and not MASK_PATTERNS[0](1, 0)
    assert MASK_PATTERNS[1](5, 2) and not MASK_PATTERNS[1](2, 5)
    assert MASK_PATTERNS[2](3, 1) and not MASK_PATTERNS[2](1, 3)
    assert MASK_PATTERNS[4](3, 0) is False and MASK_PATTERNS[4](3, 2) is True
    assert MASK_PATTERNS[5](2, 3) and not MASK_PATTERNS[5](1, 1)
    for predicate in MASK_PATTERNS:
        assert predicate(0, 0)


@pytest.mark.parametrize('mask', [-1, 8, '1', None])
def test_mask_function_rejects(mask):
    with pytest.raises(InvalidConfiguration):
        mask_function(mask)


def test_placement_order_starts_bottom_right():
    matrix = build_structure(1)
    order = list(placement_order(matrix))
    assert order[:4] == [(20, 20), (20, 19), (19, 20), (19, 19)]
    # The second column pair runs downward from the top of the data area
    assert (9, 18) in order and order.index((9, 18)) > order.index((9, 19))
    assert order[-1] == (12, 0)


@pytest.mark.parametrize('version', [1, 2, 7, 14, 40])
def test_placement_order_covers_free_modules_once(version):
    matrix = build_structure(version)
    order = list(placement_order(matrix))
    assert len(order) == len(set(order)) == raw_data_modules(version)
    assert not any(matrix.is_reserved(r, c) for r, c in order)
    assert not any(c == 6 for _, c in order)


@pytest.mark.parametrize('mask', range(8))
def test_zero_codewords_show_the_mask(mask):
    matrix = build_structure(1)
    predicate = MASK_PATTERNS[mask]
    assert place(matrix, bytes(26), mask) == 208
    for r in range(matrix.size):
        for c in range(matrix.size):
            if not matrix.is_reserved(r, c):
                assert matrix.modules[r][c] == predicate(c, r)


def test_first_codeword_lands_bottom_right():
    matrix = build_structure(1)
    codewords = bytes([0b10100000]) + bytes(25)
    place(matrix, codewords, 1)  # mask 1 inverts even rows, row 20 is even
    assert matrix.modules[20][20] is False
    assert matrix.modules[20][19] is True
    assert matrix.modules[19][20] is True


def test_reserved_modules_untouched():
    matrix = build_structure(7)
    before = [row[:] for row in matrix.modules]
    place(matrix, bytes([0xFF]) * total_codewords(7), 3)
    for r in range(matrix.size):
        for c in range(matrix.size):
            if matrix.is_reserved(r, c):
                assert matrix.modules[r][c] == before[r][c]


def test_region_tags_after_placement():
    matrix = build_structure(2)
    place(matrix, bytes(44), 0, num_data_codewords=34)
    counts = {tag: sum(row.count(tag) for row in matrix.regions) for tag in (DATA, ECC, REMAINDER)}
    assert counts == {DATA: 34 * 8, ECC: 10 * 8, REMAINDER: remainder_bits(2)}


@pytest.mark.parametrize('count', [25, 27])
def test_codeword_count_mismatch(count):
    with pytest.raises(PlacementError):
        place(build_structure(1), bytes(count), 0)


def test_placement_error_is_assertion():
    assert issubclass(PlacementError, AssertionError)
