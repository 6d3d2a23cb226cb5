# -*- coding: utf-8 -*-
import pytest

from qrmatrix import ECLevel, InvalidConfiguration
from qrmatrix.format_info import bch_remainder, format_info, version_info

# ISO/IEC 18004 Annex C, masks 0-7
FORMAT_GOLDEN = {
    ECLevel.LOW: (0x77C4, 0x72F3, 0x7DAA, 0x789D, 0x662F, 0x6318, 0x6C41, 0x6976),
    ECLevel.MEDIUM: (0x5412, 0x5125, 0x5E7C, 0x5B4B, 0x45F9, 0x40CE, 0x4F97, 0x4AA0),
    ECLevel.QUARTILE: (0x355F, 0x3068, 0x3F31, 0x3A06, 0x24B4, 0x2183, 0x2EDA, 0x2BED),
    ECLevel.HIGH: (0x1689, 0x13BE, 0x1CE7, 0x19D0, 0x0762, 0x0255, 0x0D0C, 0x083B),
}


@pytest.mark.parametrize('level', list(ECLevel))
@pytest.mark.parametrize('mask', range(8))
def test_format_info_golden(level, mask):
    assert format_info(level, mask) == FORMAT_GOLDEN[level][mask]


def test_format_info_low_mask_0():
    assert format_info(ECLevel.LOW, 0) == 0b111011111000100


@pytest.mark.parametrize('mask', [-1, 8])
def test_format_info_rejects_mask(mask):
    with pytest.raises(InvalidConfiguration):
        format_info(ECLevel.LOW, mask)


# ISO/IEC 18004 Annex D
@pytest.mark.parametrize('version, expected', [
    (7, 0x07C94),
    (8, 0x085BC),
    (9, 0x09A99),
    (10, 0x0A4D3),
    (40, 0x28C69),
])
def test_version_info_golden(version, expected):
    assert version_info(version) == expected


@pytest.mark.parametrize('version', [1, 6, 41])
def test_version_info_range(version):
    with pytest.raises(InvalidConfiguration):
        version_info(version)


def test_bch_remainder_fits():
    for value in range(1 << 5):
        assert bch_remainder(value << 10, 0b10100110111, 10).bit_length() <= 10
