# -*- coding: utf-8 -*-
"""Shared fixtures for the qrmatrix test suite."""

import pytest

from qrmatrix import ECLevel, encode

# Alphanumeric scenario payload (30 characters)
SCENARIO_PAYLOAD = 'HELLO WORLD 123 123 123 123 HI'


@pytest.fixture
def scenario_payload():
    return SCENARIO_PAYLOAD


@pytest.fixture
def hello_matrix():
    """HELLO WORLD at version 1-Q with mask 2."""
    return encode('HELLO WORLD', ec_level=ECLevel.QUARTILE, mask_pattern=2)


@pytest.fixture
def segno_matrix():
    """
    Build the module matrix segno produces for fixed parameters.

    Returns a callable ``(payload, ec_level, version, mode, mask) -> List[List[bool]]``.
    """
    segno = pytest.importorskip('segno')

    def build(payload, ec_level, version, mode, mask):
        qr = segno.make(
            payload, error=ec_level.letter.lower(), version=version, mode=mode.name.lower(),
            mask=mask, eci=False, boost_error=False, micro=False,
        )
        return [[bool(v) for v in row] for row in qr.matrix]

    return build


@pytest.fixture
def client():
    from app import app as flask_app

    flask_app.config['TESTING'] = True
    with flask_app.test_client() as test_client:
        yield test_client
