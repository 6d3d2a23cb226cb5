# -*- coding: utf-8 -*-
"""
GF(256) Arithmetic Module

Log/antilog tables over GF(2^8) with the QR primitive polynomial
x^8 + x^4 + x^3 + x^2 + 1 (0x11D), and the Reed-Solomon generator
polynomials derived from them.

Functions:
    gf_mul: Multiply two field elements
    generator_polynomial: Monic RS generator polynomial of a given degree
"""

from functools import lru_cache
from typing import Tuple

PRIMITIVE = 0x11D


def _build_tables() -> Tuple[Tuple[int, ...], Tuple[int, ...]]:
    exp = [0] * 255
    log = [0] * 256
    x = 1
    for i in range(255):
        exp[i] = x
        log[x] = i
        x <<= 1
        if x & 0x100:
            x ^= PRIMITIVE
    return tuple(exp), tuple(log)


# log[0] is undefined and left at 0; gf_mul never reads it
EXP, LOG = _build_tables()


def gf_mul(a: int, b: int) -> int:
    """
    Multiply two elements of GF(256).

    Args:
        a (int): First operand (0-255)
        b (int): Second operand (0-255)

    Returns:
        int: The product, 0 if either operand is 0

    Example:
        >>> gf_mul(2, 128)  # x * x^7 = x^8 = 0x1D after reduction
        29
    """
    if a == 0 or b == 0:
        return 0
    return EXP[(LOG[a] + LOG[b]) % 255]


@lru_cache(maxsize=None)
def generator_polynomial(degree: int) -> Tuple[int, ...]:
    """
    Build the Reed-Solomon generator polynomial (x - a^0)(x - a^1)...(x - a^(degree-1)).

    Coefficients are returned highest degree first, without the leading 1,
    so the tuple has exactly ``degree`` entries.

    Args:
        degree (int): Number of EC codewords the polynomial produces

    Returns:
        Tuple[int, ...]: Generator coefficients
    """
    if degree < 1:
        raise ValueError(f'Generator degree must be positive, got {degree}')
    poly = [1]
    for i in range(degree):
        root = EXP[i]
        # Multiply poly by (x + root)
        product = poly + [0]
        for j in range(len(poly)):
            product[j + 1] ^= gf_mul(poly[j], root)
        poly = product
    return tuple(poly[1:])
