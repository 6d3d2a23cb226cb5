# -*- coding: utf-8 -*-
"""
QR Matrix Encoder

Turns a text or byte payload into a QR symbol module matrix (ISO/IEC 18004)
with a caller-selected error correction level and mask pattern.

Modules:
    encoding: Mode selection and bit packing
    versions: Capacity tables and version resolution
    reed_solomon: GF(256) Reed-Solomon error correction
    format_info: BCH format and version information
    functional_areas: Function pattern layout and reserved areas
    placement: Zig-zag codeword placement and masking
    qr_generator: The complete encoding pipeline
    renderer: PNG and SVG rendering of encoded matrices
"""

__version__ = "1.0.0"
__author__ = "QR Generator Advanced Team"

from .config import EncodeOptions, RenderStyle
from .constants import ECLevel, Mode
from .exceptions import (
    CapacityExceeded, InvalidCharacter, InvalidConfiguration, PlacementError, QRMatrixError,
)
from .functional_areas import ModuleMatrix, build_structure
from .qr_generator import encode, make_qr
from .renderer import render_png, render_png_bytes, render_svg, render_zones_png

__all__ = [
    'encode',
    'make_qr',
    'EncodeOptions',
    'RenderStyle',
    'ECLevel',
    'Mode',
    'ModuleMatrix',
    'build_structure',
    'render_png',
    'render_png_bytes',
    'render_svg',
    'render_zones_png',
    'QRMatrixError',
    'CapacityExceeded',
    'InvalidCharacter',
    'InvalidConfiguration',
    'PlacementError',
]
