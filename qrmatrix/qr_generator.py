# -*- coding: utf-8 -*-
"""
QR Code Generator Module

This module wires the encoding pipeline together: payload classification
and bit packing, version resolution, Reed-Solomon error correction,
function pattern layout and masked data placement.

Functions:
    make_qr: Encode a payload with a prebuilt EncodeOptions record
    encode: Encode a payload from plain parameters
"""

import logging
from typing import Optional, Union

from .config import EncodeOptions
from .constants import ECLevel, Mode
from .encoding import Payload, make_data_codewords, make_segment
from .functional_areas import ModuleMatrix, build_structure, write_format_info
from .placement import place
from .reed_solomon import make_final_message
from .versions import resolve

logger = logging.getLogger(__name__)


def make_qr(payload: Payload, options: EncodeOptions) -> ModuleMatrix:
    """
    Encode a payload into a complete QR module matrix.

    Args:
        payload (Union[str, bytes]): Data to encode
        options (EncodeOptions): Validated encoding parameters

    Returns:
        ModuleMatrix: Finished symbol with version, EC level, mask and mode attached

    Raises:
        CapacityExceeded: If the payload does not fit into version 40
        InvalidCharacter: If the payload cannot be represented in the charset
        InvalidConfiguration: If byte mode is entered with an unknown charset
    """
    segment = make_segment(payload, options.mode, options.charset)
    version = resolve(segment.char_count, segment.mode, options.ec_level)
    data = make_data_codewords(segment, version, options.ec_level)
    codewords = make_final_message(data, version, options.ec_level)

    matrix = build_structure(version)
    write_format_info(matrix, options.ec_level, options.mask_pattern)
    place(matrix, codewords, options.mask_pattern, num_data_codewords=len(data))

    matrix.ec_level = options.ec_level
    matrix.mask_pattern = options.mask_pattern
    matrix.mode = segment.mode
    logger.debug(
        f'Encoded {segment.char_count} {segment.mode.name} chars as version {version}-'
        f'{options.ec_level.letter}, mask {options.mask_pattern}, {len(codewords)} codewords'
    )
    return matrix


def encode(
    payload: Payload,
    ec_level: Union[ECLevel, str] = ECLevel.LOW,
    mask_pattern: int = 0,
    charset: str = 'utf-8',
    mode: Optional[Union[Mode, str]] = None
) -> ModuleMatrix:
    """
    Encode a payload into a QR module matrix.

    The parameters are validated before any encoding starts. The smallest
    version able to hold the payload is chosen automatically; the mask is
    used as given.

    Args:
        payload (Union[str, bytes]): Text or raw bytes to encode
        ec_level (Union[ECLevel, str]): Error correction level ('L', 'M', 'Q', 'H')
        mask_pattern (int): Mask pattern (0-7)
        charset (str): Character encoding for byte mode (e.g., 'utf-8', 'iso-8859-1')
        mode (Optional[Union[Mode, str]]): Encoding mode override
            - None: Detect numeric, alphanumeric or byte mode from the payload
            - 'numeric' / 'alphanumeric' / 'byte': Used if the payload fits it,
              otherwise the detected mode wins

    Returns:
        ModuleMatrix: The encoded symbol

    Raises:
        InvalidConfiguration: If a parameter is invalid
        CapacityExceeded: If the payload is too long for version 40
        InvalidCharacter: If the payload cannot be encoded with ``charset``

    Example:
        >>> matrix = encode('HELLO WORLD', ec_level='Q', mask_pattern=2)
        >>> matrix.version, matrix.size, matrix.mode.name
        (1, 21, 'ALPHANUMERIC')
    """
    options = EncodeOptions(ec_level=ec_level, mask_pattern=mask_pattern, charset=charset, mode=mode)
    return make_qr(payload, options)
