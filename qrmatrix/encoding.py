# -*- coding: utf-8 -*-
"""
Data Encoding Module

Classifies a payload into a single QR encoding mode and packs it into the
data codeword stream: mode indicator, character count, payload bits,
terminator and pad codewords.

Functions:
    determine_mode: Pick the most compact mode able to hold a text
    make_segment: Pack a payload into a Segment
    make_data_codewords: Complete data codewords for a version and EC level
"""

import codecs
import logging
import re
from typing import List, NamedTuple, Optional, Union

from .constants import ALPHANUMERIC_CHARS, PAD_CODEWORDS, TERMINATOR_LENGTH, ECLevel, Mode
from .exceptions import CapacityExceeded, InvalidCharacter, InvalidConfiguration
from .versions import data_codewords

logger = logging.getLogger(__name__)

Payload = Union[str, bytes]

_NUMERIC_RE = re.compile(r'[0-9]+')
_ALPHANUMERIC_RE = re.compile(r'[0-9A-Z $%*+\-./:]+')
_ALPHANUMERIC_VALUES = {char: value for value, char in enumerate(ALPHANUMERIC_CHARS)}

# Generality order used to decide if a requested mode can hold a payload
_MODE_RANK = {Mode.NUMERIC: 0, Mode.ALPHANUMERIC: 1, Mode.BYTE: 2}


class BitBuffer:
    """
    MSB-first bit accumulator.

    Example:
        >>> buff = BitBuffer()
        >>> buff.append_bits(0b0010, 4)
        >>> buff.append_bits(0b1111, 4)
        >>> buff.to_bytes()
        b'/'
    """

    __slots__ = ('_bits',)

    def __init__(self) -> None:
        self._bits: List[int] = []

    def append_bits(self, value: int, length: int) -> None:
        if length < 0 or value >> length:
            raise ValueError(f'Value {value} does not fit into {length} bits')
        self._bits.extend((value >> i) & 1 for i in reversed(range(length)))

    def extend(self, other: 'BitBuffer') -> None:
        self._bits.extend(other._bits)

    def to_bytes(self) -> bytes:
        """Pack the bits into bytes, zero-filling the last partial byte."""
        out = bytearray((len(self._bits) + 7) // 8)
        for i, bit in enumerate(self._bits):
            if bit:
                out[i >> 3] |= 0x80 >> (i & 7)
        return bytes(out)

    def __len__(self) -> int:
        return len(self._bits)

    def __getitem__(self, index):
        return self._bits[index]


class Segment(NamedTuple):
    """A payload packed in one mode; ``data`` holds the payload bits only."""

    mode: Mode
    char_count: int
    data: BitBuffer


def determine_mode(text: str) -> Mode:
    """
    Classify a text into the most compact mode that covers all of it.

    Example:
        >>> determine_mode('0123')
        <Mode.NUMERIC: (1, (10, 12, 14))>
        >>> determine_mode('HELLO WORLD').name
        'ALPHANUMERIC'
        >>> determine_mode('Hello').name
        'BYTE'
    """
    if _NUMERIC_RE.fullmatch(text):
        return Mode.NUMERIC
    if _ALPHANUMERIC_RE.fullmatch(text):
        return Mode.ALPHANUMERIC
    return Mode.BYTE


def _pack_numeric(text: str, buff: BitBuffer) -> None:
    for i in range(0, len(text), 3):
        group = text[i:i + 3]
        if not group.isdigit() or not group.isascii():
            raise InvalidCharacter(f'Invalid numeric data: {group!r}')
        buff.append_bits(int(group), len(group) * 3 + 1)


def _alphanumeric_value(char: str) -> int:
    try:
        return _ALPHANUMERIC_VALUES[char]
    except KeyError:
        raise InvalidCharacter(f'Character {char!r} is not valid in alphanumeric mode') from None


def _pack_alphanumeric(text: str, buff: BitBuffer) -> None:
    for i in range(0, len(text), 2):
        pair = text[i:i + 2]
        if len(pair) == 2:
            buff.append_bits(_alphanumeric_value(pair[0]) * 45 + _alphanumeric_value(pair[1]), 11)
        else:
            buff.append_bits(_alphanumeric_value(pair), 6)


def _to_bytes(payload: Payload, charset: str) -> bytes:
    if isinstance(payload, bytes):
        return payload
    try:
        codecs.lookup(charset)
    except LookupError:
        raise InvalidConfiguration(f'Unsupported charset: {charset!r}') from None
    try:
        return payload.encode(charset)
    except UnicodeEncodeError as ex:
        raise InvalidCharacter(
            f'Character {ex.object[ex.start:ex.end]!r} cannot be encoded with {charset}'
        ) from ex


def _select_mode(payload: Payload, requested: Optional[Mode]) -> Mode:
    detected = Mode.BYTE if isinstance(payload, bytes) else determine_mode(payload)
    if requested is None:
        return detected
    if _MODE_RANK[requested] >= _MODE_RANK[detected]:
        return requested
    logger.warning(f'Requested mode {requested.name} cannot hold the payload, using {detected.name}')
    return detected


def make_segment(payload: Payload, mode: Optional[Mode] = None, charset: str = 'utf-8') -> Segment:
    """
    Pack a payload into a single-mode segment.

    Args:
        payload (Union[str, bytes]): Text to classify, or raw bytes (always byte mode)
        mode (Optional[Mode]): Requested mode; ignored when the payload does not fit it
        charset (str): Codec used for text in byte mode

    Returns:
        Segment: Mode, character count and the packed payload bits

    Raises:
        InvalidCharacter: If the text cannot be represented in the charset
        InvalidConfiguration: If byte mode is entered with an unknown charset

    Example:
        >>> seg = make_segment('01234567')
        >>> seg.mode.name, seg.char_count, len(seg.data)
        ('NUMERIC', 8, 27)
    """
    selected = _select_mode(payload, mode)
    buff = BitBuffer()
    if selected is Mode.BYTE:
        data = _to_bytes(payload, charset)
        for byte in data:
            buff.append_bits(byte, 8)
        char_count = len(data)
    elif selected is Mode.ALPHANUMERIC:
        _pack_alphanumeric(payload, buff)
        char_count = len(payload)
    else:
        _pack_numeric(payload, buff)
        char_count = len(payload)
    logger.debug(f'Packed {char_count} chars in {selected.name} mode into {len(buff)} bits')
    return Segment(selected, char_count, buff)


def make_data_codewords(segment: Segment, version: int, ec_level: ECLevel) -> bytes:
    """
    Build the complete data codeword sequence for a symbol.

    Layout: [mode indicator: 4][character count][payload][terminator][zero
    bits to a byte boundary][0xEC 0x11 ... pad codewords].

    Args:
        segment (Segment): Packed payload
        version (int): Symbol version, decides the count field width
        ec_level (ECLevel): Error correction level, decides the capacity

    Returns:
        bytes: Exactly ``data_codewords(version, ec_level)`` codewords
    """
    count_bits = segment.mode.char_count_bits(version)
    capacity_bits = data_codewords(version, ec_level) * 8

    buff = BitBuffer()
    buff.append_bits(segment.mode.indicator, 4)
    buff.append_bits(segment.char_count, count_bits)
    buff.extend(segment.data)
    if len(buff) > capacity_bits:
        raise CapacityExceeded(
            f'Segment needs {len(buff)} bits but version {version}-{ec_level.letter} holds {capacity_bits}'
        )

    # Terminator, truncated when the symbol is (almost) full
    buff.append_bits(0, min(TERMINATOR_LENGTH, capacity_bits - len(buff)))
    buff.append_bits(0, -len(buff) % 8)

    codewords = bytearray(buff.to_bytes())
    for i in range(capacity_bits // 8 - len(codewords)):
        codewords.append(PAD_CODEWORDS[i % 2])
    return bytes(codewords)
