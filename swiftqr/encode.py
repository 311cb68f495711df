"""Turn a payload into the data codewords of a QR code."""

from __future__ import annotations

from typing import Callable, Iterable

from . import hardcode
from .compact import CompactQR
from .options import ECL, Mode
from .version import Version

_MODE_INDICATOR = {
    Mode.NUMERIC: 0b0001,
    Mode.ALPHANUMERIC: 0b0010,
    Mode.BYTE: 0b0100,
}

# Bit widths of a numeric group, keyed by the number of digits in it.
_NUMERIC_WIDTHS = {1: 4, 2: 7, 3: 10}

# Alphanumeric symbols after the digits and letters, valued 36 to 44.
_ALPHANUMERIC_SYMBOLS = b" $%*+-./:"


def _is_digit(c: int) -> bool:
    return 0x30 <= c <= 0x39


def _digits_value(chunk: bytes) -> int:
    if not all(_is_digit(c) for c in chunk):
        raise ValueError(f"{chunk!r} is not made of ASCII digits")
    return int(chunk.decode("ascii"))


def ascii_to_alphanumeric(c: int) -> int:
    """Return the value of an ASCII character in the alphanumeric charset."""
    if _is_digit(c):
        return c - 0x30
    if 0x41 <= c <= 0x5A:
        return c - 0x41 + 10
    index = _ALPHANUMERIC_SYMBOLS.find(bytes([c])) if 0 <= c <= 0xFF else -1
    if index < 0:
        raise ValueError(f"character {chr(c)!r} is not in the alphanumeric charset")
    return 36 + index


def is_qr_alphanumeric(c: int) -> bool:
    """Tell whether an ASCII character belongs to the alphanumeric charset."""
    return _is_digit(c) or 0x41 <= c <= 0x5A or c in _ALPHANUMERIC_SYMBOLS


def best_encoding(data: Iterable[int]) -> Mode:
    """Pick the most compact mode able to hold ``data``: numeric, alphanumeric, then byte."""
    data = bytes(data)
    if all(_is_digit(c) for c in data):
        return Mode.NUMERIC
    if all(is_qr_alphanumeric(c) for c in data):
        return Mode.ALPHANUMERIC
    return Mode.BYTE


def encode_numeric(compact: CompactQR, data: bytes, cci_bits: int) -> None:
    """Append a numeric segment: digits packed three to ten bits."""
    data = bytes(data)
    compact.push_bits(_MODE_INDICATOR[Mode.NUMERIC], 4)
    compact.push_bits(len(data), cci_bits)
    for start in range(0, len(data), 3):
        chunk = data[start:start + 3]
        compact.push_bits(_digits_value(chunk), _NUMERIC_WIDTHS[len(chunk)])


def encode_alphanumeric(compact: CompactQR, data: bytes, cci_bits: int) -> None:
    """Append an alphanumeric segment: characters packed two to eleven bits."""
    data = bytes(data)
    compact.push_bits(_MODE_INDICATOR[Mode.ALPHANUMERIC], 4)
    compact.push_bits(len(data), cci_bits)
    for start in range(0, len(data) - 1, 2):
        first = ascii_to_alphanumeric(data[start])
        second = ascii_to_alphanumeric(data[start + 1])
        compact.push_bits(first * 45 + second, 11)
    if len(data) % 2:
        compact.push_bits(ascii_to_alphanumeric(data[-1]), 6)


def encode_byte(compact: CompactQR, data: bytes, cci_bits: int) -> None:
    """Append a byte segment holding ``data`` as is."""
    data = bytes(data)
    compact.push_bits(_MODE_INDICATOR[Mode.BYTE], 4)
    compact.push_bits(len(data), cci_bits)
    compact.push_u8_slice(data)


_ENCODERS: dict[Mode, Callable[[CompactQR, bytes, int], None]] = {
    Mode.NUMERIC: encode_numeric,
    Mode.ALPHANUMERIC: encode_alphanumeric,
    Mode.BYTE: encode_byte,
}


def _add_terminator(compact: CompactQR, data_bits: int) -> None:
    free = data_bits - len(compact)
    if free < 0:
        raise ValueError("encoded data does not fit in the chosen version and level")
    compact.push_bits(0, min(free, 4))


def _pad_to_8(compact: CompactQR) -> None:
    compact.push_bits(0, (8 - len(compact) % 8) % 8)


def encode(data: Iterable[int], ecl: ECL, mode: Mode, version: Version) -> CompactQR:
    """Encode ``data`` in ``mode`` and pad it to every codeword of ``version``."""
    data = bytes(data)
    compact = CompactQR.from_version(version)
    _ENCODERS[mode](compact, data, hardcode.cci_bits(version, mode))
    _add_terminator(compact, hardcode.data_bits(version, ecl))
    _pad_to_8(compact)
    compact.fill()
    return compact