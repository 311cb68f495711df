"""Place codewords on a matrix and choose the mask."""

from __future__ import annotations

from itertools import chain, repeat
from typing import Iterable, Iterator

from . import encode, layout, polynomials
from .compact import CompactQR
from .datamasking import apply_mask
from .matrix import QRCode
from .module import ModuleType
from .options import ECL, Mask, Mode
from .score import score
from .version import Version

_MASKS = tuple(Mask)


def _bits(data: Iterable[int]) -> Iterator[bool]:
    for byte in data:
        for shift in range(7, -1, -1):
            yield bool(byte >> shift & 1)


def place_on_matrix_data(qr: QRCode, bits: CompactQR) -> None:
    """Write ``bits`` into the data modules of ``qr`` in zig-zag order.

    Columns are walked in pairs from the right, skipping the vertical timing
    line; modules past the end of ``bits`` are left light.
    """
    stream = chain(_bits(bits.data), repeat(False))
    size = qr.size
    columns = [*range(size - 1, 6, -1), *range(5, -1, -1)][::2]

    for index, x in enumerate(columns):
        rows = range(size - 1, -1, -1) if index % 2 == 0 else range(size)
        for y in rows:
            for module in (qr[y][x], qr[y][x - 1]):
                if module.module_type is ModuleType.DATA:
                    module.set(next(stream))


def place_on_matrix(
    bits: CompactQR, quality: ECL, version: Version, mask: Mask | None = None
) -> QRCode:
    """Build the full matrix for ``bits``, masked and with format information.

    When ``mask`` is None the mask with the lowest penalty score is chosen.
    The mask used is stored on the returned code.
    """
    qr = layout.create_matrix(version)
    place_on_matrix_data(qr, bits)

    if mask is None:
        transposed = layout.transpose(qr)

        def masked_score(candidate: Mask) -> int:
            copy = qr.copy()
            apply_mask(copy, candidate)
            return score(copy, transposed)

        mask = min(_MASKS, key=masked_score)

    layout.create_matrix_format_info(qr, quality, mask)
    apply_mask(qr, mask)
    qr.mask = mask
    return qr


def create_matrix(
    data: Iterable[int], ecl: ECL, mode: Mode, version: Version, mask: Mask | None = None
) -> QRCode:
    """Encode ``data`` and return the finished QR code."""
    codewords = encode.encode(data, ecl, mode, version)
    codeword_structure = polynomials.structure(codewords.data, ecl, version)

    length = version.max_bytes() * 8 + version.missing_bits()
    bits = CompactQR.from_array(codeword_structure + bytes(1), length)

    qr = place_on_matrix(bits, ecl, version, mask)
    qr.mode = mode
    qr.ecl = ecl
    qr.version = version
    return qr