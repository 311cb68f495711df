"""Build the function patterns of an empty QR code matrix."""

from __future__ import annotations

from . import hardcode
from .matrix import QRCode
from .module import Module
from .options import ECL, Mask
from .version import Version

POSITION_SIZE = 7
"""Width of a finder pattern."""


def transpose(qr: QRCode) -> QRCode:
    """Return a copy of ``qr`` with rows and columns swapped."""
    result = qr.copy()
    result.rows = [[Module(m.value, m.module_type) for m in column] for column in zip(*qr.rows)]
    return result


def create_matrix(version: Version) -> QRCode:
    """Return a matrix with every function pattern of ``version`` in place.

    The format information area is reserved with light modules.
    """
    qr = QRCode(version.size())

    create_matrix_pattern(qr)
    create_matrix_timing(qr)
    create_matrix_dark_module(qr)
    create_matrix_alignments(qr, version)
    create_matrix_version_info(qr, version)
    _create_matrix_empty(qr)

    n = qr.size
    for i in range(6):
        qr[8][i] = Module.format(Module.LIGHT)
        qr[i][8] = Module.format(Module.LIGHT)
        qr[8][n - 1 - i] = Module.format(Module.LIGHT)
        qr[n - 1 - i][8] = Module.format(Module.LIGHT)

    qr[8][7] = Module.format(Module.LIGHT)
    qr[8][8] = Module.format(Module.LIGHT)
    qr[7][8] = Module.format(Module.LIGHT)
    qr[8][n - 1 - 6] = Module.format(Module.LIGHT)
    qr[8][n - 1 - 7] = Module.format(Module.LIGHT)
    qr[n - 1 - 6][8] = Module.format(Module.LIGHT)

    return qr


def create_matrix_pattern(qr: QRCode) -> None:
    """Draw the three finder patterns."""
    length = qr.size
    corners = ((0, 0), (length - POSITION_SIZE, 0), (0, length - POSITION_SIZE))

    for y, x in corners:
        for j in range(7):
            qr[y][x + j] = Module.finder_pattern(Module.DARK)
            qr[y + 6][x + j] = Module.finder_pattern(Module.DARK)
            qr[y + j][x] = Module.finder_pattern(Module.DARK)
            qr[y + j][x + 6] = Module.finder_pattern(Module.DARK)

        for j in range(1, 6):
            qr[y + 1][x + j] = Module.finder_pattern(Module.LIGHT)
            qr[y + 5][x + j] = Module.finder_pattern(Module.LIGHT)
            qr[y + j][x + 1] = Module.finder_pattern(Module.LIGHT)
            qr[y + j][x + 5] = Module.finder_pattern(Module.LIGHT)

        for j in range(2, 5):
            for k in range(2, 5):
                qr[y + j][x + k] = Module.finder_pattern(Module.DARK)


def create_matrix_timing(qr: QRCode) -> None:
    """Draw the two timing lines between the finder patterns."""
    row = POSITION_SIZE - 1
    for i in range(POSITION_SIZE + 1, qr.size - POSITION_SIZE):
        value = (POSITION_SIZE + 1) % 2 == i % 2
        qr[row][i] = Module.timing(value)
        qr[i][row] = Module.timing(value)


def create_matrix_dark_module(qr: QRCode) -> None:
    """Place the module that is always dark."""
    qr[qr.size - 8][8] = Module.dark(Module.DARK)


def create_matrix_alignments(qr: QRCode, version: Version) -> None:
    """Draw the alignment patterns that ``version`` needs."""
    if version is Version.V01:
        return

    centres = version.alignment_patterns_grid()
    last = len(centres) - 1

    for i, centre_y in enumerate(centres):
        for j, centre_x in enumerate(centres):
            if (i == 0 and j in (0, last)) or (i == last and j == 0):
                continue

            y, x = centre_y - 2, centre_x - 2
            for offset in range(5):
                qr[y][x + offset] = Module.alignment(Module.DARK)
                qr[y + 4][x + offset] = Module.alignment(Module.DARK)
                qr[y + offset][x] = Module.alignment(Module.DARK)
                qr[y + offset][x + 4] = Module.alignment(Module.DARK)

            y, x = centre_y - 1, centre_x - 1
            for offset in range(3):
                qr[y][x + offset] = Module.alignment(Module.LIGHT)
                qr[y + 2][x + offset] = Module.alignment(Module.LIGHT)
                qr[y + offset][x] = Module.alignment(Module.LIGHT)
                qr[y + offset][x + 2] = Module.alignment(Module.LIGHT)

            qr[centre_y][centre_x] = Module.alignment(Module.DARK)


def create_matrix_version_info(qr: QRCode, version: Version) -> None:
    """Draw both copies of the version information, from version 7 onwards."""
    if version.value < Version.V07.value:
        return

    info = version.information()
    n = qr.size
    for i in range(3):
        for j in range(6):
            value = bool(info & (1 << (j * 3 + i)))
            qr[j][n - 11 + i] = Module.version(value)
            qr[n - 11 + i][j] = Module.version(value)


def create_matrix_format_info(qr: QRCode, quality: ECL, mask: Mask) -> None:
    """Write both copies of the format information for ``quality`` and ``mask``."""
    info = hardcode.ecm_to_format_information(quality, mask)
    n = qr.size

    def bit(index: int) -> bool:
        return bool(info & (1 << index))

    for i in range(5, -1, -1):
        value = bit(i + 9)
        qr[8][5 - i] = Module.format(value)
        qr[n - 6 + i][8] = Module.format(value)

    for i in range(6):
        value = bit(i)
        qr[i][8] = Module.format(value)
        qr[8][n - i - 1] = Module.format(value)

    qr[8][7] = Module.format(bit(8))
    qr[n - 7][8] = Module.format(bit(8))

    qr[8][8] = Module.format(bit(7))
    qr[8][n - 8] = Module.format(bit(7))

    qr[7][8] = Module.format(bit(6))
    qr[8][n - 7] = Module.format(bit(6))


def _create_matrix_empty(qr: QRCode) -> None:
    """Draw the light separators around the finder patterns."""
    n = qr.size
    for i in range(8):
        qr[i][7] = Module.empty(Module.LIGHT)
        qr[7][i] = Module.empty(Module.LIGHT)

        qr[n - 8 + i][7] = Module.empty(Module.LIGHT)
        qr[n - 8][i] = Module.empty(Module.LIGHT)

        qr[i][n - 8] = Module.empty(Module.LIGHT)
        qr[7][n - 8 + i] = Module.empty(Module.LIGHT)