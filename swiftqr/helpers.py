"""Text rendering of a QR code using half-block characters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from .matrix import QRCode

EMPTY = " "
BLOCK = "█"
TOP = "▀"
BOTTOM = "▄"

# Dark modules are drawn as background, so a dark pair is a blank cell.
_GLYPHS = {
    (True, True): EMPTY,
    (True, False): BOTTOM,
    (False, True): TOP,
    (False, False): BLOCK,
}


def _line(upper: Sequence[bool], lower: Sequence[bool]) -> str:
    return "".join(_GLYPHS[pair] for pair in zip(upper, lower))


def print_matrix_with_margin(qr: QRCode) -> str:
    """Render ``qr`` two rows per text line, framed by a one-module margin."""
    size = qr.size
    rows = [[module.value for module in qr[i]] for i in range(size)]
    light = [False] * size
    dark = [True] * size

    lines = [BOTTOM + _line(dark, light) + BOTTOM]
    lines.extend(
        BLOCK + _line(rows[i], rows[i + 1]) + BLOCK for i in range(0, size - 1, 2)
    )
    lines.append(BLOCK + _line(rows[size - 1], light) + BLOCK)
    return "\n".join(lines)