"""The eight mask patterns that may be applied to the data region of a QR code."""

from __future__ import annotations

from typing import Callable

from .matrix import QRCode
from .module import ModuleType
from .options import Mask

_PREDICATES: dict[Mask, Callable[[int, int], bool]] = {
    Mask.CHECKERBOARD: lambda row, col: (row + col) % 2 == 0,
    Mask.HORIZONTAL_LINES: lambda row, col: row % 2 == 0,
    Mask.VERTICAL_LINES: lambda row, col: col % 3 == 0,
    Mask.DIAGONAL_LINES: lambda row, col: (row + col) % 3 == 0,
    Mask.LARGE_CHECKERBOARD: lambda row, col: (row // 2 + col // 3) % 2 == 0,
    Mask.FIELDS: lambda row, col: (row * col) % 2 + (row * col) % 3 == 0,
    Mask.DIAMONDS: lambda row, col: ((row * col) % 2 + (row * col) % 3) % 2 == 0,
    Mask.MEADOW: lambda row, col: ((row + col) % 2 + (row * col) % 3) % 2 == 0,
}


def apply_mask(qr: QRCode, mask: Mask) -> None:
    """Toggle every data module of ``qr`` selected by ``mask``, in place."""
    selected = _PREDICATES[mask]
    for row_index, row in enumerate(qr):
        for col_index, module in enumerate(row):
            if module.module_type is ModuleType.DATA and selected(row_index, col_index):
                module.toggle()