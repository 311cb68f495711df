"""The module matrix of a QR code and its settings."""

from __future__ import annotations

from typing import Iterator

from . import helpers
from .module import Module
from .options import ECL, Mask, Mode
from .version import Version

QR_MAX_WIDTH = 177


class QRCode:
    """A square grid of modules plus the version, level, mask and mode used."""

    def __init__(self, size: int) -> None:
        if not 1 <= size <= QR_MAX_WIDTH:
            raise ValueError(f"size must be between 1 and {QR_MAX_WIDTH}, got {size}")
        self.size = size
        self.rows: list[list[Module]] = [
            [Module.data(Module.LIGHT) for _ in range(size)] for _ in range(size)
        ]
        self.version: Version | None = None
        self.ecl: ECL | None = None
        self.mask: Mask | None = None
        self.mode: Mode | None = None

    def __getitem__(self, index: int) -> list[Module]:
        return self.rows[index]

    def __iter__(self) -> Iterator[list[Module]]:
        return iter(self.rows)

    def copy(self) -> QRCode:
        """Return an independent copy, modules included."""
        clone = QRCode(self.size)
        clone.rows = [[Module(m.value, m.module_type) for m in row] for row in self.rows]
        clone.version = self.version
        clone.ecl = self.ecl
        clone.mask = self.mask
        clone.mode = self.mode
        return clone

    def to_str(self) -> str:
        """Render the code as text for a terminal."""
        return helpers.print_matrix_with_margin(self)

    def print(self) -> None:
        """Write the rendered code to standard output."""
        print(self.to_str())

    def __repr__(self) -> str:
        return (
            f"QRCode(size={self.size}, version={self.version}, ecl={self.ecl}, "
            f"mask={self.mask}, mode={self.mode})"
        )