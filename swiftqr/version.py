"""QR code versions (symbol sizes) and their geometry."""

from __future__ import annotations

from enum import Enum

from . import hardcode
from .options import ECL, Mode

_VERSION_INFO_GENERATOR = 0x1F25

_ALIGNMENTS: tuple[tuple[int, ...], ...] = (
    (),
    (6, 18),
    (6, 22),
    (6, 26),
    (6, 30),
    (6, 34),
    (6, 22, 38),
    (6, 24, 42),
    (6, 26, 46),
    (6, 28, 50),
    (6, 30, 54),
    (6, 32, 58),
    (6, 34, 62),
    (6, 26, 46, 66),
    (6, 26, 48, 70),
    (6, 26, 50, 74),
    (6, 30, 54, 78),
    (6, 30, 56, 82),
    (6, 30, 58, 86),
    (6, 34, 62, 90),
    (6, 28, 50, 72, 94),
    (6, 26, 50, 74, 98),
    (6, 30, 54, 78, 102),
    (6, 28, 54, 80, 106),
    (6, 32, 58, 84, 110),
    (6, 30, 58, 86, 114),
    (6, 34, 62, 90, 118),
    (6, 26, 50, 74, 98, 122),
    (6, 30, 54, 78, 102, 126),
    (6, 26, 52, 78, 104, 130),
    (6, 30, 56, 82, 108, 134),
    (6, 34, 60, 86, 112, 138),
    (6, 30, 58, 86, 114, 142),
    (6, 34, 62, 90, 118, 146),
    (6, 30, 54, 78, 102, 126, 150),
    (6, 24, 50, 76, 102, 128, 154),
    (6, 28, 54, 80, 106, 132, 158),
    (6, 32, 58, 84, 110, 136, 162),
    (6, 26, 54, 82, 110, 138, 166),
    (6, 30, 58, 86, 114, 142, 170),
)


def _payload_bits(mode: Mode, length: int, count_bits: int) -> int:
    header = 4 + count_bits
    if mode is Mode.NUMERIC:
        return header + 10 * (length // 3) + (0, 4, 7)[length % 3]
    if mode is Mode.ALPHANUMERIC:
        return header + 11 * (length // 2) + 6 * (length % 2)
    return header + 8 * length


class Version(Enum):
    """The forty symbol versions; ``V01`` is 21x21 and ``V40`` is 177x177."""

    V01 = 0
    V02 = 1
    V03 = 2
    V04 = 3
    V05 = 4
    V06 = 5
    V07 = 6
    V08 = 7
    V09 = 8
    V10 = 9
    V11 = 10
    V12 = 11
    V13 = 12
    V14 = 13
    V15 = 14
    V16 = 15
    V17 = 16
    V18 = 17
    V19 = 18
    V20 = 19
    V21 = 20
    V22 = 21
    V23 = 22
    V24 = 23
    V25 = 24
    V26 = 25
    V27 = 26
    V28 = 27
    V29 = 28
    V30 = 29
    V31 = 30
    V32 = 31
    V33 = 32
    V34 = 33
    V35 = 34
    V36 = 35
    V37 = 36
    V38 = 37
    V39 = 38
    V40 = 39

    @property
    def number(self) -> int:
        """The version number, from 1 to 40."""
        return self.value + 1

    def size(self) -> int:
        """Width and height of the symbol in modules."""
        return self.number * 4 + 17

    def _raw_data_modules(self) -> int:
        number = self.number
        modules = (16 * number + 128) * number + 64
        if number >= 2:
            alignments = number // 7 + 2
            modules -= (25 * alignments - 10) * alignments - 55
            if number >= 7:
                modules -= 36
        return modules

    def max_bytes(self) -> int:
        """Total number of codewords (data and error correction)."""
        return self._raw_data_modules() // 8

    def missing_bits(self) -> int:
        """Remainder bits left over after the last codeword."""
        return self._raw_data_modules() % 8

    def alignment_patterns_grid(self) -> tuple[int, ...]:
        """Row and column centres of the alignment patterns."""
        return _ALIGNMENTS[self.value]

    def information(self) -> int:
        """The 18-bit version information with its BCH error correction bits."""
        shifted = self.number << 12
        remainder = shifted
        for bit in range(17, 11, -1):
            if remainder >> bit & 1:
                remainder ^= _VERSION_INFO_GENERATOR << (bit - 12)
        return shifted | remainder

    @classmethod
    def from_n(cls, n: int) -> Version:
        """Return the version whose symbol is ``n`` modules wide."""
        if n < 21 or n > 177 or (n - 17) % 4:
            raise ValueError(f"no QR code version is {n} modules wide")
        return cls((n - 17) // 4 - 1)

    @classmethod
    def get(cls, mode: Mode, ecl: ECL, length: int) -> Version | None:
        """Return the smallest version holding ``length`` characters, or None."""
        for version in cls:
            count_bits = hardcode.cci_bits(version, mode)
            if length >= 1 << count_bits:
                continue
            if _payload_bits(mode, length, count_bits) <= hardcode.data_bits(version, ecl):
                return version
        return None