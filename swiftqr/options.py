"""Enumerations that select how a QR code is encoded."""

from enum import Enum


class ECL(Enum):
    """Error correction level: how much of the symbol can be recovered."""

    L = 0
    """Low, about 7%."""
    M = 1
    """Medium, about 15%."""
    Q = 2
    """Quartile, about 25%."""
    H = 3
    """High, about 30%."""

    def __str__(self) -> str:
        return self.name


class Mode(Enum):
    """Encoding mode used for the payload."""

    NUMERIC = 0
    ALPHANUMERIC = 1
    BYTE = 2


class Mask(Enum):
    """The eight mask patterns applied to the data region of a QR code."""

    CHECKERBOARD = 0
    """``(x + y) % 2 == 0``"""
    HORIZONTAL_LINES = 1
    """``y % 2 == 0``"""
    VERTICAL_LINES = 2
    """``x % 3 == 0``"""
    DIAGONAL_LINES = 3
    """``(x + y) % 3 == 0``"""
    LARGE_CHECKERBOARD = 4
    """``((x / 3) + (y / 2)) % 2 == 0``"""
    FIELDS = 5
    """``(x * y) % 2 + (x * y) % 3 == 0``"""
    DIAMONDS = 6
    """``((x * y) % 2 + (x * y) % 3) % 2 == 0``"""
    MEADOW = 7
    """``((x + y) % 2 + (x * y) % 3) % 2 == 0``"""