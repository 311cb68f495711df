"""A single module (pixel) of a QR code and the part of the symbol it belongs to."""

from __future__ import annotations

from enum import Enum


class ModuleType(Enum):
    """The function a module has in the symbol."""

    DATA = 0
    """Encoded data and error correction."""
    FINDER_PATTERN = 1
    """The three large squares."""
    ALIGNMENT = 2
    """The smaller squares."""
    TIMING = 3
    """Lines between the finder patterns."""
    FORMAT = 4
    """Format information."""
    VERSION = 5
    """Version information."""
    DARK_MODULE = 6
    """The module that is always dark."""
    EMPTY = 7
    """Separators around the finder patterns."""


class Module:
    """A single pixel of a QR code: a colour and the type of region it is in."""

    __slots__ = ("value", "module_type")

    DARK = True
    LIGHT = False

    def __init__(self, value: bool, module_type: ModuleType) -> None:
        self.value = bool(value)
        self.module_type = module_type

    @classmethod
    def data(cls, value: bool) -> Module:
        return cls(value, ModuleType.DATA)

    @classmethod
    def finder_pattern(cls, value: bool) -> Module:
        return cls(value, ModuleType.FINDER_PATTERN)

    @classmethod
    def alignment(cls, value: bool) -> Module:
        return cls(value, ModuleType.ALIGNMENT)

    @classmethod
    def timing(cls, value: bool) -> Module:
        return cls(value, ModuleType.TIMING)

    @classmethod
    def format(cls, value: bool) -> Module:
        return cls(value, ModuleType.FORMAT)

    @classmethod
    def version(cls, value: bool) -> Module:
        return cls(value, ModuleType.VERSION)

    @classmethod
    def dark(cls, value: bool) -> Module:
        return cls(value, ModuleType.DARK_MODULE)

    @classmethod
    def empty(cls, value: bool) -> Module:
        return cls(value, ModuleType.EMPTY)

    def set(self, value: bool) -> None:
        """Set the colour of the module."""
        self.value = bool(value)

    def toggle(self) -> None:
        """Invert the colour of the module."""
        self.value = not self.value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, bool):
            return self.value == other
        if isinstance(other, Module):
            return self.value == other.value and self.module_type is other.module_type
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.value, self.module_type))

    def __repr__(self) -> str:
        return f"Module({self.value!r}, {self.module_type})"