"""Build QR codes from text or bytes."""

from __future__ import annotations

from typing import Union

from .encode import best_encoding
from .matrix import QRCode
from .options import ECL, Mask
from .placement import create_matrix
from .version import Version

Payload = Union[str, bytes, bytearray]


class QRCodeError(Exception):
    """A QR code could not be created."""


class EncodedDataError(QRCodeError):
    """The data is too large to be encoded in any version."""

    def __init__(self) -> None:
        super().__init__("Data too big to be encoded")


class SpecifiedVersionError(QRCodeError):
    """The requested version is too small to hold the data."""

    def __init__(self) -> None:
        super().__init__("Specified version too low to contain data")


def _as_bytes(data: Payload) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def create_qrcode(
    data: Payload,
    ecl: ECL | None = None,
    version: Version | None = None,
    mask: Mask | None = None,
) -> QRCode:
    """Create a QR code; the level defaults to Q, version and mask are chosen when None.

    Raises EncodedDataError if ``data`` fits no version, and
    SpecifiedVersionError if ``version`` is too small for it.
    """
    payload = _as_bytes(data)
    mode = best_encoding(payload)
    level = ECL.Q if ecl is None else ecl

    smallest = Version.get(mode, level, len(payload))
    if smallest is None:
        raise EncodedDataError()
    if version is None:
        version = smallest
    elif version.value < smallest.value:
        raise SpecifiedVersionError()

    return create_matrix(payload, level, mode, version, mask)


class QRBuilder:
    """Collects options for a QR code and builds it.

    Setters return the builder so that calls can be chained.
    """

    def __init__(self, data: Payload) -> None:
        self._data = _as_bytes(data)
        self._ecl: ECL | None = None
        self._version: Version | None = None
        self._mask: Mask | None = None

    def ecl(self, ecl: ECL) -> QRBuilder:
        """Force the error correction level."""
        self._ecl = ecl
        return self

    def version(self, version: Version) -> QRBuilder:
        """Force the version."""
        self._version = version
        return self

    def mask(self, mask: Mask) -> QRBuilder:
        """Force the mask; rarely useful."""
        self._mask = mask
        return self

    def build(self) -> QRCode:
        """Create the QR code with the collected options."""
        return create_qrcode(self._data, self._ecl, self._version, self._mask)