"""A growable bit string packed most-significant bit first into bytes."""

from __future__ import annotations

from typing import Iterable, Protocol

_PAD_BYTES = (0b1110_1100, 0b0001_0001)


class _HasMaxBytes(Protocol):
    def max_bytes(self) -> int: ...


def _keep_last(count: int) -> int:
    return (1 << count) - 1


class CompactQR:
    """Bits stored as bytes; ``len()`` is the number of bits written so far."""

    def __init__(self, capacity: int = 0) -> None:
        self.capacity = capacity
        self.data = bytearray((capacity + 7) // 8)
        self._len = 0

    @classmethod
    def from_version(cls, version: _HasMaxBytes) -> CompactQR:
        """Create an empty bit string sized for every codeword of ``version``."""
        return cls(version.max_bytes() * 8)

    @classmethod
    def from_array(cls, data: Iterable[int], length: int) -> CompactQR:
        """Wrap existing bytes, of which the first ``length`` bits are in use."""
        compact = cls()
        compact.data = bytearray(data)
        compact.capacity = length
        compact._len = length
        return compact

    def increase_len(self, data_length: int) -> None:
        """Grow the byte buffer so that it can hold ``data_length`` bits."""
        needed = data_length // 8 + 1
        if needed > len(self.data):
            self.data.extend(bytes(needed - len(self.data)))

    def push_u8(self, bits: int) -> None:
        """Append the eight bits of a byte."""
        self.increase_len(self._len + 8)
        bits &= 0xFF

        right = self._len % 8
        first = self._len // 8

        if right == 0:
            self.data[first] = bits
        else:
            left = 8 - right
            self.data[first] |= (bits >> right) & _keep_last(left)
            self.data[first + 1] |= ((bits & _keep_last(right)) << left) & 0xFF

        self._len += 8

    def push_u8_slice(self, values: Iterable[int]) -> None:
        """Append every byte of ``values``."""
        values = bytes(values)
        self.increase_len(self._len + 8 * len(values))
        for value in values:
            self.push_u8(value)

    def push_bits(self, bits: int, length: int) -> None:
        """Append the lowest ``length`` bits of ``bits``, most significant first."""
        self.increase_len(self._len + length)
        bits &= _keep_last(length)

        rem_space = (8 - self._len % 8) % 8
        first = self._len // 8

        if rem_space > length:
            self.data[first] |= (bits << (rem_space - length)) & 0xFF
            self._len += length
            return

        if rem_space:
            self.data[first] |= (bits >> (length - rem_space)) & _keep_last(rem_space)
            self._len += rem_space

        for shift in range(length - rem_space, 7, -8):
            self.push_u8(bits >> (shift - 8))

        remaining = (length - rem_space) % 8
        if remaining == 0:
            return

        self.data[self._len // 8] |= ((bits & _keep_last(remaining)) << (8 - remaining)) & 0xFF
        self._len += remaining

    def fill(self) -> None:
        """Pad the remaining capacity with the alternating bytes 236 and 17."""
        if self._len % 8:
            raise ValueError("bit string must be byte aligned before padding")
        for index, _ in enumerate(range(self._len, self.capacity, 8)):
            self.push_u8(_PAD_BYTES[index % 2])

    def __len__(self) -> int:
        return self._len

    def __str__(self) -> str:
        bits = "".join(format(byte, "08b") for byte in self.data)
        return bits[: self._len]

    def __repr__(self) -> str:
        return f"CompactQR(len={self._len}, capacity={self.capacity})"