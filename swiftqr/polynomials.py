"""Reed-Solomon error correction over GF(256) and block interleaving."""

from __future__ import annotations

from typing import Iterable, Sequence

from . import hardcode
from .options import ECL
from .version import Version

_PRIMITIVE = 0x11D


def _build_tables() -> tuple[tuple[int, ...], tuple[int, ...]]:
    exp: list[int] = []
    value = 1
    for _ in range(255):
        exp.append(value)
        value <<= 1
        if value & 0x100:
            value ^= _PRIMITIVE
    log = [0] * 256
    for power, element in enumerate(exp):
        log[element] = power
    return tuple(exp), tuple(log)


_EXP, _LOG = _build_tables()
"""``_EXP[i]`` is alpha to the power i; ``_LOG[x]`` is the power of alpha equal to x."""


def division(source: Iterable[int], generator: Sequence[int]) -> list[int]:
    """Divide ``source`` by ``generator`` in GF(256) and return the remainder.

    ``source`` holds field elements as integers, ``generator`` holds powers of
    alpha. The remainder has ``len(generator) - 1`` codewords.
    """
    source = list(source)
    degree = len(generator) - 1
    work = source + [0] * degree

    for i in range(len(source)):
        coefficient = work[i]
        if coefficient == 0:
            continue
        alpha = _LOG[coefficient]
        for j, power in enumerate(generator):
            work[i + j] ^= _EXP[(power + alpha) % 255]

    return work[len(source):]


def structure(data: Iterable[int], quality: ECL, version: Version) -> bytes:
    """Split ``data`` into blocks, add error correction and interleave everything.

    Returns every codeword of the symbol: interleaved data followed by
    interleaved error correction.
    """
    data = bytes(data)
    generator = hardcode.get_polynomial(version, quality)
    (g1_count, g1_size), (g2_count, g2_size) = hardcode.ecc_to_groups(quality, version)

    blocks: list[bytes] = []
    offset = 0
    for count, size in ((g1_count, g1_size), (g2_count, g2_size)):
        for _ in range(count):
            blocks.append(data[offset:offset + size])
            offset += size

    corrections = [division(block, generator) for block in blocks]

    out = bytearray()
    longest = max(g1_size, g2_size)
    for i in range(longest):
        out.extend(block[i] for block in blocks if i < len(block))
    for j in range(len(generator) - 1):
        out.extend(correction[j] for correction in corrections)

    return bytes(out)