"""Penalty scoring used to choose a mask; the lower the score, the better."""

from __future__ import annotations

from typing import Sequence

from . import hardcode
from .matrix import QRCode
from .module import Module, ModuleType

_PATTERN_LEN = 7
_FINDER_LIKE = 0b101_1101


def score_line(line: Sequence[Module]) -> tuple[int, int]:
    """Score one row or column, returning ``(pattern_score, run_score)``.

    Each finder-like pattern costs 40; each run of N >= 5 same-coloured
    modules costs N - 2. Non-data modules break runs and patterns.
    """
    run_score = 0
    pattern_score = 0

    count = 1
    current = not line[0].value
    buffer = 0
    count_data = 0

    for module in line:
        value = module.value
        buffer = ((buffer << 1) | int(value)) & 0b111_1111
        count_data += 1

        if value != current:
            if count >= 5:
                run_score += count - 2
            count = 0
            current = value

        if module.module_type is not ModuleType.DATA:
            if count >= 5:
                run_score += count - 2
            count_data = 0
            count = 0
            continue

        if count_data >= _PATTERN_LEN and buffer == _FINDER_LIKE:
            pattern_score += 40

        count += 1

    if count >= 5:
        run_score += count - 2

    return pattern_score, run_score


def matrix_score_squares(qr: QRCode) -> int:
    """Add 3 for every 2x2 block of one colour among data modules."""
    total = 0
    for upper, lower in zip(qr.rows, qr.rows[1:]):
        count_data = 2
        buffer = (int(upper[0].value) << 2) | (int(lower[0].value) << 3)

        for top, bottom in zip(upper[1:], lower[1:]):
            buffer >>= 2
            buffer |= (int(top.value) << 2) | (int(bottom.value) << 3)

            if top.module_type is not ModuleType.DATA or bottom.module_type is not ModuleType.DATA:
                count_data = 0

            if count_data >= 2 and buffer in (0b1111, 0b0000):
                total += 3

            count_data += 1
    return total


def matrix_pattern_and_line(qr: QRCode, qr_transpose: QRCode) -> tuple[int, int, int]:
    """Return ``(row_run_score, column_run_score, pattern_score)``."""
    line_total = 0
    column_total = 0
    pattern_total = 0
    for row, column in zip(qr.rows, qr_transpose.rows):
        row_pattern, row_runs = score_line(row)
        column_pattern, column_runs = score_line(column)
        line_total += row_runs
        column_total += column_runs
        pattern_total += row_pattern + column_pattern
    return line_total, column_total, pattern_total


def dark_module_score(qr: QRCode) -> int:
    """Penalty for the share of dark modules being away from one half."""
    n = qr.size
    dark = sum(1 for row in qr for module in row if module.value == Module.DARK)
    return hardcode.PERCENT_SCORE[dark * 100 // (n * n)]


def score(qr: QRCode, qr_transpose: QRCode) -> int:
    """Total penalty of ``qr``; ``qr_transpose`` is its transpose."""
    line_total, column_total, pattern_total = matrix_pattern_and_line(qr, qr_transpose)
    return (
        line_total
        + pattern_total
        + column_total
        + dark_module_score(qr)
        + matrix_score_squares(qr)
    )