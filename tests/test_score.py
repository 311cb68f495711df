import pytest

from swiftqr import hardcode
from swiftqr.datamasking import apply_mask
from swiftqr.layout import create_matrix, transpose
from swiftqr.matrix import QRCode
from swiftqr.module import Module
from swiftqr.options import Mask
from swiftqr.score import (
    dark_module_score,
    matrix_pattern_and_line,
    matrix_score_squares,
    score,
    score_line,
)
from swiftqr.version import Version


def _data_line(values):
    return [Module.data(v) for v in values]


def test_long_run_scores_n_minus_two():
    assert score_line(_data_line([False] * 10)) == (0, 8)


def test_alternating_line_scores_nothing():
    assert score_line(_data_line([i % 2 == 0 for i in range(10)])) == (0, 0)


def test_finder_like_pattern():
    pattern, _ = score_line(_data_line([True, False, True, True, True, False, True]))
    assert pattern == 40


def test_non_data_module_breaks_pattern():
    line = _data_line([True, False, True, True, True, False, True])
    line[3] = Module.timing(True)
    pattern, _ = score_line(line)
    assert pattern == 0


def test_non_data_module_splits_run():
    whole = score_line(_data_line([False] * 11))[1]
    line = _data_line([False] * 11)
    line[5] = Module.format(False)
    split = score_line(line)[1]
    assert split < whole


def test_single_square():
    qr = QRCode(2)
    assert matrix_score_squares(qr) == 3


def test_checkerboard_has_no_squares():
    qr = QRCode(10)
    apply_mask(qr, Mask.CHECKERBOARD)
    assert matrix_score_squares(qr) == 0


def test_dark_score_all_light():
    assert dark_module_score(QRCode(10)) == hardcode.PERCENT_SCORE[0]


def test_dark_score_half_dark():
    qr = QRCode(10)
    apply_mask(qr, Mask.CHECKERBOARD)
    assert dark_module_score(qr) == hardcode.PERCENT_SCORE[50]


def test_pattern_and_line_swaps_under_transpose():
    qr = create_matrix(Version.V02)
    apply_mask(qr, Mask.DIAGONAL_LINES)
    flipped = transpose(qr)
    rows, columns, patterns = matrix_pattern_and_line(qr, flipped)
    assert matrix_pattern_and_line(flipped, qr) == (columns, rows, patterns)


@pytest.mark.parametrize("mask", list(Mask))
def test_score_is_sum_of_parts(mask):
    qr = create_matrix(Version.V03)
    apply_mask(qr, mask)
    flipped = transpose(qr)
    rows, columns, patterns = matrix_pattern_and_line(qr, flipped)
    expected = rows + columns + patterns + dark_module_score(qr) + matrix_score_squares(qr)
    assert score(qr, flipped) == expected


def test_symmetric_matrix_rows_equal_columns():
    qr = QRCode(12)
    apply_mask(qr, Mask.MEADOW)
    rows, columns, _ = matrix_pattern_and_line(qr, transpose(qr))
    assert rows == columns