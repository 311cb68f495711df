from swiftqr.helpers import BLOCK, BOTTOM, EMPTY, TOP, print_matrix_with_margin
from swiftqr.matrix import QRCode
from swiftqr.module import Module


def test_light_code_shape():
    qr = QRCode(21)
    lines = print_matrix_with_margin(qr).split("\n")
    assert len(lines) == (qr.size + 1) // 2 + 1
    assert all(len(line) == qr.size + 2 for line in lines)
    assert lines[0] == BOTTOM * (qr.size + 2)
    assert all(line == BLOCK * (qr.size + 2) for line in lines[1:])


def test_glyph_for_each_pair():
    qr = QRCode(21)
    qr[0][0] = Module.data(True)
    qr[1][1] = Module.data(True)
    qr[0][2] = Module.data(True)
    qr[1][2] = Module.data(True)
    line = print_matrix_with_margin(qr).split("\n")[1]
    assert line[1] == BOTTOM
    assert line[2] == TOP
    assert line[3] == EMPTY
    assert line[4] == BLOCK


def test_last_row_uses_light_margin():
    qr = QRCode(21)
    qr[20][5].set(True)
    last = print_matrix_with_margin(qr).split("\n")[-1]
    assert last[6] == BOTTOM
    assert last[0] == BLOCK and last[-1] == BLOCK


def test_output_has_no_trailing_newline():
    assert not print_matrix_with_margin(QRCode(25)).endswith("\n")