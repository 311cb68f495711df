import pytest

from swiftqr.builder import QRBuilder
from swiftqr.cli import main
from swiftqr.options import ECL, Mask
from swiftqr.version import Version

URL = "https://example.com/"


def test_prints_code(capsys):
    status = main([URL, "--ecl", "H", "--version", "3"])
    out = capsys.readouterr().out
    expected = QRBuilder(URL).ecl(ECL.H).version(Version.V03).build().to_str()
    assert status == 0
    assert out == expected + "\n"


def test_mask_option(capsys):
    status = main([URL, "-m", "6"])
    out = capsys.readouterr().out
    assert status == 0
    assert out == QRBuilder(URL).mask(Mask.DIAMONDS).build().to_str() + "\n"


def test_version_too_small_reports_error(capsys):
    status = main([URL, "--ecl", "H", "--version", "1"])
    captured = capsys.readouterr()
    assert status == 1
    assert "Specified version too low to contain data" in captured.err
    assert captured.out == ""


def test_invalid_level_rejected():
    with pytest.raises(SystemExit) as info:
        main([URL, "--ecl", "Z"])
    assert info.value.code == 2