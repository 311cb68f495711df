import pytest

from swiftqr.builder import (
    EncodedDataError,
    QRBuilder,
    QRCodeError,
    SpecifiedVersionError,
    create_qrcode,
)
from swiftqr.options import ECL, Mask, Mode
from swiftqr.version import Version

URL = "https://example.com/"


def test_forced_version_and_level():
    qr = QRBuilder(URL).ecl(ECL.H).version(Version.V03).build()
    assert qr.version is Version.V03
    assert qr.ecl is ECL.H
    assert qr.size == Version.V03.size()


def test_default_level_is_quartile():
    qr = QRBuilder(URL).build()
    assert qr.ecl is ECL.Q


def test_forced_mask_is_kept():
    qr = QRBuilder(URL).mask(Mask.DIAMONDS).build()
    assert qr.mask is Mask.DIAMONDS


def test_setters_chain():
    builder = QRBuilder(URL)
    assert builder.ecl(ECL.L) is builder
    assert builder.version(Version.V05) is builder
    assert builder.mask(Mask.MEADOW) is builder


def test_text_and_bytes_give_same_code():
    from_text = QRBuilder(URL).ecl(ECL.M).build()
    from_bytes = QRBuilder(URL.encode()).ecl(ECL.M).build()
    assert from_text.to_str() == from_bytes.to_str()


def test_build_is_deterministic():
    first = create_qrcode(URL, ECL.H, Version.V03)
    second = create_qrcode(URL, ECL.H, Version.V03)
    assert first.to_str() == second.to_str()
    assert first.mask is second.mask


def test_larger_version_accepted():
    qr = QRBuilder(URL).version(Version.V10).build()
    assert qr.version is Version.V10


def test_data_too_large():
    with pytest.raises(EncodedDataError) as info:
        QRBuilder("a" * 3000).ecl(ECL.H).build()
    assert isinstance(info.value, QRCodeError)
    assert str(info.value) == "Data too big to be encoded"


def test_version_too_small():
    with pytest.raises(SpecifiedVersionError) as info:
        QRBuilder(URL).ecl(ECL.H).version(Version.V01).build()
    assert str(info.value) == "Specified version too low to contain data"


@pytest.mark.parametrize(
    "data, mode",
    [("0123456789", Mode.NUMERIC), ("HELLO WORLD", Mode.ALPHANUMERIC), ("hello", Mode.BYTE)],
)
def test_mode_is_chosen_from_data(data, mode):
    assert QRBuilder(data).build().mode is mode


def test_text_rendering_has_two_rows_per_line():
    qr = QRBuilder(URL).ecl(ECL.H).version(Version.V03).build()
    lines = qr.to_str().split("\n")
    assert len(lines) == (qr.size + 1) // 2 + 1
    assert all(len(line) == qr.size + 2 for line in lines)