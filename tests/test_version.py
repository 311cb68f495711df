import pytest

from swiftqr import hardcode
from swiftqr.options import ECL, Mode
from swiftqr.version import Version


def test_sizes_of_extremes():
    assert Version.V01.size() == 21
    assert Version.V40.size() == 177


@pytest.mark.parametrize("version", list(Version))
def test_from_n_round_trip(version):
    assert Version.from_n(version.size()) is version


@pytest.mark.parametrize("n", [0, 17, 20, 22, 24, 181])
def test_from_n_rejects_invalid_width(n):
    with pytest.raises(ValueError):
        Version.from_n(n)


@pytest.mark.parametrize(
    "version, ecl, message_len, error_len",
    [
        (Version.V05, ECL.Q, 62, 72),
        (Version.V10, ECL.Q, 154, 192),
        (Version.V07, ECL.H, 66, 130),
        (Version.V16, ECL.M, 453, 280),
        (Version.V03, ECL.Q, 34, 36),
    ],
)
def test_max_bytes_matches_structure_samples(version, ecl, message_len, error_len):
    assert hardcode.data_codewords(version, ecl) == message_len
    assert version.max_bytes() == message_len + error_len


def test_missing_bits_range():
    assert all(0 <= v.missing_bits() < 8 for v in Version)
    assert Version.V01.missing_bits() == 0


def test_max_bytes_of_extremes():
    assert Version.V01.max_bytes() == 26
    assert Version.V40.max_bytes() == 3706


def test_max_bytes_increasing():
    sizes = [Version.max_bytes(version) for version in Version]
    assert len(sizes) == 40
    assert all(smaller < larger for smaller, larger in zip(sizes, sizes[1:]))
    assert sizes[0] == Version.V01.max_bytes()
    assert sizes[-1] == Version.V40.max_bytes()


def test_alignment_grid_bounds():
    assert Version.V01.alignment_patterns_grid() == ()
    for version in list(Version)[1:]:
        grid = version.alignment_patterns_grid()
        assert grid[0] == 6
        assert grid[-1] == version.size() - 7
        assert list(grid) == sorted(grid)


def test_information_known_value():
    assert Version.V07.information() == 0x07C94
    assert Version.V40.information() == 0x28C69


def test_information_carries_version_number():
    for version in list(Version)[6:]:
        info = Version.information(version)
        assert info >> 12 == version.value + 1
        assert info < 1 << 18


def test_get_example_url_fits_in_returned_version():
    payload = b"https://example.com/"
    version = Version.get(Mode.BYTE, ECL.Q, len(payload))
    assert version is not None
    needed = 4 + hardcode.cci_bits(version, Mode.BYTE) + 8 * len(payload)
    assert needed <= hardcode.data_bits(version, ECL.Q)
    if version.value > 0:
        smaller = Version(version.value - 1)
        smaller_needed = 4 + hardcode.cci_bits(smaller, Mode.BYTE) + 8 * len(payload)
        assert smaller_needed > hardcode.data_bits(smaller, ECL.Q)


def test_get_numeric_capacity_boundary():
    assert Version.get(Mode.NUMERIC, ECL.L, 41) is Version.V01
    assert Version.get(Mode.NUMERIC, ECL.L, 42) is Version.V02


def test_get_too_large_returns_none():
    assert Version.get(Mode.BYTE, ECL.L, 10_000) is None


@pytest.mark.parametrize("mode", list(Mode))
def test_get_higher_level_needs_no_smaller_version(mode):
    for length in (1, 10, 50, 100):
        low = Version.get(mode, ECL.L, length)
        high = Version.get(mode, ECL.H, length)
        assert low is not None and high is not None
        assert high.value >= low.value


def test_get_numeric_never_larger_than_byte():
    for length in (5, 40, 200):
        assert Version.get(Mode.NUMERIC, ECL.M, length).value <= Version.get(
            Mode.BYTE, ECL.M, length
        ).value