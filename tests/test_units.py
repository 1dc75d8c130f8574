import pytest

from hwscan.units import MIB_BYTES, bytes_to_mib


def test_zero_bytes():
    assert bytes_to_mib(0) == 0.0


@pytest.mark.parametrize("mib", [1, 3, 1024, 16384])
def test_whole_mebibytes_round_trip(mib):
    assert bytes_to_mib(mib * MIB_BYTES) == mib


def test_half_mebibyte():
    assert bytes_to_mib(512 * 1024) == 0.5


def test_is_monotonic():
    values = [bytes_to_mib(n) for n in (0, 1, 1000, 10**6, 10**9)]
    assert values == sorted(values)