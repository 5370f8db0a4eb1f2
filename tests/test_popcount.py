import pytest

from primer.popcount import pop_count

MASK = (1 << 64) - 1


@pytest.mark.parametrize(
    "value, want",
    [
        (0, 0),
        (1, 1),
        (0xFF, 8),
        (MASK, 64),
        (0x1234567890ABCDEF, 32),
    ],
)
def test_known_values(value, want):
    assert pop_count(value) == want


@pytest.mark.parametrize("bit", range(64))
def test_single_bit(bit):
    assert pop_count(1 << bit) == 1


@pytest.mark.parametrize("value", [0, 1, 0x1234567890ABCDEF, 0xDEADBEEF, MASK])
def test_complement_sums_to_64(value):
    assert pop_count(value) + pop_count(~value & MASK) == 64


def test_only_low_64_bits_count():
    assert pop_count((1 << 64) | 1) == 1