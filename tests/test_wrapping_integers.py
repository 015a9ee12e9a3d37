import random

import pytest

from tcpstack.wrapping_integers import Wrap32

UINT32_MAX = (1 << 32) - 1
INT32_MAX = (1 << 31) - 1


# --- comparison ---


def test_low_adjacent_comparison():
    assert (Wrap32(3) != Wrap32(1)) is True
    assert (Wrap32(3) == Wrap32(1)) is False


def test_random_comparisons():
    rd = random.Random(1234)
    for _ in range(2000):
        n = rd.getrandbits(32)
        diff = rd.getrandbits(8)
        m = (n + diff) & UINT32_MAX
        assert (Wrap32(n) == Wrap32(m)) == (n == m)
        assert (Wrap32(n) != Wrap32(m)) == (n != m)


# --- wrap ---


def test_wrap_cases():
    assert Wrap32.wrap(3 * (1 << 32), Wrap32(0)) == Wrap32(0)
    assert Wrap32.wrap(3 * (1 << 32) + 17, Wrap32(15)) == Wrap32(32)
    assert Wrap32.wrap(7 * (1 << 32) - 2, Wrap32(15)) == Wrap32(13)


def test_add_wraps_around():
    assert Wrap32(UINT32_MAX) + 1 == Wrap32(0)


# --- unwrap ---


@pytest.mark.parametrize(
    "value, zero, checkpoint, expected",
    [
        (1, 0, 0, 1),
        (1, 0, UINT32_MAX, (1 << 32) + 1),
        (UINT32_MAX - 1, 0, 3 * (1 << 32), 3 * (1 << 32) - 2),
        (UINT32_MAX - 10, 0, 3 * (1 << 32), 3 * (1 << 32) - 11),
        (UINT32_MAX, 10, 3 * (1 << 32), 3 * (1 << 32) - 11),
        (UINT32_MAX, 0, 0, UINT32_MAX),
        (16, 16, 0, 0),
        (15, 16, 0, UINT32_MAX),
        (0, INT32_MAX, 0, INT32_MAX + 2),
        (UINT32_MAX, INT32_MAX, 0, 1 << 31),
        (UINT32_MAX, 1 << 31, 0, UINT32_MAX >> 1),
    ],
)
def test_unwrap_cases(value, zero, checkpoint, expected):
    assert Wrap32(value).unwrap(Wrap32(zero), checkpoint) == expected


# --- extra ---


def _checkpoints(lo, hi):
    yield from range(lo, hi, 97)
    yield lo
    yield hi - 1


@pytest.mark.parametrize("value", [0, 1])
def test_extra_small_values(value):
    for checkpoint in _checkpoints(0, 100000):
        assert Wrap32.wrap(value, Wrap32(19)).unwrap(Wrap32(19), checkpoint) == value


@pytest.mark.parametrize(
    "value", [UINT32_MAX - 1, UINT32_MAX, UINT32_MAX + 1, UINT32_MAX + 2]
)
def test_extra_around_first_wrap(value):
    for checkpoint in _checkpoints(UINT32_MAX - 100000, UINT32_MAX + 100000):
        assert Wrap32.wrap(value, Wrap32(19)).unwrap(Wrap32(19), checkpoint) == value


@pytest.mark.parametrize(
    "value",
    [2 * UINT32_MAX - 1, 2 * UINT32_MAX, 2 * UINT32_MAX + 1, 2 * UINT32_MAX + 2],
)
def test_extra_around_second_wrap(value):
    for checkpoint in _checkpoints(2 * UINT32_MAX - 100000, 2 * UINT32_MAX + 100000):
        assert Wrap32.wrap(value, Wrap32(19)).unwrap(Wrap32(19), checkpoint) == value


@pytest.mark.parametrize("base", [UINT32_MAX, 2 * UINT32_MAX])
def test_extra_offsets_from_checkpoint(base):
    for i in list(range(-100000, 100000, 89)) + [-100000, 99999]:
        assert Wrap32.wrap(base + i, Wrap32(19)).unwrap(Wrap32(19), base) == base + i


# --- roundtrip ---


def test_roundtrip_random():
    rd = random.Random(42)
    big_offset = (1 << 31) - 1
    for _ in range(3000):
        isn = Wrap32(rd.randint(0, UINT32_MAX))
        val = rd.randint(big_offset, 1 << 63)
        offset = rd.randint(0, (1 << 31) - 1)
        for value in (
            val,
            val + 1,
            val - 1,
            val + offset,
            val - offset,
            val + big_offset,
            val - big_offset,
        ):
            assert Wrap32.wrap(value, isn).unwrap(isn, val) == value