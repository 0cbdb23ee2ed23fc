import random
from itertools import islice

import pytest

from kvstructs.bitmap import BitMap, from_bytes


def test_set_bit():
    size = 1000
    offsets = random.sample(range(size), size // 5)
    offset_set = set(offsets)
    bm = BitMap()
    for offset in offsets:
        bm.set_bit(offset, 1)
    for offset in range(bm.bit_size()):
        assert (bm.get_bit(offset) > 0) == (offset in offset_set), offset

    bm2 = BitMap()
    bm2.set_bit(15, 1)
    assert bm2.get_bit(15) == 1
    assert bm2.get_bit(16) == 0


def test_clear_bit():
    bm = BitMap()
    bm.set_bit(15, 1)
    bm.set_bit(15, 0)
    assert bm.get_bit(15) == 0
    assert len(bm) == 2


def test_from_bytes_shares_buffer():
    bs = bytearray(b"\xff\xff")
    bm = from_bytes(bs)
    bm.set_bit(8, 0)
    expect = bytearray(b"\xff\xfe")
    assert bs == expect
    assert bm.to_bytes() == expect


def test_from_immutable_bytes():
    bm = from_bytes(b"\x01")
    assert bm.get_bit(0) == 1
    assert bm.bit_size() == 8


def test_get_bit_past_end():
    bm = BitMap(b"\xff")
    assert bm.get_bit(100) == 0


def test_negative_offset_rejected():
    bm = BitMap()
    with pytest.raises(ValueError):
        bm.set_bit(-1, 1)
    with pytest.raises(ValueError):
        bm.get_bit(-1)


def test_iter_bits_range():
    bm = BitMap()
    for i in range(1000):
        if i % 2 == 0:
            bm.set_bit(i, 1)
    expect_offset = 100
    count = 0
    for offset, val in bm.iter_bits(100, 201):
        assert offset == expect_offset
        expect_offset += 1
        if offset % 2 == 0:
            assert val == 1
        count += 1
    assert count == 101


def test_iter_bits_to_end():
    size = 1000
    bm = BitMap()
    offsets = set(random.sample(range(size), size // 5))
    for offset in offsets:
        bm.set_bit(offset, 1)
    for offset, val in bm.iter_bits(size // 20 + 1, 0):
        assert (val > 0) == (offset in offsets)
        assert (bm.get_bit(offset) > 0) == (offset in offsets)


def test_iter_bits_whole_and_break():
    bm = BitMap()
    bm.set_bit(0, 1)
    bm.set_bit(15, 1)
    assert len(list(bm.iter_bits(0, 0))) == bm.bit_size()
    assert list(islice(bm.iter_bits(0, 0), 1)) == [(0, 1)]


def test_iter_bytes():
    bm = BitMap()
    for i in range(1000):
        if i % 16 == 0:
            bm.set_bit(i, 1)
    for begin, end in [(0, 0), (0, 2000), (0, 500)]:
        seen = list(bm.iter_bytes(begin, end))
        assert len(seen) == len(bm)
        for offset, val in seen:
            assert val == (1 if offset % 2 == 0 else 0)
    assert list(islice(bm.iter_bytes(0, 0), 1)) == [(0, 1)]


def test_iter_bytes_partial():
    bm = BitMap(b"\x01\x02\x03\x04")
    assert list(bm.iter_bytes(1, 3)) == [(1, 2), (2, 3)]