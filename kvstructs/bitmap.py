"""A growable bitmap stored as a mutable byte buffer."""

from __future__ import annotations

from collections.abc import Iterator


def _to_byte_size(bit_size: int) -> int:
    return (bit_size + 7) // 8


class BitMap:
    """Bits addressed by offset; bit ``n`` is bit ``n % 8`` of byte ``n // 8``.

    When built from a ``bytearray`` the bitmap works on that buffer in place.
    """

    __slots__ = ("_data",)

    def __init__(self, data=None):
        if data is None:
            self._data = bytearray()
        elif isinstance(data, bytearray):
            self._data = data
        else:
            self._data = bytearray(data)

    def __len__(self) -> int:
        """Number of bytes in the bitmap."""
        return len(self._data)

    def __repr__(self) -> str:
        return f"BitMap({bytes(self._data)!r})"

    def bit_size(self) -> int:
        """Number of addressable bits currently stored."""
        return len(self._data) * 8

    def _grow(self, bit_size: int) -> None:
        gap = _to_byte_size(bit_size) - len(self._data)
        if gap > 0:
            self._data.extend(bytes(gap))

    @staticmethod
    def _check_offset(offset: int) -> None:
        if offset < 0:
            raise ValueError(f"bit offset must not be negative: {offset}")

    def set_bit(self, offset: int, val: int) -> None:
        """Set the bit at ``offset`` when ``val`` > 0, clear it otherwise."""
        self._check_offset(offset)
        byte_index, bit_offset = divmod(offset, 8)
        mask = 1 << bit_offset
        self._grow(offset + 1)
        if val > 0:
            self._data[byte_index] |= mask
        else:
            self._data[byte_index] &= ~mask & 0xFF

    def get_bit(self, offset: int) -> int:
        """Return the bit at ``offset``; bits past the end read as 0."""
        self._check_offset(offset)
        byte_index, bit_offset = divmod(offset, 8)
        if byte_index >= len(self._data):
            return 0
        return (self._data[byte_index] >> bit_offset) & 0x01

    def to_bytes(self) -> bytearray:
        """Return the underlying buffer."""
        return self._data

    def iter_bits(self, begin: int = 0, end: int = 0) -> Iterator[tuple[int, int]]:
        """Yield ``(offset, bit)`` from ``begin`` up to ``end``; ``end == 0`` means to the last bit."""
        self._check_offset(begin)
        offset = begin
        byte_index, bit_offset = divmod(offset, 8)
        while byte_index < len(self._data):
            value = self._data[byte_index]
            while bit_offset < 8:
                yield offset, (value >> bit_offset) & 0x01
                bit_offset += 1
                offset += 1
                if end != 0 and offset >= end:
                    break
            byte_index += 1
            bit_offset = 0
            if end > 0 and offset >= end:
                break

    def iter_bytes(self, begin: int = 0, end: int = 0) -> Iterator[tuple[int, int]]:
        """Yield ``(index, byte)`` from ``begin`` up to ``end``; ``end == 0`` means to the last byte."""
        size = len(self._data)
        if end == 0 or end > size:
            end = size
        for index in range(begin, end):
            yield index, self._data[index]


def from_bytes(data) -> BitMap:
    """Build a bitmap over ``data``; a ``bytearray`` is shared, not copied."""
    return BitMap(data)