"""A list stored as a sequence of fixed-capacity pages."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from itertools import islice
from typing import Any

Expected = Callable[[Any], bool]

PAGE_SIZE = 1024  # must be even


class QuickList:
    """A list of pages; cheaper appends and scans than a node-per-element list."""

    __slots__ = ("_pages", "_size")

    def __init__(self):
        self._pages: list[list[Any]] = []
        self._size = 0

    def __repr__(self) -> str:
        return f"QuickList(len={self._size}, pages={len(self._pages)})"

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for page in self._pages:
            yield from page

    def __reversed__(self) -> Iterator[Any]:
        for page in reversed(self._pages):
            yield from reversed(page)

    def add(self, val: Any) -> None:
        """Append ``val`` at the tail."""
        if not self._pages or len(self._pages[-1]) >= PAGE_SIZE:
            self._pages.append([val])
        else:
            self._pages[-1].append(val)
        self._size += 1

    def _find(self, index: int) -> tuple[int, int]:
        """Return ``(page index, offset in page)`` of element ``index``."""
        if index < 0 or index >= self._size:
            raise IndexError(f"index out of bound: {index}")
        if index < self._size // 2:
            page_beg = 0
            for page_index, page in enumerate(self._pages):
                if page_beg + len(page) > index:
                    return page_index, index - page_beg
                page_beg += len(page)
        else:
            page_beg = self._size
            for page_index in range(len(self._pages) - 1, -1, -1):
                page_beg -= len(self._pages[page_index])
                if page_beg <= index:
                    return page_index, index - page_beg
        raise IndexError(f"index out of bound: {index}")

    def get(self, index: int) -> Any:
        """Return the value at ``index``."""
        page_index, offset = self._find(index)
        return self._pages[page_index][offset]

    def set(self, index: int, val: Any) -> None:
        """Replace the value at ``index``."""
        page_index, offset = self._find(index)
        self._pages[page_index][offset] = val

    def insert(self, index: int, val: Any) -> None:
        """Insert ``val`` before the element at ``index``; ``index == len`` appends.

        A full page is split into two halves before inserting.
        """
        if index == self._size:
            self.add(val)
            return
        page_index, offset = self._find(index)
        page = self._pages[page_index]
        if len(page) < PAGE_SIZE:
            page.insert(offset, val)
        else:
            half = PAGE_SIZE // 2
            next_page = page[half:]
            del page[half:]
            if offset < half:
                page.insert(offset, val)
            else:
                next_page.insert(offset - half, val)
            self._pages.insert(page_index + 1, next_page)
        self._size += 1

    def _delete_at(self, page_index: int, offset: int) -> Any:
        page = self._pages[page_index]
        val = page.pop(offset)
        if not page:
            del self._pages[page_index]
        self._size -= 1
        return val

    def remove(self, index: int) -> Any:
        """Remove the element at ``index`` and return its value."""
        page_index, offset = self._find(index)
        return self._delete_at(page_index, offset)

    def remove_last(self) -> Any:
        """Remove the tail element and return its value, or ``None`` if empty."""
        if self._size == 0:
            return None
        last = len(self._pages) - 1
        return self._delete_at(last, len(self._pages[last]) - 1)

    def remove_all_by_val(self, expected: Expected) -> int:
        """Remove every element matching ``expected``; return how many went."""
        return self.remove_by_val(expected, 0)

    def remove_by_val(self, expected: Expected, count: int) -> int:
        """Remove up to ``count`` matching elements scanning from the head.

        A ``count`` of zero or less removes all matches.
        """
        removed = 0
        page_index, offset = 0, 0
        while page_index < len(self._pages):
            page = self._pages[page_index]
            if offset >= len(page):
                page_index += 1
                offset = 0
                continue
            if expected(page[offset]):
                emptied = len(page) == 1
                self._delete_at(page_index, offset)
                removed += 1
                if removed == count:
                    break
                if emptied:
                    offset = 0
            else:
                offset += 1
        return removed

    def reverse_remove_by_val(self, expected: Expected, count: int) -> int:
        """Remove up to ``count`` matching elements scanning from the tail."""
        removed = 0
        page_index = len(self._pages) - 1
        offset = len(self._pages[page_index]) - 1 if self._pages else -1
        while page_index >= 0:
            if offset < 0:
                page_index -= 1
                if page_index >= 0:
                    offset = len(self._pages[page_index]) - 1
                continue
            page = self._pages[page_index]
            if expected(page[offset]):
                self._delete_at(page_index, offset)
                removed += 1
                if removed == count:
                    break
            offset -= 1
        return removed

    def contains(self, expected: Expected) -> bool:
        """Whether any element matches ``expected``."""
        return any(expected(val) for val in self)

    def _iter_from(self, page_index: int, offset: int) -> Iterator[Any]:
        yield from islice(self._pages[page_index], offset, None)
        for page in islice(self._pages, page_index + 1, None):
            yield from page

    def range(self, start: int, stop: int) -> list[Any]:
        """Return the values with index in ``[start, stop)``."""
        if start < 0 or start >= self._size:
            raise IndexError(f"start out of range: {start}")
        if stop < start or stop > self._size:
            raise IndexError(f"stop out of range: {stop}")
        page_index, offset = self._find(start)
        return list(islice(self._iter_from(page_index, offset), stop - start))