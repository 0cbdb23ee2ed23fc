"""A doubly linked list with index access and predicate-based removal."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

Expected = Callable[[Any], bool]


class _Node:
    __slots__ = ("val", "prev", "next")

    def __init__(self, val: Any, prev: _Node | None = None, next: _Node | None = None):
        self.val = val
        self.prev = prev
        self.next = next


class LinkedList:
    """A doubly linked list; index lookups walk from the nearer end."""

    __slots__ = ("_first", "_last", "_size")

    def __init__(self, *vals: Any):
        self._first: _Node | None = None
        self._last: _Node | None = None
        self._size = 0
        for val in vals:
            self.add(val)

    def __repr__(self) -> str:
        return f"LinkedList({', '.join(map(repr, self))})"

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._first
        while node is not None:
            yield node.val
            node = node.next

    def add(self, val: Any) -> None:
        """Append ``val`` at the tail."""
        node = _Node(val, prev=self._last)
        if self._last is None:
            self._first = node
        else:
            self._last.next = node
        self._last = node
        self._size += 1

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= self._size:
            raise IndexError(f"index out of bound: {index}")

    def _find(self, index: int) -> _Node:
        if index < self._size // 2:
            node = self._first
            for _ in range(index):
                node = node.next
        else:
            node = self._last
            for _ in range(self._size - 1 - index):
                node = node.prev
        return node

    def get(self, index: int) -> Any:
        """Return the value at ``index``."""
        self._check_index(index)
        return self._find(index).val

    def set(self, index: int, val: Any) -> None:
        """Replace the value at ``index``."""
        self._check_index(index)
        self._find(index).val = val

    def insert(self, index: int, val: Any) -> None:
        """Insert ``val`` before the element at ``index``; ``index == len`` appends."""
        if index < 0 or index > self._size:
            raise IndexError(f"index out of bound: {index}")
        if index == self._size:
            self.add(val)
            return
        pivot = self._find(index)
        node = _Node(val, prev=pivot.prev, next=pivot)
        if pivot.prev is None:
            self._first = node
        else:
            pivot.prev.next = node
        pivot.prev = node
        self._size += 1

    def _unlink(self, node: _Node) -> None:
        if node.prev is None:
            self._first = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._last = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        self._size -= 1

    def remove(self, index: int) -> Any:
        """Remove the element at ``index`` and return its value."""
        self._check_index(index)
        node = self._find(index)
        self._unlink(node)
        return node.val

    def remove_last(self) -> Any:
        """Remove the tail element and return its value, or ``None`` if empty."""
        node = self._last
        if node is None:
            return None
        self._unlink(node)
        return node.val

    def remove_all_by_val(self, expected: Expected) -> int:
        """Remove every element matching ``expected``; return how many went."""
        return self.remove_by_val(expected, 0)

    def remove_by_val(self, expected: Expected, count: int) -> int:
        """Remove up to ``count`` matching elements scanning from the head.

        A ``count`` of zero or less removes all matches.
        """
        removed = 0
        node = self._first
        while node is not None:
            following = node.next
            if expected(node.val):
                self._unlink(node)
                removed += 1
                if removed == count:
                    break
            node = following
        return removed

    def reverse_remove_by_val(self, expected: Expected, count: int) -> int:
        """Remove up to ``count`` matching elements scanning from the tail."""
        removed = 0
        node = self._last
        while node is not None:
            preceding = node.prev
            if expected(node.val):
                self._unlink(node)
                removed += 1
                if removed == count:
                    break
            node = preceding
        return removed

    def contains(self, expected: Expected) -> bool:
        """Whether any element matches ``expected``."""
        return any(expected(val) for val in self)

    def range(self, start: int, stop: int) -> list[Any]:
        """Return the values with index in ``[start, stop)``."""
        if start < 0 or start >= self._size:
            raise IndexError(f"start out of range: {start}")
        if stop < start or stop > self._size:
            raise IndexError(f"stop out of range: {stop}")
        result = []
        node = self._find(start)
        for _ in range(stop - start):
            result.append(node.val)
            node = node.next
        return result