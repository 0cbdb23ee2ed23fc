"""Reader-writer locks and a striped lock table addressed by key."""

from __future__ import annotations

import threading
from collections.abc import Iterable, Iterator
from contextlib import contextmanager

_FNV_OFFSET = 2166136261
_FNV_PRIME = 16777619
_MASK32 = 0xFFFFFFFF


def fnv32(key: str) -> int:
    """32-bit FNV-1 hash of the UTF-8 bytes of ``key``."""
    h = _FNV_OFFSET
    for byte in key.encode("utf-8"):
        h = (h * _FNV_PRIME) & _MASK32
        h ^= byte
    return h


class RWLock:
    """A reader-writer lock; a waiting writer keeps new readers out."""

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._pending_writers = 0

    def acquire_read(self) -> None:
        with self._cond:
            while self._writer or self._pending_writers:
                self._cond.wait()
            self._readers += 1

    def release_read(self) -> None:
        with self._cond:
            if self._readers == 0:
                raise RuntimeError("release_read of an RWLock not held for reading")
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self) -> None:
        with self._cond:
            self._pending_writers += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._pending_writers -= 1
            self._writer = True

    def release_write(self) -> None:
        with self._cond:
            if not self._writer:
                raise RuntimeError("release_write of an RWLock not held for writing")
            self._writer = False
            self._cond.notify_all()


class Locks:
    """A fixed table of reader-writer locks; each key maps to one slot.

    Multi-key methods take slots in ascending order and release them in
    descending order, so they never deadlock against each other.
    """

    def __init__(self, table_size: int):
        if table_size <= 0:
            raise ValueError(f"table size must be positive: {table_size}")
        self._table = [RWLock() for _ in range(table_size)]

    def _index(self, key: str) -> int:
        return (len(self._table) - 1) & fnv32(key)

    def _indices(self, keys: Iterable[str], reverse: bool) -> list[int]:
        return sorted({self._index(key) for key in keys}, reverse=reverse)

    def lock(self, key: str) -> None:
        self._table[self._index(key)].acquire_write()

    def rlock(self, key: str) -> None:
        self._table[self._index(key)].acquire_read()

    def unlock(self, key: str) -> None:
        self._table[self._index(key)].release_write()

    def runlock(self, key: str) -> None:
        self._table[self._index(key)].release_read()

    def locks(self, *keys: str) -> None:
        for index in self._indices(keys, reverse=False):
            self._table[index].acquire_write()

    def rlocks(self, *keys: str) -> None:
        for index in self._indices(keys, reverse=False):
            self._table[index].acquire_read()

    def unlocks(self, *keys: str) -> None:
        for index in self._indices(keys, reverse=True):
            self._table[index].release_write()

    def runlocks(self, *keys: str) -> None:
        for index in self._indices(keys, reverse=True):
            self._table[index].release_read()

    def _split(self, write_keys, read_keys, reverse):
        write_keys = list(write_keys or ())
        read_keys = list(read_keys or ())
        write_indices = {self._index(key) for key in write_keys}
        return self._indices(write_keys + read_keys, reverse), write_indices

    def rw_locks(self, write_keys, read_keys) -> None:
        """Lock the write keys exclusively and the read keys shared; duplicates allowed."""
        indices, write_indices = self._split(write_keys, read_keys, reverse=False)
        for index in indices:
            if index in write_indices:
                self._table[index].acquire_write()
            else:
                self._table[index].acquire_read()

    def rw_unlocks(self, write_keys, read_keys) -> None:
        """Release what :meth:`rw_locks` took for the same keys."""
        indices, write_indices = self._split(write_keys, read_keys, reverse=True)
        for index in indices:
            if index in write_indices:
                self._table[index].release_write()
            else:
                self._table[index].release_read()

    @contextmanager
    def rw_locked(self, write_keys, read_keys) -> Iterator[None]:
        """Hold :meth:`rw_locks` for the duration of a ``with`` block."""
        self.rw_locks(write_keys, read_keys)
        try:
            yield
        finally:
            self.rw_unlocks(write_keys, read_keys)