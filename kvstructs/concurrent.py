"""A thread-safe dictionary split into shards, each guarded by its own lock."""

from __future__ import annotations

import random
import threading
from collections.abc import Iterable, Iterator
from typing import Any

from kvstructs.dicts import Dict
from kvstructs.lock import RWLock, fnv32

_MAX_INT32 = 2**31 - 1


def compute_capacity(param: int) -> int:
    """Round ``param`` up to a power of two, with a minimum of 16."""
    if param <= 16:
        return 16
    n = param - 1
    n |= n >> 1
    n |= n >> 2
    n |= n >> 4
    n |= n >> 8
    n |= n >> 16
    if n < 0:
        return _MAX_INT32
    return n + 1


class _Shard:
    __slots__ = ("m", "lock")

    def __init__(self):
        self.m: dict[str, Any] = {}
        self.lock = RWLock()

    def snapshot(self) -> list[tuple[str, Any]]:
        self.lock.acquire_read()
        try:
            return list(self.m.items())
        finally:
            self.lock.release_read()

    def random_key(self) -> str | None:
        self.lock.acquire_read()
        try:
            if not self.m:
                return None
            return random.choice(list(self.m))
        finally:
            self.lock.release_read()


class ConcurrentDict(Dict):
    """A dictionary whose keys are spread over shards with separate locks.

    Methods ending in ``_with_lock`` take no lock themselves; the caller must
    already hold the keys through :meth:`rw_locks`.
    """

    def __init__(self, shard_count: int = 0):
        self._shard_count = compute_capacity(shard_count)
        self._table = [_Shard() for _ in range(self._shard_count)]
        self._count = 0
        self._count_lock = threading.Lock()

    def __repr__(self) -> str:
        return f"ConcurrentDict(shards={self._shard_count}, len={len(self)})"

    def _index(self, key: str) -> int:
        return (len(self._table) - 1) & fnv32(key)

    def _shard(self, key: str) -> _Shard:
        return self._table[self._index(key)]

    def _add_count(self, delta: int) -> None:
        with self._count_lock:
            self._count += delta

    def get(self, key, default=None):
        shard = self._shard(key)
        shard.lock.acquire_read()
        try:
            return shard.m.get(key, default)
        finally:
            shard.lock.release_read()

    def get_with_lock(self, key, default=None):
        return self._shard(key).m.get(key, default)

    def __contains__(self, key):
        if not isinstance(key, str):
            return False
        shard = self._shard(key)
        shard.lock.acquire_read()
        try:
            return key in shard.m
        finally:
            shard.lock.release_read()

    def __len__(self):
        with self._count_lock:
            return self._count

    def _put(self, shard: _Shard, key, val) -> int:
        if key in shard.m:
            shard.m[key] = val
            return 0
        shard.m[key] = val
        self._add_count(1)
        return 1

    def _put_if_absent(self, shard: _Shard, key, val) -> int:
        if key in shard.m:
            return 0
        shard.m[key] = val
        self._add_count(1)
        return 1

    @staticmethod
    def _put_if_exists(shard: _Shard, key, val) -> int:
        if key in shard.m:
            shard.m[key] = val
            return 1
        return 0

    def _remove(self, shard: _Shard, key) -> int:
        if key in shard.m:
            del shard.m[key]
            self._add_count(-1)
            return 1
        return 0

    def _locked(self, key, op, *args) -> int:
        shard = self._shard(key)
        shard.lock.acquire_write()
        try:
            return op(shard, key, *args)
        finally:
            shard.lock.release_write()

    def put(self, key, val):
        return self._locked(key, self._put, val)

    def put_with_lock(self, key, val):
        return self._put(self._shard(key), key, val)

    def put_if_absent(self, key, val):
        return self._locked(key, self._put_if_absent, val)

    def put_if_absent_with_lock(self, key, val):
        return self._put_if_absent(self._shard(key), key, val)

    def put_if_exists(self, key, val):
        return self._locked(key, self._put_if_exists, val)

    def put_if_exists_with_lock(self, key, val):
        return self._put_if_exists(self._shard(key), key, val)

    def remove(self, key):
        return self._locked(key, self._remove)

    def remove_with_lock(self, key):
        return self._remove(self._shard(key), key)

    def items(self) -> Iterator[tuple[str, Any]]:
        """Iterate over entries shard by shard; later insertions may be missed."""
        for shard in self._table:
            yield from shard.snapshot()

    def keys(self):
        return [key for key, _ in self.items()]

    def random_keys(self, limit):
        """``limit`` random keys, possibly repeated; all keys if ``limit`` >= size."""
        if limit >= len(self):
            return self.keys()
        result: list[str] = []
        while len(result) < limit:
            key = random.choice(self._table).random_key()
            if key is not None:
                result.append(key)
        return result

    def random_distinct_keys(self, limit):
        """``limit`` distinct random keys; all keys if ``limit`` >= size."""
        if limit >= len(self):
            return self.keys()
        result: dict[str, None] = {}
        while len(result) < limit:
            key = random.choice(self._table).random_key()
            if key is not None:
                result[key] = None
        return list(result)

    def clear(self):
        self._table = [_Shard() for _ in range(self._shard_count)]
        with self._count_lock:
            self._count = 0

    def _plan(self, write_keys: Iterable[str] | None, read_keys: Iterable[str] | None, reverse: bool):
        write_keys = list(write_keys or ())
        read_keys = list(read_keys or ())
        write_indices = {self._index(key) for key in write_keys}
        indices = sorted({self._index(key) for key in write_keys + read_keys}, reverse=reverse)
        return indices, write_indices

    def rw_locks(self, write_keys, read_keys) -> None:
        """Lock shards of write keys exclusively and of read keys shared; duplicates allowed."""
        indices, write_indices = self._plan(write_keys, read_keys, reverse=False)
        for index in indices:
            lock = self._table[index].lock
            if index in write_indices:
                lock.acquire_write()
            else:
                lock.acquire_read()

    def rw_unlocks(self, write_keys, read_keys) -> None:
        """Release what :meth:`rw_locks` took for the same keys."""
        indices, write_indices = self._plan(write_keys, read_keys, reverse=True)
        for index in indices:
            lock = self._table[index].lock
            if index in write_indices:
                lock.release_write()
            else:
                lock.release_read()