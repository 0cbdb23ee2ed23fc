"""Key-value dictionary interface and a plain, non thread-safe implementation."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any


class Dict(ABC):
    """Interface of a string-keyed key-value store."""

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """Return the value bound to ``key``, or ``default``."""

    @abstractmethod
    def __contains__(self, key: object) -> bool:
        """Whether ``key`` is present."""

    @abstractmethod
    def __len__(self) -> int:
        """Number of entries."""

    @abstractmethod
    def put(self, key: str, val: Any) -> int:
        """Store ``val``; return 1 if the key is new, else 0."""

    @abstractmethod
    def put_if_absent(self, key: str, val: Any) -> int:
        """Store ``val`` only if ``key`` is missing; return the number stored."""

    @abstractmethod
    def put_if_exists(self, key: str, val: Any) -> int:
        """Store ``val`` only if ``key`` is present; return the number updated."""

    @abstractmethod
    def remove(self, key: str) -> int:
        """Remove ``key``; return the number removed."""

    @abstractmethod
    def keys(self) -> list[str]:
        """All keys."""

    @abstractmethod
    def items(self) -> Iterator[tuple[str, Any]]:
        """Iterate over ``(key, value)`` pairs."""

    @abstractmethod
    def random_keys(self, limit: int) -> list[str]:
        """``limit`` random keys, possibly repeated."""

    @abstractmethod
    def random_distinct_keys(self, limit: int) -> list[str]:
        """Up to ``limit`` random keys without repeats."""

    @abstractmethod
    def clear(self) -> None:
        """Remove every entry."""


class SimpleDict(Dict):
    """A thin wrapper around a built-in dict; not thread safe."""

    __slots__ = ("_m",)

    def __init__(self):
        self._m: dict[str, Any] = {}

    def get(self, key, default=None):
        return self._m.get(key, default)

    def __getitem__(self, key):
        return self._m[key]

    def __contains__(self, key):
        return key in self._m

    def __len__(self):
        return len(self._m)

    def __repr__(self):
        return f"SimpleDict({self._m!r})"

    def put(self, key, val):
        existed = key in self._m
        self._m[key] = val
        return 0 if existed else 1

    def put_if_absent(self, key, val):
        if key in self._m:
            return 0
        self._m[key] = val
        return 1

    def put_if_exists(self, key, val):
        if key in self._m:
            self._m[key] = val
            return 1
        return 0

    def remove(self, key):
        if key in self._m:
            del self._m[key]
            return 1
        return 0

    def keys(self):
        return list(self._m)

    def items(self):
        return iter(list(self._m.items()))

    def random_keys(self, limit):
        if not self._m:
            return []
        keys = list(self._m)
        return [random.choice(keys) for _ in range(limit)]

    def random_distinct_keys(self, limit):
        keys = list(self._m)
        return random.sample(keys, min(limit, len(keys)))

    def clear(self):
        self._m = {}