"""A set of strings backed by a hash dictionary, with set algebra helpers."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator

from kvstructs.dicts import SimpleDict


class Set:
    """An unordered collection of distinct strings."""

    __slots__ = ("_dict",)

    def __init__(self, *members: str):
        self._dict = SimpleDict()
        for member in members:
            self.add(member)

    def add(self, val: str) -> int:
        """Add ``val``; return 1 if it was new, else 0."""
        return self._dict.put(val, None)

    def remove(self, val: str) -> int:
        """Remove ``val``; return 1 if it was present, else 0."""
        return self._dict.remove(val)

    def __contains__(self, val: object) -> bool:
        return val in self._dict

    def __len__(self) -> int:
        return len(self._dict)

    def __iter__(self) -> Iterator[str]:
        return iter(self._dict.keys())

    def __repr__(self) -> str:
        return f"Set({', '.join(map(repr, self))})"

    def to_list(self) -> list[str]:
        return self._dict.keys()

    def shallow_copy(self) -> Set:
        return Set(*self)

    def random_members(self, limit: int) -> list[str]:
        """``limit`` random members, possibly repeated."""
        return self._dict.random_keys(limit)

    def random_distinct_members(self, limit: int) -> list[str]:
        """Up to ``limit`` random members without repeats."""
        return self._dict.random_distinct_keys(limit)


def intersect(*sets: Set) -> Set:
    """Members found in every given set."""
    if not sets:
        return Set()
    counts = Counter(member for s in sets for member in s)
    return Set(*(member for member, n in counts.items() if n == len(sets)))


def union(*sets: Set) -> Set:
    """Members found in any given set."""
    return Set(*(member for s in sets for member in s))


def diff(*sets: Set) -> Set:
    """Members of the first set that are in none of the others."""
    if not sets:
        return Set()
    result = sets[0].shallow_copy()
    for other in sets[1:]:
        for member in other:
            result.remove(member)
        if len(result) == 0:
            break
    return result