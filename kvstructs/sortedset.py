"""A set of members ordered by score, backed by a dict and a skip list."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import islice

from kvstructs.border import NEGATIVE_INF_BORDER, POSITIVE_INF_BORDER, ScoreBorder
from kvstructs.skiplist import Element, Node, Skiplist


def _walk(node: Node | None, desc: bool) -> Iterator[Node]:
    while node is not None:
        yield node
        node = node.backward if desc else node.levels[0].forward


class SortedSet:
    """Members with scores, ordered by ascending score then member; ranks start at 0."""

    __slots__ = ("_dict", "_skiplist")

    def __init__(self):
        self._dict: dict[str, Element] = {}
        self._skiplist = Skiplist()

    def __repr__(self) -> str:
        return f"SortedSet(len={len(self._dict)})"

    def add(self, member: str, score: float) -> bool:
        """Insert or update ``member``; return whether it was new."""
        old = self._dict.get(member)
        self._dict[member] = Element(member, score)
        if old is not None:
            if score != old.score:
                self._skiplist.remove(member, old.score)
                self._skiplist.insert(member, score)
            return False
        self._skiplist.insert(member, score)
        return True

    def __len__(self) -> int:
        return len(self._dict)

    def __contains__(self, member: object) -> bool:
        return member in self._dict

    def get(self, member: str) -> Element | None:
        """The element for ``member``, or ``None``."""
        return self._dict.get(member)

    def remove(self, member: str) -> bool:
        """Remove ``member``; return whether it was present."""
        element = self._dict.pop(member, None)
        if element is None:
            return False
        self._skiplist.remove(member, element.score)
        return True

    def get_rank(self, member: str, desc: bool = False) -> int:
        """0-based rank of ``member`` in the given order; -1 if absent."""
        element = self._dict.get(member)
        if element is None:
            return -1
        rank = self._skiplist.get_rank(member, element.score)
        if desc:
            return self._skiplist.length - rank
        return rank - 1

    def for_each(self, start: int, stop: int, desc: bool = False) -> Iterator[Element]:
        """Iterate over elements with rank in ``[start, stop)``."""
        size = len(self)
        if start < 0 or start >= size:
            raise IndexError(f"illegal start {start}")
        if stop < start or stop > size:
            raise IndexError(f"illegal end {stop}")
        skiplist = self._skiplist
        if desc:
            node = skiplist.tail if start == 0 else skiplist.get_by_rank(size - start)
        else:
            node = (
                skiplist.header.levels[0].forward
                if start == 0
                else skiplist.get_by_rank(start + 1)
            )
        return (n.element for n in islice(_walk(node, desc), stop - start))

    def range(self, start: int, stop: int, desc: bool = False) -> list[Element]:
        """Elements with rank in ``[start, stop)``."""
        return list(self.for_each(start, stop, desc))

    def count(self, low: ScoreBorder, high: ScoreBorder) -> int:
        """Number of members whose score lies within the borders."""
        total = 0
        for node in _walk(self._skiplist.header.levels[0].forward, False):
            if not low.less(node.score):
                continue
            if not high.greater(node.score):
                break
            total += 1
        return total

    def for_each_by_score(
        self,
        low: ScoreBorder,
        high: ScoreBorder,
        offset: int = 0,
        limit: int = -1,
        desc: bool = False,
    ) -> Iterator[Element]:
        """Iterate over elements within the borders, skipping ``offset``; negative ``limit`` means all."""
        if desc:
            node = self._skiplist.get_last_in_score_range(low, high)
        else:
            node = self._skiplist.get_first_in_score_range(low, high)

        while node is not None and offset > 0:
            node = node.backward if desc else node.levels[0].forward
            offset -= 1

        yielded = 0
        while (limit < 0 or yielded < limit) and node is not None:
            yield node.element
            yielded += 1
            node = node.backward if desc else node.levels[0].forward
            if node is None:
                break
            if not low.less(node.score) or not high.greater(node.score):
                break

    def range_by_score(
        self,
        low: ScoreBorder,
        high: ScoreBorder,
        offset: int = 0,
        limit: int = -1,
        desc: bool = False,
    ) -> list[Element]:
        """Elements within the borders; a negative ``limit`` means no limit."""
        if limit == 0 or offset < 0:
            return []
        return list(self.for_each_by_score(low, high, offset, limit, desc))

    def _forget(self, removed: list[Element]) -> None:
        for element in removed:
            self._dict.pop(element.member, None)

    def remove_by_score(self, low: ScoreBorder, high: ScoreBorder) -> int:
        """Remove members within the borders; return how many went."""
        removed = self._skiplist.remove_range_by_score(low, high, 0)
        self._forget(removed)
        return len(removed)

    def pop_min(self, count: int) -> list[Element]:
        """Remove and return up to ``count`` lowest-ranked elements."""
        first = self._skiplist.get_first_in_score_range(
            NEGATIVE_INF_BORDER, POSITIVE_INF_BORDER
        )
        if first is None:
            return []
        border = ScoreBorder(value=first.score, exclude=False)
        removed = self._skiplist.remove_range_by_score(border, POSITIVE_INF_BORDER, count)
        self._forget(removed)
        return removed

    def remove_by_rank(self, start: int, stop: int) -> int:
        """Remove members with 0-based rank in ``[start, stop)``; return how many went."""
        removed = self._skiplist.remove_range_by_rank(start + 1, stop + 1)
        self._forget(removed)
        return len(removed)