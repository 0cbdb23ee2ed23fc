"""A skip list of (member, score) pairs ordered by score, then member."""

from __future__ import annotations

import random
from dataclasses import dataclass

from kvstructs.border import ScoreBorder

MAX_LEVEL = 16


@dataclass
class Element:
    """A member with its score."""

    member: str
    score: float


class _Level:
    __slots__ = ("forward", "span")

    def __init__(self):
        self.forward: Node | None = None
        self.span = 0


class Node:
    """A skip list node; ``levels[0]`` is the base level."""

    __slots__ = ("member", "score", "backward", "levels")

    def __init__(self, level: int, score: float, member: str):
        self.member = member
        self.score = score
        self.backward: Node | None = None
        self.levels = [_Level() for _ in range(level)]

    @property
    def element(self) -> Element:
        return Element(self.member, self.score)

    def __repr__(self) -> str:
        return f"Node({self.member!r}, {self.score!r})"


def random_level() -> int:
    """A level in ``[1, MAX_LEVEL]``; each level is about half as likely as the one below."""
    total = (1 << MAX_LEVEL) - 1
    k = random.getrandbits(64) % total
    return MAX_LEVEL - (k + 1).bit_length() + 1


def _before(node: Node, score: float, member: str) -> bool:
    return node.score < score or (node.score == score and node.member < member)


class Skiplist:
    """Ordered by ascending score, ties broken by member; ranks are 1-based."""

    def __init__(self):
        self.header = Node(MAX_LEVEL, 0.0, "")
        self.tail: Node | None = None
        self.length = 0
        self.level = 1

    def __len__(self) -> int:
        return self.length

    def __repr__(self) -> str:
        return f"Skiplist(len={self.length}, level={self.level})"

    def insert(self, member: str, score: float) -> Node:
        """Link a new node for ``member`` and return it; the member must not be present."""
        update: list[Node] = [self.header] * MAX_LEVEL
        rank = [0] * MAX_LEVEL

        node = self.header
        for i in range(self.level - 1, -1, -1):
            rank[i] = 0 if i == self.level - 1 else rank[i + 1]
            forward = node.levels[i].forward
            while forward is not None and _before(forward, score, member):
                rank[i] += node.levels[i].span
                node = forward
                forward = node.levels[i].forward
            update[i] = node

        level = random_level()
        if level > self.level:
            for i in range(self.level, level):
                rank[i] = 0
                update[i] = self.header
                self.header.levels[i].span = self.length
            self.level = level

        new = Node(level, score, member)
        for i in range(level):
            new.levels[i].forward = update[i].levels[i].forward
            update[i].levels[i].forward = new
            new.levels[i].span = update[i].levels[i].span - (rank[0] - rank[i])
            update[i].levels[i].span = rank[0] - rank[i] + 1

        for i in range(level, self.level):
            update[i].levels[i].span += 1

        new.backward = None if update[0] is self.header else update[0]
        if new.levels[0].forward is not None:
            new.levels[0].forward.backward = new
        else:
            self.tail = new
        self.length += 1
        return new

    def _remove_node(self, node: Node, update: list[Node]) -> None:
        for i in range(self.level):
            if update[i].levels[i].forward is node:
                update[i].levels[i].span += node.levels[i].span - 1
                update[i].levels[i].forward = node.levels[i].forward
            else:
                update[i].levels[i].span -= 1
        if node.levels[0].forward is not None:
            node.levels[0].forward.backward = node.backward
        else:
            self.tail = node.backward
        while self.level > 1 and self.header.levels[self.level - 1].forward is None:
            self.level -= 1
        self.length -= 1

    def remove(self, member: str, score: float) -> bool:
        """Unlink the node with this member and score; return whether it was found."""
        update: list[Node] = [self.header] * MAX_LEVEL
        node = self.header
        for i in range(self.level - 1, -1, -1):
            forward = node.levels[i].forward
            while forward is not None and _before(forward, score, member):
                node = forward
                forward = node.levels[i].forward
            update[i] = node
        target = node.levels[0].forward
        if target is not None and target.score == score and target.member == member:
            self._remove_node(target, update)
            return True
        return False

    def get_rank(self, member: str, score: float) -> int:
        """1-based rank of the member; 0 if it is not found."""
        rank = 0
        x = self.header
        for i in range(self.level - 1, -1, -1):
            forward = x.levels[i].forward
            while forward is not None and (
                forward.score < score
                or (forward.score == score and forward.member <= member)
            ):
                rank += x.levels[i].span
                x = forward
                forward = x.levels[i].forward
            if x.member == member:
                return rank
        return 0

    def get_by_rank(self, rank: int) -> Node | None:
        """Node at the 1-based ``rank``, or ``None``."""
        i = 0
        node = self.header
        for level in range(self.level - 1, -1, -1):
            forward = node.levels[level].forward
            while forward is not None and i + node.levels[level].span <= rank:
                i += node.levels[level].span
                node = forward
                forward = node.levels[level].forward
            if i == rank:
                return node
        return None

    def has_in_range(self, low: ScoreBorder, high: ScoreBorder) -> bool:
        """Whether any score may fall between the two borders."""
        if low.value > high.value or (
            low.value == high.value and (low.exclude or high.exclude)
        ):
            return False
        node = self.tail
        if node is None or not low.less(node.score):
            return False
        node = self.header.levels[0].forward
        if node is None or not high.greater(node.score):
            return False
        return True

    def get_first_in_score_range(self, low: ScoreBorder, high: ScoreBorder) -> Node | None:
        """Lowest node whose score lies within the borders."""
        if not self.has_in_range(low, high):
            return None
        node = self.header
        for level in range(self.level - 1, -1, -1):
            forward = node.levels[level].forward
            while forward is not None and not low.less(forward.score):
                node = forward
                forward = node.levels[level].forward
        node = node.levels[0].forward
        if node is None or not high.greater(node.score):
            return None
        return node

    def get_last_in_score_range(self, low: ScoreBorder, high: ScoreBorder) -> Node | None:
        """Highest node whose score lies within the borders."""
        if not self.has_in_range(low, high):
            return None
        node = self.header
        for level in range(self.level - 1, -1, -1):
            forward = node.levels[level].forward
            while forward is not None and high.greater(forward.score):
                node = forward
                forward = node.levels[level].forward
        if node is self.header or not low.less(node.score):
            return None
        return node

    def remove_range_by_score(
        self, low: ScoreBorder, high: ScoreBorder, limit: int = 0
    ) -> list[Element]:
        """Remove nodes with scores within the borders, at most ``limit`` if positive."""
        update: list[Node] = [self.header] * MAX_LEVEL
        removed: list[Element] = []
        node = self.header
        for i in range(self.level - 1, -1, -1):
            forward = node.levels[i].forward
            while forward is not None and not low.less(forward.score):
                node = forward
                forward = node.levels[i].forward
            update[i] = node

        current = node.levels[0].forward
        while current is not None:
            if not high.greater(current.score):
                break
            following = current.levels[0].forward
            removed.append(current.element)
            self._remove_node(current, update)
            if limit > 0 and len(removed) == limit:
                break
            current = following
        return removed

    def remove_range_by_rank(self, start: int, stop: int) -> list[Element]:
        """Remove nodes with 1-based rank in ``[start, stop)``."""
        i = 0
        update: list[Node] = [self.header] * MAX_LEVEL
        removed: list[Element] = []
        node = self.header
        for level in range(self.level - 1, -1, -1):
            forward = node.levels[level].forward
            while forward is not None and i + node.levels[level].span < start:
                i += node.levels[level].span
                node = forward
                forward = node.levels[level].forward
            update[level] = node

        i += 1
        current = node.levels[0].forward
        while current is not None and i < stop:
            following = current.levels[0].forward
            removed.append(current.element)
            self._remove_node(current, update)
            current = following
            i += 1
        return removed