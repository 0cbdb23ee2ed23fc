# kvstructs

Pure-Python in-memory data structures of the kind that sit under a
Redis-style key-value store. The package has no third-party dependencies.

## Contents

| Module | What it provides |
| --- | --- |
| `kvstructs.bitmap` | `BitMap`, a growable bit array stored in a `bytearray`, and `from_bytes` |
| `kvstructs.dicts` | `Dict`, the abstract dictionary interface, and `SimpleDict`, a plain dictionary that is not thread safe |
| `kvstructs.concurrent` | `ConcurrentDict`, a thread-safe dictionary with one reader/writer lock per shard, and `compute_capacity` |
| `kvstructs.lock` | `RWLock`, `Locks` (a table of reader/writer locks addressed by key) and `fnv32` |
| `kvstructs.hashset` | `Set` of strings, with `intersect`, `union` and `diff` |
| `kvstructs.linked` | `LinkedList`, a doubly linked list |
| `kvstructs.quicklist` | `QuickList`, a list stored as pages of up to 1024 elements |
| `kvstructs.border` | `ScoreBorder` and `parse_score_border` for `min`/`max` score arguments |
| `kvstructs.skiplist` | `Skiplist`, `Node`, `Element` and `random_level`; ordered by score, then by member |
| `kvstructs.sortedset` | `SortedSet`, a dictionary combined with a skiplist |

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Examples

### Bitmap

Bit `n` is bit `n % 8` of byte `n // 8`. Setting a bit past the end grows
the buffer; reading past the end gives 0. A negative offset raises
`ValueError`.

```python
from kvstructs.bitmap import BitMap

bm = BitMap(b"")
bm.set_bit(15, 1)
assert bm.get_bit(15) == 1
assert bm.to_bytes() == b"\x00\x80"
assert [off for off, bit in bm.iter_bits(0, 0) if bit] == [15]
```

`from_bytes` given a `bytearray` works on that buffer in place.

### Sets

```python
from kvstructs.hashset import Set, intersect, union, diff

a = Set("x", "y", "z")
b = Set("y", "z", "w")
assert sorted(intersect(a, b)) == ["y", "z"]
assert sorted(union(a, b)) == ["w", "x", "y", "z"]
assert list(diff(a, b)) == ["x"]
```

### Lists

`LinkedList` and `QuickList` share one set of methods: `add`, `get`, `set`,
`insert`, `remove`, `remove_last`, `remove_all_by_val`, `remove_by_val`,
`reverse_remove_by_val`, `contains` and `range`. The `*_by_val` methods and
`contains` take a predicate. An index out of bounds raises `IndexError`;
`remove_last` on an empty list returns `None`.

```python
from kvstructs.quicklist import QuickList

ql = QuickList()
for i in range(5):
    ql.add(i)
ql.insert(0, -1)
assert ql.range(0, 3) == [-1, 0, 1]
assert ql.remove_by_val(lambda v: v % 2 == 0, 1) == 1   # removes 0
assert list(ql) == [-1, 1, 2, 3, 4]
```

### Sorted set

Ranks start at 0. Score borders are parsed from strings such as `2`,
`(2` (exclusive), `+inf`, `inf` and `-inf`; anything else raises
`ValueError("ERR min or max is not a float")`.

```python
from kvstructs.sortedset import SortedSet
from kvstructs.border import parse_score_border

zs = SortedSet()
zs.add("s1", 1)
zs.add("s2", 2)
zs.add("s3", 3)

in_range = zs.range_by_score(
    parse_score_border("(1"), parse_score_border("+inf"), 0, -1, False
)
assert [e.member for e in in_range] == ["s2", "s3"]
assert zs.get_rank("s3", False) == 2
assert [e.member for e in zs.pop_min(1)] == ["s1"]
```

### Locking several keys together

```python
from kvstructs.lock import Locks

locks = Locks(1024)
with locks.rw_locked(["a"], ["b", "c"]):
    ...  # "a" is held for writing; "b" and "c" are held for reading
```

`Locks` maps each key to a slot with `fnv32`, so the table size should be a
power of two. Multi-key methods take slots in ascending order and release
them in descending order, so two callers locking overlapping keys cannot
deadlock.

`ConcurrentDict` uses the same scheme over its shards: `rw_locks` and
`rw_unlocks` lock the shards that hold the given keys. While those locks are
held, use the `*_with_lock` methods, which take no lock themselves.

```python
from kvstructs.concurrent import ConcurrentDict

d = ConcurrentDict(0)          # shard count rounds up to a power of two, at least 16
d.rw_locks(["k"], None)
try:
    d.put_with_lock("k", 1)
    assert d.get_with_lock("k") == 1
finally:
    d.rw_unlocks(["k"], None)
```

## What the package does not do

It holds data structures only. There is no server, no network protocol, no
command parsing, no key expiry and no persistence to disk.

## Running the tests

```
pytest
```