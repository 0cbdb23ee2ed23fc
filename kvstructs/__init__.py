"""In-memory data structures for key-value stores: bitmaps, dicts, locks, sets, lists, skiplists and sorted sets."""

__version__ = "0.1.0"

__all__ = [
    "bitmap",
    "border",
    "concurrent",
    "dicts",
    "hashset",
    "linked",
    "lock",
    "quicklist",
    "skiplist",
    "sortedset",
]