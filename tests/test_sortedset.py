import pytest

from kvstructs.border import parse_score_border
from kvstructs.sortedset import SortedSet


def make_set():
    s = SortedSet()
    for member, score in [("s1", 1), ("s2", 2), ("s3", 3), ("s4", 4)]:
        s.add(member, score)
    return s


def members(elements):
    return [e.member for e in elements]


def test_pop_min():
    s = make_set()
    results = s.pop_min(2)
    assert members(results) == ["s1", "s2"]
    assert len(s) == 2
    assert "s1" not in s


def test_pop_min_empty():
    assert SortedSet().pop_min(3) == []


def test_add_reports_new_and_updates_score():
    s = SortedSet()
    assert s.add("a", 1) is True
    assert s.add("b", 2) is True
    assert s.add("a", 5) is False
    assert s.get("a").score == 5
    assert members(s.range(0, 2)) == ["b", "a"]
    assert len(s) == 2


def test_get_and_remove():
    s = make_set()
    assert s.get("missing") is None
    assert s.remove("s2") is True
    assert s.remove("s2") is False
    assert members(s.range(0, 3)) == ["s1", "s3", "s4"]


def test_get_rank():
    s = make_set()
    assert s.get_rank("s1", False) == 0
    assert s.get_rank("s4", False) == 3
    assert s.get_rank("s1", True) == 3
    assert s.get_rank("s4", True) == 0
    assert s.get_rank("nope", False) == -1


def test_range_orders():
    s = make_set()
    assert members(s.range(0, 4, False)) == ["s1", "s2", "s3", "s4"]
    assert members(s.range(0, 4, True)) == ["s4", "s3", "s2", "s1"]
    assert members(s.range(1, 3, False)) == ["s2", "s3"]
    assert members(s.range(1, 3, True)) == ["s3", "s2"]


def test_equal_scores_ordered_by_member():
    s = SortedSet()
    for m in ["c", "a", "b"]:
        s.add(m, 1)
    assert members(s.range(0, 3)) == ["a", "b", "c"]


def test_for_each_rejects_bad_bounds():
    s = make_set()
    with pytest.raises(IndexError):
        s.for_each(4, 4, False)
    with pytest.raises(IndexError):
        s.for_each(2, 1, False)
    with pytest.raises(IndexError):
        s.range(0, 5)


def test_count():
    s = make_set()
    assert s.count(parse_score_border("(1"), parse_score_border("3")) == 2
    assert s.count(parse_score_border("-inf"), parse_score_border("+inf")) == 4
    assert s.count(parse_score_border("5"), parse_score_border("6")) == 0
    assert SortedSet().count(parse_score_border("-inf"), parse_score_border("inf")) == 0


def test_range_by_score():
    s = make_set()
    low, high = parse_score_border("-inf"), parse_score_border("+inf")
    assert members(s.range_by_score(low, high, 1, 1, False)) == ["s2"]
    assert members(s.range_by_score(low, high, 1, -1, False)) == ["s2", "s3", "s4"]
    assert members(s.range_by_score(low, high, 0, 2, True)) == ["s4", "s3"]
    assert s.range_by_score(low, high, 0, 0, False) == []
    assert s.range_by_score(low, high, -1, 2, False) == []
    bounded = s.range_by_score(parse_score_border("2"), parse_score_border("(4"), 0, -1, False)
    assert members(bounded) == ["s2", "s3"]


def test_remove_by_score():
    s = make_set()
    assert s.remove_by_score(parse_score_border("2"), parse_score_border("3")) == 2
    assert members(s.range(0, 2)) == ["s1", "s4"]
    assert "s2" not in s


def test_remove_by_rank():
    s = make_set()
    assert s.remove_by_rank(0, 2) == 2
    assert members(s.range(0, 2)) == ["s3", "s4"]
    assert s.get("s1") is None
    assert len(s) == 2


def test_many_members_stay_sorted():
    s = SortedSet()
    for i in range(200):
        s.add(f"m{i}", (i * 37) % 200)
    scores = [e.score for e in s.range(0, 200)]
    assert scores == sorted(scores)
    assert s.get_rank("m0", False) == 0
    assert len(s) == 200