import pytest

from kvstructs.dicts import SimpleDict

KEYS = ["alpha", "bravo", "charl", "delta", "echoo", "foxtr", "golfy", "hotel", "india", "julie"]


def test_simple_dict_keys():
    d = SimpleDict()
    for key in KEYS:
        d.put(key, key)
    keys = d.keys()
    assert len(keys) == len(KEYS)
    assert sorted(keys, reverse=True) == sorted(KEYS, reverse=True)


def test_simple_dict_put_if_exists():
    d = SimpleDict()
    key = "abcde"
    val = key + "1"
    assert d.put_if_exists(key, val) == 0
    d.put(key, val)
    val = key + "2"
    assert d.put_if_exists(key, val) == 1
    assert d.get(key) == val


def test_put_counts_new_keys():
    d = SimpleDict()
    assert d.put("k", 1) == 1
    assert d.put("k", 2) == 0
    assert d["k"] == 2
    assert len(d) == 1


def test_put_if_absent():
    d = SimpleDict()
    assert d.put_if_absent("k", 1) == 1
    assert d.put_if_absent("k", 2) == 0
    assert d.get("k") == 1


def test_get_missing():
    d = SimpleDict()
    assert d.get("missing") is None
    assert d.get("missing", 7) == 7
    assert "missing" not in d
    with pytest.raises(KeyError):
        d["missing"]


def test_remove():
    d = SimpleDict()
    d.put("k", 1)
    assert d.remove("k") == 1
    assert d.remove("k") == 0
    assert "k" not in d
    assert len(d) == 0


def test_items():
    d = SimpleDict()
    for i, key in enumerate(KEYS):
        d.put(key, i)
    assert dict(d.items()) == {key: i for i, key in enumerate(KEYS)}


def test_clear():
    d = SimpleDict()
    for key in KEYS:
        d.put(key, key)
    d.clear()
    assert len(d) == 0
    assert d.keys() == []


def test_random_keys():
    d = SimpleDict()
    for key in KEYS[:3]:
        d.put(key, key)
    result = d.random_keys(10)
    assert len(result) == 10
    assert set(result) <= set(KEYS[:3])


def test_random_distinct_keys():
    d = SimpleDict()
    for key in KEYS:
        d.put(key, key)
    result = d.random_distinct_keys(4)
    assert len(result) == 4
    assert len(set(result)) == 4
    assert set(result) <= set(KEYS)
    assert sorted(d.random_distinct_keys(100)) == sorted(KEYS)


def test_random_keys_empty():
    assert SimpleDict().random_keys(3) == []
    assert SimpleDict().random_distinct_keys(3) == []