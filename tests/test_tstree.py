import pytest

from datakit.tstree import TSTree

VALUE_A = "VALUEA"
VALUE_2 = "VALUE2"
VALUE_4 = "VALUE4"
REVERSE = "VALUER"


@pytest.fixture
def tree():
    t = TSTree()
    t.insert("TEST", VALUE_A)
    t.insert("TEST2", VALUE_2)
    t.insert("TSET", REVERSE)
    t.insert("T", VALUE_4)
    return t


def test_search_exact(tree):
    assert tree.search("TEST") == VALUE_A
    assert tree.search("TEST2") == VALUE_2
    assert tree.search("TSET") == REVERSE
    assert tree.search("T") == VALUE_4


def test_search_not_exact(tree):
    assert tree.search("TESTNO") is None
    assert tree.search("TES") is None


def test_search_prefix(tree):
    assert tree.search_prefix("TEST") == VALUE_A
    assert tree.search_prefix("T") == VALUE_4
    assert tree.search_prefix("TE") == VALUE_A
    assert tree.search_prefix("TE--") == VALUE_4


def test_search_prefix_empty_key(tree):
    assert tree.search_prefix("") is None


def test_traverse(tree):
    seen = []

    def callback(value, data):
        assert data == VALUE_A
        seen.append(value)

    tree.traverse(callback, VALUE_A)
    assert len(seen) == 4


def test_values_order(tree):
    assert list(tree.values()) == [VALUE_2, VALUE_A, REVERSE, VALUE_4]


def test_empty_tree():
    tree = TSTree()
    assert tree.search("T") is None
    assert tree.search_prefix("T") is None
    assert list(tree.values()) == []


def test_duplicate_insert(tree):
    with pytest.raises(KeyError):
        tree.insert("TEST", "other")
    assert tree.search("TEST") == VALUE_A


def test_empty_key_insert():
    with pytest.raises(ValueError):
        TSTree().insert("", 1)


def test_bytes_keys():
    tree = TSTree()
    tree.insert(b"abc", 1)
    tree.insert(b"abd", 2)
    assert tree.search(b"abd") == 2
    assert tree.search_prefix(b"ab") == 1