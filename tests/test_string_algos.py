import pytest

from datakit.string_algos import StringScanner, find

IN_STR = "I have ALPHA beta ALPHA and oranges ALPHA"
ALPHA = "ALPHA"


def test_find_first_occurrence():
    assert find(IN_STR, ALPHA) == 7


def test_find_and_scan_agree():
    scanner = StringScanner(IN_STR)
    find_i = find(IN_STR, ALPHA)
    assert find_i > 0
    scan_i = scanner.scan(ALPHA)
    assert scan_i == find_i
    assert scanner.scan(ALPHA) > find_i
    assert scanner.scan(ALPHA) > find_i
    assert scanner.scan(ALPHA) == -1


def test_scan_positions():
    scanner = StringScanner(IN_STR)
    assert [scanner.scan(ALPHA) for _ in range(4)] == [7, 18, 36, -1]


def test_scan_restarts_after_end():
    scanner = StringScanner(IN_STR)
    while scanner.scan(ALPHA) != -1:
        pass
    assert scanner.scan(ALPHA) == 7


def test_reset():
    scanner = StringScanner(IN_STR)
    assert scanner.scan(ALPHA) == 7
    scanner.reset()
    assert scanner.scan(ALPHA) == 7


def test_scan_with_new_needle_keeps_position():
    scanner = StringScanner("abc abc")
    assert scanner.scan("abc") == 0
    assert scanner.scan("c") == 6


def test_find_missing():
    assert find(IN_STR, "BETA") == -1
    assert find("abc", "abcd") == -1


def test_find_empty_inputs():
    assert find("", "a") == -1
    assert find("abc", "") == -1


def test_find_bytes():
    assert find(b"xxhelloxx", b"hello") == 2


def test_scan_not_found():
    scanner = StringScanner(IN_STR)
    assert scanner.scan("zebra") == -1


def test_type_mismatch():
    with pytest.raises(TypeError):
        find(b"abc", "a")
    with pytest.raises(TypeError):
        StringScanner("abc").scan(b"a")