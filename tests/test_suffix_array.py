import pytest

from datakit.suffix_array import SuffixArray


@pytest.fixture
def sarray():
    return SuffixArray(b"abracadabra\0")


def test_sorted_indices(sarray):
    assert sarray.indices == (11, 10, 7, 0, 3, 5, 8, 1, 4, 6, 9, 2)


def test_substr_follows_sorted_order(sarray):
    assert sarray.substr(0) == b"\0"
    assert sarray.substr(1) == b"a\0"
    assert sarray.substr(11) == b"racadabra\0"


def test_find_suffix(sarray):
    at = sarray.find_suffix(b"acadabra\0")
    assert at != -1
    assert sarray.substr(at) == b"acadabra\0"


def test_find_missing_suffix(sarray):
    assert sarray.find_suffix(b"yo\0") == -1


def test_find_by_prefix(sarray):
    at = sarray.find_suffix(b"abra")
    assert at != -1
    assert sarray.substr(at).startswith(b"abra")


def test_text_source():
    sarray = SuffixArray("abracadabra\0")
    at = sarray.find_suffix("acadabra\0")
    assert sarray.substr(at) == "acadabra\0"
    assert len(sarray) == 12


def test_empty_source_finds_nothing():
    assert SuffixArray(b"").find_suffix(b"a") == -1


def test_mismatched_type(sarray):
    with pytest.raises(TypeError):
        sarray.find_suffix("abra")


def test_substr_out_of_range(sarray):
    with pytest.raises(IndexError):
        sarray.substr(12)