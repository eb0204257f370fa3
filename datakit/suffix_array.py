"""Suffix array over a byte or text sequence."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Union

Text = Union[bytes, str]


def _code_at(seq: Text, index: int) -> int:
    """Character code at ``index``; positions past the end read as 0."""
    if index >= len(seq):
        return 0
    item = seq[index]
    return item if isinstance(item, int) else ord(item)


def _strncmp(a: Text, b: Text, n: int) -> int:
    """Compare at most ``n`` characters, stopping at a zero character."""
    for index in range(n):
        ca = _code_at(a, index)
        cb = _code_at(b, index)
        if ca != cb:
            return ca - cb
        if ca == 0:
            return 0
    return 0


class SuffixArray:
    """The suffixes of ``source``, sorted, held as start offsets."""

    def __init__(self, source: Text) -> None:
        if not isinstance(source, (bytes, str)):
            raise TypeError("source must be bytes or str")
        self.source = source
        self._indices = sorted(range(len(source)), key=cmp_to_key(self._compare))

    def _compare(self, a_at: int, b_at: int) -> int:
        length = len(self.source)
        shortest = min(length - a_at, length - b_at)
        return _strncmp(self.source[a_at:], self.source[b_at:], shortest)

    def __len__(self) -> int:
        return len(self.source)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.source!r})"

    @property
    def indices(self) -> tuple[int, ...]:
        """Start offsets of the suffixes in sorted order."""
        return tuple(self._indices)

    def substr(self, index: int) -> Text:
        """The suffix at position ``index`` of the sorted order."""
        return self.source[self._indices[index]:]

    def find_suffix(self, data: Text) -> int:
        """Binary search for a suffix whose first ``len(data)`` characters match.

        Returns the position in the sorted order, or -1 when none is found.
        """
        if type(data) is not type(self.source):
            raise TypeError("data must be of the same type as the source")
        if not self._indices:
            return -1
        length = len(data)
        low, high = 0, len(self.source)
        while True:
            mid = (low + high) // 2
            cmp = _strncmp(self.substr(mid), data, length)
            if cmp < 0:
                low = mid + 1
            else:
                high = mid - 1
            if cmp == 0 or low >= high:
                break
        return mid if cmp == 0 else -1