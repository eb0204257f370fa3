"""Substring search with the Boyer-Moore-Horspool skip table."""

from __future__ import annotations

from typing import Optional, Union

Text = Union[bytes, str]


def _check_types(haystack: Text, needle: Text) -> None:
    if not isinstance(haystack, (bytes, str)):
        raise TypeError("haystack must be bytes or str")
    if type(haystack) is not type(needle):
        raise TypeError("haystack and needle must be of the same type")


def _skip_table(needle: Text) -> dict:
    last = len(needle) - 1
    return {needle[i]: last - i for i in range(last)}


def _search(
    haystack: Text, start: int, hlen: int, needle: Text, skips: dict
) -> Optional[int]:
    """Position of ``needle`` within ``hlen`` items from ``start``, or None."""
    nlen = len(needle)
    if nlen <= 0 or hlen <= 0:
        return None
    last = nlen - 1
    pos = start
    while hlen >= nlen:
        i = last
        while haystack[pos + i] == needle[i]:
            if i == 0:
                return pos
            i -= 1
        skip = skips.get(haystack[pos + last], nlen)
        hlen -= skip
        pos += skip
    return None


def find(haystack: Text, needle: Text) -> int:
    """Index of the first occurrence of ``needle`` in ``haystack``, or -1."""
    _check_types(haystack, needle)
    found = _search(haystack, 0, len(haystack), needle, _skip_table(needle))
    return -1 if found is None else found


class StringScanner:
    """Finds successive occurrences of a needle in one input."""

    def __init__(self, text: Text) -> None:
        if not isinstance(text, (bytes, str)):
            raise TypeError("text must be bytes or str")
        self.text = text
        self._needle: Optional[Text] = None
        self._skips: dict = {}
        self.reset()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.text!r}, position={self._pos})"

    def reset(self) -> None:
        """Start the next scan from the beginning of the input."""
        self._pos = 0
        self._hlen = len(self.text)

    def scan(self, needle: Text) -> int:
        """Index of the next occurrence of ``needle``, or -1 when done.

        Returning -1 resets the scanner to the start of the input.
        """
        _check_types(self.text, needle)
        if self._hlen <= 0:
            self.reset()
            return -1

        if needle != self._needle:
            self._needle = needle
            self._skips = _skip_table(needle)

        window = min(self._hlen, len(self.text) - self._pos)
        found = _search(self.text, self._pos, window, needle, self._skips)
        if found is None:
            self.reset()
            return -1

        nlen = len(needle)
        self._pos = found + nlen
        self._hlen -= found - nlen
        return found