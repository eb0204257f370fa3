"""A sorted map of 32-bit keys to 32-bit values, kept in order by radix sort."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterator
from dataclasses import dataclass

UINT32_MAX = 0xFFFFFFFF
_KEY_BYTES = 4


class RadixMapError(Exception):
    """Raised when a RadixMap operation cannot be carried out."""


@dataclass
class Element:
    """One key/value pair stored in a :class:`RadixMap`."""

    key: int
    value: int


def _radix_pass(elements: list[Element], offset: int) -> list[Element]:
    """Stable bucket pass on one byte of the key."""
    shift = offset * 8
    buckets: list[list[Element]] = [[] for _ in range(256)]
    for element in elements:
        buckets[(element.key >> shift) & 0xFF].append(element)
    return [element for bucket in buckets for element in bucket]


class RadixMap:
    """Fixed-capacity map holding at most ``max - 1`` elements sorted by key."""

    def __init__(self, max: int) -> None:
        if max < 0:
            raise RadixMapError(f"capacity can't be negative: {max}")
        self.max = max
        self._contents: list[Element] = []

    def __len__(self) -> int:
        return len(self._contents)

    def __iter__(self) -> Iterator[Element]:
        return iter(list(self._contents))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(max={self.max}, contents={self._contents!r})"

    @property
    def contents(self) -> list[Element]:
        """The stored elements in their current order."""
        return list(self._contents)

    def sort(self) -> None:
        """Sort the elements by key; elements with equal keys keep their order."""
        elements = self._contents
        for offset in range(_KEY_BYTES):
            elements = _radix_pass(elements, offset)
        self._contents = elements

    def find(self, key: int) -> Element | None:
        """Return an element with ``key`` by binary search, or None."""
        position = bisect_left(self._contents, key, key=lambda element: element.key)
        if position < len(self._contents) and self._contents[position].key == key:
            return self._contents[position]
        return None

    def add(self, key: int, value: int) -> None:
        """Insert a key/value pair and re-sort the map."""
        if not 0 <= key < UINT32_MAX:
            raise RadixMapError("key must be below UINT32_MAX and not negative")
        if not 0 <= value <= UINT32_MAX:
            raise RadixMapError("value must fit in 32 bits")
        if len(self._contents) + 1 >= self.max:
            raise RadixMapError("RadixMap is full")
        self._contents.append(Element(key, value))
        self.sort()

    def delete(self, element: Element) -> None:
        """Remove ``element``, which must be one returned by :meth:`find`."""
        if not self._contents:
            raise RadixMapError("there is nothing there to delete")
        if element is None:
            raise RadixMapError("can't delete a None element")
        if not any(stored is element for stored in self._contents):
            raise RadixMapError("element is not in this map")
        element.key = UINT32_MAX
        if len(self._contents) > 1:
            self.sort()
        self._contents.pop()