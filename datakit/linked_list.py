"""A doubly linked list that keeps its own element count."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class ListNode:
    """One link of a :class:`LinkedList`, holding a value."""

    value: Any
    next: ListNode | None = field(default=None, repr=False)
    prev: ListNode | None = field(default=None, repr=False)


class LinkedList:
    """Doubly linked list with constant-time operations at both ends."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._first: ListNode | None = None
        self._last: ListNode | None = None
        self._count = 0
        self.extend(values)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self.nodes())

    def __reversed__(self) -> Iterator[Any]:
        return (node.value for node in self.reversed_nodes())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def first(self) -> Any:
        """Value at the front, or None when the list is empty."""
        return self._first.value if self._first is not None else None

    def last(self) -> Any:
        """Value at the back, or None when the list is empty."""
        return self._last.value if self._last is not None else None

    def nodes(self) -> Iterator[ListNode]:
        """Yield the nodes from first to last."""
        node = self._first
        while node is not None:
            following = node.next
            yield node
            node = following

    def reversed_nodes(self) -> Iterator[ListNode]:
        """Yield the nodes from last to first."""
        node = self._last
        while node is not None:
            preceding = node.prev
            yield node
            node = preceding

    def push(self, value: Any) -> None:
        """Append a value at the back."""
        node = ListNode(value)
        if self._last is None:
            self._first = self._last = node
        else:
            self._last.next = node
            node.prev = self._last
            self._last = node
        self._count += 1

    def pop(self) -> Any:
        """Remove and return the last value, or None when empty."""
        return self.remove(self._last) if self._last is not None else None

    def unshift(self, value: Any) -> None:
        """Insert a value at the front."""
        node = ListNode(value)
        if self._first is None:
            self._first = self._last = node
        else:
            node.next = self._first
            self._first.prev = node
            self._first = node
        self._count += 1

    def shift(self) -> Any:
        """Remove and return the first value, or None when empty."""
        return self.remove(self._first) if self._first is not None else None

    def remove(self, node: ListNode) -> Any:
        """Unlink ``node`` from the list and return its value."""
        if self._first is None or self._last is None:
            raise IndexError("list is empty")
        if node is None:
            raise ValueError("node can't be None")

        if node is self._first and node is self._last:
            self._first = self._last = None
        elif node is self._first:
            self._first = node.next
            if self._first is None:
                raise RuntimeError("invalid list: first became None")
            self._first.prev = None
        elif node is self._last:
            self._last = node.prev
            if self._last is None:
                raise RuntimeError("invalid list: last became None")
            self._last.next = None
        else:
            after, before = node.next, node.prev
            after.prev = before
            before.next = after

        node.next = node.prev = None
        self._count -= 1
        return node.value

    def copy(self) -> LinkedList:
        """Return a new list holding the same values."""
        return type(self)(self)

    def extend(self, values: Iterable[Any]) -> None:
        """Push every value from ``values`` onto the back."""
        for value in list(values):
            self.push(value)

    def join(self, other: Iterable[Any]) -> LinkedList:
        """Return a new list with this list's values followed by ``other``'s."""
        joined = self.copy()
        joined.extend(other)
        return joined

    def split(self, index: int) -> tuple[LinkedList, LinkedList]:
        """Split into two new lists; the first holds items up to ``index`` inclusive."""
        if not (0 < index < self._count and self._count > 1):
            raise IndexError(f"index out of bounds: {index}")
        left, right = type(self)(), type(self)()
        for position, value in enumerate(self):
            (left if position <= index else right).push(value)
        return left, right

    def clear(self) -> None:
        """Remove every value."""
        for node in self.nodes():
            node.next = node.prev = None
        self._first = self._last = None
        self._count = 0