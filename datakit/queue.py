"""First-in first-out queue built on a linked list."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from datakit.linked_list import LinkedList


class Queue:
    """Queue: values are sent in at the front and received from the back."""

    def __init__(self) -> None:
        self._items = LinkedList()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Yield values in the order they will be received."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def send(self, value: Any) -> None:
        """Add a value to the queue."""
        self._items.unshift(value)

    def recv(self) -> Any:
        """Remove and return the oldest value, or None when empty."""
        return self._items.pop()

    def peek(self) -> Any:
        """Return the oldest value without removing it, or None when empty."""
        return self._items.last()

    def clear(self) -> None:
        """Drop every value."""
        self._items.clear()