"""Last-in first-out stack built on a linked list."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from datakit.linked_list import LinkedList


class Stack:
    """Stack: values are pushed and popped at the same end."""

    def __init__(self) -> None:
        self._items = LinkedList()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Yield values from the top of the stack down."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def push(self, value: Any) -> None:
        """Put a value on top."""
        self._items.push(value)

    def pop(self) -> Any:
        """Remove and return the top value, or None when empty."""
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it, or None when empty."""
        return self._items.last()

    def clear(self) -> None:
        """Drop every value."""
        self._items.clear()