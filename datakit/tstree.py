"""Ternary search tree mapping string keys to values."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

_MISSING = object()


@dataclass(eq=False)
class _Node:
    splitchar: Any
    low: Optional[_Node] = None
    equal: Optional[_Node] = None
    high: Optional[_Node] = None
    value: Any = _MISSING

    @property
    def has_value(self) -> bool:
        return self.value is not _MISSING


class TSTree:
    """Ternary search tree with exact and prefix lookup."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.values())!r})"

    def insert(self, key: Any, value: Any) -> None:
        """Store ``value`` under ``key``; a key may only be inserted once."""
        if not key:
            raise ValueError("key can't be empty")
        if self._root is None:
            self._root = _Node(key[0])
        node = self._root
        i = 0
        while True:
            ch = key[i]
            if ch < node.splitchar:
                if node.low is None:
                    node.low = _Node(ch)
                node = node.low
            elif ch == node.splitchar:
                if i + 1 < len(key):
                    i += 1
                    if node.equal is None:
                        node.equal = _Node(key[i])
                    node = node.equal
                else:
                    if node.has_value:
                        raise KeyError(f"duplicate key: {key!r}")
                    node.value = value
                    return
            else:
                if node.high is None:
                    node.high = _Node(ch)
                node = node.high

    def search(self, key: Any) -> Any:
        """Value stored under exactly ``key``, or None."""
        node = self._root
        i = 0
        while i < len(key) and node is not None:
            if key[i] < node.splitchar:
                node = node.low
            elif key[i] == node.splitchar:
                i += 1
                if i < len(key):
                    node = node.equal
            else:
                node = node.high
        if node is not None and node.has_value:
            return node.value
        return None

    def search_prefix(self, key: Any) -> Any:
        """A value whose key starts with ``key`` (or is its longest stored prefix), or None."""
        if not key:
            return None
        node = self._root
        last: Optional[_Node] = None
        i = 0
        while i < len(key) and node is not None:
            if key[i] < node.splitchar:
                node = node.low
            elif key[i] == node.splitchar:
                i += 1
                if i < len(key):
                    if node.has_value:
                        last = node
                    node = node.equal
            else:
                node = node.high

        if node is None:
            node = last
        while node is not None and not node.has_value:
            node = node.equal
        return node.value if node is not None else None

    def values(self) -> Iterator[Any]:
        """Yield every stored value: low, equal and high subtrees, then the node."""
        yield from self._walk(self._root)

    def _walk(self, node: Optional[_Node]) -> Iterator[Any]:
        if node is None:
            return
        yield from self._walk(node.low)
        yield from self._walk(node.equal)
        yield from self._walk(node.high)
        if node.has_value:
            yield node.value

    def traverse(self, callback: Callable[[Any, Any], Any], data: Any = None) -> None:
        """Call ``callback(value, data)`` for every stored value."""
        for value in self.values():
            callback(value, data)