"""Sorting algorithms for :class:`~datakit.linked_list.LinkedList`."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from datakit.linked_list import LinkedList

Compare = Callable[[Any, Any], int]


def bubble_sort(items: LinkedList, cmp: Compare) -> None:
    """Sort ``items`` in place by swapping adjacent values."""
    if len(items) <= 1:
        return
    swapped = True
    while swapped:
        swapped = False
        for node in items.nodes():
            following = node.next
            if following is not None and cmp(node.value, following.value) > 0:
                node.value, following.value = following.value, node.value
                swapped = True


def _merge(left: LinkedList, right: LinkedList, cmp: Compare) -> LinkedList:
    result = LinkedList()
    while left and right:
        if cmp(left.first(), right.first()) <= 0:
            result.push(left.shift())
        else:
            result.push(right.shift())
    while left:
        result.push(left.shift())
    while right:
        result.push(right.shift())
    return result


def merge_sort(items: LinkedList, cmp: Compare) -> LinkedList:
    """Return a sorted list; a list of one item or none is returned as is.

    The sort is stable and leaves a longer input unchanged.
    """
    if len(items) <= 1:
        return items
    middle = len(items) // 2
    left, right = LinkedList(), LinkedList()
    for position, value in enumerate(items):
        (left if position < middle else right).push(value)
    sorted_left = merge_sort(left, cmp)
    sorted_right = merge_sort(right, cmp)
    return _merge(sorted_left, sorted_right, cmp)