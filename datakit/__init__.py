"""Classic data structures and algorithms in pure Python: linked lists,
sorting, queues, stacks, radix maps, ring buffers, running statistics,
suffix arrays, substring search and ternary search trees."""

__version__ = "0.1.0"

__all__ = [
    "linked_list",
    "list_algos",
    "queue",
    "stack",
    "radixmap",
    "ringbuffer",
    "stats",
    "suffix_array",
    "string_algos",
    "tstree",
]