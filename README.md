# datakit

A small collection of classic data structures and algorithms in pure Python,
with no third-party dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `datakit.linked_list` | `LinkedList`, a doubly linked list built from `ListNode`s |
| `datakit.list_algos` | `bubble_sort` (in place) and `merge_sort` (returns a new list), driven by a three-way comparison function |
| `datakit.queue` | `Queue`, a FIFO queue with `send`, `recv`, `peek` and `clear` |
| `datakit.stack` | `Stack`, a LIFO stack with `push`, `pop`, `peek` and `clear` |
| `datakit.radixmap` | `RadixMap`, a fixed-capacity map of 32-bit keys kept sorted by radix sort, holding `Element`s |
| `datakit.ringbuffer` | `RingBuffer`, a fixed-size byte buffer |
| `datakit.stats` | `Stats`, running sum, sum of squares, count, min and max, with `mean`, `stddev` and `dump` |
| `datakit.suffix_array` | `SuffixArray`, sorted suffixes of a `bytes` or `str` with binary search |
| `datakit.string_algos` | `find` and `StringScanner`, Boyer-Moore-Horspool substring search |
| `datakit.tstree` | `TSTree`, a ternary search tree with exact and prefix lookup |

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Examples

Linked list:

```python
from datakit.linked_list import LinkedList

items = LinkedList()
items.push("a")
items.push("b")
items.unshift("z")
items.first()     # "z"
items.pop()       # "b"
left, right = LinkedList([1, 2, 3, 4]).split(1)   # [1, 2] and [3, 4]
```

Sorting with a comparison function that returns a negative, zero or
positive number:

```python
from datakit.linked_list import LinkedList
from datakit.list_algos import bubble_sort, merge_sort

def compare(a, b):
    return (a > b) - (a < b)

words = LinkedList(["XXXX", "1234", "abcd"])
ordered = merge_sort(words, compare)   # a new sorted LinkedList
bubble_sort(words, compare)            # sorts words in place
```

Queue and stack:

```python
from datakit.queue import Queue
from datakit.stack import Stack

queue = Queue()
queue.send("first")
queue.send("second")
queue.recv()      # "first"

stack = Stack()
stack.push("first")
stack.push("second")
stack.pop()       # "second"
```

Radix map:

```python
from datakit.radixmap import RadixMap

table = RadixMap(10)      # holds at most 9 elements
table.add(42, 7)
table.add(3, 1)
element = table.find(42)  # Element(key=42, value=7)
table.delete(element)
```

Ring buffer:

```python
from datakit.ringbuffer import RingBuffer

buffer = RingBuffer(100)
buffer.write(b"Hello Again")
buffer.gets(2)        # b"He"
buffer.get_all()      # b"llo Again"
```

Running statistics:

```python
from datakit.stats import Stats

stats = Stats()
for value in (1.0, 2.0, 3.0):
    stats.sample(value)
stats.mean()          # 2.0
stats.stddev()        # 1.0
stats.dump()          # one-line summary on standard error
```

Suffix array:

```python
from datakit.suffix_array import SuffixArray

suffixes = SuffixArray(b"abracadabra")
suffixes.find_suffix(b"acadabra")   # position in the sorted order, or -1
```

String search:

```python
from datakit.string_algos import find, StringScanner

text = b"I have ALPHA beta ALPHA and oranges ALPHA"
find(text, b"ALPHA")              # 7
scanner = StringScanner(text)
scanner.scan(b"ALPHA")            # 7, then the next match on each call,
                                  # then -1 and the scanner starts over
```

Ternary search tree:

```python
from datakit.tstree import TSTree

tree = TSTree()
tree.insert("TEST", "value A")
tree.insert("T", "value 4")
tree.search("TEST")               # "value A"
tree.search_prefix("T")           # "value 4"
list(tree.values())               # every stored value
```

## Errors

A full or misused radix map raises `RadixMapError`; a ring buffer without
enough room or data raises `RingBufferError`. Removing from an empty
`LinkedList` with `remove` raises `IndexError`, and `split` with an index
out of range raises `IndexError`. Inserting a key twice into a `TSTree`
raises `KeyError`. `pop`, `shift`, `recv` and `peek` on an empty container
return `None`.

## What it does not do

There is no hash map, binary search tree, dynamic array or graph type in
this package, and nothing is stored on disk: every structure lives in
memory only. There is no command-line tool.