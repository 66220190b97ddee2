# cutilkit

A small collection of everyday building blocks, with no dependencies outside
the standard library:

- `cutilkit.bitarray.BitArray` – a fixed-size array of bits with set, clear,
  toggle, check-and-set, reset and a count of set bits. Out-of-range bits
  raise `IndexError`.
- `cutilkit.llist.LinkedList` – a singly linked list with positional
  `insert` and `remove`; iterating yields the stored data.
- `cutilkit.dllist.DoublyLinkedList` – a doubly linked list that also accepts
  negative indices and can be iterated in reverse with `reversed()`.
- `cutilkit.stack.Stack` – a LIFO stack with `push` and `pop`.
- `cutilkit.queue_list.Queue` – a FIFO queue with `push` and `pop`.
  Popping an empty stack or queue raises `IndexError`.
- `cutilkit.graph.Graph` – a directed graph whose `Vertex` and `Edge` objects
  carry arbitrary metadata; ids are handed out in insertion order and never
  reused. It offers `breadth_first_traverse` and `depth_first_traverse`,
  which return the ids of the reachable vertices.
- `cutilkit.permutations.Permutations` – step through every string of a given
  length over an alphabet with `inc`/`add` (wrapping past the last string) and
  `dec`/`sub` (stopping at the first).
- `cutilkit.timing.Timing` – measure elapsed wall-clock time, usable as a
  context manager, and format it as `HH:MM:SS:mmm.uuu`.
- `cutilkit.stringlib` – functions to search (`find`, `find_str`, `find_any`
  and their reverse, counting and n-th occurrence variants), split
  (`split_string_c`, `split_string_str`, `split_string_any`, `split_lines`,
  all dropping empty pieces), trim, collapse whitespace and compare strings.
- `cutilkit.fsutils` – filesystem helpers: `identify_path` (returning a
  `PathType`), `resolve_path`, `combine_filepath`, `touch`, `mkdir`, `rmdir`
  (optionally recursive), `list_dir`, `rename`/`move`, `remove_file`,
  permission getters and setters, and `mode_to_string` / `string_to_mode`.
  Failures raise `OSError` subclasses or `ValueError`.
- `cutilkit.fileobjects` – `FileInfo`, describing a regular file and reading
  its bytes or non-empty lines on demand, and `DirectoryInfo`, a sorted
  listing of a directory split into sub-directories and files.

## Installation

```
pip install cutilkit
```

## Examples

```python
from cutilkit.bitarray import BitArray

bits = BitArray(10)
bits.set_bit(3)
bits.check_bit(3)        # True
str(bits)                # "0001000000"
bits.number_bits_set()   # 1
```

```python
from cutilkit.graph import Graph

g = Graph(16)
a = g.add_vertex("a")
b = g.add_vertex("b")
g.add_edge(a.id, b.id, "a->b")
g.breadth_first_traverse(a)   # [0, 1]
```

```python
from cutilkit.permutations import Permutations

p = Permutations(3, "AB")
str(p)     # "AAA"
p.inc()
str(p)     # "AAB"
```

```python
from cutilkit.timing import Timing

with Timing() as t:
    sum(range(1_000_000))
print(t.format_time_diff())
```

```python
from cutilkit import stringlib

stringlib.single_space("This \t is a \n test!  ")   # "This is a test!"
stringlib.split_string_c("a,,b,c", ",")             # ["a", "b", "c"]
```

## What it does not do

cutilkit is a library only: it installs no command-line program. The
filesystem helpers assume `/` as the path separator and POSIX permission bits.

## Running the tests

Install the `test` extra and run pytest from the project directory:

```
pip install cutilkit[test]
pytest
```