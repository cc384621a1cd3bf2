# simple_algorithms

A collection of small, self-contained solutions to classic data-structure
problems. Each one is usable as a Python function or class, and most are
also a command-line tool that reads its problem input from standard input
and writes the answer to standard output.

The package has no dependencies beyond the Python standard library and
needs Python 3.10 or later.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | What it solves | Command |
| --- | --- | --- |
| `brackets` | position of the first unmatched bracket, or `Success` | `sa-brackets` |
| `tree_height` | height of a tree given as a parent array | `sa-tree-height` |
| `network_packets` | start times of packets in a bounded buffer (`-1` when dropped) | `sa-network-packets` |
| `max_stack` | stack answering `max` queries (`MaxStack`) | `sa-max-stack` |
| `sliding_window` | maximum of every window of fixed width (`WindowMaxQueue`) | `sa-sliding-window` |
| `heap_builder` | swaps that turn an array into a min-heap | `sa-heap-builder` |
| `parallel_processing` | which processor starts each job, and when | `sa-parallel-processing` |
| `disjoint_set` | union–find with path compression and per-set ranks that add up on union (`DisjointSet`) | — |
| `table_merging` | largest table size after each merge | `sa-table-merging` |
| `equality_check` | whether equalities and inequalities between variables can hold together | `sa-equality-check` |
| `phone_book` | `add` / `del` / `find` on phone numbers below 10 000 000 (`PhoneBook`) | `sa-phone-book` |
| `hash_chains` | hash table of strings with chaining and `check` of a bucket (`HashChains`) | `sa-hash-chains` |
| `rabin_karp` | every occurrence of a pattern in a text | `sa-rabin-karp` |
| `tree_traversal` | in-, pre- and post-order of a binary tree (`TreeNode`) | `sa-tree-traversal` |
| `bst_check` | whether a binary tree is a search tree | `sa-bst-check` |
| `avl_sum_tree` | balanced tree with insert, remove, find and range sum (`AvlSumTree`) | `sa-avl-sum-tree` |

## Using the commands

Every command reads the whole problem from standard input, split on
whitespace. For example:

```
echo "foo(bar[i);" | sa-brackets
```

prints `10`, the 1-based position of the first bracket that cannot be
matched. A balanced line prints `Success`.

```
printf '5\n-1 0 4 0 3\n' | sa-tree-height
```

prints `4`.

```
printf 'aba\nabacaba\n' | sa-rabin-karp
```

prints `0 4`, the positions where the pattern occurs.

Some commands have details worth knowing:

- `sa-bst-check` prints `CORRECT` or `INCORRECT`. With `--duplicates`,
  equal values are allowed, but must appear in order of their node indices.
- `sa-equality-check` prints `1` and exits with status 0 when the
  constraints can all hold, and prints `0` and exits with status 1 when
  they cannot.
- `sa-tree-traversal` and `sa-bst-check` take a node count followed by
  `value left right` triples; `-1` means no child, and node 0 is the root.
- `sa-avl-sum-tree` takes a count of queries followed by queries of the
  form `+ i`, `- i`, `? i` and `s l r`. Arguments are shifted by the result
  of the last `s` query before use, modulo 1 000 000 001 (see `mix`).

## Using the library

```python
from simple_algorithms.tree_height import tree_height
from simple_algorithms.sliding_window import sliding_window_maxima
from simple_algorithms.rabin_karp import rabin_karp_search
from simple_algorithms.brackets import check_brackets
from simple_algorithms.heap_builder import build_heap
from simple_algorithms.parallel_processing import schedule
from simple_algorithms.avl_sum_tree import AvlSumTree

tree_height([-1, 0, 4, 0, 3])                          # 4
sliding_window_maxima([2, 7, 3, 1, 5, 2, 6, 2], 4)     # [7, 7, 5, 6, 6]
rabin_karp_search("abacaba", "aba")                    # [0, 4]
check_brackets("([])")                                 # None (balanced)

values = [5, 4, 3, 2, 1]
swaps = build_heap(values)                             # list of (i, j) swaps; values is now a min-heap

schedule(2, [1, 2, 3, 4, 5])                           # [(processor, start time), ...]

tree = AvlSumTree([100, 98, 101, 102, 50, 99])
tree.sum(51, 101)                                      # 398
tree.find(50)                                          # True
list(tree)                                             # values in ascending order
tree.check_invariants()                                # tree height; ValueError if inconsistent
```

Errors are raised rather than reported: popping an empty `MaxStack` raises
`IndexError`, as do out-of-range items in `DisjointSet`, numbers outside
the `PhoneBook` range and bucket numbers outside a `HashChains` table;
`schedule` raises `ValueError` when jobs are given but no processors.

## Limits

- `MaxStack.max()` returns `0` for an empty stack, and `WindowMaxQueue`
  combines the maxima of two such stacks, so window maxima are meant for
  non-negative values.
- `AvlSumTree` holds distinct values only; inserting a present value does
  nothing.
- Everything is kept in memory; nothing is stored between runs.