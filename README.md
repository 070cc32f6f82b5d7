# dsakit

Classic data structures and algorithms in plain Python, with no third-party
dependencies. Everything is a library: import the module you need and call it.

## Installation

```
pip install dsakit
```

To run the tests:

```
pip install "dsakit[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `dsakit.graphs` | adjacency lists of undirected graphs: `add_edge`, `build_adjacency_list`, `format_adjacency_list`, `bfs`, `bfs_all`, `dfs`, `dfs_all` |
| `dsakit.adjacency_matrix` | `AdjacencyMatrix` (add and remove edges and vertices, `rows`, `format`, `len`) and `build_adjacency_matrix` |
| `dsakit.sorting` | `insertion_sort`, `merge_sort`, `quick_sort`, `bucket_sort`; each returns a new list |
| `dsakit.searching` | `binary_search`, `max_element` |
| `dsakit.arith` | `fibonacci`, `bitwise_operations` |
| `dsakit.binary_tree` | `Node`; traversals `inorder`, `preorder`, `postorder`, `level_order`; level-order `insert`, `delete`; `contains` |
| `dsakit.bst` | binary search tree `insert`, `delete`, `successor`, on the same `Node` |
| `dsakit.heap` | `MaxHeap`, a max-priority queue with a fixed capacity (100 by default) |
| `dsakit.queues` | `CircularQueue`, a fixed-capacity FIFO ring buffer |
| `dsakit.stacks` | `QueueStack`, a stack kept in a queue, and `LinkedStack`, a stack of linked nodes |
| `dsakit.linked_list` | `SinglyLinkedList`, with 1-based positional insert and delete and in-place `reverse` |
| `dsakit.doubly_linked_list` | `DoublyLinkedList`, iterable forwards and with `reversed()` |
| `dsakit.hashing` | `HashMap`, using separate chaining over a fixed number of buckets (1000 by default), and `HashSet` |

## Examples

Graph traversal:

```python
from dsakit.graphs import build_adjacency_list, bfs, dfs_all, format_adjacency_list

adj = build_adjacency_list(5, [(0, 1), (0, 2), (1, 3), (1, 4), (2, 4)])
bfs(adj, 0)                    # [0, 1, 2, 3, 4]

adj = build_adjacency_list(6, [(1, 2), (2, 0), (0, 3), (4, 5)])
dfs_all(adj)                   # [0, 2, 1, 3, 4, 5]

print(format_adjacency_list(build_adjacency_list(3, [(0, 1), (0, 2), (1, 2)])))
```

Sorting and searching:

```python
from dsakit.sorting import merge_sort, bucket_sort
from dsakit.searching import binary_search

merge_sort([12, 11, 13, 5, 6, 7])      # [5, 6, 7, 11, 12, 13]
bucket_sort([0.897, 0.565, 0.1234])    # values must lie in [0, 1)
binary_search([1, 3, 5, 7, 9], 7)      # 3
binary_search([1, 3, 5, 7, 9], 10)     # None
```

Numbers and bits:

```python
from dsakit.arith import fibonacci, bitwise_operations

fibonacci(6)                  # [0, 1, 1, 2, 3, 5]
bitwise_operations(5, 9)      # {'a&b': 1, 'a|b': 13, 'a^b': 12, '~a': 4294967290, 'b<<1': 18, 'b>>1': 4}
```

A priority queue:

```python
from dsakit.heap import MaxHeap

heap = MaxHeap(100)
for p in (45, 20, 14, 12, 31, 7, 11, 13, 7):
    heap.insert(p)
heap.peek()           # 45
heap.extract_max()    # 45
```

Trees:

```python
from dsakit import binary_tree, bst

root = None
for key in (50, 30, 20, 40, 70, 60, 80):
    root = bst.insert(root, key)
binary_tree.inorder(root)     # [20, 30, 40, 50, 60, 70, 80]
root = bst.delete(root, 70)
```

Linked lists and hashing:

```python
from dsakit.linked_list import SinglyLinkedList
from dsakit.hashing import HashMap

items = SinglyLinkedList([5, 6, 7])
items.insert_at(2, 11)        # 5, 11, 6, 7
items.reverse()
list(items)                   # [7, 6, 11, 5]

table = HashMap()
table.put(1, 1)
table.get(3, -1)              # -1
```

## Errors

Operations that cannot proceed raise an exception rather than printing a
message:

- popping or peeking an empty stack, queue, heap or linked list raises
  `IndexError`, as do vertices, positions or heap indexes out of range;
- inserting into a full `MaxHeap` or enqueueing into a full `CircularQueue`
  raises `OverflowError`;
- `binary_tree.delete` raises `KeyError` when the key is not in the tree,
  while `bst.delete` leaves the tree unchanged;
- `fibonacci` with fewer than one term, `bucket_sort` with a value outside
  [0, 1), and an edge from a vertex to itself in `AdjacencyMatrix` raise
  `ValueError`.

## What it does not do

dsakit has no command-line program and keeps everything in memory; nothing is
read from or written to disk. The structures are not thread-safe.