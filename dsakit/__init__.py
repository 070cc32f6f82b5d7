"""Classic data structures and algorithms: graphs, sorting, searching, trees, heaps, queues, stacks, linked lists and hashing."""

__version__ = "0.1.0"

__all__ = [
    "adjacency_matrix",
    "arith",
    "binary_tree",
    "bst",
    "doubly_linked_list",
    "graphs",
    "hashing",
    "heap",
    "linked_list",
    "queues",
    "searching",
    "sorting",
    "stacks",
]