"""Utility toolkit of containers, a directed graph, permutations, timing, string and filesystem helpers."""

__version__ = "0.1.0"

__all__ = [
    "bitarray",
    "llist",
    "dllist",
    "stack",
    "queue_list",
    "permutations",
    "timing",
    "stringlib",
    "graph",
    "fsutils",
    "fileobjects",
]