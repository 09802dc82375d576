"""Basic data structures and algorithms for teaching: cells, factorials, max search, sorting, linked lists, matrices, dynamic arrays and small helpers."""

__version__ = "0.1.0"

__all__ = [
    "basics",
    "cell",
    "factorial",
    "findmax",
    "linked_list",
    "matrix",
    "sorting",
    "vector",
]