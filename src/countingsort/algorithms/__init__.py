"""
Benchmarkable sorting algorithms.

Every module here exposes the same callable, which the experiment runner
resolves by name (`countingsort.algorithms.<name>`):

    sort(a: list[int], *, config: dict | None = None) -> list[int]

Modules:
    counting_sort    this package's counting sort
    builtin_timsort  Python's built-in `sorted()`, the comparison baseline
"""

ALGORITHMS = ("counting_sort", "builtin_timsort")

__all__ = ["ALGORITHMS"]
