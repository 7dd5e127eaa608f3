"""
Oracle for counting-sort correctness.

Python's built-in `sorted()` is the ground truth: a correct total order for
integers, deterministic, and stable, so it also serves as the reference for
key-based stable sorting.

Public API (stable):
    oracle_sort(a) -> list
    oracle_sort_by_key(records, key) -> list
    equals_oracle(a, out) -> bool

The oracle never mutates its input and always returns a **new** list.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, List, Sequence, TypeVar

ORACLE_NAME: str = "python_sorted_timsort"

__all__ = ["ORACLE_NAME", "oracle_sort", "oracle_sort_by_key", "equals_oracle"]

T = TypeVar("T")


def oracle_sort(a: Iterable[T]) -> List[T]:
    """Return `a` sorted in nondecreasing order as a new list."""
    return sorted(a)


def oracle_sort_by_key(records: Iterable[T], key: Callable[[T], Any]) -> List[T]:
    """Stable sort of `records` by `key`; equal keys keep their input order."""
    return sorted(records, key=key)


def equals_oracle(a: Sequence[Any], out: Sequence[Any]) -> bool:
    """
    True iff `out` equals `oracle_sort(a)` element-wise.

    `out` may be a list or a 1-D numpy array.
    """
    expected = oracle_sort(a)
    return len(out) == len(expected) and all(x == y for x, y in zip(out, expected))
