"""
Property helpers for validating sorting results.

Public API (stable):
    is_nondecreasing(xs) -> bool
    first_nondecreasing_violation_index(xs) -> int | None
    is_permutation(a, b) -> bool
    permutation_counter_diff(a, b) -> dict
    is_stable(records, out, key) -> bool
    assert_no_mutation(before, after) -> None

Stability cannot be read off bare values, so `is_stable` works on tagged
records: `out` is stable iff, for every key, the records carrying that key
appear in `out` in the same relative order as in `records`.
"""

from __future__ import annotations

from collections import Counter, defaultdict
from typing import Any, Callable, Dict, List, Sequence

__all__ = [
    "is_nondecreasing",
    "first_nondecreasing_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "is_stable",
    "assert_no_mutation",
]


def is_nondecreasing(xs: Sequence[Any]) -> bool:
    """Return True iff xs[i] <= xs[i+1] for all i."""
    return first_nondecreasing_violation_index(xs) is None


def first_nondecreasing_violation_index(xs: Sequence[Any]) -> int | None:
    """
    Return the first index i where xs[i] > xs[i+1], or None if nondecreasing.

    Useful for precise error messages:
        i = first_nondecreasing_violation_index(out)
        assert i is None, f"not nondecreasing at i={i}: {out[i]} > {out[i+1]}"
    """
    for i in range(len(xs) - 1):
        if xs[i] > xs[i + 1]:
            return i
    return None


def is_permutation(a: Sequence[Any], b: Sequence[Any]) -> bool:
    """Return True iff `a` and `b` contain exactly the same multiset of values."""
    if len(a) != len(b):
        return False
    return Counter(_plain(a)) == Counter(_plain(b))


def permutation_counter_diff(a: Sequence[Any], b: Sequence[Any]) -> Dict[Any, int]:
    """
    Return value -> (count in a - count in b), omitting zero differences.
    """
    ca = Counter(_plain(a))
    cb = Counter(_plain(b))
    diff: Dict[Any, int] = {}
    for k in set(ca) | set(cb):
        d = ca.get(k, 0) - cb.get(k, 0)
        if d != 0:
            diff[k] = d
    return diff


def is_stable(
    records: Sequence[Any], out: Sequence[Any], key: Callable[[Any], Any]
) -> bool:
    """True iff equal-key records keep their input order in `out`."""
    if len(records) != len(out):
        return False
    before: Dict[Any, List[Any]] = defaultdict(list)
    after: Dict[Any, List[Any]] = defaultdict(list)
    for r in records:
        before[key(r)].append(r)
    for r in out:
        after[key(r)].append(r)
    return before == after


def assert_no_mutation(before: Sequence[Any], after: Sequence[Any]) -> None:
    """
    Assert that two sequences are element-wise equal, used to ensure a sort
    did not mutate its input in place.

    Raises AssertionError naming the first differing index.
    """
    if len(before) != len(after):
        raise AssertionError(
            f"Input mutated: length changed from {len(before)} to {len(after)}"
        )
    for i, (x, y) in enumerate(zip(before, after)):
        if x != y:
            raise AssertionError(f"Input mutated at index {i}: before={x}, after={y}")


def _plain(xs: Sequence[Any]) -> List[Any]:
    # numpy scalars hash like ints, but .tolist() keeps Counter keys uniform
    tolist = getattr(xs, "tolist", None)
    return tolist() if callable(tolist) else list(xs)
