"""
Counting sort behind the uniform benchmark signature.

Config keys (all optional):
    bounds     [min_int, max_int]  inclusive; use sort_with_bounds and skip the scan
    max_range  int >= 1            refuse ranges above this (see SortConfig)
    index_max  int >= 1            largest addressable index (see SortConfig)
    fallback   bool, default True  on RangeTooLarge, fall back to sorted()

Degenerate inputs a caller of a plain sort routine would not expect to fail
(empty input, a single distinct value) return a copy of the input instead of
raising. Equal `bounds` are only accepted when every element equals them.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from countingsort.core import (
    IndexOutOfBounds,
    IteratorEmpty,
    RangeTooLarge,
    SortingUnnecessary,
    sort as counting_sort,
    sort_with_bounds,
)

__all__ = ["sort"]

_ADAPTER_KEYS = {"bounds", "fallback"}


def sort(a: List[int], *, config: Optional[Dict[str, Any]] = None) -> List[int]:
    config = dict(config or {})
    bounds = _parse_bounds(config.get("bounds"))
    fallback = bool(config.get("fallback", True))
    sort_config = {k: v for k, v in config.items() if k not in _ADAPTER_KEYS}

    try:
        if bounds is None:
            return counting_sort(a, config=sort_config)
        return sort_with_bounds(a, bounds[0], bounds[1], config=sort_config)
    except IteratorEmpty:
        return list(a)
    except SortingUnnecessary as e:
        # Equal declared bounds say nothing about the data itself.
        if bounds is not None and any(x != bounds[0] for x in a):
            raise IndexOutOfBounds(
                f"bounds {list(bounds)} do not cover the input"
            ) from e
        return list(a)
    except RangeTooLarge:
        if not fallback:
            raise
        return sorted(a)


def _parse_bounds(raw: Any) -> Optional[Tuple[int, int]]:
    if raw is None:
        return None
    if not isinstance(raw, (list, tuple)) or len(raw) != 2:
        raise ValueError("counting_sort.config.bounds must be a 2-element list [min, max]")
    lo, hi = raw
    if isinstance(lo, bool) or isinstance(hi, bool) or not isinstance(lo, int) or not isinstance(hi, int):
        raise ValueError("counting_sort.config.bounds values must be integers")
    return lo, hi
