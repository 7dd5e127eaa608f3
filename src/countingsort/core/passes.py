"""
The individual passes of counting sort.

    scan_min_max     one forward pass, (min, max) or None
    build_histogram  counts per index, with a leading sentinel slot
    prefix_sum       counts -> placement cursors, in place
    place            forward, stable placement into a fresh output list

Histogram layout for `range = index(max_value, min_value)`:

    slot:   0          1        2        ...   range + 1
    holds:  sentinel   #idx 0   #idx 1   ...   #idx range

After `prefix_sum`, slot `i` holds the number of elements whose index is
strictly smaller than `i`, which is exactly the first free output position for
an element with index `i`. `place` therefore walks the input front to back and
increments the cursor after each write, which keeps equal elements in input
order without a reverse pass.

These functions raise `IndexConversionError` unchanged; translating it into
the public error taxonomy is left to `countingsort.core.sort`.
"""

from __future__ import annotations

from typing import Any, Iterable, List, MutableSequence, Optional, Tuple

import numpy as np

from .config import DEFAULT_INDEX_MAX
from .errors import IndexOutOfBounds
from .index import IndexMapping

__all__ = ["scan_min_max", "build_histogram", "prefix_sum", "place"]


def scan_min_max(values: Iterable[Any]) -> Optional[Tuple[Any, Any]]:
    """Return (min, max) of `values` in a single pass, or None if empty."""
    it = iter(values)
    try:
        first = next(it)
    except StopIteration:
        return None
    lo = hi = first
    for v in it:
        if v < lo:
            lo = v
        elif v > hi:
            hi = v
    return lo, hi


def build_histogram(
    values: Iterable[Any],
    min_value: Any,
    max_value: Any,
    mapping: IndexMapping,
    index_max: int = DEFAULT_INDEX_MAX,
) -> np.ndarray:
    """
    Count occurrences of each index in [0, range] into `range + 2` slots.

    Raises
    ------
    IndexOutOfBounds
        If an element maps past `max_value`, i.e. the declared bounds do not
        cover the data.
    IndexConversionError
        If the range or an element cannot be converted to an index.
    MemoryError
        If the histogram cannot be allocated.
    """
    value_range = mapping.try_into_index(max_value, min_value, index_max)
    try:
        histogram = np.zeros(value_range + 2, dtype=np.intp)
    except ValueError as e:
        # numpy refuses sizes whose byte count overflows before trying to allocate
        raise MemoryError(f"cannot allocate a histogram of {value_range + 2} slots") from e
    n_slots = histogram.shape[0]

    for v in values:
        slot = mapping.try_into_index(v, min_value, index_max) + 1
        if slot >= n_slots:
            raise IndexOutOfBounds(
                f"{v!r} is larger than max_value {max_value!r}"
            )
        histogram[slot] += 1
    return histogram


def prefix_sum(histogram: MutableSequence[int]) -> None:
    """Replace every slot after the first with the running total, in place."""
    if isinstance(histogram, np.ndarray):
        np.cumsum(histogram, out=histogram)
        return
    total = 0
    for i, count in enumerate(histogram):
        total += count
        histogram[i] = total


def place(
    values: Iterable[Any],
    histogram: MutableSequence[int],
    output_length: int,
    min_value: Any,
    mapping: IndexMapping,
    index_max: int = DEFAULT_INDEX_MAX,
) -> List[Any]:
    """
    Write each element of `values` to its final position, consuming the
    cursors in `histogram`.

    Raises `IndexOutOfBounds` if an element's index or its destination falls
    outside the histogram or the output.
    """
    out: List[Any] = [min_value] * output_length
    n_slots = len(histogram)

    for v in values:
        idx = mapping.try_into_index(v, min_value, index_max)
        if idx >= n_slots:
            raise IndexOutOfBounds(
                f"index {idx} of {v!r} is outside the histogram ({n_slots} slots)"
            )
        dest = int(histogram[idx])
        if dest >= output_length:
            raise IndexOutOfBounds(
                f"destination {dest} of {v!r} is outside the output ({output_length} slots)"
            )
        out[dest] = v
        histogram[idx] = dest + 1
    return out
