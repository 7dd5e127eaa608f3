"""
Public counting-sort entry points.

    sort(values)                               bounds discovered by a scan
    sort_with_bounds(values, min_value, max_value)   bounds given by the caller

Both return a new sequence and never touch their input. A call either
returns the complete sorted result or raises a `CountingSortError`; there is
no partial output.

Memory use is O(n + d) with d = index(max_value, min_value): the histogram is
sized by the value range, not by the element count. Use
`SortConfig(max_range=...)` to refuse ranges above a ceiling instead of
attempting the allocation.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterator, Sized
from typing import Any, Iterable, Mapping, Optional, Union

import numpy as np

from .config import SortConfig, resolve_config
from .errors import (
    ConversionFailed,
    CountingSortError,
    IndexConversionError,
    IndexOutOfBounds,
    IteratorEmpty,
    MinValueLargerThanMaxValue,
    RangeTooLarge,
    SortingUnnecessary,
)
from .index import IndexMapping, resolve_index_mapping
from .passes import build_histogram, place, prefix_sum, scan_min_max

__all__ = ["Stage", "sort", "sort_with_bounds"]

logger = logging.getLogger(__name__)

ConfigArg = Union[SortConfig, Mapping[str, Any], None]


class Stage(enum.Enum):
    START = "start"
    BOUNDS_VALIDATED = "bounds_validated"
    COUNTED = "counted"
    PREFIX_SUMMED = "prefix_summed"
    PLACED = "placed"


def sort(
    values: Iterable[Any],
    *,
    mapping: Optional[IndexMapping] = None,
    config: ConfigArg = None,
) -> Any:
    """
    Counting-sort `values`, discovering min and max with one extra pass.

    Parameters
    ----------
    values : iterable
        Elements to sort. One-shot iterators are materialized into a list
        first since the algorithm needs several passes.
    mapping : IndexMapping, optional
        Index strategy; resolved from the element type when omitted.
    config : SortConfig | dict | None
        See `countingsort.core.config`.

    Returns
    -------
    list, or numpy.ndarray of the input dtype if `values` is an ndarray.

    Raises
    ------
    IteratorEmpty
        If `values` has no elements.
    CountingSortError
        Any error of `sort_with_bounds`.
    """
    cfg = resolve_config(config)
    data = _materialize(values)
    bounds = scan_min_max(data)
    if bounds is None:
        raise IteratorEmpty()
    min_value, max_value = bounds
    return sort_with_bounds(data, min_value, max_value, mapping=mapping, config=cfg)


def sort_with_bounds(
    values: Iterable[Any],
    min_value: Any,
    max_value: Any,
    *,
    mapping: Optional[IndexMapping] = None,
    config: ConfigArg = None,
) -> Any:
    """
    Counting-sort `values` whose elements all lie in [min_value, max_value].

    The bounds are trusted for sizing but verified per element: data outside
    them raises `IndexOutOfBounds` rather than being truncated.

    Raises
    ------
    MinValueLargerThanMaxValue
        If `min_value > max_value`.
    SortingUnnecessary
        If `min_value == max_value`, regardless of the input length.
    IndexOutOfBounds
        If an element lies outside the bounds.
    ConversionFailed
        If the range or an element does not convert to an index.
    RangeTooLarge
        If the range exceeds `config.max_range`.
    """
    cfg = resolve_config(config)
    data = _materialize(values)
    if mapping is None:
        mapping = resolve_index_mapping(data if isinstance(data, np.ndarray) else min_value)

    stage = Stage.START
    try:
        if min_value > max_value:
            raise MinValueLargerThanMaxValue(
                f"Given min_value {min_value!r} is larger than max_value {max_value!r}"
            )
        if min_value == max_value:
            raise SortingUnnecessary()

        value_range = _value_range(mapping, min_value, max_value, cfg)
        stage = _advance(stage, Stage.BOUNDS_VALIDATED, value_range=value_range)

        histogram = _translated(
            build_histogram, data, min_value, max_value, mapping, cfg.index_max
        )
        stage = _advance(stage, Stage.COUNTED, slots=histogram.shape[0])

        prefix_sum(histogram)
        output_length = int(histogram[-1])
        stage = _advance(stage, Stage.PREFIX_SUMMED, n=output_length)

        out = _translated(
            place, data, histogram, output_length, min_value, mapping, cfg.index_max
        )
        stage = _advance(stage, Stage.PLACED)
    except CountingSortError as e:
        logger.debug("counting sort failed after stage %s: %s", stage.value, e.kind.value)
        raise

    if isinstance(data, np.ndarray):
        return np.array(out, dtype=data.dtype)
    return out


# ------------------------- helpers ------------------------- #


def _materialize(values: Iterable[Any]) -> Any:
    if isinstance(values, np.ndarray):
        if values.ndim != 1:
            raise ValueError(f"expected a 1-D array; got shape {values.shape}")
        return values
    if isinstance(values, Iterator) or not isinstance(values, Sized):
        return list(values)
    return values


def _value_range(
    mapping: IndexMapping, min_value: Any, max_value: Any, cfg: SortConfig
) -> int:
    value_range = _translated(mapping.try_into_index, max_value, min_value, cfg.index_max)
    # The histogram needs value_range + 2 addressable slots.
    if value_range > cfg.index_max - 2:
        raise ConversionFailed(
            f"Out of range integral type conversion attempted: histogram of "
            f"{value_range} + 2 slots exceeds index capacity {cfg.index_max}"
        )
    if cfg.max_range is not None and value_range > cfg.max_range:
        raise RangeTooLarge(
            f"Value range {value_range} exceeds the configured max_range {cfg.max_range}"
        )
    return value_range


def _translated(fn: Any, *args: Any) -> Any:
    """Call `fn`, mapping low-level index failures to the public error classes."""
    try:
        return fn(*args)
    except IndexConversionError as e:
        if e.below_min:
            raise IndexOutOfBounds(
                f"{e.value!r} is smaller than min_value {e.min_value!r}"
            ) from e
        raise ConversionFailed(
            f"Out of range integral type conversion attempted: {e.reason}"
        ) from e


def _advance(current: Stage, nxt: Stage, **info: Any) -> Stage:
    logger.debug("counting sort %s -> %s %s", current.value, nxt.value, info or "")
    return nxt
