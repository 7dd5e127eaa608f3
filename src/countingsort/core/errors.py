"""
Error taxonomy for counting sort.

Every failure a caller can observe is a subclass of `CountingSortError` and
carries an `ErrorKind` tag in `.kind`, so callers can either catch a specific
class or dispatch on the tag:

    try:
        out = sort_with_bounds(a, 1, 3)
    except CountingSortError as e:
        if e.kind is ErrorKind.INDEX_OUT_OF_BOUNDS:
            ...

`IndexConversionError` is internal to the index layer. The orchestration in
`countingsort.core.sort` is the only place that translates it into the public
classes below.
"""

from __future__ import annotations

import enum
from typing import Any

__all__ = [
    "ErrorKind",
    "CountingSortError",
    "ConversionFailed",
    "IteratorEmpty",
    "SortingUnnecessary",
    "MinValueLargerThanMaxValue",
    "IndexOutOfBounds",
    "RangeTooLarge",
    "IndexConversionError",
]


class ErrorKind(enum.Enum):
    CONVERSION_FAILED = "conversion_failed"
    ITERATOR_EMPTY = "iterator_empty"
    SORTING_UNNECESSARY = "sorting_unnecessary"
    MIN_VALUE_LARGER_THAN_MAX_VALUE = "min_value_larger_than_max_value"
    INDEX_OUT_OF_BOUNDS = "index_out_of_bounds"
    RANGE_TOO_LARGE = "range_too_large"


class CountingSortError(Exception):
    """Base class for every error raised by a sort call."""

    kind: ErrorKind
    default_message: str = "Counting sort failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class ConversionFailed(CountingSortError):
    kind = ErrorKind.CONVERSION_FAILED
    default_message = "Out of range integral type conversion attempted"


class IteratorEmpty(CountingSortError):
    kind = ErrorKind.ITERATOR_EMPTY
    default_message = "There are no element available in the iterator"


class SortingUnnecessary(CountingSortError):
    kind = ErrorKind.SORTING_UNNECESSARY
    default_message = (
        "Minimum value is identical to maximum value, therefore no sorting is necessary"
    )


class MinValueLargerThanMaxValue(CountingSortError):
    kind = ErrorKind.MIN_VALUE_LARGER_THAN_MAX_VALUE
    default_message = "Given min_value is larger than max_value"


class IndexOutOfBounds(CountingSortError):
    kind = ErrorKind.INDEX_OUT_OF_BOUNDS
    default_message = "Value lies outside the given [min_value, max_value] bounds"


class RangeTooLarge(CountingSortError):
    kind = ErrorKind.RANGE_TOO_LARGE
    default_message = "Value range exceeds the configured max_range"


class IndexConversionError(ValueError):
    """
    Raised by an `IndexMapping` when `value` cannot be mapped to an index
    relative to `min_value`.

    Attributes
    ----------
    value, min_value : Any
        The operands of the failed conversion.
    below_min : bool
        True iff the failure is `value < min_value` (as opposed to an overflow
        of the index type or an operand outside the element type's range).
    """

    def __init__(
        self, value: Any, min_value: Any, reason: str, *, below_min: bool = False
    ) -> None:
        super().__init__(f"cannot index {value!r} relative to {min_value!r}: {reason}")
        self.value = value
        self.min_value = min_value
        self.reason = reason
        self.below_min = below_min
