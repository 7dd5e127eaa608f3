"""
countingsort: stable, allocation-based counting sort for bounded integers.

    >>> from countingsort import sort, sort_with_bounds
    >>> sort([3, 1, 2])
    [1, 2, 3]
    >>> sort_with_bounds([4, 3, 2, 1], 1, 4)
    [1, 2, 3, 4]

Subpackages:
    core        the algorithm, index mappings and errors
    algorithms  benchmarkable `sort(a, *, config=None)` adapters
    datasets    seeded integer dataset generators
    validate    oracle and property checks
    bench       timing harness and experiment runner
"""

from .core import (
    ConversionFailed,
    CountingSortError,
    ErrorKind,
    IndexMapping,
    IndexOutOfBounds,
    IntegerIndexMapping,
    IteratorEmpty,
    MinValueLargerThanMaxValue,
    PythonIntIndexMapping,
    RangeTooLarge,
    SortConfig,
    SortingUnnecessary,
    register_index_mapping,
    resolve_index_mapping,
    sort,
    sort_with_bounds,
    try_into_index,
)

__version__ = "0.1.0"

__all__ = [
    "sort",
    "sort_with_bounds",
    "SortConfig",
    "IndexMapping",
    "IntegerIndexMapping",
    "PythonIntIndexMapping",
    "register_index_mapping",
    "resolve_index_mapping",
    "try_into_index",
    "ErrorKind",
    "CountingSortError",
    "ConversionFailed",
    "IteratorEmpty",
    "SortingUnnecessary",
    "MinValueLargerThanMaxValue",
    "IndexOutOfBounds",
    "RangeTooLarge",
]
