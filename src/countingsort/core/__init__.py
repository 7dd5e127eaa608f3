"""
Counting sort core public API.

Re-exports the entry points, the index mapping layer and the error taxonomy so
callers can write:
    from countingsort.core import sort, sort_with_bounds, CountingSortError
"""

from .config import DEFAULT_INDEX_MAX, SortConfig, resolve_config
from .errors import (
    ConversionFailed,
    CountingSortError,
    ErrorKind,
    IndexConversionError,
    IndexOutOfBounds,
    IteratorEmpty,
    MinValueLargerThanMaxValue,
    RangeTooLarge,
    SortingUnnecessary,
)
from .index import (
    BUILTIN_MAPPINGS,
    IndexMapping,
    IntegerIndexMapping,
    PythonIntIndexMapping,
    register_index_mapping,
    resolve_index_mapping,
    try_into_index,
)
from .passes import build_histogram, place, prefix_sum, scan_min_max
from .sort import Stage, sort, sort_with_bounds

__all__ = [
    "sort",
    "sort_with_bounds",
    "Stage",
    "SortConfig",
    "DEFAULT_INDEX_MAX",
    "resolve_config",
    "IndexMapping",
    "IntegerIndexMapping",
    "PythonIntIndexMapping",
    "BUILTIN_MAPPINGS",
    "register_index_mapping",
    "resolve_index_mapping",
    "try_into_index",
    "scan_min_max",
    "build_histogram",
    "prefix_sum",
    "place",
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
