"""
Value -> index conversion.

An `IndexMapping` turns an element and a known minimum into a non-negative
offset used to address histogram slots. Mappings must be monotonic:
`a <= b` implies `index(a, min) <= index(b, min)` whenever both succeed.

Built-in mappings:
- numpy int8, int16, int32, uint8, uint16, uint32 (`IntegerIndexMapping`).
  Operands are widened to the next larger dtype before subtracting, so
  `int8(127) - int8(-128)` is 255 and never wraps.
- plain Python `int` (`PythonIntIndexMapping`). Python ints cannot overflow,
  so only the index capacity check applies.

64-bit numpy dtypes are deliberately not registered: their range can ask for
histograms far beyond available memory.

Custom element types opt in by subclassing `IndexMapping`, implementing
`offset()`, and either passing the mapping explicitly to `sort()` or
registering it with `register_index_mapping()`.
"""

from __future__ import annotations

import abc
import operator
from typing import Any, Dict, Optional, Union

import numpy as np

from .config import DEFAULT_INDEX_MAX
from .errors import IndexConversionError

__all__ = [
    "IndexMapping",
    "IntegerIndexMapping",
    "PythonIntIndexMapping",
    "BUILTIN_MAPPINGS",
    "register_index_mapping",
    "resolve_index_mapping",
    "try_into_index",
]


class IndexMapping(abc.ABC):
    """
    Strategy mapping `(value, min_value)` to a histogram index.

    Subclasses implement `offset()`; `try_into_index()` adds the checks every
    mapping shares (no negative offsets, fits the index type).
    """

    #: Largest offset the element type can produce, or None if unbounded.
    max_offset: Optional[int] = None

    @abc.abstractmethod
    def offset(self, value: Any, min_value: Any) -> int:
        """
        Return `value - min_value` as a Python int.

        Raise `IndexConversionError(..., below_min=True)` if `value < min_value`
        and a plain `IndexConversionError` if either operand is not a valid
        element of this mapping's type.
        """

    @property
    def narrow(self) -> bool:
        """True if every offset of this type fits the default index type."""
        return self.max_offset is not None and self.max_offset <= DEFAULT_INDEX_MAX

    def try_into_index(
        self, value: Any, min_value: Any, index_max: int = DEFAULT_INDEX_MAX
    ) -> int:
        idx = self.offset(value, min_value)
        if idx < 0:
            # A non-monotonic custom mapping; never hand out a wrapped index.
            raise IndexConversionError(
                value, min_value, f"negative offset {idx}", below_min=True
            )
        if self.max_offset is not None and self.max_offset <= index_max:
            return idx
        if idx > index_max:
            raise IndexConversionError(
                value, min_value, f"offset {idx} exceeds index capacity {index_max}"
            )
        return idx


class IntegerIndexMapping(IndexMapping):
    """Mapping for one fixed-width numpy integer dtype."""

    def __init__(self, dtype: Any, wide_dtype: Any) -> None:
        self.dtype = np.dtype(dtype)
        self.wide_dtype = np.dtype(wide_dtype)
        if self.dtype.kind not in "iu" or self.wide_dtype.kind not in "iu":
            raise TypeError("IntegerIndexMapping needs integer dtypes")
        if self.wide_dtype.itemsize <= self.dtype.itemsize:
            raise TypeError(
                f"wide dtype {self.wide_dtype} must be larger than {self.dtype}"
            )
        info = np.iinfo(self.dtype)
        self._lo = int(info.min)
        self._hi = int(info.max)
        self._widen = self.wide_dtype.type
        self.max_offset = self._hi - self._lo
        # Last min_value that passed _check_operand; it is loop-invariant per sort.
        self._checked_min: Any = None

    def __repr__(self) -> str:
        return f"IntegerIndexMapping({self.dtype.name}, wide={self.wide_dtype.name})"

    def offset(self, value: Any, min_value: Any) -> int:
        self._check_operand(value, min_value, value)
        if min_value is not self._checked_min:
            self._check_operand(value, min_value, min_value)
            self._checked_min = min_value
        if value < min_value:
            raise IndexConversionError(
                value, min_value, "value is smaller than min_value", below_min=True
            )
        return int(self._widen(value) - self._widen(min_value))

    def _check_operand(self, value: Any, min_value: Any, x: Any) -> None:
        if isinstance(x, (bool, np.bool_)) or not isinstance(x, (int, np.integer)):
            raise IndexConversionError(
                value, min_value, f"{x!r} is not an integer"
            )
        if not (self._lo <= int(x) <= self._hi):
            raise IndexConversionError(
                value, min_value, f"{x!r} does not fit {self.dtype.name}"
            )


class PythonIntIndexMapping(IndexMapping):
    """Mapping for arbitrary-precision Python ints."""

    def __repr__(self) -> str:
        return "PythonIntIndexMapping()"

    def offset(self, value: Any, min_value: Any) -> int:
        v = self._as_int(value, min_value, value)
        m = self._as_int(value, min_value, min_value)
        if v < m:
            raise IndexConversionError(
                value, min_value, "value is smaller than min_value", below_min=True
            )
        return v - m

    @staticmethod
    def _as_int(value: Any, min_value: Any, x: Any) -> int:
        if isinstance(x, bool):
            raise IndexConversionError(value, min_value, "bool is not sortable here")
        try:
            return operator.index(x)
        except TypeError as e:
            raise IndexConversionError(
                value, min_value, f"{x!r} is not an integer"
            ) from e


# ------------------------- registry ------------------------- #

BUILTIN_MAPPINGS: Dict[Any, IndexMapping] = {
    np.dtype(np.int8): IntegerIndexMapping(np.int8, np.int16),
    np.dtype(np.int16): IntegerIndexMapping(np.int16, np.int32),
    np.dtype(np.int32): IntegerIndexMapping(np.int32, np.int64),
    np.dtype(np.uint8): IntegerIndexMapping(np.uint8, np.uint16),
    np.dtype(np.uint16): IntegerIndexMapping(np.uint16, np.uint32),
    np.dtype(np.uint32): IntegerIndexMapping(np.uint32, np.uint64),
    int: PythonIntIndexMapping(),
}

_REGISTRY: Dict[Any, IndexMapping] = dict(BUILTIN_MAPPINGS)

_UNSUPPORTED_WIDE = {np.dtype(np.int64), np.dtype(np.uint64)}


def register_index_mapping(key: Any, mapping: IndexMapping) -> None:
    """
    Make `mapping` the default for elements of `key` (a type or numpy dtype).

    Subclasses of a registered Python type resolve to the same mapping.
    """
    if not isinstance(mapping, IndexMapping):
        raise TypeError(f"mapping must be an IndexMapping; got {type(mapping).__name__}")
    _REGISTRY[_registry_key(key)] = mapping


def resolve_index_mapping(sample: Any) -> IndexMapping:
    """
    Find the mapping for `sample`: an element value, a numpy array, a numpy
    dtype, or a type. An `IndexMapping` is returned unchanged.
    """
    if isinstance(sample, IndexMapping):
        return sample
    if isinstance(sample, np.ndarray):
        key: Any = sample.dtype
    elif isinstance(sample, (np.dtype, np.generic)):
        key = _registry_key(sample.dtype if isinstance(sample, np.generic) else sample)
    elif isinstance(sample, type):
        key = _registry_key(sample)
    else:
        key = type(sample)

    if isinstance(key, np.dtype):
        found = _REGISTRY.get(key)
        if found is not None:
            return found
        if key in _UNSUPPORTED_WIDE:
            raise TypeError(
                f"{key.name} is not supported: its value range can require a "
                "histogram too large to allocate; use a 32-bit dtype or pass a mapping"
            )
        raise TypeError(f"No IndexMapping registered for dtype {key.name}")

    if key is bool:
        raise TypeError("bool elements are not supported")
    for klass in key.__mro__:
        found = _REGISTRY.get(klass)
        if found is not None:
            return found
    raise TypeError(f"No IndexMapping registered for type {key.__name__}")


def try_into_index(
    value: Any,
    min_value: Any,
    mapping: Optional[IndexMapping] = None,
    index_max: int = DEFAULT_INDEX_MAX,
) -> int:
    """Index of `value` relative to `min_value`, resolving the mapping from `min_value`."""
    if mapping is None:
        mapping = resolve_index_mapping(min_value)
    return mapping.try_into_index(value, min_value, index_max)


def _registry_key(key: Union[type, np.dtype, Any]) -> Any:
    if isinstance(key, np.dtype):
        return key
    if isinstance(key, type) and issubclass(key, np.generic):
        return np.dtype(key)
    if isinstance(key, type):
        return key
    raise TypeError(f"registry key must be a type or numpy dtype; got {key!r}")
