"""
Tests for the public entry points `sort` and `sort_with_bounds`.

Covers the error taxonomy, boundary behavior, stability on tagged records,
numpy in/numpy out, and equivalence with a comparison sort across every
supported integer width.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import List, Tuple

import numpy as np
import pytest
from hypothesis import given, settings, strategies as st

from countingsort import (
    ConversionFailed,
    CountingSortError,
    ErrorKind,
    IndexMapping,
    IndexOutOfBounds,
    IteratorEmpty,
    MinValueLargerThanMaxValue,
    RangeTooLarge,
    SortConfig,
    SortingUnnecessary,
    register_index_mapping,
    sort,
    sort_with_bounds,
)
from countingsort.core import DEFAULT_INDEX_MAX
from countingsort.core.errors import IndexConversionError
from countingsort.datasets import make_array
from countingsort.validate import is_stable, oracle_sort_by_key

UNSORTED = [
    13, 24, 27, 3, 10, 1, 9, 17, 6, 7, 3, 30, 14, 15, 2, 3, 7, 11, 21, 16, 7, 11, 21, 5, 23,
    25, 26, 28, 28, 4,
]
SORTED = sorted(UNSORTED)


# ------------------------- basic behavior ------------------------- #

def test_sort_u8_vector() -> None:
    arr = np.array(UNSORTED, dtype=np.uint8)
    out = sort(arr)
    assert isinstance(out, np.ndarray)
    assert out.dtype == np.uint8
    assert out.tolist() == SORTED


def test_sort_with_bounds_u8_vector() -> None:
    out = sort_with_bounds(np.array(UNSORTED, dtype=np.uint8), 1, 30)
    assert out.tolist() == SORTED


def test_sort_plain_list_returns_new_list() -> None:
    a = [4, 3, 2, 1]
    out = sort(a)
    assert out == [1, 2, 3, 4]
    assert out is not a
    assert a == [4, 3, 2, 1]


@pytest.mark.parametrize(
    "values",
    [deque([4, 3, 2, 1]), (4, 3, 2, 1), iter([4, 3, 2, 1]), (x for x in [4, 3, 2, 1])],
    ids=["deque", "tuple", "iterator", "generator"],
)
def test_sort_accepts_any_iterable(values) -> None:
    assert sort(values) == [1, 2, 3, 4]


def test_sort_set() -> None:
    assert sort({4, 3, 2, 4}) == [2, 3, 4]


def test_sort_i8_vector_with_negatives() -> None:
    assert sort([np.int8(x) for x in (2, -100, 50, -6)]) == [-100, -6, 2, 50]


def test_int8_extremes_do_not_wrap() -> None:
    out = sort(np.array([127, -128], dtype=np.int8))
    assert out.tolist() == [-128, 127]


def test_already_sorted_is_idempotent() -> None:
    once = sort(UNSORTED)
    assert sort(once) == once


def test_empty_input_with_bounds_returns_empty() -> None:
    assert sort_with_bounds([], 0, 10) == []
    out = sort_with_bounds(np.array([], dtype=np.int16), 0, 10)
    assert out.dtype == np.int16 and out.size == 0


def test_input_is_not_mutated() -> None:
    arr = np.array([5, 1, 4, 1], dtype=np.int16)
    before = arr.copy()
    sort(arr)
    assert np.array_equal(arr, before)


def test_two_dimensional_array_rejected() -> None:
    with pytest.raises(ValueError):
        sort(np.zeros((2, 2), dtype=np.int8))


# ------------------------- error taxonomy ------------------------- #

def test_empty_iterator_error() -> None:
    with pytest.raises(IteratorEmpty) as excinfo:
        sort([])
    assert excinfo.value.kind is ErrorKind.ITERATOR_EMPTY
    assert str(excinfo.value) == "There are no element available in the iterator"


@pytest.mark.parametrize("values", [[1], [1, 1, 1], []])
def test_sorting_unnecessary_error(values) -> None:
    with pytest.raises(SortingUnnecessary) as excinfo:
        sort_with_bounds(values, 1, 1)
    assert str(excinfo.value) == (
        "Minimum value is identical to maximum value, therefore no sorting is necessary"
    )


def test_single_distinct_value_via_scan() -> None:
    with pytest.raises(SortingUnnecessary):
        sort([7, 7, 7])


def test_reversed_bounds_error() -> None:
    with pytest.raises(MinValueLargerThanMaxValue) as excinfo:
        sort_with_bounds([1, 2, 3], 5, 1)
    assert excinfo.value.kind is ErrorKind.MIN_VALUE_LARGER_THAN_MAX_VALUE


def test_misdeclared_max_is_reported() -> None:
    with pytest.raises(IndexOutOfBounds) as excinfo:
        sort_with_bounds([4, 3, 2, 1], 1, 3)
    assert excinfo.value.kind is ErrorKind.INDEX_OUT_OF_BOUNDS


def test_misdeclared_min_is_reported() -> None:
    with pytest.raises(IndexOutOfBounds) as excinfo:
        sort_with_bounds([0, 3, 2, 1], 1, 3)
    assert isinstance(excinfo.value.__cause__, IndexConversionError)


def test_element_outside_dtype_is_conversion_failure() -> None:
    with pytest.raises(ConversionFailed) as excinfo:
        sort_with_bounds([np.int8(1), 300], np.int8(0), np.int8(5))
    assert excinfo.value.kind is ErrorKind.CONVERSION_FAILED


def test_range_beyond_index_capacity_is_conversion_failure() -> None:
    with pytest.raises(ConversionFailed):
        sort([0, 100], config={"index_max": 10})
    with pytest.raises(ConversionFailed):
        sort(np.array([0, 100], dtype=np.int8), config=SortConfig(index_max=10))


def test_histogram_slots_count_against_index_capacity() -> None:
    # value_range + 2 slots must stay addressable
    with pytest.raises(ConversionFailed):
        sort([0, 99], config={"index_max": 100})
    assert sort([98, 0], config={"index_max": 100}) == [0, 98]
    with pytest.raises(ConversionFailed):
        sort([0, DEFAULT_INDEX_MAX])
    with pytest.raises(ConversionFailed):
        sort([0, DEFAULT_INDEX_MAX - 2])


@pytest.mark.skipif(DEFAULT_INDEX_MAX < 2**62, reason="needs a 64-bit index type")
def test_unallocatable_histogram_is_memory_error() -> None:
    with pytest.raises(MemoryError):
        sort([0, DEFAULT_INDEX_MAX // 4])


def test_range_ceiling() -> None:
    with pytest.raises(RangeTooLarge) as excinfo:
        sort([0, 10**12], config=SortConfig(max_range=1000))
    assert excinfo.value.kind is ErrorKind.RANGE_TOO_LARGE
    assert sort([0, 1000, 3], config={"max_range": 1000}) == [0, 3, 1000]


def test_all_errors_share_a_base_class() -> None:
    for exc in (IteratorEmpty, SortingUnnecessary, MinValueLargerThanMaxValue,
                IndexOutOfBounds, ConversionFailed, RangeTooLarge):
        assert issubclass(exc, CountingSortError)


def test_64_bit_arrays_rejected() -> None:
    with pytest.raises(TypeError):
        sort(np.array([3, 1, 2], dtype=np.int64))


@pytest.mark.parametrize("config", [{"unknown": 1}, {"max_range": 0}, {"index_max": "big"}, 5])
def test_bad_config_rejected(config) -> None:
    with pytest.raises(ValueError):
        sort([2, 1], config=config)


# ------------------------- stability & custom mappings ------------------------- #

@dataclass(frozen=True, order=True)
class Person:
    id: int
    name: str = field(compare=False)


class PersonMapping(IndexMapping):
    def offset(self, value: Person, min_value: Person) -> int:
        if value.id < min_value.id:
            raise IndexConversionError(value, min_value, "id below min", below_min=True)
        return value.id - min_value.id


register_index_mapping(Person, PersonMapping())


def test_stable_sort_on_custom_type() -> None:
    first = Person(3, "first")
    second = Person(1, "second")
    third = Person(1, "third")
    fourth = Person(2, "fourth")
    out = sort([first, second, third, fourth])
    assert [p.name for p in out] == ["second", "third", "fourth", "first"]


class FirstField(IndexMapping):
    def offset(self, value: Tuple[int, int], min_value: Tuple[int, int]) -> int:
        return value[0] - min_value[0]


@settings(deadline=None, max_examples=100)
@given(st.lists(st.integers(min_value=-50, max_value=50), min_size=2, max_size=300))
def test_property_stability(keys: List[int]) -> None:
    records = [(k, i) for i, k in enumerate(keys)]
    lo, hi = min(keys), max(keys)
    if lo == hi:
        return
    out = sort_with_bounds(records, (lo, -1), (hi, -1), mapping=FirstField())
    key = lambda r: r[0]  # noqa: E731
    assert out == oracle_sort_by_key(records, key)
    assert is_stable(records, out, key)


# ------------------------- equivalence to comparison sort ------------------------- #

@pytest.mark.parametrize(
    "dtype, rng_range",
    [
        ("uint8", None),
        ("int8", None),
        ("uint16", None),
        ("int16", None),
        ("uint32", [2**16 + 1000, 2**16 + 10000]),
        ("int32", [-(2**15) - 1000, 2**15 + 1000]),
    ],
)
def test_equivalence_10k(dtype: str, rng_range) -> None:
    params = {"dtype": dtype}
    if rng_range is None:
        spec = {"dist": "full_width", "params": params}
    else:
        spec = {"dist": "random", "params": {**params, "range": rng_range}}
    arr = make_array(10_000, spec, np.random.default_rng(7648730752358173238))

    out = sort(arr)
    assert out.dtype == arr.dtype
    assert np.array_equal(out, np.sort(arr, kind="stable"))


@settings(deadline=None, max_examples=100)
@given(st.lists(st.integers(min_value=-(2**15), max_value=2**15 - 1), min_size=1, max_size=400))
def test_property_matches_sorted(a: List[int]) -> None:
    if min(a) == max(a):
        with pytest.raises(SortingUnnecessary):
            sort(a)
        return
    assert sort(a) == sorted(a)
