"""Tests for the seeded dataset generators."""

from __future__ import annotations

import numpy as np
import pytest

from countingsort.datasets import SUPPORTED_DTYPES, make_array, make_dataset


def _rng() -> np.random.Generator:
    return np.random.default_rng(17)


@pytest.mark.parametrize("dtype", SUPPORTED_DTYPES)
def test_full_width_stays_inside_dtype(dtype: str) -> None:
    arr = make_array(2000, {"dist": "full_width", "params": {"dtype": dtype}}, _rng())
    info = np.iinfo(dtype)
    assert arr.dtype == np.dtype(dtype)
    assert arr.shape == (2000,)
    assert info.min <= arr.min() and arr.max() <= info.max


def test_random_range_is_inclusive() -> None:
    out = make_dataset(5000, {"dist": "random", "params": {"range": [0, 3]}}, _rng())
    assert set(out) == {0, 1, 2, 3}
    assert all(type(x) is int for x in out)


def test_few_uniques() -> None:
    spec = {"dist": "few_uniques", "params": {"k": 5, "range": [-100, 100]}}
    out = make_dataset(1000, spec, _rng())
    assert len(out) == 1000
    assert len(set(out)) <= 5


def test_nearly_sorted_and_reversed() -> None:
    ns = make_dataset(100, {"dist": "nearly_sorted", "params": {"swap_frac": 0.0}}, _rng())
    assert ns == list(range(100))
    assert make_dataset(4, {"dist": "reversed"}, _rng()) == [3, 2, 1, 0]


def test_same_seed_same_data() -> None:
    spec = {"dist": "random", "params": {"range": [0, 1000]}}
    assert make_dataset(50, spec, _rng()) == make_dataset(50, spec, _rng())


def test_zero_length() -> None:
    assert make_dataset(0, {"dist": "random", "params": {"range": [0, 1]}}, _rng()) == []


@pytest.mark.parametrize(
    "n, spec",
    [
        (-1, {"dist": "random"}),
        (10, {"dist": "gaussian"}),
        (10, {"dist": "random", "params": {"dtype": "int64"}}),
        (10, {"dist": "random", "params": {"dtype": "uint8", "range": [0, 256]}}),
        (10, {"dist": "random", "params": {"range": [5, 1]}}),
        (10, {"dist": "full_width", "params": {"range": [0, 1]}}),
        (10, {"dist": "few_uniques", "params": {}}),
        (10, {"dist": "nearly_sorted", "params": {"swap_frac": 2}}),
        (300, {"dist": "reversed", "params": {"dtype": "int8"}}),
    ],
)
def test_invalid_specs(n: int, spec: dict) -> None:
    with pytest.raises(ValueError):
        make_dataset(n, spec, _rng())
