"""
Integer dataset generators for counting-sort tests and benchmarks.

Currently implemented:
- dist == "random":
    Integers drawn uniformly from an inclusive range.

- dist == "full_width":
    Integers drawn uniformly from the whole range of params["dtype"]
    (e.g. [-128, 127] for int8). Exercises the widening index conversion.

- dist == "few_uniques":
    Choose up to k distinct values from an inclusive range, then fill the
    array by sampling among them. Heavy duplication; the counting-sort sweet spot.

- dist == "nearly_sorted":
    Start from [0, 1, ..., n-1] then perform ceil(swap_frac * n) random swaps.

- dist == "reversed":
    Deterministic [n-1, n-2, ..., 0].

Public API (stable):
    make_dataset(n: int, spec: dict, rng: numpy.random.Generator) -> list[int]
    make_array(n: int, spec: dict, rng: numpy.random.Generator) -> numpy.ndarray

Conventions:
- Every range is **inclusive** on both ends.
- params["dtype"] (optional, default "int32") names the element width. Ranges
  default to the dtype's full range and must fit inside it.
- make_dataset returns plain Python ints (algorithms stay NumPy-agnostic);
  make_array returns the same values as an array of params["dtype"].
- The caller supplies the RNG (seeded upstream) for reproducibility.
"""

from __future__ import annotations

from typing import Any, Dict, List, Tuple

import numpy as np

SUPPORTED_DISTS = {
    "random",
    "full_width",
    "few_uniques",
    "nearly_sorted",
    "reversed",
}
SUPPORTED_DTYPES = ("int8", "int16", "int32", "uint8", "uint16", "uint32")
__all__ = ["SUPPORTED_DISTS", "SUPPORTED_DTYPES", "make_dataset", "make_array"]


def make_dataset(n: int, spec: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    """
    Generate an integer dataset according to `spec`, using the provided RNG.

    Parameters
    ----------
    n : int
        Number of elements to generate. Must be >= 0.
    spec : dict
        Distribution specification, e.g.

            {"dist": "random", "params": {"range": [0, 255]}}
            {"dist": "full_width", "params": {"dtype": "int8"}}
            {"dist": "few_uniques", "params": {"k": 16, "range": [0, 1000]}}
            {"dist": "nearly_sorted", "params": {"swap_frac": 0.05}}
            {"dist": "reversed"}

    rng : numpy.random.Generator
        Random number generator owned by the caller.

    Returns
    -------
    list[int]

    Raises
    ------
    ValueError
        If inputs are invalid or the distribution is unsupported.
    """
    _validate_n(n)
    if not isinstance(spec, dict):
        raise ValueError("spec must be a dict")

    dist = spec.get("dist", None)
    if dist not in SUPPORTED_DISTS:
        raise ValueError(
            f"Unsupported dataset dist: {dist!r}. Supported: {sorted(SUPPORTED_DISTS)}"
        )

    params = spec.get("params") or {}
    dtype = _parse_dtype(params)
    if n == 0:
        return []

    if dist in ("random", "full_width"):
        if dist == "full_width" and "range" in params:
            raise ValueError("full_width takes no params.range; it uses the dtype's range")
        lo, hi = _parse_range(params, dtype)
        return _uniform(rng, lo, hi, n)

    if dist == "few_uniques":
        k = _parse_k(params)
        lo, hi = _parse_range(params, dtype)
        actual_k = int(min(k, n, hi - lo + 1))
        # Draw candidates until `actual_k` distinct values are collected.
        chosen: List[int] = []
        seen = set()
        while len(chosen) < actual_k:
            need = actual_k - len(chosen)
            for v in _uniform(rng, lo, hi, need * 2):
                if v not in seen:
                    seen.add(v)
                    chosen.append(v)
                    if len(chosen) == actual_k:
                        break
        idxs = rng.integers(0, actual_k, size=n)
        return [chosen[int(t)] for t in idxs]

    if dist == "nearly_sorted":
        swap_frac = _parse_swap_frac(params)
        _check_fits(0, n - 1, dtype)
        arr = list(range(n))
        num_swaps = int(np.ceil(swap_frac * n))
        if num_swaps <= 0:
            return arr
        idxs = rng.integers(0, n, size=2 * num_swaps)
        for k in range(num_swaps):
            i = int(idxs[2 * k])
            j = int(idxs[2 * k + 1])
            arr[i], arr[j] = arr[j], arr[i]
        return arr

    if dist == "reversed":
        _check_fits(0, n - 1, dtype)
        return list(range(n - 1, -1, -1))

    raise ValueError(f"Unhandled dataset dist: {dist!r}")


def make_array(n: int, spec: Dict[str, Any], rng: np.random.Generator) -> np.ndarray:
    """Like `make_dataset` but returns an array of params["dtype"]."""
    dtype = _parse_dtype(spec.get("params") or {}) if isinstance(spec, dict) else None
    values = make_dataset(n, spec, rng)
    return np.asarray(values, dtype=dtype)


# ------------------------- helpers ------------------------- #


def _uniform(rng: np.random.Generator, lo: int, hi: int, size: int) -> List[int]:
    # integers() is half-open; +1 makes hi inclusive. int64 holds every
    # supported dtype's range.
    return rng.integers(lo, hi + 1, size=size, dtype=np.int64).tolist()


def _validate_n(n: int) -> None:
    if not isinstance(n, int) or isinstance(n, bool):
        raise ValueError("n must be an int")
    if n < 0:
        raise ValueError("n must be nonnegative")


def _parse_dtype(params: Dict[str, Any]) -> np.dtype:
    name = params.get("dtype", "int32")
    if name not in SUPPORTED_DTYPES:
        raise ValueError(
            f"params.dtype must be one of {list(SUPPORTED_DTYPES)}; got {name!r}"
        )
    return np.dtype(name)


def _parse_range(params: Dict[str, Any], dtype: np.dtype) -> Tuple[int, int]:
    """
    Parse the optional inclusive params["range"]; default to the full range
    of `dtype`. The range must fit inside `dtype`.
    """
    info = np.iinfo(dtype)
    if "range" not in params:
        return int(info.min), int(info.max)

    spec = params["range"]
    if not isinstance(spec, (list, tuple)) or len(spec) != 2:
        raise ValueError("params.range must be a 2-element list/tuple [min, max]")
    lo_raw, hi_raw = spec
    if not _is_int_like(lo_raw) or not _is_int_like(hi_raw):
        raise ValueError("params.range values must be integers")
    lo, hi = int(lo_raw), int(hi_raw)
    if lo > hi:
        raise ValueError(f"params.range invalid: min > max ({lo} > {hi})")
    _check_fits(lo, hi, dtype)
    return lo, hi


def _check_fits(lo: int, hi: int, dtype: np.dtype) -> None:
    info = np.iinfo(dtype)
    if lo < info.min or hi > info.max:
        raise ValueError(
            f"values [{lo}, {hi}] do not fit dtype {dtype.name} [{info.min}, {info.max}]"
        )


def _parse_swap_frac(params: Dict[str, Any]) -> float:
    val = params.get("swap_frac", 0.05)
    try:
        x = float(val)
    except (TypeError, ValueError) as e:
        raise ValueError(
            f"nearly_sorted.params.swap_frac must be a float in [0.0, 1.0]; got {val!r}"
        ) from e
    if not (0.0 <= x <= 1.0):
        raise ValueError(f"nearly_sorted.params.swap_frac must be in [0.0, 1.0]; got {x}")
    return x


def _parse_k(params: Dict[str, Any]) -> int:
    if "k" not in params:
        raise ValueError("few_uniques.params.k must be provided (int >= 1)")
    k = params["k"]
    if not isinstance(k, int) or isinstance(k, bool) or k < 1:
        raise ValueError(f"few_uniques.params.k must be an integer >= 1; got {k!r}")
    return k


def _is_int_like(x: Any) -> bool:
    # Accept Python ints and NumPy integer types
    return isinstance(x, (int, np.integer)) and not isinstance(x, bool)
