"""
Timing harness for counting sort versus comparison sorting.

One sample is exactly one call to an algorithm's `sort(a, config=...)`, timed
with `time.perf_counter_ns`. Copying, GC and the optional correctness check
against the oracle all happen outside the timed block.

Public API (stable):
    time_sort_call(...) -> dict

Returned dict schema:
    {
        "algo": str,
        "repeats": int,
        "samples_ns": list[int],            # elapsed ns per successful sample
        "status": "ok" | "timeout" | "error" | "mismatch",
        "error": str | None,                # set for "error" and "mismatch"
        "timed_out_on_repeat": int | None,  # 0-based repeat index of a timeout
    }
"""

from __future__ import annotations

import gc
import time
from typing import Any, Callable, Dict, List, Optional

from countingsort.validate import equals_oracle, first_nondecreasing_violation_index

__all__ = ["time_sort_call"]


def time_sort_call(
    *,
    algo_name: str,
    algo_fn: Callable[..., List[int]],
    a: List[int],
    config: Optional[Dict[str, Any]],
    repeats: int,
    warmup: bool,
    disable_gc: bool,
    timeout_seconds: float,
    validate: bool = True,
) -> Dict[str, Any]:
    """
    Time repeated calls to `algo_fn(a, config=config)`.

    Parameters
    ----------
    algo_name : str
        Logical algorithm name, copied into the result.
    algo_fn : Callable[..., list[int]]
        sort(a: list[int], *, config: dict | None) -> list[int]
    a : list[int]
        Input. Every call gets a fresh copy, so an algorithm that mutates its
        input cannot skew later samples.
    config : dict | None
        Passed through unchanged.
    repeats : int
        Number of timed samples.
    warmup : bool
        Make one untimed call first. With `validate`, that call's output is
        the one checked.
    disable_gc : bool
        Collect, then disable GC for the timed loop; restored afterwards.
    timeout_seconds : float
        A sample slower than this sets status="timeout" and stops sampling.
    validate : bool
        Compare one output with the oracle before timing; a difference sets
        status="mismatch" and no samples are taken.
    """
    if repeats < 0:
        raise ValueError("repeats must be nonnegative")
    if timeout_seconds <= 0:
        raise ValueError("timeout_seconds must be positive")

    result: Dict[str, Any] = {
        "algo": algo_name,
        "repeats": repeats,
        "samples_ns": [],
        "status": "ok",
        "error": None,
        "timed_out_on_repeat": None,
    }

    if (warmup or validate) and repeats > 0:
        try:
            out = algo_fn(list(a), config=config)
        except Exception as e:
            result["status"] = "error"
            result["error"] = f"warmup failed: {e!r}"
            return result
        if validate and not equals_oracle(a, out):
            i = first_nondecreasing_violation_index(out)
            where = "order" if i is not None else "contents"
            result["status"] = "mismatch"
            result["error"] = f"output differs from oracle ({where}; first bad index {i})"
            return result

    prev_gc_enabled = gc.isenabled()
    try:
        if disable_gc:
            gc.collect()
            gc.disable()

        threshold_ns = int(timeout_seconds * 1e9)
        for r in range(repeats):
            arg = list(a)
            try:
                t0 = time.perf_counter_ns()
                algo_fn(arg, config=config)
                t1 = time.perf_counter_ns()
            except Exception as e:
                result["status"] = "error"
                result["error"] = f"run failed at repeat {r}: {e!r}"
                break

            elapsed = t1 - t0
            result["samples_ns"].append(int(elapsed))
            if elapsed > threshold_ns:
                result["status"] = "timeout"
                result["timed_out_on_repeat"] = r
                break
    finally:
        # Leave GC disabled if the caller had disabled it.
        if disable_gc and prev_gc_enabled:
            gc.enable()

    return result
