"""
Benchmark tooling: `time_sort_call` (timing harness) and the YAML-driven
experiment runner (`countingsort.bench.runner`, console script `countingsort-bench`).
"""

from .measure import time_sort_call

__all__ = ["time_sort_call"]
