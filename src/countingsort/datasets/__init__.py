"""
Datasets package public API.

Re-export the dataset generators so callers can write:
    from countingsort.datasets import make_dataset, make_array, SUPPORTED_DISTS
"""

from .generators import SUPPORTED_DISTS, SUPPORTED_DTYPES, make_array, make_dataset

__all__ = ["make_dataset", "make_array", "SUPPORTED_DISTS", "SUPPORTED_DTYPES"]
