"""Comparison-sort baseline: Python's built-in `sorted()` (Timsort)."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

__all__ = ["sort"]


def sort(a: List[int], *, config: Optional[Dict[str, Any]] = None) -> List[int]:
    """Return a new sorted list; `config` is accepted for interface parity and ignored."""
    return sorted(a)
