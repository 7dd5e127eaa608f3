"""
Per-call configuration for the sort entry points.

`sort()` and `sort_with_bounds()` accept `config` as a `SortConfig`, a plain
dict with the same keys, or None (defaults). Dicts come from the benchmark
YAML files, so they are validated here:

    {
        "max_range": 1_000_000,   # optional; int >= 1 or None (no ceiling)
        "index_max": 2**31 - 1,   # optional; int >= 1; largest addressable index
    }

Unknown keys are rejected so typos in experiment files do not pass silently.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union

import numpy as np

__all__ = ["DEFAULT_INDEX_MAX", "SortConfig", "resolve_config"]

# Largest index the platform can address, analogous to usize::MAX.
DEFAULT_INDEX_MAX: int = int(np.iinfo(np.intp).max)

_KNOWN_KEYS = {"max_range", "index_max"}


@dataclass(frozen=True)
class SortConfig:
    max_range: Optional[int] = None
    index_max: int = DEFAULT_INDEX_MAX

    def __post_init__(self) -> None:
        if self.max_range is not None:
            _check_positive_int("max_range", self.max_range)
        _check_positive_int("index_max", self.index_max)


def resolve_config(config: Union[SortConfig, Mapping[str, Any], None]) -> SortConfig:
    """Normalize the `config` argument of the sort entry points."""
    if config is None:
        return SortConfig()
    if isinstance(config, SortConfig):
        return config
    if not isinstance(config, Mapping):
        raise ValueError(
            f"config must be a SortConfig, a dict or None; got {type(config).__name__}"
        )

    unknown = set(config) - _KNOWN_KEYS
    if unknown:
        raise ValueError(
            f"Unknown config keys: {sorted(unknown)}. Supported: {sorted(_KNOWN_KEYS)}"
        )

    kwargs: Dict[str, Any] = {}
    if config.get("max_range") is not None:
        kwargs["max_range"] = _parse_int(config, "max_range")
    if "index_max" in config:
        kwargs["index_max"] = _parse_int(config, "index_max")
    return SortConfig(**kwargs)


# ------------------------- helpers ------------------------- #


def _parse_int(config: Mapping[str, Any], key: str) -> int:
    raw = config[key]
    if isinstance(raw, bool) or not isinstance(raw, (int, np.integer)):
        raise ValueError(f"config.{key} must be an integer; got {raw!r}")
    return int(raw)


def _check_positive_int(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an int; got {value!r}")
    if value < 1:
        raise ValueError(f"{name} must be >= 1; got {value}")
