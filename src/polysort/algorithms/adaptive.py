"""
Benchmark-API wrapper around the adaptive dispatcher.

Config:
    {"thresholds": {"insertion_threshold": 32, "sample_cap": 100, ...}}   # optional overrides
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from polysort.config import Thresholds
from polysort.dispatch import sort as adaptive_sort

__all__ = ["sort"]


def sort(a: Sequence[int], *, config: Optional[Dict[str, Any]] = None) -> List[int]:
    """Return a sorted copy of `a`, chosen adaptively."""
    config = config or {}
    thresholds = Thresholds.from_mapping(config.get("thresholds"))
    return adaptive_sort(list(a), thresholds)
