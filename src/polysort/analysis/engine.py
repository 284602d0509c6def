"""
Heuristic analysis engine.

Looks at a prefix sample and names the backend family that should sort the
whole input. Heuristics run in a fixed priority order and the first match
wins:

1. Sortedness: share of ascending adjacent pairs (a[i] <= a[i+1]) at or above
   `nearly_sorted_ratio` -> MERGE_LEAN. A one-element sample has no pairs and
   skips this check.
2. Sign: no negative value anywhere in the sample -> RADIX_ELIGIBLE.
3. Cardinality: share of distinct values at or below `low_cardinality_ratio`
   -> QUICK_DEFAULT (duplicate-heavy data).
4. Otherwise -> QUICK_DEFAULT.

The result depends only on the sample contents; nothing is cached between calls.

Public API (stable):
    Strategy
    analyze(sample, thresholds=DEFAULT_THRESHOLDS) -> Strategy
    SampleProfile
    profile_sample(sample) -> SampleProfile
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple

from polysort.config import DEFAULT_THRESHOLDS, Thresholds

__all__ = ["Strategy", "analyze", "SampleProfile", "profile_sample"]


class Strategy(Enum):
    """Sorting strategy chosen by the analysis engine."""

    MERGE_LEAN = "merge"
    RADIX_ELIGIBLE = "radix"
    QUICK_DEFAULT = "quicksort"


@dataclass(frozen=True)
class SampleProfile:
    """
    Statistics of one sample, as reported by `profile_sample`.

    ascending_ratio is None for a one-element sample (no adjacent pairs).
    """

    size: int
    ascending_ratio: Optional[float]
    has_negative: bool
    unique_ratio: float


def _scan(sample: Sequence[int]) -> Tuple[int, bool]:
    """Return (ascending_pairs, has_negative) in one pass."""
    ascending = 0
    has_negative = False
    prev = None
    for v in sample:
        if v < 0:
            has_negative = True
        if prev is not None and prev <= v:
            ascending += 1
        prev = v
    return ascending, has_negative


def _unique_count(sample: Sequence[int]) -> int:
    ordered = sorted(sample)
    unique = 1
    for i in range(1, len(ordered)):
        if ordered[i] != ordered[i - 1]:
            unique += 1
    return unique


def _check_non_empty(sample: Sequence[int]) -> int:
    n = len(sample)
    if n == 0:
        raise ValueError("sample must contain at least one element")
    return n


def analyze(sample: Sequence[int], thresholds: Thresholds = DEFAULT_THRESHOLDS) -> Strategy:
    """Choose a strategy for the sequence the sample was taken from."""
    n = _check_non_empty(sample)
    ascending, has_negative = _scan(sample)

    if n > 1 and ascending / (n - 1) >= thresholds.nearly_sorted_ratio:
        return Strategy.MERGE_LEAN

    if not has_negative:
        return Strategy.RADIX_ELIGIBLE

    if _unique_count(sample) / n <= thresholds.low_cardinality_ratio:
        # Duplicate-heavy: still the partition-exchange default.
        return Strategy.QUICK_DEFAULT

    return Strategy.QUICK_DEFAULT


def profile_sample(sample: Sequence[int]) -> SampleProfile:
    """Compute every statistic the heuristics look at (used for reporting)."""
    n = _check_non_empty(sample)
    ascending, has_negative = _scan(sample)
    return SampleProfile(
        size=n,
        ascending_ratio=(ascending / (n - 1)) if n > 1 else None,
        has_negative=has_negative,
        unique_ratio=_unique_count(sample) / n,
    )
