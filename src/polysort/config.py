"""
Threshold configuration for the adaptive sorter.

The four thresholds are fixed defaults exposed as named constants. They are
bundled into an immutable `Thresholds` value that the analysis engine and the
dispatcher receive explicitly, so alternate values can be injected (tests,
benchmark configs) without any global mutable state.

Public API (stable):
    INSERTION_THRESHOLD, SAMPLE_CAP, NEARLY_SORTED_RATIO, LOW_CARDINALITY_RATIO
    Thresholds
    DEFAULT_THRESHOLDS
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Mapping, Optional

INSERTION_THRESHOLD: int = 32
SAMPLE_CAP: int = 100
NEARLY_SORTED_RATIO: float = 0.85
LOW_CARDINALITY_RATIO: float = 0.20

__all__ = [
    "INSERTION_THRESHOLD",
    "SAMPLE_CAP",
    "NEARLY_SORTED_RATIO",
    "LOW_CARDINALITY_RATIO",
    "Thresholds",
    "DEFAULT_THRESHOLDS",
]


@dataclass(frozen=True)
class Thresholds:
    """
    Decision thresholds.

    Attributes
    ----------
    insertion_threshold : int
        Inputs (and quicksort partitions) smaller than this use insertion sort.
    sample_cap : int
        Maximum number of leading elements inspected by the analysis engine.
    nearly_sorted_ratio : float
        Minimum share of ascending adjacent pairs for the merge strategy.
    low_cardinality_ratio : float
        Maximum share of distinct values for the sample to count as duplicate-heavy.
    """

    insertion_threshold: int = INSERTION_THRESHOLD
    sample_cap: int = SAMPLE_CAP
    nearly_sorted_ratio: float = NEARLY_SORTED_RATIO
    low_cardinality_ratio: float = LOW_CARDINALITY_RATIO

    def __post_init__(self) -> None:
        if not _is_int(self.insertion_threshold) or self.insertion_threshold < 2:
            raise ValueError(
                f"insertion_threshold must be an integer >= 2; got {self.insertion_threshold!r}"
            )
        if not _is_int(self.sample_cap) or self.sample_cap < 1:
            raise ValueError(f"sample_cap must be an integer >= 1; got {self.sample_cap!r}")
        for name in ("nearly_sorted_ratio", "low_cardinality_ratio"):
            val = getattr(self, name)
            if not _is_number(val) or not (0.0 <= val <= 1.0):
                raise ValueError(f"{name} must be a number in [0.0, 1.0]; got {val!r}")

    @classmethod
    def from_mapping(cls, overrides: Optional[Mapping[str, Any]]) -> "Thresholds":
        """
        Build thresholds from a partial mapping, e.g. a YAML `thresholds:` block.
        Missing keys keep their defaults; unknown keys are rejected.
        """
        if not overrides:
            return DEFAULT_THRESHOLDS
        if not isinstance(overrides, Mapping):
            raise ValueError("thresholds must be a mapping")
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ValueError(f"Unknown threshold keys: {unknown}. Supported: {sorted(known)}")
        return replace(DEFAULT_THRESHOLDS, **dict(overrides))


def _is_int(x: Any) -> bool:
    return isinstance(x, int) and not isinstance(x, bool)


def _is_number(x: Any) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


DEFAULT_THRESHOLDS = Thresholds()
