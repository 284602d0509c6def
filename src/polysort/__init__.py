"""
polysort: adaptive integer sorting.

A prefix sample of the input is inspected for sortedness, sign and
cardinality, and the input is handed to the backend (insertion, merge, radix
or quicksort) that suits it.

    >>> import polysort
    >>> polysort.sort([170, 45, 75, 90, 802, 24, 2, 66])
    [2, 24, 45, 66, 75, 90, 170, 802]
"""

from polysort.analysis import SampleProfile, Strategy, analyze, profile_sample, take_sample
from polysort.config import (
    DEFAULT_THRESHOLDS,
    INSERTION_THRESHOLD,
    LOW_CARDINALITY_RATIO,
    NEARLY_SORTED_RATIO,
    SAMPLE_CAP,
    Thresholds,
)
from polysort.dispatch import Plan, plan, sort
from polysort.errors import PolysortError, SortAborted

__version__ = "0.1.0"

__all__ = [
    "sort",
    "plan",
    "Plan",
    "analyze",
    "profile_sample",
    "take_sample",
    "Strategy",
    "SampleProfile",
    "Thresholds",
    "DEFAULT_THRESHOLDS",
    "INSERTION_THRESHOLD",
    "SAMPLE_CAP",
    "NEARLY_SORTED_RATIO",
    "LOW_CARDINALITY_RATIO",
    "PolysortError",
    "SortAborted",
]
