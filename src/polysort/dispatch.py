"""
Adaptive sort dispatcher.

    sort(a) -> a          # sorts the list in place and returns it

Decision procedure (see `plan`):
- len(a) <= 1: nothing to do.
- len(a) < insertion_threshold: insertion sort, the analysis engine is not consulted.
- otherwise: sample the prefix, ask the analysis engine for a Strategy and run
  the backend mapped to it over the whole list.

The sample only covers a prefix, so a list whose sample is non-negative may
still hold negatives further on. Before committing to radix sort the whole
list is checked; if it contains a negative value the plan falls back to
quicksort and a warning is logged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import partial
from typing import Callable, Dict, List, MutableSequence, Optional

from polysort.algorithms.insertion import insertion_sort_range
from polysort.algorithms.merge import merge_sort_range
from polysort.algorithms.quicksort import quicksort_range
from polysort.algorithms.radix import radix_sort_range
from polysort.analysis.engine import Strategy, analyze
from polysort.analysis.sampler import take_sample
from polysort.config import DEFAULT_THRESHOLDS, Thresholds

logger = logging.getLogger(__name__)

RangeSorter = Callable[[MutableSequence[int], int, int], None]

INSERTION = "insertion"

__all__ = ["Plan", "RangeSorter", "INSERTION", "plan", "backend_for", "sort"]


@dataclass(frozen=True)
class Plan:
    """
    The dispatcher's decision for one input.

    Attributes
    ----------
    backend : str | None
        Backend that will run ("insertion", "merge", "radix", "quicksort"),
        or None when the input is already trivially ordered.
    strategy : Strategy | None
        Analysis result, or None when analysis was skipped.
    radix_guarded : bool
        True when the analysis said RADIX_ELIGIBLE but a negative value beyond
        the sample forced the quicksort fallback.
    """

    backend: Optional[str]
    strategy: Optional[Strategy] = None
    radix_guarded: bool = False


def _backends(thresholds: Thresholds) -> Dict[Strategy, RangeSorter]:
    return {
        Strategy.MERGE_LEAN: merge_sort_range,
        Strategy.RADIX_ELIGIBLE: radix_sort_range,
        Strategy.QUICK_DEFAULT: partial(quicksort_range, cutoff=thresholds.insertion_threshold),
    }


def backend_for(strategy: Strategy, thresholds: Thresholds = DEFAULT_THRESHOLDS) -> RangeSorter:
    """Return the range sorter that implements `strategy`."""
    return _backends(thresholds)[strategy]


def plan(a: MutableSequence[int], thresholds: Optional[Thresholds] = None) -> Plan:
    """Decide how `a` would be sorted, without touching it."""
    t = thresholds or DEFAULT_THRESHOLDS
    n = len(a)
    if n <= 1:
        return Plan(backend=None)
    if n < t.insertion_threshold:
        return Plan(backend=INSERTION)

    strategy = analyze(take_sample(a, t.sample_cap), t)
    if strategy is Strategy.RADIX_ELIGIBLE and n > t.sample_cap:
        if any(v < 0 for v in a):
            return Plan(
                backend=Strategy.QUICK_DEFAULT.value,
                strategy=strategy,
                radix_guarded=True,
            )
    return Plan(backend=strategy.value, strategy=strategy)


def sort(a: List[int], thresholds: Optional[Thresholds] = None) -> List[int]:
    """
    Sort `a` in place with the backend chosen by `plan` and return it.

    Raises
    ------
    SortAborted
        If the merge or radix backend cannot allocate a temporary buffer.
        The ordering of `a` is then not guaranteed.
    """
    t = thresholds or DEFAULT_THRESHOLDS
    p = plan(a, t)
    n = len(a)

    if p.backend is None:
        return a
    if p.backend == INSERTION:
        logger.debug("n=%d below insertion threshold %d; using insertion sort", n, t.insertion_threshold)
        insertion_sort_range(a, 0, n)
        return a

    effective = Strategy(p.backend)
    if p.radix_guarded:
        logger.warning(
            "sample of %d looked non-negative but n=%d contains negatives; "
            "falling back to quicksort instead of radix",
            min(n, t.sample_cap),
            n,
        )
    logger.debug("n=%d strategy=%s backend=%s", n, p.strategy.name, p.backend)
    backend_for(effective, t)(a, 0, n)
    return a
