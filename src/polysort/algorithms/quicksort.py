"""
Partition-exchange sort (quicksort).

Lomuto partition with the last element of each partition as pivot. Partitions
smaller than `cutoff` are finished with insertion sort. Pending partitions
live on an explicit work stack instead of the call stack, so already-sorted
input degrades to O(n^2) time but never to O(n) recursion depth.

Config (benchmark API):
    {"cutoff": 32}   # optional; defaults to INSERTION_THRESHOLD
"""

from __future__ import annotations

from typing import Any, Dict, List, MutableSequence, Optional, Sequence, Tuple

from polysort.algorithms.insertion import insertion_sort_range
from polysort.config import INSERTION_THRESHOLD

__all__ = ["quicksort_range", "sort"]


def _partition(a: MutableSequence[int], lo: int, hi: int) -> int:
    pivot = a[hi - 1]
    i = lo
    for j in range(lo, hi - 1):
        if a[j] < pivot:
            a[i], a[j] = a[j], a[i]
            i += 1
    a[i], a[hi - 1] = a[hi - 1], a[i]
    return i


def quicksort_range(
    a: MutableSequence[int], lo: int, hi: int, cutoff: int = INSERTION_THRESHOLD
) -> None:
    """Sort a[lo:hi] in place."""
    stack: List[Tuple[int, int]] = [(lo, hi)]
    while stack:
        lo, hi = stack.pop()
        size = hi - lo
        if size < 2:
            continue
        if size < cutoff:
            insertion_sort_range(a, lo, hi)
            continue
        p = _partition(a, lo, hi)
        # Larger side goes on the stack first; the smaller one is popped next.
        if p - lo > hi - (p + 1):
            stack.append((lo, p))
            stack.append((p + 1, hi))
        else:
            stack.append((p + 1, hi))
            stack.append((lo, p))


def sort(a: Sequence[int], *, config: Optional[Dict[str, Any]] = None) -> List[int]:
    """Return a sorted copy of `a`."""
    config = config or {}
    cutoff = config.get("cutoff", INSERTION_THRESHOLD)
    if not isinstance(cutoff, int) or cutoff < 1:
        raise ValueError(f"quicksort.config.cutoff must be an integer >= 1; got {cutoff!r}")
    out = list(a)
    quicksort_range(out, 0, len(out), cutoff=cutoff)
    return out
