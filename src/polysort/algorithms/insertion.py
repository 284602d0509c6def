"""
Bounded insertion sort.

O(n^2) worst/average, O(n) on already-sorted input. Used on its own for small
inputs and as the base case of the quicksort backend.
"""

from __future__ import annotations

from typing import Any, Dict, List, MutableSequence, Optional, Sequence

__all__ = ["insertion_sort_range", "sort"]


def insertion_sort_range(a: MutableSequence[int], lo: int, hi: int) -> None:
    """Sort a[lo:hi] in place."""
    for i in range(lo + 1, hi):
        v = a[i]
        j = i - 1
        while j >= lo and a[j] > v:
            a[j + 1] = a[j]
            j -= 1
        a[j + 1] = v


def sort(a: Sequence[int], *, config: Optional[Dict[str, Any]] = None) -> List[int]:
    """Return a sorted copy of `a`; `config` is accepted for API symmetry and unused."""
    out = list(a)
    insertion_sort_range(out, 0, len(out))
    return out
