"""
Top-down merge sort.

Each merge step copies its two halves into temporary buffers and merges them
back into the range. O(n log n) in all cases; not in place. Buffers are local
to one merge step, so live temporary storage never exceeds O(n).

If a buffer cannot be allocated the sort is abandoned with `SortAborted`;
the range is then left partially merged.
"""

from __future__ import annotations

from typing import Any, Dict, List, MutableSequence, Optional, Sequence

from polysort.errors import SortAborted

__all__ = ["merge_sort_range", "sort"]


def _copy_out(a: MutableSequence[int], lo: int, hi: int) -> List[int]:
    return [a[k] for k in range(lo, hi)]


def _merge(a: MutableSequence[int], lo: int, mid: int, hi: int) -> None:
    try:
        left = _copy_out(a, lo, mid)
        right = _copy_out(a, mid, hi)
    except MemoryError as e:
        raise SortAborted("merge", lo, hi, "could not allocate merge buffers") from e

    i = j = 0
    k = lo
    n1, n2 = len(left), len(right)
    while i < n1 and j < n2:
        if left[i] <= right[j]:
            a[k] = left[i]
            i += 1
        else:
            a[k] = right[j]
            j += 1
        k += 1
    while i < n1:
        a[k] = left[i]
        i += 1
        k += 1
    while j < n2:
        a[k] = right[j]
        j += 1
        k += 1


def merge_sort_range(a: MutableSequence[int], lo: int, hi: int) -> None:
    """Sort a[lo:hi] in place (using temporary buffers)."""
    if hi - lo < 2:
        return
    mid = lo + (hi - lo) // 2
    merge_sort_range(a, lo, mid)
    merge_sort_range(a, mid, hi)
    _merge(a, lo, mid, hi)


def sort(a: Sequence[int], *, config: Optional[Dict[str, Any]] = None) -> List[int]:
    out = list(a)
    merge_sort_range(out, 0, len(out))
    return out
