"""
LSD radix sort for non-negative integers.

One stable counting-sort pass per decimal digit of the maximum value, least
significant digit first. O(d * n) where d is the digit count of the maximum.

Negative values are rejected with ValueError before any element moves; the
adaptive dispatcher never routes signed data here.
"""

from __future__ import annotations

from typing import Any, Dict, List, MutableSequence, Optional, Sequence

from polysort.errors import SortAborted

RADIX = 10

__all__ = ["RADIX", "radix_sort_range", "sort"]


def _new_buffer(size: int) -> List[int]:
    return [0] * size


def _max_non_negative(a: MutableSequence[int], lo: int, hi: int) -> int:
    biggest = a[lo]
    for k in range(lo, hi):
        v = a[k]
        if v < 0:
            raise ValueError(f"radix sort requires non-negative integers; got {v} at index {k}")
        if v > biggest:
            biggest = v
    return biggest


def _counting_pass(a: MutableSequence[int], lo: int, hi: int, exp: int) -> None:
    counts = [0] * RADIX
    for k in range(lo, hi):
        counts[(a[k] // exp) % RADIX] += 1
    for d in range(1, RADIX):
        counts[d] += counts[d - 1]

    try:
        output = _new_buffer(hi - lo)
    except MemoryError as e:
        raise SortAborted("radix", lo, hi, f"could not allocate pass buffer (exp={exp})") from e

    # Right-to-left keeps each pass stable.
    for k in range(hi - 1, lo - 1, -1):
        d = (a[k] // exp) % RADIX
        counts[d] -= 1
        output[counts[d]] = a[k]
    for k, v in enumerate(output, start=lo):
        a[k] = v


def radix_sort_range(a: MutableSequence[int], lo: int, hi: int) -> None:
    """Sort a[lo:hi] in place. All values in the range must be >= 0."""
    if hi - lo < 2:
        if hi - lo == 1 and a[lo] < 0:
            raise ValueError(f"radix sort requires non-negative integers; got {a[lo]} at index {lo}")
        return
    biggest = _max_non_negative(a, lo, hi)
    exp = 1
    while biggest // exp > 0:
        _counting_pass(a, lo, hi, exp)
        exp *= RADIX


def sort(a: Sequence[int], *, config: Optional[Dict[str, Any]] = None) -> List[int]:
    out = list(a)
    radix_sort_range(out, 0, len(out))
    return out
