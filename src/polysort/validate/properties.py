"""
Property checks for sort results.

Public API (stable):
    is_nondecreasing(xs) -> bool
    first_violation(xs) -> int | None
    is_permutation(a, b) -> bool
    multiset_diff(a, b) -> dict[int, int]

Stability is not checked: equal integers are indistinguishable, and no
backend here promises it.
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, Optional, Sequence

__all__ = ["is_nondecreasing", "first_violation", "is_permutation", "multiset_diff"]


def first_violation(xs: Sequence[int]) -> Optional[int]:
    """Return the first i with xs[i] > xs[i+1], or None if xs is nondecreasing."""
    for i in range(len(xs) - 1):
        if xs[i] > xs[i + 1]:
            return i
    return None


def is_nondecreasing(xs: Sequence[int]) -> bool:
    return first_violation(xs) is None


def multiset_diff(a: Sequence[int], b: Sequence[int]) -> Dict[int, int]:
    """
    Map value -> count_in_a - count_in_b for every value whose counts differ.
    Empty means `a` and `b` hold the same multiset.
    """
    diff = Counter(a)
    diff.subtract(Counter(b))
    return {k: d for k, d in diff.items() if d != 0}


def is_permutation(a: Sequence[int], b: Sequence[int]) -> bool:
    return len(a) == len(b) and not multiset_diff(a, b)
