"""
Ground-truth checking against Python's built-in `sorted()`.

Public API (stable):
    ORACLE_NAME
    oracle_sort(a) -> list[int]
    explain_mismatch(a, out) -> str | None
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from .properties import first_violation, multiset_diff

ORACLE_NAME: str = "python_sorted_timsort"

__all__ = ["ORACLE_NAME", "oracle_sort", "explain_mismatch"]


def oracle_sort(a: Sequence[int]) -> List[int]:
    """Return a new sorted list; `a` is not mutated."""
    return sorted(a)


def explain_mismatch(a: Sequence[int], out: Sequence[int]) -> Optional[str]:
    """
    Compare `out` with the oracle result for input `a`.

    Returns None when they match, otherwise a short human-readable reason
    (lost/duplicated values first, then the first out-of-order position).
    """
    if list(out) == oracle_sort(a):
        return None
    if len(out) != len(a):
        return f"length changed from {len(a)} to {len(out)}"
    diff = multiset_diff(out, a)
    if diff:
        shown = dict(sorted(diff.items())[:5])
        return f"not a permutation of the input (count diffs: {shown})"
    i = first_violation(out)
    return f"not nondecreasing at i={i}: {out[i]} > {out[i + 1]}"
