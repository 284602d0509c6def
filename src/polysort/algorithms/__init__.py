"""
Sorting backends.

Each module exposes two entry points:
    <name>_sort_range(a, lo, hi)              # sort a[lo:hi] in place
    sort(a, *, config=None) -> list[int]      # benchmark API: sorted copy, input untouched

`adaptive` wraps the dispatcher with the same benchmark API.
"""

ALGORITHMS = ("adaptive", "insertion", "quicksort", "merge", "radix")

__all__ = ["ALGORITHMS"]
