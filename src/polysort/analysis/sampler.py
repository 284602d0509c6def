"""Prefix sampling for the analysis engine."""

from __future__ import annotations

from typing import Sequence, Tuple

from polysort.config import SAMPLE_CAP

__all__ = ["take_sample"]


def take_sample(a: Sequence[int], cap: int = SAMPLE_CAP) -> Tuple[int, ...]:
    """
    Return the first min(len(a), cap) elements of `a` as an immutable tuple.

    Raises
    ------
    ValueError
        If `a` is empty or `cap` is not a positive integer.
    """
    if not isinstance(cap, int) or cap < 1:
        raise ValueError(f"cap must be an integer >= 1; got {cap!r}")
    n = len(a)
    if n == 0:
        raise ValueError("cannot sample an empty sequence")
    return tuple(a[: min(n, cap)])
