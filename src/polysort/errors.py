"""Exceptions raised by polysort."""

from __future__ import annotations

__all__ = ["PolysortError", "SortAborted"]


class PolysortError(Exception):
    """Base class for polysort errors."""


class SortAborted(PolysortError, RuntimeError):
    """
    A backend could not finish sorting its range (e.g. a temporary buffer
    could not be allocated). The ordering of a[lo:hi] is not guaranteed.
    """

    def __init__(self, backend: str, lo: int, hi: int, reason: str) -> None:
        super().__init__(f"{backend} sort aborted on range [{lo}, {hi}): {reason}")
        self.backend = backend
        self.lo = lo
        self.hi = hi
