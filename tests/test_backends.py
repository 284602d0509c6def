"""
Range-level tests for the sorting backends.

Every backend sorts a[lo:hi] in place and leaves the rest of the list alone.
"""

from __future__ import annotations

from typing import List

import pytest

from polysort.algorithms import merge, radix
from polysort.algorithms.insertion import insertion_sort_range
from polysort.algorithms.merge import merge_sort_range
from polysort.algorithms.quicksort import quicksort_range
from polysort.algorithms.radix import radix_sort_range
from polysort.errors import PolysortError, SortAborted

RANGE_SORTERS = [insertion_sort_range, quicksort_range, merge_sort_range, radix_sort_range]


@pytest.mark.parametrize("sorter", RANGE_SORTERS)
def test_sorts_only_the_requested_range(sorter) -> None:
    a = [99, 98, 97] + [(i * 37) % 101 for i in range(50)] + [5, 4, 3]
    middle = sorted(a[3:53])
    sorter(a, 3, 53)
    assert a[:3] == [99, 98, 97]
    assert a[3:53] == middle
    assert a[53:] == [5, 4, 3]


@pytest.mark.parametrize("sorter", RANGE_SORTERS)
@pytest.mark.parametrize("lo,hi", [(0, 0), (2, 2), (1, 2)])
def test_empty_and_single_ranges_are_untouched(sorter, lo: int, hi: int) -> None:
    a = [3, 2, 1]
    sorter(a, lo, hi)
    assert a == [3, 2, 1]


def test_quicksort_on_long_sorted_input_has_bounded_stack() -> None:
    # Sorted input is Lomuto's worst case; recursion would overflow here.
    n = 5000
    a = list(range(n))
    quicksort_range(a, 0, n)
    assert a == list(range(n))


def test_quicksort_all_equal() -> None:
    a = [7] * 300
    quicksort_range(a, 0, len(a))
    assert a == [7] * 300


def test_radix_handles_zeros_and_wide_values() -> None:
    a = [0, 0, 10**12, 5, 0, 10**12 - 1]
    radix_sort_range(a, 0, len(a))
    assert a == [0, 0, 0, 5, 10**12 - 1, 10**12]


@pytest.mark.parametrize("a", [[3, -1, 2], [-4]])
def test_radix_rejects_negatives_without_moving_anything(a: List[int]) -> None:
    before = list(a)
    with pytest.raises(ValueError, match="non-negative"):
        radix_sort_range(a, 0, len(a))
    assert a == before


def test_merge_allocation_failure_aborts(monkeypatch) -> None:
    def _no_memory(a, lo, hi):
        raise MemoryError

    monkeypatch.setattr(merge, "_copy_out", _no_memory)
    a = [4, 3, 2, 1]
    with pytest.raises(SortAborted) as info:
        merge_sort_range(a, 0, len(a))
    err = info.value
    assert err.backend == "merge"
    assert isinstance(err.__cause__, MemoryError)
    assert isinstance(err, PolysortError)
    assert sorted(a) == [1, 2, 3, 4]


def test_radix_allocation_failure_aborts(monkeypatch) -> None:
    def _no_memory(size):
        raise MemoryError

    monkeypatch.setattr(radix, "_new_buffer", _no_memory)
    a = [30, 20, 10]
    with pytest.raises(SortAborted) as info:
        radix_sort_range(a, 0, len(a))
    assert info.value.backend == "radix"
    assert (info.value.lo, info.value.hi) == (0, 3)
    assert a == [30, 20, 10]


def test_allocation_failure_propagates_through_dispatcher(monkeypatch) -> None:
    import polysort

    def _no_memory(a, lo, hi):
        raise MemoryError

    monkeypatch.setattr(merge, "_copy_out", _no_memory)
    a = list(range(-20, 20))
    a[0], a[1] = a[1], a[0]
    with pytest.raises(SortAborted):
        polysort.sort(a)
