"""
Tests for the sampler and the heuristic analysis engine.
"""

from __future__ import annotations

from typing import List

import pytest
from hypothesis import given, settings, strategies as st

from polysort.analysis import Strategy, analyze, profile_sample, take_sample
from polysort.config import DEFAULT_THRESHOLDS, SAMPLE_CAP, Thresholds


# ------------------------- sampler ------------------------- #

def test_sample_is_capped_prefix() -> None:
    a = list(range(250))
    s = take_sample(a)
    assert s == tuple(range(SAMPLE_CAP))
    assert isinstance(s, tuple)


def test_sample_shorter_than_cap_takes_everything() -> None:
    assert take_sample([3, 1, 2], cap=100) == (3, 1, 2)


def test_sample_does_not_alias_input() -> None:
    a = [5, 4, 3]
    s = take_sample(a)
    a[0] = 99
    assert s == (5, 4, 3)


def test_sample_of_empty_sequence_rejected() -> None:
    with pytest.raises(ValueError):
        take_sample([])


@pytest.mark.parametrize("cap", [0, -1, 2.5])
def test_sample_rejects_bad_cap(cap) -> None:
    with pytest.raises(ValueError):
        take_sample([1, 2, 3], cap=cap)


# ------------------------- heuristics ------------------------- #

def _scenario_c() -> List[int]:
    # 40 non-negative values, distinct, about 2/3 ascending pairs.
    return [(i * 37) % 101 for i in range(40)]


def test_scenario_c_radix_eligible() -> None:
    a = _scenario_c()
    prof = profile_sample(a)
    assert prof.ascending_ratio < DEFAULT_THRESHOLDS.nearly_sorted_ratio
    assert prof.unique_ratio == 1.0
    assert analyze(take_sample(a)) is Strategy.RADIX_ELIGIBLE


def test_scenario_d_nearly_sorted_wins_over_sign() -> None:
    a = list(range(-20, 20))
    a[5], a[30] = a[30], a[5]
    assert profile_sample(a).has_negative
    assert analyze(take_sample(a)) is Strategy.MERGE_LEAN


def test_nearly_sorted_with_duplicates_is_merge() -> None:
    a = sorted([-3, -3, -3, 1, 1, 1] * 7)
    assert analyze(a) is Strategy.MERGE_LEAN


def test_threshold_is_inclusive() -> None:
    # 17 of 20 pairs ascending = 0.85 exactly.
    a = list(range(21))
    for i in (3, 9, 15):
        a[i], a[i + 1] = a[i + 1], a[i]
    a = [v - 100 for v in a]
    assert profile_sample(a).ascending_ratio == pytest.approx(17 / 20)
    assert analyze(a) is Strategy.MERGE_LEAN


def test_negatives_high_cardinality_is_quicksort() -> None:
    a = [(-1) ** i * i for i in range(60)]
    assert analyze(a) is Strategy.QUICK_DEFAULT


def test_negatives_low_cardinality_is_quicksort() -> None:
    a = [-1, 5, -1, 5, 3, -1] * 10
    prof = profile_sample(a)
    assert prof.unique_ratio <= DEFAULT_THRESHOLDS.low_cardinality_ratio
    assert analyze(a) is Strategy.QUICK_DEFAULT


def test_negative_in_last_sampled_position_counts() -> None:
    a = [9, 2, 8, 1, 7, 3, 6, 0, 5, -4]
    assert profile_sample(a).has_negative
    assert analyze(a) is Strategy.QUICK_DEFAULT


def test_single_element_sample_skips_sortedness() -> None:
    assert profile_sample([7]).ascending_ratio is None
    assert analyze([7]) is Strategy.RADIX_ELIGIBLE
    assert analyze([-7]) is Strategy.QUICK_DEFAULT


def test_two_element_sample() -> None:
    assert analyze([-2, -1]) is Strategy.MERGE_LEAN
    assert analyze([-1, -2]) is Strategy.QUICK_DEFAULT
    assert analyze([5, 1]) is Strategy.RADIX_ELIGIBLE


def test_empty_sample_rejected() -> None:
    with pytest.raises(ValueError):
        analyze([])
    with pytest.raises(ValueError):
        profile_sample(())


def test_injected_ratio_changes_decision() -> None:
    a = _scenario_c()
    lax = Thresholds(nearly_sorted_ratio=0.5)
    assert analyze(a, lax) is Strategy.MERGE_LEAN
    assert analyze(a, DEFAULT_THRESHOLDS) is Strategy.RADIX_ELIGIBLE


def test_profile_reports_all_statistics() -> None:
    prof = profile_sample([3, 3, -1, 4])
    assert prof.size == 4
    assert prof.ascending_ratio == pytest.approx(2 / 3)
    assert prof.has_negative is True
    assert prof.unique_ratio == pytest.approx(3 / 4)


# ------------------------- determinism ------------------------- #

@settings(deadline=None, max_examples=100)
@given(
    sample=st.lists(st.integers(min_value=-1000, max_value=1000), min_size=1, max_size=SAMPLE_CAP),
    tail=st.lists(st.integers(min_value=-1000, max_value=1000), max_size=50),
)
def test_strategy_depends_only_on_sample(sample: List[int], tail: List[int]) -> None:
    first = analyze(take_sample(sample + tail, cap=len(sample)))
    second = analyze(tuple(sample))
    assert first is second
    assert analyze(sample) is first
