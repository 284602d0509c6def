"""
Tests for the dataset generators.
"""

from __future__ import annotations

import numpy as np
import pytest

import polysort
from polysort.datasets import SUPPORTED_DISTS, make_dataset


def _rng(seed: int = 0) -> np.random.Generator:
    return np.random.default_rng(seed)


SPECS = {
    "random": {"dist": "random", "params": {"range": [-50, 50]}},
    "nearly_sorted": {"dist": "nearly_sorted", "params": {"swap_frac": 0.02}},
    "few_uniques": {"dist": "few_uniques", "params": {"k": 4, "range": [0, 1000]}},
    "small_range": {"dist": "small_range", "params": {}},
    "reversed": {"dist": "reversed"},
    "negative_tail": {"dist": "negative_tail", "params": {"prefix": 100, "range": [-10, 10]}},
}


def test_every_supported_dist_has_a_spec() -> None:
    assert set(SPECS) == set(SUPPORTED_DISTS)


@pytest.mark.parametrize("dist", sorted(SPECS))
def test_length_and_plain_ints(dist: str) -> None:
    out = make_dataset(300, SPECS[dist], _rng())
    assert len(out) == 300
    assert all(type(v) is int for v in out)


@pytest.mark.parametrize("dist", sorted(SPECS))
def test_empty(dist: str) -> None:
    assert make_dataset(0, SPECS[dist], _rng()) == []


@pytest.mark.parametrize("dist", sorted(SPECS))
def test_same_seed_same_data(dist: str) -> None:
    assert make_dataset(200, SPECS[dist], _rng(42)) == make_dataset(200, SPECS[dist], _rng(42))


def test_random_range_is_inclusive() -> None:
    out = make_dataset(2000, {"dist": "random", "params": {"range": [0, 1]}}, _rng())
    assert set(out) == {0, 1}


def test_nearly_sorted_is_permutation_of_range() -> None:
    out = make_dataset(500, SPECS["nearly_sorted"], _rng())
    assert sorted(out) == list(range(500))


def test_few_uniques_respects_k() -> None:
    out = make_dataset(1000, SPECS["few_uniques"], _rng())
    assert len(set(out)) <= 4


def test_small_range_defaults_to_bytes() -> None:
    out = make_dataset(1000, SPECS["small_range"], _rng())
    assert min(out) >= 0 and max(out) <= 255


def test_reversed() -> None:
    assert make_dataset(5, SPECS["reversed"], _rng()) == [4, 3, 2, 1, 0]


def test_negative_tail_shape() -> None:
    out = make_dataset(400, SPECS["negative_tail"], _rng())
    assert min(out[:100]) >= 0
    assert min(out[100:]) < 0


def test_negative_tail_fools_the_sample_but_not_the_sorter() -> None:
    out = make_dataset(400, SPECS["negative_tail"], _rng(3))
    p = polysort.plan(out)
    assert p.radix_guarded
    assert polysort.sort(list(out)) == sorted(out)


@pytest.mark.parametrize(
    "n,spec",
    [
        (-1, SPECS["random"]),
        (10, {"dist": "zipf"}),
        (10, "random"),
        (10, {"dist": "random", "params": {}}),
        (10, {"dist": "random", "params": {"range": [5, 1]}}),
        (10, {"dist": "nearly_sorted", "params": {"swap_frac": 1.5}}),
        (10, {"dist": "few_uniques", "params": {"k": 0}}),
        (10, {"dist": "negative_tail", "params": {"range": [0, 10]}}),
    ],
)
def test_invalid_inputs_raise(n, spec) -> None:
    with pytest.raises(ValueError):
        make_dataset(n, spec, _rng())
