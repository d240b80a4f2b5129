"""Tests for dataset generation."""

from __future__ import annotations

import numpy as np
import pytest

from insertbench.datasets import SUPPORTED_DISTS, make_dataset, resolve_params
from insertbench.validate import is_permutation


def _rng(seed: int = 42) -> np.random.Generator:
    return np.random.default_rng(seed)


def test_sorted_and_reversed() -> None:
    assert make_dataset(5, "sorted", _rng()) == [0, 1, 2, 3, 4]
    assert make_dataset(5, "reverse_sorted", _rng()) == [4, 3, 2, 1, 0]


@pytest.mark.parametrize("dist", sorted(SUPPORTED_DISTS))
def test_empty(dist: str) -> None:
    assert make_dataset(0, dist, _rng()) == []


def test_random_range_and_type() -> None:
    a = make_dataset(500, "random", _rng())
    assert len(a) == 500
    assert all(type(x) is int for x in a)
    assert min(a) >= 0
    assert max(a) < 5000


def test_random_value_factor() -> None:
    a = make_dataset(100, "random", _rng(), {"value_factor": 1})
    assert max(a) < 100


def test_random_is_reproducible_for_a_seed() -> None:
    assert make_dataset(200, "random", _rng(42)) == make_dataset(200, "random", _rng(42))
    assert make_dataset(200, "random", _rng(42)) != make_dataset(200, "random", _rng(43))


def test_nearly_sorted_is_a_permutation_with_few_swaps() -> None:
    n = 1000
    a = make_dataset(n, "nearly_sorted", _rng())
    assert is_permutation(a, list(range(n)))
    displaced = sum(1 for i, x in enumerate(a) if x != i)
    # 50 swaps move at most 100 elements
    assert 0 < displaced <= 2 * (n // 20)
    assert a == make_dataset(n, "nearly_sorted", _rng())


def test_nearly_sorted_small_inputs_stay_sorted() -> None:
    # n // 20 == 0 swaps
    assert make_dataset(19, "nearly_sorted", _rng()) == list(range(19))


def test_nearly_sorted_swap_divisor() -> None:
    a = make_dataset(10, "nearly_sorted", _rng(), {"swap_divisor": 1})
    assert is_permutation(a, list(range(10)))


@pytest.mark.parametrize(
    "n, dist, params",
    [
        (-1, "sorted", None),
        (1.5, "sorted", None),
        (10, "bogus", None),
        (10, "random", {"value_factor": 0}),
        (10, "nearly_sorted", {"swap_divisor": "x"}),
        (10, "random", ["not", "a", "dict"]),
        (10, "random", {"swap_divisor": 2}),
        (10, "reverse_sorted", {"value_factor": 2}),
    ],
)
def test_invalid_inputs(n, dist, params) -> None:
    with pytest.raises(ValueError):
        make_dataset(n, dist, _rng(), params)


def test_resolve_params_fills_defaults() -> None:
    assert resolve_params("random") == {"value_factor": 10}
    assert resolve_params("nearly_sorted", {"swap_divisor": 4}) == {"swap_divisor": 4}
    assert resolve_params("sorted", {}) == {}
