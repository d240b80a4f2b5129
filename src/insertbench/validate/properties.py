"""
Property helpers for checking sort results.

Used by the engine's `is_sorted`, by the benchmark harness to sanity-check
every run, and by the tests.

Public API (stable):
    is_nondecreasing(xs: Sequence[int]) -> bool
    first_nondecreasing_violation_index(xs: Sequence[int]) -> int | None
    is_permutation(a: Sequence[int], b: Sequence[int]) -> bool
    permutation_counter_diff(a: Sequence[int], b: Sequence[int]) -> dict[int, int]

Notes
-----
- Stability is not checked: equal integer keys are indistinguishable. The
  binary-search variant is not stable anyway (see binary_insertion).
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, Optional, Sequence

__all__ = [
    "is_nondecreasing",
    "first_nondecreasing_violation_index",
    "is_permutation",
    "permutation_counter_diff",
]


def is_nondecreasing(xs: Sequence[int]) -> bool:
    """Return True iff xs[i - 1] <= xs[i] for every adjacent pair."""
    return first_nondecreasing_violation_index(xs) is None


def first_nondecreasing_violation_index(xs: Sequence[int]) -> Optional[int]:
    """
    Return the first index i where xs[i] > xs[i + 1], or None if nondecreasing.

    Handy in assertion messages:
        i = first_nondecreasing_violation_index(out)
        assert i is None, f"out of order at i={i}: {out[i]} > {out[i + 1]}"
    """
    for i in range(1, len(xs)):
        if xs[i] < xs[i - 1]:
            return i - 1
    return None


def is_permutation(a: Sequence[int], b: Sequence[int]) -> bool:
    """Return True iff `a` and `b` hold the same multiset of values."""
    if len(a) != len(b):
        return False
    return Counter(a) == Counter(b)


def permutation_counter_diff(a: Sequence[int], b: Sequence[int]) -> Dict[int, int]:
    """
    Return value -> (count in a - count in b) for every value whose counts differ.

    An empty dict means `b` is a permutation of `a`.
    """
    diff = Counter(a)
    diff.subtract(Counter(b))
    return {k: d for k, d in diff.items() if d != 0}
