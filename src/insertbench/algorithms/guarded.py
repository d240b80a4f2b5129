"""
Guard-optimized insertion sort.

For inputs longer than `threshold` the minimum element is moved to index 0
first, so the inner walk can drop its `j >= 0` test: the walk always stops at
the guard. Inputs of `threshold` elements or fewer go through the basic
algorithm unchanged, counters included.

Accounting differences from the basic variant:
- the minimum scan counts one comparison per test and no array accesses;
- moving the minimum is a 3-assignment exchange: 3 swaps, 4 array accesses;
- each shift counts 1 comparison, 1 swap and 2 array accesses, and the
  failing test that ends the walk adds one more comparison.
"""

from __future__ import annotations

from typing import MutableSequence

from insertbench.algorithms import basic
from insertbench.algorithms.counters import SortCounters

# Inputs at or below this size are not worth the minimum scan.
GUARD_THRESHOLD: int = 10

__all__ = ["GUARD_THRESHOLD", "sort"]


def sort(
    a: MutableSequence[int],
    counters: SortCounters,
    threshold: int = GUARD_THRESHOLD,
) -> None:
    """
    Sort `a` in place with a guard element at index 0.

    Parameters
    ----------
    a : mutable sequence of int
        Sorted in place.
    counters : SortCounters
        Accumulator for this call.
    threshold : int
        Largest input size that is delegated to the basic algorithm.
    """
    n = len(a)
    if n <= 1:
        return

    if n <= threshold:
        basic.sort(a, counters)
        return

    min_index = 0
    for i in range(1, n):
        counters.comparisons += 1
        if a[i] < a[min_index]:
            min_index = i

    if min_index != 0:
        _exchange(a, 0, min_index, counters)

    # a[0] <= a[1] now holds, so the sorted prefix is [0, 1]
    for i in range(2, n):
        counters.iterations += 1
        key = a[i]
        counters.array_accesses += 1
        j = i - 1

        while a[j] > key:
            counters.comparisons += 1
            a[j + 1] = a[j]
            counters.swaps += 1
            counters.array_accesses += 2
            j -= 1
        counters.comparisons += 1  # the test that ended the walk

        a[j + 1] = key
        counters.array_accesses += 1


def _exchange(a: MutableSequence[int], i: int, j: int, counters: SortCounters) -> None:
    temp = a[i]
    a[i] = a[j]
    a[j] = temp
    counters.swaps += 3
    counters.array_accesses += 4
