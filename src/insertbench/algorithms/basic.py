"""
Basic insertion sort.

Every test of the inner walk is counted, including the one that stops it
(`a[j] <= key`), as long as it happens inside the `j >= 0` loop.
"""

from __future__ import annotations

from typing import MutableSequence

from insertbench.algorithms.counters import SortCounters

__all__ = ["sort"]


def sort(a: MutableSequence[int], counters: SortCounters) -> None:
    """Sort `a` in place, accumulating operation counts into `counters`."""
    n = len(a)
    if n <= 1:
        return

    for i in range(1, n):
        counters.iterations += 1
        key = a[i]
        counters.array_accesses += 1
        j = i - 1

        # Shift elements greater than key one slot to the right
        while j >= 0:
            counters.comparisons += 1
            counters.array_accesses += 1
            if a[j] > key:
                a[j + 1] = a[j]
                counters.swaps += 1
                counters.array_accesses += 1
                j -= 1
            else:
                break

        a[j + 1] = key
        counters.array_accesses += 1
