"""
Insertion sort with a binary-searched insertion point.

The search over the sorted prefix returns `mid + 1` as soon as it probes an
element equal to the key, i.e. the key goes right after whichever equal
element the bisection happens to hit first (not necessarily the leftmost or
rightmost one). Counter values depend on this rule, so keep it.
"""

from __future__ import annotations

from typing import MutableSequence

from insertbench.algorithms.counters import SortCounters

__all__ = ["sort", "insertion_position"]


def sort(a: MutableSequence[int], counters: SortCounters) -> None:
    """Sort `a` in place, accumulating operation counts into `counters`."""
    n = len(a)
    if n <= 1:
        return

    for i in range(1, n):
        counters.iterations += 1
        key = a[i]
        counters.array_accesses += 1

        pos = insertion_position(a, 0, i - 1, key, counters)

        for j in range(i - 1, pos - 1, -1):
            a[j + 1] = a[j]
            counters.swaps += 1
            counters.array_accesses += 2

        a[pos] = key
        counters.array_accesses += 1


def insertion_position(
    a: MutableSequence[int],
    left: int,
    right: int,
    key: int,
    counters: SortCounters,
) -> int:
    """
    Return where `key` belongs in the sorted slice `a[left:right + 1]`.

    Each probe counts one comparison and one array access.
    """
    while left <= right:
        mid = left + (right - left) // 2
        counters.comparisons += 1
        counters.array_accesses += 1

        probe = a[mid]
        if probe == key:
            return mid + 1
        if probe < key:
            left = mid + 1
        else:
            right = mid - 1
    return left
