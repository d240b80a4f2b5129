"""
Algorithms package public API.

Each variant module exposes `sort(a, counters, ...)`, which sorts `a` in place
and increments the caller's `SortCounters`:
    from insertbench.algorithms import basic, guarded, binary_insertion
"""

from . import basic, binary_insertion, guarded
from .counters import COUNTER_NAMES, SortCounters
from .guarded import GUARD_THRESHOLD

__all__ = [
    "basic",
    "guarded",
    "binary_insertion",
    "COUNTER_NAMES",
    "SortCounters",
    "GUARD_THRESHOLD",
]
