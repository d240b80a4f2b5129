"""
insertbench: instrumented insertion-sort benchmarks.

    from insertbench import InsertionSorter
    sorter = InsertionSorter()
    counters = sorter.sort_optimized(data)
"""

from .algorithms import GUARD_THRESHOLD, SortCounters
from .engine import (
    SUPPORTED_VARIANTS,
    InsertionSorter,
    default_sorter,
    is_sorted,
    sort_basic,
    sort_optimized,
    sort_with_binary_search,
)
from .errors import InvalidArgumentError
from .metrics import MetricsStore, global_store

__version__ = "0.1.0"

__all__ = [
    "GUARD_THRESHOLD",
    "SUPPORTED_VARIANTS",
    "InsertionSorter",
    "InvalidArgumentError",
    "MetricsStore",
    "SortCounters",
    "default_sorter",
    "global_store",
    "is_sorted",
    "sort_basic",
    "sort_optimized",
    "sort_with_binary_search",
]
