"""
Instrumented insertion-sort engine.

Wraps the three algorithm variants with the per-call protocol:

    validate -> fresh counters -> clear store -> start timer -> sort
             -> stop timer -> mirror counters into the store

Public API (stable):
    InsertionSorter
    SUPPORTED_VARIANTS
    sort_basic(array), sort_optimized(array), sort_with_binary_search(array)
    is_sorted(array)

The module-level functions use `default_sorter`, which writes to the
process-wide `insertbench.metrics.global_store`.

Variant table:
    variant          timer name            store key prefix
    basic            basic_sort            basic
    optimized        optimized_sort        optimized
    binary_search    binary_search_sort    binary_search
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, MutableSequence, Optional, Sequence

from insertbench.algorithms import GUARD_THRESHOLD, SortCounters, basic, binary_insertion, guarded
from insertbench.errors import InvalidArgumentError
from insertbench.metrics import MetricsStore, global_store
from insertbench.validate import is_nondecreasing

logger = logging.getLogger(__name__)

__all__ = [
    "SUPPORTED_VARIANTS",
    "InsertionSorter",
    "default_sorter",
    "sort_basic",
    "sort_optimized",
    "sort_with_binary_search",
    "is_sorted",
]


@dataclass(frozen=True)
class _Variant:
    timer_name: str
    prefix: str


_VARIANTS: Dict[str, _Variant] = {
    "basic": _Variant(timer_name="basic_sort", prefix="basic"),
    "optimized": _Variant(timer_name="optimized_sort", prefix="optimized"),
    "binary_search": _Variant(timer_name="binary_search_sort", prefix="binary_search"),
}

SUPPORTED_VARIANTS = frozenset(_VARIANTS)


class InsertionSorter:
    """
    Runs insertion-sort variants and records their operation counts.

    Every call returns its own `SortCounters`; the sorter also keeps the
    counters of its last completed call, readable through `comparisons`,
    `swaps`, `array_accesses`, `iterations` and `last_counters`.

    Parameters
    ----------
    store : MetricsStore, optional
        Where timings and counters are mirrored. Defaults to `global_store`.
    guard_threshold : int
        Inputs of this size or smaller make `sort_optimized` fall back to the
        basic algorithm.
    reset_store : bool
        Clear the store at the start of every sort call.
    """

    def __init__(
        self,
        store: Optional[MetricsStore] = None,
        guard_threshold: int = GUARD_THRESHOLD,
        reset_store: bool = True,
    ) -> None:
        if guard_threshold < 0:
            raise ValueError("guard_threshold must be nonnegative")
        self.store = store if store is not None else global_store
        self.guard_threshold = guard_threshold
        self.reset_store = reset_store
        self._last = SortCounters()
        self._algorithms: Dict[str, Callable[[MutableSequence[int], SortCounters], None]] = {
            "basic": basic.sort,
            "optimized": self._guarded_sort,
            "binary_search": binary_insertion.sort,
        }

    # ------------------------- entry points ------------------------- #

    def sort_basic(self, array: Optional[MutableSequence[int]]) -> SortCounters:
        return self._run("basic", array)

    def sort_optimized(self, array: Optional[MutableSequence[int]]) -> SortCounters:
        return self._run("optimized", array)

    def sort_with_binary_search(self, array: Optional[MutableSequence[int]]) -> SortCounters:
        return self._run("binary_search", array)

    def sort(self, variant: str, array: Optional[MutableSequence[int]]) -> SortCounters:
        """Run the variant named `variant` ("basic", "optimized" or "binary_search")."""
        if variant not in _VARIANTS:
            raise ValueError(
                f"Unsupported sort variant: {variant!r}. Supported: {sorted(SUPPORTED_VARIANTS)}"
            )
        return self._run(variant, array)

    @staticmethod
    def is_sorted(array: Optional[Sequence[int]]) -> bool:
        if array is None:
            return True
        return is_nondecreasing(array)

    # ------------------------- last-call counters ------------------------- #

    @property
    def comparisons(self) -> int:
        return self._last.comparisons

    @property
    def swaps(self) -> int:
        return self._last.swaps

    @property
    def array_accesses(self) -> int:
        return self._last.array_accesses

    @property
    def iterations(self) -> int:
        return self._last.iterations

    @property
    def last_counters(self) -> SortCounters:
        return self._last.copy()

    # ------------------------- internals ------------------------- #

    def _guarded_sort(self, array: MutableSequence[int], counters: SortCounters) -> None:
        guarded.sort(array, counters, threshold=self.guard_threshold)

    def _run(self, variant: str, array: Optional[MutableSequence[int]]) -> SortCounters:
        if array is None:
            raise InvalidArgumentError("array cannot be None")

        spec = _VARIANTS[variant]
        counters = SortCounters()
        if self.reset_store:
            self.store.reset()

        self.store.start_timer()
        self._algorithms[variant](array, counters)
        elapsed_ns = self.store.stop_timer(spec.timer_name)

        self.store.save_counters(spec.prefix, counters)
        self._last = counters
        logger.debug(
            "%s sort n=%d in %d ns: %s", variant, len(array), elapsed_ns, counters.as_dict()
        )
        return counters.copy()


default_sorter = InsertionSorter()

sort_basic = default_sorter.sort_basic
sort_optimized = default_sorter.sort_optimized
sort_with_binary_search = default_sorter.sort_with_binary_search
is_sorted = InsertionSorter.is_sorted
