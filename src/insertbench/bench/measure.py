"""
Timing harness for one instrumented sort run.

We measure exactly one call to `sorter.sort(variant, arr)` using a monotonic
high-resolution clock. Copying the input, GC handling, the optional warmup and
the result checks all happen outside the timed block.

Public API (stable):
    time_variant_call(...) -> dict

Returned dict schema:
    {
        "variant": str,
        "n": int,
        "time_ns": int | None,        # elapsed ns of the timed call
        "counters": dict | None,      # SortCounters.as_dict() of the timed call
        "sorted_ok": bool | None,     # output nondecreasing and a permutation of the input
        "value_diff": dict,           # value -> (count in input - count in output); empty when ok
        "status": "ok" | "error",
        "error": str | None,          # populated if status == "error"
    }
"""

from __future__ import annotations

import gc
import time
from typing import Any, Dict, List

from insertbench.engine import InsertionSorter
from insertbench.errors import InvalidArgumentError
from insertbench.validate import is_nondecreasing, is_permutation, permutation_counter_diff

__all__ = ["time_variant_call"]


def time_variant_call(
    *,
    sorter: InsertionSorter,
    variant: str,
    a: List[int],
    warmup: bool,
    disable_gc: bool,
) -> Dict[str, Any]:
    """
    Time one call of `variant` on a copy of `a`.

    Parameters
    ----------
    sorter : InsertionSorter
        Engine that runs the variant and records its counters.
    variant : str
        "basic", "optimized" or "binary_search".
    a : list[int]
        Input data. Never mutated; every call sorts its own copy.
    warmup : bool
        If True, make one untimed call on a separate copy first.
    disable_gc : bool
        If True, collect and disable Python GC around the timed call; restore afterward.

    Returns
    -------
    dict
        See module docstring for exact schema.

    Raises
    ------
    InvalidArgumentError
        If `a` is None.
    """
    if a is None:
        raise InvalidArgumentError("a cannot be None")

    result: Dict[str, Any] = {
        "variant": variant,
        "n": len(a),
        "time_ns": None,
        "counters": None,
        "sorted_ok": None,
        "value_diff": {},
        "status": "ok",
        "error": None,
    }

    # ---- Warmup (outside GC disable & outside timed block) ----
    if warmup:
        try:
            sorter.sort(variant, list(a))
        except Exception as e:
            result["status"] = "error"
            result["error"] = f"warmup failed: {e!r}"
            return result

    prev_gc_enabled = gc.isenabled()
    try:
        if disable_gc:
            gc.collect()
            gc.disable()

        arg = list(a)
        try:
            t0 = time.perf_counter_ns()
            counters = sorter.sort(variant, arg)
            t1 = time.perf_counter_ns()
        except Exception as e:
            result["status"] = "error"
            result["error"] = f"run failed: {e!r}"
            return result

    finally:
        # Restore original GC state
        if disable_gc and prev_gc_enabled:
            gc.enable()

    result["time_ns"] = int(t1 - t0)
    result["counters"] = counters.as_dict()
    result["sorted_ok"] = is_nondecreasing(arg) and is_permutation(a, arg)
    if not result["sorted_ok"]:
        result["value_diff"] = permutation_counter_diff(a, arg)
    return result
