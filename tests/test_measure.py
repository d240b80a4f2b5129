"""Tests for the single-run timing harness."""

from __future__ import annotations

import gc

import pytest

from insertbench import InsertionSorter, InvalidArgumentError, SortCounters
from insertbench.bench.measure import time_variant_call


@pytest.mark.parametrize("warmup", [False, True])
@pytest.mark.parametrize("disable_gc", [False, True])
def test_ok_run(sorter: InsertionSorter, warmup: bool, disable_gc: bool) -> None:
    a = [5, 2, 4, 6, 1, 3]
    gc_was_enabled = gc.isenabled()

    res = time_variant_call(sorter=sorter, variant="basic", a=a, warmup=warmup, disable_gc=disable_gc)

    assert a == [5, 2, 4, 6, 1, 3], "the harness must sort a copy"
    assert res["status"] == "ok"
    assert res["error"] is None
    assert res["n"] == 6
    assert res["time_ns"] >= 0
    assert res["sorted_ok"] is True
    assert res["counters"] == {"comparisons": 12, "swaps": 9, "array_accesses": 31, "iterations": 5}
    assert gc.isenabled() == gc_was_enabled


def test_unknown_variant_is_reported_not_raised(sorter: InsertionSorter) -> None:
    res = time_variant_call(sorter=sorter, variant="bogo", a=[2, 1], warmup=False, disable_gc=False)
    assert res["status"] == "error"
    assert "Unsupported sort variant" in res["error"]
    assert res["time_ns"] is None


def test_none_input_raises(sorter: InsertionSorter) -> None:
    with pytest.raises(InvalidArgumentError):
        time_variant_call(sorter=sorter, variant="basic", a=None, warmup=False, disable_gc=False)


class _DroppingSorter:
    """Sorts, then overwrites the last slot with the first value."""

    def sort(self, variant, arr):
        arr.sort()
        arr[-1] = arr[0]
        return SortCounters()


def test_bad_output_reports_value_diff() -> None:
    res = time_variant_call(
        sorter=_DroppingSorter(), variant="basic", a=[3, 1, 2], warmup=False, disable_gc=False
    )
    assert res["status"] == "ok"
    assert res["sorted_ok"] is False
    assert res["value_diff"] == {3: 1, 1: -1}


def test_good_output_has_empty_value_diff(sorter: InsertionSorter) -> None:
    res = time_variant_call(sorter=sorter, variant="binary_search", a=[3, 1, 2, 1], warmup=False, disable_gc=False)
    assert res["sorted_ok"] is True
    assert res["value_diff"] == {}
