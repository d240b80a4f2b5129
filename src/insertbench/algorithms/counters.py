"""
Per-call operation counters.

A fresh `SortCounters` is created for every sort call and passed to the
algorithm, which increments it in place. The caller owns the result; nothing
is shared between calls.

Counter names double as the suffixes of the mirrored Metrics Store keys:
    <prefix>_comparisons, <prefix>_swaps, <prefix>_array_accesses, <prefix>_iterations
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

COUNTER_NAMES: Tuple[str, ...] = ("comparisons", "swaps", "array_accesses", "iterations")

__all__ = ["COUNTER_NAMES", "SortCounters"]


@dataclass
class SortCounters:
    comparisons: int = 0
    swaps: int = 0
    array_accesses: int = 0
    iterations: int = 0

    def as_dict(self) -> Dict[str, int]:
        """Return the counters keyed by their names, in `COUNTER_NAMES` order."""
        return {name: getattr(self, name) for name in COUNTER_NAMES}

    def copy(self) -> "SortCounters":
        return SortCounters(**self.as_dict())
