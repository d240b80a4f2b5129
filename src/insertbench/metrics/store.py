"""
Process-wide named-value store with a single start/stop timer.

The sort engine clears the store, times its algorithm with
`start_timer()` / `stop_timer(name)` and mirrors its counters into it, so
runs can be inspected through a generic key/value interface.

Public API (stable):
    MetricsStore
    global_store          # the process-wide instance used by default

Key conventions:
    "<op>_time_ns", "<op>_time_ms"   written by stop_timer(op)
    "<prefix>_<counter>"             written by save_counters(prefix, counters)

Notes
-----
- One timer per store; a second start_timer() overwrites the first.
- No locking. Share a store between threads at your own risk; give each
  thread its own store instead.
"""

from __future__ import annotations

import time
from typing import Callable, Dict, Optional

from insertbench.algorithms.counters import COUNTER_NAMES, SortCounters

__all__ = ["MetricsStore", "global_store"]


class MetricsStore:
    def __init__(self, clock: Callable[[], int] = time.perf_counter_ns) -> None:
        self._clock = clock
        self._metrics: Dict[str, int] = {}
        self._start_ns: Optional[int] = None

    # ------------------------- timer ------------------------- #

    def start_timer(self) -> None:
        self._start_ns = self._clock()

    def stop_timer(self, name: str) -> int:
        """
        Record the time elapsed since the last `start_timer()`.

        Writes `<name>_time_ns` and the truncated `<name>_time_ms` and returns
        the elapsed nanoseconds.

        Raises
        ------
        RuntimeError
            If the timer was never started.
        """
        end_ns = self._clock()
        if self._start_ns is None:
            raise RuntimeError("stop_timer() called before start_timer()")
        elapsed = end_ns - self._start_ns
        self._metrics[f"{name}_time_ns"] = elapsed
        self._metrics[f"{name}_time_ms"] = elapsed // 1_000_000
        return elapsed

    # ------------------------- values ------------------------- #

    def set_metric(self, key: str, value: int) -> None:
        self._metrics[key] = int(value)

    def get_metric(self, key: str) -> int:
        """Return the value stored under `key`, or 0 if there is none."""
        return self._metrics.get(key, 0)

    def increment_counter(self, key: str) -> None:
        self._metrics[key] = self._metrics.get(key, 0) + 1

    def save_counters(self, prefix: str, counters: SortCounters) -> None:
        for name in COUNTER_NAMES:
            self._metrics[f"{prefix}_{name}"] = getattr(counters, name)

    def reset(self) -> None:
        self._metrics.clear()

    def snapshot(self) -> Dict[str, int]:
        """Return a copy of all entries; changing it does not touch the store."""
        return dict(self._metrics)

    # ------------------------- rendering ------------------------- #

    def format_table(self) -> str:
        lines = ["=== Performance Metrics ==="]
        for key, value in self._metrics.items():
            lines.append(f"{key:<25s}: {value}")
        return "\n".join(lines)

    def to_csv(self) -> str:
        return "".join(f"{key},{value}\n" for key, value in self._metrics.items())


global_store = MetricsStore()
