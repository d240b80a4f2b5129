"""
Benchmark configuration.

Defaults reproduce the standard sweep; a YAML file may override any key:

    sizes: [100, 500, 1000, 5000, 10000]
    seed: 42
    output_path: benchmark_results.csv
    guard_threshold: 10
    warmup: false
    disable_gc: false
    progress: true
    log_level: WARNING
    dataset_params:
      random: {value_factor: 10}
      nearly_sorted: {swap_divisor: 20}
    runs:
      - {type: Random, dist: random, variant: basic}
      - ...

Public API (stable):
    RunSpec, BenchConfig, DEFAULT_RUNS, load_config(path) -> BenchConfig
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from insertbench.algorithms import GUARD_THRESHOLD
from insertbench.datasets import SUPPORTED_DISTS, resolve_params
from insertbench.engine import SUPPORTED_VARIANTS

__all__ = ["RunSpec", "BenchConfig", "DEFAULT_RUNS", "load_config"]


@dataclass(frozen=True)
class RunSpec:
    type: str       # label written to the CSV "Type" column
    dist: str
    variant: str


DEFAULT_RUNS: Tuple[RunSpec, ...] = (
    RunSpec("Random", "random", "basic"),
    RunSpec("Sorted", "sorted", "basic"),
    RunSpec("ReverseSorted", "reverse_sorted", "basic"),
    RunSpec("NearlySorted", "nearly_sorted", "basic"),
    RunSpec("Optimized", "nearly_sorted", "optimized"),
    RunSpec("BinarySearch", "random", "binary_search"),
)


@dataclass(frozen=True)
class BenchConfig:
    sizes: Tuple[int, ...] = (100, 500, 1000, 5000, 10000)
    seed: int = 42
    output_path: Path = Path("benchmark_results.csv")
    guard_threshold: int = GUARD_THRESHOLD
    warmup: bool = False
    disable_gc: bool = False
    progress: bool = True
    log_level: str = "WARNING"
    runs: Tuple[RunSpec, ...] = DEFAULT_RUNS
    dataset_params: Dict[str, Dict[str, Any]] = field(default_factory=dict)


_BOOL_KEYS = ("warmup", "disable_gc", "progress")


def load_config(path: Optional[Path]) -> BenchConfig:
    """
    Load a YAML config on top of the defaults. `None` returns the defaults.

    Raises
    ------
    ValueError
        On unknown keys or invalid values.
    """
    cfg = BenchConfig()
    if path is None:
        return cfg

    with Path(path).open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        return cfg
    if not isinstance(raw, dict):
        raise ValueError("Config file must contain a mapping at the top level")

    known = set(BenchConfig.__dataclass_fields__)
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ValueError(f"Unknown config keys: {unknown}")

    updates: Dict[str, Any] = {}
    if "sizes" in raw:
        updates["sizes"] = _parse_sizes(raw["sizes"])
    if "seed" in raw:
        updates["seed"] = _parse_int(raw["seed"], "seed")
    if "output_path" in raw:
        if not isinstance(raw["output_path"], str) or not raw["output_path"]:
            raise ValueError("output_path must be a non-empty string")
        updates["output_path"] = Path(raw["output_path"])
    if "guard_threshold" in raw:
        updates["guard_threshold"] = _parse_int(raw["guard_threshold"], "guard_threshold", minimum=0)
    for key in _BOOL_KEYS:
        if key in raw:
            if not isinstance(raw[key], bool):
                raise ValueError(f"{key} must be true or false")
            updates[key] = raw[key]
    if "log_level" in raw:
        level = str(raw["log_level"]).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log_level: {raw['log_level']!r}")
        updates["log_level"] = level
    if "runs" in raw:
        updates["runs"] = _parse_runs(raw["runs"])
    if "dataset_params" in raw:
        updates["dataset_params"] = _parse_dataset_params(raw["dataset_params"])

    return replace(cfg, **updates)


# ------------------------- helpers ------------------------- #


def _parse_int(val: Any, name: str, minimum: Optional[int] = None) -> int:
    if not isinstance(val, int) or isinstance(val, bool):
        raise ValueError(f"{name} must be an integer; got {val!r}")
    if minimum is not None and val < minimum:
        raise ValueError(f"{name} must be >= {minimum}; got {val}")
    return val


def _parse_sizes(val: Any) -> Tuple[int, ...]:
    if not isinstance(val, list) or not val:
        raise ValueError("sizes must be a non-empty list of nonnegative integers")
    return tuple(_parse_int(n, "sizes[]", minimum=0) for n in val)


def _parse_runs(val: Any) -> Tuple[RunSpec, ...]:
    if not isinstance(val, list) or not val:
        raise ValueError("runs must be a non-empty list of {type, dist, variant} mappings")
    runs: List[RunSpec] = []
    for entry in val:
        if not isinstance(entry, dict) or set(entry) != {"type", "dist", "variant"}:
            raise ValueError(f"Each run needs exactly type, dist and variant; got {entry!r}")
        if entry["dist"] not in SUPPORTED_DISTS:
            raise ValueError(f"Run {entry['type']!r}: unsupported dist {entry['dist']!r}")
        if entry["variant"] not in SUPPORTED_VARIANTS:
            raise ValueError(f"Run {entry['type']!r}: unsupported variant {entry['variant']!r}")
        runs.append(RunSpec(type=str(entry["type"]), dist=entry["dist"], variant=entry["variant"]))
    return tuple(runs)


def _parse_dataset_params(val: Any) -> Dict[str, Dict[str, Any]]:
    if not isinstance(val, dict):
        raise ValueError("dataset_params must be a mapping of dist -> params")
    for dist, params in val.items():
        if dist not in SUPPORTED_DISTS:
            raise ValueError(f"dataset_params: unsupported dist {dist!r}")
        if not isinstance(params, dict):
            raise ValueError(f"dataset_params.{dist} must be a mapping")
    return {dist: resolve_params(dist, params) for dist, params in val.items()}
