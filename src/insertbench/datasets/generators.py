"""
Dataset generators for the insertion-sort benchmarks.

Currently implemented:
- dist == "sorted":
    Identity order [0, 1, ..., n-1] (best case for insertion sort).

- dist == "reverse_sorted":
    [n-1, n-2, ..., 0] (worst case).

- dist == "random":
    n integers drawn uniformly from the half-open range [0, n * value_factor).

- dist == "nearly_sorted":
    Start from [0, 1, ..., n-1] then perform n // swap_divisor pairwise swaps
    of two independently drawn random indices.

Public API (stable):
    make_dataset(n: int, dist: str, rng: numpy.random.Generator,
                 params: dict | None = None) -> list[int]
    resolve_params(dist: str, params: dict | None = None) -> dict[str, int]

Conventions:
- Returns a Python `list[int]`; the sort engine never sees NumPy arrays.
- The caller supplies the RNG. The benchmark runner seeds a fresh generator
  for every dataset, so a given (dist, n, seed) always yields the same list.
- "sorted" and "reverse_sorted" ignore the RNG.
- A swap may pick the same index twice; it is then a no-op, so the number of
  displaced elements can be smaller than requested.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import numpy as np

SUPPORTED_DISTS = {
    "sorted",
    "reverse_sorted",
    "random",
    "nearly_sorted",
}

DEFAULT_VALUE_FACTOR = 10
DEFAULT_SWAP_DIVISOR = 20

# Accepted params per dist, with their defaults
DIST_PARAMS: Dict[str, Dict[str, int]] = {
    "sorted": {},
    "reverse_sorted": {},
    "random": {"value_factor": DEFAULT_VALUE_FACTOR},
    "nearly_sorted": {"swap_divisor": DEFAULT_SWAP_DIVISOR},
}

__all__ = ["SUPPORTED_DISTS", "DIST_PARAMS", "make_dataset", "resolve_params"]


def make_dataset(
    n: int,
    dist: str,
    rng: np.random.Generator,
    params: Optional[Dict[str, Any]] = None,
) -> List[int]:
    """
    Generate an integer dataset of length `n`.

    Parameters
    ----------
    n : int
        Number of elements. Must be >= 0.
    dist : str
        One of SUPPORTED_DISTS.
    rng : numpy.random.Generator
        Random number generator owned by the caller (seeded upstream).
    params : dict, optional
        Random:
            { "value_factor": 10 }     # values in [0, n * value_factor)
        Nearly-sorted:
            { "swap_divisor": 20 }     # n // swap_divisor swaps

    Returns
    -------
    list[int]

    Raises
    ------
    ValueError
        If inputs are invalid or the distribution is unsupported.
    """
    _validate_n(n)
    resolved = resolve_params(dist, params)

    if dist == "sorted":
        return list(range(n))

    if dist == "reverse_sorted":
        return list(range(n - 1, -1, -1))

    if dist == "random":
        factor = resolved["value_factor"]
        if n == 0:
            return []
        # Generator.integers is half-open [low, high)
        arr = rng.integers(0, n * factor, size=n, dtype=np.int64)
        return arr.tolist()

    if dist == "nearly_sorted":
        divisor = resolved["swap_divisor"]
        arr = list(range(n))
        num_swaps = n // divisor
        if num_swaps == 0:
            return arr
        # Draw indices in (first, second) pairs, one pair per swap
        idxs = rng.integers(0, n, size=2 * num_swaps)
        for k in range(num_swaps):
            i = int(idxs[2 * k])
            j = int(idxs[2 * k + 1])
            arr[i], arr[j] = arr[j], arr[i]
        return arr

    # Unreachable: resolve_params rejects unknown dists
    raise ValueError(f"Unhandled dataset dist: {dist!r}")


def resolve_params(dist: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, int]:
    """
    Validate `params` for `dist` and fill in defaults.

    Raises
    ------
    ValueError
        On an unsupported dist, unknown param keys or invalid values.
    """
    if dist not in SUPPORTED_DISTS:
        raise ValueError(
            f"Unsupported dataset dist: {dist!r}. Supported: {sorted(SUPPORTED_DISTS)}"
        )
    if params is None:
        params = {}
    elif not isinstance(params, dict):
        raise ValueError("params must be a dict if provided")

    accepted = DIST_PARAMS[dist]
    unknown = sorted(set(params) - set(accepted))
    if unknown:
        raise ValueError(f"{dist}: unknown params {unknown}; accepted: {sorted(accepted)}")

    return {name: _parse_positive_int(params, name, default) for name, default in accepted.items()}


# ------------------------- helpers ------------------------- #


def _validate_n(n: int) -> None:
    if not _is_int_like(n) or isinstance(n, bool):
        raise ValueError("n must be an int")
    if n < 0:
        raise ValueError("n must be nonnegative")


def _parse_positive_int(params: Dict[str, Any], name: str, default: int) -> int:
    val = params.get(name, default)
    if not _is_int_like(val) or isinstance(val, bool) or val < 1:
        raise ValueError(f"params.{name} must be an integer >= 1; got {val!r}")
    return int(val)


def _is_int_like(x: Any) -> bool:
    # Accept Python ints and NumPy integer types
    return isinstance(x, (int, np.integer))
