"""
Validation utilities public API.

Re-exports:
    is_nondecreasing
    first_nondecreasing_violation_index
    is_permutation
    permutation_counter_diff
"""

from .properties import (
    first_nondecreasing_violation_index,
    is_nondecreasing,
    is_permutation,
    permutation_counter_diff,
)

__all__ = [
    "is_nondecreasing",
    "first_nondecreasing_violation_index",
    "is_permutation",
    "permutation_counter_diff",
]
