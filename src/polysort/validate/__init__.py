"""
Validation utilities public API.

Re-exports:
    - Oracle: ORACLE_NAME, oracle_sort, explain_mismatch
    - Properties: is_nondecreasing, first_violation, is_permutation, multiset_diff
"""

from .oracle import ORACLE_NAME, explain_mismatch, oracle_sort
from .properties import first_violation, is_nondecreasing, is_permutation, multiset_diff

__all__ = [
    "ORACLE_NAME",
    "oracle_sort",
    "explain_mismatch",
    "is_nondecreasing",
    "first_violation",
    "is_permutation",
    "multiset_diff",
]
