"""
Junctions: quantified comparison values.

A junction wraps a collection of elements and a quantifier (all, any,
one, none). Comparing it with a value, or with another junction, asks how
many elements satisfy that comparison instead of comparing one value:

    all_of(1, 3, 7, 8) < 10            # every element is below 10
    3 > any_of(1, 7, 8)                # some element is below 3
    all_of(1, 2) == one_of(1, 2, 3)    # each element matches exactly one

ARCHITECTURAL GUARANTEE:
------------------------
Junctions are passive values:
    - No threads, locks or I/O
    - No mutation after construction
    - No persistence or serialization

Every junction is built by an explicit choice between copying its
elements (sorted, deduplicated, fast boundary checks) and borrowing a
caller-owned collection (no copy, full scans).
"""

from junctions.construction import (
    all_copy,
    all_of,
    all_range,
    all_ref,
    all_sorted,
    any_copy,
    any_of,
    any_range,
    any_ref,
    any_sorted,
    none_copy,
    none_of,
    none_range,
    none_ref,
    none_sorted,
    one_copy,
    one_of,
    one_range,
    one_ref,
    one_sorted,
)
from junctions.junction import Junction, JunctionInfo, JunctionType, describe, is_junction
from junctions.operators import ComparisonOperator
from junctions.quantifiers import AllJunction, AnyJunction, NoneJunction, OneJunction
from junctions.reverse import compare
from junctions.storage import BorrowError, BorrowedStore, SortedStore, StorageError, Store

__version__ = "0.1.0"

__all__ = [
    "AllJunction",
    "AnyJunction",
    "BorrowError",
    "BorrowedStore",
    "ComparisonOperator",
    "Junction",
    "JunctionInfo",
    "JunctionType",
    "NoneJunction",
    "OneJunction",
    "SortedStore",
    "StorageError",
    "Store",
    "all_copy",
    "all_of",
    "all_range",
    "all_ref",
    "all_sorted",
    "any_copy",
    "any_of",
    "any_range",
    "any_ref",
    "any_sorted",
    "compare",
    "describe",
    "is_junction",
    "none_copy",
    "none_of",
    "none_range",
    "none_ref",
    "none_sorted",
    "one_copy",
    "one_of",
    "one_range",
    "one_ref",
    "one_sorted",
]
