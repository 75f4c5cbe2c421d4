"""Set-relation operations over collections."""

from dashkit.arrays.relations import (
    contains,
    difference,
    difference_all,
    intersect,
    intersect_all,
    pull,
    pull_all,
    sorted_contains,
    uniq,
)

__all__ = [
    "contains",
    "sorted_contains",
    "difference",
    "difference_all",
    "intersect",
    "intersect_all",
    "pull",
    "pull_all",
    "uniq",
]
