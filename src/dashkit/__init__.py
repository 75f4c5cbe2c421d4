"""dashkit: small composable helpers for collections and HTML text."""

from dashkit.arrays import (
    difference,
    difference_all,
    intersect,
    intersect_all,
    pull,
    pull_all,
    uniq,
)
from dashkit.chain import Chain
from dashkit.functional import index_of, initial, mean, sample, shuffle, tail
from dashkit.strings import escape, unescape

__all__ = [
    "Chain",
    "difference",
    "difference_all",
    "intersect",
    "intersect_all",
    "pull",
    "pull_all",
    "uniq",
    "escape",
    "unescape",
    "initial",
    "tail",
    "index_of",
    "mean",
    "sample",
    "shuffle",
]
