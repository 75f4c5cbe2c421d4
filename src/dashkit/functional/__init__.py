"""Small standalone helpers.

Slicing, averaging and random selection utilities. None of them depend on
the set-relation or HTML modules, and those modules do not depend on them.
"""

from dashkit.functional.sampling import sample, shuffle
from dashkit.functional.slicing import index_of, initial, tail
from dashkit.functional.stats import mean

__all__ = [
    "initial",
    "tail",
    "index_of",
    "mean",
    "sample",
    "shuffle",
]
