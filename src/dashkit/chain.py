"""Method-chaining wrapper over the collection helpers."""

import typing as tp

import jax

from dashkit.arrays import relations
from dashkit.core.types import SortedHint
from dashkit.functional import sampling, slicing, stats

__all__ = ["Chain"]


class Chain:
    """Wrap a copy of a collection so operations can be chained.

    Every transforming method returns a new ``Chain``. ``pull`` and
    ``pull_all`` rewrite the chain's own copy, never the list it was built
    from, and return ``self``.

    Examples:
        >>> Chain([2, 1, 2, 3, 4]).difference([4]).uniq().value()
        [2, 1, 3]
    """

    def __init__(self, values: tp.Iterable[tp.Any]):
        self._values = list(values)

    def __repr__(self) -> str:
        return f"Chain({self._values!r})"

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> tp.Iterator[tp.Any]:
        return iter(self._values)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Chain):
            return self._values == other._values
        if isinstance(other, list):
            return self._values == other
        return NotImplemented

    def value(self) -> tp.List[tp.Any]:
        """Return a copy of the wrapped values."""
        return list(self._values)

    # --- Set relations ---
    def difference(self, other: tp.Sequence, is_sorted: SortedHint = None) -> "Chain":
        return Chain(relations.difference(self._values, other, is_sorted))

    def difference_all(
        self, others: tp.Iterable[tp.Iterable], is_sorted: SortedHint = None
    ) -> "Chain":
        return Chain(relations.difference_all(self._values, others, is_sorted))

    def intersect(self, other: tp.Iterable) -> "Chain":
        return Chain(relations.intersect(self._values, other))

    def intersect_all(self, others: tp.Iterable[tp.Iterable]) -> "Chain":
        return Chain(relations.intersect_all(self._values, others))

    def pull(self, value: tp.Any) -> "Chain":
        relations.pull(self._values, value)
        return self

    def pull_all(self, values: tp.Sequence, is_sorted: SortedHint = None) -> "Chain":
        relations.pull_all(self._values, values, is_sorted)
        return self

    def uniq(self) -> "Chain":
        return Chain(relations.uniq(self._values))

    # --- Slicing and selection ---
    def initial(self) -> "Chain":
        return Chain(slicing.initial(self._values))

    def tail(self) -> "Chain":
        return Chain(slicing.tail(self._values))

    def shuffle(self, key: tp.Optional[jax.Array] = None) -> "Chain":
        return Chain(sampling.shuffle(self._values, key))

    def index_of(self, element: tp.Any) -> tp.Optional[int]:
        return slicing.index_of(self._values, element)

    def mean(self) -> float:
        return stats.mean(self._values)

    def sample(self, key: tp.Optional[jax.Array] = None) -> tp.Any:
        return sampling.sample(self._values, key)
