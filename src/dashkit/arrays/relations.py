"""Set-relation operations over ordered collections.

This module implements difference, intersection, removal and deduplication
over fully materialized sequences. Every function is pure except ``pull`` and
``pull_all``, which rewrite the list they are given in place.

Membership against a secondary collection is answered by one of two search
strategies:
    - **Linear search** (``contains``): ``O(m)`` per lookup, only needs ``==``.
    - **Binary search** (``sorted_contains``): ``O(log m)`` per lookup, needs a
      total order and an ascending-sorted secondary collection.

The binary strategy is selected with the ``is_sorted`` hint. The hint is
trusted, never verified:

Warning:
    Passing ``is_sorted=True`` for a secondary collection that is not sorted
    ascending does not raise. It silently returns wrong results. Only pass
    ``True`` when you built or sorted the collection yourself.

Examples:
    >>> from dashkit.arrays.relations import difference, intersect, uniq
    >>> difference([2, 1], [2, 3])
    [1]
    >>> difference([2, 1], [2, 3, 4, 5], is_sorted=True)
    [1]
    >>> intersect([2, 1], [2, 3])
    [2]
    >>> uniq([2, 1, 2])
    [2, 1]
"""

import bisect
import itertools
import typing as tp

from dashkit.core.types import EqT, HashT, OrdT, SortedHint
from dashkit.logger.logger import logger

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


def contains(values: tp.Sequence[EqT], item: EqT) -> bool:
    """Linear membership test using equality."""
    return item in values


def sorted_contains(values: tp.Sequence[OrdT], item: OrdT) -> bool:
    """Binary membership test.

    Args:
        values: Sequence sorted ascending. Not checked.
        item: Element to look for.

    Returns:
        True if an element equal to ``item`` is present.
    """
    index = bisect.bisect_left(values, item)
    return index < len(values) and values[index] == item


def _searcher(is_sorted: SortedHint) -> tp.Callable[[tp.Sequence, tp.Any], bool]:
    if is_sorted:
        return sorted_contains
    return contains


def difference(
    array: tp.Iterable[OrdT], other: tp.Sequence[OrdT], is_sorted: SortedHint = None
) -> tp.List[OrdT]:
    """Create a list of ``array`` values not included in ``other``.

    Relative order and duplicates of ``array`` are preserved.

    Args:
        array: The collection to inspect.
        other: The values to exclude.
        is_sorted: Set to ``True`` only if ``other`` is sorted ascending. Binary
            search is then used for each lookup (``O(log m)`` instead of
            ``O(m)``). An unsorted ``other`` with ``True`` gives wrong results.

    Returns:
        The filtered values as a new list.
    """
    search = _searcher(is_sorted)
    logger.debug("difference: using %s over %d values", search.__name__, len(other))
    return [item for item in array if not search(other, item)]


def difference_all(
    array: tp.Iterable[OrdT],
    others: tp.Iterable[tp.Iterable[OrdT]],
    is_sorted: SortedHint = None,
) -> tp.List[OrdT]:
    """Create a list of ``array`` values not included in any of ``others``.

    The nested collections are flattened, in order, into a single exclusion
    list which is then handed to :func:`difference`.

    Note:
        ``is_sorted`` describes the *flattened* list, not each nested
        collection. ``[[3, 4], [2, 3]]`` flattens to ``[3, 4, 2, 3]``, which is
        not sorted even though both parts are. Pass ``True`` only when the
        concatenation itself is ascending.

    Args:
        array: The collection to inspect.
        others: The nested values to exclude.
        is_sorted: Sortedness hint for the flattened exclusion list.

    Returns:
        The filtered values as a new list.
    """
    flattened = list(itertools.chain.from_iterable(others))
    return difference(array, flattened, is_sorted)


def intersect(
    array: tp.Iterable[HashT], other: tp.Iterable[HashT]
) -> tp.List[HashT]:
    """Create a list of unique values included in both ``array`` and ``other``.

    Results are ordered by their first occurrence in ``array``.

    Args:
        array: The source collection.
        other: The collection to inspect.

    Returns:
        The distinct common values.

    Raises:
        TypeError: If an element is unhashable.
    """
    lookup = set(other)
    seen: tp.Set[HashT] = set()
    common = []
    for item in array:
        if item in lookup and item not in seen:
            seen.add(item)
            common.append(item)
    return common


def intersect_all(
    array: tp.Iterable[HashT], others: tp.Iterable[tp.Iterable[HashT]]
) -> tp.List[HashT]:
    """Create a list of unique values included in ``array`` and every one of ``others``.

    Equivalent to folding :func:`intersect` over ``others``, starting from
    ``array``. With no ``others`` the result is a plain copy of
    ``array``, duplicates included.

    Args:
        array: The source collection.
        others: The nested collections to inspect.

    Returns:
        The common values, in ``array`` order.
    """
    common = list(array)
    for other in others:
        if not common:
            logger.debug("intersect_all: intersection already empty, stopping early")
            break
        common = intersect(common, other)
    return common


def pull(array: tp.List[OrdT], value: OrdT) -> None:
    """Remove every occurrence of ``value`` from ``array`` in place.

    Args:
        array: The list to modify.
        value: The value to remove.

    Examples:
        >>> array = ["a", "b", "c", "a", "b", "c"]
        >>> pull(array, "a")
        >>> array
        ['b', 'c', 'b', 'c']
    """
    pull_all(array, [value])


def pull_all(
    array: tp.List[OrdT], values: tp.Sequence[OrdT], is_sorted: SortedHint = None
) -> None:
    """Remove every occurrence of any of ``values`` from ``array`` in place.

    The kept elements stay in their original relative order. The list object
    itself is rewritten, so other references to it see the change.

    Args:
        array: The list to modify.
        values: The values to remove.
        is_sorted: Set to ``True`` only if ``values`` is sorted ascending, which
            enables binary search. An unsorted ``values`` with ``True`` leaves
            the wrong elements behind.
    """
    search = _searcher(is_sorted)
    before = len(array)
    array[:] = [item for item in array if not search(values, item)]
    logger.debug("pull_all: removed %d of %d elements", before - len(array), before)


def uniq(array: tp.Iterable[HashT]) -> tp.List[HashT]:
    """Create a duplicate-free copy of ``array`` keeping first occurrences.

    Raises:
        TypeError: If an element is unhashable.
    """
    seen: tp.Set[HashT] = set()
    unique = []
    for item in array:
        if item not in seen:
            seen.add(item)
            unique.append(item)
    return unique
