import typing as tp

from dashkit.core.types import EqT, T

__all__ = [
    "initial",
    "tail",
    "index_of",
]


def initial(array: tp.Sequence[T]) -> tp.List[T]:
    """Get all but the last element of ``array``. Empty input gives ``[]``."""
    return list(array[:-1])


def tail(array: tp.Sequence[T]) -> tp.List[T]:
    """Get all but the first element of ``array``. Empty input gives ``[]``."""
    return list(array[1:])


def index_of(array: tp.Iterable[EqT], element: EqT) -> tp.Optional[int]:
    """Get the index of the first occurrence of ``element`` in ``array``.

    Args:
        array: The collection to inspect.
        element: The element to search for.

    Returns:
        The index, or ``None`` if ``element`` is absent.
    """
    for index, item in enumerate(array):
        if item == element:
            return index
    return None
