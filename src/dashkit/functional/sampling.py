"""Random selection helpers.

Randomness follows JAX's explicit key model: pass a key created with
``jax.random.PRNGKey(seed)`` for reproducible results. When ``key`` is omitted
a fresh one is seeded from numpy's OS entropy source, so consecutive calls
differ.

Examples:
    >>> import jax
    >>> from dashkit.functional.sampling import sample, shuffle
    >>> key = jax.random.PRNGKey(42)
    >>> sample([1, 2, 3, 4], key) in [1, 2, 3, 4]
    True
    >>> sorted(shuffle([1, 2, 3, 4], key))
    [1, 2, 3, 4]
"""

import typing as tp

import jax
import numpy as np

from dashkit.core.types import T

__all__ = [
    "sample",
    "shuffle",
]


def _resolve_key(key: tp.Optional[jax.Array]) -> jax.Array:
    if key is None:
        seed = int(np.random.default_rng().integers(0, 2**31 - 1))
        key = jax.random.PRNGKey(seed)
    return key


def sample(
    array: tp.Sequence[T], key: tp.Optional[jax.Array] = None
) -> tp.Optional[T]:
    """Get a uniformly random element from ``array``.

    Args:
        array: The collection to sample.
        key: Optional JAX PRNG key.

    Returns:
        One element of ``array``, or ``None`` when it is empty.
    """
    if len(array) == 0:
        return None
    index = jax.random.randint(
        _resolve_key(key), shape=(), minval=0, maxval=len(array)
    )
    return array[int(index)]


def shuffle(
    array: tp.Sequence[T], key: tp.Optional[jax.Array] = None
) -> tp.List[T]:
    """Create a list of the values of ``array`` in random order.

    ``array`` itself is not modified.

    Args:
        array: The collection to shuffle.
        key: Optional JAX PRNG key.

    Returns:
        A new list holding a uniformly random permutation of ``array``.
    """
    items = list(array)
    if len(items) < 2:
        return items
    order = np.asarray(jax.random.permutation(_resolve_key(key), len(items)))
    return [items[i] for i in order.tolist()]
