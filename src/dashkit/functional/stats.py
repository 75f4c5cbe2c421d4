import typing as tp

import numpy as np

from dashkit.logger.logger import logger

__all__ = ["mean"]


def mean(array: tp.Iterable[tp.Union[int, float]]) -> float:
    """Compute the arithmetic mean of the values in ``array``.

    Args:
        array: Numbers to average.

    Returns:
        The mean as a Python float. An empty ``array`` gives ``nan``.

    Examples:
        >>> mean([4, 2, 8, 6])
        5.0
    """
    values = np.asarray(list(array), dtype=np.float64)
    if values.size == 0:
        logger.debug("mean: empty input, returning nan")
        return float("nan")
    return float(np.mean(values))
