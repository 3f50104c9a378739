"""
Descriptive statistics - requires numpy.

Small wrappers over numpy reductions with sentinel results for empty input.
"""

__all__ = [
    "average",
    "median",
    "mode",
    "total",
]

from typing import List, Sequence, Union

import numpy as np
from loguru import logger

Number = Union[int, float]


def average(values: Sequence[Number]) -> float:
    """
    Arithmetic mean, or nan for an empty sequence.

    Example:
        >>> average([1, 2, 3, 4])
        2.5
    """
    if len(values) == 0:
        logger.debug("average: empty input")
        return float("nan")
    return float(np.mean(values))


def median(values: Sequence[Number]) -> float:
    """
    Median (mean of the two middle values for even lengths), or nan if empty.

    Example:
        >>> median([3, 1, 2])
        2.0
        >>> median([4, 1, 3, 2])
        2.5
    """
    if len(values) == 0:
        logger.debug("median: empty input")
        return float("nan")
    return float(np.median(values))


def mode(values: Sequence[Number]) -> List[Number]:
    """
    All values sharing the highest frequency, in ascending order.

    Example:
        >>> mode([1, 2, 2, 3, 3])
        [2, 3]
        >>> mode([])
        []
    """
    if len(values) == 0:
        return []
    uniques, counts = np.unique(np.asarray(values), return_counts=True)
    return uniques[counts == counts.max()].tolist()


def total(values: Sequence[Number]) -> Number:
    """Sum of values; 0 for an empty sequence."""
    if len(values) == 0:
        return 0
    return np.sum(values).item()
