"""
Reductions over flat numeric sequences.

Most functions are modelled on their R namesakes. They never fail on empty
input: sums, means, medians and variances of an empty sequence are 0, the
product is 1, and min/max return +inf/-inf. The only hard failure is a
length mismatch in weighted_mean.

The names sum, min, max, range and abs deliberately match the builtins;
import the module (``from pygeoboard import statistics``) rather than its
members when the builtins are needed alongside.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from pygeoboard.core.validation import check_consistent_length
from pygeoboard.statistics._common import as_vector
from pygeoboard.statistics.arithmetic import multiply


def sum(arr: ArrayLike) -> float:
    """Sum of all elements. 0 for an empty sequence."""
    return float(np.sum(as_vector(arr, "arr")))


def prod(arr: ArrayLike) -> float:
    """Product of all elements. 1 for an empty sequence."""
    return float(np.prod(as_vector(arr, "arr")))


def mean(arr: ArrayLike) -> float:
    """
    Arithmetic mean.

    Parameters
    ----------
    arr : array-like
        Flat numeric sequence.

    Returns
    -------
    float
        ``sum(arr) / len(arr)``, or 0.0 for an empty sequence.
    """
    x = as_vector(arr, "arr")
    if x.shape[0] > 0:
        return float(np.sum(x) / x.shape[0])
    return 0.0


def median(arr: ArrayLike) -> float:
    """
    Value dividing the sorted sequence into two equal halves.

    A sorted copy is used; the input is left untouched. For an even
    number of values the mean of the two middle values is returned,
    so ``median([1, 2, 3, 4]) == 2.5``. Returns 0.0 for an empty sequence.
    """
    x = as_vector(arr, "arr")
    n = x.shape[0]
    if n == 0:
        return 0.0

    tmp = np.sort(x)
    if n % 2 == 1:
        return float(tmp[n // 2])
    return float((tmp[n // 2 - 1] + tmp[n // 2]) * 0.5)


def variance(arr: ArrayLike) -> float:
    """
    Bias-corrected sample variance (divisor n - 1).

    Returns 0.0 when fewer than two values are given.
    """
    x = as_vector(arr, "arr")
    n = x.shape[0]
    if n > 1:
        m = np.sum(x) / n
        return float(np.sum((x - m) * (x - m)) / (n - 1))
    return 0.0


def sd(arr: ArrayLike) -> float:
    """Standard deviation, the square root of :func:`variance`."""
    return float(np.sqrt(variance(arr)))


def weighted_mean(arr: ArrayLike, w: ArrayLike) -> float:
    """
    Mean of the values multiplied elementwise by their weights.

    Parameters
    ----------
    arr : array-like
        Values.
    w : array-like
        Weights, same length as ``arr``.

    Returns
    -------
    float
        ``mean(arr * w)``, or 0.0 for empty input.

    Raises
    ------
    DimensionError
        If ``arr`` and ``w`` differ in length.
    """
    x = as_vector(arr, "arr")
    weights = as_vector(w, "w")
    check_consistent_length(x, weights, names=("arr", "w"))

    if x.shape[0] > 0:
        return mean(multiply(x, weights))
    return 0.0


def max(arr: ArrayLike) -> float:
    """Largest value; -inf for an empty sequence, nan if any value is nan."""
    x = as_vector(arr, "arr")
    if x.shape[0] == 0:
        return float('-inf')
    return float(np.max(x))


def min(arr: ArrayLike) -> float:
    """Smallest value; inf for an empty sequence, nan if any value is nan."""
    x = as_vector(arr, "arr")
    if x.shape[0] == 0:
        return float('inf')
    return float(np.min(x))


def range(arr: ArrayLike) -> list[float]:
    """``[min(arr), max(arr)]``."""
    return [min(arr), max(arr)]
