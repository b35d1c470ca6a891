"""Provide descriptive statistics for small teaching samples.

Every function degrades to ``0.0`` when its input is too short to define the
statistic. Use :mod:`bizstats.stats.checked` when an invalid input must be
told apart from a genuine zero.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np


def _as_array(values: Sequence[float]) -> np.ndarray:
    return np.asarray(values, dtype=float).ravel()


def mean(values: Sequence[float]) -> float:
    """Return the arithmetic mean, or ``0.0`` for an empty sample."""
    arr = _as_array(values)
    if arr.size == 0:
        return 0.0
    return float(np.sum(arr) / arr.size)


def total(values: Sequence[float]) -> float:
    """Return the sum of ``values``; ``0.0`` for an empty sample."""
    return float(np.sum(_as_array(values)))


def variance(values: Sequence[float], sample: bool = True) -> float:
    """Return the sample (``n-1``) or population (``n``) variance.

    Args:
        values: Observations in any order.
        sample: Divide by ``n-1`` when true, else by ``n``.

    Returns:
        float: The variance, or ``0.0`` when fewer than two observations are
        given (in either mode).
    """
    arr = _as_array(values)
    n = arr.size
    if n <= 1:
        return 0.0
    squared = (arr - mean(arr)) ** 2
    divisor = n - 1 if sample else n
    return float(np.sum(squared) / divisor)


def standard_deviation(values: Sequence[float], sample: bool = True) -> float:
    """Square root of :func:`variance`."""
    return math.sqrt(variance(values, sample=sample))


def covariance(x: Sequence[float], y: Sequence[float]) -> float:
    """Return the sample covariance of two paired series.

    Returns ``0.0`` when the series differ in length or hold fewer than two
    pairs (the ``n-1`` divisor is zero for a single pair).
    """
    x_arr = _as_array(x)
    y_arr = _as_array(y)
    n = x_arr.size
    if n != y_arr.size or n < 2:
        return 0.0
    products = (x_arr - mean(x_arr)) * (y_arr - mean(y_arr))
    return float(np.sum(products) / (n - 1))


def correlation(x: Sequence[float], y: Sequence[float]) -> float:
    """Return Pearson's correlation coefficient ``r``.

    Note:
        When either series is constant its standard deviation is zero and
        ``r`` is undefined. This function then returns ``0.0`` to avoid the
        division by zero. That value is a guard, not a claim that the series
        are uncorrelated.
    """
    std_x = standard_deviation(x)
    std_y = standard_deviation(y)
    if std_x == 0 or std_y == 0:
        return 0.0
    return covariance(x, y) / (std_x * std_y)
