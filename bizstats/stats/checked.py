"""Checked variants of the core functions.

The plain functions return ``0`` for invalid input so an interactive
calculator never fails. The functions here validate the same domains and
return a tagged result instead, so a caller can show a validation message
rather than a zero that looks like an answer::

    result = checked_combination(n, r)
    if isinstance(result, Err):
        show_warning(result.reason)
    else:
        show(result.value)
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence, Union

import numpy as np

from . import combinatorics, descriptive, distributions
from .combinatorics import as_count

MAX_COMBINATORIC_N = 200


class DomainError(ValueError):
    """Raised by :func:`unwrap` when a checked computation was rejected."""


@dataclass(frozen=True)
class Ok:
    value: float

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    reason: str

    @property
    def ok(self) -> bool:
        return False


Result = Union[Ok, Err]


def unwrap(result: Result) -> float:
    """Return the value of an ``Ok`` or raise :class:`DomainError` for an ``Err``."""
    if isinstance(result, Err):
        raise DomainError(result.reason)
    return result.value


def unwrap_or(result: Result, default: float) -> float:
    return default if isinstance(result, Err) else result.value


def _finite_sample(values: Sequence[float], name: str = "values") -> Union[np.ndarray, Err]:
    arr = np.asarray(values, dtype=float).ravel()
    if not np.all(np.isfinite(arr)):
        return Err(f"{name} must contain only finite numbers")
    return arr


def _check_counts(n: int, r: int, max_n: Optional[int]) -> Optional[Err]:
    n_count = as_count(n)
    r_count = as_count(r)
    if n_count is None:
        return Err(f"n must be a non-negative integer, got {n!r}")
    if r_count is None:
        return Err(f"r must be a non-negative integer, got {r!r}")
    if r_count > n_count:
        return Err(f"r ({r_count}) cannot exceed n ({n_count})")
    if max_n is not None and n_count > max_n:
        return Err(f"n ({n_count}) exceeds the supported limit of {max_n}")
    return None


# ----------------------------
# Descriptive
# ----------------------------


def checked_mean(values: Sequence[float]) -> Result:
    arr = _finite_sample(values)
    if isinstance(arr, Err):
        return arr
    if arr.size == 0:
        return Err("mean of an empty sample is undefined")
    return Ok(descriptive.mean(arr))


def checked_variance(values: Sequence[float], sample: bool = True) -> Result:
    arr = _finite_sample(values)
    if isinstance(arr, Err):
        return arr
    needed = 2 if sample else 1
    if arr.size < needed:
        kind = "sample" if sample else "population"
        return Err(f"{kind} variance needs at least {needed} observation(s), got {arr.size}")
    return Ok(descriptive.variance(arr, sample=sample))


def checked_correlation(x: Sequence[float], y: Sequence[float]) -> Result:
    x_arr = _finite_sample(x, "x")
    if isinstance(x_arr, Err):
        return x_arr
    y_arr = _finite_sample(y, "y")
    if isinstance(y_arr, Err):
        return y_arr
    if x_arr.size != y_arr.size:
        return Err(f"x and y must have equal length ({x_arr.size} != {y_arr.size})")
    if x_arr.size < 2:
        return Err("correlation needs at least 2 paired observations")
    if descriptive.standard_deviation(x_arr) == 0 or descriptive.standard_deviation(y_arr) == 0:
        return Err("correlation is undefined for a constant series")
    return Ok(descriptive.correlation(x_arr, y_arr))


# ----------------------------
# Combinatorics
# ----------------------------


def checked_factorial(n: int) -> Result:
    if as_count(n) is None:
        return Err(f"factorial is defined for non-negative integers, got {n!r}")
    return Ok(combinatorics.factorial(n))


def checked_permutation(n: int, r: int, max_n: Optional[int] = MAX_COMBINATORIC_N) -> Result:
    err = _check_counts(n, r, max_n)
    if err is not None:
        return err
    return Ok(combinatorics.permutation(n, r))


def checked_combination(n: int, r: int, max_n: Optional[int] = MAX_COMBINATORIC_N) -> Result:
    err = _check_counts(n, r, max_n)
    if err is not None:
        return err
    return Ok(combinatorics.combination(n, r))


# ----------------------------
# Distributions
# ----------------------------


def checked_z_score(x: float, mean: float, std_dev: float) -> Result:
    if not math.isfinite(std_dev) or std_dev <= 0:
        return Err(f"std_dev must be positive and finite, got {std_dev!r}")
    return Ok(distributions.z_score(x, mean, std_dev))


def checked_binomial_pmf(k: int, n: int, p: float) -> Result:
    k_count = as_count(k)
    n_count = as_count(n)
    if n_count is None:
        return Err(f"n must be a non-negative integer, got {n!r}")
    if k_count is None or k_count > n_count:
        return Err(f"k must be an integer in [0, {n_count}], got {k!r}")
    if not 0.0 <= float(p) <= 1.0:
        return Err(f"p must lie in [0, 1], got {p!r}")
    return Ok(distributions.binomial_pmf(k_count, n_count, p))


def checked_poisson_pmf(k: int, lam: float) -> Result:
    if as_count(k) is None:
        return Err(f"k must be a non-negative integer, got {k!r}")
    if not (math.isfinite(lam) and lam >= 0):
        return Err(f"lambda must be non-negative and finite, got {lam!r}")
    return Ok(distributions.poisson_pmf(k, lam))
