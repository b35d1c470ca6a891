"""Probability distribution functions (no SciPy).

Implemented:
- Error function via Abramowitz & Stegun formula 7.1.26
- Standard normal CDF, normal density and interval probabilities
- Binomial and Poisson probability mass functions

The PMFs follow the calculators' sentinel policy: parameters outside the
distribution's support give ``0.0``. When the textbook form overflows double
range (large ``n`` or ``k``) the same formula is evaluated in log space.

References:
- Abramowitz, M. and Stegun, I. A., Handbook of Mathematical Functions,
  formula 7.1.26 (maximum absolute error about 1.5e-7).
"""

from __future__ import annotations

import math
from typing import Tuple

from .combinatorics import as_count, combination, factorial

# ----------------------------
# Normal
# ----------------------------

_ERF_A1 = 0.254829592
_ERF_A2 = -0.284496736
_ERF_A3 = 1.421413741
_ERF_A4 = -1.453152027
_ERF_A5 = 1.061405429
_ERF_P = 0.3275911

_SQRT2 = math.sqrt(2.0)
_SQRT2PI = math.sqrt(2.0 * math.pi)


def erf(x: float) -> float:
    """Approximate the error function.

    Args:
        x: any real number

    Returns:
        erf(x) in [-1, 1]; odd symmetric, so ``erf(-x) == -erf(x)``.
    """
    x = float(x)
    sign = 1.0 if x >= 0 else -1.0
    x = abs(x)

    t = 1.0 / (1.0 + _ERF_P * x)
    poly = ((((_ERF_A5 * t + _ERF_A4) * t + _ERF_A3) * t + _ERF_A2) * t + _ERF_A1) * t
    return sign * (1.0 - poly * math.exp(-x * x))


def normal_cdf(z: float) -> float:
    """Standard normal CDF, ``P(Z <= z)``."""
    return 0.5 * (1.0 + erf(float(z) / _SQRT2))


def normal_pdf(x: float, mean: float = 0.0, std_dev: float = 1.0) -> float:
    """Normal density at ``x``. ``std_dev`` must be positive."""
    if std_dev <= 0:
        raise ValueError("std_dev must be positive")
    z = (float(x) - mean) / std_dev
    return math.exp(-0.5 * z * z) / (std_dev * _SQRT2PI)


def z_score(x: float, mean: float, std_dev: float) -> float:
    """Standardize ``x``: ``(x - mean) / std_dev``.

    Not guarded: ``std_dev == 0`` raises ``ZeroDivisionError``. Use
    :func:`bizstats.stats.checked.checked_z_score` to get an ``Err`` instead.
    """
    return (x - mean) / std_dev


def normal_probability_between(
    x1: float, x2: float, mean: float = 0.0, std_dev: float = 1.0
) -> float:
    """Return ``P(a < X < b)`` for ``X ~ N(mean, std_dev**2)``.

    The bounds may be given in either order.
    """
    lower, upper = sorted((float(x1), float(x2)))
    return normal_cdf(z_score(upper, mean, std_dev)) - normal_cdf(
        z_score(lower, mean, std_dev)
    )


# ----------------------------
# Discrete
# ----------------------------


def binomial_pmf(k: int, n: int, p: float) -> float:
    """``P(X = k)`` for ``X ~ Binomial(n, p)``.

    Returns ``0.0`` for ``k < 0``, ``k > n``, non-integral counts or ``p``
    outside ``[0, 1]``.
    """
    k_count = as_count(k)
    n_count = as_count(n)
    p = float(p)
    if k_count is None or n_count is None or k_count > n_count or not 0.0 <= p <= 1.0:
        return 0.0

    coeff = combination(n_count, k_count)
    try:
        return float(coeff) * p**k_count * (1.0 - p) ** (n_count - k_count)
    except OverflowError:
        pass

    # coeff > 1 here, so k is strictly inside (0, n)
    if p == 0.0 or p == 1.0:
        return 0.0
    log_pmf = (
        math.log(coeff)
        + k_count * math.log(p)
        + (n_count - k_count) * math.log1p(-p)
    )
    return math.exp(log_pmf)


def poisson_pmf(k: int, lam: float) -> float:
    """``P(X = k)`` for ``X ~ Poisson(lam)``.

    Returns ``0.0`` for ``k < 0``, non-integral ``k``, ``lam < 0`` or infinite
    ``lam``.
    ``lam == 0`` is the point mass at zero.
    """
    k_count = as_count(k)
    lam = float(lam)
    if k_count is None or not 0.0 <= lam < math.inf:
        return 0.0
    if lam == 0.0:
        return 1.0 if k_count == 0 else 0.0

    try:
        direct = lam**k_count * math.exp(-lam) / factorial(k_count)
    except OverflowError:
        direct = 0.0
    if direct > 0.0:
        return direct

    # lam**k overflowed or exp(-lam) underflowed
    return math.exp(k_count * math.log(lam) - lam - math.lgamma(k_count + 1))


def binomial_moments(n: int, p: float) -> Tuple[float, float]:
    """Return ``(mean, variance) = (np, np(1-p))``."""
    return float(n * p), float(n * p * (1.0 - p))


def poisson_moments(lam: float) -> Tuple[float, float]:
    """Mean and variance of a Poisson distribution, both ``lam``."""
    return float(lam), float(lam)
