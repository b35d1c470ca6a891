"""
Numeric core for the statistics teaching modules.

This subpackage provides stateless pure functions over numbers and short
numeric sequences. No calculator-specific logic is included.

Modules:
    descriptive:
        Mean, sum, variance, standard deviation, covariance and correlation
        with zero defaults for too-short input.

    combinatorics:
        Exact-integer factorial, permutations and combinations.

    distributions:
        Error function, normal CDF/PDF, z-scores, binomial and Poisson PMFs.

    rounding:
        Half-away-from-zero display rounding.

    checked:
        ``Ok``/``Err`` variants of the functions above for callers that must
        distinguish invalid input from a zero result.

Design Principle:
    This subpackage has no dependencies on the calculator modules. It can be
    tested independently.
"""

from .checked import (
    MAX_COMBINATORIC_N,
    DomainError,
    Err,
    Ok,
    Result,
    checked_binomial_pmf,
    checked_combination,
    checked_correlation,
    checked_factorial,
    checked_mean,
    checked_permutation,
    checked_poisson_pmf,
    checked_variance,
    checked_z_score,
    unwrap,
    unwrap_or,
)
from .combinatorics import combination, factorial, permutation
from .descriptive import (
    correlation,
    covariance,
    mean,
    standard_deviation,
    total,
    variance,
)
from .distributions import (
    binomial_moments,
    binomial_pmf,
    erf,
    normal_cdf,
    normal_pdf,
    normal_probability_between,
    poisson_moments,
    poisson_pmf,
    z_score,
)
from .rounding import DEFAULT_DECIMALS, round_frame, round_to

__all__ = [
    "mean",
    "total",
    "variance",
    "standard_deviation",
    "covariance",
    "correlation",
    "factorial",
    "permutation",
    "combination",
    "erf",
    "normal_cdf",
    "normal_pdf",
    "normal_probability_between",
    "z_score",
    "binomial_pmf",
    "poisson_pmf",
    "binomial_moments",
    "poisson_moments",
    "round_to",
    "round_frame",
    "DEFAULT_DECIMALS",
    "Ok",
    "Err",
    "Result",
    "DomainError",
    "unwrap",
    "unwrap_or",
    "MAX_COMBINATORIC_N",
    "checked_mean",
    "checked_variance",
    "checked_correlation",
    "checked_factorial",
    "checked_permutation",
    "checked_combination",
    "checked_z_score",
    "checked_binomial_pmf",
    "checked_poisson_pmf",
]
