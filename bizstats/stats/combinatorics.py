"""Counting functions: factorial, permutations and combinations.

Results are exact Python integers, so there is no overflow or
floating-point drift for large ``n``. Out-of-domain input (negative,
non-integral, ``r > n``) returns the sentinel ``0``.
"""

from __future__ import annotations

import math
from typing import Optional


def as_count(value: float) -> Optional[int]:
    """Return ``value`` as a non-negative ``int``, or ``None`` if it is not one.

    Integral floats such as ``5.0`` are accepted; booleans are not.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value >= 0 else None
    try:
        as_float = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(as_float) or not as_float.is_integer() or as_float < 0:
        return None
    return int(as_float)


def factorial(n: int) -> int:
    """Return ``n!`` with ``0! = 1! = 1``.

    Note:
        Negative or non-integral ``n`` returns ``0``. This is a convention of
        the calculators, not the gamma-function extension.
    """
    count = as_count(n)
    if count is None:
        return 0
    result = 1
    for i in range(2, count + 1):
        result *= i
    return result


def permutation(n: int, r: int) -> int:
    """Number of ordered arrangements ``nPr = n! / (n-r)!``."""
    n_count = as_count(n)
    r_count = as_count(r)
    if n_count is None or r_count is None or r_count > n_count:
        return 0
    result = 1
    for i in range(r_count):
        result *= n_count - i
    return result


def combination(n: int, r: int) -> int:
    """Number of unordered selections ``nCr``.

    Uses the multiplicative formula on ``min(r, n-r)`` factors. After step
    ``i`` the running value is ``C(n, i+1)``, so the floor division is exact.
    """
    n_count = as_count(n)
    r_count = as_count(r)
    if n_count is None or r_count is None or r_count > n_count:
        return 0
    r_count = min(r_count, n_count - r_count)
    result = 1
    for i in range(r_count):
        result = result * (n_count - i) // (i + 1)
    return result
