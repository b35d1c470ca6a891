"""Provide the two lines of regression used in the regression module.

This module supports:
- the regression of Y on X and of X on Y through the means,
- the deviation table behind ``Sxx``, ``Syy`` and ``Sxy``, and
- the classroom property checks ``r² = bYX · bXY`` and equal slope signs.
"""

from __future__ import annotations

import importlib.util
import logging
import math
from typing import Dict, Sequence, Tuple

import numpy as np
import pandas as pd

from .schema import REGRESSION
from .stats import correlation, mean, total

HAVE_SCIPY = importlib.util.find_spec("scipy") is not None
if HAVE_SCIPY:
    from scipy.stats import t as student_t

logger = logging.getLogger(__name__)

PROPERTY_TOLERANCE = 1e-3


def _paired(
    x: Sequence[float], y: Sequence[float], min_points: int = 2
) -> Tuple[np.ndarray, np.ndarray]:
    x_arr = np.asarray(x, dtype=float).ravel()
    y_arr = np.asarray(y, dtype=float).ravel()
    if x_arr.size != y_arr.size:
        raise ValueError(
            f"X and Y must have the same length; got {x_arr.size} and {y_arr.size}."
        )
    if not (np.all(np.isfinite(x_arr)) and np.all(np.isfinite(y_arr))):
        raise ValueError("X and Y must contain only finite numbers.")
    if x_arr.size < min_points:
        raise ValueError(
            f"Insufficient data for regression: {x_arr.size} pairs, "
            f"minimum {min_points} required."
        )
    return x_arr, y_arr


def regression_lines(x: Sequence[float], y: Sequence[float]) -> Dict[str, float]:
    """Fit both least-squares lines of regression through the means.

    Args:
        x (Sequence[float]): Observations of X.
        y (Sequence[float]): Observations of Y, paired with ``x`` by position.

    Returns:
        dict[str, float]: Keys ``n``, ``x_mean``, ``y_mean``, ``sum_x``,
        ``sum_y``, ``sxx``, ``syy``, ``sxy``, ``r``, ``b_yx`` (slope of Y on
        X), ``b_xy`` (slope of X on Y), ``a_yx`` and ``a_xy`` (intercepts),
        ``r_squared``, ``r2_check`` and ``slope_sign_check`` (booleans), and
        ``se_b_yx``, ``ci95_b_yx``, ``p_b_yx`` for the Y-on-X slope.

    Raises:
        ValueError: If the series differ in length, hold fewer than two
            pairs, contain non-finite values, or either series is constant.

    Note:
        ``se_b_yx`` needs at least three pairs; ``ci95_b_yx`` and ``p_b_yx``
        additionally need SciPy. Unavailable values are NaN.
    """
    x_arr, y_arr = _paired(x, y)
    n = int(x_arr.size)

    x_mean = mean(x_arr)
    y_mean = mean(y_arr)
    x_dev = x_arr - x_mean
    y_dev = y_arr - y_mean

    sxx = total(x_dev**2)
    syy = total(y_dev**2)
    sxy = total(x_dev * y_dev)
    if sxx <= 0 or syy <= 0:
        raise ValueError("Insufficient variance for regression.")

    r = correlation(x_arr, y_arr)
    b_yx = sxy / sxx
    b_xy = sxy / syy

    r2_check = abs(r * r - b_yx * b_xy) < PROPERTY_TOLERANCE
    slope_sign_check = (b_yx > 0 and b_xy > 0) or (b_yx < 0 and b_xy < 0)
    if not r2_check:
        logger.warning(
            "r² (%.6f) differs from bYX·bXY (%.6f)", r * r, b_yx * b_xy
        )

    dof = n - 2
    se_b_yx = math.nan
    ci95_b_yx = math.nan
    p_b_yx = math.nan
    if dof > 0:
        sse = max(syy - b_yx * sxy, 0.0)
        se_b_yx = math.sqrt((sse / dof) / sxx)
        if HAVE_SCIPY:
            t_stat = b_yx / se_b_yx if se_b_yx > 0 else np.inf
            p_b_yx = float(2 * (1 - student_t.cdf(abs(t_stat), dof)))
            ci95_b_yx = float(student_t.ppf(0.975, dof)) * se_b_yx

    logger.debug("Regression n=%d r=%.6f bYX=%.6f bXY=%.6f", n, r, b_yx, b_xy)

    return {
        "n": n,
        "x_mean": x_mean,
        "y_mean": y_mean,
        "sum_x": total(x_arr),
        "sum_y": total(y_arr),
        "sxx": sxx,
        "syy": syy,
        "sxy": sxy,
        "r": r,
        "r_squared": r * r,
        "b_yx": b_yx,
        "b_xy": b_xy,
        "a_yx": y_mean - b_yx * x_mean,
        "a_xy": x_mean - b_xy * y_mean,
        "r2_check": r2_check,
        "slope_sign_check": slope_sign_check,
        "se_b_yx": se_b_yx,
        "ci95_b_yx": ci95_b_yx,
        "p_b_yx": p_b_yx,
        "dof": dof,
    }


def predict_y(fit: Dict[str, float], x: float) -> float:
    """Estimate Y from X with the line ``Y - Ȳ = bYX (X - X̄)``."""
    return fit["y_mean"] + fit["b_yx"] * (float(x) - fit["x_mean"])


def predict_x(fit: Dict[str, float], y: float) -> float:
    """Estimate X from Y with the line ``X - X̄ = bXY (Y - Ȳ)``."""
    return fit["x_mean"] + fit["b_xy"] * (float(y) - fit["y_mean"])


def deviation_table(x: Sequence[float], y: Sequence[float]) -> pd.DataFrame:
    """Return per-observation deviations, squares and cross products.

    Column totals of the last three columns are ``Sxx``, ``Syy`` and ``Sxy``.
    """
    x_arr, y_arr = _paired(x, y, min_points=1)
    x_dev = x_arr - mean(x_arr)
    y_dev = y_arr - mean(y_arr)
    return pd.DataFrame(
        {
            REGRESSION.x: x_arr,
            REGRESSION.y: y_arr,
            REGRESSION.x_dev: x_dev,
            REGRESSION.y_dev: y_dev,
            REGRESSION.x_dev_sq: x_dev**2,
            REGRESSION.y_dev_sq: y_dev**2,
            REGRESSION.xy_dev: x_dev * y_dev,
        }
    )
