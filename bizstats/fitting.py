"""Fit a normal distribution to a grouped frequency table.

Each class interval receives the normal probability mass between its
bounds; expected frequencies are that mass times the total frequency, and
the chi-square statistic sums ``(O - E)² / E`` over the classes.
"""

from __future__ import annotations

import importlib.util
import logging
import math
import re
import warnings
from typing import Dict, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from .schema import FITTING
from .stats import mean, normal_cdf, total, z_score

HAVE_SCIPY = importlib.util.find_spec("scipy") is not None
if HAVE_SCIPY:
    from scipy.stats import chi2

logger = logging.getLogger(__name__)

MIN_EXPECTED_FREQUENCY = 5.0

ClassRow = Tuple[str, float]

_CLASS_INTERVAL = re.compile(r"^\s*(-?\d+(?:\.\d*)?|-?\.\d+)\s*-\s*(-?\d+(?:\.\d*)?|-?\.\d+)\s*$")


def parse_class_interval(label: str) -> Tuple[float, float]:
    """Parse a class label such as ``"30-35"`` into ``(30.0, 35.0)``.

    Bounds may be negative: ``"-5-0"`` is ``(-5.0, 0.0)``.

    Raises:
        ValueError: If the label is not ``lower-upper`` with ``lower < upper``.
    """
    match = _CLASS_INTERVAL.match(str(label))
    if match is None:
        raise ValueError(f"Class interval must look like 'lower-upper'; got {label!r}")
    lower, upper = float(match.group(1)), float(match.group(2))
    if not lower < upper:
        raise ValueError(f"Class lower bound must be below upper bound; got {label!r}")
    return lower, upper


def _grouped(classes: Sequence[ClassRow]) -> Tuple[list, np.ndarray, np.ndarray, np.ndarray]:
    if not classes:
        raise ValueError("At least one class is required.")
    labels = [str(c[0]) for c in classes]
    bounds = np.array([parse_class_interval(label) for label in labels])
    freqs = np.array([float(c[1]) for c in classes])
    if np.any(freqs < 0) or not np.all(np.isfinite(freqs)):
        raise ValueError("Frequencies must be non-negative finite numbers.")
    if total(freqs) <= 0:
        raise ValueError("Total frequency must be positive.")
    return labels, bounds[:, 0], bounds[:, 1], freqs


def grouped_mean_std(classes: Sequence[ClassRow]) -> Tuple[float, float]:
    """Return the frequency-weighted mean and population standard deviation.

    Args:
        classes: ``(label, frequency)`` pairs, e.g. ``("30-35", 5)``.
    """
    _, lower, upper, freqs = _grouped(classes)
    mids = (lower + upper) / 2.0
    n = total(freqs)
    grouped_mean = total(freqs * mids) / n
    grouped_var = total(freqs * (mids - grouped_mean) ** 2) / n
    return grouped_mean, math.sqrt(grouped_var)


def fit_normal(
    classes: Sequence[ClassRow],
    mean_value: Optional[float] = None,
    std_dev: Optional[float] = None,
    estimated_params: Optional[int] = None,
) -> Dict[str, object]:
    """Fit a normal curve to grouped data and compute the chi-square statistic.

    Args:
        classes: ``(label, frequency)`` pairs with labels like ``"30-35"``.
        mean_value: Mean of the fitted normal; estimated from the classes when
            ``None``.
        std_dev: Standard deviation of the fitted normal; estimated when
            ``None``.
        estimated_params: Parameters estimated from the data, subtracted from
            the degrees of freedom. Defaults to the number of ``None``
            arguments among ``mean_value`` and ``std_dev``.

    Returns:
        dict: ``mean``, ``std_dev``, ``total_frequency``, ``chi_square``,
        ``dof``, ``p_value`` (NaN without SciPy or when ``dof < 1``) and
        ``table``.

    Note:
        A warning is issued when any expected frequency is below 5, where
        the chi-square approximation is unreliable.
    """
    labels, lower, upper, observed = _grouped(classes)
    if estimated_params is None:
        estimated_params = int(mean_value is None) + int(std_dev is None)
    if mean_value is None or std_dev is None:
        est_mean, est_std = grouped_mean_std(classes)
        mean_value = est_mean if mean_value is None else mean_value
        std_dev = est_std if std_dev is None else std_dev
    if not std_dev > 0:
        raise ValueError(f"std_dev must be positive; got {std_dev}")

    n = total(observed)
    z_lower = np.array([z_score(v, mean_value, std_dev) for v in lower])
    z_upper = np.array([z_score(v, mean_value, std_dev) for v in upper])
    area = np.array([normal_cdf(b) - normal_cdf(a) for a, b in zip(z_lower, z_upper)])
    expected = n * area

    with np.errstate(divide="ignore", invalid="ignore"):
        contributions = np.where(expected > 0, (observed - expected) ** 2 / expected, np.inf)
    chi_square = total(contributions)

    if np.any(expected < MIN_EXPECTED_FREQUENCY):
        warnings.warn(
            f"Some expected frequencies are below {MIN_EXPECTED_FREQUENCY:g}; "
            "consider merging tail classes.",
            UserWarning,
            stacklevel=2,
        )

    dof = len(labels) - 1 - estimated_params
    p_value = math.nan
    if HAVE_SCIPY and dof >= 1 and math.isfinite(chi_square):
        p_value = float(chi2.sf(chi_square, dof))

    logger.debug(
        "Normal fit mean=%.4f sd=%.4f chi2=%.4f dof=%d (mean E=%.3f)",
        mean_value,
        std_dev,
        chi_square,
        dof,
        mean(expected),
    )

    table = pd.DataFrame(
        {
            FITTING.label: labels,
            FITTING.lower: lower,
            FITTING.upper: upper,
            FITTING.observed: observed,
            FITTING.z_lower: z_lower,
            FITTING.z_upper: z_upper,
            FITTING.area: area,
            FITTING.expected: expected,
            FITTING.chi_square: contributions,
        }
    )
    return {
        "mean": float(mean_value),
        "std_dev": float(std_dev),
        "total_frequency": n,
        "chi_square": chi_square,
        "dof": dof,
        "p_value": p_value,
        "table": table,
    }
