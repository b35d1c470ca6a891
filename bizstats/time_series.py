"""Trend, moving-average and seasonal analysis of a short time series.

Periods are numbered ``X = 1..n`` in observation order for both trend
methods, so the two trend equations ``Y = a + bX`` are directly comparable
and extrapolate to ``X = n+1, n+2, ...`` for forecasting.
"""

# Method summary: fit a linear trend (least squares or semi-averages),
# smooth with a centred moving average, take ratio-to-moving-average per
# observation, average those ratios per season position to get seasonal
# indices, and forecast as trend x seasonal index / 100.

from __future__ import annotations

import logging
from typing import Dict, Optional, Sequence

import numpy as np
import pandas as pd

from .schema import TIME_SERIES
from .stats import mean, total

logger = logging.getLogger(__name__)

TREND_METHODS = ("least-squares", "semi-averages")
DEFAULT_FORECAST_PERIODS = 4
DEFAULT_WINDOW = 3
DEFAULT_SEASON_LENGTH = 4
MIN_OBSERVATIONS = 4


def _series(values: Sequence[float], min_points: int = 2) -> np.ndarray:
    arr = np.asarray(values, dtype=float).ravel()
    if not np.all(np.isfinite(arr)):
        raise ValueError("Time series values must be finite numbers.")
    if arr.size < min_points:
        raise ValueError(
            f"Insufficient data: {arr.size} observations, minimum {min_points} required."
        )
    return arr


def least_squares_trend(values: Sequence[float]) -> Dict[str, object]:
    """Fit ``Y = a + bX`` by least squares with ``X = 1..n``.

    Returns:
        dict: ``intercept`` (a), ``slope`` (b), ``x_mean``, ``y_mean``,
        ``sxy``, ``sxx`` and ``fitted`` (numpy array of trend values).
    """
    y = _series(values)
    x = np.arange(1, y.size + 1, dtype=float)
    x_mean = mean(x)
    y_mean = mean(y)
    sxy = total((x - x_mean) * (y - y_mean))
    sxx = total((x - x_mean) ** 2)
    slope = sxy / sxx
    intercept = y_mean - slope * x_mean
    return {
        "method": "least-squares",
        "intercept": intercept,
        "slope": slope,
        "x_mean": x_mean,
        "y_mean": y_mean,
        "sxy": sxy,
        "sxx": sxx,
        "fitted": intercept + slope * x,
    }


def semi_average_trend(values: Sequence[float]) -> Dict[str, object]:
    """Fit a trend line through the means of the two halves of the series.

    For odd ``n`` the middle observation is left out so both halves have the
    same length. Each half mean is placed at the centre of its half on the
    ``X = 1..n`` axis.

    Returns:
        dict: ``intercept``, ``slope``, ``first_mean``, ``second_mean``,
        ``first_centre``, ``second_centre`` and ``fitted``.
    """
    y = _series(values)
    n = y.size
    half = n // 2
    first = y[:half]
    second = y[n - half:]

    first_mean = mean(first)
    second_mean = mean(second)
    first_centre = (1 + half) / 2.0
    second_centre = (n - half + 1 + n) / 2.0

    slope = (second_mean - first_mean) / (second_centre - first_centre)
    intercept = first_mean - slope * first_centre
    x = np.arange(1, n + 1, dtype=float)
    return {
        "method": "semi-averages",
        "intercept": intercept,
        "slope": slope,
        "first_mean": first_mean,
        "second_mean": second_mean,
        "first_centre": first_centre,
        "second_centre": second_centre,
        "fitted": intercept + slope * x,
    }


def fit_trend(values: Sequence[float], method: str = "least-squares") -> Dict[str, object]:
    if method == "least-squares":
        return least_squares_trend(values)
    if method == "semi-averages":
        return semi_average_trend(values)
    raise ValueError(f"method must be one of {TREND_METHODS}; got {method!r}")


def moving_average(values: Sequence[float], window: int = DEFAULT_WINDOW) -> np.ndarray:
    """Centred moving average over an odd ``window``.

    Returns:
        numpy.ndarray: Same length as ``values``; NaN for the ``window // 2``
        positions at each end where the window does not fit.
    """
    y = _series(values, min_points=1)
    if window < 3 or window % 2 == 0:
        raise ValueError(f"window must be an odd integer >= 3; got {window}")
    if window > y.size:
        raise ValueError(f"window ({window}) is longer than the series ({y.size}).")
    return pd.Series(y).rolling(window, center=True).mean().to_numpy()


def seasonal_indices(
    values: Sequence[float],
    window: int = DEFAULT_WINDOW,
    period: int = DEFAULT_SEASON_LENGTH,
) -> Dict[str, np.ndarray]:
    """Ratio-to-moving-average seasonal indices.

    Args:
        values: Observations in time order.
        window: Moving-average window (odd).
        period: Season length, e.g. 4 for quarterly data.

    Returns:
        dict: ``ratios`` (``Y / MA * 100`` per observation, NaN where the
        moving average is undefined) and ``indices`` (mean ratio per season
        position ``0..period-1``; 100 for a position with no ratio).
    """
    if period < 1:
        raise ValueError(f"period must be >= 1; got {period}")
    y = _series(values, min_points=1)
    ma = moving_average(y, window)
    ratios = y / ma * 100.0

    indices = np.full(period, 100.0)
    for position in range(period):
        season = ratios[position::period]
        season = season[np.isfinite(season)]
        if season.size:
            indices[position] = mean(season)
    return {"ratios": ratios, "indices": indices}


def forecast(
    values: Sequence[float],
    periods: int = DEFAULT_FORECAST_PERIODS,
    method: str = "least-squares",
    window: int = DEFAULT_WINDOW,
    period: int = DEFAULT_SEASON_LENGTH,
) -> np.ndarray:
    """Forecast ``periods`` future values as trend x seasonal index / 100."""
    if periods < 0:
        raise ValueError(f"periods must be non-negative; got {periods}")
    y = _series(values)
    trend = fit_trend(y, method)
    indices = seasonal_indices(y, window, period)["indices"]

    n = y.size
    future_x = np.arange(n + 1, n + periods + 1, dtype=float)
    positions = (future_x.astype(int) - 1) % period
    return (trend["intercept"] + trend["slope"] * future_x) * indices[positions] / 100.0


def analyze_time_series(
    values: Sequence[float],
    labels: Optional[Sequence[str]] = None,
    method: str = "least-squares",
    window: int = DEFAULT_WINDOW,
    period: int = DEFAULT_SEASON_LENGTH,
    periods: int = DEFAULT_FORECAST_PERIODS,
) -> Dict[str, object]:
    """Run the full time-series analysis.

    Args:
        values: Observations in time order (at least four).
        labels: Optional period labels such as ``"Q1-2021"``.
        method: ``"least-squares"`` or ``"semi-averages"``.
        window: Moving-average window.
        period: Season length.
        periods: Number of periods to forecast.

    Returns:
        dict: ``trend`` (see :func:`fit_trend`), ``moving_average``,
        ``seasonal_indices``, ``forecasts`` and ``table``, a DataFrame with
        actual, trend, moving average, seasonal ratio and deseasonalized
        value per period.
    """
    y = _series(values, min_points=MIN_OBSERVATIONS)
    if labels is None:
        labels = [str(i) for i in range(1, y.size + 1)]
    elif len(labels) != y.size:
        raise ValueError("labels must have one entry per observation.")

    trend = fit_trend(y, method)
    seasonal = seasonal_indices(y, window, period)
    positions = np.arange(y.size) % period
    deseasonalized = y / (seasonal["indices"][positions] / 100.0)
    forecasts = forecast(y, periods, method, window, period)

    logger.info(
        "Trend (%s): Y = %.4f + %.4fX over %d periods",
        method,
        trend["intercept"],
        trend["slope"],
        y.size,
    )

    table = pd.DataFrame(
        {
            TIME_SERIES.period: list(labels),
            TIME_SERIES.actual: y,
            TIME_SERIES.trend: trend["fitted"],
            TIME_SERIES.moving_average: moving_average(y, window),
            TIME_SERIES.seasonal_ratio: seasonal["ratios"],
            TIME_SERIES.deseasonalized: deseasonalized,
        }
    )
    return {
        "trend": trend,
        "moving_average": table[TIME_SERIES.moving_average].to_numpy(),
        "seasonal_indices": seasonal["indices"],
        "forecasts": forecasts,
        "table": table,
    }
