"""
A Python package of business-statistics teaching calculators.

Computes the worked examples of an introductory statistics course from small
in-memory datasets.

Modules:
    - stats: Numeric core (descriptive statistics, combinatorics, distributions, rounding).
    - regression: Lines of regression of Y on X and X on Y.
    - index_numbers: Aggregative, relative and weighted price indices with Fisher tests.
    - time_series: Trend, moving averages, seasonal indices and forecasts.
    - probability: Bayes' theorem and Monte Carlo experiments.
    - fitting: Normal fitting of grouped frequency data with chi-square.
"""

__version__ = "1.0.0"

from .fitting import fit_normal, grouped_mean_std, parse_class_interval
from .index_numbers import (
    INDEX_METHODS,
    aggregate_totals,
    fisher_tests,
    index_table,
    price_index,
)
from .probability import bayes_posteriors, monte_carlo
from .regression import deviation_table, predict_x, predict_y, regression_lines
from .time_series import (
    analyze_time_series,
    fit_trend,
    forecast,
    least_squares_trend,
    moving_average,
    seasonal_indices,
    semi_average_trend,
)

__all__ = [
    # Regression
    "regression_lines",
    "predict_y",
    "predict_x",
    "deviation_table",
    # Index numbers
    "INDEX_METHODS",
    "price_index",
    "aggregate_totals",
    "fisher_tests",
    "index_table",
    # Time series
    "least_squares_trend",
    "semi_average_trend",
    "fit_trend",
    "moving_average",
    "seasonal_indices",
    "forecast",
    "analyze_time_series",
    # Probability
    "bayes_posteriors",
    "monte_carlo",
    # Distribution fitting
    "parse_class_interval",
    "grouped_mean_std",
    "fit_normal",
]
