"""Define standardized column names for result DataFrames."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RegressionColumns:
    """Column labels of :func:`bizstats.regression.deviation_table`.

    Attributes:
        x_dev: ``X - X̄`` for each observation.
        y_dev: ``Y - Ȳ`` for each observation.
        xy_dev: Product of the two deviations; its sum is ``Sxy``.
    """

    x: str = "X"
    y: str = "Y"
    x_dev: str = "X - X̄"
    y_dev: str = "Y - Ȳ"
    x_dev_sq: str = "(X - X̄)²"
    y_dev_sq: str = "(Y - Ȳ)²"
    xy_dev: str = "(X - X̄)(Y - Ȳ)"


@dataclass(frozen=True)
class IndexColumns:
    """Column labels of :func:`bizstats.index_numbers.index_table`.

    Attributes:
        price_relative: ``P1 / P0 * 100`` for each item.
    """

    item: str = "Item"
    p0: str = "P0"
    q0: str = "Q0"
    p1: str = "P1"
    q1: str = "Q1"
    p0q0: str = "P0Q0"
    p1q0: str = "P1Q0"
    p0q1: str = "P0Q1"
    p1q1: str = "P1Q1"
    price_relative: str = "Price Relative"


@dataclass(frozen=True)
class TimeSeriesColumns:
    period: str = "Period"
    actual: str = "Actual"
    trend: str = "Trend"
    moving_average: str = "Moving Average"
    seasonal_ratio: str = "Seasonal Ratio"
    deseasonalized: str = "Deseasonalized"


@dataclass(frozen=True)
class FittingColumns:
    """Column labels of :func:`bizstats.fitting.fit_normal`.

    Attributes:
        area: Normal probability mass of the class interval.
        expected: ``N * area``.
        chi_square: ``(O - E)² / E`` for the class.
    """

    label: str = "Class"
    lower: str = "Lower"
    upper: str = "Upper"
    observed: str = "Observed"
    z_lower: str = "z1"
    z_upper: str = "z2"
    area: str = "Area"
    expected: str = "Expected"
    chi_square: str = "(O - E)²/E"


REGRESSION = RegressionColumns()
INDEX = IndexColumns()
TIME_SERIES = TimeSeriesColumns()
FITTING = FittingColumns()
