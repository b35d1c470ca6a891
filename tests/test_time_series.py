import math

import numpy as np
import pytest

from bizstats.sample_data import TIME_SERIES
from bizstats.schema import TIME_SERIES as COLS
from bizstats.time_series import (
    analyze_time_series,
    fit_trend,
    forecast,
    least_squares_trend,
    moving_average,
    seasonal_indices,
    semi_average_trend,
)

LABELS = [label for label, _ in TIME_SERIES]
VALUES = [value for _, value in TIME_SERIES]


class TestTrend:
    def test_least_squares_sample(self):
        trend = least_squares_trend(VALUES)
        assert trend["sxx"] == 143
        assert trend["sxy"] == 415
        assert math.isclose(trend["slope"], 415 / 143)
        assert math.isclose(trend["intercept"], 147.5 - 415 / 143 * 6.5)

    def test_least_squares_exact_line(self):
        trend = least_squares_trend([5, 7, 9, 11])
        assert math.isclose(trend["slope"], 2.0)
        assert math.isclose(trend["intercept"], 3.0)
        assert np.allclose(trend["fitted"], [5, 7, 9, 11])

    def test_semi_averages_even(self):
        trend = semi_average_trend(VALUES)
        first, second = sum(VALUES[:6]) / 6, sum(VALUES[6:]) / 6
        assert math.isclose(trend["slope"], (second - first) / 6)
        assert trend["first_centre"] == 3.5
        assert trend["second_centre"] == 9.5

    def test_semi_averages_odd_drops_middle(self):
        trend = semi_average_trend([10, 12, 100, 16, 18])
        # halves (10, 12) and (16, 18) centred at X=1.5 and X=4.5
        assert math.isclose(trend["slope"], 2.0)
        assert math.isclose(trend["intercept"], 8.0)

    def test_methods_agree_on_a_straight_line(self):
        line = [3 + 2 * x for x in range(1, 9)]
        ls = fit_trend(line, "least-squares")
        sa = fit_trend(line, "semi-averages")
        assert math.isclose(ls["slope"], sa["slope"])
        assert math.isclose(ls["intercept"], sa["intercept"])

    def test_unknown_method(self):
        with pytest.raises(ValueError, match="method must be one of"):
            fit_trend(VALUES, "exponential")


class TestMovingAverage:
    def test_centred_window(self):
        ma = moving_average(VALUES, 3)
        assert np.isnan(ma[0]) and np.isnan(ma[-1])
        assert math.isclose(ma[1], (120 + 135 + 148) / 3)

    def test_window_five(self):
        ma = moving_average(VALUES, 5)
        assert np.all(np.isnan(ma[:2])) and np.all(np.isnan(ma[-2:]))
        assert math.isclose(ma[2], sum(VALUES[:5]) / 5)

    @pytest.mark.parametrize("window", [2, 4, 1])
    def test_invalid_window(self, window):
        with pytest.raises(ValueError, match="odd integer"):
            moving_average(VALUES, window)

    def test_window_longer_than_series(self):
        with pytest.raises(ValueError, match="longer than the series"):
            moving_average([1, 2, 3], 5)


def test_seasonal_indices_average_ratios_per_position():
    seasonal = seasonal_indices(VALUES, window=3, period=4)
    ratios = seasonal["ratios"]
    assert np.isnan(ratios[0]) and np.isnan(ratios[-1])
    expected_q1 = np.mean([ratios[4], ratios[8]])
    assert math.isclose(seasonal["indices"][0], expected_q1)
    assert len(seasonal["indices"]) == 4


def test_seasonal_index_defaults_to_100_without_ratios():
    seasonal = seasonal_indices([1, 2, 3], window=3, period=4)
    # only position 1 has a moving average
    assert seasonal["indices"][0] == 100.0
    assert seasonal["indices"][2] == 100.0
    assert math.isclose(seasonal["indices"][1], 100.0)


def test_forecast_without_seasonality_extends_trend():
    line = [3 + 2 * x for x in range(1, 9)]
    fc = forecast(line, periods=3)
    assert np.allclose(fc, [21, 23, 25])


def test_forecast_applies_seasonal_index():
    fc = forecast(VALUES, periods=4)
    trend = least_squares_trend(VALUES)
    indices = seasonal_indices(VALUES)["indices"]
    expected_first = (trend["intercept"] + trend["slope"] * 13) * indices[0] / 100
    assert math.isclose(fc[0], expected_first)
    assert len(fc) == 4


def test_analyze_time_series_table():
    result = analyze_time_series(VALUES, labels=LABELS, periods=2)
    table = result["table"]
    assert list(table[COLS.period]) == LABELS
    assert list(table[COLS.actual]) == VALUES
    assert len(result["forecasts"]) == 2
    assert np.allclose(table[COLS.trend], result["trend"]["fitted"])
    # deseasonalizing then reseasonalizing returns the actual value
    positions = np.arange(len(VALUES)) % 4
    reseasoned = table[COLS.deseasonalized] * result["seasonal_indices"][positions] / 100
    assert np.allclose(reseasoned, VALUES)


def test_analyze_requires_four_observations():
    with pytest.raises(ValueError, match="minimum 4"):
        analyze_time_series([1, 2, 3])


def test_analyze_label_mismatch():
    with pytest.raises(ValueError, match="labels"):
        analyze_time_series(VALUES, labels=["Q1"])
