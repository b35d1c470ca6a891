"""Test both lines of regression and the slope inference."""

import math

import numpy as np
import pytest

from bizstats import regression
from bizstats.regression import deviation_table, predict_x, predict_y, regression_lines
from bizstats.schema import REGRESSION

X = [2, 4, 6, 8, 10]
Y = [4, 5, 7, 8, 11]


def test_worked_example():
    fit = regression_lines(X, Y)
    assert fit["n"] == 5
    assert fit["x_mean"] == 6
    assert fit["y_mean"] == 7
    assert fit["sxx"] == 40
    assert fit["syy"] == 30
    assert fit["sxy"] == 34
    assert math.isclose(fit["b_yx"], 0.85)
    assert math.isclose(fit["b_xy"], 34 / 30)
    assert math.isclose(fit["r"], 0.982, abs_tol=1e-3)
    assert math.isclose(fit["a_yx"], 1.9)


def test_property_checks_hold():
    fit = regression_lines(X, Y)
    assert fit["r2_check"]
    assert fit["slope_sign_check"]
    assert math.isclose(fit["r_squared"], fit["b_yx"] * fit["b_xy"])


def test_negative_relationship_signs_agree():
    fit = regression_lines(X, [11, 8, 7, 5, 4])
    assert fit["b_yx"] < 0 and fit["b_xy"] < 0
    assert fit["slope_sign_check"]


def test_predictions_pass_through_means():
    fit = regression_lines(X, Y)
    assert math.isclose(predict_y(fit, 6), 7)
    assert math.isclose(predict_x(fit, 7), 6)
    assert math.isclose(predict_y(fit, 12), 12.1)


def test_slope_standard_error():
    fit = regression_lines(X, Y)
    assert fit["dof"] == 3
    assert math.isclose(fit["se_b_yx"], math.sqrt((30 - 0.85 * 34) / 3 / 40))
    if regression.HAVE_SCIPY:
        assert 0 < fit["p_b_yx"] < 0.01
        assert fit["ci95_b_yx"] > fit["se_b_yx"]
    else:
        assert math.isnan(fit["p_b_yx"])


def test_two_points_have_no_standard_error():
    fit = regression_lines([1, 2], [3, 5])
    assert math.isclose(fit["b_yx"], 2.0)
    assert math.isnan(fit["se_b_yx"])


def test_invalid_input_raises():
    with pytest.raises(ValueError, match="same length"):
        regression_lines([1, 2, 3], [1, 2])
    with pytest.raises(ValueError, match="Insufficient data"):
        regression_lines([1], [1])
    with pytest.raises(ValueError, match="Insufficient variance"):
        regression_lines([1, 2, 3], [4, 4, 4])
    with pytest.raises(ValueError, match="finite"):
        regression_lines([1, np.nan, 3], [1, 2, 3])


def test_deviation_table_totals():
    table = deviation_table(X, Y)
    assert list(table[REGRESSION.x]) == X
    assert table[REGRESSION.x_dev_sq].sum() == 40
    assert table[REGRESSION.y_dev_sq].sum() == 30
    assert table[REGRESSION.xy_dev].sum() == 34
    assert math.isclose(table[REGRESSION.x_dev].sum(), 0.0, abs_tol=1e-12)
