"""Test display rounding of numbers and DataFrames."""

import math

import numpy as np
import pandas as pd

from bizstats.stats import round_frame, round_to


def test_default_two_decimals():
    assert round_to(118.10650887) == 118.11
    assert round_to(0.98149546, 3) == 0.981


def test_halves_round_away_from_zero():
    assert round_to(2.5, 0) == 3
    assert round_to(-2.5, 0) == -3
    assert round_to(0.125, 2) == 0.13
    assert round_to(-0.125, 2) == -0.13


def test_negative_decimals():
    assert round_to(1234.0, -2) == 1200.0


def test_non_finite_passthrough():
    assert math.isnan(round_to(math.nan))
    assert round_to(math.inf) == math.inf


def test_large_values_pass_through():
    assert round_to(1e307, 2) == 1e307
    assert round_to(-1.7e308, 5) == -1.7e308


def test_extreme_decimals():
    assert round_to(1.5, 400) == 1.5
    assert round_to(1234.5, -400) == 0.0


def test_round_frame_only_touches_float_columns():
    df = pd.DataFrame({"label": ["a", "b"], "count": [1, 2], "value": [1.234, np.nan]})
    out = round_frame(df)
    assert out["value"].iloc[0] == 1.23
    assert np.isnan(out["value"].iloc[1])
    assert list(out["count"]) == [1, 2]
    # input is not modified
    assert df["value"].iloc[0] == 1.234
