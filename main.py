#!/usr/bin/env python3
"""
Main script for running the worked examples.
"""

# Overview:
# 1) Regression: both lines of regression for the sample X/Y data.
# 2) Index numbers: every index method on the sample basket plus Fisher tests.
# 3) Time series: least-squares trend, moving averages, seasonal indices, forecasts.
# 4) Probability: permutations/combinations, Bayes posteriors, Monte Carlo.
# 5) Distributions: binomial, Poisson and normal probabilities, normal fitting.
# Values are rounded to two decimals for display only.

import logging
import os
import sys
import time

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    handlers=[
        logging.StreamHandler(sys.stdout),
        logging.FileHandler("bizstats_examples.log", mode="w"),
    ],
)

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from bizstats import sample_data
from bizstats.fitting import fit_normal
from bizstats.index_numbers import INDEX_METHODS, fisher_tests, price_index
from bizstats.probability import bayes_posteriors, monte_carlo
from bizstats.regression import predict_y, regression_lines
from bizstats.stats import (
    binomial_moments,
    binomial_pmf,
    combination,
    normal_probability_between,
    permutation,
    poisson_pmf,
    round_frame,
    round_to,
)
from bizstats.time_series import analyze_time_series


def run_regression():
    fit = regression_lines(sample_data.REGRESSION_X, sample_data.REGRESSION_Y)
    logging.info(
        "Regression: X̄=%s Ȳ=%s r=%s bYX=%s bXY=%s",
        round_to(fit["x_mean"]),
        round_to(fit["y_mean"]),
        round_to(fit["r"], 3),
        round_to(fit["b_yx"]),
        round_to(fit["b_xy"]),
    )
    logging.info("Regression: predicted Y at X=12 is %s", round_to(predict_y(fit, 12)))


def run_index_numbers():
    _, p0, q0, p1, q1 = sample_data.basket_columns()
    for method in INDEX_METHODS:
        logging.info("Index (%s): %s", method, round_to(price_index(p0, q0, p1, q1, method)))
    tests = fisher_tests(p0, q0, p1, q1)
    logging.info(
        "Fisher tests: time reversal %s, factor reversal %s",
        "passed" if tests["time_reversal"]["passes"] else "failed",
        "passed" if tests["factor_reversal"]["passes"] else "failed",
    )


def run_time_series():
    labels, values = zip(*sample_data.TIME_SERIES)
    result = analyze_time_series(values, labels=labels)
    logging.info("Time series table:\n%s", round_frame(result["table"]).to_string(index=False))
    logging.info("Forecasts: %s", [round_to(v) for v in result["forecasts"]])


def run_probability():
    logging.info("P(8, 3) = %d, C(10, 4) = %d", permutation(8, 3), combination(10, 4))
    bayes = bayes_posteriors(sample_data.FACTORY_BAYES)
    logging.info("Bayes: P(defective) = %s", round_to(bayes["marginal"], 4))
    logging.info("Bayes posteriors:\n%s", round_frame(bayes["table"], 4).to_string(index=False))
    mc = monte_carlo("die", trials=1000, seed=42)
    logging.info(
        "Monte Carlo (die): empirical %s vs theoretical %s",
        round_to(mc["empirical"], 4),
        round_to(mc["theoretical"], 4),
    )


def run_distributions():
    n, p = sample_data.BINOMIAL["n"], sample_data.BINOMIAL["p"]
    b_mean, b_var = binomial_moments(n, p)
    logging.info(
        "Binomial(n=%d, p=%s): P(X=5)=%s mean=%s variance=%s",
        n,
        p,
        round_to(binomial_pmf(5, n, p), 6),
        round_to(b_mean),
        round_to(b_var),
    )
    lam = sample_data.POISSON["lam"]
    logging.info("Poisson(λ=%s): P(X=3)=%s", lam, round_to(poisson_pmf(3, lam), 6))
    prob = normal_probability_between(45, 55, **sample_data.NORMAL)
    logging.info("Normal(50, 10): P(45 < X < 55)=%s", round_to(prob, 4))
    fit = fit_normal(sample_data.NORMAL_FITTING, mean_value=47.5, std_dev=7.5)
    logging.info("Normal fitting: χ²=%s with %d degrees of freedom", round_to(fit["chi_square"], 3), fit["dof"])


def main():
    """Run every worked example with timing logs."""

    start_time = time.time()
    logging.info("Running worked examples")

    for step in (
        run_regression,
        run_index_numbers,
        run_time_series,
        run_probability,
        run_distributions,
    ):
        step_start = time.time()
        step()
        logging.info("%s completed in %.3f seconds", step.__name__, time.time() - step_start)

    logging.info("Total execution time: %.2f seconds", time.time() - start_time)
    return 0


if __name__ == "__main__":
    sys.exit(main())
