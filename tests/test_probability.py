import math

import numpy as np
import pytest

from bizstats.probability import bayes_posteriors, monte_carlo
from bizstats.sample_data import FACTORY_BAYES


class TestBayes:
    def test_factory_example(self):
        result = bayes_posteriors(FACTORY_BAYES)
        assert math.isclose(result["marginal"], 0.031)
        posterior = dict(zip(result["table"]["Hypothesis"], result["table"]["Posterior"]))
        assert math.isclose(posterior["A"], 0.006 / 0.031)
        assert math.isclose(posterior["B"], 0.015 / 0.031)
        assert math.isclose(posterior["C"], 0.010 / 0.031)

    def test_posteriors_sum_to_one(self):
        result = bayes_posteriors([("H1", 0.3, 0.8), ("H2", 0.5, 0.6), ("H3", 0.2, 0.9)])
        assert math.isclose(result["table"]["Posterior"].sum(), 1.0)

    def test_priors_must_sum_to_one(self):
        with pytest.raises(ValueError, match="sum to 1"):
            bayes_posteriors([("H1", 0.3, 0.5), ("H2", 0.3, 0.5)])

    def test_probabilities_in_range(self):
        with pytest.raises(ValueError, match="likelihood"):
            bayes_posteriors([("H1", 0.5, 1.5), ("H2", 0.5, 0.5)])

    def test_needs_two_hypotheses(self):
        with pytest.raises(ValueError, match="at least two"):
            bayes_posteriors([("H1", 1.0, 0.5)])

    def test_impossible_evidence(self):
        with pytest.raises(ValueError, match="zero probability"):
            bayes_posteriors([("H1", 0.5, 0.0), ("H2", 0.5, 0.0)])


class TestMonteCarlo:
    def test_seed_is_reproducible(self):
        a = monte_carlo("die", 500, seed=11)
        b = monte_carlo("die", 500, seed=11)
        assert a["successes"] == b["successes"]
        assert a["trace"].equals(b["trace"])

    def test_injected_generator(self):
        a = monte_carlo("coin", 300, rng=np.random.default_rng(7))
        b = monte_carlo("coin", 300, seed=7)
        assert a["successes"] == b["successes"]

    def test_trace_sampling(self):
        result = monte_carlo("coin", 1000, seed=0)
        trials = result["trace"]["Trial"]
        assert len(trials) == 190
        assert trials.iloc[99] == 100
        assert trials.iloc[100] == 110
        assert math.isclose(result["trace"]["Running Average"].iloc[-1], result["empirical"])

    @pytest.mark.parametrize(
        "kind,theoretical", [("coin", 0.5), ("die", 1 / 6), ("two-dice", 1 / 6)]
    )
    def test_converges_to_theory(self, kind, theoretical):
        result = monte_carlo(kind, 20000, seed=1)
        assert result["theoretical"] == pytest.approx(theoretical)
        assert result["difference"] < 0.02

    def test_two_dice_outcome_range(self):
        outcomes = monte_carlo("two-dice", 2000, seed=5)["trace"]["Outcome"]
        assert outcomes.min() >= 2 and outcomes.max() <= 12

    def test_invalid_arguments(self):
        with pytest.raises(ValueError, match="kind must be one of"):
            monte_carlo("roulette", 10)
        with pytest.raises(ValueError, match="trials"):
            monte_carlo("coin", 0)
