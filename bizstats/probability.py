"""Bayes' theorem and Monte Carlo probability experiments."""

from __future__ import annotations

import logging
from typing import Dict, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from .stats import total

logger = logging.getLogger(__name__)

PRIOR_TOLERANCE = 1e-3

# kind -> (description of a success, theoretical probability of success)
EXPERIMENTS: Dict[str, Tuple[str, float]] = {
    "coin": ("heads", 0.5),
    "die": ("a six", 1.0 / 6.0),
    "two-dice": ("a total of seven", 6.0 / 36.0),
}


def bayes_posteriors(hypotheses: Sequence[Tuple[str, float, float]]) -> Dict[str, object]:
    """Apply Bayes' theorem over a partition of hypotheses.

    Args:
        hypotheses: ``(name, prior, likelihood)`` triples where ``prior`` is
            ``P(Hi)`` and ``likelihood`` is ``P(E | Hi)``.

    Returns:
        dict: ``marginal`` (``P(E) = Σ P(Hi) P(E|Hi)``) and ``table``, a
        DataFrame with columns ``Hypothesis``, ``Prior``, ``Likelihood``,
        ``Joint`` and ``Posterior``.

    Raises:
        ValueError: If fewer than two hypotheses are given, a probability lies
            outside [0, 1], the priors do not sum to 1 (within 1e-3), or the
            evidence has zero probability.
    """
    if len(hypotheses) < 2:
        raise ValueError("Bayes' theorem needs at least two hypotheses.")
    names = [str(h[0]) for h in hypotheses]
    priors = np.array([float(h[1]) for h in hypotheses])
    likelihoods = np.array([float(h[2]) for h in hypotheses])

    for label, arr in (("prior", priors), ("likelihood", likelihoods)):
        if np.any(~np.isfinite(arr)) or np.any(arr < 0) or np.any(arr > 1):
            raise ValueError(f"Every {label} must be a probability in [0, 1].")
    prior_sum = total(priors)
    if abs(prior_sum - 1.0) >= PRIOR_TOLERANCE:
        raise ValueError(f"Priors must sum to 1; got {prior_sum:.4f}.")

    joint = priors * likelihoods
    marginal = total(joint)
    if marginal == 0:
        raise ValueError("The evidence has zero probability under every hypothesis.")

    table = pd.DataFrame(
        {
            "Hypothesis": names,
            "Prior": priors,
            "Likelihood": likelihoods,
            "Joint": joint,
            "Posterior": joint / marginal,
        }
    )
    return {"marginal": marginal, "table": table}


def _draw(kind: str, trials: int, rng: np.random.Generator) -> Tuple[np.ndarray, np.ndarray]:
    if kind == "coin":
        outcomes = rng.integers(0, 2, size=trials)
        return outcomes, outcomes == 1
    if kind == "die":
        outcomes = rng.integers(1, 7, size=trials)
        return outcomes, outcomes == 6
    outcomes = rng.integers(1, 7, size=trials) + rng.integers(1, 7, size=trials)
    return outcomes, outcomes == 7


def monte_carlo(
    kind: str = "coin",
    trials: int = 1000,
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None,
) -> Dict[str, object]:
    """Simulate a simple experiment and compare with theory.

    Args:
        kind: ``"coin"`` (success = heads, coded 1), ``"die"`` (success = 6)
            or ``"two-dice"`` (success = total of 7).
        trials: Number of repetitions (at least 1).
        rng: Random generator to draw from. Takes precedence over ``seed``.
        seed: Seed for a fresh ``numpy.random.default_rng`` when ``rng`` is
            not given; ``None`` draws fresh OS entropy.

    Returns:
        dict: ``kind``, ``trials``, ``successes``, ``empirical``,
        ``theoretical``, ``difference`` and ``trace``, a DataFrame of
        ``Trial``, ``Outcome`` and ``Running Average`` recorded for every
        trial up to 100 and every tenth trial after that.
    """
    if kind not in EXPERIMENTS:
        raise ValueError(f"kind must be one of {tuple(EXPERIMENTS)}; got {kind!r}")
    if trials < 1:
        raise ValueError(f"trials must be >= 1; got {trials}")
    if rng is None:
        rng = np.random.default_rng(seed)

    outcomes, success = _draw(kind, int(trials), rng)
    trial_numbers = np.arange(1, trials + 1)
    running = np.cumsum(success) / trial_numbers

    keep = (trial_numbers <= 100) | (trial_numbers % 10 == 0)
    trace = pd.DataFrame(
        {
            "Trial": trial_numbers[keep],
            "Outcome": outcomes[keep],
            "Running Average": running[keep],
        }
    )

    successes = int(np.sum(success))
    empirical = successes / trials
    theoretical = EXPERIMENTS[kind][1]
    logger.debug(
        "Monte Carlo %s: %d/%d successes (%s)",
        kind,
        successes,
        trials,
        EXPERIMENTS[kind][0],
    )
    return {
        "kind": kind,
        "trials": int(trials),
        "successes": successes,
        "empirical": empirical,
        "theoretical": theoretical,
        "difference": abs(empirical - theoretical),
        "trace": trace,
    }
