"""
Price index numbers for a basket of items.

Given base-period prices and quantities (``P0``, ``Q0``) and current-period
prices and quantities (``P1``, ``Q1``) for each item, compute:
- simple aggregative:  ΣP1 / ΣP0 × 100
- simple average of price relatives:  Σ(P1/P0 × 100) / n
- Laspeyres:  ΣP1Q0 / ΣP0Q0 × 100  (base-period weights)
- Paasche:  ΣP1Q1 / ΣP0Q1 × 100  (current-period weights)
- Marshall-Edgeworth:  ΣP1(Q0+Q1) / ΣP0(Q0+Q1) × 100
- Fisher ideal:  √(Laspeyres × Paasche)

The Fisher index satisfies the time reversal test (P01 × P10 = 1) and the
factor reversal test (P01 × Q01 = V01); :func:`fisher_tests` reports both.
"""

from __future__ import annotations

import logging
import math
import warnings
from typing import Dict, Sequence, Tuple

import numpy as np
import pandas as pd

from .schema import INDEX
from .stats import mean, total

logger = logging.getLogger(__name__)

INDEX_METHODS: Tuple[str, ...] = (
    "simple-aggregative",
    "simple-average",
    "laspeyres",
    "paasche",
    "marshall-edgeworth",
    "fisher",
)

REVERSAL_TOLERANCE = 0.01


def _basket(
    p0: Sequence[float],
    q0: Sequence[float],
    p1: Sequence[float],
    q1: Sequence[float],
) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    arrays = tuple(np.asarray(a, dtype=float).ravel() for a in (p0, q0, p1, q1))
    sizes = {a.size for a in arrays}
    if len(sizes) != 1:
        raise ValueError(
            f"P0, Q0, P1 and Q1 must have the same length; got {[a.size for a in arrays]}"
        )
    if arrays[0].size == 0:
        raise ValueError("Index numbers require at least one item.")
    if not all(np.all(np.isfinite(a)) for a in arrays):
        raise ValueError("Prices and quantities must be finite numbers.")
    if np.any(arrays[0] <= 0):
        raise ValueError("Base-period prices (P0) must be positive.")
    return arrays


def aggregate_totals(
    p0: Sequence[float],
    q0: Sequence[float],
    p1: Sequence[float],
    q1: Sequence[float],
) -> Dict[str, float]:
    """Return the aggregate sums the index formulas are built from.

    Returns:
        dict[str, float]: ``sum_p0``, ``sum_p1``, ``sum_p0q0``, ``sum_p1q0``,
        ``sum_p0q1``, ``sum_p1q1`` and ``mean_price_relative``.
    """
    p0_arr, q0_arr, p1_arr, q1_arr = _basket(p0, q0, p1, q1)
    return {
        "sum_p0": total(p0_arr),
        "sum_p1": total(p1_arr),
        "sum_p0q0": total(p0_arr * q0_arr),
        "sum_p1q0": total(p1_arr * q0_arr),
        "sum_p0q1": total(p0_arr * q1_arr),
        "sum_p1q1": total(p1_arr * q1_arr),
        "mean_price_relative": mean(p1_arr / p0_arr * 100.0),
    }


def _ratio(numerator: float, denominator: float, label: str) -> float:
    if denominator == 0:
        raise ValueError(f"{label}: denominator is zero.")
    return numerator / denominator * 100.0


def price_index(
    p0: Sequence[float],
    q0: Sequence[float],
    p1: Sequence[float],
    q1: Sequence[float],
    method: str = "laspeyres",
) -> float:
    """Compute a price index (base period = 100).

    Args:
        p0, q0: Base-period prices and quantities per item.
        p1, q1: Current-period prices and quantities per item.
        method: One of :data:`INDEX_METHODS`.

    Returns:
        float: The unrounded index value.

    Raises:
        ValueError: For an unknown method, mismatched lengths, an empty
            basket, non-positive base prices, or a zero weighted aggregate.
    """
    if method not in INDEX_METHODS:
        raise ValueError(f"method must be one of {INDEX_METHODS}; got {method!r}")
    t = aggregate_totals(p0, q0, p1, q1)

    if method == "simple-aggregative":
        value = _ratio(t["sum_p1"], t["sum_p0"], method)
    elif method == "simple-average":
        value = t["mean_price_relative"]
    elif method == "laspeyres":
        value = _ratio(t["sum_p1q0"], t["sum_p0q0"], method)
    elif method == "paasche":
        value = _ratio(t["sum_p1q1"], t["sum_p0q1"], method)
    elif method == "marshall-edgeworth":
        value = _ratio(
            t["sum_p1q0"] + t["sum_p1q1"], t["sum_p0q0"] + t["sum_p0q1"], method
        )
    else:
        laspeyres = _ratio(t["sum_p1q0"], t["sum_p0q0"], "laspeyres")
        paasche = _ratio(t["sum_p1q1"], t["sum_p0q1"], "paasche")
        value = math.sqrt(laspeyres * paasche)

    logger.debug("%s index = %.6f", method, value)
    return value


def fisher_tests(
    p0: Sequence[float],
    q0: Sequence[float],
    p1: Sequence[float],
    q1: Sequence[float],
) -> Dict[str, Dict[str, float]]:
    """Run the time reversal and factor reversal tests on the Fisher index.

    Returns:
        dict: ``time_reversal`` with ``forward``, ``backward``, ``product``
        and ``passes``; ``factor_reversal`` with ``price_index``,
        ``quantity_index``, ``product``, ``value_index`` and ``passes``. All
        indices are ratios (1.0 = no change), not percentages.
    """
    t = aggregate_totals(p0, q0, p1, q1)
    if t["sum_p1q0"] == 0 or t["sum_p1q1"] == 0:
        raise ValueError("Reversal tests need non-zero current-price aggregates.")
    forward = price_index(p0, q0, p1, q1, method="fisher") / 100.0
    backward = math.sqrt(
        (t["sum_p0q1"] / t["sum_p1q1"]) * (t["sum_p0q0"] / t["sum_p1q0"])
    )
    quantity = math.sqrt(
        (t["sum_p0q1"] / t["sum_p0q0"]) * (t["sum_p1q1"] / t["sum_p1q0"])
    )
    value_index = t["sum_p1q1"] / t["sum_p0q0"]

    time_reversal = {
        "forward": forward,
        "backward": backward,
        "product": forward * backward,
        "passes": abs(forward * backward - 1.0) < REVERSAL_TOLERANCE,
    }
    factor_reversal = {
        "price_index": forward,
        "quantity_index": quantity,
        "product": forward * quantity,
        "value_index": value_index,
        "passes": abs(forward * quantity - value_index) < REVERSAL_TOLERANCE,
    }
    if not (time_reversal["passes"] and factor_reversal["passes"]):
        warnings.warn(
            "Fisher index failed a reversal test; check the basket data.",
            UserWarning,
            stacklevel=2,
        )
    return {"time_reversal": time_reversal, "factor_reversal": factor_reversal}


def index_table(
    p0: Sequence[float],
    q0: Sequence[float],
    p1: Sequence[float],
    q1: Sequence[float],
    items: Sequence[str] | None = None,
) -> pd.DataFrame:
    """Return the per-item products and price relatives.

    Args:
        items: Optional item labels; defaults to ``A``, ``B``, ``C``...
    """
    p0_arr, q0_arr, p1_arr, q1_arr = _basket(p0, q0, p1, q1)
    if items is None:
        items = [chr(ord("A") + i) if i < 26 else f"Item {i + 1}" for i in range(p0_arr.size)]
    elif len(items) != p0_arr.size:
        raise ValueError("items must have one label per basket entry.")

    return pd.DataFrame(
        {
            INDEX.item: list(items),
            INDEX.p0: p0_arr,
            INDEX.q0: q0_arr,
            INDEX.p1: p1_arr,
            INDEX.q1: q1_arr,
            INDEX.p0q0: p0_arr * q0_arr,
            INDEX.p1q0: p1_arr * q0_arr,
            INDEX.p0q1: p0_arr * q1_arr,
            INDEX.p1q1: p1_arr * q1_arr,
            INDEX.price_relative: p1_arr / p0_arr * 100.0,
        }
    )
