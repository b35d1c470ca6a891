"""Display rounding for calculator results.

Rounding policy: results are computed and passed between calculation steps
unrounded. Only presentation code (reports, printed summaries) rounds.
"""

from __future__ import annotations

import math

import numpy as np
import pandas as pd

DEFAULT_DECIMALS = 2


def round_to(num: float, decimals: int = DEFAULT_DECIMALS) -> float:
    """Round ``num`` to ``decimals`` places, halves away from zero.

    Python's built-in ``round`` rounds halves to even; the calculators show
    ``2.5 -> 3`` and ``-2.5 -> -3``. The value is scaled by ``10**decimals``
    first, so binary representation error can still decide a visible half
    (``1.005`` is stored just below and rounds to ``1.0``).

    Args:
        num: Value to round. NaN, infinities and values too large to hold a
            digit at ``decimals`` places are returned unchanged.
        decimals: Number of decimal places; may be negative.

    Returns:
        float: The rounded value.
    """
    num = float(num)
    if not math.isfinite(num):
        return num
    try:
        factor = 10.0**decimals
    except OverflowError:
        return num
    if factor == 0.0:
        # every finite double is below half of 10**-decimals
        return math.copysign(0.0, num)
    scaled = abs(num) * factor
    if not math.isfinite(scaled):
        # too large to carry a fractional digit at this precision
        return num
    return math.copysign(math.floor(scaled + 0.5) / factor, num)


def round_frame(df: pd.DataFrame, decimals: int = DEFAULT_DECIMALS) -> pd.DataFrame:
    """Return a copy of ``df`` with every float column passed through :func:`round_to`."""
    out = df.copy()
    for col in out.columns:
        if pd.api.types.is_float_dtype(out[col]):
            out[col] = out[col].map(lambda v: round_to(v, decimals) if pd.notna(v) else np.nan)
    return out
