"""Sample datasets for the worked examples of every module."""

from __future__ import annotations

REGRESSION_X = [2, 4, 6, 8, 10]
REGRESSION_Y = [4, 5, 7, 8, 11]

# item: (P0, Q0, P1, Q1)
INDEX_BASKET = {
    "A": (10, 100, 12, 105),
    "B": (20, 80, 25, 85),
    "C": (15, 120, 18, 115),
    "D": (30, 60, 35, 65),
    "E": (25, 90, 28, 95),
}

TIME_SERIES = [
    ("Q1-2021", 120),
    ("Q2-2021", 135),
    ("Q3-2021", 148),
    ("Q4-2021", 162),
    ("Q1-2022", 125),
    ("Q2-2022", 142),
    ("Q3-2022", 155),
    ("Q4-2022", 168),
    ("Q1-2023", 130),
    ("Q2-2023", 148),
    ("Q3-2023", 162),
    ("Q4-2023", 175),
]

# Defect rates by factory: (name, prior share of output, P(defective | factory))
FACTORY_BAYES = [
    ("A", 0.3, 0.02),
    ("B", 0.5, 0.03),
    ("C", 0.2, 0.05),
]

BINOMIAL = {"n": 12, "p": 0.3}
POISSON = {"lam": 3.2}
NORMAL = {"mean": 50.0, "std_dev": 10.0}

NORMAL_FITTING = [
    ("30-35", 5),
    ("35-40", 12),
    ("40-45", 18),
    ("45-50", 25),
    ("50-55", 22),
    ("55-60", 15),
    ("60-65", 8),
]


def basket_columns():
    """Return the index basket as ``(items, p0, q0, p1, q1)`` lists."""
    items = list(INDEX_BASKET)
    p0, q0, p1, q1 = (list(col) for col in zip(*INDEX_BASKET.values()))
    return items, p0, q0, p1, q1
