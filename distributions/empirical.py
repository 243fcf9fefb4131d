"""
Empirical Rule reference values and comparison table.

The Empirical Rule (68-95-99.7 rule) states the share of a normal
distribution within k standard deviations of the mean:
  - [m - 1s, m + 1s]: about 68.27%
  - [m - 2s, m + 2s]: about 95.45%
  - [m - 3s, m + 3s]: about 99.73%

The table compares those reference values with the series approximation
of a given model, which makes the approximation error easy to eyeball.
"""

from __future__ import annotations

from typing import Dict

import pandas as pd

from core.config import DEFAULTS
from core.utils import require_positive

from .gaussian import GaussianModel

EMPIRICAL_RULE: Dict[int, float] = {
    1: 0.6827,
    2: 0.9545,
    3: 0.9973,
}


def probability_within(
    model: GaussianModel,
    k: float,
    *,
    terms: int = DEFAULTS.cumulative_terms,
) -> float:
    """
    Probability mass within k standard deviations of the mean.

    Parameters
    ----------
    model : GaussianModel
    k : float
        Half-width of the interval in standard deviations; must be > 0.
    terms : int
        Series terms passed through to the cumulative.
    """
    k = require_positive("k", k)
    lower = model.mean - k * model.stdev
    upper = model.mean + k * model.stdev
    return model.evaluate_interval_probability(lower, upper, terms)


def empirical_rule_table(
    model: GaussianModel,
    *,
    terms: int = DEFAULTS.cumulative_terms,
) -> pd.DataFrame:
    """
    Compare the Empirical Rule with the model's approximated interval mass.

    Returns
    -------
    DataFrame with one row per k: k, Lower, Upper, Expected, Approximated, AbsError
    """
    rows = []
    for k, expected in EMPIRICAL_RULE.items():
        approximated = probability_within(model, k, terms=terms)
        rows.append({
            "k": k,
            "Lower": model.mean - k * model.stdev,
            "Upper": model.mean + k * model.stdev,
            "Expected": expected,
            "Approximated": approximated,
            "AbsError": abs(approximated - expected),
        })
    return pd.DataFrame(rows)
