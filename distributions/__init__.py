"""
Distributions package — the Gaussian model and tables built on top of it.

  1. gaussian.py   — GaussianModel: density, approximate CDF, interval mass
  2. empirical.py  — Empirical Rule reference values vs. the approximation
  3. curves.py     — sampled density/cumulative curves for plotting
"""

from .gaussian import GaussianModel
from .empirical import EMPIRICAL_RULE, empirical_rule_table, probability_within
from .curves import density_curve

__all__ = [
    "GaussianModel",
    "EMPIRICAL_RULE",
    "empirical_rule_table",
    "probability_within",
    "density_curve",
]
