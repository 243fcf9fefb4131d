"""
GaussianModel — normal distribution with density, approximate CDF and interval mass.

The cumulative is NOT computed from erf. It uses the truncated odd-power series

    Φ(t) ≈ 0.5 + φ(t) · Σ_{i=0}^{terms-1} t^(2i+1) / (2i+1)!!

around the standardized value t = (x - mean) / stdev, where φ is the standard
normal density. The series converges for every t, but a fixed number of terms
only covers |t| up to roughly 10 (100 terms). Past that the returned value is
unreliable; it is still returned as computed and a warning is logged.

Usage:
    model = GaussianModel(mean=5.0, stdev=2.0)
    model.evaluate_density(5.0)                    # peak of the PDF
    model.evaluate_cumulative(7.0)                 # ≈ 0.8413
    model.evaluate_interval_probability(3.0, 7.0)  # ≈ 0.6827
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import pandas as pd

from core.config import DEFAULTS
from core.utils import SQRT_TAU, require_finite, require_non_negative_int, require_positive, to_float

logger = logging.getLogger(__name__)


def reliable_abs_z(terms: int = DEFAULTS.cumulative_terms) -> float:
    """
    Largest |z| where a series of `terms` terms is trusted.

    Scales DEFAULTS.reliable_abs_z (calibrated for DEFAULTS.cumulative_terms)
    with sqrt(terms), the rate at which the converged range grows.
    """
    return DEFAULTS.reliable_abs_z * math.sqrt(terms / DEFAULTS.cumulative_terms)


def _odd_power_series(t: float, terms: int) -> float:
    """Σ t^(2i+1) / (2i+1)!! for i < terms, accumulated term by term."""
    if terms == 0:
        return 0.0
    t_sq = t * t
    term = t
    total = term
    for i in range(1, terms):
        term *= t_sq / (2 * i + 1)
        total += term
    return total


@dataclass(frozen=True)
class GaussianModel:
    """
    Immutable normal distribution N(mean, stdev²).

    Both parameters are stored as float. stdev must be strictly positive;
    anything else raises InvalidParameterError at construction.
    """

    mean: float = DEFAULTS.mean
    stdev: float = DEFAULTS.stdev

    def __post_init__(self):
        mean = require_finite("mean", self.mean)
        stdev = require_positive("stdev", self.stdev)
        object.__setattr__(self, "mean", mean)
        object.__setattr__(self, "stdev", stdev)
        logger.debug("Created GaussianModel(mean=%s, stdev=%s)", mean, stdev)

    @classmethod
    def standard(cls) -> "GaussianModel":
        """The standard normal distribution N(0, 1)."""
        return cls(0.0, 1.0)

    @property
    def variance(self) -> float:
        return self.stdev ** 2

    def standardize(self, x: float) -> float:
        """z-score of x under this distribution."""
        return (x - self.mean) / self.stdev

    def evaluate_density(self, x: float) -> float:
        """
        Probability density at x.

        For a continuous distribution this is not itself a probability.
        Non-finite x follows IEEE arithmetic (±inf → 0.0, NaN → NaN);
        integers beyond float range count as ±inf.
        """
        t = self.standardize(to_float(x))
        return math.exp(-t * t / 2) / (self.stdev * SQRT_TAU)

    def evaluate_cumulative(self, x: float, terms: int = DEFAULTS.cumulative_terms) -> float:
        """
        Approximate P(X <= x) from the truncated odd-power series.

        Parameters
        ----------
        x : float
            Point to evaluate. +inf returns 1.0, -inf returns 0.0, NaN propagates.
            Integers beyond float range count as ±inf.
        terms : int
            Number of series terms. Larger values extend the range of |z|
            where the result is accurate, at linear cost. 0 returns 0.5.

        Returns
        -------
        float approximation of the CDF. Unreliable for |z| beyond
        reliable_abs_z(terms). When the series overflows for very large
        finite |z| the result is not finite: NaN, +inf or -inf.
        """
        terms = require_non_negative_int("terms", terms)
        x = to_float(x)
        if math.isinf(x):
            return 1.0 if x > 0 else 0.0

        t = self.standardize(x)
        bound = reliable_abs_z(terms)
        if abs(t) > bound:
            logger.warning(
                "Cumulative series with %d terms evaluated at z=%.3f (|z| > %.3g); result is unreliable.",
                terms, t, bound,
            )

        # φ(t) is the standard density, i.e. stdev · evaluate_density(x)
        phi = math.exp(-t * t / 2) / SQRT_TAU
        return 0.5 + phi * _odd_power_series(t, terms)

    def evaluate_interval_probability(
        self,
        min: float = -math.inf,
        max: float = math.inf,
        terms: int = DEFAULTS.cumulative_terms,
    ) -> float:
        """
        Probability mass in the closed interval [min, max].

        The Empirical Rule gives the familiar reference values:
        about 68.27% within 1 stdev of the mean, 95.45% within 2
        and 99.73% within 3. Defaults cover the whole real line.
        min > max is not rejected and yields a negative value.
        """
        return self.evaluate_cumulative(max, terms) - self.evaluate_cumulative(min, terms)

    def summary(self) -> pd.DataFrame:
        """Return a one-row summary table of the distribution parameters."""
        return pd.DataFrame([
            {"Mean": self.mean, "StdDev": self.stdev, "Variance": self.variance,
             "PeakDensity": self.evaluate_density(self.mean)},
        ])
