"""
Sampled density / cumulative curves for plotting and inspection.
"""

from __future__ import annotations

from typing import Optional

import numpy as np
import pandas as pd

from core.config import DEFAULTS
from core.exceptions import InvalidParameterError
from core.utils import require_finite, require_non_negative_int

from .gaussian import GaussianModel

# default grid half-width, in standard deviations
DEFAULT_SPAN_STDEVS = 4.0


def density_curve(
    model: GaussianModel,
    *,
    lower: Optional[float] = None,
    upper: Optional[float] = None,
    n_points: int = 201,
    terms: int = DEFAULTS.cumulative_terms,
) -> pd.DataFrame:
    """
    Evaluate density and approximate cumulative on an evenly spaced grid.

    Parameters
    ----------
    model : GaussianModel
    lower, upper : float, optional
        Grid bounds. Default to mean ∓ 4 stdev.
    n_points : int
        Number of grid points (>= 2).
    terms : int
        Series terms for the cumulative.

    Returns
    -------
    DataFrame with columns: x, z, density, cumulative
    """
    if lower is None:
        lower = model.mean - DEFAULT_SPAN_STDEVS * model.stdev
    if upper is None:
        upper = model.mean + DEFAULT_SPAN_STDEVS * model.stdev
    lower = require_finite("lower", lower)
    upper = require_finite("upper", upper)
    if not lower < upper:
        raise InvalidParameterError("upper", upper, f"must be greater than lower={lower!r}")
    n_points = require_non_negative_int("n_points", n_points)
    if n_points < 2:
        raise InvalidParameterError("n_points", n_points, "expected an integer >= 2")

    xs = np.linspace(lower, upper, n_points)
    return pd.DataFrame({
        "x": xs,
        "z": [model.standardize(float(x)) for x in xs],
        "density": [model.evaluate_density(float(x)) for x in xs],
        "cumulative": [model.evaluate_cumulative(float(x), terms) for x in xs],
    })
