"""
Library-wide defaults.
Function signatures in distributions/ read their defaults from DEFAULTS.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GaussianDefaults:
    mean: float = 0.0
    stdev: float = 1.0

    # number of odd-power terms in the cumulative series
    cumulative_terms: int = 100

    # beyond this |z| the truncated series is not trustworthy
    reliable_abs_z: float = 10.0


DEFAULTS = GaussianDefaults()
