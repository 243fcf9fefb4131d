"""
Core package — configuration defaults, exceptions, logging and shared helpers.
No math model lives here.
"""

from .config import DEFAULTS, GaussianDefaults
from .exceptions import InvalidParameterError, MathKitError
from .logging_config import setup_logging
from .utils import (
    SQRT_TAU,
    is_close,
    require_finite,
    require_non_negative_int,
    require_positive,
    require_real,
)

__all__ = [
    "DEFAULTS",
    "GaussianDefaults",
    "InvalidParameterError",
    "MathKitError",
    "setup_logging",
    "SQRT_TAU",
    "is_close",
    "require_finite",
    "require_non_negative_int",
    "require_positive",
    "require_real",
]
