from __future__ import annotations

import math
from numbers import Integral, Real

from .exceptions import InvalidParameterError

SQRT_TAU = math.sqrt(math.tau)


def require_real(name: str, value) -> float:
    """Coerce a real number to float; bools and non-numbers are rejected."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidParameterError(name, value, "expected a real number")
    try:
        return float(value)
    except OverflowError as exc:
        raise InvalidParameterError(name, value, "out of float range") from exc


def to_float(value) -> float:
    """float(value), with integers beyond float range mapped to ±inf."""
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def require_finite(name: str, value) -> float:
    value = require_real(name, value)
    if not math.isfinite(value):
        raise InvalidParameterError(name, value, "must be finite")
    return value


def require_positive(name: str, value) -> float:
    """Finite and strictly greater than zero (NaN fails the comparison)."""
    value = require_real(name, value)
    if not value > 0:
        raise InvalidParameterError(name, value, "must be strictly positive")
    if math.isinf(value):
        raise InvalidParameterError(name, value, "must be finite")
    return value


def require_non_negative_int(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidParameterError(name, value, "expected an integer")
    if value < 0:
        raise InvalidParameterError(name, value, "must be non-negative")
    return int(value)


def is_close(a: float, b: float, *, rel_tol: float = 1e-9, abs_tol: float = 1e-12) -> bool:
    """Tolerant float comparison used by shape predicates."""
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
