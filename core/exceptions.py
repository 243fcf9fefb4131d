"""
Exceptions raised by the library.

Validation happens eagerly (at construction or at the top of a function);
nothing inside the library catches these.
"""

from __future__ import annotations

from typing import Any


class MathKitError(Exception):
    """Base exception for all library errors."""

    pass


class InvalidParameterError(MathKitError, ValueError):
    """Raised when a parameter is outside its valid domain."""

    def __init__(self, name: str, value: Any, reason: str):
        self.name = name
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {name}={value!r}: {reason}")
