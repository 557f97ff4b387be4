"""Exceptions raised by the simplifier."""

from __future__ import annotations

from fractions import Fraction


class SymalgError(Exception):
    """Base class for symalg errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ExponentTooLarge(SymalgError):
    """A literal was raised to a power whose numerator is too large to apply."""

    def __init__(self, exponent: Fraction, limit: int):
        self.exponent = exponent
        self.limit = limit
        super().__init__(
            f"Exponent too large to apply: numerator of {exponent} exceeds {limit}"
        )
