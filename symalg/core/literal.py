"""Exact numeric literals: rationals and complex numbers over rationals.

Rationals are plain `fractions.Fraction` values. `Complex` pairs two of them
so that every arithmetic step stays exact; nothing here ever rounds through
a float.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from fractions import Fraction
from typing import Union

Rational = Fraction

Number = Union[int, Fraction, complex, "Complex"]


def integer(n: int) -> Fraction:
    return Fraction(n)


def rational(numer: int, denom: int = 1) -> Fraction:
    """Build a rational, normalised to lowest terms with a positive denominator."""
    return Fraction(numer, denom)


def to_rational(value: numbers.Rational | str) -> Fraction:
    """Coerce an int, Fraction or fraction string ('3/2') to a Fraction.

    Floats are refused: an exponent or coefficient that came through binary
    floating point is already inexact.
    """
    if isinstance(value, bool):
        raise TypeError(f"Cannot use {value!r} as a rational")
    if isinstance(value, (numbers.Rational, str)):
        return Fraction(value)
    raise TypeError(f"Cannot use {value!r} ({type(value).__name__}) as a rational")


@dataclass(frozen=True)
class Complex:
    """An exact complex number ``real + imag*i``."""

    real: Fraction
    imag: Fraction

    def __init__(self, real: numbers.Rational = 0, imag: numbers.Rational = 0):
        object.__setattr__(self, "real", to_rational(real))
        object.__setattr__(self, "imag", to_rational(imag))

    @classmethod
    def zero(cls) -> Complex:
        return cls(0, 0)

    @classmethod
    def one(cls) -> Complex:
        return cls(1, 0)

    @classmethod
    def coerce(cls, value: Number) -> Complex:
        """Convert a Python number to an exact complex value.

        Python ``complex`` parts are converted with ``Fraction(float)``, which
        is exact for the binary value actually stored.
        """
        if isinstance(value, Complex):
            return value
        if isinstance(value, complex):
            return cls(Fraction(value.real), Fraction(value.imag))
        return cls(to_rational(value), 0)

    def is_zero(self) -> bool:
        return self.real == 0 and self.imag == 0

    def is_real(self) -> bool:
        return self.imag == 0

    def __add__(self, other: Complex) -> Complex:
        if not isinstance(other, Complex):
            return NotImplemented
        return Complex(self.real + other.real, self.imag + other.imag)

    def __mul__(self, other: Complex) -> Complex:
        if not isinstance(other, Complex):
            return NotImplemented
        return Complex(
            self.real * other.real - self.imag * other.imag,
            self.real * other.imag + self.imag * other.real,
        )

    def __neg__(self) -> Complex:
        return Complex(-self.real, -self.imag)

    def inverse(self) -> Complex:
        """Multiplicative inverse: (a - bi) / (a^2 + b^2).

        Raises ZeroDivisionError for zero, like `Fraction`.
        """
        norm = self.real * self.real + self.imag * self.imag
        if norm == 0:
            raise ZeroDivisionError("Complex(0, 0) has no inverse")
        return Complex(self.real / norm, -self.imag / norm)

    def __pow__(self, exponent: int) -> Complex:
        """Raise to a non-negative integer power by exact repeated squaring."""
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            return NotImplemented
        if exponent < 0:
            raise ValueError(f"Complex power needs a non-negative exponent, got {exponent}")
        result = Complex.one()
        base = self
        n = exponent
        while n:
            if n & 1:
                result = result * base
            n >>= 1
            if n:
                base = base * base
        return result

    def __str__(self) -> str:
        if self.imag == 0:
            return str(self.real)
        if self.imag == 1:
            imag = "i"
        elif self.imag == -1:
            imag = "-i"
        elif self.imag.denominator != 1:
            # (1/2)i, never 1/2i
            sign = "-" if self.imag < 0 else ""
            imag = f"{sign}({abs(self.imag)})i"
        else:
            imag = f"{self.imag}i"
        if self.real == 0:
            return imag
        sign = "" if imag.startswith("-") else "+"
        return f"{self.real}{sign}{imag}"
