"""Expression tree nodes for exact algebraic expressions."""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from enum import Enum
from fractions import Fraction
from typing import Sequence

from symalg.core.literal import Complex, Number, to_rational


class Op(str, Enum):
    """Associative, commutative operators a Group can carry."""

    ADD = "ADD"
    MUL = "MUL"

    @property
    def other(self) -> Op:
        return Op.MUL if self is Op.ADD else Op.ADD


class Expr:
    """Base class for expression nodes.

    Nodes are immutable values; equality is structural. The arithmetic
    operators are shorthands for the functions in `symalg.core.ops`.
    """

    def size(self) -> int:
        raise NotImplementedError

    def variables(self) -> set[str]:
        raise NotImplementedError

    def simplify(self, config=None) -> Expr:
        from symalg.core.simplify import simplify

        return simplify(self, config)

    def __str__(self) -> str:
        from symalg.core.display import format_expr

        return format_expr(self)

    def __add__(self, other) -> Expr:
        from symalg.core.ops import add

        return add(self, _coerce(other))

    def __radd__(self, other) -> Expr:
        from symalg.core.ops import add

        return add(_coerce(other), self)

    def __mul__(self, other) -> Expr:
        from symalg.core.ops import multiply

        return multiply(self, _coerce(other))

    def __rmul__(self, other) -> Expr:
        from symalg.core.ops import multiply

        return multiply(_coerce(other), self)

    def __truediv__(self, other) -> Expr:
        from symalg.core.ops import divide

        return divide(self, _coerce(other))

    def __rtruediv__(self, other) -> Expr:
        from symalg.core.ops import divide

        return divide(_coerce(other), self)

    def __pow__(self, exponent) -> Expr:
        return Power(self, exponent)


@dataclass(frozen=True)
class Variable(Expr):
    """A single-character variable: x, y, z, ..."""

    symbol: str

    def __post_init__(self):
        if not isinstance(self.symbol, str) or len(self.symbol) != 1:
            raise ValueError(f"A variable is a single character, got {self.symbol!r}")

    def size(self) -> int:
        return 1

    def variables(self) -> set[str]:
        return {self.symbol}


@dataclass(frozen=True)
class Literal(Expr):
    """An exact complex constant."""

    value: Complex

    def __init__(self, value: Number):
        object.__setattr__(self, "value", Complex.coerce(value))

    def size(self) -> int:
        return 1

    def variables(self) -> set[str]:
        return set()


@dataclass(frozen=True)
class Power(Expr):
    """`base` raised to a rational exponent. The exponent is never an expression."""

    base: Expr
    exponent: Fraction

    def __init__(self, base: Expr, exponent: numbers.Rational | str):
        if not isinstance(base, Expr):
            raise TypeError(f"Power base must be an Expr, got {type(base).__name__}")
        object.__setattr__(self, "base", base)
        object.__setattr__(self, "exponent", to_rational(exponent))

    def size(self) -> int:
        return 1 + self.base.size()

    def variables(self) -> set[str]:
        return self.base.variables()


@dataclass(frozen=True)
class Group(Expr):
    """An n-ary sum or product. Member order is kept for display and folding."""

    op: Op
    members: tuple[Expr, ...]

    def __init__(self, op: Op, members: Sequence[Expr]):
        object.__setattr__(self, "op", Op(op))
        object.__setattr__(self, "members", tuple(members))

    @classmethod
    def sum(cls, members: Sequence[Expr]) -> Group:
        return cls(Op.ADD, members)

    @classmethod
    def product(cls, members: Sequence[Expr]) -> Group:
        return cls(Op.MUL, members)

    def size(self) -> int:
        return 1 + sum(m.size() for m in self.members)

    def variables(self) -> set[str]:
        result: set[str] = set()
        for m in self.members:
            result |= m.variables()
        return result


class StatementKind(str, Enum):
    EQUALITY = "EQUALITY"


@dataclass(frozen=True)
class Statement:
    """A statement relating two expressions: left = right."""

    kind: StatementKind
    left: Expr
    right: Expr

    def variables(self) -> set[str]:
        return self.left.variables() | self.right.variables()

    def size(self) -> int:
        return self.left.size() + self.right.size()

    def __str__(self) -> str:
        return f"{self.left} = {self.right}"


def variable(symbol: str) -> Variable:
    return Variable(symbol)


def literal(value: Number) -> Literal:
    return Literal(value)


def complex_literal(real: numbers.Rational, imag: numbers.Rational) -> Literal:
    return Literal(Complex(real, imag))


def equality(left: Expr, right: Expr) -> Statement:
    return Statement(StatementKind.EQUALITY, left, right)


def _coerce(value) -> Expr:
    """Accept numbers and one-character strings where an Expr is expected."""
    if isinstance(value, Expr):
        return value
    if isinstance(value, str):
        return Variable(value)
    if isinstance(value, (numbers.Number, Complex)) and not isinstance(value, bool):
        return Literal(value)
    raise TypeError(f"Cannot use {value!r} as an expression")
