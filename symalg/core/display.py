"""Canonical text rendering of expressions.

Precedence, lowest first: sums, products, powers, atoms. A child is put in
parentheses when it binds more loosely than its context, when it is a group
of the other operator inside a group, or when it is a compound base of a
power. Members are written in stored order, never sorted.

    x^2 + x + 3
    (x + y) . z
    (x . y) + (x . z)
    8^(1/2)
"""

from __future__ import annotations

from fractions import Fraction

from symalg.core.expr import Expr, Group, Literal, Op, Power, Variable
from symalg.core.literal import Complex

ADD, MUL, POWER, ATOM = 1, 2, 3, 4

SEPARATORS = {
    Op.ADD: " + ",
    Op.MUL: " . ",
}

_OP_PRECEDENCE = {
    Op.ADD: ADD,
    Op.MUL: MUL,
}


def format_expr(expr: Expr) -> str:
    """Render `expr` with as few parentheses as the precedence rules allow."""
    if isinstance(expr, Variable):
        return expr.symbol
    if isinstance(expr, Literal):
        return format_literal(expr.value)
    if isinstance(expr, Power):
        return _format_power(expr)
    if isinstance(expr, Group):
        return _format_group(expr)
    raise TypeError(f"Cannot format a {type(expr).__name__}")


def format_literal(value: Complex) -> str:
    return str(value)


def format_exponent(exponent: Fraction) -> str:
    if exponent.denominator == 1 and exponent >= 0:
        return str(exponent)
    return f"({exponent})"


def precedence(expr: Expr) -> int:
    """How tightly the rendered form of `expr` binds."""
    if isinstance(expr, Group):
        if not expr.members:
            return ATOM
        if len(expr.members) == 1:
            return precedence(expr.members[0])
        return _OP_PRECEDENCE[expr.op]
    if isinstance(expr, Power):
        return POWER
    if isinstance(expr, Literal):
        return _literal_precedence(expr.value)
    return ATOM


def _literal_precedence(value: Complex) -> int:
    if value.real != 0 and value.imag != 0:
        return ADD
    part = value.real if value.imag == 0 else value.imag
    if part < 0 or part.denominator != 1:
        return MUL
    if value.imag != 0 and value.imag != 1:
        return MUL
    return ATOM


def _format_power(expr: Power) -> str:
    base = format_expr(expr.base)
    if isinstance(expr.base, (Group, Power)) or precedence(expr.base) < ATOM:
        base = f"({base})"
    return f"{base}^{format_exponent(expr.exponent)}"


def _format_group(expr: Group) -> str:
    if not expr.members:
        # an empty group stands for the operator's identity
        return "0" if expr.op is Op.ADD else "1"
    if len(expr.members) == 1:
        return format_expr(expr.members[0])
    context = _OP_PRECEDENCE[expr.op]
    parts = []
    for member in expr.members:
        text = format_expr(member)
        nested = isinstance(member, Group) and member.op is not expr.op and len(member.members) > 1
        if nested or precedence(member) < context:
            text = f"({text})"
        parts.append(text)
    return SEPARATORS[expr.op].join(parts)
