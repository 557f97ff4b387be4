"""Rewrite pass that brings an expression to normal form.

Normal form: no zero or one exponents, no directly nested groups of the same
operator, and literal sub-expressions evaluated except for roots that are
not exact integers (``8^(1/2)`` stays as it is). Like terms are not
collected: ``x + x`` remains a two-member sum.

Recursion depth follows the depth of the tree, so very deep inputs can hit
Python's recursion limit.
"""

from __future__ import annotations

import functools
import logging
from fractions import Fraction

from symalg.config import DEFAULT_CONFIG, SimplifyConfig
from symalg.core.errors import ExponentTooLarge
from symalg.core.expr import Expr, Group, Literal, Op, Power, Variable
from symalg.core.literal import Complex
from symalg.core.ops import combine, expand, identity

log = logging.getLogger(__name__)


def simplify(expr: Expr, config: SimplifyConfig | None = None) -> Expr:
    """Return the normal form of `expr`.

    Raises:
        ExponentTooLarge: a literal is raised to a power whose numerator is
            above ``config.max_exponent``. Nothing is returned in that case;
            simplification is all-or-nothing.
    """
    return _simplify(expr, config or DEFAULT_CONFIG)


@functools.singledispatch
def _simplify(expr, config: SimplifyConfig) -> Expr:
    raise TypeError(f"Cannot simplify a {type(expr).__name__}")


@_simplify.register(Variable)
@_simplify.register(Literal)
def _(expr, config: SimplifyConfig) -> Expr:
    return expr


@_simplify.register(Power)
def _(expr: Power, config: SimplifyConfig) -> Expr:
    # x^0 is 1 whatever x is; the base is not looked at
    if expr.exponent == 0:
        return Literal(Complex.one())
    base = _simplify(expr.base, config)
    return _raise(base, expr.exponent, config)


@_simplify.register(Group)
def _(expr: Group, config: SimplifyConfig) -> Expr:
    if not expr.members:
        return identity(expr.op)
    if len(expr.members) == 1:
        return _simplify(expr.members[0], config)

    members = [_simplify(m, config) for m in expr.members]
    result = functools.reduce(
        functools.partial(combine, expr.op), members, identity(expr.op)
    )
    if expr.op is not Op.MUL:
        return result
    if isinstance(result, Group) and result.op is Op.MUL and any(
        isinstance(m, Group) and m.op is Op.ADD for m in result.members
    ):
        # a sum next to lone factors; distribute wherever it sits
        result = functools.reduce(expand, result.members)
    if isinstance(result, Group) and result.op is Op.ADD:
        # distributing builds raw products such as (2 . 3); normalise them
        log.debug("Product of %d members expanded into %d terms", len(members), len(result.members))
        return _simplify(result, config)
    return result


def _raise(base: Expr, exponent: Fraction, config: SimplifyConfig) -> Expr:
    """Raise an already simplified `base` to `exponent`."""
    if exponent == 0:
        return Literal(Complex.one())
    if exponent == 1:
        return base
    if isinstance(base, Literal):
        return _raise_literal(base.value, exponent, config)
    if isinstance(base, Power):
        # (b^m)^n == b^(m*n); b is simplified and never itself a Power
        log.debug("Composing exponents %s and %s", base.exponent, exponent)
        return _raise(base.base, base.exponent * exponent, config)
    return Power(base, exponent)


def _raise_literal(value: Complex, exponent: Fraction, config: SimplifyConfig) -> Expr:
    if exponent < 0:
        if value.is_zero():
            log.debug("Leaving 0^%s unevaluated", exponent)
            return Power(Literal(value), exponent)
        value = value.inverse()
        exponent = abs(exponent)

    if exponent.numerator > config.max_exponent:
        log.debug("Refusing to raise %s to %s (limit %d)", value, exponent, config.max_exponent)
        raise ExponentTooLarge(exponent, config.max_exponent)

    result = value ** exponent.numerator
    if exponent.denominator == 1:
        return Literal(result)
    return Power(Literal(result), Fraction(1, exponent.denominator))
