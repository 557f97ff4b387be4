"""Combinators that merge expressions into sums, products and powers.

All functions here are total: they never raise and never evaluate anything
beyond literal-with-literal arithmetic. Sums and products share one
flattening policy:

1. literal (+) literal  -> a single literal
2. identity (+) e       -> e   (0 for sums, 1 for products, either side)
3. group (+) group      -> concatenated members when both carry the operator
4. group (+) e          -> e appended to the group
5. e (+) group          -> e appended to the group
6. otherwise            -> a new two-member group; a group of the other
                           operator stays an opaque member

Products additionally distribute over sums when both operands are groups
and at least one of them is a sum. A plain term times a sum is left as a
product here; `expand` distributes it, and the simplifier uses that.
"""

from __future__ import annotations

import numbers

from symalg.core.expr import Expr, Group, Literal, Op, Power
from symalg.core.literal import Complex

_IDENTITY = {
    Op.ADD: Complex.zero(),
    Op.MUL: Complex.one(),
}


def identity(op: Op) -> Literal:
    """The identity literal for `op`: 0 for sums, 1 for products."""
    return Literal(_IDENTITY[Op(op)])


def add(a: Expr, b: Expr) -> Expr:
    return _combine(Op.ADD, a, b)


def multiply(a: Expr, b: Expr) -> Expr:
    if _is_group(a) and _is_group(b) and Op.ADD in (a.op, b.op):
        return _distribute(a, b)
    return _combine(Op.MUL, a, b)


def expand(a: Expr, b: Expr) -> Expr:
    """Multiply like `multiply`, but also distribute a lone term over a sum.

    The lone term is treated as a one-factor product, so ``x`` times
    ``y + z`` gives ``(x . y) + (x . z)``.
    """
    if _is_group(a, Op.ADD) and not _is_group(b):
        b = Group(Op.MUL, (b,))
    elif _is_group(b, Op.ADD) and not _is_group(a):
        a = Group(Op.MUL, (a,))
    return multiply(a, b)


def divide(a: Expr, b: Expr) -> Expr:
    return multiply(a, power(b, -1))


def power(a: Expr, exponent: numbers.Rational | str) -> Power:
    """Wrap `a` in a Power node. Nothing is evaluated here."""
    return Power(a, exponent)


def combine(op: Op, a: Expr, b: Expr) -> Expr:
    """Merge two expressions with the combinator for `op`."""
    if Op(op) is Op.ADD:
        return add(a, b)
    return multiply(a, b)


def _is_group(e: Expr, op: Op | None = None) -> bool:
    return isinstance(e, Group) and (op is None or e.op is op)


def _is_identity(op: Op, e: Expr) -> bool:
    return isinstance(e, Literal) and e.value == _IDENTITY[op]


def _combine(op: Op, a: Expr, b: Expr) -> Expr:
    if isinstance(a, Literal) and isinstance(b, Literal):
        if op is Op.ADD:
            return Literal(a.value + b.value)
        return Literal(a.value * b.value)
    if _is_identity(op, a):
        return b
    if _is_identity(op, b):
        return a
    if _is_group(a, op) and _is_group(b, op):
        return Group(op, a.members + b.members)
    if _is_group(a, op):
        return Group(op, a.members + (b,))
    if _is_group(b, op):
        return Group(op, b.members + (a,))
    return Group(op, (a, b))


def _factors(e: Expr) -> tuple[Expr, ...]:
    """The factors `e` contributes to a product, unpacking a product group."""
    if _is_group(e, Op.MUL):
        return e.members
    return (e,)


def _distribute(a: Group, b: Group) -> Group:
    if a.op is Op.MUL:
        return _expand(a, b)
    if b.op is Op.MUL:
        return _expand(b, a)
    # sum times sum: every left member against the whole right sum
    terms: list[Expr] = []
    for left in a.members:
        terms.extend(_expand(Group(Op.MUL, _factors(left)), b).members)
    return Group(Op.ADD, terms)


def _expand(product: Group, total: Group) -> Group:
    """Multiply a product group into each member of a sum group.

    A member that is itself a product has its factors spliced into the new
    product rather than nested, so ``a . (b . c)`` comes out as ``a . b . c``.
    """
    return Group(
        Op.ADD,
        [Group(Op.MUL, product.members + _factors(term)) for term in total.members],
    )
