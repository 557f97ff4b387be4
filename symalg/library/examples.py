"""Catalogue of named sample expressions.

There is no text parser, so the CLI and the tests pick expressions from here
by name.
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import Callable

from symalg.core.expr import Expr, complex_literal, literal, variable
from symalg.core.ops import add, divide, multiply, power

x, y, z = variable("x"), variable("y"), variable("z")


@dataclass(frozen=True)
class Example:
    name: str
    expr: Expr
    description: str = ""


def polynomial() -> Example:
    return Example(
        name="polynomial",
        expr=add(add(power(x, 2), x), literal(3)),
        description="x^2 + x + 3 built from nested sums; flattens to three members.",
    )


def binomial_product() -> Example:
    return Example(
        name="binomial_product",
        expr=multiply(add(x, y), add(x, z)),
        description="(x + y)(x + z) expanded pairwise, left-member-major.",
    )


def scaled_sum() -> Example:
    return Example(
        name="scaled_sum",
        expr=multiply(add(x, y), z),
        description="A sum times a plain term; simplify distributes it.",
    )


def cube() -> Example:
    return Example(
        name="cube",
        expr=power(literal(2), 3),
        description="Integer power of a literal is evaluated.",
    )


def reciprocal_cube() -> Example:
    return Example(
        name="reciprocal_cube",
        expr=power(literal(2), -3),
        description="Negative powers invert the literal first.",
    )


def root() -> Example:
    return Example(
        name="root",
        expr=power(literal(2), Fraction(3, 2)),
        description="2^(3/2) becomes 8^(1/2); roots are never evaluated.",
    )


def nested_power() -> Example:
    return Example(
        name="nested_power",
        expr=power(power(x, Fraction(2, 3)), Fraction(-3, 8)),
        description="Exponents of nested powers multiply.",
    )


def complex_square() -> Example:
    return Example(
        name="complex_square",
        expr=power(complex_literal(1, 2), 2),
        description="(1+2i)^2 = -3+4i.",
    )


def quotient() -> Example:
    return Example(
        name="quotient",
        expr=divide(multiply(literal(6), x), literal(3)),
        description="Division multiplies by the -1 power of the divisor.",
    )


def zero_power() -> Example:
    return Example(
        name="zero_power",
        expr=power(add(x, y), 0),
        description="Anything to the power 0 is 1.",
    )


def huge_exponent() -> Example:
    return Example(
        name="huge_exponent",
        expr=power(literal(2), 2**70),
        description="Numerator beyond a machine word: simplification fails.",
    )


EXAMPLES: dict[str, Callable[[], Example]] = {
    "polynomial": polynomial,
    "binomial_product": binomial_product,
    "scaled_sum": scaled_sum,
    "cube": cube,
    "reciprocal_cube": reciprocal_cube,
    "root": root,
    "nested_power": nested_power,
    "complex_square": complex_square,
    "quotient": quotient,
    "zero_power": zero_power,
    "huge_exponent": huge_exponent,
}


def load_all_examples() -> list[Example]:
    """Load every catalogued example."""
    return [factory() for factory in EXAMPLES.values()]


def load_by_name(name: str) -> Example | None:
    factory = EXAMPLES.get(name)
    return factory() if factory else None
