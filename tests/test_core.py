"""Tests for core data structures: literals and expression nodes."""

import dataclasses
from fractions import Fraction

import pytest
from symalg.core.expr import (
    Group, Literal, Op, Power, Statement, StatementKind, Variable,
    complex_literal, equality, literal, variable,
)
from symalg.core.literal import Complex, to_rational
from symalg.core.ops import add, divide, multiply


class TestComplex:
    def test_square(self):
        assert Complex(1, 2) ** 2 == Complex(-3, 4)

    def test_pow_zero_is_one(self):
        assert Complex(5, -7) ** 0 == Complex.one()

    def test_large_integer_power_is_exact(self):
        assert Complex(2) ** 100 == Complex(2**100)
        assert Complex(Fraction(1, 3)) ** 5 == Complex(Fraction(1, 243))

    def test_inverse(self):
        assert Complex(2).inverse() == Complex(Fraction(1, 2))
        assert Complex(3, 4).inverse() == Complex(Fraction(3, 25), Fraction(-4, 25))
        assert Complex(3, 4) * Complex(3, 4).inverse() == Complex.one()

    def test_zero_has_no_inverse(self):
        with pytest.raises(ZeroDivisionError):
            Complex.zero().inverse()

    def test_add_and_multiply(self):
        assert Complex(1, 2) + Complex(3, -1) == Complex(4, 1)
        assert Complex(1, 2) * Complex(3, -1) == Complex(5, 5)

    def test_coerce(self):
        assert Complex.coerce(3) == Complex(3, 0)
        assert Complex.coerce(Fraction(1, 2)) == Complex(Fraction(1, 2))
        assert Complex.coerce(1 + 2j) == Complex(1, 2)

    def test_floats_are_refused(self):
        with pytest.raises(TypeError):
            to_rational(0.5)
        with pytest.raises(TypeError):
            Complex(0.5)

    def test_str(self):
        assert str(Complex(3)) == "3"
        assert str(Complex(Fraction(1, 8))) == "1/8"
        assert str(Complex(3, -2)) == "3-2i"
        assert str(Complex(1, 1)) == "1+i"
        assert str(Complex(0, 1)) == "i"
        assert str(Complex(0, -2)) == "-2i"
        assert str(Complex(0, Fraction(1, 2))) == "(1/2)i"
        assert str(Complex(3, Fraction(-1, 2))) == "3-(1/2)i"


class TestExpr:
    def test_variable(self):
        x = variable("x")
        assert x == Variable("x")
        assert x.size() == 1
        assert x.variables() == {"x"}

    def test_variable_is_single_character(self):
        with pytest.raises(ValueError):
            variable("xy")
        with pytest.raises(ValueError):
            variable("")

    def test_literal_coerces_to_complex(self):
        assert literal(2).value == Complex(2, 0)
        assert literal(Fraction(1, 8)) == Literal(Complex(Fraction(1, 8)))
        assert complex_literal(1, 2) == literal(1 + 2j)
        assert literal(2).variables() == set()

    def test_power_exponent_is_rational(self):
        x = variable("x")
        assert Power(x, 2).exponent == Fraction(2)
        assert Power(x, "3/2").exponent == Fraction(3, 2)
        with pytest.raises(TypeError):
            Power(x, 0.5)

    def test_group_members_are_a_tuple(self):
        x, y = variable("x"), variable("y")
        g = Group(Op.ADD, [x, y])
        assert g.members == (x, y)
        assert g.size() == 3
        assert g.variables() == {"x", "y"}

    def test_structural_equality_respects_order(self):
        x, y = variable("x"), variable("y")
        assert Group(Op.ADD, [x, y]) == Group.sum([x, y])
        assert Group(Op.ADD, [x, y]) != Group(Op.ADD, [y, x])
        assert Group(Op.ADD, [x, y]) != Group(Op.MUL, [x, y])

    def test_nodes_are_immutable_and_hashable(self):
        x = variable("x")
        p = Power(x, 2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.exponent = Fraction(3)
        assert len({Group.sum([x, p]), Group.sum([x, p])}) == 1

    def test_nested_size(self):
        x, y = variable("x"), variable("y")
        expr = Power(Group.product([x, Power(y, 2)]), Fraction(1, 2))
        assert expr.size() == 5
        assert expr.variables() == {"x", "y"}

    def test_statement(self):
        x, y = variable("x"), variable("y")
        st = equality(x, y)
        assert st == Statement(StatementKind.EQUALITY, x, y)
        assert st.variables() == {"x", "y"}
        assert st.size() == 2


class TestOperatorSugar:
    def test_add(self):
        x, y = variable("x"), variable("y")
        assert x + y == add(x, y)
        assert x + "y" == add(x, y)

    def test_multiply_with_numbers(self):
        x = variable("x")
        assert x * 2 == Group.product([x, literal(2)])
        assert 2 * x == Group.product([literal(2), x])

    def test_divide(self):
        x, y = variable("x"), variable("y")
        assert x / y == divide(x, y)
        assert x / y == Group.product([x, Power(y, -1)])

    def test_pow(self):
        x = variable("x")
        assert x ** 2 == Power(x, 2)
        assert x ** Fraction(1, 2) == Power(x, Fraction(1, 2))

    def test_non_expression_operand(self):
        with pytest.raises(TypeError):
            variable("x") + [1]

    def test_simplify_method(self):
        x = variable("x")
        assert (x ** 1).simplify() == x
        assert multiply(literal(2), literal(3)).simplify() == literal(6)
