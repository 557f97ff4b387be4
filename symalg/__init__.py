"""Exact algebraic expression trees with a symbolic simplifier."""

from symalg.core import (
    Expr, Variable, Literal, Power, Group, Op, Statement, StatementKind,
    variable, literal, complex_literal, equality,
    Complex, integer, rational,
    add, multiply, expand, divide, power, identity,
    simplify, format_expr,
    SymalgError, ExponentTooLarge,
)
from symalg.config import SimplifyConfig

__version__ = "0.1.0"

__all__ = [
    "Expr", "Variable", "Literal", "Power", "Group", "Op", "Statement", "StatementKind",
    "variable", "literal", "complex_literal", "equality",
    "Complex", "integer", "rational",
    "add", "multiply", "expand", "divide", "power", "identity",
    "simplify", "format_expr",
    "SymalgError", "ExponentTooLarge", "SimplifyConfig",
]
