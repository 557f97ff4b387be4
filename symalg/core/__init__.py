from symalg.core.expr import (
    Expr, Variable, Literal, Power, Group, Op, Statement, StatementKind,
    variable, literal, complex_literal, equality,
)
from symalg.core.literal import Complex, integer, rational
from symalg.core.ops import add, multiply, expand, divide, power, identity
from symalg.core.simplify import simplify
from symalg.core.display import format_expr
from symalg.core.errors import SymalgError, ExponentTooLarge

__all__ = [
    "Expr", "Variable", "Literal", "Power", "Group", "Op", "Statement", "StatementKind",
    "variable", "literal", "complex_literal", "equality",
    "Complex", "integer", "rational",
    "add", "multiply", "expand", "divide", "power", "identity",
    "simplify", "format_expr",
    "SymalgError", "ExponentTooLarge",
]
