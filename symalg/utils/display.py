"""Rich console display utilities for expressions and simplification runs."""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.tree import Tree

from symalg.core.display import format_exponent, format_literal
from symalg.core.expr import Expr, Group, Literal, Power, Variable

console = Console()


def expr_tree(expr: Expr, tree: Tree | None = None) -> Tree:
    """Build a rich Tree mirroring the structure of `expr`."""
    if isinstance(expr, Variable):
        label = f"[cyan]Variable[/cyan] {expr.symbol}"
    elif isinstance(expr, Literal):
        label = f"[green]Literal[/green] {format_literal(expr.value)}"
    elif isinstance(expr, Power):
        label = f"[yellow]Power[/yellow] ^{format_exponent(expr.exponent)}"
    elif isinstance(expr, Group):
        label = f"[magenta]Group[/magenta] {expr.op.value} ({len(expr.members)})"
    else:
        label = type(expr).__name__

    node = Tree(label) if tree is None else tree.add(label)
    if isinstance(expr, Power):
        expr_tree(expr.base, node)
    elif isinstance(expr, Group):
        for member in expr.members:
            expr_tree(member, node)
    return node


def display_expr(name: str, expr: Expr) -> None:
    """Display an expression's tree with its rendered form."""
    variables = ", ".join(sorted(expr.variables())) or "none"
    header = Tree(f"[bold]{expr}[/bold]")
    header.add(f"size: {expr.size()}")
    header.add(f"variables: {variables}")
    header.add(expr_tree(expr))
    console.print(Panel(header, title=f"Expression: {name}", border_style="blue"))


def display_simplification_results(results: list[dict[str, Any]]) -> None:
    """Display before/after pairs as a table.

    Each result holds 'name', 'before' and either 'after' or 'error'.
    """
    table = Table(title="Simplification Results")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Name", style="cyan")
    table.add_column("Input", style="white")
    table.add_column("Normal form", style="green")

    for i, r in enumerate(results, 1):
        if r.get("error"):
            outcome = f"[red]{r['error']}[/red]"
        else:
            outcome = r["after"]
        table.add_row(str(i), r["name"], r["before"], outcome)

    console.print(table)


def display_examples(examples: list[Any]) -> None:
    """Display the example catalogue."""
    table = Table(title="Example Expressions")
    table.add_column("Name", style="cyan")
    table.add_column("Expression", style="white")
    table.add_column("Description", style="dim")

    for ex in examples:
        table.add_row(ex.name, str(ex.expr), ex.description)

    console.print(table)
