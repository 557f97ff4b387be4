"""CLI interface for exploring the simplifier.

Usage:
    symalg list-examples
    symalg simplify polynomial binomial_product --max-exponent 1000
    symalg inspect nested_power --simplified
"""

from __future__ import annotations

import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler

from symalg.config import MAX_MACHINE_UINT, SimplifyConfig
from symalg.core.errors import SymalgError

console = Console()


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log each rewrite step")
def main(verbose: bool) -> None:
    """Exact algebraic expressions and their normal forms."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


@main.command("list-examples")
def list_examples() -> None:
    """List the catalogue of sample expressions."""
    from symalg.library.examples import load_all_examples
    from symalg.utils.display import display_examples

    examples = load_all_examples()
    console.print(f"\n[bold]{len(examples)} example expressions:[/bold]\n")
    display_examples(examples)


@main.command()
@click.argument("names", nargs=-1)
@click.option("--max-exponent", default=MAX_MACHINE_UINT, type=int,
              help="Largest exponent numerator applied to a literal")
def simplify(names: tuple[str, ...], max_exponent: int) -> None:
    """Simplify catalogue entries (all of them when no NAMES are given)."""
    from symalg.core.simplify import simplify as run_simplify
    from symalg.library.examples import EXAMPLES, load_all_examples, load_by_name
    from symalg.utils.display import display_simplification_results

    if names:
        unknown = [n for n in names if n not in EXAMPLES]
        if unknown:
            console.print(f"[red]Unknown examples: {', '.join(unknown)}[/red]")
            console.print(f"Available: {', '.join(EXAMPLES)}")
            sys.exit(1)
        examples = [load_by_name(n) for n in names]
    else:
        examples = load_all_examples()

    config = SimplifyConfig(max_exponent=max_exponent)
    results = []
    for ex in examples:
        row = {"name": ex.name, "before": str(ex.expr)}
        try:
            row["after"] = str(run_simplify(ex.expr, config))
        except SymalgError as e:
            row["error"] = e.message
        results.append(row)

    display_simplification_results(results)


@main.command()
@click.argument("name")
@click.option("--simplified", is_flag=True, help="Show the normal form instead of the input")
def inspect(name: str, simplified: bool) -> None:
    """Show the tree of a catalogue entry."""
    from symalg.core.simplify import simplify as run_simplify
    from symalg.library.examples import EXAMPLES, load_by_name
    from symalg.utils.display import display_expr

    ex = load_by_name(name)
    if ex is None:
        console.print(f"[red]Example '{name}' not found.[/red]")
        console.print(f"Available: {', '.join(EXAMPLES)}")
        sys.exit(1)

    expr = ex.expr
    if simplified:
        try:
            expr = run_simplify(expr)
        except SymalgError as e:
            console.print(f"[red]{e.message}[/red]")
            sys.exit(1)
    display_expr(name, expr)


if __name__ == "__main__":
    main()
