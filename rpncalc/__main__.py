"""CLI for the rpncalc evaluator.

Usage:
    python -m rpncalc eval "1 2 +"           # Evaluate and print the top of stack
    python -m rpncalc eval 3.1459 2.7182 '*' # Tokens may be separate arguments
    python -m rpncalc ops                    # List registered operations
    python -m rpncalc repl                   # Interactive session (quit/exit/EOF to leave)
"""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from rpncalc import config
from rpncalc.calculator import Calculator
from rpncalc.errors import CalculatorError, DivisionByZero
from rpncalc.operations import list_operations
from rpncalc.session import evaluate, tokenize

app = typer.Typer(
    name="rpncalc",
    help="Reverse-Polish-notation calculator",
    no_args_is_help=True,
)
console = Console(stderr=True)
out = Console()

# Exit code for a divide-by-zero abort, distinct from recoverable errors (1)
# and click usage errors (2)
FATAL_EXIT = 3


def _fmt(value: Optional[float]) -> str:
    return "(empty)" if value is None else repr(value)


def _show(text: str) -> None:
    out.print(text, markup=False, highlight=False)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every push and operation"),
) -> None:
    """Reverse-Polish-notation calculator."""
    config.configure_logging(console, verbose=verbose)


@app.command("eval", context_settings={"ignore_unknown_options": True})
def cmd_eval(
    expression: list[str] = typer.Argument(help="RPN tokens, e.g. '1 2 +'"),
) -> None:
    """Evaluate an RPN expression and print the top of the stack."""
    tokens = [tok for part in expression for tok in tokenize(part)]
    calc = Calculator()
    try:
        result = evaluate(calc, tokens)
    except CalculatorError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    except DivisionByZero as e:
        console.print(f"[bold red]Fatal:[/bold red] {escape(str(e))}")
        raise typer.Exit(FATAL_EXIT)
    _show(_fmt(result))


@app.command("ops")
def cmd_ops() -> None:
    """Show registered operations."""
    table = Table(title="Operations", show_header=True, header_style="bold")
    table.add_column("Name", style="green", justify="center")
    table.add_column("Arity", justify="right")
    table.add_column("Description", min_width=15)

    for kind in list_operations():
        table.add_row(escape(kind.value), str(kind.arity), kind.description)

    out.print(table)


@app.command("repl")
def cmd_repl() -> None:
    """Interactive session. Type numbers and operators; 'pop', 'clear', 'quit'."""
    calc = Calculator()
    prompt = config.prompt()

    while True:
        try:
            line = console.input(escape(prompt))
        except EOFError:
            break

        command = line.strip()
        if command in ("quit", "exit"):
            break
        if command == "pop":
            _show(_fmt(calc.pop()))
            continue
        if command == "clear":
            calc = Calculator()
            _show(str(list(calc.stack)))
            continue

        try:
            evaluate(calc, tokenize(line))
        except CalculatorError as e:
            console.print(f"[red]Error:[/red] {escape(str(e))}")
        except DivisionByZero as e:
            console.print(f"[bold red]Fatal:[/bold red] {escape(str(e))}")
            raise typer.Exit(FATAL_EXIT)
        _show(str(list(calc.stack)))


if __name__ == "__main__":
    app()
