"""Line-oriented RPN session on top of the Calculator.

Tokenizes input, pushes numeric tokens and dispatches everything else to
Calculator.perform_operation. Errors from the calculator propagate unchanged.
"""

from __future__ import annotations

from typing import Iterable, Optional

from rpncalc.calculator import Calculator
from rpncalc.operations import OPERATIONS


def tokenize(line: str) -> list[str]:
    """Split an input line on whitespace."""
    return line.split()


def parse_number(token: str) -> Optional[float]:
    """Return ``token`` as a float, or None if it is an operator or not numeric.

    Registered operation names are never numbers, so ``-`` is subtraction
    while ``-3`` is a negative operand.
    """
    if token in OPERATIONS:
        return None
    try:
        return float(token)
    except ValueError:
        return None


def evaluate(calc: Calculator, tokens: Iterable[str]) -> Optional[float]:
    """Apply ``tokens`` to ``calc`` in order and return the top of the stack.

    The top value is left on the stack. Returns None when the stack ends up
    empty. A failing token raises; tokens before it stay applied.
    """
    for token in tokens:
        value = parse_number(token)
        if value is not None:
            calc.push(value)
        else:
            calc.perform_operation(token)
    stack = calc.stack
    return stack[-1] if stack else None


def evaluate_line(line: str, calc: Optional[Calculator] = None) -> Optional[float]:
    """Tokenize ``line`` and evaluate it on ``calc`` (a fresh Calculator if omitted)."""
    if calc is None:
        calc = Calculator()
    return evaluate(calc, tokenize(line))
