"""rpncalc — reverse-Polish-notation arithmetic evaluator.

A Calculator holds a stack of floats and applies named binary operations
(+, -, *, /) to the top two values.

Usage:
    from rpncalc import Calculator

    calc = Calculator()
    calc.push(1.0)
    calc.push(2.0)
    calc.perform_operation("+")
    calc.pop()                         # 3.0

    python -m rpncalc eval "1 2 +"     # Evaluate from the shell
    python -m rpncalc repl             # Interactive session
"""

from rpncalc.calculator import Calculator
from rpncalc.errors import CalculatorError, DivisionByZero, InsufficientOperands, UnknownOperation

__all__ = [
    "Calculator",
    "CalculatorError",
    "DivisionByZero",
    "InsufficientOperands",
    "UnknownOperation",
]
