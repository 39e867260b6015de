"""Calculator exceptions.

CalculatorError and its subclasses are recoverable: the stack is left as it
was and the session can go on. DivisionByZero is not a CalculatorError; it
derives from ZeroDivisionError and is meant to end the session.
"""

from __future__ import annotations


class CalculatorError(Exception):
    """Base class for recoverable calculator failures."""


class UnknownOperation(CalculatorError):
    """The operation name is not in the registry."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Specified operation does not exist: {name!r}")


class InsufficientOperands(CalculatorError):
    """Fewer values on the stack than the operation consumes."""

    def __init__(self, name: str, description: str, required: int, available: int) -> None:
        self.name = name
        self.required = required
        self.available = available
        super().__init__(
            f"{description} requires {required} arguments, stack holds {available}"
        )


class DivisionByZero(ZeroDivisionError):
    """Divisor on top of the stack is zero. Fatal for the session."""

    def __init__(self) -> None:
        super().__init__("DIVISION BY ZERO")
