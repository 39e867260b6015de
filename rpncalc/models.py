"""Typed structures shared by the calculator, the registry and the CLI.

OperationKind enum and the Operation callable type.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable

# An operation mutates the stack in place or raises without touching it.
Operation = Callable[[list[float]], None]


class OperationKind(str, Enum):
    """Built-in operations, keyed by their RPN token."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @property
    def arity(self) -> int:
        return 2

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS: dict[OperationKind, str] = {
    OperationKind.ADD: "Addition",
    OperationKind.SUBTRACT: "Subtraction",
    OperationKind.MULTIPLY: "Multiplication",
    OperationKind.DIVIDE: "Division",
}
