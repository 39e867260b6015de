"""Operation registry for the calculator.

Every built-in is binary: the first pop is the right operand ``a``, the second
pop the left operand ``b``, and ``b OP a`` is pushed back. This keeps RPN input
like ``b a -`` evaluating left to right.

The registry is built once at import and exposed read-only.
"""

from __future__ import annotations

import operator
from types import MappingProxyType
from typing import Callable, Mapping

from rpncalc.errors import DivisionByZero, InsufficientOperands
from rpncalc.models import Operation, OperationKind


def _require(stack: list[float], kind: OperationKind) -> None:
    """Raise InsufficientOperands unless the stack holds ``kind.arity`` values."""
    if len(stack) < kind.arity:
        raise InsufficientOperands(kind.value, kind.description, kind.arity, len(stack))


def _binary(kind: OperationKind, fn: Callable[[float, float], float]) -> Operation:
    """Wrap a two-argument float function as a stack operation."""

    def apply(stack: list[float]) -> None:
        _require(stack, kind)
        a = stack.pop()
        b = stack.pop()
        stack.append(fn(b, a))

    apply.__name__ = f"op_{kind.name.lower()}"
    return apply


def _divide(stack: list[float]) -> None:
    _require(stack, OperationKind.DIVIDE)
    # Checked before popping so a failed division leaves both operands in place
    if stack[-1] == 0.0:
        raise DivisionByZero()
    a = stack.pop()
    b = stack.pop()
    stack.append(b / a)


def _build_registry() -> Mapping[str, Operation]:
    ops: dict[str, Operation] = {
        OperationKind.ADD.value: _binary(OperationKind.ADD, operator.add),
        OperationKind.SUBTRACT.value: _binary(OperationKind.SUBTRACT, operator.sub),
        OperationKind.MULTIPLY.value: _binary(OperationKind.MULTIPLY, operator.mul),
        OperationKind.DIVIDE.value: _divide,
    }
    return MappingProxyType(ops)


OPERATIONS: Mapping[str, Operation] = _build_registry()


def list_operations() -> list[OperationKind]:
    """Registered operations in registry order."""
    return [OperationKind(name) for name in OPERATIONS]
