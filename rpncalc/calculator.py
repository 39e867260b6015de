"""The RPN calculator: a float stack plus dispatch through the operation registry."""

from __future__ import annotations

import logging
from typing import Optional

from rpncalc.errors import CalculatorError, UnknownOperation
from rpncalc.operations import OPERATIONS

logger = logging.getLogger(__name__)


class Calculator:
    """Stack of floats with named binary operations applied to the top two values.

    Not thread-safe. Use one Calculator per worker or guard it externally.
    """

    def __init__(self) -> None:
        self._stack: list[float] = []
        self._operations = OPERATIONS

    def __repr__(self) -> str:
        return f"Calculator({self._stack!r})"

    def __len__(self) -> int:
        return len(self._stack)

    @property
    def depth(self) -> int:
        """Number of values on the stack."""
        return len(self._stack)

    @property
    def stack(self) -> tuple[float, ...]:
        """Snapshot of the stack, bottom first."""
        return tuple(self._stack)

    @property
    def operations(self) -> tuple[str, ...]:
        """Names of the registered operations, sorted."""
        return tuple(sorted(self._operations))

    def push(self, value: float) -> None:
        """Push ``value`` onto the top of the stack.

        Raises:
            TypeError: ``value`` is a string. Numeric text goes through the session parser.
        """
        if isinstance(value, str):
            raise TypeError(f"push expects a number, got string {value!r}")
        self._stack.append(float(value))
        logger.debug(f"push {value!r} (depth {len(self._stack)})")

    def pop(self) -> Optional[float]:
        """Remove and return the top value, or None when the stack is empty."""
        if not self._stack:
            logger.debug("pop on empty stack")
            return None
        value = self._stack.pop()
        logger.debug(f"pop {value!r} (depth {len(self._stack)})")
        return value

    def perform_operation(self, name: str) -> None:
        """Apply the operation registered under ``name`` to the stack.

        Raises:
            UnknownOperation: ``name`` is not registered. Stack untouched.
            InsufficientOperands: fewer than two values on the stack. Stack untouched.
            DivisionByZero: ``/`` with a zero divisor. Fatal; not a CalculatorError.
        """
        op = self._operations.get(name)
        if op is None:
            logger.warning(f"unknown operation {name!r}")
            raise UnknownOperation(name)

        try:
            op(self._stack)
        except CalculatorError as e:
            logger.warning(str(e))
            raise
        logger.debug(f"applied {name!r} -> {self._stack[-1]!r}")
