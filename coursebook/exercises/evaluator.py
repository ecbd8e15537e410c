"""Evaluating arithmetic expression trees."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Union


class Operation(Enum):
    """An operation to perform on two subexpressions."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


@dataclass(frozen=True)
class BinaryOp:
    """An operation on two subexpressions."""

    op: Operation
    left: Expression
    right: Expression


@dataclass(frozen=True)
class Value:
    """A literal value."""

    value: int


Expression = Union[BinaryOp, Value]


class EvaluationError(ArithmeticError):
    """The expression cannot be evaluated."""


def _divide(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def evaluate(expression: Expression) -> int:
    """Evaluate the expression; division truncates towards zero."""
    match expression:
        case Value(value):
            return value
        case BinaryOp(op, left, right):
            lhs = evaluate(left)
            rhs = evaluate(right)
            if op is Operation.ADD:
                return lhs + rhs
            if op is Operation.SUB:
                return lhs - rhs
            if op is Operation.MUL:
                return lhs * rhs
            if rhs == 0:
                raise EvaluationError("division by zero")
            return _divide(lhs, rhs)
    raise TypeError(f"not an expression: {expression!r}")


def main(argv: list[str] | None = None) -> int:
    """Evaluate a sample expression and print it with its result."""
    expression = BinaryOp(Operation.SUB, Value(20), Value(10))
    print(f"expr: {expression!r}")
    try:
        print(f"result: {evaluate(expression)}")
    except EvaluationError as exc:
        print(f"result: error: {exc}")
    return 0


if __name__ == "__main__":
    sys.exit(main())