"""Computes the expected answer for a generated problem."""

from __future__ import annotations

import operator as _op
from typing import Callable

from math_quiz.core.models import Operator, Problem


class InvalidOperatorError(ValueError):
    """Raised when a problem carries an operator the quiz does not support."""


_OPERATIONS: dict[Operator, Callable[[int, int], int]] = {
    Operator.ADD: _op.add,
    Operator.SUBTRACT: _op.sub,
    Operator.MULTIPLY: _op.mul,
}


def evaluate(problem: Problem) -> int:
    try:
        operation = _OPERATIONS[problem.operator]
    except (KeyError, TypeError) as exc:
        raise InvalidOperatorError(f"Unsupported operator: {problem.operator!r}") from exc
    return operation(problem.left, problem.right)
