"""Random arithmetic problem generation parameterized by difficulty."""

from __future__ import annotations

import random

from math_quiz.constants.quiz_constants import (
    EASY_MAX_OPERAND,
    MULTIPLY_MAX_OPERAND,
    STANDARD_MAX_OPERAND,
)
from math_quiz.core.models import Difficulty, InvalidDifficultyError, Operator, Problem

_MEDIUM_OPERATORS = (Operator.ADD, Operator.SUBTRACT)
_HARD_OPERATORS = (Operator.ADD, Operator.SUBTRACT, Operator.MULTIPLY)


class QuestionGenerator:
    """Builds problems whose operand ranges and operators depend on the difficulty.

    The only state is the random source, so seeding the injected ``rng`` makes
    the sequence of problems reproducible.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def generate(self, difficulty: Difficulty) -> Problem:
        if difficulty is Difficulty.EASY:
            left = self._draw(EASY_MAX_OPERAND)
            right = self._draw(EASY_MAX_OPERAND)
            return Problem(left, Operator.ADD, right)

        if difficulty is Difficulty.MEDIUM:
            left = self._draw(STANDARD_MAX_OPERAND)
            right = self._draw(STANDARD_MAX_OPERAND)
            return Problem(left, self._rng.choice(_MEDIUM_OPERATORS), right)

        if difficulty is Difficulty.HARD:
            left = self._draw(STANDARD_MAX_OPERAND)
            # The operator decides the range of the right operand.
            operator = self._rng.choice(_HARD_OPERATORS)
            upper = MULTIPLY_MAX_OPERAND if operator is Operator.MULTIPLY else STANDARD_MAX_OPERAND
            return Problem(left, operator, self._draw(upper))

        raise InvalidDifficultyError(f"Unexpected difficulty: {difficulty!r}")

    def _draw(self, upper: int) -> int:
        return self._rng.randint(1, upper)
