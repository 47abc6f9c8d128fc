"""Domain models for the math quiz."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class InvalidDifficultyError(ValueError):
    """Raised when a value does not name one of the supported difficulties."""


class Difficulty(Enum):
    """Difficulty tier chosen once at the start of a session."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class Operator(Enum):
    """Arithmetic operators a problem can use; the value is the rendered symbol."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"


@dataclass(frozen=True, slots=True)
class Problem:
    """One generated question: two integer operands joined by an operator."""

    left: int
    operator: Operator
    right: int

    def __str__(self) -> str:
        symbol = self.operator.value if isinstance(self.operator, Operator) else self.operator
        return f"{self.left} {symbol} {self.right}"


@dataclass(frozen=True, slots=True)
class RoundResult:
    """Outcome of a single answered round."""

    round_number: int
    problem: Problem
    expected: int
    answer: int
    is_correct: bool


def parse_difficulty(text: str) -> Difficulty:
    """Match user input against the difficulty names, ignoring case and padding."""
    normalized = (text or "").strip().lower()
    try:
        return Difficulty(normalized)
    except ValueError as exc:
        raise InvalidDifficultyError(f"Unknown difficulty: {text!r}") from exc
