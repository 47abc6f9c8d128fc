"""Service for accumulating the score of a single quiz session."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from math_quiz.core.models import RoundResult


class SessionSummary(BaseModel):
    """Immutable snapshot returned to consumers once a session ends."""

    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0)
    rounds_played: int = Field(ge=0)
    max_rounds: int = Field(ge=1)
    timed_out: bool = False

    @model_validator(mode="after")
    def _check_tally(self) -> "SessionSummary":
        if self.score > self.rounds_played:
            raise ValueError("score cannot exceed rounds played")
        if self.rounds_played > self.max_rounds:
            raise ValueError("rounds played cannot exceed max rounds")
        return self

    def report(self) -> str:
        # The denominator is the configured round count, even after a timeout.
        return f"{self.score}/{self.max_rounds}"


class Scoreboard:
    """Tracks correct answers and completed rounds for one player."""

    def __init__(self, max_rounds: int) -> None:
        if max_rounds < 1:
            raise ValueError("A session needs at least one round.")
        self._max_rounds = max_rounds
        self._score: int = 0
        self._rounds_played: int = 0
        self._timed_out: bool = False

    @property
    def score(self) -> int:
        return self._score

    @property
    def rounds_played(self) -> int:
        return self._rounds_played

    def record_round(self, result: RoundResult) -> None:
        """Fold a finished round into the tally."""
        if self._rounds_played >= self._max_rounds:
            raise RuntimeError("All rounds have already been played.")
        self._rounds_played += 1
        if result.is_correct:
            self._score += 1

    def mark_timed_out(self) -> None:
        self._timed_out = True

    def summary(self) -> SessionSummary:
        return SessionSummary(
            score=self._score,
            rounds_played=self._rounds_played,
            max_rounds=self._max_rounds,
            timed_out=self._timed_out,
        )
