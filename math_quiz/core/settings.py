"""Session settings with the fixed quiz defaults."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from math_quiz.constants.quiz_constants import (
    DEFAULT_MAX_ROUNDS,
    DEFAULT_TIME_LIMIT_SECONDS,
    INPUT_POLL_INTERVAL_SECONDS,
)


class QuizSettings(BaseModel):
    """Round count and timing for a session.

    The console game always runs with the defaults; other values exist so
    tests can shorten the budget.
    """

    model_config = ConfigDict(frozen=True)

    max_rounds: int = Field(default=DEFAULT_MAX_ROUNDS, ge=1)
    time_limit_seconds: float = Field(default=DEFAULT_TIME_LIMIT_SECONDS, gt=0)
    poll_interval_seconds: float = Field(default=INPUT_POLL_INTERVAL_SECONDS, gt=0)
