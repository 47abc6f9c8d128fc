"""Console prompts shown before a quiz session starts."""

from __future__ import annotations

import logging
from typing import Callable

from math_quiz.constants.message_constants import (
    DIFFICULTY_PROMPT,
    INVALID_DIFFICULTY_PROMPT,
    RULES_MESSAGE_TEMPLATE,
    WELCOME_MESSAGE,
)
from math_quiz.core.models import Difficulty, InvalidDifficultyError, parse_difficulty
from math_quiz.core.services.answer_source import AnswerSourceClosed, QueueAnswerSource
from math_quiz.core.settings import QuizSettings

logger = logging.getLogger(__name__)


def _describe_time_limit(seconds: float) -> str:
    if seconds == 60:
        return "1 minute"
    if seconds % 60 == 0:
        return f"{int(seconds // 60)} minutes"
    return f"{seconds:g} seconds"


def show_welcome(settings: QuizSettings, print_fn: Callable[..., None] = print) -> None:
    """Print the greeting and the rules of the session."""
    print_fn(WELCOME_MESSAGE)
    print_fn(
        RULES_MESSAGE_TEMPLATE.format(
            rounds=settings.max_rounds,
            minutes=_describe_time_limit(settings.time_limit_seconds),
        )
    )


def prompt_for_difficulty(
    answer_source: QueueAnswerSource,
    print_fn: Callable[..., None] = print,
) -> Difficulty | None:
    """Ask until the user names a valid difficulty.

    There is no time limit here. Returns None only if input closes before a
    valid choice is made.
    """
    print_fn(DIFFICULTY_PROMPT)
    while True:
        try:
            line = answer_source.read_line()
        except AnswerSourceClosed:
            logger.info("Input closed before a difficulty was chosen")
            return None
        if line is None:
            continue
        try:
            return parse_difficulty(line)
        except InvalidDifficultyError:
            logger.debug("Rejected difficulty %r", line)
            print_fn(INVALID_DIFFICULTY_PROMPT)
