"""Orchestrates a timed quiz session: questions, answers and scoring."""

from __future__ import annotations

import logging
from typing import Callable

from math_quiz.constants.message_constants import (
    ANSWER_PROMPT,
    CORRECT_MESSAGE,
    GAME_OVER_TEMPLATE,
    QUESTION_TEMPLATE,
    TIME_UP_MESSAGE,
    WRONG_MESSAGE_TEMPLATE,
)
from math_quiz.core.evaluator import evaluate
from math_quiz.core.models import Difficulty, RoundResult
from math_quiz.core.question_generator import QuestionGenerator
from math_quiz.core.services.answer_source import AnswerSourceClosed, QueueAnswerSource
from math_quiz.core.services.deadline_controller import DeadlineController
from math_quiz.core.services.scoreboard import Scoreboard, SessionSummary
from math_quiz.core.settings import QuizSettings

logger = logging.getLogger(__name__)

_MIN_POLL_SECONDS = 0.001


class QuizLoop:
    """Runs rounds until the round limit is reached or the deadline fires."""

    def __init__(
        self,
        answer_source: QueueAnswerSource,
        generator: QuestionGenerator | None = None,
        settings: QuizSettings | None = None,
        print_fn: Callable[..., None] = print,
    ) -> None:
        self._answers = answer_source
        self._generator = generator or QuestionGenerator()
        self._settings = settings or QuizSettings()
        self._print = print_fn

    def run_session(self, difficulty: Difficulty, max_rounds: int | None = None) -> int:
        """Play one session and return the final score."""
        return self.play_session(difficulty, max_rounds).score

    def play_session(self, difficulty: Difficulty, max_rounds: int | None = None) -> SessionSummary:
        rounds = max_rounds if max_rounds is not None else self._settings.max_rounds
        scoreboard = Scoreboard(rounds)
        deadline = DeadlineController(
            budget_seconds=self._settings.time_limit_seconds,
            on_expire=self._announce_timeout,
        )
        logger.info("Starting %s session with %d rounds", difficulty, rounds)

        deadline.start()
        try:
            for round_number in range(1, rounds + 1):
                if deadline.is_expired():
                    break
                result = self._play_round(round_number, difficulty, deadline)
                if result is None:
                    break
                scoreboard.record_round(result)
        finally:
            deadline.stop()

        if deadline.is_expired():
            scoreboard.mark_timed_out()
        summary = scoreboard.summary()
        self._print(GAME_OVER_TEMPLATE.format(score=summary.score, max_rounds=summary.max_rounds))
        logger.info(
            "Session finished: %d correct in %d rounds (timed out: %s)",
            summary.score,
            summary.rounds_played,
            summary.timed_out,
        )
        return summary

    def _play_round(
        self, round_number: int, difficulty: Difficulty, deadline: DeadlineController
    ) -> RoundResult | None:
        problem = self._generator.generate(difficulty)
        self._print(QUESTION_TEMPLATE.format(number=round_number, problem=problem))
        expected = evaluate(problem)

        self._print(ANSWER_PROMPT, end="", flush=True)
        answer = self._await_answer(deadline)
        # An answer that arrives together with the timeout is not scored.
        if answer is None or deadline.is_expired():
            return None

        is_correct = answer == expected
        if is_correct:
            self._print(CORRECT_MESSAGE)
        else:
            self._print(WRONG_MESSAGE_TEMPLATE.format(expected=expected))
        return RoundResult(
            round_number=round_number,
            problem=problem,
            expected=expected,
            answer=answer,
            is_correct=is_correct,
        )

    def _await_answer(self, deadline: DeadlineController) -> int | None:
        """Wait for an integer token while the global deadline is still running."""
        while not deadline.is_expired():
            timeout = max(
                min(self._settings.poll_interval_seconds, deadline.remaining_seconds()),
                _MIN_POLL_SECONDS,
            )
            try:
                token = self._answers.next_token(timeout=timeout)
            except AnswerSourceClosed:
                logger.info("Input closed while waiting for an answer")
                return None
            if token is None:
                continue
            try:
                return int(token)
            except ValueError:
                logger.debug("Ignoring non-numeric input %r", token)
        return None

    def _announce_timeout(self) -> None:
        self._print(TIME_UP_MESSAGE, flush=True)
