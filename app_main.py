"""Application entry point for the timed math quiz."""

from __future__ import annotations

from math_quiz.core.quiz_loop import QuizLoop
from math_quiz.core.services.answer_source import ConsoleAnswerSource
from math_quiz.core.settings import QuizSettings
from math_quiz.ui import prompt_for_difficulty, show_welcome
from math_quiz.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging, ask for a difficulty, and play one timed session."""
    logger = configure_logging()
    logger.info("Starting math quiz")

    settings = QuizSettings()
    answer_source = ConsoleAnswerSource()
    answer_source.start()

    show_welcome(settings)
    difficulty = prompt_for_difficulty(answer_source)
    if difficulty is None:
        return

    QuizLoop(answer_source=answer_source, settings=settings).run_session(difficulty)


if __name__ == "__main__":
    main()
