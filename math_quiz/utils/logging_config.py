"""Logging configuration helpers for the math quiz."""

from __future__ import annotations

import logging
from logging import Logger


def configure_logging(level: int = logging.WARNING) -> Logger:
    """Configure basic logging for the application and return its logger.

    Records go to stderr, so the default level stays at WARNING to keep the
    quiz itself readable on stdout.
    """
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    return logging.getLogger("math_quiz")
