"""Console UI helpers for the math quiz."""

from .console_prompts import prompt_for_difficulty, show_welcome

__all__ = [
    "prompt_for_difficulty",
    "show_welcome",
]
