"""Quiz-related constants shared across the console and core layers."""

DEFAULT_MAX_ROUNDS: int = 20
DEFAULT_TIME_LIMIT_SECONDS: float = 60.0
# How long a single answer wait blocks before re-checking the deadline.
INPUT_POLL_INTERVAL_SECONDS: float = 0.05

EASY_MAX_OPERAND: int = 15
STANDARD_MAX_OPERAND: int = 50
MULTIPLY_MAX_OPERAND: int = 12
