"""Service tracking the single global time budget of a quiz session."""

from __future__ import annotations

import logging
from threading import Event, Thread
import time
from typing import Callable

from math_quiz.constants.quiz_constants import DEFAULT_TIME_LIMIT_SECONDS

logger = logging.getLogger(__name__)


class DeadlineController:
    """Runs a background timer that flips a one-way expiry flag.

    The timer thread is the only writer of the flag; the quiz loop only reads
    it. Both sides go through a ``threading.Event`` so the expiry is visible
    across threads without extra locking.
    """

    def __init__(
        self,
        budget_seconds: float = DEFAULT_TIME_LIMIT_SECONDS,
        on_expire: Callable[[], None] | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if budget_seconds <= 0:
            raise ValueError("Time budget must be positive.")
        self._budget_seconds = budget_seconds
        self._on_expire = on_expire
        self._clock = clock
        self._expired = Event()
        self._stopped = Event()
        self._started_at: float | None = None
        self._thread: Thread | None = None

    @property
    def budget_seconds(self) -> float:
        return self._budget_seconds

    def start(self) -> None:
        """Record the origin instant and launch the timekeeping thread."""
        if self._thread is not None:
            raise RuntimeError("Deadline has already been started.")
        self._started_at = self._clock()
        self._thread = Thread(target=self._run, name="quiz-deadline", daemon=True)
        self._thread.start()
        logger.debug("Deadline started with a %.2fs budget", self._budget_seconds)

    def stop(self) -> None:
        """Stop the timer without expiring and wait for its thread to finish."""
        self._stopped.set()
        if self._thread is not None:
            self._thread.join()

    def is_expired(self) -> bool:
        return self._expired.is_set()

    def wait(self, timeout: float | None = None) -> bool:
        """Block until the deadline expires or ``timeout`` elapses."""
        return self._expired.wait(timeout)

    def elapsed_seconds(self) -> float:
        if self._started_at is None:
            return 0.0
        return self._clock() - self._started_at

    def remaining_seconds(self) -> float:
        if self._expired.is_set():
            return 0.0
        return max(0.0, self._budget_seconds - self.elapsed_seconds())

    def _run(self) -> None:
        if self._stopped.wait(self._budget_seconds):
            return
        self._expired.set()
        logger.info("Time budget of %.2fs elapsed", self._budget_seconds)
        if self._on_expire is not None:
            self._on_expire()
