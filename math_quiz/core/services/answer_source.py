"""Thread-safe sources of typed user input for the quiz."""

from __future__ import annotations

from collections import deque
import logging
import queue
import sys
from threading import Lock, Thread
from typing import TextIO

logger = logging.getLogger(__name__)

_END_OF_INPUT = object()


class AnswerSourceClosed(Exception):
    """Raised when no more input will ever arrive (e.g. stdin reached EOF)."""


class QueueAnswerSource:
    """Buffers lines pushed by a producer and hands them out with timeouts.

    Lines can be consumed whole (``read_line``) or as whitespace separated
    tokens (``next_token``), mirroring how a console user may type several
    answers on one line.
    """

    def __init__(self) -> None:
        self._lines: queue.Queue[object] = queue.Queue()
        self._tokens: deque[str] = deque()
        self._lock = Lock()
        self._closed = False

    def feed(self, line: str) -> None:
        self._lines.put(line)

    def close(self) -> None:
        """Signal that the producer has no more input."""
        self._lines.put(_END_OF_INPUT)

    @property
    def closed(self) -> bool:
        return self._closed

    def read_line(self, timeout: float | None = None) -> str | None:
        """Return the next full line, or None if nothing arrived within ``timeout``."""
        with self._lock:
            if self._tokens:
                line = " ".join(self._tokens)
                self._tokens.clear()
                return line
            return self._take(timeout)

    def next_token(self, timeout: float | None = None) -> str | None:
        """Return the next whitespace separated token, or None on timeout."""
        with self._lock:
            if not self._tokens:
                line = self._take(timeout)
                if line is None:
                    return None
                self._tokens.extend(line.split())
            if self._tokens:
                return self._tokens.popleft()
            return None

    def _take(self, timeout: float | None) -> str | None:
        if self._closed:
            raise AnswerSourceClosed("Input is closed.")
        try:
            item = self._lines.get(timeout=timeout)
        except queue.Empty:
            return None
        if item is _END_OF_INPUT:
            self._closed = True
            raise AnswerSourceClosed("Input is closed.")
        return str(item).rstrip("\r\n")


class ConsoleAnswerSource(QueueAnswerSource):
    """Feeds the buffer from a text stream on a daemon reader thread.

    Reading stdin blocks, so it happens off the main flow; the quiz loop only
    ever waits on the queue with a timeout and stays responsive to the deadline.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        super().__init__()
        self._stream = stream if stream is not None else sys.stdin
        self._thread: Thread | None = None

    def start(self) -> None:
        if self._thread is not None:
            return
        self._thread = Thread(target=self._pump, name="quiz-input-reader", daemon=True)
        self._thread.start()

    def _pump(self) -> None:
        try:
            for line in self._stream:
                self.feed(line)
        except (OSError, ValueError) as exc:
            logger.warning("Stopped reading input: %s", exc)
        finally:
            logger.debug("Input stream exhausted")
            self.close()
