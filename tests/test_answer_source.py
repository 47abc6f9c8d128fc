import io

import pytest

from math_quiz.core.services.answer_source import (
    AnswerSourceClosed,
    ConsoleAnswerSource,
    QueueAnswerSource,
)


def test_tokens_come_from_one_line_in_order():
    source = QueueAnswerSource()
    source.feed("12 abc -4\n")
    assert source.next_token(timeout=0.1) == "12"
    assert source.next_token(timeout=0.1) == "abc"
    assert source.next_token(timeout=0.1) == "-4"


def test_timeout_returns_none():
    source = QueueAnswerSource()
    assert source.next_token(timeout=0.01) is None
    assert source.read_line(timeout=0.01) is None


def test_blank_line_yields_no_token():
    source = QueueAnswerSource()
    source.feed("   \n")
    assert source.next_token(timeout=0.01) is None


def test_read_line_returns_whole_line():
    source = QueueAnswerSource()
    source.feed("Hard\r\n")
    assert source.read_line(timeout=0.1) == "Hard"


def test_close_is_raised_after_buffered_lines():
    source = QueueAnswerSource()
    source.feed("7")
    source.close()
    assert source.next_token(timeout=0.1) == "7"
    with pytest.raises(AnswerSourceClosed):
        source.next_token(timeout=0.1)
    assert source.closed is True
    with pytest.raises(AnswerSourceClosed):
        source.read_line(timeout=0.1)


def test_console_source_reads_stream_on_background_thread():
    source = ConsoleAnswerSource(io.StringIO("easy\n3 4\n"))
    source.start()
    assert source.read_line(timeout=1.0) == "easy"
    assert source.next_token(timeout=1.0) == "3"
    assert source.next_token(timeout=1.0) == "4"
    with pytest.raises(AnswerSourceClosed):
        source.next_token(timeout=1.0)
