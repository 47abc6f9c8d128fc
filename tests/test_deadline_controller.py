from threading import Event

import pytest

from math_quiz.core.services.deadline_controller import DeadlineController

BUDGET = 0.2


def test_not_expired_right_after_start():
    deadline = DeadlineController(budget_seconds=BUDGET)
    deadline.start()
    try:
        assert deadline.is_expired() is False
        assert deadline.remaining_seconds() > 0
    finally:
        deadline.stop()


def test_expires_only_after_budget_elapsed():
    fired = Event()
    deadline = DeadlineController(budget_seconds=BUDGET, on_expire=fired.set)
    deadline.start()

    assert deadline.wait(timeout=2.0) is True
    assert deadline.is_expired() is True
    assert deadline.elapsed_seconds() >= BUDGET
    assert deadline.remaining_seconds() == 0.0
    assert fired.wait(timeout=1.0)
    deadline.stop()


def test_expire_callback_runs_once():
    calls = []
    deadline = DeadlineController(budget_seconds=0.05, on_expire=lambda: calls.append(1))
    deadline.start()
    deadline.wait(timeout=2.0)
    deadline.stop()
    assert calls == [1]


def test_stop_before_budget_never_expires():
    calls = []
    deadline = DeadlineController(budget_seconds=5, on_expire=lambda: calls.append(1))
    deadline.start()
    deadline.stop()
    assert deadline.is_expired() is False
    assert calls == []


def test_remaining_uses_injected_clock():
    ticks = iter([100.0, 112.5, 130.0])
    deadline = DeadlineController(budget_seconds=60, clock=lambda: next(ticks))
    deadline.start()
    try:
        assert deadline.elapsed_seconds() == 12.5
        assert deadline.remaining_seconds() == 30.0
    finally:
        deadline.stop()


def test_cannot_start_twice():
    deadline = DeadlineController(budget_seconds=5)
    deadline.start()
    try:
        with pytest.raises(RuntimeError):
            deadline.start()
    finally:
        deadline.stop()


def test_budget_must_be_positive():
    with pytest.raises(ValueError):
        DeadlineController(budget_seconds=0)
