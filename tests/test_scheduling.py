import pytest

from imagegallery.controller.scheduling import ManualScheduler, QtScheduler


def test_runs_callbacks_in_due_order():
    scheduler = ManualScheduler()
    calls = []
    scheduler.call_later(300, lambda: calls.append("c"))
    scheduler.call_later(100, lambda: calls.append("a"))
    scheduler.call_later(100, lambda: calls.append("b"))

    scheduler.advance(99)
    assert calls == []
    scheduler.advance(1)
    assert calls == ["a", "b"]
    assert scheduler.now == 100
    scheduler.advance(500)
    assert calls == ["a", "b", "c"]
    assert scheduler.now == 600


def test_callbacks_scheduled_while_advancing():
    scheduler = ManualScheduler()
    seen = []

    def first():
        seen.append(("first", scheduler.now))
        scheduler.call_later(50, lambda: seen.append(("second", scheduler.now)))

    scheduler.call_later(100, first)
    scheduler.advance(200)
    assert seen == [("first", 100), ("second", 150)]


def test_zero_delay_runs_on_next_advance():
    scheduler = ManualScheduler()
    calls = []
    scheduler.call_later(0, lambda: calls.append(1))
    assert calls == []
    assert scheduler.pending == 1
    scheduler.advance(0)
    assert calls == [1]


def test_run_all():
    scheduler = ManualScheduler()
    calls = []
    scheduler.call_later(10, lambda: scheduler.call_later(1000, lambda: calls.append("late")))
    scheduler.run_all()
    assert calls == ["late"]
    assert scheduler.now == 1010
    assert scheduler.pending == 0


def test_run_all_detects_runaway_rescheduling():
    scheduler = ManualScheduler()

    def again():
        scheduler.call_later(1, again)

    scheduler.call_later(1, again)
    with pytest.raises(RuntimeError):
        scheduler.run_all(max_steps=50)


def test_negative_delays_rejected():
    scheduler = ManualScheduler()
    with pytest.raises(ValueError):
        scheduler.call_later(-1, lambda: None)
    with pytest.raises(ValueError):
        scheduler.advance(-1)


def test_qt_scheduler_rejects_negative_delay():
    with pytest.raises(ValueError):
        QtScheduler().call_later(-5, lambda: None)
