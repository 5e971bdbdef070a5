from __future__ import annotations

import threading

from spacehive.infrastructure.timers.debouncer import TimerDebouncer


def test_only_last_call_fires():
    fired = []
    done = threading.Event()

    def record(value):
        fired.append(value)
        done.set()

    debouncer = TimerDebouncer(delay_seconds=0.05)
    debouncer.call("a", record, 1)
    debouncer.call("a", record, 2)

    assert done.wait(timeout=2.0)
    assert fired == [2]


def test_keys_do_not_cancel_each_other():
    fired = []
    debouncer = TimerDebouncer(delay_seconds=10)
    debouncer.call("a", fired.append, "first")
    debouncer.call("b", fired.append, "second")

    assert debouncer.flush("a") is True
    assert debouncer.flush("b") is True
    assert fired == ["first", "second"]


def test_flush_runs_pending_immediately():
    fired = []
    debouncer = TimerDebouncer(delay_seconds=10)
    debouncer.call("a", fired.append, "x")

    assert debouncer.flush("a") is True
    assert fired == ["x"]
    assert debouncer.flush("a") is False


def test_cancel_drops_pending():
    fired = []
    debouncer = TimerDebouncer(delay_seconds=10)
    debouncer.call("a", fired.append, "x")
    debouncer.cancel("a")

    assert debouncer.flush("a") is False
    assert fired == []
