from __future__ import annotations

import logging
import threading
from typing import Any, Callable

from spacehive.application.ports.debouncer import DebouncerPort

_Pending = tuple[threading.Timer, Callable[..., Any], tuple[Any, ...]]


class TimerDebouncer(DebouncerPort):
    """One threading.Timer per key; a new call for a key cancels its pending one."""

    def __init__(self, delay_seconds: float = 0.1) -> None:
        self._delay = delay_seconds
        self._pending: dict[str, _Pending] = {}
        self._lock = threading.Lock()
        self._logger = logging.getLogger(__name__)

    def call(self, key: str, fn: Callable[..., Any], *args: Any) -> None:
        timer = threading.Timer(self._delay, self._fire, args=(key,))
        timer.daemon = True
        with self._lock:
            previous = self._pending.get(key)
            if previous is not None:
                previous[0].cancel()
            self._pending[key] = (timer, fn, args)
        timer.start()

    def cancel(self, key: str) -> None:
        with self._lock:
            pending = self._pending.pop(key, None)
        if pending is not None:
            pending[0].cancel()

    def flush(self, key: str) -> bool:
        with self._lock:
            pending = self._pending.pop(key, None)
        if pending is None:
            return False
        timer, fn, args = pending
        timer.cancel()
        fn(*args)
        return True

    def _fire(self, key: str) -> None:
        with self._lock:
            pending = self._pending.get(key)
            # A newer call replaced this timer; let that one fire instead
            if pending is None or pending[0] is not threading.current_thread():
                return
            del self._pending[key]
        _, fn, args = pending
        try:
            fn(*args)
        except Exception:
            self._logger.exception("Debounced callback failed", extra={"session_id": key})
