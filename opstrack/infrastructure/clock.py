"""Timestamp source shared by every collection of a store."""

import threading
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

Clock = Callable[[], datetime]

_TICK = timedelta(microseconds=1)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class MonotonicClock:
    """Strictly increasing UTC timestamps.

    Successive readings never repeat, even when the wall clock has not
    advanced between two calls or has stepped backwards. This keeps
    ``updated_at`` strictly increasing across merges and gives activities a
    total ``created_at`` order.
    """

    def __init__(self, source: Clock = utc_now):
        self._source = source
        self._last: datetime | None = None
        self._lock = threading.Lock()

    def __call__(self) -> datetime:
        with self._lock:
            now = self._source()
            if self._last is not None and now <= self._last:
                now = self._last + _TICK
            self._last = now
            return now
