"""Request throttling for batch geocoding.

Caller-level spacing of provider calls; the resolver itself never throttles.
"""

from __future__ import annotations

import time
from threading import Lock


class MinIntervalThrottle:
    """
    Enforce a minimum spacing between request starts, across threads.

    Geocoding quota is shared by every worker of a batch, so the spacing is
    global to the throttle instance, not per thread.
    """

    def __init__(self, min_interval: float = 0.0) -> None:
        if min_interval < 0:
            raise ValueError("min_interval must be >= 0")
        self._min_interval = float(min_interval)
        self._next_start = 0.0
        self._lock = Lock()

    @property
    def min_interval(self) -> float:
        return self._min_interval

    def wait(self) -> None:
        """
        Blocking call. Reserves the next start slot, then sleeps until it.
        Thread-safe.
        """
        if self._min_interval <= 0:
            return

        with self._lock:
            now = time.monotonic()
            start = max(now, self._next_start)
            self._next_start = start + self._min_interval

        delay = start - now
        if delay > 0:
            time.sleep(delay)
