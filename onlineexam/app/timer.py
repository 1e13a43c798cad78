from __future__ import annotations

"""Timer: one-shot exam countdown on a daemon threading.Timer."""

import threading
import time
from datetime import timedelta
from typing import Callable, Optional

from .explain import trace as xtrace


class Timer:
    """Countdown that calls ``on_timeout`` once when ``duration`` elapses.

    ``start`` and ``stop`` are guarded by the same lock as the expiry path,
    so at most one caller wins each transition and a callback that fires
    after ``stop`` does nothing.
    """

    def __init__(
        self,
        duration: timedelta,
        on_timeout: Callable[[], None],
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.duration = duration
        self.on_timeout = on_timeout
        self._clock = clock
        self._lock = threading.Lock()
        self._running = False
        self._handle: Optional[threading.Timer] = None
        self._started_at: Optional[float] = None
        # bumped on every start; a handle only acts for its own run
        self._generation = 0

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> bool:
        with self._lock:
            if self._running:
                return False
            self._running = True
            self._generation += 1
            self._started_at = self._clock()
            self._handle = threading.Timer(
                self.duration.total_seconds(), self._on_expire, args=(self._generation,)
            )
            self._handle.daemon = True
            self._handle.start()
        xtrace("timer_started", {"seconds": self.duration.total_seconds()})
        return True

    def stop(self) -> bool:
        with self._lock:
            if not self._running:
                return False
            self._running = False
            if self._handle:
                self._handle.cancel()
                self._handle = None
        xtrace("timer_stopped", {})
        return True

    def _on_expire(self, generation: int) -> None:
        with self._lock:
            if not self._running or generation != self._generation:
                return
            self._running = False
            self._handle = None
        xtrace("timer_expired", {"seconds": self.duration.total_seconds()})
        # Outside the lock: the handler may call stop().
        self.on_timeout()

    def remaining(self) -> timedelta:
        with self._lock:
            if not self._running or self._started_at is None:
                return timedelta(0)
            elapsed = self._clock() - self._started_at
        return timedelta(seconds=max(0.0, self.duration.total_seconds() - elapsed))

    def remaining_formatted(self) -> str:
        """Remaining time as MM:SS."""
        total = int(self.remaining().total_seconds())
        minutes, seconds = divmod(total, 60)
        return f"{minutes:02d}:{seconds:02d}"
