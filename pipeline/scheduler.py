"""Periodic scheduler base.

A scheduler is either idle (no timer thread) or running (a daemon thread
waiting on a threading.Event between ticks). start() arms it, stop()
disarms it, set_interval() rearms with a new period. run_once() executes
a tick immediately on the caller's thread and is what the timer thread
calls too, so ticks never overlap.

stop() does not interrupt a tick that is already executing; it only
prevents the next one.
"""

import logging
import threading
from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from typing import Any, Callable, Dict, Optional

from core.utils import utc_now

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class PeriodicScheduler(ABC):
    name: str = "scheduler"

    def __init__(self, interval_seconds: float, clock: Clock = utc_now):
        if interval_seconds <= 0:
            raise ValueError(f"Scheduler interval must be positive, got {interval_seconds}")
        self.interval_seconds = float(interval_seconds)
        self.clock = clock

        self._state_lock = threading.Lock()
        self._tick_lock = threading.Lock()
        self._stop_event: Optional[threading.Event] = None
        self._thread: Optional[threading.Thread] = None

        self.last_run_at: Optional[datetime] = None
        self.next_run_at: Optional[datetime] = None
        self.last_error: Optional[str] = None
        self.run_count = 0

    @property
    def is_running(self) -> bool:
        event = self._stop_event
        return event is not None and not event.is_set()

    @abstractmethod
    def tick(self, now: datetime) -> Any:
        """One unit of work. Exceptions are logged by run_once()."""

    def start(self) -> bool:
        """Arm the timer. Returns False if already running."""
        with self._state_lock:
            if self.is_running:
                logger.info(f"{self.name} already running")
                return False

            stop_event = threading.Event()
            self._stop_event = stop_event
            self.next_run_at = self.clock() + timedelta(seconds=self.interval_seconds)
            self._thread = threading.Thread(
                target=self._loop,
                args=(stop_event,),
                name=f"{self.name}-timer",
                daemon=True
            )
            self._thread.start()

        logger.info(f"{self.name} started (every {self.interval_seconds:.0f}s)")
        return True

    def stop(self, wait: bool = False, timeout: Optional[float] = None) -> None:
        with self._state_lock:
            if self._stop_event is None:
                return
            self._stop_event.set()
            thread = self._thread
            self._stop_event = None
            self._thread = None
            self.next_run_at = None

        if wait and thread is not None and thread is not threading.current_thread():
            thread.join(timeout)
        logger.info(f"{self.name} stopped")

    def set_interval(self, interval_seconds: float) -> None:
        """Change the period; a running scheduler is rearmed."""
        if interval_seconds <= 0:
            raise ValueError(f"Scheduler interval must be positive, got {interval_seconds}")
        was_running = self.is_running
        self.stop()
        self.interval_seconds = float(interval_seconds)
        logger.info(f"{self.name} interval set to {self.interval_seconds:.0f}s")
        if was_running:
            self.start()

    def run_once(self) -> Any:
        """Run a tick now. Errors are logged and swallowed; returns None on failure."""
        with self._tick_lock:
            now = self.clock()
            self.last_run_at = now
            self.run_count += 1
            try:
                result = self.tick(now)
                self.last_error = None
                return result
            except Exception as e:
                self.last_error = str(e)
                logger.error(f"{self.name} tick failed: {e}", exc_info=True)
                return None

    def _loop(self, stop_event: threading.Event) -> None:
        while not stop_event.wait(self.interval_seconds):
            self.run_once()
            if not stop_event.is_set():
                self.next_run_at = self.clock() + timedelta(seconds=self.interval_seconds)

    def get_status(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'is_running': self.is_running,
            'interval_seconds': self.interval_seconds,
            'last_run_at': self.last_run_at,
            'next_run_at': self.next_run_at if self.is_running else None,
            'run_count': self.run_count,
            'last_error': self.last_error,
        }
