"""Cancellable periodic tasks and clocks for session sampling."""

import logging
import threading
import time
from abc import ABC, abstractmethod
from typing import Callable, Optional

log = logging.getLogger("cheetahtype.scheduler")

Clock = Callable[[], int]


def system_clock_ms() -> int:
    """Current wall clock time in milliseconds."""
    return int(time.time() * 1000)


class IntervalHandle(ABC):
    """Handle of a repeating task."""

    @abstractmethod
    def cancel(self) -> None:
        """Stop the task. Calling it again has no effect."""

    @property
    @abstractmethod
    def cancelled(self) -> bool:
        """True once the task was cancelled."""


class Scheduler(ABC):
    """Runs callbacks at a fixed interval until cancelled."""

    @abstractmethod
    def call_every(self, interval_ms: int, callback: Callable[[], None]) -> IntervalHandle:
        """Schedule callback every interval_ms milliseconds.

        The first call happens one interval after scheduling.
        """

    @abstractmethod
    def now_ms(self) -> int:
        """Current time of this scheduler's clock in milliseconds."""


class _ThreadingHandle(IntervalHandle):
    """Repeating task backed by a chain of daemon threading.Timer objects."""

    def __init__(self, interval_ms: int, callback: Callable[[], None]):
        self.interval_sec = interval_ms / 1000.0
        self.callback = callback
        self._lock = threading.Lock()
        self._cancelled = False
        self._timer: Optional[threading.Timer] = None
        self._schedule_next()

    def _schedule_next(self) -> None:
        with self._lock:
            if self._cancelled:
                return
            self._timer = threading.Timer(self.interval_sec, self._run)
            self._timer.daemon = True
            self._timer.start()

    def _run(self) -> None:
        with self._lock:
            if self._cancelled:
                return
        try:
            self.callback()
        except Exception as e:
            log.error(f"Error in interval callback: {e}")
        self._schedule_next()

    def cancel(self) -> None:
        with self._lock:
            self._cancelled = True
            if self._timer:
                self._timer.cancel()
                self._timer = None

    @property
    def cancelled(self) -> bool:
        return self._cancelled


class ThreadingScheduler(Scheduler):
    """Scheduler running callbacks on background timer threads."""

    def __init__(self, clock: Clock = system_clock_ms):
        self.clock = clock

    def call_every(self, interval_ms: int, callback: Callable[[], None]) -> IntervalHandle:
        if interval_ms <= 0:
            raise ValueError("interval_ms must be positive")
        return _ThreadingHandle(interval_ms, callback)

    def now_ms(self) -> int:
        return self.clock()


class _ManualHandle(IntervalHandle):
    """Repeating task driven by ManualScheduler.advance()."""

    def __init__(self, interval_ms: int, callback: Callable[[], None], next_due_ms: int):
        self.interval_ms = interval_ms
        self.callback = callback
        self.next_due_ms = next_due_ms
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled


class ManualScheduler(Scheduler):
    """Virtual time scheduler for deterministic tests.

    Time only moves when advance() is called; due callbacks fire in
    order of their due time, with the clock set to that due time.
    """

    def __init__(self, start_ms: int = 0):
        self._now_ms = start_ms
        self._handles: list[_ManualHandle] = []

    def now_ms(self) -> int:
        return self._now_ms

    def call_every(self, interval_ms: int, callback: Callable[[], None]) -> IntervalHandle:
        if interval_ms <= 0:
            raise ValueError("interval_ms must be positive")
        handle = _ManualHandle(interval_ms, callback, self._now_ms + interval_ms)
        self._handles.append(handle)
        return handle

    @property
    def active_count(self) -> int:
        """Number of scheduled tasks not yet cancelled."""
        return sum(1 for handle in self._handles if not handle.cancelled)

    def advance(self, ms: int) -> None:
        """Move virtual time forward, firing every callback that falls due.

        Args:
            ms: Milliseconds to advance (must not be negative)
        """
        if ms < 0:
            raise ValueError("Cannot move time backwards")

        target = self._now_ms + ms
        while True:
            self._handles = [handle for handle in self._handles if not handle.cancelled]
            due = [handle for handle in self._handles if handle.next_due_ms <= target]
            if not due:
                break
            handle = min(due, key=lambda h: h.next_due_ms)
            self._now_ms = handle.next_due_ms
            handle.next_due_ms += handle.interval_ms
            handle.callback()

        self._now_ms = target


__all__ = [
    "Clock",
    "IntervalHandle",
    "ManualScheduler",
    "Scheduler",
    "ThreadingScheduler",
    "system_clock_ms",
]
