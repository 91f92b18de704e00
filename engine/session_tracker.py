"""Keystroke tracking against a reference text for one typing test."""

import logging
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from engine.metrics import build_result, calculate_wpm, count_chars
from engine.models import SessionConfig, TestResult
from engine.scheduler import IntervalHandle, Scheduler, ThreadingScheduler

log = logging.getLogger("cheetahtype.session_tracker")


class SessionState(str, Enum):
    """Lifecycle state of a typing session."""

    CONFIGURED = "configured"
    ACTIVE = "active"
    FINISHED = "finished"


@dataclass
class TypingSession:
    """Mutable state of one test attempt."""

    reference_text: str
    input_buffer: str = ""
    start_time_ms: Optional[int] = None
    end_time_ms: Optional[int] = None
    sampled_wpm: list[int] = field(default_factory=list)
    active: bool = False
    finished: bool = False

    @property
    def state(self) -> SessionState:
        if self.finished:
            return SessionState.FINISHED
        if self.active:
            return SessionState.ACTIVE
        return SessionState.CONFIGURED


class SessionTracker:
    """Tracks live input for a typing test and reduces it to a TestResult."""

    def __init__(
        self,
        reference_text: str,
        config: SessionConfig,
        scheduler: Optional[Scheduler] = None,
        on_result: Optional[Callable[[TestResult], None]] = None,
    ):
        """Initialize session tracker.

        Args:
            reference_text: Text the user has to type
            config: Explicit test configuration
            scheduler: Scheduler driving WPM sampling and providing the clock
            on_result: Callback invoked once with the result of each session
        """
        self.config = config
        self.scheduler = scheduler or ThreadingScheduler()
        self.on_result = on_result
        self.session = TypingSession(reference_text=reference_text)
        self.result: Optional[TestResult] = None
        self._sampler: Optional[IntervalHandle] = None
        self._lock = threading.RLock()

    @property
    def state(self) -> SessionState:
        return self.session.state

    @property
    def input_buffer(self) -> str:
        return self.session.input_buffer

    @property
    def reference_text(self) -> str:
        return self.session.reference_text

    @property
    def sampled_wpm(self) -> list[int]:
        return list(self.session.sampled_wpm)

    def elapsed_seconds(self) -> float:
        """Seconds since the first keystroke (end of test once finished)."""
        if self.session.start_time_ms is None:
            return 0.0
        end_ms = self.session.end_time_ms
        if end_ms is None:
            end_ms = self.scheduler.now_ms()
        duration_ms = end_ms - self.session.start_time_ms
        if duration_ms < 0:
            log.warning(f"Negative duration: {duration_ms}ms, clock went backwards")
            return 0.0
        return duration_ms / 1000.0

    def remaining_seconds(self) -> Optional[int]:
        """Whole seconds left in the time budget, None without a budget."""
        if self.config.time_limit_seconds is None:
            return None
        return max(0, self.config.time_limit_seconds - int(self.elapsed_seconds()))

    def correct_chars(self) -> int:
        """Characters of the input buffer matching the reference text."""
        correct, _ = count_chars(self.session.input_buffer, self.session.reference_text)
        return correct

    def current_wpm(self) -> int:
        """WPM of the input so far."""
        return calculate_wpm(self.correct_chars(), self.elapsed_seconds())

    def start(self) -> bool:
        """Start the test clock and the WPM sampler.

        Returns:
            True if the session became active, False if it already was
            active or finished
        """
        with self._lock:
            if self.session.active or self.session.finished:
                log.debug(f"start() ignored in state {self.state.value}")
                return False

            self.session.active = True
            self.session.start_time_ms = self.scheduler.now_ms()
            self._sampler = self.scheduler.call_every(
                self.config.sample_interval_ms,
                lambda session=self.session: self._on_tick(session),
            )
            log.info(
                f"Session started (mode={self.config.mode.value}, "
                f"{len(self.session.reference_text)} reference chars)"
            )
            return True

    def on_input(self, new_buffer: str) -> None:
        """Replace the input buffer with the latest snapshot.

        The first input starts the test. Input after the test finished
        is ignored.

        Args:
            new_buffer: Full text typed so far
        """
        with self._lock:
            if self.session.finished:
                log.debug("Input after finish ignored")
                return

            if not self.session.active:
                self.start()
            elif self._time_is_up():
                # The deadline passed before this keystroke arrived
                self.finish()
                return

            self.session.input_buffer = new_buffer
            self._check_completion()

    def _on_tick(self, session: TypingSession) -> None:
        with self._lock:
            if session is not self.session:
                # Tick of a sampler from an attempt that was reset
                log.debug("Stale sample tick ignored")
                return
            if not session.active or session.finished:
                return
            wpm = self.current_wpm()
            self.session.sampled_wpm.append(wpm)
            log.debug(f"Sample {len(self.session.sampled_wpm)}: {wpm} WPM")
            self._check_completion()

    def _time_is_up(self) -> bool:
        limit = self.config.time_limit_seconds
        return limit is not None and self.elapsed_seconds() >= limit

    def _is_complete(self) -> bool:
        if self._time_is_up():
            return True
        if self.config.mode.is_length_bounded:
            return len(self.session.input_buffer) >= len(self.session.reference_text)
        return False

    def _check_completion(self) -> None:
        if self.session.active and self._is_complete():
            self.finish()

    def _stop_sampler(self) -> None:
        if self._sampler is not None:
            self._sampler.cancel()
            self._sampler = None

    def finish(self) -> Optional[TestResult]:
        """End the test and compute its result.

        Calling finish again returns the same result without side effects.

        Returns:
            TestResult, or None if the test never started
        """
        with self._lock:
            if self.session.finished:
                return self.result
            if not self.session.active:
                log.debug("finish() before start ignored")
                return None

            self._stop_sampler()
            end_ms = self.scheduler.now_ms()
            limit = self.config.time_limit_seconds
            if limit is not None:
                end_ms = min(end_ms, self.session.start_time_ms + limit * 1000)
            self.session.end_time_ms = end_ms
            self.session.active = False
            self.session.finished = True

            self.result = build_result(
                typed=self.session.input_buffer,
                reference=self.session.reference_text,
                elapsed_seconds=self.elapsed_seconds(),
                wpm_history=self.session.sampled_wpm,
                mode=self.config.mode,
            )
            log.info(
                f"Session finished: {self.result.wpm} WPM, "
                f"{self.result.accuracy}% accuracy, "
                f"{self.result.consistency}% consistency"
            )

        if self.on_result:
            try:
                self.on_result(self.result)
            except Exception as e:
                log.error(f"Error in result callback: {e}")

        return self.result

    def reset(self, reference_text: Optional[str] = None) -> None:
        """Return to the configured state, discarding the current attempt.

        Args:
            reference_text: New text to type (keeps the current one if None)
        """
        with self._lock:
            self._stop_sampler()
            text = self.session.reference_text if reference_text is None else reference_text
            self.session = TypingSession(reference_text=text)
            self.result = None
            log.debug("Session reset")


__all__ = ["SessionState", "SessionTracker", "TypingSession"]
