"""Tests for SessionTracker."""

import pytest

from engine.models import DEFAULT_TIME_LIMIT_SECONDS, SessionConfig, TestMode
from engine.scheduler import ManualScheduler
from engine.session_tracker import SessionState, SessionTracker

REFERENCE = "the quick brown fox jumps over the lazy dog"


@pytest.fixture
def tracker(scheduler, time_config):
    """Tracker for a 60 second time test."""
    return SessionTracker(REFERENCE, time_config, scheduler=scheduler)


class TestLifecycle:
    """Test state transitions."""

    def test_initial_state(self, tracker):
        assert tracker.state == SessionState.CONFIGURED
        assert tracker.elapsed_seconds() == 0.0
        assert tracker.sampled_wpm == []

    def test_first_input_starts_session(self, tracker, scheduler):
        scheduler.advance(2500)
        tracker.on_input("t")
        assert tracker.state == SessionState.ACTIVE
        assert tracker.session.start_time_ms == 2500
        assert tracker.input_buffer == "t"

    def test_start_twice_keeps_one_sampler(self, tracker, scheduler):
        assert tracker.start() is True
        assert tracker.start() is False
        assert scheduler.active_count == 1

    def test_finish_before_start(self, tracker):
        assert tracker.finish() is None
        assert tracker.state == SessionState.CONFIGURED

    def test_reset_stops_sampler(self, tracker, scheduler):
        tracker.on_input("the")
        scheduler.advance(3000)
        tracker.reset("new text")
        assert scheduler.active_count == 0
        assert tracker.state == SessionState.CONFIGURED
        assert tracker.reference_text == "new text"
        assert tracker.input_buffer == ""
        assert tracker.sampled_wpm == []
        assert tracker.result is None

    def test_reset_keeps_reference_by_default(self, tracker):
        tracker.on_input("t")
        tracker.reset()
        assert tracker.reference_text == REFERENCE

    def test_restart_after_reset(self, tracker, scheduler):
        tracker.on_input("the")
        tracker.reset()
        tracker.on_input("t")
        assert tracker.state == SessionState.ACTIVE
        assert scheduler.active_count == 1


class TestSampling:
    """Test per-interval WPM sampling."""

    def test_one_sample_per_second(self, tracker, scheduler):
        tracker.on_input("the quick ")
        scheduler.advance(3000)
        assert len(tracker.sampled_wpm) == 3

    def test_sample_values(self, tracker, scheduler):
        """Test sampled WPM.

        10 correct characters after 1 second = 2 words / (1/60) min = 120.
        """
        tracker.on_input("the quick ")
        scheduler.advance(1000)
        assert tracker.sampled_wpm == [120]

    def test_no_samples_before_start(self, tracker, scheduler):
        scheduler.advance(5000)
        assert tracker.sampled_wpm == []

    def test_custom_sample_interval(self, scheduler):
        config = SessionConfig(time_limit_seconds=60, sample_interval_ms=500)
        tracker = SessionTracker(REFERENCE, config, scheduler=scheduler)
        tracker.on_input("t")
        scheduler.advance(2000)
        assert len(tracker.sampled_wpm) == 4


class TestTimeLimit:
    """Test time bounded completion."""

    def test_finishes_at_time_limit(self, tracker, scheduler):
        tracker.on_input("the quick brown fox")
        scheduler.advance(60_000)
        assert tracker.state == SessionState.FINISHED
        assert tracker.result is not None
        assert tracker.result.elapsed_seconds == 60.0
        assert len(tracker.result.wpm_history) == 60
        assert scheduler.active_count == 0

    def test_remaining_seconds(self, tracker, scheduler):
        assert tracker.remaining_seconds() == 60
        tracker.on_input("t")
        scheduler.advance(15_500)
        assert tracker.remaining_seconds() == 45

    def test_no_remaining_seconds_without_limit(self, scheduler, custom_config):
        tracker = SessionTracker("hello world", custom_config, scheduler=scheduler)
        assert tracker.remaining_seconds() is None

    def test_late_input_is_dropped(self, scheduler):
        """Input arriving after the deadline finishes the test without being applied.

        The long sample interval keeps the sampler from noticing the deadline first.
        """
        config = SessionConfig(time_limit_seconds=5, sample_interval_ms=60_000)
        tracker = SessionTracker(REFERENCE, config, scheduler=scheduler)
        tracker.on_input("the")
        scheduler.advance(7000)
        tracker.on_input("the quick")

        assert tracker.state == SessionState.FINISHED
        assert tracker.input_buffer == "the"
        assert tracker.result.elapsed_seconds == 5.0

    def test_finish_during_typing(self, tracker, scheduler):
        tracker.on_input("the qu")
        scheduler.advance(30_000)
        result = tracker.finish()
        assert result.elapsed_seconds == 30.0
        assert result.correct_chars == 6


class TestLengthLimit:
    """Test length bounded completion."""

    def test_custom_finishes_at_end_of_text(self, scheduler, custom_config):
        tracker = SessionTracker("hello world", custom_config, scheduler=scheduler)
        tracker.on_input("hello worl")
        assert tracker.state == SessionState.ACTIVE
        tracker.on_input("hello world")
        assert tracker.state == SessionState.FINISHED
        assert tracker.result.accuracy == 100
        assert tracker.result.mode == TestMode.CUSTOM

    def test_words_mode_finishes_at_end_of_reference(self, scheduler):
        """Typing word_count words is not enough; the whole reference must be typed."""
        config = SessionConfig(mode=TestMode.WORDS, word_count=2)
        tracker = SessionTracker("one two three four", config, scheduler=scheduler)
        tracker.on_input("one two")
        assert tracker.state == SessionState.ACTIVE
        tracker.on_input("one two three fou")
        assert tracker.state == SessionState.ACTIVE
        tracker.on_input("one two three four")
        assert tracker.state == SessionState.FINISHED

    @pytest.mark.parametrize("mode", [TestMode.WORDS, TestMode.QUOTE, TestMode.CUSTOM])
    def test_overlong_input_finishes(self, scheduler, mode):
        tracker = SessionTracker("ab cd", SessionConfig(mode=mode), scheduler=scheduler)
        tracker.on_input("ab cde")
        assert tracker.state == SessionState.FINISHED
        assert tracker.result.incorrect_chars == 1

    def test_length_finish_with_errors(self, scheduler, custom_config):
        """Test that wrong characters still count toward the length."""
        tracker = SessionTracker("hello world", custom_config, scheduler=scheduler)
        tracker.on_input("hellx worle")
        assert tracker.state == SessionState.FINISHED
        assert tracker.result.incorrect_chars == 2
        assert tracker.result.correct_chars == 9

    def test_time_mode_ignores_length(self, tracker, scheduler):
        tracker.on_input(REFERENCE)
        assert tracker.state == SessionState.ACTIVE


class TestFinish:
    """Test result hand-off."""

    def test_finish_is_idempotent(self, scheduler, custom_config):
        results = []
        tracker = SessionTracker(
            "hello world", custom_config, scheduler=scheduler, on_result=results.append
        )
        tracker.on_input("hello world")
        first = tracker.result
        assert tracker.finish() is first
        assert tracker.finish() is first
        assert results == [first]

    def test_input_after_finish_ignored(self, scheduler, custom_config):
        tracker = SessionTracker("hello world", custom_config, scheduler=scheduler)
        tracker.on_input("hello world")
        tracker.on_input("hello world and more")
        assert tracker.input_buffer == "hello world"
        assert tracker.state == SessionState.FINISHED

    def test_callback_error_does_not_propagate(self, scheduler, custom_config):
        def failing_callback(result):
            raise RuntimeError("storage unavailable")

        tracker = SessionTracker(
            "hello world", custom_config, scheduler=scheduler, on_result=failing_callback
        )
        tracker.on_input("hello world")
        assert tracker.state == SessionState.FINISHED
        assert tracker.result is not None

    def test_result_totals(self, tracker, scheduler):
        tracker.on_input("the quack")
        scheduler.advance(10_000)
        result = tracker.finish()
        assert result.total_chars == 9
        assert result.correct_chars + result.incorrect_chars == result.total_chars
        assert len(result.wpm_history) == 10

    def test_no_samples_after_finish(self, tracker, scheduler):
        tracker.on_input("the")
        scheduler.advance(2000)
        tracker.finish()
        scheduler.advance(5000)
        assert len(tracker.result.wpm_history) == 2
        assert scheduler.active_count == 0


class RecordingScheduler(ManualScheduler):
    """ManualScheduler that keeps every scheduled callback."""

    def __init__(self):
        super().__init__()
        self.callbacks = []

    def call_every(self, interval_ms, callback):
        self.callbacks.append(callback)
        return super().call_every(interval_ms, callback)


class TestStaleSampler:
    """Test that ticks of a reset attempt never reach the new one."""

    def test_old_tick_after_reset_adds_no_sample(self, time_config):
        scheduler = RecordingScheduler()
        tracker = SessionTracker(REFERENCE, time_config, scheduler=scheduler)
        tracker.on_input("the")
        tracker.reset()
        tracker.on_input("t")

        old_tick, new_tick = scheduler.callbacks
        old_tick()
        assert tracker.sampled_wpm == []

        new_tick()
        assert len(tracker.sampled_wpm) == 1

    def test_old_tick_after_finish_adds_no_sample(self, time_config):
        scheduler = RecordingScheduler()
        tracker = SessionTracker(REFERENCE, time_config, scheduler=scheduler)
        tracker.on_input("the")
        scheduler.advance(2000)
        tracker.finish()

        scheduler.callbacks[0]()
        assert len(tracker.result.wpm_history) == 2
        assert len(tracker.sampled_wpm) == 2


class TestSessionConfigDefaults:
    """Test the time limit default for each mode."""

    @pytest.mark.parametrize(
        "mode", [TestMode.TIME, TestMode.ZEN, TestMode.PUNCTUATION, TestMode.NUMBERS]
    )
    def test_time_bounded_modes_default_to_sixty_seconds(self, mode):
        assert SessionConfig(mode=mode).time_limit_seconds == DEFAULT_TIME_LIMIT_SECONDS

    @pytest.mark.parametrize("mode", [TestMode.WORDS, TestMode.QUOTE, TestMode.CUSTOM])
    def test_length_bounded_modes_default_to_no_limit(self, mode):
        assert SessionConfig(mode=mode).time_limit_seconds is None

    def test_explicit_limit_kept(self):
        assert SessionConfig(mode=TestMode.WORDS, time_limit_seconds=30).time_limit_seconds == 30
        assert SessionConfig(mode=TestMode.TIME, time_limit_seconds=15).time_limit_seconds == 15

    def test_length_bounded_tracker_never_times_out(self, scheduler):
        tracker = SessionTracker("hello world", SessionConfig(mode=TestMode.QUOTE), scheduler=scheduler)
        tracker.on_input("hello")
        scheduler.advance(600_000)
        assert tracker.state == SessionState.ACTIVE
        assert tracker.remaining_seconds() is None
