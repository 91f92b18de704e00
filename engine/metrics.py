"""WPM, accuracy and consistency calculation utilities."""

import math
from typing import Sequence

import numpy as np

from engine.models import TestMode, TestResult

CHARS_PER_WORD = 5
MIN_ELAPSED_SECONDS = 1.0
MIN_RAW_ACCURACY = 50
OUTLIER_FENCE = 1.5


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def calculate_wpm(correct_chars: int, elapsed_seconds: float) -> int:
    """Calculate words per minute.

    100 correct characters in 30 seconds:
    - words = 100 / 5 = 20 words
    - minutes = 30 / 60 = 0.5 minutes
    - WPM = 20 / 0.5 = 40 WPM

    Args:
        correct_chars: Number of correctly typed characters
        elapsed_seconds: Elapsed time in seconds, floored to 1 second

    Returns:
        Rounded WPM
    """
    words = correct_chars / CHARS_PER_WORD
    minutes = max(MIN_ELAPSED_SECONDS, elapsed_seconds) / 60.0
    return round_half_up(words / minutes)


def calculate_accuracy(correct_chars: int, total_chars: int) -> int:
    """Calculate accuracy percentage.

    Args:
        correct_chars: Correctly typed characters
        total_chars: All typed characters

    Returns:
        Rounded percentage, 100 when nothing was typed
    """
    if total_chars <= 0:
        return 100
    return round_half_up(correct_chars / total_chars * 100)


def calculate_consistency(wpm_samples: Sequence[float]) -> int:
    """Calculate consistency of sampled WPM values (0-100).

    Samples outside the 1.5 * IQR fence are dropped unless that would
    leave half of the samples or fewer. The score is 100 minus the
    coefficient of variation in percent.

    Args:
        wpm_samples: WPM values sampled during the test

    Returns:
        Rounded consistency, 100 for fewer than 2 samples
    """
    if len(wpm_samples) < 2:
        return 100

    ordered = sorted(wpm_samples)
    q1 = ordered[math.floor(len(ordered) * 0.25)]
    q3 = ordered[math.floor(len(ordered) * 0.75)]
    iqr = q3 - q1
    low = q1 - OUTLIER_FENCE * iqr
    high = q3 + OUTLIER_FENCE * iqr
    filtered = [value for value in ordered if low <= value <= high]

    data = np.asarray(
        filtered if len(filtered) > len(wpm_samples) / 2 else wpm_samples,
        dtype=float,
    )
    mean = max(1.0, float(data.mean()))
    std_dev = float(data.std())

    return round_half_up(max(0.0, 100 - min(100.0, std_dev / mean * 100)))


def calculate_raw_wpm(wpm: float, accuracy: float) -> float:
    """Approximate raw (error inclusive) WPM from net WPM and accuracy.

    Raw keystrokes are not tracked, so the net figure is scaled by the
    inverse accuracy, capped at a factor of 2.
    """
    return wpm * (100 / max(accuracy, MIN_RAW_ACCURACY))


def count_chars(typed: str, reference: str) -> tuple[int, int]:
    """Count correct and incorrect characters of typed text.

    Characters typed past the end of the reference are incorrect.

    Returns:
        Tuple of (correct_chars, incorrect_chars)
    """
    correct = sum(1 for actual, expected in zip(typed, reference) if actual == expected)
    return correct, len(typed) - correct


def find_error_positions(typed: str, reference: str) -> list[int]:
    """Find 5-character word units containing mistakes.

    Returns:
        Ascending, de-duplicated unit indices
    """
    positions: list[int] = []
    for index, actual in enumerate(typed):
        if index >= len(reference) or actual != reference[index]:
            unit = index // CHARS_PER_WORD
            if not positions or positions[-1] != unit:
                positions.append(unit)
    return positions


def build_result(
    typed: str,
    reference: str,
    elapsed_seconds: float,
    wpm_history: Sequence[int],
    mode: TestMode = TestMode.TIME,
) -> TestResult:
    """Reduce a finished session into its final statistics.

    Args:
        typed: Final input buffer
        reference: Text the user was asked to type
        elapsed_seconds: Time from first keystroke to finish
        wpm_history: WPM samples taken during the session
        mode: Test mode the session ran in

    Returns:
        TestResult for the session
    """
    correct, incorrect = count_chars(typed, reference)
    elapsed = max(MIN_ELAPSED_SECONDS, elapsed_seconds)
    wpm = calculate_wpm(correct, elapsed)
    accuracy = calculate_accuracy(correct, len(typed))

    return TestResult(
        mode=mode,
        wpm=wpm,
        raw_wpm=calculate_raw_wpm(wpm, accuracy),
        accuracy=accuracy,
        consistency=calculate_consistency(wpm_history),
        correct_chars=correct,
        incorrect_chars=incorrect,
        total_chars=len(typed),
        elapsed_seconds=round(elapsed, 3),
        error_positions=find_error_positions(typed, reference),
        wpm_history=list(wpm_history),
    )


__all__ = [
    "build_result",
    "calculate_accuracy",
    "calculate_consistency",
    "calculate_raw_wpm",
    "calculate_wpm",
    "count_chars",
    "find_error_positions",
    "round_half_up",
]
