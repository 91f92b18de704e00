"""Formatting helpers for displaying test progress and results."""

from datetime import datetime

from engine.models import TestResult


def format_time(seconds: int) -> str:
    """Format seconds as m:ss (75 -> '1:15')."""
    seconds = max(0, int(seconds))
    return f"{seconds // 60}:{seconds % 60:02d}"


def format_result(result: TestResult) -> str:
    """One line summary of a test result."""
    return (
        f"{result.wpm} wpm (raw {result.raw_wpm:.0f}) | "
        f"{result.accuracy}% acc | {result.consistency}% consistency | "
        f"{result.correct_chars}/{result.incorrect_chars} chars | "
        f"{format_time(round(result.elapsed_seconds))}"
    )


def format_timestamp(timestamp_ms: int) -> str:
    """Format a millisecond timestamp as local 'YYYY-MM-DD HH:MM'."""
    return datetime.fromtimestamp(timestamp_ms / 1000).strftime("%Y-%m-%d %H:%M")
