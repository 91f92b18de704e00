"""Pydantic models for CheetahType engine data structures."""

import logging
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

log = logging.getLogger("cheetahtype.models")

MIN_GENERATED_WORDS = 5000
GENERATION_MULTIPLIER = 10
DEFAULT_TIME_LIMIT_SECONDS = 60


class TestMode(str, Enum):
    """Typing test mode."""

    __test__ = False  # keep pytest from collecting this as a test class

    TIME = "time"
    WORDS = "words"
    QUOTE = "quote"
    ZEN = "zen"
    CUSTOM = "custom"
    PUNCTUATION = "punctuation"
    NUMBERS = "numbers"

    @property
    def is_length_bounded(self) -> bool:
        """True when the test ends once the target text is fully typed."""
        return self in (TestMode.WORDS, TestMode.QUOTE, TestMode.CUSTOM)


def coerce_mode(value: Any) -> TestMode:
    """Map a raw mode value to a TestMode, falling back to TIME."""
    if isinstance(value, TestMode):
        return value
    try:
        return TestMode(str(value).strip().lower())
    except ValueError:
        log.warning(f"Unknown test mode {value!r}, using '{TestMode.TIME.value}'")
        return TestMode.TIME


class GenerationRequest(BaseModel):
    """Request for practice text."""

    mode: TestMode = Field(default=TestMode.TIME, description="Test mode")
    target_count: int = Field(
        default=1000, gt=0, description="Requested word count for the test"
    )
    custom_text: str | None = Field(
        default=None, description="Caller supplied text for custom mode"
    )

    model_config = ConfigDict(extra="ignore")

    @field_validator("mode", mode="before")
    @classmethod
    def fallback_mode(cls, v):
        """Unknown or empty modes use default generation."""
        return coerce_mode(v)

    @property
    def minimum_word_count(self) -> int:
        """Over-generation floor so the test never runs out of text."""
        return max(MIN_GENERATED_WORDS, GENERATION_MULTIPLIER * self.target_count)


class SessionConfig(BaseModel):
    """Explicit configuration for one typing test."""

    mode: TestMode = Field(default=TestMode.TIME, description="Test mode")
    time_limit_seconds: int | None = Field(
        default=None,
        gt=0,
        description="Time budget in seconds (None: 60 for time bounded modes, no limit otherwise)",
    )
    word_count: int = Field(
        default=25, gt=0, description="Words to type in words mode"
    )
    custom_text: str | None = Field(
        default=None, description="Text for custom mode"
    )
    sample_interval_ms: int = Field(
        default=1000, gt=0, description="Interval between WPM samples (ms)"
    )

    model_config = ConfigDict(extra="ignore")

    @field_validator("mode", mode="before")
    @classmethod
    def fallback_mode(cls, v):
        """Unknown or empty modes use default generation."""
        return coerce_mode(v)

    @model_validator(mode="after")
    def default_time_limit(self):
        """Time bounded modes always run with a time budget."""
        if not self.mode.is_length_bounded and self.time_limit_seconds is None:
            self.time_limit_seconds = DEFAULT_TIME_LIMIT_SECONDS
        return self

    def generation_request(self) -> GenerationRequest:
        """Build the generation request for this configuration."""
        target = self.word_count if self.mode == TestMode.WORDS else 1000
        return GenerationRequest(
            mode=self.mode, target_count=target, custom_text=self.custom_text
        )


class WordEntry(BaseModel):
    """A word with its derived attributes."""

    word: str = Field(..., description="The word")
    length: int = Field(..., ge=0, description="Number of characters")
    flow_score: int = Field(..., ge=0, description="Typing ergonomics score")

    model_config = ConfigDict(frozen=True)


class TestResult(BaseModel):
    """Final statistics of a finished typing test."""

    __test__ = False

    mode: TestMode = Field(default=TestMode.TIME, description="Test mode")
    wpm: int = Field(..., ge=0, description="Net words per minute")
    raw_wpm: float = Field(..., ge=0, description="Approximated raw WPM")
    accuracy: int = Field(..., ge=0, le=100, description="Accuracy percentage")
    consistency: int = Field(..., ge=0, le=100, description="Consistency percentage")
    correct_chars: int = Field(..., ge=0, description="Correctly typed characters")
    incorrect_chars: int = Field(..., ge=0, description="Mistyped characters")
    total_chars: int = Field(..., ge=0, description="Typed characters")
    elapsed_seconds: float = Field(..., gt=0, description="Test duration in seconds")
    error_positions: list[int] = Field(
        default_factory=list, description="5-character word units containing errors"
    )
    wpm_history: list[int] = Field(
        default_factory=list, description="WPM sampled once per interval"
    )

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def check_char_totals(self):
        """Correct and incorrect characters must add up to the total."""
        if self.correct_chars + self.incorrect_chars != self.total_chars:
            raise ValueError(
                f"correct_chars ({self.correct_chars}) + incorrect_chars "
                f"({self.incorrect_chars}) != total_chars ({self.total_chars})"
            )
        return self

    def to_record(self) -> dict[str, Any]:
        """Flatten into the row handed to the persistence collaborator."""
        return {
            "test_mode": self.mode.value,
            "wpm": self.wpm,
            "raw_wpm": self.raw_wpm,
            "accuracy": self.accuracy,
            "consistency": self.consistency,
            "correct_characters": self.correct_chars,
            "incorrect_characters": self.incorrect_chars,
            "total_characters": self.total_chars,
            "actual_duration": self.elapsed_seconds,
            "error_positions": list(self.error_positions),
            "wpm_history": list(self.wpm_history),
        }


__all__ = [
    "DEFAULT_TIME_LIMIT_SECONDS",
    "GENERATION_MULTIPLIER",
    "GenerationRequest",
    "MIN_GENERATED_WORDS",
    "SessionConfig",
    "TestMode",
    "TestResult",
    "WordEntry",
    "coerce_mode",
]
