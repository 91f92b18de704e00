"""Configuration management for CheetahType."""

import logging
import sqlite3
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from engine.models import DEFAULT_TIME_LIMIT_SECONDS, SessionConfig, TestMode, coerce_mode

log = logging.getLogger("cheetahtype.config")


class AppSettings(BaseModel):
    """Application settings with validation."""

    # Test defaults
    default_mode: str = Field(
        default=TestMode.TIME.value, description="Test mode used when none is given"
    )
    time_limit_seconds: int = Field(
        default=DEFAULT_TIME_LIMIT_SECONDS,
        gt=0,
        description="Time budget for time bounded tests (sec)",
    )
    word_count: int = Field(
        default=25, gt=0, description="Words to type in words mode"
    )
    custom_text: str = Field(
        default="", description="Text for custom mode (empty = fallback sentence)"
    )

    # Sampling
    sample_interval_ms: int = Field(
        default=1000, ge=100, description="Interval between WPM samples (ms)"
    )

    # History
    history_limit: int = Field(
        default=10, ge=1, le=1000, description="Results shown by the history command"
    )

    model_config = ConfigDict(extra="ignore")

    @field_validator("default_mode")
    @classmethod
    def validate_mode(cls, v):
        """Only known test modes can be stored."""
        try:
            return TestMode(v).value
        except ValueError:
            raise ValueError(
                f"default_mode must be one of {[m.value for m in TestMode]}, got {v!r}"
            )


def validate_setting(key: str, value: Any) -> Any:
    """Validate one setting through AppSettings.

    Stored values are strings; pydantic converts them to the field type.

    Raises:
        KeyError: If key is not a known setting
        ValueError: If value fails validation
    """
    if key not in AppSettings.model_fields:
        raise KeyError(f"Unknown setting: {key}")
    try:
        return getattr(AppSettings(**{key: value}), key)
    except ValidationError as e:
        raise ValueError(f"Invalid value for {key}: {e}")


class Config:
    """Settings stored in a SQLite key/value table, validated by AppSettings."""

    def __init__(self, db_path: Path):
        """Initialize config with database connection.

        Args:
            db_path: Path to SQLite database
        """
        self.db_path = db_path
        self._init_settings_table()

    def _get_connection(self) -> sqlite3.Connection:
        return sqlite3.connect(self.db_path)

    def _init_settings_table(self) -> None:
        """Create the settings table and insert missing defaults."""
        defaults = AppSettings().model_dump()
        with self._get_connection() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS settings (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                )
            """)
            conn.executemany(
                "INSERT OR IGNORE INTO settings (key, value) VALUES (?, ?)",
                [(key, str(value)) for key, value in defaults.items()],
            )
            conn.commit()

    def get(self, key: str) -> Any:
        """Get a setting, falling back to its default if the stored value is invalid.

        Raises:
            KeyError: If key is not a known setting
        """
        if key not in AppSettings.model_fields:
            raise KeyError(f"Unknown setting: {key}")
        default = AppSettings.model_fields[key].default

        with self._get_connection() as conn:
            row = conn.execute("SELECT value FROM settings WHERE key = ?", (key,)).fetchone()

        if row is None:
            return default
        try:
            return validate_setting(key, row[0])
        except ValueError:
            log.warning(f"Stored value for {key} is invalid, using default")
            return default

    def set(self, key: str, value: Any) -> None:
        """Validate and store a setting.

        Raises:
            KeyError: If key is not a known setting
            ValueError: If value fails validation
        """
        value = validate_setting(key, value)
        with self._get_connection() as conn:
            conn.execute(
                "INSERT OR REPLACE INTO settings (key, value) VALUES (?, ?)",
                (key, str(value)),
            )
            conn.commit()
        log.debug(f"Setting {key} updated")

    def get_all(self) -> dict[str, Any]:
        """Get every known setting."""
        return {key: self.get(key) for key in AppSettings.model_fields}

    def session_config(
        self,
        mode: Optional[str] = None,
        time_limit_seconds: Optional[int] = None,
        word_count: Optional[int] = None,
        custom_text: Optional[str] = None,
    ) -> SessionConfig:
        """Build the explicit configuration for a test.

        Arguments override stored settings. Length bounded modes run
        without a time limit unless one is given.

        Returns:
            SessionConfig for the engine
        """
        test_mode = coerce_mode(mode or self.get("default_mode"))
        if time_limit_seconds is None and not test_mode.is_length_bounded:
            time_limit_seconds = self.get("time_limit_seconds")

        return SessionConfig(
            mode=test_mode,
            time_limit_seconds=time_limit_seconds,
            word_count=word_count or self.get("word_count"),
            custom_text=custom_text if custom_text is not None else self.get("custom_text"),
            sample_interval_ms=self.get("sample_interval_ms"),
        )
