"""Shared test fixtures for CheetahType tests."""

import random
import tempfile
from pathlib import Path

import pytest

from engine.models import SessionConfig, TestMode
from engine.scheduler import ManualScheduler


@pytest.fixture
def temp_db_path():
    """Create a temporary database path and clean up afterwards."""
    with tempfile.TemporaryDirectory() as tmpdir:
        db_path = Path(tmpdir) / "test.db"
        yield db_path


@pytest.fixture
def scheduler():
    """Virtual time scheduler starting at t=0."""
    return ManualScheduler(start_ms=0)


@pytest.fixture
def rng():
    """Seeded random generator for reproducible text."""
    return random.Random(42)


@pytest.fixture
def time_config():
    """60 second time test."""
    return SessionConfig(mode=TestMode.TIME, time_limit_seconds=60)


@pytest.fixture
def custom_config():
    """Custom text test without time limit."""
    return SessionConfig(
        mode=TestMode.CUSTOM, time_limit_seconds=None, custom_text="hello world"
    )
