"""Result storage for CheetahType - SQLite database operations."""

import json
import logging
import sqlite3
import time
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from engine.models import TestMode, TestResult

log = logging.getLogger("cheetahtype.result_store")


class StoredResult(BaseModel):
    """A test result row read back from the database."""

    id: int = Field(..., description="Row id")
    timestamp_ms: int = Field(..., description="When the test was saved (ms)")
    result: TestResult = Field(..., description="The stored result")

    model_config = ConfigDict(extra="ignore")


class AverageStats(BaseModel):
    """Averages over stored results."""

    test_count: int = Field(default=0, description="Number of results")
    avg_wpm: float = Field(default=0.0, description="Average WPM")
    avg_accuracy: float = Field(default=0.0, description="Average accuracy")
    avg_consistency: float = Field(default=0.0, description="Average consistency")

    model_config = ConfigDict(extra="ignore")


class ResultStore:
    """Persists finished test results in a SQLite database."""

    def __init__(self, db_path: Path):
        """Initialize storage with database at given path.

        Args:
            db_path: Path to SQLite database file
        """
        self.db_path = db_path
        self._init_database()

    def _get_connection(self) -> sqlite3.Connection:
        return sqlite3.connect(self.db_path)

    def _init_database(self) -> None:
        """Create the results table if it doesn't exist."""
        with self._get_connection() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS test_results (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    timestamp_ms INTEGER NOT NULL,
                    test_mode TEXT NOT NULL,
                    wpm INTEGER NOT NULL,
                    raw_wpm REAL NOT NULL,
                    accuracy INTEGER NOT NULL,
                    consistency INTEGER NOT NULL,
                    correct_characters INTEGER NOT NULL,
                    incorrect_characters INTEGER NOT NULL,
                    total_characters INTEGER NOT NULL,
                    actual_duration REAL NOT NULL,
                    error_positions TEXT NOT NULL DEFAULT '[]',
                    wpm_history TEXT NOT NULL DEFAULT '[]'
                )
            """)
            conn.execute(
                "CREATE INDEX IF NOT EXISTS idx_test_results_timestamp "
                "ON test_results(timestamp_ms)"
            )
            conn.commit()

    def save_result(self, result: TestResult, timestamp_ms: Optional[int] = None) -> int:
        """Store a finished test result.

        Args:
            result: Result to store
            timestamp_ms: Save time (now if None)

        Returns:
            Id of the new row
        """
        if timestamp_ms is None:
            timestamp_ms = int(time.time() * 1000)

        record = result.to_record()
        with self._get_connection() as conn:
            cursor = conn.execute(
                """
                INSERT INTO test_results (
                    timestamp_ms, test_mode, wpm, raw_wpm, accuracy, consistency,
                    correct_characters, incorrect_characters, total_characters,
                    actual_duration, error_positions, wpm_history
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
                (
                    timestamp_ms,
                    record["test_mode"],
                    record["wpm"],
                    record["raw_wpm"],
                    record["accuracy"],
                    record["consistency"],
                    record["correct_characters"],
                    record["incorrect_characters"],
                    record["total_characters"],
                    record["actual_duration"],
                    json.dumps(record["error_positions"]),
                    json.dumps(record["wpm_history"]),
                ),
            )
            conn.commit()
            row_id = cursor.lastrowid

        log.info(f"Stored result {row_id}: {result.wpm} WPM ({record['test_mode']})")
        return row_id

    def get_recent_results(self, limit: int = 10) -> list[StoredResult]:
        """Get the most recent results, newest first.

        Args:
            limit: Maximum number of results

        Raises:
            ValueError: If limit is not positive
        """
        if limit <= 0:
            raise ValueError("limit must be positive")

        with self._get_connection() as conn:
            cursor = conn.execute(
                """
                SELECT id, timestamp_ms, test_mode, wpm, raw_wpm, accuracy,
                       consistency, correct_characters, incorrect_characters,
                       total_characters, actual_duration, error_positions,
                       wpm_history
                FROM test_results
                ORDER BY timestamp_ms DESC, id DESC
                LIMIT ?
            """,
                (limit,),
            )
            rows = cursor.fetchall()

        return [self._row_to_stored(row) for row in rows]

    def _row_to_stored(self, row: tuple) -> StoredResult:
        result = TestResult(
            mode=TestMode(row[2]),
            wpm=row[3],
            raw_wpm=row[4],
            accuracy=row[5],
            consistency=row[6],
            correct_chars=row[7],
            incorrect_chars=row[8],
            total_chars=row[9],
            elapsed_seconds=row[10],
            error_positions=json.loads(row[11]),
            wpm_history=json.loads(row[12]),
        )
        return StoredResult(id=row[0], timestamp_ms=row[1], result=result)

    def get_best_wpm(self, mode: Optional[TestMode] = None) -> Optional[int]:
        """Get the highest stored WPM, optionally for one mode.

        Returns:
            Best WPM or None if there are no results
        """
        query = "SELECT MAX(wpm) FROM test_results"
        params: tuple = ()
        if mode is not None:
            query += " WHERE test_mode = ?"
            params = (TestMode(mode).value,)

        with self._get_connection() as conn:
            row = conn.execute(query, params).fetchone()
        return row[0] if row else None

    def get_average_stats(self, mode: Optional[TestMode] = None) -> AverageStats:
        """Get average WPM, accuracy and consistency over stored results."""
        query = (
            "SELECT COUNT(*), AVG(wpm), AVG(accuracy), AVG(consistency) "
            "FROM test_results"
        )
        params: tuple = ()
        if mode is not None:
            query += " WHERE test_mode = ?"
            params = (TestMode(mode).value,)

        with self._get_connection() as conn:
            count, avg_wpm, avg_accuracy, avg_consistency = conn.execute(
                query, params
            ).fetchone()

        if not count:
            return AverageStats()
        return AverageStats(
            test_count=count,
            avg_wpm=round(avg_wpm, 2),
            avg_accuracy=round(avg_accuracy, 2),
            avg_consistency=round(avg_consistency, 2),
        )


__all__ = ["AverageStats", "ResultStore", "StoredResult"]
