"""SQLite data store for DayDiary.

Persists store snapshots written through the EntryStore ``on_change``
hook and loads them back at boot.
"""

import logging
import sqlite3
from pathlib import Path
from typing import Iterable, Optional

import pydantic

from daydiary.errors import ValidationError
from daydiary.models import DiaryEntry

logger = logging.getLogger(__name__)

NEXT_ID_KEY = "next_entry_id"


class DataStore:
    """SQLite-based snapshot store for diary entries."""

    def __init__(self, db_path: Path):
        """Initialize the data store.

        Args:
            db_path: Path to the SQLite database file.
        """
        self.db_path = Path(db_path)
        self._ensure_db_dir()
        self._init_schema()

    def _ensure_db_dir(self) -> None:
        """Ensure the database directory exists."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

    def _get_connection(self) -> sqlite3.Connection:
        """Get a database connection."""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _init_schema(self) -> None:
        """Initialize database schema on first run."""
        conn = self._get_connection()
        try:
            cursor = conn.cursor()

            # position keeps the store's insertion order
            cursor.execute("""
                CREATE TABLE IF NOT EXISTS entries (
                    id INTEGER PRIMARY KEY,
                    position INTEGER NOT NULL,
                    content TEXT NOT NULL DEFAULT '',
                    emotion INTEGER NOT NULL,
                    created_date INTEGER NOT NULL
                )
            """)

            cursor.execute("""
                CREATE TABLE IF NOT EXISTS meta (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                )
            """)

            conn.commit()
        finally:
            conn.close()

    # ==================== Entries ====================

    def load_entries(self) -> list[DiaryEntry]:
        """Load all persisted entries in insertion order.

        Returns:
            List of entries.

        Raises:
            ValidationError: If a stored row is not a valid entry.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                SELECT id, content, emotion, created_date
                FROM entries
                ORDER BY position
                """
            )
            rows = cursor.fetchall()
        finally:
            conn.close()

        try:
            return [
                DiaryEntry(
                    id=row["id"],
                    content=row["content"],
                    emotion=row["emotion"],
                    created_date=row["created_date"],
                )
                for row in rows
            ]
        except pydantic.ValidationError as e:
            raise ValidationError(f"Corrupt diary entry in {self.db_path}: {e}") from e

    def save_snapshot(self, entries: Iterable[DiaryEntry], next_id: int) -> None:
        """Replace the persisted entries with a snapshot.

        Entries and the id counter are written in one transaction.

        Args:
            entries: Full store snapshot in insertion order.
            next_id: Id the store will assign next.
        """
        rows = [
            (entry.id, position, entry.content, int(entry.emotion), entry.created_date)
            for position, entry in enumerate(entries)
        ]
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM entries")
            cursor.executemany(
                """
                INSERT INTO entries (id, position, content, emotion, created_date)
                VALUES (?, ?, ?, ?, ?)
                """,
                rows,
            )
            cursor.execute(
                """
                INSERT OR REPLACE INTO meta (key, value)
                VALUES (?, ?)
                """,
                (NEXT_ID_KEY, str(next_id)),
            )
            conn.commit()
        except sqlite3.Error:
            conn.rollback()
            raise
        finally:
            conn.close()
        logger.debug("Saved %d entries to %s", len(rows), self.db_path)

    def get_next_id(self) -> Optional[int]:
        """Get the persisted id counter.

        Returns:
            The stored counter, or None if nothing was saved yet.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("SELECT value FROM meta WHERE key = ?", (NEXT_ID_KEY,))
            row = cursor.fetchone()
            if row:
                return int(row["value"])
            return None
        finally:
            conn.close()

