"""Tests for SQLite persistence and session wiring.

**Feature: persistence**
"""

import sqlite3
import tempfile
from pathlib import Path

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from daydiary.config import DiaryConfig
from daydiary.db.store import DataStore
from daydiary.errors import ValidationError
from daydiary.models import DiaryEntry
from daydiary.session import open_store


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        db_path = Path(tmpdir) / "test.db"
        yield DataStore(db_path)


class TestDatabaseSchema:
    """A fresh database starts empty."""

    def test_fresh_database_is_empty(self, temp_db: DataStore):
        assert temp_db.load_entries() == []
        assert temp_db.get_next_id() is None

    def test_creates_parent_directory(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            db_path = Path(tmpdir) / "nested" / "dir" / "diary.db"
            DataStore(db_path)
            assert db_path.exists()


class TestSnapshotPersistence:
    """Saved snapshots load back unchanged."""

    def test_save_and_load_preserves_order(self, temp_db: DataStore):
        entries = [
            DiaryEntry(id=5, content="fifth", emotion=5, created_date=50),
            DiaryEntry(id=2, content="second", emotion=2, created_date=20),
        ]
        temp_db.save_snapshot(entries, next_id=6)

        assert temp_db.load_entries() == entries
        assert temp_db.get_next_id() == 6

    def test_save_replaces_previous_snapshot(self, temp_db: DataStore):
        temp_db.save_snapshot([DiaryEntry(id=1, content="a", emotion=1, created_date=1)], next_id=2)
        temp_db.save_snapshot([], next_id=2)
        assert temp_db.load_entries() == []
        assert temp_db.get_next_id() == 2

    @given(
        contents=st.lists(
            st.text(alphabet=st.characters(blacklist_categories=("Cs", "Cc")), max_size=100),
            max_size=15,
        ),
        emotion=st.integers(min_value=1, max_value=5),
    )
    @settings(max_examples=30)
    def test_round_trip_any_content(self, contents: list[str], emotion: int):
        """
        *For any* entry texts, a saved snapshot loads back equal.
        """
        with tempfile.TemporaryDirectory() as tmpdir:
            store = DataStore(Path(tmpdir) / "test.db")
            entries = [
                DiaryEntry(id=index + 1, content=content, emotion=emotion, created_date=index * 1000)
                for index, content in enumerate(contents)
            ]
            store.save_snapshot(entries, next_id=len(entries) + 1)
            assert store.load_entries() == entries


class TestCorruptRows:
    """Invalid stored rows surface as diary validation errors."""

    @pytest.mark.parametrize("row", [
        (0, 0, "zero id", 3, 100),
        (1, 0, "bad emotion", 9, 100),
    ])
    def test_corrupt_row_raises_validation_error(self, temp_db: DataStore, row: tuple):
        conn = sqlite3.connect(temp_db.db_path)
        try:
            conn.execute(
                "INSERT INTO entries (id, position, content, emotion, created_date) VALUES (?, ?, ?, ?, ?)",
                row,
            )
            conn.commit()
        finally:
            conn.close()

        with pytest.raises(ValidationError):
            temp_db.load_entries()

    def test_open_store_reports_corrupt_database(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            config = DiaryConfig(db_path=Path(tmpdir) / "diary.db")
            DataStore(config.database_path()).save_snapshot([], next_id=1)
            conn = sqlite3.connect(config.database_path())
            try:
                conn.execute(
                    "INSERT INTO entries (id, position, content, emotion, created_date) VALUES (0, 0, '', 1, 1)"
                )
                conn.commit()
            finally:
                conn.close()

            with pytest.raises(ValidationError):
                open_store(config)


class TestSession:
    """EntryStore sessions persist through the change hook."""

    def test_mutations_survive_reopen(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            config = DiaryConfig(db_path=Path(tmpdir) / "diary.db")

            store = open_store(config)
            first = store.create("first", 1, created_date=100)
            second = store.create("second", 4, created_date=200)
            store.update(first.id, {"content": "first, edited"})

            reopened = open_store(config)
            assert [entry.content for entry in reopened.list()] == ["first, edited", "second"]
            assert reopened.get_by_id(second.id) == second

    def test_ids_not_reused_across_sessions(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            config = DiaryConfig(db_path=Path(tmpdir) / "diary.db")

            store = open_store(config)
            store.create("a", 1)
            last = store.create("b", 1)
            store.delete(last.id)

            reopened = open_store(config)
            assert reopened.create("c", 1).id == last.id + 1
