"""Persistence for DayDiary."""

from daydiary.db.store import DataStore

__all__ = ["DataStore"]
