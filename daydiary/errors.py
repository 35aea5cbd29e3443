"""Exceptions raised by the diary core."""

from typing import Optional


class DiaryError(Exception):
    """Base exception for diary operations."""
    pass


class ValidationError(DiaryError):
    """Raised when an entry field (usually the emotion code) is invalid.

    The store is left unchanged when this is raised.
    """
    pass


class NotFoundError(DiaryError):
    """Raised when no entry exists with the requested id."""

    def __init__(self, entry_id: int, message: Optional[str] = None):
        self.entry_id = entry_id
        super().__init__(message or f"Diary entry {entry_id} not found")
