"""Shared fixtures for DayDiary tests."""

import pytest

from daydiary.core.store import EntryStore


@pytest.fixture
def store():
    """Empty store with a fixed clock."""
    return EntryStore(clock=lambda: 1_700_000_000_000)
