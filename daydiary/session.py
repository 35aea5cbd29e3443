"""Wiring between the in-memory store and SQLite persistence."""

from typing import Optional

from daydiary.config import DiaryConfig, load_config
from daydiary.core.store import EntryStore, Snapshot
from daydiary.db.store import DataStore


def open_store(config: Optional[DiaryConfig] = None) -> EntryStore:
    """Open an EntryStore backed by the configured SQLite database.

    Entries are loaded at boot and the whole snapshot is saved after
    every successful mutation.

    Args:
        config: Settings to use. Loaded from disk when omitted.

    Returns:
        A ready EntryStore.
    """
    config = config or load_config()
    data_store = DataStore(config.database_path())
    store: Optional[EntryStore] = None

    def persist(snapshot: Snapshot) -> None:
        data_store.save_snapshot(snapshot, store.next_id)

    store = EntryStore.initialize(
        data_store.load_entries(),
        on_change=persist,
        next_id=data_store.get_next_id(),
    )
    return store
