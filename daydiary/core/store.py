"""In-memory diary entry store."""

import logging
from datetime import datetime
from typing import Any, Callable, Iterable, Mapping, Optional, Union

import pydantic

from daydiary.core.date_range import to_timestamp
from daydiary.errors import NotFoundError, ValidationError
from daydiary.models import DiaryEntry, EntryPatch, validate_emotion

logger = logging.getLogger(__name__)

Snapshot = tuple[DiaryEntry, ...]
ChangeHook = Callable[[Snapshot], None]


def _now_ms() -> int:
    return to_timestamp(datetime.now().astimezone())


class EntryStore:
    """Authoritative collection of diary entries.

    Entries are kept in insertion order. Ids come from a counter that only
    moves forward, so ids are never reused after a delete. The store does
    no I/O and no locking: callers serialize mutations and persist through
    the ``on_change`` hook, which is called with a fresh snapshot after
    every successful create, update, redate or delete.
    """

    def __init__(
        self,
        on_change: Optional[ChangeHook] = None,
        clock: Callable[[], int] = _now_ms,
    ):
        """Initialize an empty store.

        Args:
            on_change: Hook called with a snapshot after each mutation.
            clock: Returns the current time in ms; used when create()
                is called without a created_date.
        """
        self._entries: dict[int, DiaryEntry] = {}
        self._next_id = 1
        self._on_change = on_change
        self._clock = clock

    @classmethod
    def initialize(
        cls,
        initial_entries: Iterable[Union[DiaryEntry, Mapping[str, Any]]] = (),
        on_change: Optional[ChangeHook] = None,
        next_id: Optional[int] = None,
        clock: Callable[[], int] = _now_ms,
    ) -> "EntryStore":
        """Boot a store from previously persisted entries.

        Args:
            initial_entries: Entries or mappings with the DiaryEntry shape
                (``createdDate`` or ``created_date`` are both accepted).
            on_change: Hook called with a snapshot after each mutation.
            next_id: Persisted id counter. The counter never starts below
                max(id) + 1, whatever is passed here.
            clock: Current-time source in ms.

        Returns:
            A populated EntryStore. The hook is not called during boot.

        Raises:
            ValidationError: If an entry is malformed or an id is duplicated.
        """
        store = cls(on_change=on_change, clock=clock)
        for raw in initial_entries:
            entry = _coerce_entry(raw)
            if entry.id in store._entries:
                raise ValidationError(f"Duplicate diary entry id {entry.id}")
            store._entries[entry.id] = entry

        highest = max(store._entries, default=0)
        store._next_id = max(highest + 1, next_id or 1)
        logger.debug(
            "Initialized store with %d entries, next id %d",
            len(store._entries),
            store._next_id,
        )
        return store

    @property
    def next_id(self) -> int:
        """Id that the next create() will assign."""
        return self._next_id

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, entry_id: object) -> bool:
        return entry_id in self._entries

    # ==================== Mutations ====================

    def create(
        self,
        content: str,
        emotion: int,
        created_date: Optional[int] = None,
    ) -> DiaryEntry:
        """Create and append a new entry.

        Args:
            content: Entry text, may be empty.
            emotion: Emotion code (1..5).
            created_date: Timestamp in ms. Defaults to now.

        Returns:
            The created entry.

        Raises:
            ValidationError: If emotion or created_date is invalid.
        """
        emotion = validate_emotion(emotion)
        if created_date is None:
            created_date = self._clock()
        entry = _build_entry(
            id=self._next_id,
            content=content,
            emotion=emotion,
            created_date=created_date,
        )

        self._entries[entry.id] = entry
        self._next_id += 1
        logger.debug("Created entry %d", entry.id)
        self._notify()
        return entry

    def update(
        self,
        entry_id: int,
        patch: Union[EntryPatch, Mapping[str, Any]],
    ) -> DiaryEntry:
        """Apply a partial update to an entry.

        Only ``content`` and ``emotion`` can change; the id and created
        date are kept whatever the patch contains. The entry keeps its
        position in insertion order.

        Args:
            entry_id: Id of the entry to update.
            patch: EntryPatch or mapping of fields to change.

        Returns:
            The updated entry.

        Raises:
            NotFoundError: If no entry has this id.
            ValidationError: If the patch holds an invalid value.
        """
        current = self.get_by_id(entry_id)
        if not isinstance(patch, EntryPatch):
            patch = _coerce_patch(patch)

        changes = patch.changes()
        if "emotion" in changes:
            changes["emotion"] = validate_emotion(changes["emotion"])

        updated = _build_entry(**{**current.model_dump(), **changes})
        self._entries[entry_id] = updated
        logger.debug("Updated entry %d (%s)", entry_id, ", ".join(sorted(changes)) or "no fields")
        self._notify()
        return updated

    def redate(self, entry_id: int, created_date: int) -> DiaryEntry:
        """Move an entry to a different creation timestamp.

        This is the only operation that changes ``created_date``.

        Raises:
            NotFoundError: If no entry has this id.
            ValidationError: If created_date is not an integer timestamp.
        """
        current = self.get_by_id(entry_id)
        if isinstance(created_date, bool) or not isinstance(created_date, int):
            raise ValidationError(f"created_date must be an integer timestamp, got {created_date!r}")

        updated = _build_entry(**{**current.model_dump(), "created_date": created_date})
        self._entries[entry_id] = updated
        logger.debug("Redated entry %d to %d", entry_id, created_date)
        self._notify()
        return updated

    def delete(self, entry_id: int) -> DiaryEntry:
        """Permanently remove an entry.

        Deleting the same id twice raises NotFoundError the second time.

        Returns:
            The removed entry.

        Raises:
            NotFoundError: If no entry has this id.
        """
        try:
            removed = self._entries.pop(entry_id)
        except KeyError:
            raise NotFoundError(entry_id) from None
        logger.debug("Deleted entry %d", entry_id)
        self._notify()
        return removed

    # ==================== Queries ====================

    def get_by_id(self, entry_id: int) -> DiaryEntry:
        """Get an entry by id.

        Raises:
            NotFoundError: If no entry has this id.
        """
        try:
            return self._entries[entry_id]
        except KeyError:
            raise NotFoundError(entry_id) from None

    def list(self) -> Snapshot:
        """Return a snapshot of all entries in insertion order."""
        return tuple(self._entries.values())

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change(self.list())


def _build_entry(**fields: Any) -> DiaryEntry:
    try:
        return DiaryEntry(**fields)
    except pydantic.ValidationError as e:
        raise ValidationError(f"Invalid diary entry: {e}") from e


def _coerce_entry(raw: Union[DiaryEntry, Mapping[str, Any]]) -> DiaryEntry:
    if isinstance(raw, DiaryEntry):
        return raw
    try:
        return DiaryEntry.model_validate(raw)
    except pydantic.ValidationError as e:
        raise ValidationError(f"Invalid diary entry: {e}") from e


def _coerce_patch(raw: Mapping[str, Any]) -> EntryPatch:
    try:
        return EntryPatch.model_validate(raw)
    except pydantic.ValidationError as e:
        raise ValidationError(f"Invalid entry patch: {e}") from e
