"""Month-scoped views derived from a store snapshot."""

from datetime import date, tzinfo
from typing import Iterable, Literal, Optional

from daydiary.core.date_range import DateRange, month_range
from daydiary.models import DiaryEntry

SortOrder = Literal["latest", "oldest"]

SORT_ORDERS = ("latest", "oldest")


def _sort_key(entry: DiaryEntry) -> tuple[int, int]:
    return (entry.created_date, entry.id)


def filter_sort(
    snapshot: Iterable[DiaryEntry],
    date_range: DateRange,
    order: SortOrder = "latest",
) -> list[DiaryEntry]:
    """Select the entries inside a range and sort them for display.

    Args:
        snapshot: Entries to filter; not modified.
        date_range: Inclusive (begin, end) timestamps.
        order: "latest" sorts by created date then id, both descending.
            "oldest" is the exact reverse.

    Returns:
        New list of matching entries.
    """
    if order not in SORT_ORDERS:
        raise ValueError(f"Unknown sort order: {order}")

    begin, end = date_range
    selected = [entry for entry in snapshot if begin <= entry.created_date <= end]
    selected.sort(key=_sort_key, reverse=(order == "latest"))
    return selected


def monthly_entries(
    snapshot: Iterable[DiaryEntry],
    pivot: Optional[date] = None,
    tz: Optional[tzinfo] = None,
    order: SortOrder = "latest",
) -> list[DiaryEntry]:
    """Entries of the pivot's calendar month, sorted for display."""
    return filter_sort(snapshot, month_range(pivot, tz), order)
