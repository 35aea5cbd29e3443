"""Diary core: entry store, month ranges and derived views."""

from daydiary.core.date_range import DateRange, month_range, month_range_for, shift_month
from daydiary.core.emotion import classify, summarize
from daydiary.core.monthly import filter_sort, monthly_entries
from daydiary.core.store import EntryStore

__all__ = [
    "DateRange",
    "EntryStore",
    "classify",
    "filter_sort",
    "month_range",
    "month_range_for",
    "monthly_entries",
    "shift_month",
    "summarize",
]
