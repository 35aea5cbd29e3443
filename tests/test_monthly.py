"""Tests for month-scoped entry views.

**Feature: monthly-view**
"""

from datetime import date, timezone

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from daydiary.core.date_range import DateRange, month_range, month_range_for
from daydiary.core.monthly import filter_sort, monthly_entries
from daydiary.core.store import EntryStore
from daydiary.models import DiaryEntry

UTC = timezone.utc
NOVEMBER = month_range_for(2025, 10, UTC)


def _entry(entry_id: int, created_date: int, emotion: int = 3) -> DiaryEntry:
    return DiaryEntry(id=entry_id, content=f"entry {entry_id}", emotion=emotion, created_date=created_date)


def entry_strategy():
    """Generate entries around the November 2025 range."""
    return st.builds(
        _entry,
        entry_id=st.integers(min_value=1, max_value=10_000),
        created_date=st.integers(
            min_value=NOVEMBER.begin - 5 * 86_400_000,
            max_value=NOVEMBER.end + 5 * 86_400_000,
        ),
        emotion=st.integers(min_value=1, max_value=5),
    )


class TestRangeFiltering:
    """
    *For any* month range, entries exactly on either boundary are
    included and entries one millisecond outside are excluded.
    """

    def test_boundaries_inclusive(self):
        entries = [_entry(1, NOVEMBER.begin), _entry(2, NOVEMBER.end)]
        result = filter_sort(entries, NOVEMBER)
        assert {entry.id for entry in result} == {1, 2}

    def test_outside_boundaries_excluded(self):
        entries = [_entry(1, NOVEMBER.begin - 1), _entry(2, NOVEMBER.end + 1)]
        assert filter_sort(entries, NOVEMBER) == []

    def test_empty_snapshot(self):
        assert filter_sort([], NOVEMBER) == []

    def test_empty_range(self):
        entries = [_entry(1, 50)]
        assert filter_sort(entries, DateRange(100, 99)) == []

    def test_jan_31_feb_1_scenario(self):
        store = EntryStore()
        january = month_range(date(2025, 1, 1), UTC)
        last_of_january = store.create("jan", 2, created_date=january.end)
        first_of_february = store.create("feb", 2, created_date=january.end + 1)

        result = filter_sort(store.list(), january)
        assert result == [last_of_january]
        assert first_of_february not in result

    @given(entries=st.lists(entry_strategy(), max_size=40))
    @settings(max_examples=100)
    def test_result_is_exactly_the_entries_in_range(self, entries: list[DiaryEntry]):
        result = filter_sort(entries, NOVEMBER)
        expected = [entry for entry in entries if NOVEMBER.begin <= entry.created_date <= NOVEMBER.end]
        assert len(result) == len(expected)
        assert all(NOVEMBER.contains(entry.created_date) for entry in result)


class TestSortOrder:
    """Latest first, ties broken by id descending."""

    def test_latest_first(self):
        entries = [_entry(1, NOVEMBER.begin), _entry(2, NOVEMBER.end), _entry(3, NOVEMBER.begin + 10)]
        assert [entry.id for entry in filter_sort(entries, NOVEMBER)] == [2, 3, 1]

    def test_ties_broken_by_id_descending(self):
        same_time = NOVEMBER.begin + 1000
        entries = [_entry(4, same_time), _entry(9, same_time), _entry(7, same_time)]
        first = filter_sort(entries, NOVEMBER)
        second = filter_sort(list(reversed(entries)), NOVEMBER)
        assert [entry.id for entry in first] == [9, 7, 4]
        assert first == second

    def test_oldest_order_is_exact_reverse(self):
        same_time = NOVEMBER.begin + 1000
        entries = [_entry(1, same_time), _entry(2, same_time), _entry(3, NOVEMBER.begin)]
        latest = filter_sort(entries, NOVEMBER, "latest")
        oldest = filter_sort(entries, NOVEMBER, "oldest")
        assert [entry.id for entry in oldest] == [3, 1, 2]
        assert oldest == list(reversed(latest))

    def test_unknown_order(self):
        with pytest.raises(ValueError):
            filter_sort([], NOVEMBER, "random")

    def test_input_not_mutated(self):
        entries = [_entry(1, NOVEMBER.begin), _entry(2, NOVEMBER.end)]
        original = list(entries)
        filter_sort(entries, NOVEMBER)
        assert entries == original

    @given(entries=st.lists(entry_strategy(), max_size=40))
    @settings(max_examples=100)
    def test_result_is_sorted_descending(self, entries: list[DiaryEntry]):
        """
        *For any* snapshot, the view is ordered by (created_date, id)
        descending and repeated calls give the same order.
        """
        result = filter_sort(entries, NOVEMBER)
        keys = [(entry.created_date, entry.id) for entry in result]
        assert keys == sorted(keys, reverse=True)
        assert filter_sort(entries, NOVEMBER) == result


class TestMonthlyEntries:
    """Composition of month_range and filter_sort."""

    def test_monthly_entries_for_pivot(self):
        store = EntryStore()
        october = store.create("oct", 1, created_date=NOVEMBER.begin - 1)
        early = store.create("early", 1, created_date=NOVEMBER.begin)
        late = store.create("late", 5, created_date=NOVEMBER.end)

        result = monthly_entries(store.list(), date(2025, 11, 20), UTC)
        assert result == [late, early]
        assert october not in result

    def test_monthly_entries_follows_pivot_navigation(self):
        store = EntryStore()
        entry = store.create("oct", 1, created_date=NOVEMBER.begin - 1)
        assert monthly_entries(store.list(), date(2025, 10, 1), UTC) == [entry]
