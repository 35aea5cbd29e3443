"""Calendar month boundaries as millisecond timestamps.

Months are handled as 0-based indexes internally (January = 0) and are
normalized with floor division, so index -1 is December of the previous
year and index 12 is January of the next one.

All functions take an optional ``tz``. ``None`` means the host's local
timezone; pass ``datetime.timezone.utc`` (or any tzinfo) to pin the
boundaries to a specific zone.
"""

from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import NamedTuple, Optional, Union

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
ONE_MS = timedelta(milliseconds=1)


class DateRange(NamedTuple):
    """Inclusive ``[begin, end]`` range of millisecond timestamps."""

    begin: int
    end: int

    def contains(self, timestamp: int) -> bool:
        """Check whether a timestamp falls inside the range (both ends inclusive)."""
        return self.begin <= timestamp <= self.end


def normalize_month(year: int, month_index: int) -> tuple[int, int]:
    """Normalize a (year, 0-based month index) pair into a valid month.

    Args:
        year: Calendar year.
        month_index: Month index, may be negative or above 11.

    Returns:
        Tuple of (year, month_index) with month_index in 0..11.
    """
    return year + month_index // 12, month_index % 12


def to_timestamp(moment: datetime, tz: Optional[tzinfo] = None) -> int:
    """Convert a datetime to milliseconds since epoch.

    Naive datetimes are interpreted in ``tz`` (local time when ``tz`` is None).
    """
    if moment.tzinfo is None:
        moment = moment.astimezone() if tz is None else moment.replace(tzinfo=tz)
    return (moment - EPOCH) // ONE_MS


def from_timestamp(timestamp: int, tz: Optional[tzinfo] = None) -> datetime:
    """Convert milliseconds since epoch to an aware datetime in ``tz``."""
    moment = EPOCH + timedelta(milliseconds=timestamp)
    return moment.astimezone() if tz is None else moment.astimezone(tz)


def month_range_for(year: int, month_index: int, tz: Optional[tzinfo] = None) -> DateRange:
    """Compute the inclusive boundaries of a month.

    Args:
        year: Calendar year.
        month_index: 0-based month index (normalized, may roll over).
        tz: Timezone the month is evaluated in (None = local).

    Returns:
        DateRange from 00:00:00.000 on day 1 to 23:59:59.999 on the last day.
    """
    year, month_index = normalize_month(year, month_index)
    next_year, next_index = normalize_month(year, month_index + 1)

    begin = to_timestamp(datetime(year, month_index + 1, 1), tz)
    # last millisecond of the month is one before the next month starts
    end = to_timestamp(datetime(next_year, next_index + 1, 1), tz) - 1
    return DateRange(begin, end)


def month_range(
    pivot: Optional[Union[date, datetime]] = None,
    tz: Optional[tzinfo] = None,
) -> DateRange:
    """Compute the month range containing a pivot date.

    Only the pivot's year and month are used.

    Args:
        pivot: Reference date. Defaults to the current date in ``tz``.
        tz: Timezone the month is evaluated in (None = local).

    Returns:
        DateRange covering the pivot's calendar month.
    """
    if pivot is None:
        pivot = datetime.now(tz)
    elif isinstance(pivot, datetime) and pivot.tzinfo is not None:
        # aware pivots are read in the zone the month is evaluated in
        pivot = pivot.astimezone() if tz is None else pivot.astimezone(tz)
    return month_range_for(pivot.year, pivot.month - 1, tz)


def shift_month(pivot: date, delta: int) -> date:
    """Return the first day of the month ``delta`` months away from ``pivot``."""
    year, month_index = normalize_month(pivot.year, pivot.month - 1 + delta)
    return date(year, month_index + 1, 1)


def month_title(pivot: date) -> str:
    """Format a pivot as a ``YYYY-MM`` header label."""
    return f"{pivot.year}-{pivot.month:02d}"
