"""Day-granularity date helpers and the injectable clock."""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional
from zoneinfo import ZoneInfo

# Sunday = 0 .. Saturday = 6, the numbering stored in habit_week_days.
WEEK_DAY_NAMES = ["sun", "mon", "tue", "wed", "thu", "fri", "sat"]


def start_of_day(value: date | datetime) -> datetime:
    """Truncate a date or naive datetime to midnight."""
    return datetime(value.year, value.month, value.day)


def week_day_index(value: date | datetime) -> int:
    """Return the weekday with Sunday as 0, independent of ``date.weekday()``."""
    return value.isoweekday() % 7


def parse_iso_day(value: str) -> date:
    """Parse ``YYYY-MM-DD`` or a full ISO datetime down to its calendar date."""
    text = (value or "").strip()
    if len(text) > 10:
        return datetime.fromisoformat(text).date()
    return date.fromisoformat(text)


class Clock:
    """Source of "now" for operations that act on the current day."""

    def __init__(self, timezone: Optional[str] = None) -> None:
        self._tz = ZoneInfo(timezone) if timezone else None

    def now(self) -> datetime:
        if self._tz is None:
            return datetime.now()
        return datetime.now(self._tz).replace(tzinfo=None)

    def today(self) -> datetime:
        return start_of_day(self.now())
