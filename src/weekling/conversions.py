"""Free functions turning calendar dates into week dates and back."""

from __future__ import annotations

import datetime

from .isodate import DateLike
from .week import Week
from .week_day import WeekDay
from .year import Year


def to_year(date: DateLike) -> Year:
    return Year.from_date(date)


def to_week(date: DateLike) -> Week:
    return Week.from_date(date)


def to_week_day(date: DateLike) -> WeekDay:
    return WeekDay.from_date(date)


def to_date(week_day) -> datetime.date:
    """Calendar date of a WeekDay, or of any date-like value normalised to a day."""
    return WeekDay.coerce(week_day).to_date()
