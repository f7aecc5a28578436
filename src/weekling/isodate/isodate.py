from __future__ import annotations

import datetime
from typing import NamedTuple, Union

import numpy as np

from .._exceptions import DateOutOfRange, InvalidArgument

# Ordinal of 1970-01-01, the numpy datetime64 epoch.
EPOCH_ORDINAL: int = 719163

_MAX_ORDINAL: int = datetime.date.max.toordinal()

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


class CivilDate(NamedTuple):
    """
    Proleptic-Gregorian calendar date with an unbounded year.

    ``datetime.date`` stops at years 1..9999; this tuple carries the same
    (year, month, day) triple for any integer year.
    """

    year: int
    month: int
    day: int

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def to_date(self) -> datetime.date:
        return to_date(ordinal_from_civil(self.year, self.month, self.day))


DateLike = Union[datetime.date, np.datetime64, CivilDate]


# ── calendar primitives ──────────────────────────────────────────────────

def is_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    if month == 2 and is_leap(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def ordinal_from_civil(year: int, month: int, day: int) -> int:
    """
    Day ordinal of a proleptic-Gregorian date, ``ordinal(1, 1, 1) == 1``.

    Matches ``datetime.date.toordinal`` inside its range and extends it to
    every integer year, including zero and negative ones. Years are counted
    from March so that the leap day is the last day of the shifted year.
    """
    year -= month <= 2
    era = year // 400
    yoe = year - era * 400
    doy = (153 * (month - 3 if month > 2 else month + 9) + 2) // 5 + day - 1
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy
    return era * 146097 + doe - 305


def civil_from_ordinal(ordinal: int) -> CivilDate:
    """Inverse of :func:`ordinal_from_civil`."""
    z = ordinal + 305
    era = z // 146097
    doe = z - era * 146097
    yoe = (doe - doe // 1460 + doe // 36524 - doe // 146096) // 365
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    day = doy - (153 * mp + 2) // 5 + 1
    month = mp + 3 if mp < 10 else mp - 9
    return CivilDate(yoe + era * 400 + (month <= 2), month, day)


def iso_weekday(ordinal: int) -> int:
    """ISO weekday of an ordinal, Monday=1 .. Sunday=7."""
    return (ordinal - 1) % 7 + 1


def week_one_monday(year: int) -> int:
    """Ordinal of the Monday that starts ISO week 1 of ``year``."""
    first = ordinal_from_civil(year, 1, 1)
    weekday = iso_weekday(first) - 1
    monday = first - weekday
    # Week 1 holds the year's first Thursday.
    if weekday > 3:
        monday += 7
    return monday


def iso_calendar(ordinal: int) -> tuple[int, int, int]:
    """Return ``(iso_year, iso_week, iso_weekday)`` for a day ordinal."""
    year = civil_from_ordinal(ordinal).year
    monday = week_one_monday(year)
    if ordinal < monday:
        year -= 1
        monday = week_one_monday(year)
    else:
        following = week_one_monday(year + 1)
        if ordinal >= following:
            year += 1
            monday = following
    week, day = divmod(ordinal - monday, 7)
    return year, week + 1, day + 1


def week_count(year: int) -> int:
    """Number of ISO weeks (52 or 53) in the week-numbering ``year``."""
    dec31 = ordinal_from_civil(year, 12, 31)
    _, week, _ = iso_calendar(dec31)
    if week == 1:
        _, week, _ = iso_calendar(dec31 - 7)
    return week


# ── date-like inputs ─────────────────────────────────────────────────────

def is_date_like(value: object) -> bool:
    return isinstance(value, (datetime.date, np.datetime64, CivilDate))


def ordinal_of(value: DateLike) -> int:
    """Day ordinal of any supported date-like value."""
    if isinstance(value, CivilDate):
        year, month, day = value
        if not 1 <= month <= 12 or not 1 <= day <= days_in_month(year, month):
            raise InvalidArgument(f"{value!r} is not a valid calendar date")
        return ordinal_from_civil(year, month, day)
    if isinstance(value, datetime.date):
        # datetime.datetime is a date subclass; toordinal drops the time.
        return value.toordinal()
    if isinstance(value, np.datetime64):
        if np.isnat(value):
            raise InvalidArgument("NaT cannot be converted to a week date")
        days = value.astype("datetime64[D]").astype(np.int64)
        return int(days) + EPOCH_ORDINAL
    raise InvalidArgument(
        f"Expected a date, datetime, numpy.datetime64 or CivilDate; "
        f"got {type(value).__name__}"
    )


def to_date(ordinal: int) -> datetime.date:
    if not 1 <= ordinal <= _MAX_ORDINAL:
        year = civil_from_ordinal(ordinal).year
        raise DateOutOfRange(
            f"Year {year} is outside the range supported by datetime.date"
        )
    return datetime.date.fromordinal(ordinal)


def to_datetime64(ordinal: int) -> np.datetime64:
    return np.datetime64(ordinal - EPOCH_ORDINAL, "D")
