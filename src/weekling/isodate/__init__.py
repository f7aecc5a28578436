# src/weekling/isodate/__init__.py
"""
weekling.isodate
~~~~~~~~~~~~~~~~

Proleptic-Gregorian and ISO-8601 week-date arithmetic on plain integers.
Dates are handled as day ordinals compatible with ``datetime.date.toordinal``
but valid for every integer year, so ancient and far-future week dates work
the same as everyday ones.

Basic usage::

    from weekling.isodate import iso_calendar, ordinal_from_civil, week_count

    iso_calendar(ordinal_from_civil(2011, 7, 27))    # → (2011, 30, 3)
    week_count(2015)                                  # → 53

NumPy arrays of ``datetime64`` are handled by the vectorised variants::

    import numpy as np
    from weekling.isodate import isocalendar

    years, weeks, days = isocalendar(np.array(["2011-01-01", "2011-07-27"],
                                              dtype="datetime64[D]"))

Public API
----------
CivilDate           (year, month, day) tuple with an unbounded year.
ordinal_from_civil  Date → day ordinal.
civil_from_ordinal  Day ordinal → CivilDate.
iso_calendar        Day ordinal → (iso_year, iso_week, iso_weekday).
week_count          ISO week count of a year.
isocalendar         Vectorised iso_calendar for datetime64 arrays.
week_counts         Vectorised week_count.
from_isocalendar    Vectorised week date → datetime64[D].
"""

from __future__ import annotations

from weekling.isodate.arrays import from_isocalendar, isocalendar, week_counts
from weekling.isodate.isodate import (
    EPOCH_ORDINAL,
    CivilDate,
    DateLike,
    civil_from_ordinal,
    days_in_month,
    is_date_like,
    is_leap,
    iso_calendar,
    iso_weekday,
    ordinal_from_civil,
    ordinal_of,
    to_date,
    to_datetime64,
    week_count,
    week_one_monday,
)

__all__ = [
    "EPOCH_ORDINAL",
    "CivilDate",
    "DateLike",
    "civil_from_ordinal",
    "days_in_month",
    "from_isocalendar",
    "is_date_like",
    "is_leap",
    "iso_calendar",
    "iso_weekday",
    "isocalendar",
    "ordinal_from_civil",
    "ordinal_of",
    "to_date",
    "to_datetime64",
    "week_count",
    "week_counts",
    "week_one_monday",
]
