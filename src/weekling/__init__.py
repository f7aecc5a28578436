# src/weekling/__init__.py
"""
weekling
~~~~~~~~

ISO-8601 week-date arithmetic.  A Year holds 52 or 53 Weeks, a Week holds
seven WeekDays, and all three can be parsed, printed, compared and moved
forwards or backwards across week and year boundaries.

Basic usage::

    from weekling import Week, WeekDay

    week = Week.parse("2015-W52")
    week.next()                               # → Week(2015-W53)
    week.add(2)                               # → Week(2016-W01)
    WeekDay.of(2011, 30, 3).to_date()         # → datetime.date(2011, 7, 27)

Years are unbounded integers, so ancient and far-future week dates work too::

    Week.parse("-1503-W50").previous()       # → Week(-1503-W49)

Public API
----------
Year                 ISO week-numbering year.
Week                 Week of a Year, index 1..53.
WeekDay              Day of a Week, index 1..7 (Monday first).
Span                 Inclusive range of years, weeks or week days.
CivilDate            Calendar date with an unbounded year.
to_year / to_week / to_week_day / to_date
                     Conversions between calendar dates and week dates.
WeeklingError        Base exception for all weekling errors.
"""

from __future__ import annotations

from weekling._exceptions import (
    DateOutOfRange,
    InvalidArgument,
    ParseError,
    WeekIndexOutOfRange,
    WeeklingError,
)
from weekling.conversions import to_date, to_week, to_week_day, to_year
from weekling.isodate import CivilDate
from weekling.span import Span
from weekling.week import Week
from weekling.week_day import DAY_NAMES, WeekDay
from weekling.year import Year

__version__ = "1.0.1"

__all__ = [
    "DAY_NAMES",
    "CivilDate",
    "DateOutOfRange",
    "InvalidArgument",
    "ParseError",
    "Span",
    "Week",
    "WeekDay",
    "WeekIndexOutOfRange",
    "WeeklingError",
    "Year",
    "to_date",
    "to_week",
    "to_week_day",
    "to_year",
]
