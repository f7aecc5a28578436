from __future__ import annotations

import datetime
import logging
import re
from functools import total_ordering
from typing import Optional, Union

import numpy as np

from ._exceptions import InvalidArgument, ParseError
from .isodate import (
    CivilDate,
    civil_from_ordinal,
    is_date_like,
    iso_calendar,
    iso_weekday,
    ordinal_from_civil,
    ordinal_of,
    to_date,
    to_datetime64,
)
from .week import Week
from .year import Clock, Year, _index_of, _read_clock

logger = logging.getLogger(__name__)

#: English day names in ISO order, Monday first.
DAY_NAMES: tuple[str, ...] = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)

#: Day name → ISO day index (Monday=1 .. Sunday=7).
DAY_INDEX: dict[str, int] = {name: i for i, name in enumerate(DAY_NAMES, start=1)}


def _day_index(day: Union[int, str]) -> int:
    if isinstance(day, str):
        try:
            return DAY_INDEX[day.lower()]
        except KeyError:
            raise InvalidArgument("Invalid day symbol") from None
    return _index_of(day, f"A day must be an index or a day name; got {day!r}")


@total_ordering
class WeekDay:
    """Immutable day of an ISO-8601 week, 1=Monday .. 7=Sunday."""

    PARSE_PATTERN = re.compile(r"(0|-?\d+)-W(0[1-9]|[1-4]\d|5[0-3])-([1-7])")

    __slots__ = ("_week", "_index")

    def __init__(self, week: Week, day: Union[int, str]) -> None:
        self._week: Week = Week.coerce(week)
        self._index: int = _day_index(day)
        if not 1 <= self._index <= 7:
            raise InvalidArgument("Index must be in 1..7")

    # ── alternative constructors ─────────────────────────────────────────

    @classmethod
    def of(cls, year: Union[Year, int], week_index: int, day: Union[int, str]) -> WeekDay:
        return cls(Week(year, week_index), day)

    @classmethod
    def from_date(cls, date) -> WeekDay:
        return cls.from_ordinal(ordinal_of(date))

    @classmethod
    def from_ordinal(cls, ordinal: int) -> WeekDay:
        year, week, day = iso_calendar(ordinal)
        return cls(Week(year, week), day)

    @classmethod
    def coerce(cls, value) -> WeekDay:
        if isinstance(value, cls):
            return value
        if is_date_like(value):
            return cls.from_date(value)
        raise InvalidArgument(
            f"A single argument must either be a WeekDay or a date; "
            f"got {type(value).__name__}"
        )

    @classmethod
    def today(cls, clock: Optional[Clock] = None) -> WeekDay:
        return cls.from_date(_read_clock(clock))

    now = today

    @classmethod
    def parse(cls, text: str) -> WeekDay:
        match = cls.PARSE_PATTERN.search(str(text))
        if match is None:
            logger.debug("No week day in %r", text)
            raise ParseError("No week day found for parsing", str(text))
        year, week_index, day = match.groups()
        return cls.of(int(year), int(week_index), int(day))

    # ── conversions ──────────────────────────────────────────────────────

    @property
    def week(self) -> Week:
        return self._week

    @property
    def index(self) -> int:
        return self._index

    def __str__(self) -> str:
        return f"{self._week}-{self._index}"

    def __repr__(self) -> str:
        return f"WeekDay({self})"

    def to_symbol(self) -> str:
        return DAY_NAMES[self._index - 1]

    def to_ordinal(self) -> int:
        """
        Proleptic-Gregorian ordinal of the day, as ``date.toordinal``.

        Counts whole weeks from January 1st of the week's year. When January
        1st already lies in week 1 that week is not counted twice.
        """
        jan1 = ordinal_from_civil(self._week.year.index, 1, 1)
        days = 7 * self._week.index
        if iso_calendar(jan1)[1] == 1:
            days -= 7
        days -= iso_weekday(jan1)
        days += self._index
        return jan1 + days

    def to_civil(self) -> CivilDate:
        return civil_from_ordinal(self.to_ordinal())

    def to_date(self) -> datetime.date:
        """Calendar date of the day; raises DateOutOfRange outside years 1..9999."""
        return to_date(self.to_ordinal())

    def to_datetime64(self) -> np.datetime64:
        return to_datetime64(self.to_ordinal())

    # ── comparison ───────────────────────────────────────────────────────

    def _key(self) -> tuple[int, int, int]:
        return self._week.year.index, self._week.index, self._index

    def __eq__(self, other: object) -> bool:
        try:
            other_day = WeekDay.coerce(other)
        except InvalidArgument:
            return NotImplemented
        return self._key() == other_day._key()

    def __lt__(self, other: object) -> bool:
        try:
            other_day = WeekDay.coerce(other)
        except InvalidArgument:
            return NotImplemented
        return self._key() < other_day._key()

    def __hash__(self) -> int:
        return hash(self._key())

    # ── navigation ───────────────────────────────────────────────────────

    def next(self) -> WeekDay:
        if self._index == 7:
            return type(self)(self._week.next(), 1)
        return type(self)(self._week, self._index + 1)

    def previous(self) -> WeekDay:
        if self._index == 1:
            return type(self)(self._week.previous(), 7)
        return type(self)(self._week, self._index - 1)

    def _position(self) -> int:
        return self.to_ordinal()

    def add(self, days: int) -> WeekDay:
        days = _index_of(days, "Days must be an integer")
        if days == 0:
            return self
        return type(self).from_ordinal(self.to_ordinal() + days)

    def subtract(self, days: int) -> WeekDay:
        return self.add(-_index_of(days, "Days must be an integer"))

    def __add__(self, other: object) -> WeekDay:
        try:
            return self.add(other)
        except InvalidArgument:
            return NotImplemented

    def __sub__(self, other: object) -> WeekDay:
        try:
            return self.subtract(other)
        except InvalidArgument:
            return NotImplemented

    # ── predicates ───────────────────────────────────────────────────────

    def is_monday(self) -> bool:
        return self.to_symbol() == "monday"

    def is_tuesday(self) -> bool:
        return self.to_symbol() == "tuesday"

    def is_wednesday(self) -> bool:
        return self.to_symbol() == "wednesday"

    def is_thursday(self) -> bool:
        return self.to_symbol() == "thursday"

    def is_friday(self) -> bool:
        return self.to_symbol() == "friday"

    def is_saturday(self) -> bool:
        return self.to_symbol() == "saturday"

    def is_sunday(self) -> bool:
        return self.to_symbol() == "sunday"

    def is_weekend(self) -> bool:
        return self.is_saturday() or self.is_sunday()
