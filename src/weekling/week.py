from __future__ import annotations

import datetime
import logging
import re
from functools import total_ordering
from typing import TYPE_CHECKING, Optional, Union

from ._exceptions import InvalidArgument, ParseError, WeekIndexOutOfRange
from .isodate import is_date_like, iso_calendar, ordinal_of, week_one_monday
from .span import Span
from .year import Clock, Year, _index_of, _read_clock

if TYPE_CHECKING:
    from .week_day import WeekDay

logger = logging.getLogger(__name__)


@total_ordering
class Week:
    """
    Immutable ISO-8601 week, identified by its week-numbering year and index.

    Index 53 exists only in years whose ``week_count()`` is 53. ``next`` and
    ``previous`` cross year boundaries; ``add``/``subtract`` give the same
    results as stepping ``|n|`` times.
    """

    PARSE_PATTERN = re.compile(r"(0|-?\d+)-W(0[1-9]|[1-4]\d|5[0-3])")

    __slots__ = ("_year", "_index")

    def __init__(self, year: Union[Year, int], index: int) -> None:
        self._year: Year = Year.coerce(year)
        self._index: int = _index_of(
            index, f"A week index must be an integer; got {index!r}"
        )

        if not 1 <= self._index <= 52:
            if self._index != 53:
                raise InvalidArgument(
                    f"Index {self._index} is invalid. "
                    f"Index can never be lower than 1 or higher than 53"
                )
            if self._year.week_count() == 52:
                raise WeekIndexOutOfRange(self._year, self._index)

    # ── alternative constructors ─────────────────────────────────────────

    @classmethod
    def from_date(cls, date) -> Week:
        return cls.from_ordinal(ordinal_of(date))

    @classmethod
    def from_ordinal(cls, ordinal: int) -> Week:
        """Week containing the day with the given proleptic-Gregorian ordinal."""
        year, week, _ = iso_calendar(ordinal)
        return cls(year, week)

    @classmethod
    def coerce(cls, value) -> Week:
        if isinstance(value, cls):
            return value
        if is_date_like(value):
            return cls.from_date(value)
        raise InvalidArgument(
            f"A single argument must either be a Week or a date; "
            f"got {type(value).__name__}"
        )

    @classmethod
    def today(cls, clock: Optional[Clock] = None) -> Week:
        return cls.from_date(_read_clock(clock))

    now = today

    @classmethod
    def parse(cls, text: str) -> Week:
        match = cls.PARSE_PATTERN.search(str(text))
        if match is None:
            logger.debug("No week in %r", text)
            raise ParseError("No week found for parsing", str(text))
        return cls(int(match.group(1)), int(match.group(2)))

    @classmethod
    def weeks_in_year(cls, year: Union[Year, int]) -> int:
        return Year.coerce(year).week_count()

    # ── conversions ──────────────────────────────────────────────────────

    @property
    def year(self) -> Year:
        return self._year

    @property
    def index(self) -> int:
        return self._index

    def __str__(self) -> str:
        return f"{self._year.index:04d}-W{self._index:02d}"

    def __repr__(self) -> str:
        return f"Week({self})"

    def first_date(self) -> datetime.date:
        return self.monday().to_date()

    def last_date(self) -> datetime.date:
        return self.sunday().to_date()

    # ── comparison ───────────────────────────────────────────────────────

    def _key(self) -> tuple[int, int]:
        return self._year.index, self._index

    def __eq__(self, other: object) -> bool:
        try:
            other_week = Week.coerce(other)
        except InvalidArgument:
            return NotImplemented
        return self._key() == other_week._key()

    def __lt__(self, other: object) -> bool:
        try:
            other_week = Week.coerce(other)
        except InvalidArgument:
            return NotImplemented
        return self._key() < other_week._key()

    def __hash__(self) -> int:
        return hash(self._key())

    # ── navigation ───────────────────────────────────────────────────────

    def next(self) -> Week:
        if self._index < 52:
            return type(self)(self._year, self._index + 1)
        if self._index == 52 and self._year.week_count() == 53:
            return type(self)(self._year, 53)
        return type(self)(self._year.next(), 1)

    def previous(self) -> Week:
        if self._index > 1:
            return type(self)(self._year, self._index - 1)
        previous_year = self._year.previous()
        return type(self)(previous_year, previous_year.week_count())

    def _monday(self) -> int:
        return week_one_monday(self._year.index) + 7 * (self._index - 1)

    def _position(self) -> int:
        # Mondays are consecutive multiples of 7 apart.
        return self._monday() // 7

    def add(self, weeks: int) -> Week:
        weeks = _index_of(weeks, "Weeks must be an integer")
        if weeks == 0:
            return self
        return type(self).from_ordinal(self._monday() + 7 * weeks)

    def subtract(self, weeks: int) -> Week:
        return self.add(-_index_of(weeks, "Weeks must be an integer"))

    def __add__(self, other: object) -> Week:
        try:
            return self.add(other)
        except InvalidArgument:
            return NotImplemented

    def __sub__(self, other: object) -> Week:
        try:
            return self.subtract(other)
        except InvalidArgument:
            return NotImplemented

    def until_index(self, end_index: int) -> Span[Week]:
        """
        Range from this week to the next week numbered ``end_index``.

        An ``end_index`` equal to or lower than the own index ends the range
        in the following year.
        """
        end_index = _index_of(end_index, "A week index must be an integer")
        if end_index <= self._index:
            return Span(self, type(self)(self._year.next(), end_index))
        return Span(self, type(self)(self._year, end_index))

    def is_odd(self) -> bool:
        return self._index % 2 == 1

    def is_even(self) -> bool:
        return self._index % 2 == 0

    # ── days ─────────────────────────────────────────────────────────────

    def day(self, index_or_name: Union[int, str]) -> WeekDay:
        from .week_day import WeekDay

        return WeekDay(self, index_or_name)

    def monday(self) -> WeekDay:
        return self.day("monday")

    def tuesday(self) -> WeekDay:
        return self.day("tuesday")

    def wednesday(self) -> WeekDay:
        return self.day("wednesday")

    def thursday(self) -> WeekDay:
        return self.day("thursday")

    def friday(self) -> WeekDay:
        return self.day("friday")

    def saturday(self) -> WeekDay:
        return self.day("saturday")

    def sunday(self) -> WeekDay:
        return self.day("sunday")

    def weekend(self) -> list[WeekDay]:
        return [self.saturday(), self.sunday()]

    def days(self) -> Span[WeekDay]:
        return Span(self.monday(), self.sunday())
