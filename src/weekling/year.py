from __future__ import annotations

import datetime
import logging
import operator
import re
from functools import total_ordering
from typing import TYPE_CHECKING, Callable, Optional

from ._exceptions import InvalidArgument, ParseError
from .isodate import is_date_like, is_leap, iso_calendar, ordinal_of, week_count
from .span import Span

if TYPE_CHECKING:
    from .week import Week

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime.date]


def _index_of(value: object, message: str) -> int:
    # bool is an int subclass but never a meaningful index.
    if isinstance(value, bool):
        raise InvalidArgument(message)
    try:
        return operator.index(value)
    except TypeError:
        raise InvalidArgument(message) from None


def _read_clock(clock: Optional[Clock]) -> datetime.date:
    today = (clock or datetime.date.today)()
    logger.debug("Clock read: %s", today)
    return today


@total_ordering
class Year:
    """
    Immutable ISO-8601 week-numbering year.

    The index is an unbounded integer; negative and far-future years behave
    exactly like current ones.
    """

    PARSE_PATTERN = re.compile(r"(0|-?\d+)")

    __slots__ = ("_index",)

    def __init__(self, index: int) -> None:
        self._index: int = _index_of(
            index, f"A year must be built from an integer; got {index!r}"
        )

    # ── alternative constructors ─────────────────────────────────────────

    @classmethod
    def from_date(cls, date) -> Year:
        """Week-numbering year of ``date``, which may differ from its calendar year."""
        year, _, _ = iso_calendar(ordinal_of(date))
        return cls(year)

    @classmethod
    def coerce(cls, value) -> Year:
        if isinstance(value, cls):
            return value
        if is_date_like(value):
            return cls.from_date(value)
        return cls(value)

    @classmethod
    def today(cls, clock: Optional[Clock] = None) -> Year:
        return cls.from_date(_read_clock(clock))

    now = today

    @classmethod
    def parse(cls, text: str) -> Year:
        match = cls.PARSE_PATTERN.search(str(text))
        if match is None:
            logger.debug("No year in %r", text)
            raise ParseError("No year found for parsing", str(text))
        return cls(int(match.group(1)))

    # ── conversions ──────────────────────────────────────────────────────

    @property
    def index(self) -> int:
        return self._index

    def __int__(self) -> int:
        return self._index

    def __index__(self) -> int:
        return self._index

    def __str__(self) -> str:
        return str(self._index)

    def __repr__(self) -> str:
        return f"Year({self._index})"

    # ── comparison ───────────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        try:
            other_year = Year.coerce(other)
        except InvalidArgument:
            return NotImplemented
        return self._index == other_year._index

    def __lt__(self, other: object) -> bool:
        try:
            other_year = Year.coerce(other)
        except InvalidArgument:
            return NotImplemented
        return self._index < other_year._index

    def __hash__(self) -> int:
        return hash(self._index)

    # ── navigation ───────────────────────────────────────────────────────

    def next(self) -> Year:
        return type(self)(self._index + 1)

    def previous(self) -> Year:
        return type(self)(self._index - 1)

    def add(self, years: int) -> Year:
        return type(self)(self._index + _index_of(years, "Years must be an integer"))

    def subtract(self, years: int) -> Year:
        return type(self)(self._index - _index_of(years, "Years must be an integer"))

    def __add__(self, other: object) -> Year:
        try:
            return self.add(other)
        except InvalidArgument:
            return NotImplemented

    def __sub__(self, other: object) -> Year:
        try:
            return self.subtract(other)
        except InvalidArgument:
            return NotImplemented

    def _position(self) -> int:
        return self._index

    # ── properties of the year ───────────────────────────────────────────

    def is_odd(self) -> bool:
        return self._index % 2 == 1

    def is_even(self) -> bool:
        return self._index % 2 == 0

    def is_leap(self) -> bool:
        return is_leap(self._index)

    def week_count(self) -> int:
        """Number of ISO weeks in the year, 52 or 53."""
        return week_count(self._index)

    def week(self, index: int) -> Week:
        from .week import Week

        return Week(self, index)

    def weeks(self) -> Span[Week]:
        return Span(self.week(1), self.week(self.week_count()))
