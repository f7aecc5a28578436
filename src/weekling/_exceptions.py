"""Exceptions raised by weekling."""

from __future__ import annotations


class WeeklingError(Exception):
    """Base exception for all weekling errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class InvalidArgument(WeeklingError, ValueError):
    """Raised when a constructor receives an unsupported or illegal value."""

    pass


class WeekIndexOutOfRange(InvalidArgument):
    """Raised when week 53 is requested for a year with only 52 weeks."""

    def __init__(self, year, index: int):
        self.year = year
        self.index = index
        super().__init__(
            f"Index {index} is invalid. Year {year} has only 52 weeks"
        )


class ParseError(WeeklingError, ValueError):
    """Raised when no substring of the input matches the expected pattern."""

    def __init__(self, message: str, text: str = ""):
        self.text = text
        super().__init__(message)


class DateOutOfRange(WeeklingError, OverflowError):
    """Raised when a value cannot be represented as a ``datetime.date``."""

    pass
