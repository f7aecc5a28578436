from __future__ import annotations

from typing import Union

import numpy as np

from .._exceptions import InvalidArgument
from .isodate import EPOCH_ORDINAL

ArrayLike = Union[int, "np.ndarray"]


# ── vectorised primitives (int64 ordinals, see isodate.py) ───────────────

def _ordinal_from_civil(
    y: np.ndarray, m: np.ndarray, d: np.ndarray
) -> np.ndarray:
    y = y - (m <= 2).astype(np.int64)
    era = y // 400
    yoe = y - era * 400
    mp = np.where(m > 2, m - 3, m + 9)
    doy = (153 * mp + 2) // 5 + d - 1
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy
    return era * 146097 + doe - 305


def _civil_year(ordinals: np.ndarray) -> np.ndarray:
    z = ordinals + 305
    era = z // 146097
    doe = z - era * 146097
    yoe = (doe - doe // 1460 + doe // 36524 - doe // 146096) // 365
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    return yoe + era * 400 + (mp >= 10).astype(np.int64)


def _week_one_monday(years: np.ndarray) -> np.ndarray:
    ones = np.ones_like(years)
    first = _ordinal_from_civil(years, ones, ones)
    weekday = (first - 1) % 7
    return first - weekday + np.where(weekday > 3, 7, 0)


def _iso_calendar(
    ordinals: np.ndarray,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    years = _civil_year(ordinals)
    monday = _week_one_monday(years)

    before = ordinals < monday
    years = np.where(before, years - 1, years)
    monday = np.where(before, _week_one_monday(years), monday)

    following = _week_one_monday(years + 1)
    after = ordinals >= following
    years = np.where(after, years + 1, years)
    monday = np.where(after, following, monday)

    offset = ordinals - monday
    return years, offset // 7 + 1, offset % 7 + 1


def _week_counts(years: np.ndarray) -> np.ndarray:
    dec31 = _ordinal_from_civil(
        years, np.full_like(years, 12), np.full_like(years, 31)
    )
    _, weeks, _ = _iso_calendar(dec31)
    _, weeks_before, _ = _iso_calendar(dec31 - 7)
    return np.where(weeks == 1, weeks_before, weeks)


def _as_int_array(values: ArrayLike, name: str) -> np.ndarray:
    arr = np.atleast_1d(np.asarray(values))
    if not np.issubdtype(arr.dtype, np.integer):
        raise InvalidArgument(f"{name} must be integers; got dtype {arr.dtype}")
    return arr.astype(np.int64)


# ── public API ───────────────────────────────────────────────────────────

def isocalendar(dates):
    """
    ISO week-date components of ``datetime64`` values.

    Accepts a scalar or an array of anything numpy can cast to
    ``datetime64[D]`` and returns ``(years, weeks, weekdays)`` with the
    input's shape, or plain ints for scalar input.
    """
    scalar = np.ndim(dates) == 0
    days = np.atleast_1d(np.asarray(dates, dtype="datetime64[D]"))
    if np.isnat(days).any():
        raise InvalidArgument("NaT cannot be converted to a week date")

    ordinals = days.astype(np.int64) + EPOCH_ORDINAL
    years, weeks, weekdays = _iso_calendar(ordinals)
    if scalar:
        return int(years.flat[0]), int(weeks.flat[0]), int(weekdays.flat[0])
    return years, weeks, weekdays


def week_counts(years: ArrayLike) -> ArrayLike:
    """ISO week count (52 or 53) for each year."""
    scalar = np.ndim(years) == 0
    counts = _week_counts(_as_int_array(years, "years"))
    return int(counts.flat[0]) if scalar else counts.reshape(np.shape(years))


def from_isocalendar(years: ArrayLike, weeks: ArrayLike, weekdays: ArrayLike):
    """
    Calendar dates for ISO week-date components, as ``datetime64[D]``.

    Inputs broadcast against each other. Week 53 is rejected for years that
    have only 52 weeks.
    """
    scalar = np.ndim(years) == 0 and np.ndim(weeks) == 0 and np.ndim(weekdays) == 0
    y, w, d = np.broadcast_arrays(
        _as_int_array(years, "years"),
        _as_int_array(weeks, "weeks"),
        _as_int_array(weekdays, "weekdays"),
    )

    if ((d < 1) | (d > 7)).any():
        raise InvalidArgument("Index must be in 1..7")
    if ((w < 1) | (w > 53)).any():
        raise InvalidArgument(
            "Week index can never be lower than 1 or higher than 53"
        )
    short = (w == 53) & (_week_counts(y) == 52)
    if short.any():
        year = int(y[short].flat[0])
        raise InvalidArgument(f"Index 53 is invalid. Year {year} has only 52 weeks")

    ordinals = _week_one_monday(y) + 7 * (w - 1) + d - 1
    result = (ordinals - EPOCH_ORDINAL).astype("datetime64[D]")
    return result.flat[0] if scalar else result
