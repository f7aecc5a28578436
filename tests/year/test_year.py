"""
tests/year/test_year.py

Covers:
  - Construction (integers, dates, coercion, invalid input)
  - today()/now() with an injected clock
  - Parsing and text representation
  - Equality, ordering and hashing
  - next/previous/add/subtract
  - Parity, leap years, week counts and week ranges
"""

import datetime
import logging

import numpy as np
import pytest

from weekling import InvalidArgument, ParseError, Span, Week, Year


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def rng():
    return np.random.default_rng(3)


def fixed_clock(year, month, day):
    return lambda: datetime.date(year, month, day)


# ── Construction ──────────────────────────────────────────────────────────────

class TestConstruction:

    @pytest.mark.parametrize("index", [-1691, 0, 2012, 23017])
    def test_from_integer(self, index):
        assert Year(index).index == index

    def test_from_numpy_integer(self):
        year = Year(np.int64(2011))
        assert year.index == 2011
        assert type(year.index) is int

    def test_from_year(self):
        assert Year(Year(2011)).index == 2011

    @pytest.mark.parametrize("value", ["2011", 2011.0, None, True])
    def test_invalid_type_raises(self, value):
        with pytest.raises(InvalidArgument):
            Year(value)

    def test_from_date_uses_week_numbering_year(self):
        # 2011-01-01 is the Saturday of 2010-W52
        assert Year.from_date(datetime.date(2011, 1, 1)) == Year(2010)
        # 2008-12-29 is the Monday of 2009-W01
        assert Year.from_date(datetime.date(2008, 12, 29)) == Year(2009)

    def test_from_datetime(self):
        assert Year.from_date(datetime.datetime(2011, 4, 6, 16, 45, 30)) == Year(2011)

    def test_from_datetime64(self):
        assert Year.from_date(np.datetime64("2011-04-06")) == Year(2011)

    def test_coerce(self):
        year = Year(2011)
        assert Year.coerce(year) is year
        assert Year.coerce(2011) == year
        assert Year.coerce(datetime.date(2011, 6, 1)) == year

    def test_coerce_rejects_week(self):
        with pytest.raises(InvalidArgument):
            Year.coerce(Week(2011, 1))


# ── today / now ───────────────────────────────────────────────────────────────

class TestToday:

    @pytest.mark.parametrize("method", ["today", "now"])
    def test_current_year(self, method):
        today = datetime.date.today()
        assert getattr(Year, method)() == Year(today.isocalendar()[0])

    def test_injected_clock(self):
        assert Year.today(clock=fixed_clock(2011, 1, 1)) == Year(2010)


# ── Parsing and text ──────────────────────────────────────────────────────────

class TestParsing:

    @pytest.mark.parametrize(
        "text, index",
        [("-1503", -1503), ("2011", 2011), ("50023", 50023), ("0", 0)],
    )
    def test_parse(self, text, index):
        assert Year.parse(text).index == index

    def test_parse_finds_first_match(self):
        assert Year.parse("released in 1998, revised 2004").index == 1998

    def test_parse_failure(self):
        with pytest.raises(ParseError, match="No year found for parsing") as excinfo:
            Year.parse("no year!")
        assert excinfo.value.text == "no year!"

    def test_parse_failure_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="weekling.year"):
            with pytest.raises(ParseError):
                Year.parse("no year!")
        assert "No year in 'no year!'" in caplog.text

    @pytest.mark.parametrize("index, text", [(-1503, "-1503"), (2011, "2011"), (5, "5")])
    def test_str(self, index, text):
        assert str(Year(index)) == text

    def test_parse_str_round_trip(self):
        for index in (-1503, 0, 7, 2011, 50023):
            assert Year.parse(str(Year(index))) == Year(index)

    def test_repr(self):
        assert repr(Year(-1503)) == "Year(-1503)"

    def test_int(self):
        assert int(Year(2011)) == 2011
        assert [0, 1, 2][Year(1)] == 1


# ── Comparison ────────────────────────────────────────────────────────────────

class TestComparison:

    def test_equal(self):
        assert Year(2012) == Year(2012)
        assert Year(2012) == 2012
        assert Year(2012) == np.int64(2012)

    def test_not_equal(self):
        assert Year(2012) != Year(2005)
        assert Year(2012) != "2012"
        assert Year(2012) != Week(2012, 1)

    def test_ordering(self):
        assert Year(2011) < Year(2012)
        assert Year(2012) > 2011
        assert Year(-1503) <= Year(-1503)
        assert sorted([Year(2012), Year(-1503), Year(2011)]) == [-1503, 2011, 2012]

    def test_ordering_with_unsupported_type_raises(self):
        with pytest.raises(TypeError):
            Year(2011) < "2012"

    def test_hash(self):
        assert len({Year(2011), Year(2011), Year(2012)}) == 2
        assert hash(Year(2011)) == hash(2011)


# ── Navigation ────────────────────────────────────────────────────────────────

class TestNavigation:

    def test_next(self):
        assert Year(2011).next() == Year(2012)
        assert Year(-1).next() == Year(0)

    def test_previous(self):
        assert Year(2011).previous() == Year(2010)
        assert Year(0).previous() == Year(-1)

    @pytest.mark.parametrize("n, expected", [(15, 2013), (-12, 1986), (0, 1998)])
    def test_add(self, n, expected):
        assert Year(1998) + n == Year(expected)
        assert Year(1998).add(n) == Year(expected)

    @pytest.mark.parametrize("n, expected", [(15, 1983), (-12, 2010), (0, 1998)])
    def test_subtract(self, n, expected):
        assert Year(1998) - n == Year(expected)
        assert Year(1998).subtract(n) == Year(expected)

    def test_add_invalid_raises(self):
        with pytest.raises(InvalidArgument):
            Year(1998).add("1")
        with pytest.raises(TypeError):
            Year(1998) + "1"

    def test_inverse_laws(self, rng):
        for index in rng.integers(-100_000, 100_000, 100):
            year = Year(int(index))
            assert year.next().previous() == year
            assert year.previous().next() == year


# ── Properties of the year ────────────────────────────────────────────────────

class TestProperties:

    def test_even_odd(self):
        assert Year(2012).is_even() and not Year(2012).is_odd()
        assert Year(-1503).is_odd() and not Year(-1503).is_even()

    @pytest.mark.parametrize("index", [2004, 1804, 2016])
    def test_leap(self, index):
        assert Year(index).is_leap()

    @pytest.mark.parametrize("index", [1998, 2100, 2003])
    def test_not_leap(self, index):
        assert not Year(index).is_leap()

    @pytest.mark.parametrize("index", [1985, 2002, 2024])
    def test_week_count_52(self, index):
        assert Year(index).week_count() == 52

    @pytest.mark.parametrize("index", [1981, 2015, 2020, 2026])
    def test_week_count_53(self, index):
        assert Year(index).week_count() == 53

    def test_week(self):
        assert Year(2011).week(13) == Week(2011, 13)

    def test_weeks(self):
        weeks = Year(2011).weeks()
        assert weeks == Span(Week(2011, 1), Week(2011, 52))
        assert len(weeks) == 52
        assert list(weeks)[-1] == Week(2011, 52)

    def test_weeks_in_53_week_year(self):
        weeks = list(Year(2015).weeks())
        assert len(weeks) == 53
        assert weeks[0] == Week(2015, 1)
        assert weeks[-1] == Week(2015, 53)
