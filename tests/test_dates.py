"""Tests for shared date arithmetic."""

from datetime import date, timedelta

import pytest

from calprint.dates import (
    days_in_month,
    is_leap_year,
    parse_date,
    parse_weekday_name,
    weekday,
    weekday_name,
)
from calprint.exceptions import MalformedDateError


def test_leap_years():
    """Test the Gregorian leap year rule."""
    assert is_leap_year(2000) is True
    assert is_leap_year(1900) is False
    assert is_leap_year(2024) is True
    assert is_leap_year(2023) is False


def test_days_in_february():
    """Test February length across century and leap years."""
    assert days_in_month(2000, 2) == 29
    assert days_in_month(1900, 2) == 28
    assert days_in_month(2024, 2) == 29
    assert days_in_month(2023, 2) == 28


def test_days_in_month_matches_datetime():
    """Test month lengths against datetime for several years."""
    for year in (1600, 1999, 2022, 2100):
        for month in range(1, 13):
            next_month = date(year + month // 12, month % 12 + 1, 1)
            expected = (next_month - timedelta(days=1)).day
            assert days_in_month(year, month) == expected


def test_days_in_month_rejects_bad_month():
    """Test month outside 1-12 raises."""
    with pytest.raises(ValueError):
        days_in_month(2022, 13)


def test_weekday_monday_first():
    """Test weekday numbering starts at Monday."""
    assert weekday(date(2022, 8, 1)) == 0
    assert weekday(date(2022, 2, 1)) == 1
    assert weekday(date(2022, 5, 1)) == 6


def test_weekday_name():
    """Test three-letter weekday names."""
    assert weekday_name(date(2022, 2, 1)) == "Tue"
    assert weekday_name(date(2023, 1, 29)) == "Sun"
    assert weekday_name(date(2000, 1, 1)) == "Sat"


def test_parse_weekday_name():
    """Test weekday labels map to columns and unknown labels fail."""
    assert parse_weekday_name("Mon") == 0
    assert parse_weekday_name("Sun") == 6
    with pytest.raises(MalformedDateError):
        parse_weekday_name("Tuesday")


def test_parse_date():
    """Test strict YYYY-MM-DD parsing."""
    assert parse_date("2024-02-29") == date(2024, 2, 29)


@pytest.mark.parametrize(
    "value", ["2023-02-29", "2023-1-5", "20230105", "yesterday", "", "2023-13-01"]
)
def test_parse_date_malformed(value):
    """Test malformed or impossible dates raise MalformedDateError."""
    with pytest.raises(MalformedDateError):
        parse_date(value)
