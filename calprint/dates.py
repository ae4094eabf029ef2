"""Gregorian date arithmetic shared by the layout engine and range generator.

All calculations use the proleptic Gregorian calendar of :mod:`datetime`;
no timezone is involved anywhere. Weekdays are numbered Monday=0 .. Sunday=6,
which is also the column order of the month grid.
"""

import re
from datetime import date, datetime

from calprint.constants import WEEKDAY_NAMES
from calprint.exceptions import MalformedDateError

_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def is_leap_year(year: int) -> bool:
    """True iff year is divisible by 4 and (not by 100, or by 400)."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Number of days in the given month."""
    if not 1 <= month <= 12:
        raise ValueError(f"Month out of range: {month}")
    if month == 2:
        return 29 if is_leap_year(year) else 28
    if month in (4, 6, 9, 11):
        return 30
    return 31


def weekday(day: date) -> int:
    """Weekday column of a date (Monday=0 .. Sunday=6)."""
    return day.weekday()


def weekday_name(day: date) -> str:
    """Three-letter English weekday abbreviation (e.g. "Tue")."""
    return WEEKDAY_NAMES[weekday(day)]


def parse_weekday_name(label: str) -> int:
    """Parse a three-letter weekday abbreviation into its column index.

    Raises:
        MalformedDateError: If the label is not one of Mon..Sun
    """
    try:
        return WEEKDAY_NAMES.index(label)
    except ValueError:
        raise MalformedDateError(
            f"Unknown weekday '{label}'. Expected one of: {', '.join(WEEKDAY_NAMES)}"
        ) from None


def parse_date(value: str) -> date:
    """Parse a strict YYYY-MM-DD date token.

    Raises:
        MalformedDateError: If the token is not a valid calendar date
    """
    if not _DATE_PATTERN.match(value):
        raise MalformedDateError(f"Invalid date '{value}'. Use YYYY-MM-DD format")
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError as e:
        raise MalformedDateError(f"Invalid date '{value}': {e}") from e


def month_start(day: date) -> date:
    """First day of the month containing the date."""
    return day.replace(day=1)
