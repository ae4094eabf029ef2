"""Generate runs of config entries for hand-authoring calendar files."""

from datetime import date, timedelta
from typing import Iterator

from calprint.dates import weekday_name
from calprint.exceptions import InvalidRangeError


def format_entry(day: date, name: str, highlight: str = "") -> str:
    """
    Format a date as a config entry line.

    Args:
        day: Entry date
        name: Weekday abbreviation for the date
        highlight: Highlight name, or "" for none

    Returns:
        Entry line, e.g. '2023-01-29.Sun = ""'
    """
    return f'{day.isoformat()}.{name} = "{highlight}"'


class DateRange:
    """Inclusive, restartable range of (date, weekday name) pairs.

    Iterating produces pairs lazily; every new iteration starts again at
    ``start``.
    """

    def __init__(self, start: date, end: date):
        if end < start:
            raise InvalidRangeError(
                f"End date {end.isoformat()} is before start date {start.isoformat()}"
            )
        self.start = start
        self.end = end

    def __iter__(self) -> Iterator[tuple[date, str]]:
        # Step by offset so the last date is never incremented past date.max
        for offset in range(len(self)):
            current = self.start + timedelta(days=offset)
            yield current, weekday_name(current)

    def __len__(self) -> int:
        return (self.end - self.start).days + 1

    def lines(self) -> Iterator[str]:
        """Config entry lines for the range, one per date."""
        for day, name in self:
            yield format_entry(day, name)


def generate_range(start: date, end: date) -> DateRange:
    """
    Build the inclusive date range from start to end.

    Raises:
        InvalidRangeError: If end precedes start
    """
    return DateRange(start, end)
