"""Tests for the date-range generator."""

from datetime import date

import pytest

from calprint.exceptions import InvalidRangeError
from calprint.ingestion import parse_calendar
from calprint.layout import build_month_grid
from calprint.range_generator import format_entry, generate_range


def test_single_day_range():
    """Test a range of one day yields exactly that day."""
    day = date(2022, 2, 1)
    assert list(generate_range(day, day)) == [(day, "Tue")]


def test_week_range():
    """Test a week spanning a month boundary."""
    days = list(generate_range(date(2023, 1, 29), date(2023, 2, 4)))
    assert len(days) == 7
    assert days[0] == (date(2023, 1, 29), "Sun")
    assert days[-1] == (date(2023, 2, 4), "Sat")
    lines = list(generate_range(date(2023, 1, 29), date(2023, 2, 4)).lines())
    assert lines[0] == '2023-01-29.Sun = ""'
    assert lines[-1] == '2023-02-04.Sat = ""'


def test_range_is_restartable():
    """Test iterating twice gives the same sequence."""
    days = generate_range(date(2024, 2, 27), date(2024, 3, 2))
    assert list(days) == list(days)
    assert len(days) == 5
    assert date(2024, 2, 29) in [day for day, _ in days]


def test_reversed_range_fails():
    """Test end before start raises on the call."""
    with pytest.raises(InvalidRangeError):
        generate_range(date(2023, 2, 4), date(2023, 1, 29))


def test_weekdays_agree_with_layout():
    """Test generator weekday names match layout columns for a whole year."""
    names = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
    generated = dict(generate_range(date(2024, 1, 1), date(2024, 12, 31)))
    for month in range(1, 13):
        for _, column, cell in build_month_grid(2024, month).cells():
            if cell is not None:
                assert generated[cell.date] == names[column]


def test_format_entry():
    """Test entry formatting with and without highlight."""
    assert format_entry(date(2022, 2, 1), "Tue") == '2022-02-01.Tue = ""'
    assert format_entry(date(2022, 2, 1), "Tue", "sick") == '2022-02-01.Tue = "sick"'


def test_generated_lines_load_back():
    """Test generator output pastes into a config the loader accepts."""
    lines = "\n".join(generate_range(date(2022, 12, 30), date(2023, 1, 2)).lines())
    document = parse_calendar(f"[highlights]\n\n[data]\n{lines}\n")
    assert [entry.date for entry in document.entries] == [
        date(2022, 12, 30),
        date(2022, 12, 31),
        date(2023, 1, 1),
        date(2023, 1, 2),
    ]
    assert all(not entry.has_highlight for entry in document.entries)


def test_range_ending_on_last_representable_date():
    """Test a range ending on date.max stops without overflowing."""
    assert list(generate_range(date.max, date.max)) == [(date.max, "Fri")]
    days = list(generate_range(date(9999, 12, 30), date.max))
    assert days == [(date(9999, 12, 30), "Thu"), (date.max, "Fri")]
