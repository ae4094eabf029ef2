"""Calendar layout engine: place dated entries into month grids."""

import logging
from collections import defaultdict
from datetime import date
from typing import Iterable, Mapping

from calprint.constants import GRID_COLUMNS, GRID_ROWS
from calprint.dates import days_in_month, weekday
from calprint.exceptions import (
    DuplicateDateError,
    UnknownHighlightError,
    WeekdayMismatchError,
)
from calprint.models.entry import DateEntry
from calprint.models.grid import GridCell, MonthGrid, Week
from calprint.models.highlight import HighlightStyle

logger = logging.getLogger(__name__)


def validate_entries(
    entries: Iterable[DateEntry], styles: Mapping[str, HighlightStyle]
) -> list[DateEntry]:
    """
    Check entries against each other and the style table.

    Duplicate dates are looked for first, then each entry is checked in date
    order, so the error raised is the one for the earliest offending date.

    Args:
        entries: Date entries in any order
        styles: Highlight table keyed by name

    Returns:
        Entries sorted by date

    Raises:
        DuplicateDateError: If two entries share a date
        WeekdayMismatchError: If an entry's weekday label is wrong
        UnknownHighlightError: If an entry names a highlight not in styles
    """
    ordered = sorted(entries, key=lambda entry: entry.date)
    for previous, entry in zip(ordered, ordered[1:]):
        if previous.date == entry.date:
            raise DuplicateDateError(
                f"Date {entry.date.isoformat()} appears more than once "
                f"({previous.key} and {entry.key})"
            )

    for entry in ordered:
        if entry.weekday_label != entry.actual_weekday:
            raise WeekdayMismatchError(
                f"{entry.key}: {entry.date.isoformat()} is a "
                f"{entry.actual_weekday}, not a {entry.weekday_label}"
            )
        if entry.has_highlight and entry.highlight not in styles:
            available = ", ".join(sorted(styles)) or "(none)"
            raise UnknownHighlightError(
                f"{entry.key} references highlight '{entry.highlight}' "
                f"which is not defined. Available highlights: {available}"
            )
    return ordered


def build_month_grid(
    year: int, month: int, highlights: Mapping[date, HighlightStyle] | None = None
) -> MonthGrid:
    """
    Lay out one month as a 6x7 grid, Monday in column 0.

    Day 1 sits in its weekday's column of the first row; every position
    before it and after the last day is blank (None). Rows that would be
    entirely blank are still emitted so every grid has the same shape.

    Args:
        year: Calendar year
        month: Month number 1-12
        highlights: Resolved highlight per date; dates absent are plain days

    Returns:
        MonthGrid for the month
    """
    highlights = highlights or {}
    first = date(year, month, 1)
    offset = weekday(first)
    last_day = days_in_month(year, month)

    cells: list[GridCell | None] = [None] * offset
    for day in range(1, last_day + 1):
        current = date(year, month, day)
        cells.append(GridCell(date=current, highlight=highlights.get(current)))
    cells.extend([None] * (GRID_ROWS * GRID_COLUMNS - len(cells)))

    weeks: list[Week] = [
        tuple(cells[row * GRID_COLUMNS : (row + 1) * GRID_COLUMNS])
        for row in range(GRID_ROWS)
    ]
    return MonthGrid(year=year, month=month, weeks=tuple(weeks))


def layout(
    entries: Iterable[DateEntry], styles: Mapping[str, HighlightStyle]
) -> list[MonthGrid]:
    """
    Group entries by month and lay each month out as a grid.

    Args:
        entries: Date entries in any order
        styles: Highlight table keyed by name

    Returns:
        One MonthGrid per (year, month) present in entries, ascending

    Raises:
        ConfigError: If entries fail validation (see validate_entries)
    """
    ordered = validate_entries(entries, styles)

    by_month: dict[tuple[int, int], dict[date, HighlightStyle]] = defaultdict(dict)
    for entry in ordered:
        month_highlights = by_month[(entry.date.year, entry.date.month)]
        if entry.has_highlight:
            month_highlights[entry.date] = styles[entry.highlight]

    grids = [
        build_month_grid(year, month, by_month[(year, month)])
        for year, month in sorted(by_month)
    ]
    logger.info(f"Laid out {len(grids)} month(s) from {len(ordered)} entries")
    return grids
