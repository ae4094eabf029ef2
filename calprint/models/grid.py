"""Month grid models produced by the layout engine."""

import calendar
from dataclasses import dataclass
from datetime import date
from typing import Iterator, Optional

from calprint.models.highlight import HighlightStyle


@dataclass(frozen=True)
class GridCell:
    """A numbered day in a month grid."""

    date: date
    highlight: Optional[HighlightStyle] = None

    @property
    def day(self) -> int:
        return self.date.day


# A row of the grid; None marks a blank (out-of-month) position
Week = tuple[Optional[GridCell], ...]


@dataclass(frozen=True)
class MonthGrid:
    """Rows x weekday-columns arrangement of one month, Monday first."""

    year: int
    month: int
    weeks: tuple[Week, ...]

    @property
    def title(self) -> str:
        """Display title, e.g. "February 2022"."""
        return f"{calendar.month_name[self.month]} {self.year}"

    @property
    def month_name(self) -> str:
        return calendar.month_name[self.month]

    def cells(self) -> Iterator[tuple[int, int, Optional[GridCell]]]:
        """Iterate (row, column, cell) in row-major order, blanks included."""
        for row, week in enumerate(self.weeks):
            for column, cell in enumerate(week):
                yield row, column, cell

    def days(self) -> list[GridCell]:
        """Non-blank cells in row-major order."""
        return [cell for _, _, cell in self.cells() if cell is not None]

    def highlighted_days(self) -> list[GridCell]:
        return [cell for cell in self.days() if cell.highlight is not None]
