"""Models for calendar printing."""

from calprint.models.document import CalendarDocument
from calprint.models.entry import DateEntry
from calprint.models.grid import GridCell, MonthGrid
from calprint.models.highlight import HighlightStyle, Shape

__all__ = [
    "CalendarDocument",
    "DateEntry",
    "GridCell",
    "HighlightStyle",
    "MonthGrid",
    "Shape",
]
