"""Calendar document model: highlight table plus dated entries."""

from collections import Counter
from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict

from calprint.models.entry import DateEntry
from calprint.models.highlight import HighlightStyle


class CalendarDocument(BaseModel):
    """Validated in-memory form of a calendar config file.

    Built by the config loader after all cross-reference checks have passed,
    so every entry's highlight (if any) is present in ``highlights``.
    """

    model_config = ConfigDict(frozen=True)

    highlights: dict[str, HighlightStyle] = {}
    entries: tuple[DateEntry, ...] = ()

    @property
    def date_range(self) -> Optional[tuple[date, date]]:
        """First and last entry dates, or None when there are no entries."""
        if not self.entries:
            return None
        dates = [entry.date for entry in self.entries]
        return min(dates), max(dates)

    def highlight_counts(self) -> dict[str, int]:
        """Number of highlighted days per highlight name."""
        counts = Counter(entry.highlight for entry in self.entries if entry.has_highlight)
        return dict(sorted(counts.items()))
