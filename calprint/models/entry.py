"""Date entry model."""

from datetime import date

from pydantic import BaseModel, ConfigDict

from calprint.dates import parse_date, parse_weekday_name, weekday_name
from calprint.exceptions import MalformedDateError


class DateEntry(BaseModel):
    """A dated line of the calendar config.

    The weekday label is carried redundantly for readability of the config.
    It is checked against the real weekday during validation, never trusted.
    """

    model_config = ConfigDict(frozen=True)

    date: date
    weekday_label: str
    highlight: str = ""

    @classmethod
    def from_key(cls, key: str, highlight: str = "") -> "DateEntry":
        """Build an entry from a ``YYYY-MM-DD.Www`` key.

        Raises:
            MalformedDateError: If the date or weekday part is malformed
        """
        date_part, sep, label = key.partition(".")
        if not sep:
            raise MalformedDateError(
                f"Invalid entry key '{key}'. Use YYYY-MM-DD.Www (e.g. 2022-02-01.Tue)"
            )
        day = parse_date(date_part.strip())
        label = label.strip()
        parse_weekday_name(label)
        return cls(date=day, weekday_label=label, highlight=highlight)

    @property
    def key(self) -> str:
        """Config key of this entry."""
        return f"{self.date.isoformat()}.{self.weekday_label}"

    @property
    def actual_weekday(self) -> str:
        """Weekday label computed from the date."""
        return weekday_name(self.date)

    @property
    def has_highlight(self) -> bool:
        return self.highlight != ""
