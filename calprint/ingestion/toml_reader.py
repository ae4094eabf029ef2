"""TOML reader for calendar config files.

Expected layout::

    [highlights]
    sick = { shape = "circle", colour = [255, 0, 0] }
    away = { shape = "rectangle", colour = "skyblue" }

    [data]
    2022-02-01.Tue = "sick"
    2022-02-02.Wed = ""

Bare dotted keys such as ``2022-02-01.Tue`` are parsed by TOML as a nested
table (``{"2022-02-01": {"Tue": "sick"}}``); quoted keys
(``"2022-02-01.Tue" = ""``) arrive flat. Both are accepted.
"""

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from calprint.exceptions import ConfigParseError
from calprint.layout import validate_entries
from calprint.models.document import CalendarDocument
from calprint.models.entry import DateEntry
from calprint.models.highlight import HighlightStyle

logger = logging.getLogger(__name__)


class TOMLReader:
    """Reader for TOML calendar config files."""

    def read(self, path: Path) -> CalendarDocument:
        """Read and validate a calendar config file.

        Raises:
            ConfigError: If the file is missing, malformed or inconsistent
        """
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except FileNotFoundError:
            raise ConfigParseError(f"Config file not found: {path}") from None
        except tomllib.TOMLDecodeError as e:
            raise ConfigParseError(f"Invalid TOML in {path}: {e}") from e
        except OSError as e:
            raise ConfigParseError(f"Failed to read config file {path}: {e}") from e

        logger.info(f"Parsing config: {path}")
        return self.build(data)

    def parse(self, text: str) -> CalendarDocument:
        """Parse and validate calendar config text."""
        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as e:
            raise ConfigParseError(f"Invalid TOML: {e}") from e
        return self.build(data)

    def build(self, data: dict[str, Any]) -> CalendarDocument:
        """Turn decoded TOML into a validated CalendarDocument."""
        highlights = self._extract_highlights(data.get("highlights", {}))

        if "data" not in data:
            raise ConfigParseError("Config has no [data] table")
        entries = self._extract_entries(data["data"])

        ordered = validate_entries(entries, highlights)
        logger.debug(f"Loaded {len(highlights)} highlights and {len(ordered)} entries")
        return CalendarDocument(highlights=highlights, entries=tuple(ordered))

    def _extract_highlights(self, table: Any) -> dict[str, HighlightStyle]:
        if not isinstance(table, dict):
            raise ConfigParseError("[highlights] must be a table")

        highlights: dict[str, HighlightStyle] = {}
        for name, fields in table.items():
            if not isinstance(fields, dict):
                raise ConfigParseError(
                    f"Highlight '{name}' must be a table with shape and colour"
                )
            try:
                highlights[name] = HighlightStyle.model_validate({"name": name, **fields})
            except ValidationError as e:
                raise ConfigParseError(f"Invalid highlight '{name}': {e}") from e
        return highlights

    def _extract_entries(self, table: Any) -> list[DateEntry]:
        if not isinstance(table, dict):
            raise ConfigParseError("[data] must be a table")

        entries: list[DateEntry] = []
        for key, value in table.items():
            if isinstance(value, dict):
                # Bare dotted key: date -> {weekday: highlight}
                for label, highlight in value.items():
                    entries.append(self._entry(f"{key}.{label}", highlight))
            else:
                entries.append(self._entry(key, value))
        return entries

    def _entry(self, key: str, highlight: Any) -> DateEntry:
        if not isinstance(highlight, str):
            raise ConfigParseError(
                f"{key}: value must be a highlight name or \"\", got {highlight!r}"
            )
        return DateEntry.from_key(key, highlight.strip())


def load_calendar(path: Path | str) -> CalendarDocument:
    """Load a calendar config file into a validated CalendarDocument."""
    return TOMLReader().read(Path(path))


def parse_calendar(text: str) -> CalendarDocument:
    """Parse calendar config text into a validated CalendarDocument."""
    return TOMLReader().parse(text)
