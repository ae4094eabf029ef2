"""Ingestion layer for calendar config files."""

from calprint.ingestion.toml_reader import TOMLReader, load_calendar, parse_calendar

__all__ = [
    "TOMLReader",
    "load_calendar",
    "parse_calendar",
]
