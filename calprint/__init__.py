"""Render printable highlighted calendars from TOML config files."""

from calprint.ingestion import load_calendar, parse_calendar
from calprint.layout import build_month_grid, layout, validate_entries
from calprint.range_generator import format_entry, generate_range

__version__ = "0.1.0"

__all__ = [
    "build_month_grid",
    "format_entry",
    "generate_range",
    "layout",
    "load_calendar",
    "parse_calendar",
    "validate_entries",
]
