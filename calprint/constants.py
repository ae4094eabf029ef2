"""Shared constants for calendar printing."""

# Default input config, looked up in the working directory
CONFIG_FILENAME = "calendar.toml"

# Default output document
OUTPUT_FILENAME = "calendar.pdf"

# Page layouts understood by the renderer
LAYOUT_MONTH = "month"
LAYOUT_YEAR = "year"
LAYOUTS = (LAYOUT_MONTH, LAYOUT_YEAR)

# Column order of the month grid (Monday first)
WEEKDAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

GRID_ROWS = 6
GRID_COLUMNS = 7
