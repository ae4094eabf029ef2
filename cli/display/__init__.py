"""Display module for rendering CLI output.

This module provides:
- console: Shared Rich console instance
- SummaryRenderer: Render command summaries
- Formatting functions for dates, paths and file sizes
"""

from cli.display.console import console
from cli.display.formatters import format_date_range, format_file_size, format_path
from cli.display.summary_renderer import SummaryRenderer

__all__ = [
    # Console
    "console",
    # Renderers
    "SummaryRenderer",
    # Formatters
    "format_date_range",
    "format_file_size",
    "format_path",
]
