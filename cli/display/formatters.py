"""Pure formatting functions for display output."""

from datetime import date
from pathlib import Path


def format_file_size(size_bytes: int) -> str:
    """Format file size in human-readable format.

    Args:
        size_bytes: File size in bytes.

    Returns:
        Formatted size string (e.g., "1.5KB", "2.3MB").
    """
    size = float(size_bytes)
    for unit in ["B", "KB", "MB", "GB"]:
        if size < 1024.0:
            return f"{size:.1f}{unit}"
        size /= 1024.0
    return f"{size:.1f}TB"


def format_date_range(date_range: tuple[date, date] | None) -> str:
    """Format a (first, last) date pair, or "no entries" when None."""
    if date_range is None:
        return "no entries"
    first, last = date_range
    if first == last:
        return first.isoformat()
    return f"{first.isoformat()} to {last.isoformat()}"


def format_path(path: Path) -> str:
    """Format path relative to the working directory when possible."""
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)
