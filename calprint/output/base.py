"""Base classes for calendar document writers."""

from pathlib import Path
from typing import Protocol, Sequence

from calprint.models.grid import MonthGrid


class DocumentWriter(Protocol):
    """Protocol for document writers."""

    def write(self, grids: Sequence[MonthGrid], path: Path) -> None:
        """Write month grids to file path."""
        ...

    def get_extension(self) -> str:
        """Returns file extension (e.g., 'pdf')."""
        ...
