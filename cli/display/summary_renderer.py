"""Summary renderer for render command output."""

from pathlib import Path
from typing import Sequence

from rich.table import Table

from calprint.models.document import CalendarDocument
from calprint.models.grid import MonthGrid
from cli.display.console import console
from cli.display.formatters import format_date_range, format_file_size, format_path


class SummaryRenderer:
    """Render summaries of a calendar render.

    Used by the default command to display:
    - Source config information
    - Months rendered and highlighted day counts
    - Success messages
    """

    def render_source_info(self, config_path: Path, document: CalendarDocument) -> None:
        """Render source config information.

        Args:
            config_path: Path to the config file.
            document: Loaded calendar document.
        """
        console.print(f"\nSource: {format_path(config_path)}")
        details = [
            f"{len(document.entries)} entries",
            format_date_range(document.date_range),
            f"{len(document.highlights)} highlights",
        ]
        console.print(f"  {' · '.join(details)}")

    def render_highlights(self, document: CalendarDocument, grids: Sequence[MonthGrid]) -> None:
        """Render a table of highlights with their shape, colour and day count.

        Args:
            document: Loaded calendar document.
            grids: Month grids that were rendered.
        """
        console.print(f"\nMonths: {len(grids)}")
        if not document.highlights:
            return

        counts = document.highlight_counts()
        table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
        table.add_column("HIGHLIGHT", style="cyan", no_wrap=True)
        table.add_column("SHAPE")
        table.add_column("COLOUR")
        table.add_column("DAYS", justify="right")
        for name, style in sorted(document.highlights.items()):
            swatch = f"[{style.hex}]■[/] {style.hex}"
            table.add_row(name, style.shape.value, swatch, str(counts.get(name, 0)))
        console.print(table)

    def render_success(self, message: str, path: Path | None = None) -> None:
        """Render a success message with optional file path.

        Args:
            message: Success message to display.
            path: Optional file path to display below the message.
        """
        console.print(f"\n[bold green]✓[/bold green] {message}")
        if path:
            size = ""
            if path.exists():
                size = f" [dim]({format_file_size(path.stat().st_size)})[/dim]"
            console.print(f"  {format_path(path)}{size}")
