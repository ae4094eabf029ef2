"""Display settings and where each value came from."""

import os
from pathlib import Path

from rich.table import Table

from calprint.config import PrintSettings
from cli.display import console


def _find_env_file() -> Path | None:
    """Find .env file by searching current directory and parent directories."""
    current = Path.cwd()

    for path in [current] + list(current.parents):
        env_file = path / ".env"
        if env_file.exists():
            return env_file.resolve()

    return None


def _get_source(env_key: str, value, default_value) -> str:
    """Determine the source of a settings value."""
    if env_key in os.environ or value != default_value:
        return "env"
    return "default"


def _create_table(setting_width: int, source_width: int) -> Table:
    """Create a styled table for settings sections with fixed column widths."""
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("SETTING", style="cyan", min_width=setting_width, no_wrap=True)
    table.add_column("SOURCE", style="dim", min_width=source_width, no_wrap=True)
    table.add_column("VALUE")
    return table


def config_command() -> None:
    """Display settings and their sources."""
    env_file = _find_env_file()

    default_settings = PrintSettings()
    settings = PrintSettings.from_env()

    log_dir_display = str(settings.log_dir.resolve()) if settings.log_dir else "[dim]None[/dim]"

    sections: list[tuple[str, list[tuple[str, str, str]]]] = [
        (
            "Files",
            [
                (
                    "config_file",
                    str(settings.config_file),
                    _get_source(
                        "CALPRINT_CONFIG_FILE",
                        settings.config_file,
                        default_settings.config_file,
                    ),
                ),
                (
                    "output_file",
                    str(settings.output_file),
                    _get_source(
                        "CALPRINT_OUTPUT_FILE",
                        settings.output_file,
                        default_settings.output_file,
                    ),
                ),
            ],
        ),
        (
            "Rendering",
            [
                (
                    "layout",
                    settings.layout,
                    _get_source("CALPRINT_LAYOUT", settings.layout, default_settings.layout),
                ),
            ],
        ),
        (
            "Logging",
            [
                (
                    "log_dir",
                    log_dir_display,
                    _get_source("CALPRINT_LOG_DIR", settings.log_dir, default_settings.log_dir),
                ),
                (
                    "log_filename",
                    settings.log_filename,
                    _get_source(
                        "CALPRINT_LOG_FILENAME",
                        settings.log_filename,
                        default_settings.log_filename,
                    ),
                ),
            ],
        ),
    ]

    all_rows = [row for _, rows in sections for row in rows]
    setting_width = max(len("SETTING"), *(len(row[0]) for row in all_rows))
    source_width = max(len("SOURCE"), *(len(row[2]) for row in all_rows))

    console.print()
    console.print("━" * 50)
    console.print("[bold]  Settings[/bold]")
    console.print("━" * 50)

    console.print("\n[bold]Env File:[/bold]")
    if env_file:
        console.print(f"  [cyan]{env_file}[/cyan]")
    else:
        console.print("  [dim]Not found (using defaults and environment variables)[/dim]")

    for section_name, rows in sections:
        console.print(f"\n[bold]{section_name}:[/bold]")
        table = _create_table(setting_width, source_width)
        for setting, value, source in rows:
            table.add_row(setting, source, value)
        console.print(table)

    console.print()
