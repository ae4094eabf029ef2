"""Render the calendar config into a printable PDF.

This is the default command. It runs load → validate → layout → write in
one pass and stops at the first error.
"""

import logging
from pathlib import Path

import typer

from calprint.exceptions import CalendarError, ConfigError
from calprint.ingestion import load_calendar
from calprint.layout import layout
from cli.context import get_context
from cli.display import SummaryRenderer
from cli.setup import setup_writer

logger = logging.getLogger(__name__)


def render_command(
    config_file: Path | None = None,
    output_file: Path | None = None,
    page_layout: str | None = None,
) -> None:
    """Render the calendar config into a PDF document.

    Args:
        config_file: Config path (default: from settings)
        output_file: Output path (default: from settings)
        page_layout: "month" or "year" (default: from settings)
    """
    ctx = get_context()
    settings = ctx.settings
    renderer = SummaryRenderer()

    config_path = config_file or settings.config_file
    output_path = output_file or settings.output_file
    effective_layout = page_layout or settings.layout
    logger.info(f"Using layout: {effective_layout}")

    # ─────────────────────────────────────────────────────────────────────────
    # Load and validate config
    # ─────────────────────────────────────────────────────────────────────────
    try:
        document = load_calendar(config_path)
        grids = layout(document.entries, document.highlights)
    except ConfigError as e:
        logger.error(f"Invalid calendar config: {e}")
        raise typer.Exit(1)

    if not ctx.quiet:
        renderer.render_source_info(config_path, document)
        renderer.render_highlights(document, grids)

    # ─────────────────────────────────────────────────────────────────────────
    # Write document
    # ─────────────────────────────────────────────────────────────────────────
    try:
        writer = setup_writer(effective_layout)
        writer.write(grids, output_path)
    except CalendarError as e:
        logger.error(f"Failed to render calendar: {e}")
        raise typer.Exit(1)

    if not ctx.quiet:
        renderer.render_success("Calendar written", output_path)
