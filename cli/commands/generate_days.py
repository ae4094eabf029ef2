"""Print a run of config entries for copy-paste into a calendar file."""

import logging

import typer
from typing_extensions import Annotated

from calprint.dates import parse_date
from calprint.exceptions import CalendarError
from calprint.range_generator import generate_range

logger = logging.getLogger(__name__)


def generate_days_command(
    start: Annotated[
        str,
        typer.Argument(help="First date (YYYY-MM-DD)"),
    ],
    end: Annotated[
        str,
        typer.Argument(help="Last date, inclusive (YYYY-MM-DD)"),
    ],
) -> None:
    """Print every date from START to END as a config entry line."""
    try:
        days = generate_range(parse_date(start), parse_date(end))
    except CalendarError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    for line in days.lines():
        typer.echo(line)
