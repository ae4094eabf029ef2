"""CLI argument parsing and command routing."""

import logging
from pathlib import Path

import typer
from typing_extensions import Annotated

from cli import setup_logging
from cli.commands import config_command, generate_days_command, render_command
from cli.context import CLIContext, set_context
from cli.setup import PageLayout

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Render a printable, highlighted PDF calendar from a TOML config.",
    add_completion=False,
)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    config_file: Annotated[
        Path | None,
        typer.Option(
            "--config", "-c", help="Calendar config file (default: calendar.toml)"
        ),
    ] = None,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output PDF file (default: calendar.pdf)"),
    ] = None,
    page_layout: Annotated[
        PageLayout | None,
        typer.Option("--layout", "-l", help="One page per month or per year"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show progress information"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Only show errors"),
    ] = False,
) -> None:
    """Render the calendar config to a PDF when no command is given."""
    cli_ctx = CLIContext(verbose=verbose, quiet=quiet)
    set_context(cli_ctx)
    setup_logging(verbose=verbose, quiet=quiet, settings=cli_ctx.settings)

    if ctx.invoked_subcommand is None:
        render_command(
            config_file=config_file,
            output_file=output_file,
            page_layout=page_layout.value if page_layout else None,
        )


app.command("generate-days-from")(generate_days_command)
app.command("config")(config_command)
