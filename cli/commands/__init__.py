"""CLI commands package."""

from cli.commands.config import config_command
from cli.commands.generate_days import generate_days_command
from cli.commands.render import render_command

__all__ = [
    "config_command",
    "generate_days_command",
    "render_command",
]
