"""Shared Rich console instance for summaries and settings output."""

from rich.console import Console

# Automatic highlighting would recolour dates and numbers in summaries
console = Console(highlight=False)
