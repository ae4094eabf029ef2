"""CLI package for the calendar printing tool."""

import logging
import sys

from calprint.config import PrintSettings


def setup_logging(
    verbose: bool = False, quiet: bool = False, settings: PrintSettings | None = None
) -> None:
    """Configure logging with separate formatters for file and console.

    Args:
        verbose: If True, set console to INFO level
        quiet: If True, set console to ERROR level only
        settings: Optional PrintSettings for log directory/filename settings
    """
    if settings is None:
        settings = PrintSettings.from_env()

    # Console formatter: no timestamp, just level and message
    console_formatter = logging.Formatter("%(levelname)s: %(message)s")

    # Console handler - level based on flags
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(console_formatter)

    if quiet:
        console_handler.setLevel(logging.ERROR)
    elif verbose:
        console_handler.setLevel(logging.INFO)
    else:
        # Default: only show warnings and errors
        console_handler.setLevel(logging.WARNING)

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()
    root_logger.addHandler(console_handler)

    if settings.log_dir is not None:
        # File formatter: includes timestamp
        file_formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")

        log_path = settings.log_dir / settings.log_filename
        try:
            settings.log_dir.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path)
        except OSError as e:
            # Keep going with console logging only
            root_logger.warning(f"Cannot write log file {log_path}: {e}")
            return
        file_handler.setFormatter(file_formatter)
        file_handler.setLevel(logging.DEBUG)
        root_logger.addHandler(file_handler)


def main() -> None:
    """Main entry point for the CLI."""
    from cli.parser import app

    app()


__all__ = ["main", "setup_logging"]
