"""Shared CLI context with lazy-initialized dependencies."""

from calprint.config import PrintSettings


class CLIContext:
    """Shared context with lazy-initialized dependencies for CLI commands.

    Usage:
        ctx = CLIContext()
        output = ctx.settings.output_file
    """

    def __init__(self, verbose: bool = False, quiet: bool = False):
        """Initialize CLI context.

        Args:
            verbose: If True, enable info logging
            quiet: If True, suppress non-error output
        """
        self.verbose = verbose
        self.quiet = quiet

        self._settings: PrintSettings | None = None

    @property
    def settings(self) -> PrintSettings:
        """Get settings (lazy-loaded)."""
        if self._settings is None:
            self._settings = PrintSettings.from_env()
        return self._settings


# Global context instance (set by Typer callback)
_ctx: CLIContext | None = None


def get_context() -> CLIContext:
    """Get the current CLI context.

    Returns:
        The global CLI context instance

    Raises:
        RuntimeError: If context not initialized
    """
    if _ctx is None:
        raise RuntimeError("CLI context not initialized. This should not happen.")
    return _ctx


def set_context(ctx: CLIContext) -> None:
    """Set the global CLI context.

    Args:
        ctx: The CLI context instance to set
    """
    global _ctx
    _ctx = ctx
