"""CLI utility modules."""

from dictlookup.cli.utils.console import console, error_console

__all__ = ["console", "error_console"]
