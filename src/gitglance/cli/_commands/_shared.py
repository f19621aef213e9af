"""Shared CLI utilities for commands.

- Standardized exit codes
- Console construction for report and error output
"""

from enum import IntEnum
from typing import Never

from rich.console import Console

__all__ = [
    "ExitCode",
    "exit_with_error",
    "get_console",
    "get_error_console",
]


class ExitCode(IntEnum):
    """Standard exit codes for gitglance CLI commands."""

    SUCCESS = 0
    LOAD_ERROR = 1
    VALIDATION_ERROR = 2
    NOT_FOUND = 3
    IO_ERROR = 4
    INTERNAL_ERROR = 5


def get_console(*, no_color: bool = False) -> Console:
    """Get a Rich console for report output on stdout.

    Lines are never wrapped so paths stay intact in narrow terminals.
    """
    return Console(no_color=no_color, soft_wrap=True, highlight=False)


def get_error_console(*, no_color: bool = False) -> Console:
    """Get a Rich console configured for error output to stderr."""
    return Console(stderr=True, no_color=no_color, soft_wrap=True, highlight=False)


def exit_with_error(
    message: str,
    code: ExitCode = ExitCode.INTERNAL_ERROR,
    *,
    console: Console | None = None,
) -> Never:
    """Print an error message and exit with the specified code.

    Args:
        message: The error message to display.
        code: The exit code to use (defaults to INTERNAL_ERROR).
        console: Optional Rich console for output, defaults to stderr.

    Raises:
        SystemExit: Always raised with the specified exit code.
    """
    if console is None:
        console = get_error_console()

    console.print("[red]Error:[/red] ", end="")
    console.print(message, markup=False)
    raise SystemExit(code)
