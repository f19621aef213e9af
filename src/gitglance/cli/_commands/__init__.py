"""gitglance CLI commands."""

from typing import TYPE_CHECKING

from ._config import app as config_app
from ._context import CLIContext
from ._discover import app as discover_app
from ._shared import ExitCode, exit_with_error, get_console, get_error_console
from ._status import check, status

if TYPE_CHECKING:
    from cyclopts import App

__all__ = [
    "CLIContext",
    "ExitCode",
    "check",
    "config_app",
    "discover_app",
    "exit_with_error",
    "get_console",
    "get_error_console",
    "register_commands",
    "status",
]


def register_commands(app: "App") -> None:
    app.default(status)
    app.command(status)
    app.command(check)
    app.command(discover_app)
    app.command(config_app)
