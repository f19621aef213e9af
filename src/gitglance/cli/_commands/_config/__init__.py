# pyright: reportUnusedCallResult=false, reportUnusedFunction=false
"""Config commands for inspecting gitglance configuration."""

from gitglance.cli._commands._context import CLIContext
from gitglance.cli._commands._shared import get_console
from gitglance.config import get_user_config_path

from ._app import app

__all__ = ["app"]


@app.command(name="show")
def _show() -> None:
    """Print the effective configuration as TOML."""
    ctx = CLIContext.get_current()
    console = get_console(no_color=ctx.no_color)
    console.print(ctx.config.to_toml(), markup=False, end="")


@app.command(name="path")
def _path() -> None:
    """Print the path of the configuration file in use."""
    ctx = CLIContext.get_current()
    console = get_console(no_color=ctx.no_color)
    path = ctx.config_path if ctx.config_path is not None else get_user_config_path()
    console.print(str(path), markup=False)
