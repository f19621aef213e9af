# pyright: reportUnusedCallResult=false
# ruff: noqa: TC003  # Path needed at runtime for cyclopts parameter parsing
"""Status commands: the batch run over the configuration and ad hoc checks."""

from pathlib import Path
from typing import Annotated

from cyclopts import Parameter
from rich.console import Console

from gitglance.config import (
    ComparatorKind,
    Config,
    RepositoryReference,
    config_age_days,
    is_config_stale,
)
from gitglance.status import UpstreamComparator, get_comparator, run_batch

from ._context import CLIContext
from ._shared import ExitCode, exit_with_error, get_console, get_error_console


def _select_comparator(config: Config, *, structured: bool) -> UpstreamComparator:
    if structured:
        return get_comparator(ComparatorKind.STRUCTURED)
    return get_comparator(config.status.comparator)


def _warn_if_stale(config: Config, error_console: Console) -> None:
    path = config.file_path
    if path is None or not is_config_stale(path, config.status.max_age_days):
        return
    age = config_age_days(path) or 0
    error_console.print(
        f"[yellow]Warning:[/yellow] configuration is {age} days old. "
        "Run 'gitglance discover diff' to look for new repositories."
    )


def status(
    *,
    fetch: Annotated[
        bool,
        Parameter(
            name=["--fetch", "-f"],
            negative="",
            help="Fetch from each remote before computing status",
        ),
    ] = False,
    structured: Annotated[
        bool,
        Parameter(
            negative="",
            help="Compare with the upstream using exact commit counts",
        ),
    ] = False,
) -> None:
    """Show the status of every configured repository.

    Args:
        fetch: Fetch from each remote before computing status.
        structured: Compare with the upstream using exact commit counts.
    """
    ctx = CLIContext.get_current()
    config = ctx.config
    console = get_console(no_color=ctx.no_color)
    error_console = get_error_console(no_color=ctx.no_color)

    if not config.repos:
        exit_with_error(
            "No repositories configured. "
            "Run 'gitglance discover generate --output <config>' to create the list.",
            ExitCode.NOT_FOUND,
            console=error_console,
        )

    if not ctx.quiet:
        _warn_if_stale(config, error_console)

    run_batch(
        config.repos,
        fetch=fetch or config.status.fetch,
        comparator=_select_comparator(config, structured=structured),
        timeout_ms=config.status.timeout_ms,
        console=console,
        error_console=error_console,
        logger=ctx.logger,
        quiet=ctx.quiet,
    )


def check(
    *paths: Path,
    fetch: Annotated[
        bool,
        Parameter(
            name=["--fetch", "-f"],
            negative="",
            help="Fetch from each remote before computing status",
        ),
    ] = False,
    structured: Annotated[
        bool,
        Parameter(
            negative="",
            help="Compare with the upstream using exact commit counts",
        ),
    ] = False,
) -> None:
    """Show the status of the given directories, ignoring the configuration.

    Clean repositories print nothing. Exits with NOT_FOUND if any path is not
    an accessible directory.

    Args:
        paths: Directories to check.
        fetch: Fetch from each remote before computing status.
        structured: Compare with the upstream using exact commit counts.
    """
    ctx = CLIContext.get_current()
    error_console = get_error_console(no_color=ctx.no_color)

    if not paths:
        exit_with_error("No paths given", ExitCode.NOT_FOUND, console=error_console)

    refs = [RepositoryReference.parse(str(path)) for path in paths]
    report = run_batch(
        refs,
        fetch=fetch,
        comparator=_select_comparator(ctx.config, structured=structured),
        timeout_ms=ctx.config.status.timeout_ms,
        console=get_console(no_color=ctx.no_color),
        error_console=error_console,
        logger=ctx.logger,
        quiet=True,
    )
    if report.skipped:
        raise SystemExit(ExitCode.NOT_FOUND)
