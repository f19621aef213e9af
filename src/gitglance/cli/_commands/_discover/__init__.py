# pyright: reportUnusedCallResult=false, reportUnusedFunction=false
# ruff: noqa: TC003  # Path needed at runtime for cyclopts parameter parsing
"""Discovery commands."""

from pathlib import Path
from typing import Annotated

from cyclopts import Parameter

from gitglance.cli._commands._context import CLIContext
from gitglance.cli._commands._shared import (
    ExitCode,
    exit_with_error,
    get_console,
    get_error_console,
)
from gitglance.config import (
    ConfigError,
    get_user_config_path,
    render_repos_config,
    write_repos_config,
)
from gitglance.discovery import diff_discovery, discover, merge_discovered
from gitglance.utils import abbreviate_home, expand_repo_path

from ._app import app

__all__ = ["app"]

NoCrossFilesystems = Annotated[
    bool,
    Parameter(
        name="--no-cross-filesystems",
        negative="",
        help="Do not descend into other filesystems",
    ),
]


def _scan(
    root: str | None, *, no_cross_filesystems: bool
) -> tuple[Path, list[Path]]:
    ctx = CLIContext.get_current()
    settings = ctx.config.discovery
    top = expand_repo_path(root if root is not None else settings.root)
    if not top.is_dir():
        exit_with_error(
            f"{abbreviate_home(top)}: not a valid directory",
            ExitCode.NOT_FOUND,
            console=get_error_console(no_color=ctx.no_color),
        )
    found = discover(
        top,
        cross_filesystems=settings.cross_filesystems and not no_cross_filesystems,
        exclude=settings.exclude,
        logger=ctx.logger,
    )
    return top, found


@app.command(name="list")
def _list(
    root: str | None = None,
    *,
    no_cross_filesystems: NoCrossFilesystems = False,
) -> None:
    """List working copies under ROOT.

    Args:
        root: Directory to scan (defaults to discovery.root).
        no_cross_filesystems: Do not descend into other filesystems.
    """
    ctx = CLIContext.get_current()
    console = get_console(no_color=ctx.no_color)
    _, found = _scan(root, no_cross_filesystems=no_cross_filesystems)
    for path in found:
        console.print(abbreviate_home(path), markup=False)


@app.command(name="diff")
def _diff(
    root: str | None = None,
    *,
    no_cross_filesystems: NoCrossFilesystems = False,
) -> None:
    """Compare working copies under ROOT with the configured repositories.

    New working copies print as ``+ path``, configured repositories that
    were not found print as ``- path``.

    Args:
        root: Directory to scan (defaults to discovery.root).
        no_cross_filesystems: Do not descend into other filesystems.
    """
    ctx = CLIContext.get_current()
    console = get_console(no_color=ctx.no_color)
    top, found = _scan(root, no_cross_filesystems=no_cross_filesystems)

    result = diff_discovery(found, ctx.config.repos, top)
    for path in result.added:
        console.print(f"+ {abbreviate_home(path)}", style="green", markup=False)
    for path in result.missing:
        console.print(f"- {abbreviate_home(path)}", style="red", markup=False)

    if ctx.logger is not None:
        ctx.logger.info(
            "discovery_diff",
            root=str(top),
            added=len(result.added),
            missing=len(result.missing),
        )


@app.command(name="generate")
def _generate(
    root: str | None = None,
    *,
    output: Annotated[
        Path | None,
        Parameter(name=["--output", "-o"], help="Config file to write"),
    ] = None,
    force: Annotated[
        bool, Parameter(negative="", help="Overwrite an existing file")
    ] = False,
    no_cross_filesystems: NoCrossFilesystems = False,
) -> None:
    """Generate the [repos] table from the working copies under ROOT.

    Existing entries keep their tags; new working copies are tagged ``c``.
    Without --output the table is printed. Writing into an existing file
    requires --force and keeps every other section of that file.

    Args:
        root: Directory to scan (defaults to discovery.root).
        output: Config file to write.
        force: Overwrite an existing file.
        no_cross_filesystems: Do not descend into other filesystems.
    """
    ctx = CLIContext.get_current()
    console = get_console(no_color=ctx.no_color)
    error_console = get_error_console(no_color=ctx.no_color)
    top, found = _scan(root, no_cross_filesystems=no_cross_filesystems)

    refs = merge_discovered(found, ctx.config.repos, top)

    if output is None:
        console.print(render_repos_config(refs), markup=False, end="")
        return

    if output.exists() and not force:
        exit_with_error(
            f"{output} already exists, use --force to update it",
            ExitCode.IO_ERROR,
            console=error_console,
        )

    try:
        write_repos_config(output, refs)
    except ConfigError as e:
        exit_with_error(str(e), ExitCode.IO_ERROR, console=error_console)

    if ctx.logger is not None:
        ctx.logger.info("config_generated", path=str(output), repos=len(refs))
    if not ctx.quiet:
        default_path = get_user_config_path()
        hint = "" if output == default_path else f" (default is {default_path})"
        console.print(
            f"Wrote {len(refs)} repositories to {output}{hint}", markup=False
        )
