"""Batch status run over the configured repositories."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.text import Text

from gitglance.config import RepositoryReference, RepoTag
from gitglance.exceptions import GitGlanceError, InaccessiblePathError
from gitglance.status._composer import collect_signature
from gitglance.status._credentials import describe_credentials
from gitglance.status._models import RemoteFlag, StatusSignature
from gitglance.utils import expand_repo_path

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

    from gitglance.status._remote import UpstreamComparator


@dataclass(slots=True)
class BatchReport:
    """Outcome of a batch run.

    Attributes:
        lines: Status lines printed, in configuration order.
        checked: Number of repositories tagged for checking.
        skipped: Paths that could not be checked.
    """

    lines: list[str] = field(default_factory=list)
    checked: int = 0
    skipped: list[str] = field(default_factory=list)


def select_checked(refs: Iterable[RepositoryReference]) -> list[RepositoryReference]:
    """Keep the references tagged for checking, preserving order."""
    return [ref for ref in refs if ref.tag is RepoTag.CHECK]


def render_legend() -> Text:
    """Build the glyph legend line."""
    legend = Text("l:", style="bold")
    legend.append("+added-removed", style="yellow")
    legend.append("  r:", style="bold")
    for flag in RemoteFlag:
        legend.append(f" {flag.glyph}", style="red")
        legend.append(f" {flag.description}", style="dim")
    return legend


def render_signature(signature: StatusSignature) -> Text:
    """Build the colorized status line for a signature."""
    line = Text(signature.path, style="bold cyan")
    line.append(":")
    line.append(signature.branch, style="magenta")
    if signature.local_segment:
        line.append(" ")
        line.append(signature.local_segment, style="yellow")
    if signature.remote_segment:
        line.append(" ")
        line.append(signature.remote_segment, style="red")
    return line


def run_batch(
    refs: Iterable[RepositoryReference],
    *,
    fetch: bool = False,
    comparator: "UpstreamComparator | None" = None,
    timeout_ms: int = 0,
    console: Console | None = None,
    error_console: Console | None = None,
    logger: "FilteringBoundLogger | None" = None,
    quiet: bool = False,
    home: Path | None = None,
    credentials: Callable[[], str] = describe_credentials,
) -> BatchReport:
    """Check every repository tagged for checking, one at a time.

    Repositories tagged ``ignore`` are dropped before any probing. A failure
    in one repository never stops the batch: an inaccessible path prints a
    diagnostic on the error console, and a GitGlanceError raised by the
    comparator (such as GitCommandError from a checked git call) is logged
    and the repository skipped.

    Args:
        refs: Configured repositories in configuration order.
        fetch: Fetch from the remote before computing each status.
        comparator: Upstream comparator for the remote analyzer.
        timeout_ms: Timeout per git invocation (0 disables it).
        console: Console for the report, defaults to stdout.
        error_console: Console for diagnostics, defaults to stderr.
        logger: Optional structured logger.
        quiet: Omit the header, legend, and divider.
        home: Home directory used to abbreviate display paths.
        credentials: Callable producing the credential header line.

    Returns:
        The report of printed lines and skipped paths.
    """
    if console is None:
        console = Console()
    if error_console is None:
        error_console = Console(stderr=True)

    checked = select_checked(refs)
    report = BatchReport(checked=len(checked))

    if not quiet:
        console.print(credentials(), style="dim", highlight=False)
        console.print(render_legend(), highlight=False)
        noun = "repository" if len(checked) == 1 else "repositories"
        console.print(f"Checking {len(checked)} {noun}", style="bold")

    for ref in checked:
        path = expand_repo_path(ref.path)
        try:
            signature = collect_signature(
                path,
                fetch=fetch,
                comparator=comparator,
                timeout_ms=timeout_ms,
                home=home,
                logger=logger,
            )
        except InaccessiblePathError as e:
            error_console.print(
                str(e), style="red", markup=False, highlight=False, soft_wrap=True
            )
            report.skipped.append(ref.path)
            if logger is not None:
                logger.info("repo_skipped", path=ref.path, reason="inaccessible")
            continue
        except GitGlanceError as e:
            report.skipped.append(ref.path)
            if logger is not None:
                logger.warning("repo_skipped", path=ref.path, reason=str(e))
            continue

        if signature.is_clean:
            continue
        report.lines.append(signature.format_line())
        console.print(render_signature(signature), highlight=False, soft_wrap=True)

    if not quiet:
        console.rule(style="dim")

    if logger is not None:
        logger.info(
            "batch_complete",
            checked=report.checked,
            reported=len(report.lines),
            skipped=len(report.skipped),
            fetch=fetch,
        )
    return report


def run_all(
    refs: Iterable[RepositoryReference],
    *,
    fetch: bool = False,
    **kwargs: object,
) -> list[str]:
    """Run the batch and return the printed status lines.

    Accepts the same keyword arguments as ``run_batch``.
    """
    report = run_batch(
        refs, fetch=fetch, **kwargs  # pyright: ignore[reportArgumentType]
    )
    return report.lines
