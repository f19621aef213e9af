"""Per-repository status composition."""

from pathlib import Path
from typing import TYPE_CHECKING

from gitglance.exceptions import InaccessiblePathError
from gitglance.status._local import collect_local_changes
from gitglance.status._models import StatusSignature
from gitglance.status._detect import is_accessible_dir
from gitglance.status._remote import UpstreamComparator, collect_remote_flags
from gitglance.utils import (
    abbreviate_home,
    get_current_branch,
    run_git,
    truncate_output,
)

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger


def refresh_remote(
    path: Path | str,
    *,
    timeout_ms: int = 0,
    logger: "FilteringBoundLogger | None" = None,
) -> bool:
    """Fetch from the default remote, ignoring failures.

    This is the only operation in gitglance that changes repository state.

    Returns:
        True if the fetch succeeded.
    """
    result = run_git(
        ["fetch", "--quiet"], cwd=path, timeout_ms=timeout_ms, contained=True
    )
    if not result.ok and logger is not None:
        logger.warning(
            "fetch_failed",
            path=str(path),
            exit_code=result.exit_code,
            error=result.error or truncate_output(result.stderr.strip()),
        )
    return result.ok


def collect_signature(
    path: Path | str,
    *,
    fetch: bool = False,
    comparator: UpstreamComparator | None = None,
    timeout_ms: int = 0,
    home: Path | None = None,
    logger: "FilteringBoundLogger | None" = None,
) -> StatusSignature:
    """Gather the status signature of the repository at ``path``.

    Args:
        path: Repository path as configured (``~`` is expanded by the caller).
        fetch: Refresh remote-tracking refs before computing status.
        comparator: Upstream comparator passed to the remote analyzer.
        timeout_ms: Timeout per git invocation (0 disables it).
        home: Home directory used to abbreviate the display path.
        logger: Optional structured logger.

    Returns:
        The signature; it may be clean.

    Raises:
        InaccessiblePathError: If ``path`` is not an accessible directory.
    """
    if not is_accessible_dir(path):
        msg = f"{abbreviate_home(path, home)}: not a valid directory"
        raise InaccessiblePathError(msg, path=path)

    if fetch:
        refresh_remote(path, timeout_ms=timeout_ms, logger=logger)

    signature = StatusSignature(
        path=abbreviate_home(path, home),
        branch=get_current_branch(path),
        local=collect_local_changes(path, timeout_ms=timeout_ms),
        remote=collect_remote_flags(path, comparator, timeout_ms=timeout_ms),
    )

    if logger is not None:
        logger.debug(
            "repo_status",
            path=str(path),
            branch=signature.branch,
            status=signature.composite,
        )
    return signature


def compose_status(
    path: Path | str,
    *,
    fetch: bool = False,
    comparator: UpstreamComparator | None = None,
    timeout_ms: int = 0,
    home: Path | None = None,
    logger: "FilteringBoundLogger | None" = None,
) -> str | None:
    """Build the status line for the repository at ``path``.

    Returns:
        ``<display-path>:<branch> <composite>``, or None when the repository
        has neither local nor remote status to report.

    Raises:
        InaccessiblePathError: If ``path`` is not an accessible directory.
    """
    signature = collect_signature(
        path,
        fetch=fetch,
        comparator=comparator,
        timeout_ms=timeout_ms,
        home=home,
        logger=logger,
    )
    if signature.is_clean:
        return None
    return signature.format_line()
