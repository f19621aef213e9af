"""Uncommitted local change statistics."""

from pathlib import Path

from gitglance.status._models import LocalChangeStats
from gitglance.status._detect import is_working_copy
from gitglance.utils import run_git


def parse_numstat(text: str) -> LocalChangeStats:
    """Sum the added and removed columns of ``git diff --numstat`` output.

    Binary files are reported by git as ``-\\t-\\t<path>`` and count as zero.

    Args:
        text: Raw numstat output.

    Returns:
        Totals over every line of the output.
    """
    added = 0
    removed = 0
    for line in text.splitlines():
        parts = line.split("\t", 2)
        if len(parts) < 3:  # noqa: PLR2004
            continue
        if parts[0].isdecimal():
            added += int(parts[0])
        if parts[1].isdecimal():
            removed += int(parts[1])
    return LocalChangeStats(added=added, removed=removed)


def collect_local_changes(
    path: Path | str, *, timeout_ms: int = 0
) -> LocalChangeStats | None:
    """Compute uncommitted line counts for the working copy at ``path``.

    Returns:
        The totals, or None when ``path`` is not a working copy, git fails,
        or there are no changed lines.
    """
    if not is_working_copy(path):
        return None

    result = run_git(
        ["diff", "--numstat"], cwd=path, timeout_ms=timeout_ms, contained=True
    )
    if not result.ok:
        return None

    stats = parse_numstat(result.stdout)
    if stats.is_empty:
        return None
    return stats


def local_status(path: Path | str, *, timeout_ms: int = 0) -> str | None:
    """Format the local change summary as ``+<added>-<removed>``.

    Never raises; every failure degrades to None.
    """
    stats = collect_local_changes(path, timeout_ms=timeout_ms)
    return str(stats) if stats is not None else None
