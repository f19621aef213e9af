# ruff: noqa: TC003  # Path needed at runtime for Protocol method bodies
"""Remote-relationship analysis.

The ahead/behind/diverged classification is delegated to an upstream
comparator. Two comparators exist:

- ``TextPatternComparator`` reads the ``Your branch ...`` line of the human
  ``git status`` report and matches substrings in it. It reproduces the
  classic output contract and is the default.
- ``StructuredComparator`` asks git for exact ahead/behind counts with
  ``rev-list --left-right --count``.

Both share one rule for repositories without an upstream: ahead, behind and
diverged are all reported.
"""

from pathlib import Path
from typing import Protocol, runtime_checkable

from gitglance.config import ComparatorKind
from gitglance.status._models import RemoteFlags, UpstreamComparison
from gitglance.utils import ScriptResult, run_git

# git exits with 128 on fatal errors such as "must be run in a work tree"
GIT_FATAL_EXIT_CODE = 128

UPSTREAM_MARKER = "Your branch"
AHEAD_PATTERN = "ahead of"
BEHIND_PATTERN = "behind"
DIVERGED_PATTERN = "diverged"
UNTRACKED_PATTERN = "ntrack"
STAGED_PATTERN = "to be committed"

# With no upstream there is nothing to compare against, so every relationship
# flag is raised.
NO_UPSTREAM = UpstreamComparison(ahead=True, behind=True, diverged=True)


@runtime_checkable
class UpstreamComparator(Protocol):
    """Decides how a repository's branch relates to its upstream."""

    def compare(
        self, path: Path | str, status_text: str, *, timeout_ms: int = 0
    ) -> UpstreamComparison:
        """Classify the branch at ``path``.

        Args:
            path: Repository root.
            status_text: Full ``git status`` report already collected for
                ``path``.
            timeout_ms: Timeout for any additional git invocation.

        Returns:
            The ahead/behind/diverged classification.

        Raises:
            GitGlanceError: A comparator may raise, for example a
                GitCommandError from ``run_git(..., check=True)``. The batch
                runner then skips the repository.
        """
        ...


def find_upstream_line(status_text: str) -> str | None:
    """Return the ``Your branch ...`` line of a status report, if any.

    git prints this line only when the current branch has an upstream.
    """
    for line in status_text.splitlines():
        if line.startswith(UPSTREAM_MARKER):
            return line
    return None


class TextPatternComparator:
    """Classify by substring search over the status report."""

    def compare(
        self,
        path: Path | str,  # noqa: ARG002
        status_text: str,
        *,
        timeout_ms: int = 0,  # noqa: ARG002
    ) -> UpstreamComparison:
        line = find_upstream_line(status_text)
        if line is None:
            return NO_UPSTREAM
        return UpstreamComparison(
            ahead=AHEAD_PATTERN in line,
            behind=BEHIND_PATTERN in line,
            diverged=DIVERGED_PATTERN in line,
        )


class StructuredComparator:
    """Classify from exact ahead/behind commit counts."""

    def compare(
        self,
        path: Path | str,
        status_text: str,  # noqa: ARG002
        *,
        timeout_ms: int = 0,
    ) -> UpstreamComparison:
        result = run_git(
            ["rev-list", "--left-right", "--count", "@{upstream}...HEAD"],
            cwd=path,
            timeout_ms=timeout_ms,
            contained=True,
        )
        counts = parse_left_right_counts(result)
        if counts is None:
            return NO_UPSTREAM
        behind, ahead = counts
        return UpstreamComparison(
            ahead=ahead > 0,
            behind=behind > 0,
            diverged=ahead > 0 and behind > 0,
        )


def parse_left_right_counts(result: ScriptResult) -> tuple[int, int] | None:
    """Parse ``rev-list --left-right --count`` output into (left, right)."""
    if not result.ok:
        return None
    parts = result.stdout.split()
    if len(parts) != 2 or not all(p.isdecimal() for p in parts):  # noqa: PLR2004
        return None
    return int(parts[0]), int(parts[1])


def get_comparator(kind: ComparatorKind | str) -> UpstreamComparator:
    """Build the comparator for a configured kind name."""
    if ComparatorKind(kind) is ComparatorKind.STRUCTURED:
        return StructuredComparator()
    return TextPatternComparator()


def _is_bare(path: Path | str, timeout_ms: int) -> bool:
    # Best-effort: a permission problem also makes diff-files exit fatally
    result = run_git(
        ["diff-files", "--quiet"], cwd=path, timeout_ms=timeout_ms, contained=True
    )
    return result.success and result.exit_code == GIT_FATAL_EXIT_CODE


def _has_stash(path: Path | str, timeout_ms: int) -> bool:
    result = run_git(
        ["stash", "list"], cwd=path, timeout_ms=timeout_ms, contained=True
    )
    return result.ok and bool(result.stdout.strip())


def collect_remote_flags(
    path: Path | str,
    comparator: UpstreamComparator | None = None,
    *,
    timeout_ms: int = 0,
) -> RemoteFlags:
    """Compute the remote-relationship flags for the repository at ``path``.

    Only read-only git queries are issued.

    Args:
        path: Repository root (working copy or bare repository).
        comparator: Upstream comparator, defaults to text matching.
        timeout_ms: Timeout per git invocation (0 disables it).

    Returns:
        The flags; all unset when git cannot run in ``path``. When the
        status report of a working copy fails, the upstream flags stay unset.
    """
    rev_parse = run_git(
        ["rev-parse", "--git-dir"], cwd=path, timeout_ms=timeout_ms, contained=True
    )
    if not rev_parse.ok:
        return RemoteFlags()

    if comparator is None:
        comparator = TextPatternComparator()

    bare = _is_bare(path, timeout_ms)
    status = run_git(["status"], cwd=path, timeout_ms=timeout_ms, contained=True)
    status_text = status.stdout if status.ok else ""
    if status.ok or bare:
        upstream = comparator.compare(path, status_text, timeout_ms=timeout_ms)
    else:
        # A working copy whose report failed or timed out has an unknown
        # upstream relationship, not a missing upstream
        upstream = UpstreamComparison()

    return RemoteFlags(
        bare=bare,
        ahead=upstream.ahead,
        behind=upstream.behind,
        diverged=upstream.diverged,
        untracked=UNTRACKED_PATTERN in status_text,
        staged=STAGED_PATTERN in status_text,
        stashed=_has_stash(path, timeout_ms),
    )


def remote_status(
    path: Path | str,
    comparator: UpstreamComparator | None = None,
    *,
    timeout_ms: int = 0,
) -> str:
    """Format the remote flags of ``path`` as a glyph string.

    Returns:
        Glyphs in display order, or an empty string when nothing applies.
    """
    return str(collect_remote_flags(path, comparator, timeout_ms=timeout_ms))
