"""Common git utility functions.

This module provides the path-scoped git subprocess wrapper used by the status
analyzers, plus dulwich helpers for reading repository metadata without
spawning a process.
"""

from pathlib import Path

from dulwich.errors import NotGitRepository
from dulwich.repo import Repo

from gitglance.exceptions import GitCommandError
from gitglance.utils._exec import ScriptConfig, ScriptResult, run_script

# git output is matched against English text, so the locale is pinned
GIT_ENV: dict[str, str] = {"LC_ALL": "C", "LANG": "C", "GIT_TERMINAL_PROMPT": "0"}

GIT_DIR_NAME = ".git"


def run_git(
    args: list[str] | tuple[str, ...],
    cwd: Path | str,
    *,
    timeout_ms: int = 0,
    check: bool = False,
    contained: bool = False,
) -> ScriptResult:
    """Run a git subcommand with an explicit working directory.

    Args:
        args: git arguments, without the leading ``git``.
        cwd: Directory to run git in. The process working directory is
            never changed.
        timeout_ms: Timeout in milliseconds (0 disables it).
        check: Raise GitCommandError unless git exits with status 0.
        contained: Stop git from discovering a repository in a parent of
            ``cwd``, so only a repository rooted at ``cwd`` is seen.

    Returns:
        ScriptResult with captured output.

    Raises:
        GitCommandError: If check is True and the command did not succeed.
    """
    env = dict(GIT_ENV)
    if contained:
        env["GIT_CEILING_DIRECTORIES"] = str(Path(cwd).absolute().parent)

    result = run_script(
        ScriptConfig(
            args=("git", *args),
            cwd=cwd,
            env=env,
            timeout_ms=timeout_ms,
        )
    )
    if check and not result.ok:
        msg = f"git {' '.join(args)} failed in {cwd}"
        raise GitCommandError(
            msg,
            git_args=tuple(args),
            exit_code=result.exit_code,
            stderr=result.stderr or (result.error or ""),
        )
    return result


def decode_bytes(value: bytes | str) -> str:
    """Decode bytes to str if needed.

    Args:
        value: A bytes or str value.

    Returns:
        The value as a string.
    """
    if isinstance(value, bytes):
        return value.decode()
    return value


def strip_refs_heads(branch: bytes | str | None) -> str | None:
    """Strip refs/heads/ prefix from a branch reference.

    Args:
        branch: Branch reference (bytes or str), possibly with refs/heads/ prefix.

    Returns:
        Branch name without prefix, or None if input is None.
    """
    if branch is None:
        return None
    branch_str = decode_bytes(branch)
    if branch_str.startswith("refs/heads/"):
        return branch_str[11:]
    return branch_str


def open_repo(path: Path | str) -> Repo | None:
    """Open the repository rooted exactly at ``path``.

    Unlike discovery, parent directories are not searched, so a plain
    directory nested inside some other checkout is not mistaken for it.

    Args:
        path: Repository root (working copy or bare repository).

    Returns:
        Repo instance if ``path`` is a repository, None otherwise.
    """
    try:
        return Repo(str(path))
    except (NotGitRepository, OSError):
        return None


def get_current_branch(path: Path | str) -> str:
    """Get the checked-out branch name of the repository at ``path``.

    Args:
        path: Repository root.

    Returns:
        Branch name without refs/heads/ prefix, or an empty string if HEAD is
        detached or the repository cannot be read.
    """
    repo = open_repo(path)
    if repo is None:
        return ""

    try:
        head_ref = repo.refs.get_symrefs().get(b"HEAD")
    except (KeyError, OSError, ValueError):
        return ""
    finally:
        repo.close()

    if head_ref is None:
        return ""
    head_ref_str = decode_bytes(head_ref)
    if not head_ref_str.startswith("refs/heads/"):
        return ""
    return strip_refs_heads(head_ref_str) or ""
