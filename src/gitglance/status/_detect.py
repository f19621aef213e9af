"""Working-copy detection."""

import os
from pathlib import Path

from gitglance.utils import GIT_DIR_NAME


def is_accessible_dir(path: Path | str) -> bool:
    """Check that ``path`` is a directory the current user can enter and list."""
    try:
        return Path(path).is_dir() and os.access(path, os.R_OK | os.X_OK)
    except OSError:
        return False


def is_working_copy(path: Path | str) -> bool:
    """Check whether ``path`` is the root of a git working copy.

    Fails closed: a missing or inaccessible path is not a working copy. Bare
    repositories have no ``.git`` subdirectory and are classified as not being
    working copies; the remote analyzer reports them with its ``bare`` flag.

    Args:
        path: Directory to check. The process working directory is not changed.

    Returns:
        True if ``path`` is an accessible directory containing a ``.git``
        subdirectory.
    """
    if not is_accessible_dir(path):
        return False
    try:
        return (Path(path) / GIT_DIR_NAME).is_dir()
    except OSError:
        return False
