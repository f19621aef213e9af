"""Git utilities for gitglance.

This package provides the path-scoped git subprocess wrapper and dulwich
helpers shared by the status analyzers.
"""

from gitglance.utils._git._common import (
    GIT_DIR_NAME,
    GIT_ENV,
    decode_bytes,
    get_current_branch,
    open_repo,
    run_git,
    strip_refs_heads,
)

__all__ = [
    "GIT_DIR_NAME",
    "GIT_ENV",
    "decode_bytes",
    "get_current_branch",
    "open_repo",
    "run_git",
    "strip_refs_heads",
]
