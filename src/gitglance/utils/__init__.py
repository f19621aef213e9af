"""Shared utilities for gitglance."""

from ._exec import (
    DEFAULT_TIMEOUT_MS,
    ScriptConfig,
    ScriptResult,
    run_script,
    truncate_output,
)
from ._git import (
    GIT_DIR_NAME,
    decode_bytes,
    get_current_branch,
    open_repo,
    run_git,
    strip_refs_heads,
)
from ._logging import create_cli_logger
from ._paths import (
    APP_NAME,
    abbreviate_home,
    expand_repo_path,
    get_cli_log_file,
    get_log_dir,
    strip_trailing_separator,
)

__all__ = [
    "APP_NAME",
    "DEFAULT_TIMEOUT_MS",
    "GIT_DIR_NAME",
    "ScriptConfig",
    "ScriptResult",
    "abbreviate_home",
    "create_cli_logger",
    "decode_bytes",
    "expand_repo_path",
    "get_cli_log_file",
    "get_current_branch",
    "get_log_dir",
    "open_repo",
    "run_git",
    "run_script",
    "strip_refs_heads",
    "strip_trailing_separator",
    "truncate_output",
]
